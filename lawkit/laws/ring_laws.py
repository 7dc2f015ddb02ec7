"""
Ring and field law builders.

Every ring-like level is a RingProperties with two bases, ``additive`` and
``multiplicative``, plus its level-specific axioms and the previous levels
as parents:

    semiring -> {rng, rig} -> ring -> commutative ring
             -> {boolean ring, euclidean ring} -> field

Everything below fields only needs multiplication to be a monoid, so
inverses are never checked there. A field's multiplication is a commutative
group on the nonzero elements only, so the field level re-renders its
multiplicative base from a generator restricted to the predicate (labelled
``base-nonzero``), reusing the same axiom builders. Properties such as
``0 * x == 0`` are not checked separately because they follow from the
remaining field and group axioms.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterable, List, Optional, Sequence

from hypothesis import assume
from hypothesis import strategies as st

from lawkit.algebra.group import OperationView
from lawkit.algebra.ring import multiplicative

from . import rules
from .group_laws import GroupLaws, GroupProperties, NamedProp, memoized
from .predicate import Predicate
from .prop import for_all
from .ruleset import RuleSet
from .support import TypeSupport

# Range of the machine integers fed to from_int
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

BaseFn = Callable[[GroupLaws], GroupProperties]


class MultiplicativeProperties(RuleSet):
    """
    Multiplicative structure level.

    ``base_fn`` produces the group-theoretic rule set of ``*`` from a
    GroupLaws, so the same level can be rendered over a restricted generator.
    """

    def __init__(
        self,
        base_fn: BaseFn,
        laws: GroupLaws,
        parent: Optional["MultiplicativeProperties"],
        props: Iterable[NamedProp] = (),
    ):
        self.base_fn = base_fn
        self.parent = parent
        self.base = base_fn(laws)
        super().__init__(
            self.base.name,
            bases=[("base", self.base)],
            parents=[parent] if parent is not None else [],
            props=props,
        )

    def non_zero(self, laws: GroupLaws) -> RuleSet:
        """This level with its base rebuilt by ``laws`` (a restricted generator)."""
        return RuleSet(
            self.name,
            bases=[("base-nonzero", self.base_fn(laws))],
            parents=self.parents,
            props=self.props,
        )


class RingProperties(RuleSet):
    """One level of the ring hierarchy."""

    def __init__(
        self,
        name: str,
        al: RuleSet,
        ml: MultiplicativeProperties,
        parents: Sequence["RingProperties"],
        props: Iterable[NamedProp] = (),
        non_zero_laws: Optional[GroupLaws] = None,
    ):
        self.al = al
        self.ml = ml
        self.non_zero = non_zero_laws is not None
        ml0 = ml if non_zero_laws is None else ml.non_zero(non_zero_laws)
        super().__init__(
            name,
            bases=[("additive", al), ("multiplicative", ml0)],
            parents=parents,
            props=props,
        )

    @classmethod
    def from_parent(
        cls, name: str, parent: "RingProperties", props: Iterable[NamedProp] = ()
    ) -> "RingProperties":
        """A level that adds axioms on top of ``parent`` with the same bases."""
        return cls(name, parent.al, parent.ml, [parent], props)


class RingLaws(GroupLaws):
    """
    Laws for ring-like structures over one concrete type.

    ``support.predicate`` marks the nondegenerate elements (conventionally
    "not zero"); it guards division-like axioms and drives the field's
    nonzero multiplicative group.
    """

    def __init__(self, support: TypeSupport):
        super().__init__(support)
        self.non_zero_laws = GroupLaws(support.restricted())

    @classmethod
    def for_type(
        cls,
        strategy: st.SearchStrategy,
        eq: Callable[[Any, Any], bool] = operator.eq,
        predicate: Optional[Predicate] = None,
    ) -> "RingLaws":
        return cls(
            TypeSupport(
                strategy=strategy,
                eq=eq,
                predicate=predicate if predicate is not None else Predicate.always(),
            )
        )

    def with_predicate(self, predicate: Predicate, replace: bool = True) -> "RingLaws":
        """
        Laws over the same type with a new domain restriction.

        Args:
            predicate: The restriction to apply
            replace: Replace the current predicate (True) or intersect with it
        """
        return type(self)(self.support.with_predicate(predicate, replace_existing=replace))

    # multiplicative structures

    def multiplicative_view(self, A: Any) -> OperationView:
        self.require(A, "times")
        return self._view("multiplicative", A, multiplicative)

    @memoized
    def multiplicative_semigroup(self, A: Any) -> MultiplicativeProperties:
        view = self.multiplicative_view(A)
        props: List[NamedProp] = []
        if hasattr(A, "pow"):
            props.append(rules.repeat1(self.support, "pow", A.pow))
            props.append(rules.repeat2(self.support, "pow", "*", A.pow, A.times))
        return MultiplicativeProperties(
            base_fn=lambda laws: laws.semigroup(view),
            laws=self,
            parent=None,
            props=props,
        )

    @memoized
    def multiplicative_commutative_semigroup(self, A: Any) -> MultiplicativeProperties:
        view = self.multiplicative_view(A)
        return MultiplicativeProperties(
            base_fn=lambda laws: laws.commutative_semigroup(view),
            laws=self,
            parent=self.multiplicative_semigroup(A),
        )

    @memoized
    def multiplicative_monoid(self, A: Any) -> MultiplicativeProperties:
        self.require(A, "one")
        view = self.multiplicative_view(A)
        props: List[NamedProp] = []
        if hasattr(A, "pow"):
            props.append(rules.repeat0(self.support, "pow", "one", A.one, A.pow))
        if hasattr(A, "product"):
            props.append(rules.collect0(self.support, "product", "one", A.one, A.product))
        return MultiplicativeProperties(
            base_fn=lambda laws: laws.monoid(view),
            laws=self,
            parent=self.multiplicative_semigroup(A),
            props=props,
        )

    @memoized
    def multiplicative_commutative_monoid(self, A: Any) -> MultiplicativeProperties:
        view = self.multiplicative_view(A)
        return MultiplicativeProperties(
            base_fn=lambda laws: laws.commutative_monoid(view),
            laws=self,
            parent=self.multiplicative_monoid(A),
        )

    @memoized
    def multiplicative_group(self, A: Any) -> MultiplicativeProperties:
        self.require(A, "reciprocal", "div")
        view = self.multiplicative_view(A)
        eq, pred = self.eq, self.pred

        # pred keeps y away from zero
        def consistent_division(x: Any, y: Any) -> bool:
            assume(pred(y))
            return eq(A.div(x, y), A.times(x, A.reciprocal(y)))

        return MultiplicativeProperties(
            base_fn=lambda laws: laws.group(view),
            laws=self,
            parent=self.multiplicative_monoid(A),
            props=[("consistent division", for_all(consistent_division, default=self.arb))],
        )

    @memoized
    def multiplicative_commutative_group(self, A: Any) -> MultiplicativeProperties:
        view = self.multiplicative_view(A)
        return MultiplicativeProperties(
            base_fn=lambda laws: laws.commutative_group(view),
            laws=self,
            parent=self.multiplicative_group(A),
        )

    # rings

    @memoized
    def semiring(self, A: Any) -> RingProperties:
        return RingProperties(
            "semiring",
            al=self.additive_commutative_monoid(A),
            ml=self.multiplicative_semigroup(A),
            parents=(),
            props=[rules.distributive(self.support, A.plus, A.times)],
        )

    @memoized
    def rng(self, A: Any) -> RingProperties:
        return RingProperties(
            "rng",
            al=self.additive_commutative_group(A),
            ml=self.multiplicative_semigroup(A),
            parents=[self.semiring(A)],
        )

    @memoized
    def rig(self, A: Any) -> RingProperties:
        return RingProperties(
            "rig",
            al=self.additive_commutative_monoid(A),
            ml=self.multiplicative_monoid(A),
            parents=[self.semiring(A)],
        )

    @memoized
    def ring(self, A: Any) -> RingProperties:
        self.require(A, "from_int", "from_big_int", "sum_n")
        eq = self.eq

        def from_int(n: int) -> bool:
            return eq(A.from_int(n), A.sum_n(A.one, n))

        def from_big_int(ns: List[int]) -> bool:
            actual = A.from_big_int(math.prod(ns))
            expected = A.one
            for n in ns:
                expected = A.times(expected, A.from_int(n))
            return eq(actual, expected)

        machine_ints = st.integers(min_value=INT_MIN, max_value=INT_MAX)
        return RingProperties(
            "ring",
            al=self.additive_commutative_group(A),
            ml=self.multiplicative_monoid(A),
            parents=[self.rig(A), self.rng(A)],
            props=[
                ("from_int", for_all(from_int, machine_ints)),
                (
                    "from_big_int",
                    for_all(
                        from_big_int,
                        st.lists(machine_ints, max_size=rules.MAX_FOLD_SIZE),
                    ),
                ),
            ],
        )

    # commutative rings

    @memoized
    def commutative_semiring(self, A: Any) -> RingProperties:
        return RingProperties(
            "commutative semiring",
            al=self.additive_commutative_monoid(A),
            ml=self.multiplicative_commutative_semigroup(A),
            parents=[self.semiring(A)],
        )

    @memoized
    def commutative_rng(self, A: Any) -> RingProperties:
        return RingProperties(
            "commutative rng",
            al=self.additive_commutative_group(A),
            ml=self.multiplicative_commutative_semigroup(A),
            parents=[self.rng(A), self.commutative_semiring(A)],
        )

    @memoized
    def commutative_rig(self, A: Any) -> RingProperties:
        return RingProperties(
            "commutative rig",
            al=self.additive_commutative_monoid(A),
            ml=self.multiplicative_commutative_monoid(A),
            parents=[self.rig(A), self.commutative_semiring(A)],
        )

    @memoized
    def commutative_ring(self, A: Any) -> RingProperties:
        return RingProperties(
            "commutative ring",
            al=self.additive_commutative_group(A),
            ml=self.multiplicative_commutative_monoid(A),
            parents=[self.ring(A), self.commutative_rig(A), self.commutative_rng(A)],
        )

    # boolean rings

    @memoized
    def bool_rng(self, A: Any) -> RingProperties:
        return RingProperties.from_parent(
            "boolean rng",
            self.commutative_rng(A),
            [rules.idempotence(self.support, A.times)],
        )

    @memoized
    def bool_ring(self, A: Any) -> RingProperties:
        return RingProperties.from_parent(
            "boolean ring",
            self.commutative_ring(A),
            [rules.idempotence(self.support, A.times)],
        )

    @memoized
    def euclidean_ring(self, A: Any) -> RingProperties:
        self.require(A, "quot", "mod", "quotmod")
        eq, pred = self.eq, self.pred

        def quotmod(x: Any, y: Any) -> bool:
            assume(pred(y))
            q, r = A.quotmod(x, y)
            return eq(A.plus(A.times(y, q), r), x)

        def quot(x: Any, y: Any) -> bool:
            assume(pred(y))
            return eq(A.quot(x, y), A.quotmod(x, y)[0])

        def mod(x: Any, y: Any) -> bool:
            assume(pred(y))
            return eq(A.mod(x, y), A.quotmod(x, y)[1])

        return RingProperties.from_parent(
            "euclidean ring",
            self.commutative_ring(A),
            [
                ("quotmod", for_all(quotmod, default=self.arb)),
                ("quot", for_all(quot, default=self.arb)),
                ("mod", for_all(mod, default=self.arb)),
            ],
        )

    @memoized
    def field(self, A: Any) -> RingProperties:
        return RingProperties(
            "field",
            al=self.additive_commutative_group(A),
            ml=self.multiplicative_commutative_group(A),
            parents=[self.euclidean_ring(A)],
            non_zero_laws=self.non_zero_laws,
        )

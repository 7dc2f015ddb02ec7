"""
Group-theoretic law builders.

GroupLaws builds the semigroup -> monoid -> group hierarchy (with the
commutative, band and semilattice variants) for one operation, and the
additive family that wraps those laws around a structure's ``+``.

Builders are memoized per laws instance and structure, so a rule set that
is reachable through several parents is one object and is verified once.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple

from lawkit.algebra.group import OperationView
from lawkit.algebra.ring import additive
from lawkit.errors import MissingOperationError

from . import rules
from .prop import Property
from .ruleset import RuleSet
from .support import TypeSupport

NamedProp = Tuple[str, Property]


def structure_key(structure: Any) -> Any:
    if isinstance(structure, OperationView):
        return structure.key
    return id(structure)


def memoized(builder: Callable) -> Callable:
    """Cache a builder's rule set per (laws instance, structure)."""

    @functools.wraps(builder)
    def wrapper(self: "Laws", structure: Any) -> RuleSet:
        key = (builder.__name__, structure_key(structure))
        cached = self._cache.get(key)
        if cached is not None:
            return cached[1]
        rule_set = builder(self, structure)
        # Keep the structure alive so its id() cannot be reused.
        self._cache[key] = (structure, rule_set)
        return rule_set

    return wrapper


class Laws:
    """Base for law builders bound to one TypeSupport."""

    def __init__(self, support: TypeSupport):
        self.support = support
        self._cache: Dict[Tuple[str, Any], Tuple[Any, RuleSet]] = {}

    @property
    def eq(self):
        return self.support.eq

    @property
    def arb(self):
        return self.support.strategy

    @property
    def pred(self):
        return self.support.predicate

    def require(self, structure: Any, *operations: str) -> None:
        """Raise MissingOperationError unless ``structure`` has every operation."""
        for operation in operations:
            if not hasattr(structure, operation):
                raise MissingOperationError(_describe(structure), operation)


def _describe(structure: Any) -> str:
    if isinstance(structure, OperationView):
        return repr(structure)
    return type(structure).__name__


class GroupProperties(RuleSet):
    """Rule set for one level of the single-operation hierarchy."""

    def __init__(self, name: str, parents: Sequence[RuleSet], props: Iterable[NamedProp]):
        super().__init__(name, bases=(), parents=parents, props=props)


class AdditiveProperties(RuleSet):
    """
    Additive structure level: the group laws of ``+`` under ``base`` plus
    the additive-specific derived operations.
    """

    def __init__(
        self,
        base: GroupProperties,
        parents: Sequence["AdditiveProperties"],
        props: Iterable[NamedProp] = (),
    ):
        self.base = base
        super().__init__(base.name, bases=[("base", base)], parents=parents, props=props)


class GroupLaws(Laws):
    """Laws of a single associative operation and its refinements."""

    @memoized
    def semigroup(self, S: Any) -> GroupProperties:
        self.require(S, "combine")
        props: List[NamedProp] = [rules.associativity(self.support, S.combine)]
        if hasattr(S, "combine_n"):
            props.append(rules.repeat1(self.support, "combine_n", S.combine_n))
            symbol = getattr(S, "symbol", "|+|")
            props.append(
                rules.repeat2(self.support, "combine_n", symbol, S.combine_n, S.combine)
            )
        if hasattr(S, "combine_all_option"):
            props.append(
                rules.combine_all_option(
                    self.support, "combine_all_option", S.combine, S.combine_all_option
                )
            )
        return GroupProperties("semigroup", parents=(), props=props)

    @memoized
    def band(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "band",
            parents=[self.semigroup(S)],
            props=[rules.idempotence(self.support, S.combine)],
        )

    @memoized
    def commutative_semigroup(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "commutative semigroup",
            parents=[self.semigroup(S)],
            props=[rules.commutative(self.support, S.combine)],
        )

    @memoized
    def semilattice(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "semilattice",
            parents=[self.band(S), self.commutative_semigroup(S)],
            props=(),
        )

    @memoized
    def monoid(self, S: Any) -> GroupProperties:
        self.require(S, "empty")
        symbol = "id"
        props: List[NamedProp] = [
            rules.left_identity(self.support, S.empty, S.combine),
            rules.right_identity(self.support, S.empty, S.combine),
        ]
        if hasattr(S, "combine_n"):
            props.append(rules.repeat0(self.support, "combine_n", symbol, S.empty, S.combine_n))
        if hasattr(S, "combine_all"):
            props.append(rules.collect0(self.support, "combine_all", symbol, S.empty, S.combine_all))
        if hasattr(S, "is_empty"):
            props.append(rules.is_id(self.support, "is_empty", S.empty, S.is_empty))
        return GroupProperties("monoid", parents=[self.semigroup(S)], props=props)

    @memoized
    def bounded_semilattice(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "bounded semilattice",
            parents=[self.commutative_monoid(S), self.semilattice(S)],
            props=(),
        )

    @memoized
    def commutative_monoid(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "commutative monoid",
            parents=[self.monoid(S), self.commutative_semigroup(S)],
            props=(),
        )

    @memoized
    def group(self, S: Any) -> GroupProperties:
        self.require(S, "empty", "inverse")
        props: List[NamedProp] = [
            rules.left_inverse(self.support, S.empty, S.combine, S.inverse),
            rules.right_inverse(self.support, S.empty, S.combine, S.inverse),
        ]
        if hasattr(S, "remove"):
            props.append(
                rules.consistent_inverse(self.support, "remove", S.remove, S.combine, S.inverse)
            )
        return GroupProperties("group", parents=[self.monoid(S)], props=props)

    @memoized
    def commutative_group(self, S: Any) -> GroupProperties:
        return GroupProperties(
            "commutative group",
            parents=[self.group(S), self.commutative_monoid(S)],
            props=(),
        )

    # additive structures

    def additive_view(self, A: Any) -> OperationView:
        self.require(A, "plus")
        return self._view("additive", A, additive)

    def _view(self, kind: str, A: Any, make: Callable[[Any], OperationView]) -> OperationView:
        key = ("view:" + kind, id(A))
        cached = self._cache.get(key)
        if cached is None:
            cached = (A, make(A))
            self._cache[key] = cached
        return cached[1]

    @memoized
    def additive_semigroup(self, A: Any) -> AdditiveProperties:
        view = self.additive_view(A)
        props: List[NamedProp] = []
        if hasattr(A, "sum_n"):
            props.append(rules.repeat1(self.support, "sum_n", A.sum_n))
            props.append(rules.repeat2(self.support, "sum_n", "+", A.sum_n, A.plus))
        return AdditiveProperties(base=self.semigroup(view), parents=(), props=props)

    @memoized
    def additive_commutative_semigroup(self, A: Any) -> AdditiveProperties:
        return AdditiveProperties(
            base=self.commutative_semigroup(self.additive_view(A)),
            parents=[self.additive_semigroup(A)],
        )

    @memoized
    def additive_monoid(self, A: Any) -> AdditiveProperties:
        self.require(A, "zero")
        props: List[NamedProp] = []
        if hasattr(A, "sum_n"):
            props.append(rules.repeat0(self.support, "sum_n", "zero", A.zero, A.sum_n))
        if hasattr(A, "sum"):
            props.append(rules.collect0(self.support, "sum", "zero", A.zero, A.sum))
        return AdditiveProperties(
            base=self.monoid(self.additive_view(A)),
            parents=[self.additive_semigroup(A)],
            props=props,
        )

    @memoized
    def additive_commutative_monoid(self, A: Any) -> AdditiveProperties:
        return AdditiveProperties(
            base=self.commutative_monoid(self.additive_view(A)),
            parents=[self.additive_monoid(A)],
        )

    @memoized
    def additive_group(self, A: Any) -> AdditiveProperties:
        self.require(A, "negate", "minus")
        return AdditiveProperties(
            base=self.group(self.additive_view(A)),
            parents=[self.additive_monoid(A)],
            props=[
                rules.consistent_inverse(self.support, "subtract", A.minus, A.plus, A.negate)
            ],
        )

    @memoized
    def additive_commutative_group(self, A: Any) -> AdditiveProperties:
        return AdditiveProperties(
            base=self.commutative_group(self.additive_view(A)),
            parents=[self.additive_group(A)],
        )

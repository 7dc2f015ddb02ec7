"""
Heyting and Boolean algebra law builders.

Heyting declares the implication axioms once; Bool only adds excluded middle
and lists Heyting as its parent, reusing the same lattice base.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from . import rules
from .group_laws import NamedProp, memoized
from .lattice_laws import LatticeLaws, LatticeProperties
from .prop import for_all
from .ruleset import RuleSet


class LogicProperties(RuleSet):
    def __init__(
        self,
        name: str,
        parent: Optional["LogicProperties"],
        ll: LatticeProperties,
        props: Iterable[NamedProp] = (),
    ):
        self.parent = parent
        self.ll = ll
        super().__init__(
            name,
            bases=[("lattice", ll)],
            parents=[parent] if parent is not None else [],
            props=props,
        )


class LogicLaws(LatticeLaws):
    """Laws for Heyting and Boolean algebras."""

    @memoized
    def heyting(self, A: Any) -> LogicProperties:
        self.require(A, "and_", "or_", "imp", "complement", "zero", "one")
        eq, neq, arb = self.eq, self.support.neq, self.arb
        zero, one = A.zero, A.one
        imp, and_, or_ = A.imp, A.and_, A.or_

        def axiom(check):
            return for_all(check, default=arb)

        return LogicProperties(
            "heyting",
            parent=None,
            ll=self.bounded_distributive_lattice(A),
            props=[
                rules.distributive(self.support, or_, and_),
                ("consistent", axiom(lambda x: eq(and_(x, A.complement(x)), zero))),
                ("¬x = (x → 0)", axiom(lambda x: eq(A.complement(x), imp(x, zero)))),
                ("x → x = 1", axiom(lambda x: eq(imp(x, x), one))),
                (
                    "if x → y and y → x then x=y",
                    axiom(
                        lambda x, y: neq(imp(x, y), one)
                        or neq(imp(y, x), one)
                        or eq(x, y)
                    ),
                ),
                (
                    "if (1 → x)=1 then x=1",
                    axiom(lambda x: neq(imp(one, x), one) or eq(x, one)),
                ),
                ("x → (y → x) = 1", axiom(lambda x, y: eq(imp(x, imp(y, x)), one))),
                (
                    "(x→(y→z)) → ((x→y)→(x→z)) = 1",
                    axiom(
                        lambda x, y, z: eq(
                            imp(imp(x, imp(y, z)), imp(imp(x, y), imp(x, z))), one
                        )
                    ),
                ),
                ("x∧y → x = 1", axiom(lambda x, y: eq(imp(and_(x, y), x), one))),
                ("x∧y → y = 1", axiom(lambda x, y: eq(imp(and_(x, y), y), one))),
                (
                    "x → y → (x∧y) = 1",
                    axiom(lambda x, y: eq(imp(x, imp(y, and_(x, y))), one)),
                ),
                ("x → x∨y", axiom(lambda x, y: eq(imp(x, or_(x, y)), one))),
                ("y → x∨y", axiom(lambda x, y: eq(imp(y, or_(x, y)), one))),
                (
                    "(x → z) → ((y → z) → ((x | y) → z)) = 1",
                    axiom(
                        lambda x, y, z: eq(
                            imp(imp(x, z), imp(imp(y, z), imp(or_(x, y), z))), one
                        )
                    ),
                ),
                ("(0 → x) = 1", axiom(lambda x: eq(imp(zero, x), one))),
            ],
        )

    @memoized
    def bool(self, A: Any) -> LogicProperties:
        eq = self.eq
        return LogicProperties(
            "bool",
            parent=self.heyting(A),
            ll=self.bounded_distributive_lattice(A),
            props=[
                (
                    "excluded middle",
                    for_all(
                        lambda x: eq(A.or_(x, A.complement(x)), A.one),
                        default=self.arb,
                    ),
                )
            ],
        )

"""
Lattice law builders.

A lattice level has up to two bases, ``meet`` and ``join``, each the
semilattice (or bounded semilattice) laws of that operation.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from lawkit.algebra.group import OperationView
from lawkit.algebra.lattice import join_semilattice, meet_semilattice

from .group_laws import GroupLaws, GroupProperties, NamedProp, memoized
from .prop import for_all
from .ruleset import LabelledBase, RuleSet


class LatticeProperties(RuleSet):
    def __init__(
        self,
        name: str,
        parents: Sequence[RuleSet],
        join: Optional[GroupProperties],
        meet: Optional[GroupProperties],
        props: Iterable[NamedProp] = (),
    ):
        bases: List[LabelledBase] = []
        if meet is not None:
            bases.append(("meet", meet))
        if join is not None:
            bases.append(("join", join))
        super().__init__(name, bases=bases, parents=parents, props=props)


class LatticeLaws(GroupLaws):
    """Laws for join/meet semilattices up to bounded distributive lattices."""

    def join_view(self, A: Any) -> OperationView:
        self.require(A, "join")
        return self._view("join", A, join_semilattice)

    def meet_view(self, A: Any) -> OperationView:
        self.require(A, "meet")
        return self._view("meet", A, meet_semilattice)

    @memoized
    def join_semilattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "join semilattice",
            parents=(),
            join=self.semilattice(self.join_view(A)),
            meet=None,
        )

    @memoized
    def meet_semilattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "meet semilattice",
            parents=(),
            join=None,
            meet=self.semilattice(self.meet_view(A)),
        )

    @memoized
    def lattice(self, A: Any) -> LatticeProperties:
        eq = self.eq

        def absorption(x: Any, y: Any) -> bool:
            return eq(A.join(x, A.meet(x, y)), x) and eq(A.meet(x, A.join(x, y)), x)

        return LatticeProperties(
            "lattice",
            parents=[self.join_semilattice(A), self.meet_semilattice(A)],
            join=self.semilattice(self.join_view(A)),
            meet=self.semilattice(self.meet_view(A)),
            props=[("absorption", for_all(absorption, default=self.arb))],
        )

    @memoized
    def distributive_lattice(self, A: Any) -> LatticeProperties:
        eq = self.eq

        def distributive(x: Any, y: Any, z: Any) -> bool:
            return eq(
                A.join(x, A.meet(y, z)), A.meet(A.join(x, y), A.join(x, z))
            ) and eq(A.meet(x, A.join(y, z)), A.join(A.meet(x, y), A.meet(x, z)))

        return LatticeProperties(
            "distributive lattice",
            parents=[self.lattice(A)],
            join=self.semilattice(self.join_view(A)),
            meet=self.semilattice(self.meet_view(A)),
            props=[("distributive", for_all(distributive, default=self.arb))],
        )

    @memoized
    def bounded_join_semilattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded join semilattice",
            parents=[self.join_semilattice(A)],
            join=self.bounded_semilattice(self.join_view(A)),
            meet=None,
        )

    @memoized
    def bounded_meet_semilattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded meet semilattice",
            parents=[self.meet_semilattice(A)],
            join=None,
            meet=self.bounded_semilattice(self.meet_view(A)),
        )

    @memoized
    def bounded_join_lattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded join lattice",
            parents=[self.bounded_join_semilattice(A), self.lattice(A)],
            join=self.bounded_semilattice(self.join_view(A)),
            meet=self.semilattice(self.meet_view(A)),
        )

    @memoized
    def bounded_meet_lattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded meet lattice",
            parents=[self.bounded_meet_semilattice(A), self.lattice(A)],
            join=self.semilattice(self.join_view(A)),
            meet=self.bounded_semilattice(self.meet_view(A)),
        )

    @memoized
    def bounded_lattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded lattice",
            parents=[
                self.bounded_join_semilattice(A),
                self.bounded_meet_semilattice(A),
                self.lattice(A),
            ],
            join=self.bounded_semilattice(self.join_view(A)),
            meet=self.bounded_semilattice(self.meet_view(A)),
        )

    @memoized
    def bounded_distributive_lattice(self, A: Any) -> LatticeProperties:
        return LatticeProperties(
            "bounded distributive lattice",
            parents=[self.bounded_lattice(A), self.distributive_lattice(A)],
            join=self.bounded_semilattice(self.join_view(A)),
            meet=self.bounded_semilattice(self.meet_view(A)),
        )

"""
Lattices and logics.

    bounded distributive lattice -> Heyting algebra -> Boolean algebra

Heyting algebras name their operations after logic (``and_``, ``or_``,
``imp``, ``complement``); ``meet``/``join`` delegate to them.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable

from .group import OperationView


class JoinSemilattice(ABC):
    @abstractmethod
    def join(self, x: Any, y: Any) -> Any:
        ...


class MeetSemilattice(ABC):
    @abstractmethod
    def meet(self, x: Any, y: Any) -> Any:
        ...


class Lattice(JoinSemilattice, MeetSemilattice):
    pass


class DistributiveLattice(Lattice):
    pass


class BoundedJoinSemilattice(JoinSemilattice):
    @property
    @abstractmethod
    def zero(self) -> Any:
        ...

    def is_zero(self, a: Any, eq: Callable[[Any, Any], bool] = operator.eq) -> bool:
        return eq(a, self.zero)


class BoundedMeetSemilattice(MeetSemilattice):
    @property
    @abstractmethod
    def one(self) -> Any:
        ...

    def is_one(self, a: Any, eq: Callable[[Any, Any], bool] = operator.eq) -> bool:
        return eq(a, self.one)


class BoundedLattice(Lattice, BoundedJoinSemilattice, BoundedMeetSemilattice):
    pass


class BoundedDistributiveLattice(BoundedLattice, DistributiveLattice):
    pass


class Heyting(BoundedDistributiveLattice):
    """Bounded distributive lattice with relative pseudo-complement ``imp``."""

    @abstractmethod
    def and_(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def or_(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def imp(self, x: Any, y: Any) -> Any:
        ...

    def complement(self, x: Any) -> Any:
        return self.imp(x, self.zero)

    def meet(self, x: Any, y: Any) -> Any:
        return self.and_(x, y)

    def join(self, x: Any, y: Any) -> Any:
        return self.or_(x, y)


class Bool(Heyting):
    """Heyting algebra satisfying excluded middle."""

    def imp(self, x: Any, y: Any) -> Any:
        return self.or_(self.complement(x), y)

    @abstractmethod
    def complement(self, x: Any) -> Any:
        ...


def join_semilattice(structure: Any) -> OperationView:
    """``join`` seen as a (bounded) semilattice with ``zero`` as identity."""
    return OperationView(
        structure,
        "join",
        "v",
        combine=structure.join,
        empty=getattr(structure, "zero", None),
        is_empty=getattr(structure, "is_zero", None),
    )


def meet_semilattice(structure: Any) -> OperationView:
    """``meet`` seen as a (bounded) semilattice with ``one`` as identity."""
    return OperationView(
        structure,
        "meet",
        "^",
        combine=structure.meet,
        empty=getattr(structure, "one", None),
        is_empty=getattr(structure, "is_one", None),
    )

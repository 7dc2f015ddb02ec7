"""
Single-operation structures: semigroups, monoids and groups.

Subclasses implement the abstract operations; the derived operations
(``combine_n``, ``combine_all`` ...) have default implementations that a
subclass may override with faster ones. Law builders check the derived
operations against the primitive ones, so an override is verified too.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional


def repeated(combine: Callable[[Any, Any], Any], a: Any, n: int) -> Any:
    """``a`` combined with itself ``n`` times (``n >= 1``), by repeated squaring."""
    if n < 1:
        raise ValueError(f"repeated combination needs n >= 1, got {n}")
    result = None
    base = a
    while True:
        if n & 1:
            result = base if result is None else combine(result, base)
        n >>= 1
        if not n:
            return result
        base = combine(base, base)


class Semigroup(ABC):
    """A set with an associative binary operation."""

    @abstractmethod
    def combine(self, x: Any, y: Any) -> Any:
        ...

    def combine_n(self, a: Any, n: int) -> Any:
        return repeated(self.combine, a, n)

    def combine_all_option(self, values: Iterable[Any]) -> Optional[Any]:
        result = None
        for value in values:
            result = value if result is None else self.combine(result, value)
        return result


class CommutativeSemigroup(Semigroup):
    pass


class Band(Semigroup):
    """Semigroup whose operation is idempotent."""


class Semilattice(Band, CommutativeSemigroup):
    pass


class Monoid(Semigroup):
    """Semigroup with an identity element."""

    @property
    @abstractmethod
    def empty(self) -> Any:
        ...

    def is_empty(self, a: Any, eq: Callable[[Any, Any], bool] = operator.eq) -> bool:
        return eq(a, self.empty)

    def combine_n(self, a: Any, n: int) -> Any:
        if n == 0:
            return self.empty
        return super().combine_n(a, n)

    def combine_all(self, values: Iterable[Any]) -> Any:
        result = self.combine_all_option(values)
        return self.empty if result is None else result


class CommutativeMonoid(Monoid, CommutativeSemigroup):
    pass


class BoundedSemilattice(Semilattice, CommutativeMonoid):
    pass


class Group(Monoid):
    """Monoid in which every element has an inverse."""

    @abstractmethod
    def inverse(self, a: Any) -> Any:
        ...

    def remove(self, x: Any, y: Any) -> Any:
        return self.combine(x, self.inverse(y))

    def combine_n(self, a: Any, n: int) -> Any:
        if n < 0:
            return super().combine_n(self.inverse(a), -n)
        return super().combine_n(a, n)


class CommutativeGroup(Group, CommutativeMonoid):
    pass


class OperationView:
    """
    Group-theoretic view of one operation of a multi-operation structure.

    Ring-like structures expose ``additive(A)`` and ``multiplicative(A)``
    views so the same group laws check ``+`` and ``*``. Only operations the
    structure actually provides are set as attributes; law builders look
    them up and report a missing one as a construction error.
    """

    def __init__(self, structure: Any, kind: str, symbol: str, **operations: Any):
        self.structure = structure
        self.kind = kind
        self.symbol = symbol
        for name, op in operations.items():
            if op is not None:
                setattr(self, name, op)

    @property
    def key(self) -> tuple:
        """Canonical identity of the view: the structure and the operation."""
        return (id(self.structure), self.kind)

    def __repr__(self) -> str:
        return f"{self.kind}({type(self.structure).__name__})"

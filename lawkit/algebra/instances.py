"""
Stock structure instances over built-in Python types.

These are the structures lawkit ships checks for out of the box; they also
serve as worked examples of implementing the abstract descriptors.
"""

from fractions import Fraction
from typing import AbstractSet, Any, FrozenSet, Iterable, Optional, Tuple

from .group import Monoid
from .lattice import Bool
from .ring import BoolRing, EuclideanRing, Field


class IntegerRing(EuclideanRing):
    """Python ``int`` with floor division as the Euclidean quotient."""

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def plus(self, x: int, y: int) -> int:
        return x + y

    def negate(self, x: int) -> int:
        return -x

    def minus(self, x: int, y: int) -> int:
        return x - y

    def times(self, x: int, y: int) -> int:
        return x * y

    def sum_n(self, a: int, n: int) -> int:
        return a * n

    def quot(self, x: int, y: int) -> int:
        return x // y

    def mod(self, x: int, y: int) -> int:
        return x % y

    def quotmod(self, x: int, y: int) -> Tuple[int, int]:
        return divmod(x, y)

    def from_int(self, n: int) -> int:
        return n

    def from_big_int(self, n: int) -> int:
        return n


class RationalField(Field):
    """Exact rationals (``fractions.Fraction``)."""

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def plus(self, x: Fraction, y: Fraction) -> Fraction:
        return x + y

    def negate(self, x: Fraction) -> Fraction:
        return -x

    def times(self, x: Fraction, y: Fraction) -> Fraction:
        return x * y

    def reciprocal(self, x: Fraction) -> Fraction:
        return 1 / x

    def div(self, x: Fraction, y: Fraction) -> Fraction:
        return x / y

    def from_int(self, n: int) -> Fraction:
        return Fraction(n)

    def from_big_int(self, n: int) -> Fraction:
        return Fraction(n)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


class ModularField(Field):
    """
    Integers modulo a prime ``p``, represented by ``0 .. p-1``.

    The reciprocal uses Fermat's little theorem, so ``p`` must be prime.
    """

    def __init__(self, p: int):
        if not _is_prime(p):
            raise ValueError(f"ModularField needs a prime modulus, got {p}")
        self.p = p

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1 % self.p

    def plus(self, x: int, y: int) -> int:
        return (x + y) % self.p

    def negate(self, x: int) -> int:
        return (-x) % self.p

    def times(self, x: int, y: int) -> int:
        return (x * y) % self.p

    def reciprocal(self, x: int) -> int:
        if x % self.p == 0:
            raise ZeroDivisionError(f"0 has no inverse modulo {self.p}")
        return pow(x, self.p - 2, self.p)

    def from_int(self, n: int) -> int:
        return n % self.p

    def from_big_int(self, n: int) -> int:
        return n % self.p

    def __repr__(self) -> str:
        return f"ModularField({self.p})"


class BooleanRing(BoolRing):
    """``bool`` with exclusive or as addition and conjunction as product."""

    @property
    def zero(self) -> bool:
        return False

    @property
    def one(self) -> bool:
        return True

    def plus(self, x: bool, y: bool) -> bool:
        return x != y

    def times(self, x: bool, y: bool) -> bool:
        return x and y

    def from_int(self, n: int) -> bool:
        return n % 2 == 1


class BooleanAlgebra(Bool):
    """``bool`` with the usual connectives."""

    @property
    def zero(self) -> bool:
        return False

    @property
    def one(self) -> bool:
        return True

    def and_(self, x: bool, y: bool) -> bool:
        return x and y

    def or_(self, x: bool, y: bool) -> bool:
        return x or y

    def complement(self, x: bool) -> bool:
        return not x


class SetAlgebra(Bool):
    """Subsets of a finite universe, as frozensets."""

    def __init__(self, universe: Iterable[Any]):
        self.universe: FrozenSet[Any] = frozenset(universe)

    @property
    def zero(self) -> FrozenSet[Any]:
        return frozenset()

    @property
    def one(self) -> FrozenSet[Any]:
        return self.universe

    def and_(self, x: AbstractSet[Any], y: AbstractSet[Any]) -> FrozenSet[Any]:
        return frozenset(x & y)

    def or_(self, x: AbstractSet[Any], y: AbstractSet[Any]) -> FrozenSet[Any]:
        return frozenset(x | y)

    def complement(self, x: AbstractSet[Any]) -> FrozenSet[Any]:
        return self.universe - x

    def __repr__(self) -> str:
        return f"SetAlgebra({sorted(self.universe, key=repr)!r})"


class StringMonoid(Monoid):
    """``str`` under concatenation."""

    @property
    def empty(self) -> str:
        return ""

    def combine(self, x: str, y: str) -> str:
        return x + y

    def combine_all_option(self, values: Iterable[str]) -> Optional[str]:
        values = list(values)
        if not values:
            return None
        return "".join(values)

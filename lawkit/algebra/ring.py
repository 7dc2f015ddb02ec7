"""
Two-operation structures: semirings through fields.

The additive and multiplicative halves are declared separately and then
combined, mirroring the structure lattice:

    semiring -> {rng, rig} -> ring -> commutative ring
             -> {boolean ring, euclidean ring} -> field
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, Tuple

from .group import OperationView, repeated

# additive half


class AdditiveSemigroup(ABC):
    @abstractmethod
    def plus(self, x: Any, y: Any) -> Any:
        ...

    def sum_n(self, a: Any, n: int) -> Any:
        return repeated(self.plus, a, n)

    def try_sum(self, values: Iterable[Any]) -> Optional[Any]:
        result = None
        for value in values:
            result = value if result is None else self.plus(result, value)
        return result


class AdditiveCommutativeSemigroup(AdditiveSemigroup):
    pass


class AdditiveMonoid(AdditiveSemigroup):
    @property
    @abstractmethod
    def zero(self) -> Any:
        ...

    def is_zero(self, a: Any, eq: Callable[[Any, Any], bool] = operator.eq) -> bool:
        return eq(a, self.zero)

    def sum_n(self, a: Any, n: int) -> Any:
        if n == 0:
            return self.zero
        return super().sum_n(a, n)

    def sum(self, values: Iterable[Any]) -> Any:
        result = self.try_sum(values)
        return self.zero if result is None else result


class AdditiveCommutativeMonoid(AdditiveMonoid, AdditiveCommutativeSemigroup):
    pass


class AdditiveGroup(AdditiveMonoid):
    @abstractmethod
    def negate(self, x: Any) -> Any:
        ...

    def minus(self, x: Any, y: Any) -> Any:
        return self.plus(x, self.negate(y))

    def sum_n(self, a: Any, n: int) -> Any:
        if n < 0:
            return super().sum_n(self.negate(a), -n)
        return super().sum_n(a, n)


class AdditiveCommutativeGroup(AdditiveGroup, AdditiveCommutativeMonoid):
    pass


# multiplicative half


class MultiplicativeSemigroup(ABC):
    @abstractmethod
    def times(self, x: Any, y: Any) -> Any:
        ...

    def pow(self, a: Any, n: int) -> Any:
        return repeated(self.times, a, n)

    def try_product(self, values: Iterable[Any]) -> Optional[Any]:
        result = None
        for value in values:
            result = value if result is None else self.times(result, value)
        return result


class MultiplicativeCommutativeSemigroup(MultiplicativeSemigroup):
    pass


class MultiplicativeMonoid(MultiplicativeSemigroup):
    @property
    @abstractmethod
    def one(self) -> Any:
        ...

    def is_one(self, a: Any, eq: Callable[[Any, Any], bool] = operator.eq) -> bool:
        return eq(a, self.one)

    def pow(self, a: Any, n: int) -> Any:
        if n == 0:
            return self.one
        return super().pow(a, n)

    def product(self, values: Iterable[Any]) -> Any:
        result = self.try_product(values)
        return self.one if result is None else result


class MultiplicativeCommutativeMonoid(
    MultiplicativeMonoid, MultiplicativeCommutativeSemigroup
):
    pass


class MultiplicativeGroup(MultiplicativeMonoid):
    @abstractmethod
    def reciprocal(self, x: Any) -> Any:
        ...

    def div(self, x: Any, y: Any) -> Any:
        return self.times(x, self.reciprocal(y))

    def pow(self, a: Any, n: int) -> Any:
        if n < 0:
            return super().pow(self.reciprocal(a), -n)
        return super().pow(a, n)


class MultiplicativeCommutativeGroup(
    MultiplicativeGroup, MultiplicativeCommutativeMonoid
):
    pass


# rings


class Semiring(AdditiveCommutativeMonoid, MultiplicativeSemigroup):
    pass


class Rng(Semiring, AdditiveCommutativeGroup):
    pass


class Rig(Semiring, MultiplicativeMonoid):
    pass


class Ring(Rig, Rng):
    def from_int(self, n: int) -> Any:
        return self.sum_n(self.one, n)

    def from_big_int(self, n: int) -> Any:
        return self.from_int(n)


class CommutativeSemiring(Semiring, MultiplicativeCommutativeSemigroup):
    pass


class CommutativeRng(Rng, CommutativeSemiring):
    pass


class CommutativeRig(Rig, CommutativeSemiring):
    pass


class CommutativeRing(Ring, CommutativeRig, CommutativeRng):
    pass


class BoolRng(CommutativeRng):
    """Rng where every element is idempotent under ``times``; ``-x == x``."""

    def negate(self, x: Any) -> Any:
        return x


class BoolRing(BoolRng, CommutativeRing):
    pass


class EuclideanRing(CommutativeRing):
    @abstractmethod
    def quot(self, x: Any, y: Any) -> Any:
        ...

    @abstractmethod
    def mod(self, x: Any, y: Any) -> Any:
        ...

    def quotmod(self, x: Any, y: Any) -> Tuple[Any, Any]:
        return self.quot(x, y), self.mod(x, y)


class Field(EuclideanRing, MultiplicativeCommutativeGroup):
    """Commutative ring whose nonzero elements form a multiplicative group."""

    def quot(self, x: Any, y: Any) -> Any:
        return self.div(x, y)

    def mod(self, x: Any, y: Any) -> Any:
        return self.zero


# group-theoretic views


def additive(structure: Any) -> OperationView:
    """The ``+`` operation of ``structure`` seen as a semigroup/monoid/group."""
    return OperationView(
        structure,
        "additive",
        "+",
        combine=structure.plus,
        combine_n=getattr(structure, "sum_n", None),
        combine_all_option=getattr(structure, "try_sum", None),
        empty=getattr(structure, "zero", None),
        is_empty=getattr(structure, "is_zero", None),
        combine_all=getattr(structure, "sum", None),
        inverse=getattr(structure, "negate", None),
        remove=getattr(structure, "minus", None),
    )


def multiplicative(structure: Any) -> OperationView:
    """The ``*`` operation of ``structure`` seen as a semigroup/monoid/group."""
    return OperationView(
        structure,
        "multiplicative",
        "*",
        combine=structure.times,
        combine_n=getattr(structure, "pow", None),
        combine_all_option=getattr(structure, "try_product", None),
        empty=getattr(structure, "one", None),
        is_empty=getattr(structure, "is_one", None),
        combine_all=getattr(structure, "product", None),
        inverse=getattr(structure, "reciprocal", None),
        remove=getattr(structure, "div", None),
    )

"""
Explicit per-type support bundle.

Every law builder receives the value generator, equality comparator and
domain predicate for the type under test through one TypeSupport value
instead of resolving them ambiently.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, TypeVar

from hypothesis.strategies import SearchStrategy

from .predicate import Predicate

A = TypeVar("A")


@dataclass(frozen=True)
class TypeSupport(Generic[A]):
    """
    Generator, equality and predicate for one concrete type.

    Attributes:
        strategy: Hypothesis strategy producing sample values
        eq: Total equality over the type
        predicate: Domain restriction for axioms that need one (e.g. nonzero
            divisors); accept-all by default
    """

    strategy: SearchStrategy
    eq: Callable[[A, A], bool] = operator.eq
    predicate: Predicate[A] = field(default_factory=Predicate.always)

    def restricted(self) -> "TypeSupport[A]":
        """Support whose generator only yields values accepted by the predicate."""
        if self.predicate.is_trivial:
            return self
        return replace(self, strategy=self.strategy.filter(self.predicate))

    def with_predicate(
        self, predicate: Predicate[A], replace_existing: bool = True
    ) -> "TypeSupport[A]":
        """
        Return support with ``predicate`` replacing or intersecting the current one.

        Args:
            predicate: New domain restriction
            replace_existing: Replace (True) or intersect (False)
        """
        return replace(
            self, predicate=self.predicate.combine(predicate, replace=replace_existing)
        )

    def neq(self, x: A, y: A) -> bool:
        return not self.eq(x, y)

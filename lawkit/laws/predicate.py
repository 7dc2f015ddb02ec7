"""
Domain-restricting predicates.

A predicate decides which sampled values an axiom applies to, e.g. the
nonzero divisors of a field. Predicates are total and side-effect free;
they are combined either by intersection (stacking restrictions from nested
structure levels) or by replacement (a caller deliberately supplying a new
domain restriction).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

A = TypeVar("A")


def _accept(_value: Any) -> bool:
    return True


@dataclass(frozen=True)
class Predicate(Generic[A]):
    """A composable boolean filter over a domain type."""

    fn: Callable[[A], bool] = _accept
    description: str = "true"

    def __call__(self, value: A) -> bool:
        return bool(self.fn(value))

    def apply(self, value: A) -> bool:
        """Evaluate the predicate on a value."""
        return self(value)

    def and_(self, other: "Predicate[A]") -> "Predicate[A]":
        """
        Intersect with another predicate.

        The accept-all predicate is the identity of intersection, so it is
        dropped instead of adding an extra call per sample.
        """
        if self.is_trivial:
            return other
        if other.is_trivial:
            return self

        first, second = self.fn, other.fn
        return Predicate(
            fn=lambda value: bool(first(value)) and bool(second(value)),
            description=f"({self.description}) and ({other.description})",
        )

    __and__ = and_

    def combine(self, other: "Predicate[A]", replace: bool) -> "Predicate[A]":
        """
        Replace this predicate with ``other`` or intersect with it.

        Args:
            other: The new restriction
            replace: If True, ``other`` fully replaces this predicate

        Returns:
            The combined predicate
        """
        return other if replace else self.and_(other)

    @property
    def is_trivial(self) -> bool:
        """True for the accept-all predicate."""
        return self.fn is _accept

    @classmethod
    def always(cls) -> "Predicate[A]":
        """The accept-all predicate."""
        return cls()

    @classmethod
    def of(cls, fn: Callable[[A], bool], description: str = "") -> "Predicate[A]":
        """Wrap a plain callable."""
        return cls(fn=fn, description=description or getattr(fn, "__name__", "predicate"))

    @classmethod
    def nonzero(
        cls, zero: A, eq: Callable[[A, A], bool] = operator.eq
    ) -> "Predicate[A]":
        """Accept every value not equal to ``zero`` under ``eq``."""
        return cls(fn=lambda value: not eq(value, zero), description=f"!= {zero!r}")

    def __repr__(self) -> str:
        return f"Predicate({self.description})"

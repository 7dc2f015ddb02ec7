"""
Reusable axiom templates.

Each function returns an ``(axiom name, Property)`` pair over the values
drawn from a TypeSupport, comparing with its equality.
"""

from typing import Any, Callable, Tuple

from hypothesis import strategies as st

from .prop import Property, for_all
from .support import TypeSupport

Binary = Callable[[Any, Any], Any]
Unary = Callable[[Any], Any]
NamedProp = Tuple[str, Property]

# Lists fed to n-ary folds stay short so folds over big values stay fast.
MAX_FOLD_SIZE = 8


def small_lists(support: TypeSupport) -> st.SearchStrategy:
    return st.lists(support.strategy, max_size=MAX_FOLD_SIZE)


def associativity(support: TypeSupport, f: Binary) -> NamedProp:
    eq = support.eq
    return "associativity", for_all(
        lambda x, y, z: eq(f(f(x, y), z), f(x, f(y, z))),
        default=support.strategy,
        description="(x . y) . z == x . (y . z)",
    )


def commutative(support: TypeSupport, f: Binary) -> NamedProp:
    eq = support.eq
    return "commutative", for_all(
        lambda x, y: eq(f(x, y), f(y, x)),
        default=support.strategy,
        description="x . y == y . x",
    )


def idempotence(support: TypeSupport, f: Binary) -> NamedProp:
    eq = support.eq
    return "idempotence", for_all(
        lambda x: eq(f(x, x), x),
        default=support.strategy,
        description="x . x == x",
    )


def left_identity(support: TypeSupport, identity: Any, f: Binary) -> NamedProp:
    eq = support.eq
    return "left identity", for_all(
        lambda x: eq(f(identity, x), x), default=support.strategy
    )


def right_identity(support: TypeSupport, identity: Any, f: Binary) -> NamedProp:
    eq = support.eq
    return "right identity", for_all(
        lambda x: eq(f(x, identity), x), default=support.strategy
    )


def left_inverse(support: TypeSupport, identity: Any, f: Binary, inv: Unary) -> NamedProp:
    eq = support.eq
    return "left inverse", for_all(
        lambda x: eq(identity, f(inv(x), x)), default=support.strategy
    )


def right_inverse(support: TypeSupport, identity: Any, f: Binary, inv: Unary) -> NamedProp:
    eq = support.eq
    return "right inverse", for_all(
        lambda x: eq(identity, f(x, inv(x))), default=support.strategy
    )


def consistent_inverse(
    support: TypeSupport, name: str, m: Binary, f: Binary, inv: Unary
) -> NamedProp:
    """``m(x, y) == f(x, inv(y))``, e.g. subtraction against adding the negation."""
    eq = support.eq
    return f"consistent {name}", for_all(
        lambda x, y: eq(m(x, y), f(x, inv(y))), default=support.strategy
    )


def distributive(support: TypeSupport, a: Binary, m: Binary) -> NamedProp:
    """``m`` distributes over ``a`` from both sides."""
    eq = support.eq
    return "distributive", for_all(
        lambda x, y, z: eq(m(x, a(y, z)), a(m(x, y), m(x, z)))
        and eq(m(a(x, y), z), a(m(x, z), m(y, z))),
        default=support.strategy,
    )


def repeat0(support: TypeSupport, name: str, sym: str, identity: Any, r: Callable[[Any, int], Any]) -> NamedProp:
    eq = support.eq
    return f"{name}(a, 0) == {sym}", for_all(
        lambda a: eq(r(a, 0), identity), default=support.strategy
    )


def repeat1(support: TypeSupport, name: str, r: Callable[[Any, int], Any]) -> NamedProp:
    eq = support.eq
    return f"{name}(a, 1) == a", for_all(
        lambda a: eq(r(a, 1), a), default=support.strategy
    )


def repeat2(
    support: TypeSupport, name: str, sym: str, r: Callable[[Any, int], Any], f: Binary
) -> NamedProp:
    eq = support.eq
    return f"{name}(a, 2) == a {sym} a", for_all(
        lambda a: eq(r(a, 2), f(a, a)), default=support.strategy
    )


def collect0(support: TypeSupport, name: str, sym: str, identity: Any, c: Callable[[Any], Any]) -> NamedProp:
    eq = support.eq
    return f"{name}([]) == {sym}", for_all(lambda: eq(c([]), identity))


def is_id(support: TypeSupport, name: str, identity: Any, is_identity: Callable[..., bool]) -> NamedProp:
    """The structure's identity test agrees with equality to the identity."""
    eq = support.eq
    return name, for_all(
        lambda x: bool(is_identity(x, eq)) == bool(eq(x, identity)),
        default=support.strategy,
    )


def combine_all_option(support: TypeSupport, name: str, f: Binary, c: Callable[[Any], Any]) -> NamedProp:
    """The option-returning fold agrees with a left fold of ``f``."""
    eq = support.eq

    def check(xs: list) -> bool:
        actual = c(xs)
        if not xs:
            return actual is None
        expected = xs[0]
        for x in xs[1:]:
            expected = f(expected, x)
        return actual is not None and eq(actual, expected)

    return name, for_all(check, small_lists(support))

"""
Catalogue of stock instances and the structures they claim.

Used by the command line interface to look up a structure builder and an
instance by name.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, Dict, Optional, Tuple, Type

from hypothesis import strategies as st

from lawkit.algebra import (
    BooleanAlgebra,
    BooleanRing,
    IntegerRing,
    ModularField,
    RationalField,
    SetAlgebra,
    StringMonoid,
)
from lawkit.errors import LawkitError
from lawkit.laws import GroupLaws, LogicLaws, Predicate, RingLaws, RuleSet, TypeSupport


class UnknownEntryError(LawkitError):
    """A structure or instance name is not in the catalogue."""

    pass


# structure name -> (laws class, builder method)
STRUCTURES: Dict[str, Tuple[Type[GroupLaws], str]] = {
    "semigroup": (GroupLaws, "semigroup"),
    "commutative-semigroup": (GroupLaws, "commutative_semigroup"),
    "band": (GroupLaws, "band"),
    "semilattice": (GroupLaws, "semilattice"),
    "monoid": (GroupLaws, "monoid"),
    "commutative-monoid": (GroupLaws, "commutative_monoid"),
    "bounded-semilattice": (GroupLaws, "bounded_semilattice"),
    "group": (GroupLaws, "group"),
    "commutative-group": (GroupLaws, "commutative_group"),
    "additive-semigroup": (RingLaws, "additive_semigroup"),
    "additive-monoid": (RingLaws, "additive_monoid"),
    "additive-group": (RingLaws, "additive_group"),
    "additive-commutative-group": (RingLaws, "additive_commutative_group"),
    "multiplicative-monoid": (RingLaws, "multiplicative_monoid"),
    "multiplicative-commutative-monoid": (RingLaws, "multiplicative_commutative_monoid"),
    "semiring": (RingLaws, "semiring"),
    "rng": (RingLaws, "rng"),
    "rig": (RingLaws, "rig"),
    "ring": (RingLaws, "ring"),
    "commutative-semiring": (RingLaws, "commutative_semiring"),
    "commutative-rng": (RingLaws, "commutative_rng"),
    "commutative-rig": (RingLaws, "commutative_rig"),
    "commutative-ring": (RingLaws, "commutative_ring"),
    "boolean-rng": (RingLaws, "bool_rng"),
    "boolean-ring": (RingLaws, "bool_ring"),
    "euclidean-ring": (RingLaws, "euclidean_ring"),
    "field": (RingLaws, "field"),
    "join-semilattice": (LogicLaws, "join_semilattice"),
    "meet-semilattice": (LogicLaws, "meet_semilattice"),
    "lattice": (LogicLaws, "lattice"),
    "distributive-lattice": (LogicLaws, "distributive_lattice"),
    "bounded-lattice": (LogicLaws, "bounded_lattice"),
    "bounded-distributive-lattice": (LogicLaws, "bounded_distributive_lattice"),
    "heyting": (LogicLaws, "heyting"),
    "bool": (LogicLaws, "bool"),
}

_COMMUTATIVE_RING = (
    "additive-commutative-group",
    "multiplicative-commutative-monoid",
    "semiring",
    "rng",
    "rig",
    "ring",
    "commutative-semiring",
    "commutative-rng",
    "commutative-rig",
    "commutative-ring",
)

_BOOLEAN_ALGEBRA = (
    "join-semilattice",
    "meet-semilattice",
    "lattice",
    "distributive-lattice",
    "bounded-lattice",
    "bounded-distributive-lattice",
    "heyting",
    "bool",
)


@dataclass(frozen=True)
class CatalogEntry:
    """A stock instance with everything needed to check it."""

    name: str
    description: str
    structure: Callable[[], Any]
    strategy: Callable[[], st.SearchStrategy]
    claims: Tuple[str, ...]
    predicate: Optional[Callable[[], Predicate]] = None
    eq: Optional[Callable[[Any, Any], bool]] = field(default=None)

    def support(self) -> TypeSupport:
        kwargs: Dict[str, Any] = {"strategy": self.strategy()}
        if self.eq is not None:
            kwargs["eq"] = self.eq
        if self.predicate is not None:
            kwargs["predicate"] = self.predicate()
        return TypeSupport(**kwargs)


INSTANCES: Dict[str, CatalogEntry] = {
    entry.name: entry
    for entry in [
        CatalogEntry(
            name="int",
            description="Python int with floor division",
            structure=IntegerRing,
            strategy=st.integers,
            predicate=lambda: Predicate.nonzero(0),
            claims=_COMMUTATIVE_RING + ("euclidean-ring",),
        ),
        CatalogEntry(
            name="rational",
            description="fractions.Fraction",
            structure=RationalField,
            strategy=lambda: st.fractions(
                min_value=-1000, max_value=1000, max_denominator=100
            ),
            predicate=lambda: Predicate.nonzero(Fraction(0)),
            claims=_COMMUTATIVE_RING + ("euclidean-ring", "field"),
        ),
        CatalogEntry(
            name="mod7",
            description="integers modulo 7",
            structure=lambda: ModularField(7),
            strategy=lambda: st.integers(min_value=0, max_value=6),
            predicate=lambda: Predicate.nonzero(0),
            claims=_COMMUTATIVE_RING + ("euclidean-ring", "field"),
        ),
        CatalogEntry(
            name="bool-ring",
            description="bool with xor and and",
            structure=BooleanRing,
            strategy=st.booleans,
            claims=_COMMUTATIVE_RING + ("boolean-rng", "boolean-ring"),
        ),
        CatalogEntry(
            name="bool",
            description="bool with and, or, not",
            structure=BooleanAlgebra,
            strategy=st.booleans,
            claims=_BOOLEAN_ALGEBRA,
        ),
        CatalogEntry(
            name="subsets",
            description="subsets of {1, 2, 3, 4} as frozensets",
            structure=lambda: SetAlgebra({1, 2, 3, 4}),
            strategy=lambda: st.frozensets(st.sampled_from([1, 2, 3, 4])),
            claims=_BOOLEAN_ALGEBRA,
        ),
        CatalogEntry(
            name="str",
            description="str under concatenation",
            structure=StringMonoid,
            strategy=lambda: st.text(max_size=10),
            claims=("semigroup", "monoid"),
        ),
    ]
}


def get_instance(name: str) -> CatalogEntry:
    try:
        return INSTANCES[name]
    except KeyError:
        raise UnknownEntryError(
            f"Unknown instance '{name}'; choose from {', '.join(INSTANCES)}"
        ) from None


def build(structure: str, instance: str) -> RuleSet:
    """
    Build the rule set of ``structure`` for a catalogued instance.

    Raises:
        UnknownEntryError: If either name is not catalogued
        ConstructionError: If the instance lacks an operation the structure needs
    """
    if structure not in STRUCTURES:
        raise UnknownEntryError(
            f"Unknown structure '{structure}'; choose from {', '.join(STRUCTURES)}"
        )
    entry = get_instance(instance)
    laws_class, builder = STRUCTURES[structure]
    laws = laws_class(entry.support())
    return getattr(laws, builder)(entry.structure())

"""
Structure descriptors.

Abstract operation bundles for the structures lawkit can check, the
group-theoretic views over their operations, and stock instances over
built-in types.
"""

from .group import (
    Band,
    BoundedSemilattice,
    CommutativeGroup,
    CommutativeMonoid,
    CommutativeSemigroup,
    Group,
    Monoid,
    OperationView,
    Semigroup,
    Semilattice,
)
from .ring import (
    AdditiveCommutativeGroup,
    AdditiveCommutativeMonoid,
    AdditiveCommutativeSemigroup,
    AdditiveGroup,
    AdditiveMonoid,
    AdditiveSemigroup,
    BoolRing,
    BoolRng,
    CommutativeRig,
    CommutativeRing,
    CommutativeRng,
    CommutativeSemiring,
    EuclideanRing,
    Field,
    MultiplicativeCommutativeGroup,
    MultiplicativeCommutativeMonoid,
    MultiplicativeCommutativeSemigroup,
    MultiplicativeGroup,
    MultiplicativeMonoid,
    MultiplicativeSemigroup,
    Rig,
    Ring,
    Rng,
    Semiring,
    additive,
    multiplicative,
)
from .lattice import (
    Bool,
    BoundedDistributiveLattice,
    BoundedJoinSemilattice,
    BoundedLattice,
    BoundedMeetSemilattice,
    DistributiveLattice,
    Heyting,
    JoinSemilattice,
    Lattice,
    MeetSemilattice,
    join_semilattice,
    meet_semilattice,
)
from .instances import (
    BooleanAlgebra,
    BooleanRing,
    IntegerRing,
    ModularField,
    RationalField,
    SetAlgebra,
    StringMonoid,
)

__all__ = [
    "Semigroup",
    "CommutativeSemigroup",
    "Band",
    "Semilattice",
    "Monoid",
    "CommutativeMonoid",
    "BoundedSemilattice",
    "Group",
    "CommutativeGroup",
    "OperationView",
    "AdditiveSemigroup",
    "AdditiveCommutativeSemigroup",
    "AdditiveMonoid",
    "AdditiveCommutativeMonoid",
    "AdditiveGroup",
    "AdditiveCommutativeGroup",
    "MultiplicativeSemigroup",
    "MultiplicativeCommutativeSemigroup",
    "MultiplicativeMonoid",
    "MultiplicativeCommutativeMonoid",
    "MultiplicativeGroup",
    "MultiplicativeCommutativeGroup",
    "Semiring",
    "Rng",
    "Rig",
    "Ring",
    "CommutativeSemiring",
    "CommutativeRng",
    "CommutativeRig",
    "CommutativeRing",
    "BoolRng",
    "BoolRing",
    "EuclideanRing",
    "Field",
    "additive",
    "multiplicative",
    "JoinSemilattice",
    "MeetSemilattice",
    "Lattice",
    "DistributiveLattice",
    "BoundedJoinSemilattice",
    "BoundedMeetSemilattice",
    "BoundedLattice",
    "BoundedDistributiveLattice",
    "Heyting",
    "Bool",
    "join_semilattice",
    "meet_semilattice",
    "IntegerRing",
    "RationalField",
    "ModularField",
    "BooleanRing",
    "BooleanAlgebra",
    "SetAlgebra",
    "StringMonoid",
]

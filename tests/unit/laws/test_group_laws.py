"""
Unit tests for group-theoretic law builders.
"""

import pytest
from hypothesis import strategies as st

from lawkit.algebra import IntegerRing, Semigroup, StringMonoid, additive
from lawkit.errors import MissingOperationError
from lawkit.laws import GroupLaws, Outcome, TypeSupport


class Subtraction(Semigroup):
    """Not associative."""

    def combine(self, x, y):
        return x - y


class Additive(Semigroup):
    def combine(self, x, y):
        return x + y


@pytest.fixture
def int_laws():
    return GroupLaws(TypeSupport(st.integers()))


class TestGroupLawNames:
    """Tests for rule set names and axioms."""

    def test_semigroup_axioms(self, int_laws):
        rule_set = int_laws.semigroup(Additive())

        assert rule_set.name == "semigroup"
        assert rule_set.axiom_names == [
            "associativity",
            "combine_n(a, 1) == a",
            "combine_n(a, 2) == a |+| a",
            "combine_all_option",
        ]

    def test_monoid_axioms(self):
        laws = GroupLaws(TypeSupport(st.text()))
        rule_set = laws.monoid(StringMonoid())

        assert rule_set.name == "monoid"
        assert rule_set.axiom_names == [
            "left identity",
            "right identity",
            "combine_n(a, 0) == id",
            "combine_all([]) == id",
            "is_empty",
        ]
        assert [p.name for p in rule_set.parents] == ["semigroup"]

    def test_hierarchy_parents(self, int_laws):
        view = additive(IntegerRing())
        group = int_laws.commutative_group(view)

        assert [p.name for p in group.parents] == ["group", "commutative monoid"]
        assert [a.name for a in group.ancestors()] == [
            "group",
            "monoid",
            "semigroup",
            "commutative monoid",
            "commutative semigroup",
        ]

    def test_semilattice_has_band_and_commutativity(self, int_laws):
        rule_set = int_laws.semilattice(Additive())
        assert [p.name for p in rule_set.parents] == ["band", "commutative semigroup"]


class TestMemoization:
    """Tests for shared rule set identities."""

    def test_same_structure_same_rule_set(self, int_laws):
        structure = Additive()
        assert int_laws.semigroup(structure) is int_laws.semigroup(structure)

    def test_shared_ancestor_is_one_object(self, int_laws):
        """Test an ancestor reachable through two parents is the same object."""
        view = additive(IntegerRing())
        group = int_laws.commutative_group(view)
        via_group = group.parents[0].parents[0].parents[0]
        via_commutative = group.parents[1].parents[1].parents[0]

        assert via_group.name == via_commutative.name == "semigroup"
        assert via_group is via_commutative

    def test_views_are_cached_per_structure(self, int_laws):
        ring = IntegerRing()
        assert int_laws.additive_view(ring) is int_laws.additive_view(ring)
        assert int_laws.additive_commutative_group(ring) is int_laws.additive_commutative_group(ring)


class TestMissingOperations:
    """Tests for descriptors lacking required operations."""

    def test_monoid_needs_identity(self, int_laws):
        with pytest.raises(MissingOperationError) as exc_info:
            int_laws.monoid(Additive())

        assert exc_info.value.operation == "empty"
        assert exc_info.value.structure == "Additive"

    def test_group_needs_inverse(self):
        laws = GroupLaws(TypeSupport(st.text()))
        with pytest.raises(MissingOperationError) as exc_info:
            laws.group(StringMonoid())

        assert exc_info.value.operation == "inverse"


class TestAdditiveLaws:
    """Tests for the additive family."""

    def test_additive_group_wraps_group_laws(self, int_laws):
        rule_set = int_laws.additive_group(IntegerRing())

        assert rule_set.name == "group"
        assert rule_set.bases[0][0] == "base"
        assert rule_set.axiom_names == ["consistent subtract"]
        assert "group.base.left inverse" in [path for path, _ in rule_set.flatten()]

    def test_additive_monoid_props(self, int_laws):
        rule_set = int_laws.additive_monoid(IntegerRing())
        assert rule_set.axiom_names == ["sum_n(a, 0) == zero", "sum([]) == zero"]

    def test_additive_semigroup_props(self, int_laws):
        rule_set = int_laws.additive_semigroup(IntegerRing())
        assert rule_set.axiom_names == ["sum_n(a, 1) == a", "sum_n(a, 2) == a + a"]


class TestRunningGroupLaws:
    """Tests running individual group laws."""

    def test_associativity_fails_for_subtraction(self, int_laws):
        prop = dict(int_laws.semigroup(Subtraction()).props)["associativity"]
        result = prop.run(max_examples=100)

        assert result.outcome == Outcome.FAILED
        x, y, z = result.counterexample
        assert (x - y) - z != x - (y - z)

    def test_string_monoid_identity_passes(self):
        laws = GroupLaws(TypeSupport(st.text(max_size=5)))
        for _, prop in laws.monoid(StringMonoid()).props:
            assert prop.run(max_examples=30).passed

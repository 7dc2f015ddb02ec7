"""
Unit tests for lattice, Heyting and Boolean algebra law builders.
"""

import pytest
from hypothesis import strategies as st

from lawkit.algebra import BooleanAlgebra, Lattice, SetAlgebra
from lawkit.errors import MissingOperationError
from lawkit.laws import LatticeLaws, LogicLaws, Outcome, TypeSupport
from lawkit.suite import render


class MinMax(Lattice):
    """Integers ordered by <=."""

    def join(self, x, y):
        return max(x, y)

    def meet(self, x, y):
        return min(x, y)


class NotALattice(Lattice):
    """join is max but meet is addition, so absorption fails."""

    def join(self, x, y):
        return max(x, y)

    def meet(self, x, y):
        return x + y


class ImplicationIsOr(BooleanAlgebra):
    """Uses x or y as implication, which is not a Heyting implication."""

    def imp(self, x, y):
        return x or y


@pytest.fixture
def bool_laws():
    return LogicLaws(TypeSupport(st.booleans()))


class TestLatticeLaws:
    """Tests for lattice rule sets."""

    def test_lattice_bases_meet_then_join(self):
        laws = LatticeLaws(TypeSupport(st.integers()))
        rule_set = laws.lattice(MinMax())

        assert [label for label, _ in rule_set.bases] == ["meet", "join"]
        assert rule_set.axiom_names == ["absorption"]
        assert [p.name for p in rule_set.parents] == ["join semilattice", "meet semilattice"]

    def test_semilattices_have_one_base(self):
        laws = LatticeLaws(TypeSupport(st.integers()))
        assert [l for l, _ in laws.join_semilattice(MinMax()).bases] == ["join"]
        assert [l for l, _ in laws.meet_semilattice(MinMax()).bases] == ["meet"]

    def test_min_max_is_a_distributive_lattice(self):
        laws = LatticeLaws(TypeSupport(st.integers()))
        for rendered in render(laws.distributive_lattice(MinMax())):
            assert rendered.prop.run(max_examples=50).passed, rendered.path

    def test_absorption_failure(self):
        laws = LatticeLaws(TypeSupport(st.integers()))
        prop = dict(laws.lattice(NotALattice()).props)["absorption"]

        assert prop.run(max_examples=100).outcome == Outcome.FAILED

    def test_bounded_lattice_needs_bounds(self):
        laws = LatticeLaws(TypeSupport(st.integers()))
        with pytest.raises(MissingOperationError) as exc_info:
            laws.bounded_lattice(MinMax())

        assert exc_info.value.operation == "empty"

    def test_bounded_distributive_lattice_paths(self, bool_laws):
        paths = [r.path for r in render(bool_laws.bounded_distributive_lattice(BooleanAlgebra()))]

        assert "bounded distributive lattice.absorption" in paths
        assert "bounded distributive lattice.distributive" in paths
        assert "bounded distributive lattice.meet.left identity" in paths
        assert "bounded distributive lattice.join.idempotence" in paths


class TestLogicLaws:
    """Tests for Heyting and Boolean algebra rule sets."""

    def test_bool_declares_excluded_middle_only(self, bool_laws):
        rule_set = bool_laws.bool(BooleanAlgebra())

        assert rule_set.axiom_names == ["excluded middle"]
        assert [p.name for p in rule_set.parents] == ["heyting"]

    def test_bool_and_heyting_share_lattice(self, bool_laws):
        algebra = BooleanAlgebra()
        assert bool_laws.bool(algebra).ll is bool_laws.heyting(algebra).ll

    def test_heyting_axioms(self, bool_laws):
        names = bool_laws.heyting(BooleanAlgebra()).axiom_names

        assert len(names) == 15
        assert names[:3] == ["distributive", "consistent", "¬x = (x → 0)"]
        assert "(0 → x) = 1" in names

    def test_boolean_algebra_passes_every_law(self, bool_laws):
        """Test {True, False} passes excluded middle, Heyting and lattice laws."""
        laws = render(bool_laws.bool(BooleanAlgebra()))
        paths = [law.path for law in laws]

        assert "bool.excluded middle" in paths
        assert "bool.x → (y → x) = 1" in paths
        assert "bool.lattice.absorption" in paths
        for rendered in laws:
            assert rendered.prop.run(max_examples=30).passed, rendered.path

    def test_subsets_pass_heyting_laws(self):
        universe = {1, 2, 3}
        laws = LogicLaws(TypeSupport(st.frozensets(st.sampled_from(sorted(universe)))))
        for rendered in render(laws.heyting(SetAlgebra(universe))):
            assert rendered.prop.run(max_examples=30).passed, rendered.path

    def test_wrong_implication_rejected(self, bool_laws):
        rule_set = bool_laws.heyting(ImplicationIsOr())
        result = dict(rule_set.props)["x → x = 1"].run(max_examples=30)

        assert result.outcome == Outcome.FAILED
        assert result.counterexample == (False,)

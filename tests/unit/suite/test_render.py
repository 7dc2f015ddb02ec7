"""
Unit tests for law suite rendering.
"""

import pytest
from hypothesis import strategies as st

from lawkit.algebra import IntegerRing, Semigroup
from lawkit.config import RunnerConfig
from lawkit.errors import ConstructionError
from lawkit.laws import GroupLaws, Predicate, RingLaws, RuleSet, TypeSupport, for_all
from lawkit.suite import LawSuite, check_laws, render

FAST = RunnerConfig(max_examples=30)


class Max(Semigroup):
    def combine(self, x, y):
        return max(x, y)


class Subtraction(Semigroup):
    def combine(self, x, y):
        return x - y


def trivially_true():
    return for_all(lambda: True)


class TestRender:
    """Tests for render()."""

    def test_own_then_inherited_then_bases(self):
        parent = RuleSet("parent", props=[("p", trivially_true())])
        base = RuleSet("base", props=[("b", trivially_true())])
        root = RuleSet(
            "root",
            bases=[("inner", base)],
            parents=[parent],
            props=[("r", trivially_true())],
        )

        laws = render(root)

        assert [law.path for law in laws] == ["root.r", "root.p", "root.inner.b"]
        assert [law.inherited for law in laws] == [False, True, False]
        assert laws[1].declared_in == "parent"
        assert laws[1].prefix == "root"
        assert laws[1].axiom == "p"

    def test_diamond_ancestor_rendered_once(self):
        """Test an axiom implied through two parents is verified once."""
        top = RuleSet("top", props=[("t", trivially_true())])
        left = RuleSet("left", parents=[top])
        right = RuleSet("right", parents=[top])
        bottom = RuleSet("bottom", parents=[left, right])

        assert [law.path for law in render(bottom)] == ["bottom.t"]

    def test_already_rendered_skips_ancestors(self):
        top = RuleSet("top", props=[("t", trivially_true())])
        child = RuleSet("child", parents=[top], props=[("c", trivially_true())])
        seen = {id(top)}

        laws = render(child, already_rendered=seen)

        assert [law.path for law in laws] == ["child.c"]
        assert id(child) in seen

    def test_already_rendered_is_updated(self):
        top = RuleSet("top", props=[("t", trivially_true())])
        child = RuleSet("child", parents=[top])
        seen = set()

        render(child, already_rendered=seen)

        assert {id(top), id(child)} <= seen

    def test_render_is_deterministic(self):
        laws = RingLaws.for_type(st.integers(), predicate=Predicate.nonzero(0))
        rule_set = laws.euclidean_ring(IntegerRing())

        first = [law.path for law in render(rule_set)]
        second = [law.path for law in render(rule_set)]

        assert first == second
        assert len(first) == len(set(first))

    def test_ring_renders_inherited_levels(self):
        laws = RingLaws.for_type(st.integers())
        paths = [law.path for law in render(laws.ring(IntegerRing()))]

        assert paths[:3] == ["ring.from_int", "ring.from_big_int", "ring.distributive"]
        assert "ring.additive.consistent subtract" in paths
        assert "ring.additive.base.commutative" in paths
        assert "ring.multiplicative.pow(a, 0) == one" in paths
        assert "ring.multiplicative.base.associativity" in paths

    def test_prefix_override(self):
        rule_set = RuleSet("x", props=[("a", trivially_true())])
        assert [law.path for law in render(rule_set, prefix="y")] == ["y.a"]


class TestLawSuite:
    """Tests for rendering several roots together."""

    def test_shared_ancestor_verified_once(self):
        """Test a ring checked with its commutative refinement renders ring laws once."""
        laws = RingLaws.for_type(st.integers())
        ring = IntegerRing()
        suite = LawSuite("integers", [laws.ring(ring), laws.commutative_ring(ring)])

        paths = [law.path for law in suite.render()]
        axioms = [path.rsplit(".", 1)[-1] for path in paths]

        assert axioms.count("from_int") == 1
        assert axioms.count("distributive") == 1
        assert "commutative ring.multiplicative.base.commutative" in paths
        assert not any(p.startswith("commutative ring.additive") for p in paths)

    def test_repr(self):
        suite = LawSuite("s", [RuleSet("a")])
        assert repr(suite) == "LawSuite(name='s', roots=['a'])"


class TestClashingAncestors:
    """Axioms that share a name across ancestors are never dropped."""

    def parents(self):
        holds = RuleSet("holds", props=[("x", for_all(lambda: True))])
        breaks = RuleSet("breaks", props=[("x", for_all(lambda: False))])
        return holds, breaks

    def test_strict_construction_rejects_clash(self):
        holds, breaks = self.parents()
        with pytest.raises(ConstructionError):
            RuleSet("child", parents=[holds, breaks], strict=True)

    def test_lenient_clash_renders_both(self):
        holds, breaks = self.parents()
        child = RuleSet("child", parents=[holds, breaks], strict=False)

        laws = render(child)

        assert [law.path for law in laws] == ["child.x", "child.breaks.x"]
        assert laws[1].declared_in == "breaks"

    def test_lenient_clash_failure_is_reported(self):
        """Test the failing one of two same-named ancestor axioms shows up as a failure."""
        holds, breaks = self.parents()
        child = RuleSet("child", parents=[holds, breaks], strict=False)
        suite = LawSuite("clash", [child, breaks])

        report = check_laws(suite, FAST)

        assert [r.path for r in report.failures] == ["child.breaks.x"]
        assert not report.passed

    def test_two_bands_over_different_operations(self):
        """Test two band rule sets as parents cannot hide a broken operation."""
        laws = GroupLaws(TypeSupport(st.integers()))
        parents = [laws.band(Max()), laws.band(Subtraction())]

        with pytest.raises(ConstructionError):
            RuleSet("two bands", parents=parents, strict=True)

        lenient = RuleSet("two bands", parents=parents, strict=False)
        failed = {r.path for r in check_laws(lenient, FAST).failures}

        assert {"two bands.band.idempotence", "two bands.semigroup.associativity"} <= failed
        assert "two bands.idempotence" not in failed

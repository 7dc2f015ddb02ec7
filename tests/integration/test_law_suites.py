"""
Integration tests for law suites.

Builds rule sets for stock and user-defined instances, renders them and runs
them end to end through the runner.
"""

from fractions import Fraction

import pytest
from hypothesis import strategies as st

from lawkit.algebra import (
    BoolRing,
    Field,
    IntegerRing,
    ModularField,
    RationalField,
    Ring,
    Semigroup,
)
from lawkit.config import RunnerConfig
from lawkit.errors import LawViolationError, MissingOperationError
from lawkit.laws import GroupLaws, Outcome, Predicate, RingLaws, TypeSupport
from lawkit.suite import LawRunner, LawSuite, assert_laws, check_laws
from lawkit.suite.catalog import INSTANCES, build


SETTINGS = RunnerConfig(max_examples=30, seed=1)


class Matrix2(Ring):
    """2x2 integer matrices as (a, b, c, d) tuples; not commutative."""

    @property
    def zero(self):
        return (0, 0, 0, 0)

    @property
    def one(self):
        return (1, 0, 0, 1)

    def plus(self, x, y):
        return tuple(p + q for p, q in zip(x, y))

    def negate(self, x):
        return tuple(-p for p in x)

    def times(self, x, y):
        a, b, c, d = x
        e, f, g, h = y
        return (a * e + b * g, a * f + b * h, c * e + d * g, c * f + d * h)


class Subtraction(Semigroup):
    def combine(self, x, y):
        return x - y


class IntegersMod3AsBooleanRing(BoolRing):
    @property
    def zero(self):
        return 0

    @property
    def one(self):
        return 1

    def plus(self, x, y):
        return (x + y) % 3

    def times(self, x, y):
        return (x * y) % 3


class TruncatingRationals(RationalField):
    """Division that rounds toward zero, breaking x / y * y == x."""

    def div(self, x, y):
        return Fraction(int(x / y))


matrices = st.tuples(*[st.integers(min_value=-10, max_value=10)] * 4)


class TestStockInstances:
    """Every stock instance satisfies everything it claims."""

    @pytest.mark.parametrize("name", sorted(INSTANCES))
    def test_instance_satisfies_its_claims(self, name):
        runner = LawRunner(SETTINGS)
        for claim in INSTANCES[name].claims:
            report = runner.check(build(claim, name))
            assert report.passed, report.format()

    def test_integers_are_not_a_field(self):
        laws = RingLaws.for_type(st.integers(), predicate=Predicate.nonzero(0))
        with pytest.raises(MissingOperationError) as exc_info:
            laws.field(IntegerRing())

        assert exc_info.value.operation == "reciprocal"

    def test_modular_field_with_workers(self):
        laws = RingLaws.for_type(
            st.integers(min_value=0, max_value=10), predicate=Predicate.nonzero(0)
        )
        field = ModularField(11)
        report = check_laws(laws.field(field), SETTINGS.model_copy(update={"workers": 4}))

        assert report.passed, report.format()


class TestUserInstances:
    """Laws for instances defined outside the library."""

    def test_matrices_form_a_ring(self):
        laws = RingLaws.for_type(matrices)
        assert_laws(laws.ring(Matrix2()), SETTINGS)

    def test_matrices_are_not_commutative(self):
        """Test the only failure is multiplicative commutativity."""
        laws = RingLaws.for_type(matrices)
        report = check_laws(laws.commutative_ring(Matrix2()), SETTINGS)

        assert [r.path for r in report.failures] == [
            "commutative ring.multiplicative.base.commutative"
        ]
        failure = report.failures[0]
        x, y = failure.counterexample
        assert Matrix2().times(x, y) != Matrix2().times(y, x)

    def test_subtraction_is_not_a_semigroup(self):
        laws = GroupLaws(TypeSupport(st.integers()))
        with pytest.raises(LawViolationError) as exc_info:
            assert_laws(laws.semigroup(Subtraction()), SETTINGS)

        failed = exc_info.value.report.get("semigroup.associativity")
        assert failed.outcome == Outcome.FAILED
        x, y, z = failed.counterexample
        assert (x - y) - z != x - (y - z)

    def test_integers_mod_3_are_not_boolean(self):
        laws = RingLaws.for_type(st.integers(min_value=0, max_value=2))
        report = check_laws(laws.bool_ring(IntegersMod3AsBooleanRing()), SETTINGS)

        assert "boolean ring.idempotence" in [r.path for r in report.failures]
        assert report.get("boolean ring.idempotence").counterexample == (2,)

    def test_truncating_division_is_caught(self):
        laws = RingLaws.for_type(
            st.fractions(min_value=-50, max_value=50, max_denominator=10),
            predicate=Predicate.nonzero(Fraction(0)),
        )
        report = check_laws(laws.field(TruncatingRationals()), SETTINGS)

        failed = [r.path for r in report.failures]
        assert "field.multiplicative.consistent division" in failed

    def test_zero_only_generator_is_inapplicable(self):
        """Test a field whose generator never yields a usable divisor does not pass."""
        laws = RingLaws.for_type(
            st.just(Fraction(0)), predicate=Predicate.nonzero(Fraction(0))
        )
        report = check_laws(laws.field(RationalField()), SETTINGS)

        assert not report.passed
        assert "field.multiplicative.consistent division" in [
            r.path for r in report.inapplicable
        ]


class TestSuites:
    """Several roots checked together."""

    def test_suite_over_ring_hierarchy(self):
        laws = RingLaws.for_type(
            st.fractions(min_value=-50, max_value=50, max_denominator=10),
            predicate=Predicate.nonzero(Fraction(0)),
        )
        field = RationalField()
        suite = LawSuite(
            "rationals",
            [laws.ring(field), laws.euclidean_ring(field), laws.field(field)],
        )

        report = LawRunner(SETTINGS).check(suite)
        paths = [r.path for r in report.results]

        assert report.passed, report.format()
        assert len(paths) == len(set(paths))
        assert paths[0] == "ring.from_int"
        assert not any(p.startswith("field.from_int") for p in paths)

    def test_same_seed_same_report(self):
        laws = GroupLaws(TypeSupport(st.integers()))
        suite = LawSuite("subtraction", [laws.semigroup(Subtraction())])

        first = LawRunner(SETTINGS).check(suite)
        second = LawRunner(SETTINGS.model_copy(update={"workers": 2})).check(suite)

        assert first.to_dict()["results"][0]["counterexample"] == (
            second.to_dict()["results"][0]["counterexample"]
        )


class TestFieldProtocol:
    """Field descriptors built from the abstract base."""

    def test_field_subclass_defaults(self):
        class Q(Field):
            zero = Fraction(0)
            one = Fraction(1)

            def plus(self, x, y):
                return x + y

            def negate(self, x):
                return -x

            def times(self, x, y):
                return x * y

            def reciprocal(self, x):
                return 1 / x

        laws = RingLaws.for_type(
            st.fractions(min_value=-20, max_value=20, max_denominator=5),
            predicate=Predicate.nonzero(Fraction(0)),
        )
        assert_laws(laws.field(Q()), SETTINGS)

"""
Law suite execution.

LawRunner executes rendered laws, optionally on a thread pool. Every law
gets its own seed derived from the run seed and the law's path, so results
do not depend on execution order or worker count, and a failure reproduces
from the seed printed next to it.
"""

from __future__ import annotations

import hashlib
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Union

from lawkit.config import RunnerConfig, config
from lawkit.errors import RunCancelled
from lawkit.laws.prop import Outcome
from lawkit.laws.ruleset import RuleSet
from lawkit.logging import get_lawkit_logger, log_law_result

from .render import LawSuite, RenderedLaw, render
from .reports import LawReport, LawResult

log = get_lawkit_logger("runner")

Checkable = Union[RuleSet, LawSuite]


def law_seed(run_seed: int, path: str) -> int:
    """Seed for one law: a stable 64-bit digest of the run seed and the path."""
    digest = hashlib.sha256(f"{run_seed}:{path}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class LawRunner:
    """
    Executes rendered laws and aggregates their results.

    Example:
        >>> runner = LawRunner(RunnerConfig(max_examples=200, workers=4))
        >>> report = runner.check(RingLaws.for_type(st.integers()).ring(IntegerRing()))
        >>> print(report.summary())
    """

    def __init__(self, settings: Optional[RunnerConfig] = None):
        """
        Initialize the runner.

        Args:
            settings: Trial budget, seed, workers and shrinking; defaults to
                ``config.runner``
        """
        self.settings = settings or config.runner
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Stop the run; laws in progress abort before their next trial."""
        log.info("Cancelling law run")
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run_law(self, law: RenderedLaw) -> LawResult:
        """Run one law; cancellation is reported as a result, not raised."""
        path = law.path
        law_seed_value = law_seed(self.settings.seed, path)
        started = time.perf_counter()
        try:
            outcome = law.prop.run(
                max_examples=self.settings.max_examples,
                seed_value=law_seed_value,
                shrink=self.settings.shrink,
                deadline_ms=self.settings.deadline_ms,
                cancel_event=self._cancel_event,
            )
        except RunCancelled:
            result = LawResult(
                path=path,
                outcome=Outcome.CANCELLED,
                seed=law_seed_value,
                duration_ms=(time.perf_counter() - started) * 1000.0,
            )
        else:
            result = LawResult(
                path=path,
                outcome=outcome.outcome,
                examples=outcome.examples,
                counterexample=outcome.counterexample,
                error=outcome.error,
                seed=outcome.seed,
                duration_ms=outcome.duration_ms,
            )

        log_law_result(
            log,
            path,
            result.outcome.value,
            seed=result.seed,
            examples=result.examples,
            counterexample=repr(result.counterexample),
        )
        return result

    def run(self, laws: Sequence[RenderedLaw], suite: str) -> LawReport:
        """
        Run rendered laws.

        Args:
            laws: Laws in render order
            suite: Name for the report

        Returns:
            LawReport with results in render order; laws that never ran
            because of cancellation are reported as cancelled
        """
        log.info(
            f"Running {len(laws)} laws for '{suite}'",
            suite=suite,
            laws=len(laws),
            workers=self.settings.workers,
            seed=self.settings.seed,
        )
        results: List[Optional[LawResult]] = [None] * len(laws)

        if self.settings.workers == 1:
            for i, law in enumerate(laws):
                if self.is_cancelled:
                    break
                results[i] = self.run_law(law)
        else:
            with ThreadPoolExecutor(max_workers=self.settings.workers) as pool:
                futures = {pool.submit(self.run_law, law): i for i, law in enumerate(laws)}
                for future in as_completed(futures):
                    results[futures[future]] = future.result()

        report = LawReport(
            suite=suite,
            results=[
                result
                if result is not None
                else LawResult(path=law.path, outcome=Outcome.CANCELLED)
                for law, result in zip(laws, results)
            ],
        )
        log.info(report.summary(), suite=suite, passed=report.passed)
        return report

    def check(self, target: Checkable) -> LawReport:
        """Render ``target`` (a rule set or a LawSuite) and run it."""
        if isinstance(target, LawSuite):
            return self.run(target.render(), target.name)
        return self.run(render(target), target.name)


def check_laws(rule_set: Checkable, config: Optional[RunnerConfig] = None) -> LawReport:
    """
    Check every law of a rule set (or LawSuite).

    Failures are collected in the report, never raised; see assert_laws.

    Args:
        rule_set: What to check
        config: Runner settings; defaults to the global ``config.runner``
    """
    return LawRunner(config).check(rule_set)


def assert_laws(rule_set: Checkable, config: Optional[RunnerConfig] = None) -> LawReport:
    """
    Like check_laws, but raise LawViolationError unless every law passed.

    Example:
        >>> def test_integers_form_a_ring():
        ...     assert_laws(RingLaws.for_type(st.integers()).ring(IntegerRing()))
    """
    report = check_laws(rule_set, config)
    report.raise_for_failures()
    return report

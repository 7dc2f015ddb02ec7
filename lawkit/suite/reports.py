"""
Reporting and analysis for law checks.

Provides per-law results, an aggregated report with text and JSON output,
and a history of runs for tracking pass rates and detecting regressions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime, timezone
import json
from pathlib import Path

from lawkit.errors import LawViolationError
from lawkit.laws.prop import Outcome


@dataclass
class LawResult:
    """Result of running one law."""

    path: str
    outcome: Outcome
    examples: int = 0
    counterexample: Optional[Tuple[Any, ...]] = None
    error: Optional[str] = None
    seed: Optional[int] = None
    duration_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED

    def __str__(self) -> str:
        """Format result for display."""
        line = f"[{self.outcome.value.upper()}] {self.path}"
        if self.outcome == Outcome.FAILED:
            line += f" (counterexample: {self.counterexample!r}, seed: {self.seed})"
        elif self.outcome != Outcome.PASSED and self.error:
            line += f" ({self.error})"
        return line

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path,
            "outcome": self.outcome.value,
            "examples": self.examples,
            "counterexample": (
                None
                if self.counterexample is None
                else [repr(value) for value in self.counterexample]
            ),
            "error": self.error,
            "seed": self.seed,
            "duration_ms": round(self.duration_ms, 3),
        }


@dataclass
class LawReport:
    """Results of checking one law suite, in render order."""

    suite: str
    results: List[LawResult] = field(default_factory=list)

    def by_outcome(self, outcome: Outcome) -> List[LawResult]:
        return [r for r in self.results if r.outcome == outcome]

    @property
    def failures(self) -> List[LawResult]:
        return self.by_outcome(Outcome.FAILED) + self.by_outcome(Outcome.ERROR)

    @property
    def inapplicable(self) -> List[LawResult]:
        return self.by_outcome(Outcome.INAPPLICABLE)

    @property
    def cancelled(self) -> List[LawResult]:
        return self.by_outcome(Outcome.CANCELLED)

    @property
    def passed(self) -> bool:
        """True when every law passed; inapplicable laws count against it."""
        return all(r.passed for r in self.results)

    @property
    def pass_rate(self) -> float:
        if not self.results:
            return 1.0
        return len(self.by_outcome(Outcome.PASSED)) / len(self.results)

    def get(self, path: str) -> Optional[LawResult]:
        """Result for a fully qualified law path, if it was run."""
        for result in self.results:
            if result.path == path:
                return result
        return None

    def summary(self) -> str:
        """Generate summary of the report."""
        if self.passed:
            return f"✓ All {len(self.results)} laws passed for {self.suite}"
        return (
            f"✗ Law check failed for {self.suite}: "
            f"{len(self.by_outcome(Outcome.PASSED))} passed, "
            f"{len(self.by_outcome(Outcome.FAILED))} failed, "
            f"{len(self.by_outcome(Outcome.ERROR))} errors, "
            f"{len(self.inapplicable)} inapplicable, "
            f"{len(self.cancelled)} cancelled"
        )

    def format(self, verbose: bool = False) -> str:
        """
        Format full report for display.

        Args:
            verbose: List passing laws as well
        """
        lines = ["=" * 60, f"Law Check Report: {self.suite}", "=" * 60, ""]
        lines.append(self.summary())
        lines.append("")

        shown = self.results if verbose else [r for r in self.results if not r.passed]
        if shown:
            lines.append("Laws:" if verbose else "Problems:")
            lines.append("-" * 60)
            for result in shown:
                lines.append(str(result))
                if result.error and result.outcome == Outcome.FAILED:
                    lines.append(f"  {result.error}")
            lines.append("")

        lines.append("=" * 60)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "suite": self.suite,
            "passed": self.passed,
            "counts": {o.value: len(self.by_outcome(o)) for o in Outcome},
            "results": [r.to_dict() for r in self.results],
        }

    def save(self, path: Path) -> None:
        """Write the report as JSON."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def raise_for_failures(self) -> None:
        """
        Raise LawViolationError unless every law passed.

        Raises:
            LawViolationError: With this report attached
        """
        if not self.passed:
            raise LawViolationError(self)


@dataclass
class LawMetrics:
    """Summary of one run, kept in a LawHistory."""

    timestamp: str
    suite: str
    total_laws: int
    passed: bool
    failed_count: int
    inapplicable_count: int
    pass_rate: float  # 0.0 to 1.0
    failed_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "suite": self.suite,
            "total_laws": self.total_laws,
            "passed": self.passed,
            "failed_count": self.failed_count,
            "inapplicable_count": self.inapplicable_count,
            "pass_rate": self.pass_rate,
            "failed_paths": list(self.failed_paths),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LawMetrics":
        """Create from dictionary."""
        return cls(
            timestamp=data["timestamp"],
            suite=data["suite"],
            total_laws=data["total_laws"],
            passed=data["passed"],
            failed_count=data["failed_count"],
            inapplicable_count=data["inapplicable_count"],
            pass_rate=data["pass_rate"],
            failed_paths=list(data.get("failed_paths", [])),
        )


@dataclass
class LawHistory:
    """Track law check results over time."""

    metrics: List[LawMetrics] = field(default_factory=list)

    def add_report(self, report: LawReport) -> LawMetrics:
        """
        Add a law report to history.

        Args:
            report: Report to add

        Returns:
            The recorded metrics
        """
        metrics = LawMetrics(
            timestamp=datetime.now(timezone.utc).isoformat(),
            suite=report.suite,
            total_laws=len(report.results),
            passed=report.passed,
            failed_count=len(report.failures),
            inapplicable_count=len(report.inapplicable),
            pass_rate=report.pass_rate,
            failed_paths=[r.path for r in report.failures],
        )
        self.metrics.append(metrics)
        return metrics

    def for_suite(self, suite: str) -> List[LawMetrics]:
        return [m for m in self.metrics if m.suite == suite]

    def get_latest(self, suite: Optional[str] = None) -> Optional[LawMetrics]:
        """Get most recent metrics, optionally for one suite."""
        metrics = self.metrics if suite is None else self.for_suite(suite)
        if not metrics:
            return None
        return metrics[-1]

    def get_trend(self, suite: Optional[str] = None, window: int = 10) -> str:
        """
        Get pass-rate trend over recent runs.

        Args:
            suite: Restrict to one suite
            window: Number of recent runs to analyze

        Returns:
            Trend description: "improving", "stable", "declining", or "unknown"
        """
        metrics = self.metrics if suite is None else self.for_suite(suite)
        recent = metrics[-window:]
        if len(recent) < 2:
            return "unknown"

        # Compare average of first half vs second half
        mid = len(recent) // 2
        first_half_avg = sum(m.pass_rate for m in recent[:mid]) / mid
        second_half_avg = sum(m.pass_rate for m in recent[mid:]) / (len(recent) - mid)

        diff = second_half_avg - first_half_avg

        if diff > 0.05:
            return "improving"
        elif diff < -0.05:
            return "declining"
        else:
            return "stable"

    def new_failures(self, suite: str) -> List[str]:
        """Paths failing in the latest run of ``suite`` that passed in the one before."""
        metrics = self.for_suite(suite)
        if len(metrics) < 2:
            return []
        previous = set(metrics[-2].failed_paths)
        return [p for p in metrics[-1].failed_paths if p not in previous]

    def detect_regression(self, suite: Optional[str] = None, threshold: float = 0.0) -> bool:
        """
        Detect whether the latest run is worse than the previous one.

        Args:
            suite: Restrict to one suite
            threshold: Pass-rate drop that counts as a regression

        Returns:
            True if regression detected
        """
        metrics = self.metrics if suite is None else self.for_suite(suite)
        if len(metrics) < 2:
            return False

        latest = metrics[-1]
        previous = metrics[-2]

        if suite is not None and self.new_failures(suite):
            return True
        return previous.pass_rate - latest.pass_rate > threshold

    def save(self, path: Path) -> None:
        """
        Save history to file.

        Args:
            path: File path to save to
        """
        data = {
            "metrics": [m.to_dict() for m in self.metrics],
        }

        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "LawHistory":
        """
        Load history from file.

        Args:
            path: File path to load from

        Returns:
            LawHistory instance, empty if the file does not exist
        """
        if not path.exists():
            return cls()

        with open(path, "r") as f:
            data = json.load(f)

        history = cls()
        history.metrics = [LawMetrics.from_dict(m) for m in data.get("metrics", [])]

        return history

"""
Executable randomized properties.

A Property closes over one Hypothesis strategy per argument and a check
function returning bool. Running it drives Hypothesis with an explicit seed
and no example database, so a run is reproducible from its seed alone and
no two properties share generator state.
"""

from __future__ import annotations

import inspect
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from hypothesis import HealthCheck, Phase, Verbosity, given, seed, settings
from hypothesis import strategies as st
from hypothesis.errors import HypothesisException, Unsatisfiable
from hypothesis.strategies import SearchStrategy

from lawkit.errors import RunCancelled


class Outcome(str, Enum):
    """Result of running one property."""

    PASSED = "passed"
    FAILED = "failed"
    INAPPLICABLE = "inapplicable"
    ERROR = "error"
    CANCELLED = "cancelled"


@dataclass
class PropertyResult:
    """Outcome of one property run."""

    outcome: Outcome
    examples: int = 0
    counterexample: Optional[Tuple[Any, ...]] = None
    error: Optional[str] = None
    seed: Optional[int] = None
    duration_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED


class AxiomViolation(AssertionError):
    """A sampled input made an axiom's check return False."""

    def __init__(self, args: Tuple[Any, ...]):
        super().__init__(f"axiom does not hold for {args!r}")
        self.args_tuple = args


@dataclass(frozen=True)
class Property:
    """
    A single executable, randomized check derived from an axiom.

    Attributes:
        strategies: One value generator per argument of ``check``
        check: Returns True when the axiom holds for the sampled arguments.
            It may call ``hypothesis.assume`` to discard inapplicable inputs.
        description: Optional human readable statement of the axiom
    """

    strategies: Tuple[SearchStrategy, ...]
    check: Callable[..., bool]
    description: str = ""

    def run(
        self,
        *,
        max_examples: int = 100,
        seed_value: int = 0,
        shrink: bool = True,
        deadline_ms: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> PropertyResult:
        """
        Run the property.

        Args:
            max_examples: Trial budget
            seed_value: Seed for the trial stream
            shrink: Shrink a failing input before reporting it
            deadline_ms: Per-trial deadline, None to disable
            cancel_event: Checked before every trial

        Returns:
            PropertyResult; a failure carries the (shrunk) failing arguments

        Raises:
            RunCancelled: If ``cancel_event`` was set before or during the run
        """
        if cancel_event is not None and cancel_event.is_set():
            raise RunCancelled()

        last_args: List[Tuple[Any, ...]] = []
        trials = 0

        def trial(args: Tuple[Any, ...]) -> None:
            nonlocal trials
            if cancel_event is not None and cancel_event.is_set():
                raise RunCancelled()
            trials += 1
            last_args[:] = [args]
            if not self.check(*args):
                raise AxiomViolation(args)

        phases = [p for p in Phase if shrink or p != Phase.shrink]
        test = given(st.tuples(*self.strategies))(trial)
        test = settings(
            max_examples=max_examples,
            deadline=deadline_ms,
            database=None,
            phases=phases,
            derandomize=False,
            report_multiple_bugs=False,
            print_blob=False,
            verbosity=Verbosity.quiet,
            suppress_health_check=[
                HealthCheck.filter_too_much,
                HealthCheck.too_slow,
            ],
        )(test)
        test = seed(seed_value)(test)

        started = time.perf_counter()
        try:
            test()
        except Unsatisfiable as e:
            return PropertyResult(
                outcome=Outcome.INAPPLICABLE,
                examples=trials,
                error=str(e),
                seed=seed_value,
                duration_ms=_elapsed_ms(started),
            )
        except HypothesisException as e:
            return PropertyResult(
                outcome=Outcome.ERROR,
                examples=trials,
                error=f"{type(e).__name__}: {e}",
                seed=seed_value,
                duration_ms=_elapsed_ms(started),
            )
        except Exception as e:
            # Hypothesis replays the minimal failing example last.
            counterexample = e.args_tuple if isinstance(e, AxiomViolation) else None
            if counterexample is None and last_args:
                counterexample = last_args[0]
            return PropertyResult(
                outcome=Outcome.FAILED,
                examples=trials,
                counterexample=counterexample,
                error=f"{type(e).__name__}: {e}",
                seed=seed_value,
                duration_ms=_elapsed_ms(started),
            )

        return PropertyResult(
            outcome=Outcome.PASSED,
            examples=trials,
            seed=seed_value,
            duration_ms=_elapsed_ms(started),
        )


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def check_arity(check: Callable[..., bool]) -> int:
    """Number of positional parameters a check function expects."""
    sig = inspect.signature(check)
    return len(
        [
            p
            for p in sig.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
    )


def for_all(
    check: Callable[..., bool],
    *strategies: SearchStrategy,
    default: Optional[SearchStrategy] = None,
    description: str = "",
) -> Property:
    """
    Build a Property from a check function.

    When no explicit strategies are given, every parameter of ``check`` is
    drawn from ``default``.

    Example:
        >>> for_all(lambda x, y: x + y == y + x, default=st.integers())
    """
    if not strategies:
        arity = check_arity(check)
        if arity and default is None:
            raise ValueError("for_all needs explicit strategies or a default")
        strategies = (default,) * arity
    return Property(strategies=tuple(strategies), check=check, description=description)


"""
Exception hierarchy for lawkit.

Construction errors are raised while rule sets are being composed and are
fatal to building that suite. Law violations are collected per law and only
surface as an exception when a caller asks for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from lawkit.suite.reports import LawReport


class LawkitError(Exception):
    """Base exception for all lawkit errors."""

    pass


class ConstructionError(LawkitError):
    """A rule set could not be composed."""

    pass


class CyclicBasesError(ConstructionError):
    """The bases graph of a rule set reaches a rule set from itself."""

    def __init__(self, name: str, cycle: Sequence[str]):
        super().__init__(
            f"Rule set '{name}' has cyclic bases: {' -> '.join(cycle)}"
        )
        self.name = name
        self.cycle = list(cycle)


class DuplicateAxiomError(ConstructionError):
    """Two different properties with the same name would be checked at the same path."""

    def __init__(self, name: str, axiom: str, declared_in: Sequence[str] = ()):
        message = f"Rule set '{name}' declares axiom '{axiom}' more than once"
        if declared_in:
            message += f" (declared in {', '.join(repr(d) for d in declared_in)})"
        super().__init__(message)
        self.name = name
        self.axiom = axiom
        self.declared_in = list(declared_in)


class MissingOperationError(ConstructionError):
    """A structure descriptor lacks an operation a law builder needs."""

    def __init__(self, structure: str, operation: str):
        super().__init__(
            f"Structure '{structure}' does not provide operation '{operation}'"
        )
        self.structure = structure
        self.operation = operation


class LawViolationError(LawkitError):
    """One or more laws failed or could not be applied."""

    def __init__(self, report: "LawReport"):
        self.report = report
        super().__init__(f"Law check failed:\n{report.format()}")


class RunCancelled(BaseException):
    """
    Raised between trials once a run has been cancelled.

    Derives from BaseException so the trial engine propagates it
    immediately instead of treating it as a falsifying example.
    """

    pass

"""
Logging infrastructure for lawkit.

Provides structured logging with:
- Component-specific loggers (ruleset, render, runner, cli)
- Optional rotating file sinks
- Helpers for construction diagnostics and per-law results
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from loguru import logger

# Records logged before initialize_logging() still need a component.
logger.configure(extra={"component": "system"})


class LawkitLogger:
    """
    Logger setup for lawkit.

    Features:
    - Console sink with component column
    - Main log file and a failures-only log file
    - Log rotation and retention
    """

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        rotation: str = "10 MB",
        retention: str = "1 week",
        level: str = "INFO",
        format_string: Optional[str] = None,
        enable_file_logging: bool = False,
        enable_console_logging: bool = True,
    ):
        """
        Initialize the lawkit logger.

        Args:
            log_dir: Directory for log files
            rotation: When to rotate log files
            retention: How long to keep old logs
            level: Default log level
            format_string: Custom format string
            enable_file_logging: Whether to log to files
            enable_console_logging: Whether to log to console
        """
        self.log_dir = log_dir or Path("logs")
        self.rotation = rotation
        self.retention = retention
        self.level = level

        self.format_string = format_string or (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[component]}</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        # Remove default handler
        logger.remove()

        if enable_console_logging:
            logger.add(
                sys.stderr,
                format=self.format_string,
                level=level,
                colorize=True,
            )

        if enable_file_logging:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self._add_file_handlers()

    def _add_file_handlers(self) -> None:
        """Add the main log file and the law failures log."""
        logger.add(
            self.log_dir / "lawkit.log",
            format=self.format_string,
            level=self.level,
            rotation=self.rotation,
            retention=self.retention,
        )

        # Failed and inapplicable laws only
        logger.add(
            self.log_dir / "law_failures.log",
            format=self.format_string,
            level="WARNING",
            rotation=self.rotation,
            retention=self.retention,
            filter=lambda record: record["extra"].get("component") == "runner",
        )


def get_lawkit_logger(component: str = "system") -> Any:
    """
    Get a component-specific logger.

    Example:
        >>> log = get_lawkit_logger("runner")
        >>> log.info("Running suite", suite="field", laws=42)
    """
    return logger.bind(component=component)


def log_construction(logger_instance: Any, rule_set: str, **kwargs: Any) -> None:
    """
    Log the composition of a rule set.

    Args:
        logger_instance: Logger to use
        rule_set: Name of the rule set being composed
        **kwargs: Additional context (bases, parents, props)
    """
    logger_instance.trace(
        f"Composed rule set: {rule_set}",
        rule_set=rule_set,
        **kwargs,
    )


def log_law_result(
    logger_instance: Any, path: str, outcome: str, **kwargs: Any
) -> None:
    """
    Log the outcome of running one law.

    Passing laws are logged at DEBUG, everything else at WARNING.

    Args:
        logger_instance: Logger to use
        path: Qualified axiom path
        outcome: Outcome value ("passed", "failed", ...)
        **kwargs: Additional context
    """
    level = "debug" if outcome == "passed" else "warning"
    getattr(logger_instance, level)(
        f"Law {path}: {outcome.upper()}",
        path=path,
        outcome=outcome,
        timestamp=datetime.now(timezone.utc).isoformat(),
        **kwargs,
    )


# Global logger instance
_lawkit_logger: Optional[LawkitLogger] = None


def initialize_logging(
    log_dir: Optional[Path] = None, level: str = "INFO", **kwargs: Any
) -> LawkitLogger:
    """
    Initialize the lawkit logging system.

    This should be called once at application startup.

    Args:
        log_dir: Directory for log files
        level: Default log level
        **kwargs: Additional configuration for LawkitLogger

    Returns:
        Configured LawkitLogger instance
    """
    global _lawkit_logger
    _lawkit_logger = LawkitLogger(log_dir=log_dir, level=level, **kwargs)
    return _lawkit_logger


def get_logger_instance() -> Optional[LawkitLogger]:
    """Get the global logger instance."""
    return _lawkit_logger

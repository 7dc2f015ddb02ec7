"""
Unit tests for logging infrastructure.

Tests LawkitLogger, component loggers and the structured logging helpers.
"""

from pathlib import Path

import pytest
from loguru import logger

from lawkit.logging import (
    LawkitLogger,
    get_lawkit_logger,
    get_logger_instance,
    initialize_logging,
    log_construction,
    log_law_result,
)


@pytest.fixture
def captured():
    """Collect log records emitted while the test runs."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


class TestLawkitLogger:
    """Tests for LawkitLogger class."""

    def test_logger_initialization(self, tmp_path: Path) -> None:
        """Test logger initialization."""
        lawkit_logger = LawkitLogger(
            log_dir=tmp_path,
            level="INFO",
            enable_file_logging=False,
            enable_console_logging=False,
        )
        assert lawkit_logger.log_dir == tmp_path
        assert lawkit_logger.level == "INFO"

    def test_file_logging_creates_directory(self, tmp_path: Path) -> None:
        """Test that file logging creates the log directory and files."""
        log_dir = tmp_path / "logs"
        LawkitLogger(log_dir=log_dir, enable_file_logging=True, enable_console_logging=False)

        get_lawkit_logger("runner").warning("Law ring.a: FAILED")
        logger.remove()

        assert (log_dir / "lawkit.log").exists()
        assert "ring.a" in (log_dir / "law_failures.log").read_text()

    def test_get_component_logger(self, captured) -> None:
        """Test getting a component-specific logger."""
        get_lawkit_logger("render").info("rendered")

        assert captured[-1]["extra"]["component"] == "render"

    def test_initialize_logging_sets_global(self, tmp_path: Path) -> None:
        instance = initialize_logging(
            log_dir=tmp_path, level="WARNING", enable_console_logging=False
        )

        assert get_logger_instance() is instance
        assert instance.level == "WARNING"


class TestLoggingHelpers:
    """Tests for structured logging helpers."""

    def test_log_construction(self, captured) -> None:
        log_construction(get_lawkit_logger("ruleset"), "ring", bases=["additive"])

        record = captured[-1]
        assert record["level"].name == "TRACE"
        assert record["extra"]["rule_set"] == "ring"
        assert record["extra"]["bases"] == ["additive"]

    def test_passing_law_logged_at_debug(self, captured) -> None:
        log_law_result(get_lawkit_logger("runner"), "ring.a", "passed", seed=1)

        record = captured[-1]
        assert record["level"].name == "DEBUG"
        assert record["extra"]["path"] == "ring.a"
        assert record["extra"]["seed"] == 1

    def test_failing_law_logged_at_warning(self, captured) -> None:
        log_law_result(get_lawkit_logger("runner"), "ring.b", "failed")

        record = captured[-1]
        assert record["level"].name == "WARNING"
        assert record["message"] == "Law ring.b: FAILED"

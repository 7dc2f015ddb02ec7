"""
Unit tests for configuration system.

These tests verify that the configuration system works correctly
and can load settings from environment variables.
"""

import pytest
from pydantic import ValidationError

from lawkit.config import Config, LawsConfig, LogConfig, RunnerConfig


def test_config_has_defaults() -> None:
    """Test that Config initializes with sensible defaults."""
    config = Config()

    assert config.runner.max_examples == 100
    assert config.runner.seed == 0
    assert config.runner.workers == 1
    assert config.runner.shrink is True
    assert config.runner.deadline_ms is None

    assert config.laws.strict_duplicates is True

    assert config.logging.level == "INFO"


def test_runner_config_rejects_bad_values() -> None:
    """Test that RunnerConfig validates its bounds."""
    with pytest.raises(ValidationError):
        RunnerConfig(max_examples=0)
    with pytest.raises(ValidationError):
        RunnerConfig(workers=0)
    with pytest.raises(ValidationError):
        RunnerConfig(deadline_ms=-5)


def test_runner_config_copy_with_overrides() -> None:
    """Test deriving run settings from the defaults."""
    settings = RunnerConfig().model_copy(update={"seed": 11, "workers": 4})

    assert settings.seed == 11
    assert settings.workers == 4
    assert settings.max_examples == 100


def test_log_config_defaults() -> None:
    """Test LogConfig default values."""
    log_config = LogConfig()

    assert log_config.level == "INFO"
    assert log_config.rotation == "10 MB"
    assert log_config.retention == "1 week"
    assert log_config.enable_file_logging is False
    assert log_config.enable_console_logging is True


def test_log_config_rejects_unknown_level() -> None:
    """Test that LogConfig validates the level."""
    with pytest.raises(ValidationError):
        LogConfig(level="LOUD")


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("LAWKIT_MAX_EXAMPLES", "250")
    monkeypatch.setenv("LAWKIT_SEED", "42")
    monkeypatch.setenv("LAWKIT_WORKERS", "3")
    monkeypatch.setenv("LAWKIT_SHRINK", "false")
    monkeypatch.setenv("LAWKIT_DEADLINE_MS", "500")
    monkeypatch.setenv("LAWKIT_STRICT_DUPLICATES", "no")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.runner.max_examples == 250
    assert config.runner.seed == 42
    assert config.runner.workers == 3
    assert config.runner.shrink is False
    assert config.runner.deadline_ms == 500
    assert config.laws.strict_duplicates is False
    assert config.logging.level == "DEBUG"


def test_config_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that unset variables fall back to defaults."""
    for name in (
        "LAWKIT_MAX_EXAMPLES",
        "LAWKIT_SEED",
        "LAWKIT_WORKERS",
        "LAWKIT_SHRINK",
        "LAWKIT_DEADLINE_MS",
        "LAWKIT_STRICT_DUPLICATES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = Config.from_env()

    assert config.runner == RunnerConfig()
    assert config.laws == LawsConfig()
    assert config.logging.level == "INFO"

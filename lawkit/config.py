"""
Configuration management for lawkit.

This module provides centralized configuration for all system components:
- Trial engine settings (example budget, seeding, workers, shrinking)
- Rule set construction policy
- Logging settings
"""

import os
from typing import Literal, Optional, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class RunnerConfig(BaseModel):
    """Configuration for executing law suites."""

    max_examples: int = Field(
        default=100, gt=0, description="Number of sampled trials per law"
    )
    seed: int = Field(
        default=0, description="Run seed; every law derives its own seed from it"
    )
    workers: int = Field(
        default=1, gt=0, description="Number of laws executed concurrently"
    )
    shrink: bool = Field(
        default=True, description="Shrink failing inputs to a minimal counterexample"
    )
    deadline_ms: Optional[int] = Field(
        default=None,
        gt=0,
        description="Per-trial deadline in milliseconds (None disables it)",
    )


class LawsConfig(BaseModel):
    """Configuration for rule set construction."""

    strict_duplicates: bool = Field(
        default=True,
        description="Raise on duplicate axiom names instead of logging a warning",
    )


class LogConfig(BaseModel):
    """Configuration for logging system."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[component]}</cyan> | "
        "<level>{message}</level>",
        description="Log message format",
    )
    rotation: str = Field(default="10 MB", description="Log file rotation size")
    retention: str = Field(default="1 week", description="Log file retention period")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, description="Whether to enable file logging"
    )
    enable_console_logging: bool = Field(
        default=True, description="Whether to enable console logging"
    )


class Config(BaseModel):
    """Main configuration object for lawkit."""

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    laws: LawsConfig = Field(default_factory=LawsConfig)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        deadline = os.getenv("LAWKIT_DEADLINE_MS")
        return cls(
            runner=RunnerConfig(
                max_examples=int(os.getenv("LAWKIT_MAX_EXAMPLES", "100")),
                seed=int(os.getenv("LAWKIT_SEED", "0")),
                workers=int(os.getenv("LAWKIT_WORKERS", "1")),
                shrink=_env_bool("LAWKIT_SHRINK", True),
                deadline_ms=int(deadline) if deadline else None,
            ),
            laws=LawsConfig(
                strict_duplicates=_env_bool("LAWKIT_STRICT_DUPLICATES", True),
            ),
            logging=LogConfig(
                level=cast(
                    Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    os.getenv("LOG_LEVEL", "INFO"),
                ),
                enable_file_logging=_env_bool("LAWKIT_LOG_TO_FILE", False),
            ),
        )


# Global configuration instance
# This can be imported throughout the codebase
config = Config.from_env()

"""
Logging infrastructure for lawkit.

Provides component-bound loguru loggers and structured logging helpers.
"""

from .logger import (
    LawkitLogger,
    get_lawkit_logger,
    initialize_logging,
    get_logger_instance,
    log_construction,
    log_law_result,
)

__all__ = [
    "LawkitLogger",
    "get_lawkit_logger",
    "initialize_logging",
    "get_logger_instance",
    "log_construction",
    "log_law_result",
]

"""Configuration module for domain-kernel."""

from .settings import (
    KernelSettings,
    LogLevel,
    LogVerbosity,
    LogFormat,
    get_settings,
    reset_settings,
)
from .logging_config import (
    LoggingConfig,
    setup_logging,
    setup_logging_on_import,
    get_logger,
    get_log_level_from_verbosity,
)

__all__ = [
    "KernelSettings",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "get_settings",
    "reset_settings",
    "LoggingConfig",
    "setup_logging",
    "setup_logging_on_import",
    "get_logger",
    "get_log_level_from_verbosity",
]

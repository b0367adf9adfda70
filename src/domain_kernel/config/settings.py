"""
Settings for domain-kernel.

Only the ambient logging setup is configurable; no kernel semantics depend
on these values.
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


class KernelSettings(BaseSettings):
    """Environment-driven settings, read from ``DOMAIN_KERNEL_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOMAIN_KERNEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Explicit level wins over the verbosity mapping
    log_level: Optional[LogLevel] = Field(default=None)
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL)
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)
    log_to_console: bool = Field(default=False)
    log_propagate: bool = Field(default=True)
    configure_logging_on_import: bool = Field(default=True)


@lru_cache()
def get_settings() -> KernelSettings:
    """Get cached kernel settings instance."""
    return KernelSettings()


def reset_settings() -> None:
    """Drop the cached settings so the environment is read again."""
    get_settings.cache_clear()

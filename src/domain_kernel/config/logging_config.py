"""Centralized logging configuration for domain-kernel.

Configures the ``domain_kernel`` logger namespace from KernelSettings.
Handlers installed by the host application, on the root logger or
elsewhere, are never touched.
"""

import logging
import sys
import warnings
from typing import Optional

from pydantic import ValidationError as SettingsValidationError

from .settings import KernelSettings, LogFormat, LogLevel, LogVerbosity, get_settings

KERNEL_LOGGER_NAME = "domain_kernel"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map.get(LogVerbosity(verbosity.upper()), LogLevel.WARNING.value)


class LoggingConfig:
    """Logging configuration manager for the kernel namespace."""

    # Console handler owned by the kernel, replaced on every configure
    _console_handler: Optional[logging.Handler] = None

    @classmethod
    def effective_level(cls, settings: KernelSettings) -> str:
        """Resolve the level from an explicit override or the verbosity mode."""
        if settings.log_level is not None:
            return settings.log_level.value
        return get_log_level_from_verbosity(settings.log_verbosity.value)

    @classmethod
    def create_console_handler(cls, settings: KernelSettings) -> logging.Handler:
        """Create a stdout handler using the configured format."""
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(cls.effective_level(settings))
        handler.setFormatter(logging.Formatter(_FORMATS[settings.log_format], datefmt=_DATE_FORMAT))
        return handler

    @classmethod
    def configure(cls, settings: Optional[KernelSettings] = None) -> None:
        """Configure the kernel logger based on environment settings."""
        settings = settings or get_settings()
        effective_log_level = cls.effective_level(settings)

        kernel_logger = logging.getLogger(KERNEL_LOGGER_NAME)
        kernel_logger.setLevel(effective_log_level)
        kernel_logger.propagate = settings.log_propagate

        if cls._console_handler is not None:
            kernel_logger.removeHandler(cls._console_handler)
            cls._console_handler.close()
            cls._console_handler = None

        if settings.log_to_console:
            cls._console_handler = cls.create_console_handler(settings)
            kernel_logger.addHandler(cls._console_handler)

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={effective_log_level}, "
            f"format={settings.log_format.value}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logger = logging.getLogger(module_name)
        logger.setLevel(getattr(logging, level.upper()))


def setup_logging(settings: Optional[KernelSettings] = None) -> None:
    """Setup logging configuration from environment variables.

    This is the entry point for applications that configure the kernel
    logger themselves at startup.
    """
    LoggingConfig.configure(settings)


def setup_logging_on_import() -> None:
    """Configure logging when the package is imported.

    Invalid ``DOMAIN_KERNEL_*`` values must not make the package unusable,
    so they fall back to defaults with a warning.
    """
    try:
        settings = get_settings()
    except SettingsValidationError as e:
        warnings.warn(
            f"Ignoring invalid domain-kernel logging settings, using defaults: {e}",
            RuntimeWarning,
            stacklevel=2
        )
        settings = KernelSettings.model_construct()

    if settings.configure_logging_on_import:
        LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger (usually for ``__name__``)."""
    return logging.getLogger(name)

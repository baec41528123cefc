"""Configuration module for posix-identity."""

from .settings import (
    DEFAULT_MAXIMUM_UID,
    IdentitySettings,
    get_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_MAXIMUM_UID",
    "IdentitySettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]

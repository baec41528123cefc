"""Exceptions module for posix-identity."""

from .base import (
    PosixIdentityError,
    create_error_details,
)

from .domain import (
    DeveloperError,
    UnknownCategoryError,
    ConfigurationError,
)

__all__ = [
    "PosixIdentityError",
    "create_error_details",
    "DeveloperError",
    "UnknownCategoryError",
    "ConfigurationError",
]

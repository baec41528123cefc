"""Domain-specific exceptions for posix-identity.

Lookup failures are not exceptions in this library: an unknown user or
group resolves to None. The classes here cover caller mistakes and broken
configuration only.
"""

from .base import PosixIdentityError


# Programmer Errors
class DeveloperError(PosixIdentityError):
    """Raised when the library is called incorrectly."""
    pass


class UnknownCategoryError(DeveloperError):
    """Raised when an account category alias is not recognized."""
    pass


# Configuration Errors
class ConfigurationError(PosixIdentityError):
    """Raised when there's a configuration issue."""
    pass

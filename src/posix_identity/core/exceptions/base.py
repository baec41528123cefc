"""Base exceptions for posix-identity.

All exceptions raised by the library inherit from PosixIdentityError and
carry an error code plus a details dictionary for easier debugging.
"""

from typing import Any, Dict, Optional


class PosixIdentityError(Exception):
    """Base exception for all posix-identity errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_details(exception: PosixIdentityError) -> Dict[str, Any]:
    """Flatten an exception into a dictionary suitable for structured logs.

    Args:
        exception: The posix-identity exception

    Returns:
        Error dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

"""Account database adapters."""

from .posix_adapter import PosixAccountDatabase, LOOKUP_ERRORS

__all__ = ["PosixAccountDatabase", "LOOKUP_ERRORS"]

"""Accounts feature module."""

from .entities import (
    AccountCategory,
    CategorySpec,
    AccountRecord,
    GroupRecord,
    UserRecord,
    AccountDatabase,
)
from .adapters import PosixAccountDatabase
from .services import IdentityResolver, get_resolver, normalize_key

__all__ = [
    "AccountCategory",
    "CategorySpec",
    "AccountRecord",
    "GroupRecord",
    "UserRecord",
    "AccountDatabase",
    "PosixAccountDatabase",
    "IdentityResolver",
    "get_resolver",
    "normalize_key",
]

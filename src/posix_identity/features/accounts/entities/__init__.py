"""Account entities."""

from .category import AccountCategory, CategorySpec
from .records import AccountRecord, GroupRecord, UserRecord
from .protocols import AccountDatabase

__all__ = [
    "AccountCategory",
    "CategorySpec",
    "AccountRecord",
    "GroupRecord",
    "UserRecord",
    "AccountDatabase",
]

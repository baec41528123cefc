"""Protocol for account database backends.

The resolver only talks to this interface, so tests and alternative
backends can stand in for the host databases.
"""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from .category import AccountCategory
from .records import AccountRecord


@runtime_checkable
class AccountDatabase(Protocol):
    """Read-only access to the user and group databases."""

    @abstractmethod
    def by_id(self, category: AccountCategory, account_id: int) -> Optional[AccountRecord]:
        """Indexed lookup by numeric id; None when not found."""
        ...

    @abstractmethod
    def by_name(self, category: AccountCategory, name: str) -> Optional[AccountRecord]:
        """Indexed lookup by name; None when not found."""
        ...

    @abstractmethod
    def enumerate(self, category: AccountCategory) -> List[AccountRecord]:
        """Every record of the category; empty when enumeration fails."""
        ...

    @abstractmethod
    def group_list(self, username: str, primary_gid: int) -> Optional[List[int]]:
        """Group ids the user belongs to, or None when the OS cannot tell."""
        ...

"""Account categories and the OS calls that serve them."""

import grp
import pwd
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Sequence, Union

from ....core.exceptions import UnknownCategoryError


class AccountCategory(str, Enum):
    """Which account database a lookup targets."""
    GROUP = "group"
    USER = "passwd"

    @classmethod
    def parse(cls, value: Union["AccountCategory", str]) -> "AccountCategory":
        """Accept a member or one of its symbolic aliases.

        Raises:
            UnknownCategoryError: The alias is not known
        """
        if isinstance(value, cls):
            return value
        try:
            return _CATEGORY_ALIASES[str(value).lower()]
        except KeyError:
            raise UnknownCategoryError(
                f"Unknown account category: {value!r}",
                details={"category": value, "known": sorted(_CATEGORY_ALIASES)},
            ) from None

    @property
    def spec(self) -> "CategorySpec":
        return _CATEGORY_SPECS[self]

    @property
    def id_field(self) -> str:
        return self.spec.id_field


@dataclass(frozen=True)
class CategorySpec:
    """Id field name plus the indexed and enumeration calls for a category."""
    id_field: str
    by_id: Callable[[int], Any]
    by_name: Callable[[str], Any]
    enumerate_all: Callable[[], Sequence[Any]]


_CATEGORY_SPECS: Dict[AccountCategory, CategorySpec] = {
    AccountCategory.GROUP: CategorySpec(
        id_field="gid",
        by_id=grp.getgrgid,
        by_name=grp.getgrnam,
        enumerate_all=grp.getgrall,
    ),
    AccountCategory.USER: CategorySpec(
        id_field="uid",
        by_id=pwd.getpwuid,
        by_name=pwd.getpwnam,
        enumerate_all=pwd.getpwall,
    ),
}

_CATEGORY_ALIASES: Dict[str, AccountCategory] = {
    "group": AccountCategory.GROUP,
    "gr": AccountCategory.GROUP,
    "user": AccountCategory.USER,
    "pw": AccountCategory.USER,
    "passwd": AccountCategory.USER,
}

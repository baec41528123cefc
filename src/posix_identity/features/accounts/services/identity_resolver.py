"""
Identity resolver.

Resolves user and group ids and names through an AccountDatabase. Some
account backends answer every indexed query with the same cached record,
so id lookups are verified with a round trip (id -> name -> id, or
name -> id -> name) and fall back to a full scan of the database when
the two directions disagree.
"""
import logging
import re
from functools import lru_cache
from typing import Any, List, Optional, Union

from ....config.settings import IdentitySettings, get_settings
from ....core.exceptions import DeveloperError
from ..adapters.posix_adapter import PosixAccountDatabase
from ..entities.category import AccountCategory
from ..entities.protocols import AccountDatabase
from ..entities.records import AccountRecord

logger = logging.getLogger(__name__)

LookupKey = Union[int, str]
CategoryLike = Union[AccountCategory, str]

_NUMERIC_KEY = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def normalize_key(key: Any) -> LookupKey:
    """Turn numeric strings into ints; leave names alone.

    Raises:
        DeveloperError: The key is neither an int nor a string
    """
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise DeveloperError(
            f"Expected a numeric id or a name, got {type(key).__name__}",
            details={"key": repr(key)},
        )
    if isinstance(key, str) and _NUMERIC_KEY.match(key):
        return int(key)
    return key


class IdentityResolver:
    """Looks up fields of user and group records."""

    def __init__(
        self,
        settings: Optional[IdentitySettings] = None,
        database: Optional[AccountDatabase] = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.database = database if database is not None else PosixAccountDatabase()

    def get_field(self, category: CategoryLike, field: str, key: LookupKey) -> Any:
        """Return ``field`` of the record identified by ``key``.

        Integer keys (and numeric strings) use the by-id lookup, anything
        else the by-name lookup. Unknown accounts, unknown fields and ids
        outside 0..maximum_uid give None.

        Raises:
            DeveloperError: No key was given
        """
        if key is None or key == "":
            raise DeveloperError(
                "Did not get id from caller",
                details={"category": str(category), "field": field},
            )
        category = AccountCategory.parse(category)
        key = normalize_key(key)

        if isinstance(key, int):
            if self._is_silly_id(field, key):
                return None
            record = self.database.by_id(category, key)
        else:
            record = self.database.by_name(category, key)

        if record is None:
            return None
        return self._read_field(category, record, field)

    def _is_silly_id(self, field: str, key: int) -> bool:
        if 0 <= key <= self.settings.maximum_uid:
            return False
        logger.error(f"Tried to get {field} field for silly id {key}")
        return True

    @staticmethod
    def _read_field(category: AccountCategory, record: AccountRecord, field: str) -> Any:
        if field != "id" and field not in type(record).model_fields:
            logger.debug(f"{category.value} record {record.name!r} has no field {field!r}")
            return None
        return getattr(record, field)

    def resolve_id(self, category: CategoryLike, key: LookupKey) -> Any:
        """Return the numeric id for ``key`` after a round-trip check.

        When the round trip disagrees the result of ``search_field`` keyed
        on the original value is returned instead, whatever it is.
        """
        category = AccountCategory.parse(category)
        id_field = category.id_field
        key = normalize_key(key)

        if isinstance(key, int):
            name = self.get_field(category, "name", key)
            if name is None:
                return None
            found_id = self.get_field(category, id_field, name)
            if found_id == key:
                return found_id
            logger.debug(
                f"{category.value} id {key} resolved to {name!r} which maps back to {found_id}, "
                f"searching all entries"
            )
        else:
            found_id = self.get_field(category, id_field, key)
            if found_id is None:
                return None
            name = self.get_field(category, "name", found_id)
            if name == key:
                return found_id
            logger.debug(
                f"{category.value} name {key!r} resolved to {id_field} {found_id} which maps back "
                f"to {name!r}, searching all entries"
            )

        return self.search_field(category, id_field, key)

    def gid(self, group: LookupKey) -> Any:
        """Numeric gid for a group name or id."""
        return self.resolve_id(AccountCategory.GROUP, group)

    def uid(self, user: LookupKey) -> Any:
        """Numeric uid for a user name or id."""
        return self.resolve_id(AccountCategory.USER, user)

    def search_field(self, category: CategoryLike, field: str, key: LookupKey) -> Any:
        """Scan every record of the category for ``key``.

        Integer keys match the record's id, strings match its name. The
        first match's ``field`` is returned; None when nothing matches.
        Ids outside the allowed range are refused before scanning.
        """
        category = AccountCategory.parse(category)
        key = normalize_key(key)
        match_id = isinstance(key, int)
        if match_id and self._is_silly_id(field, key):
            return None

        for record in self.database.enumerate(category):
            matched = record.id == key if match_id else record.name == key
            if matched:
                return self._read_field(category, record, field)
        return None

    def groups_of(self, username: str) -> List[str]:
        """Names of the groups ``username`` belongs to, without duplicates."""
        groups = None
        if self.settings.use_grouplist:
            groups = self._groups_from_grouplist(username)
        if groups is None:
            groups = [
                record.name
                for record in self.database.enumerate(AccountCategory.GROUP)
                if username in record.members
            ]

        unique_groups = list(dict.fromkeys(groups))
        if len(unique_groups) != len(groups):
            logger.debug(f"Removed duplicate groups for {username!r}: {groups}")
        return unique_groups

    def _groups_from_grouplist(self, username: str) -> Optional[List[str]]:
        user = self.database.by_name(AccountCategory.USER, username)
        if user is None:
            logger.debug(f"User {username!r} not found, scanning the group database")
            return None
        gids = self.database.group_list(username, user.gid)
        if gids is None:
            logger.debug(f"No group list for {username!r}, scanning the group database")
            return None

        names = []
        for gid in gids:
            group = self.database.by_id(AccountCategory.GROUP, gid)
            if group is None:
                logger.debug(f"Group id {gid} of {username!r} has no group entry, scanning the group database")
                return None
            names.append(group.name)
        return names


@lru_cache()
def get_resolver() -> IdentityResolver:
    """Default resolver over the host databases."""
    return IdentityResolver()

"""Account database adapter over the host ``pwd`` and ``grp`` modules."""

import logging
import os
from typing import List, Optional

from ..entities.category import AccountCategory
from ..entities.records import AccountRecord, GroupRecord, UserRecord

logger = logging.getLogger(__name__)

# What the stdlib raises for an unknown or unrepresentable account.
LOOKUP_ERRORS = (KeyError, OverflowError, TypeError, ValueError)


class PosixAccountDatabase:
    """Reads the host account databases.

    Every "not found" style exception is turned into None (or an empty
    list) here, so callers never see the stdlib's KeyError.
    """

    def by_id(self, category: AccountCategory, account_id: int) -> Optional[AccountRecord]:
        try:
            entry = category.spec.by_id(account_id)
        except LOOKUP_ERRORS as e:
            logger.debug(f"No {category.value} entry for id {account_id}: {e}")
            return None
        return self._to_record(category, entry)

    def by_name(self, category: AccountCategory, name: str) -> Optional[AccountRecord]:
        try:
            entry = category.spec.by_name(name)
        except LOOKUP_ERRORS as e:
            logger.debug(f"No {category.value} entry named {name!r}: {e}")
            return None
        return self._to_record(category, entry)

    def enumerate(self, category: AccountCategory) -> List[AccountRecord]:
        try:
            entries = category.spec.enumerate_all()
        except (OSError,) + LOOKUP_ERRORS as e:
            logger.warning(f"Could not enumerate the {category.value} database: {e}")
            return []
        return [self._to_record(category, entry) for entry in entries]

    def group_list(self, username: str, primary_gid: int) -> Optional[List[int]]:
        getgrouplist = getattr(os, "getgrouplist", None)
        if getgrouplist is None:
            logger.debug("os.getgrouplist is not available on this platform")
            return None
        try:
            return list(getgrouplist(username, primary_gid))
        except (OSError,) + LOOKUP_ERRORS as e:
            logger.debug(f"getgrouplist failed for {username!r}: {e}")
            return None

    @staticmethod
    def _to_record(category: AccountCategory, entry) -> AccountRecord:
        if category is AccountCategory.GROUP:
            return GroupRecord.from_struct(entry)
        return UserRecord.from_struct(entry)

"""Pytest configuration and fixtures for posix-identity tests."""

from typing import Dict, Iterable, List, Optional
from unittest.mock import MagicMock

import pytest

from posix_identity.config.settings import IdentitySettings, get_settings
from posix_identity.features.accounts import (
    AccountCategory,
    GroupRecord,
    IdentityResolver,
    PosixAccountDatabase,
    UserRecord,
    get_resolver,
)


class InMemoryAccountDatabase:
    """AccountDatabase backed by plain lists."""

    def __init__(
        self,
        users: Iterable[UserRecord] = (),
        groups: Iterable[GroupRecord] = (),
        group_lists: Optional[Dict[str, List[int]]] = None,
    ):
        self.users = list(users)
        self.groups = list(groups)
        self.group_lists = group_lists or {}

    def _records(self, category):
        return self.groups if category is AccountCategory.GROUP else self.users

    def by_id(self, category, account_id):
        return next((r for r in self._records(category) if r.id == account_id), None)

    def by_name(self, category, name):
        return next((r for r in self._records(category) if r.name == name), None)

    def enumerate(self, category):
        return list(self._records(category))

    def group_list(self, username, primary_gid):
        return self.group_lists.get(username)


@pytest.fixture(autouse=True)
def clear_cached_defaults():
    """Drop cached settings and resolver around every test."""
    get_settings.cache_clear()
    get_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_resolver.cache_clear()


@pytest.fixture
def settings():
    """Settings with the default id ceiling."""
    return IdentitySettings()


@pytest.fixture
def mock_database():
    """Mock account database for testing."""
    return MagicMock(spec=PosixAccountDatabase)


@pytest.fixture
def resolver(settings, mock_database):
    """Resolver wired to the mock database."""
    return IdentityResolver(settings=settings, database=mock_database)


@pytest.fixture
def membership_groups():
    """Group table with a duplicated entry for group1."""
    return [
        GroupRecord(name="group1", gid=1001, members=("user1", "user2")),
        GroupRecord(name="group2", gid=1002, members=("user2",)),
        GroupRecord(name="group1", gid=1001, members=("user1", "user2")),
        GroupRecord(name="group3", gid=1003, members=("user1",)),
        GroupRecord(name="group4", gid=1004, members=("user2",)),
    ]


@pytest.fixture
def sample_user():
    """Sample user record for testing."""
    return UserRecord(
        name="alice",
        uid=1000,
        gid=100,
        gecos="Alice Example",
        dir="/home/alice",
        shell="/bin/bash",
    )


@pytest.fixture
def make_database():
    """Factory for in-memory account databases."""
    return InMemoryAccountDatabase

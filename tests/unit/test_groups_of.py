"""Tests for group membership enumeration."""

import logging
from unittest.mock import MagicMock

import pytest

from posix_identity.config.settings import IdentitySettings
from posix_identity.features.accounts import (
    AccountCategory,
    GroupRecord,
    IdentityResolver,
    UserRecord,
)


class TestGroupScan:
    """Membership taken from the group database member lists."""

    def test_returns_the_groups_of_the_user(self, settings, make_database, membership_groups):
        resolver = IdentityResolver(settings=settings, database=make_database(groups=membership_groups))

        assert resolver.groups_of("user1") == ["group1", "group3"]

    def test_scan_without_grouplist(self, make_database, membership_groups):
        database = make_database(
            users=[UserRecord(name="user1", uid=1000, gid=1001)],
            groups=membership_groups,
            group_lists={"user1": [1004]},
        )
        resolver = IdentityResolver(settings=IdentitySettings(use_grouplist=False), database=database)

        assert resolver.groups_of("user2") == ["group1", "group2", "group4"]
        assert resolver.groups_of("user1") == ["group1", "group3"]

    def test_unknown_user_has_no_groups(self, settings, make_database, membership_groups):
        resolver = IdentityResolver(settings=settings, database=make_database(groups=membership_groups))
        assert resolver.groups_of("nobody") == []

    def test_enumeration_failure_is_empty(self, resolver, mock_database):
        mock_database.by_name.return_value = None
        mock_database.enumerate.return_value = []

        assert resolver.groups_of("user1") == []
        mock_database.enumerate.assert_called_once_with(AccountCategory.GROUP)

    def test_duplicates_are_logged(self, settings, make_database, membership_groups, caplog):
        resolver = IdentityResolver(settings=settings, database=make_database(groups=membership_groups))
        caplog.set_level(logging.DEBUG, logger="posix_identity")

        resolver.groups_of("user1")

        assert "Removed duplicate groups for 'user1'" in caplog.text


class TestGroupList:
    """Membership taken from the OS supplementary group query."""

    @pytest.fixture
    def database(self, make_database):
        return make_database(
            users=[UserRecord(name="alice", uid=1000, gid=100)],
            groups=[
                GroupRecord(name="users", gid=100),
                GroupRecord(name="sudo", gid=27, members=("alice",)),
                GroupRecord(name="docker", gid=998, members=("alice",)),
            ],
            group_lists={"alice": [100, 27, 100]},
        )

    def test_group_ids_are_named(self, settings, database):
        database.enumerate = MagicMock()
        resolver = IdentityResolver(settings=settings, database=database)

        assert resolver.groups_of("alice") == ["users", "sudo"]
        database.enumerate.assert_not_called()

    def test_falls_back_when_the_os_cannot_answer(self, settings, database):
        database.group_lists = {}
        resolver = IdentityResolver(settings=settings, database=database)

        assert resolver.groups_of("alice") == ["sudo", "docker"]

    def test_falls_back_when_a_group_id_has_no_entry(self, settings, database):
        database.group_lists = {"alice": [100, 4040]}
        resolver = IdentityResolver(settings=settings, database=database)

        assert resolver.groups_of("alice") == ["sudo", "docker"]

"""Immutable account records built from the OS structures."""

from abc import ABC, abstractmethod
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class AccountRecord(BaseModel, ABC):
    """Fields shared by user and group records.

    Abstract: only GroupRecord and UserRecord are instantiated.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Account name")
    passwd: str = Field(default="", description="Password field, usually a placeholder")

    @property
    @abstractmethod
    def id(self) -> int:
        """Numeric id of the account."""


class GroupRecord(AccountRecord):
    """A row of the group database."""
    gid: int = Field(description="Numeric group id")
    members: Tuple[str, ...] = Field(default=(), description="Names of supplementary members")

    @property
    def id(self) -> int:
        return self.gid

    @classmethod
    def from_struct(cls, entry) -> "GroupRecord":
        """Build from a ``grp.struct_group``."""
        return cls(
            name=entry.gr_name,
            passwd=entry.gr_passwd or "",
            gid=entry.gr_gid,
            members=tuple(entry.gr_mem),
        )


class UserRecord(AccountRecord):
    """A row of the passwd database."""
    uid: int = Field(description="Numeric user id")
    gid: int = Field(description="Primary group id")
    gecos: str = Field(default="", description="Comment / full name")
    dir: str = Field(default="", description="Home directory")
    shell: str = Field(default="", description="Login shell")

    @property
    def id(self) -> int:
        return self.uid

    @classmethod
    def from_struct(cls, entry) -> "UserRecord":
        """Build from a ``pwd.struct_passwd``."""
        return cls(
            name=entry.pw_name,
            passwd=entry.pw_passwd or "",
            uid=entry.pw_uid,
            gid=entry.pw_gid,
            gecos=entry.pw_gecos or "",
            dir=entry.pw_dir or "",
            shell=entry.pw_shell or "",
        )

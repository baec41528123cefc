"""posix-identity - user and group lookups over the host account databases.

Resolves uids, gids, names and other record fields through ``pwd`` and
``grp``, verifying indexed lookups with a round trip and falling back to a
full database scan when the backend answers inconsistently.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    DEFAULT_MAXIMUM_UID,
    IdentitySettings,
    get_settings,
    get_logger,
    LoggingConfig,
)

from .core.exceptions import (
    PosixIdentityError,
    DeveloperError,
    UnknownCategoryError,
    ConfigurationError,
)

from .features.accounts import (
    AccountCategory,
    CategorySpec,
    AccountRecord,
    GroupRecord,
    UserRecord,
    AccountDatabase,
    PosixAccountDatabase,
    IdentityResolver,
    get_resolver,
)


def get_field(category, field, key):
    """``IdentityResolver.get_field`` on the default resolver."""
    return get_resolver().get_field(category, field, key)


def search_field(category, field, key):
    """``IdentityResolver.search_field`` on the default resolver."""
    return get_resolver().search_field(category, field, key)


def gid(group):
    """Numeric gid of a group name or id, or None."""
    return get_resolver().gid(group)


def uid(user):
    """Numeric uid of a user name or id, or None."""
    return get_resolver().uid(user)


def groups_of(username):
    """Names of the groups a user belongs to."""
    return get_resolver().groups_of(username)


__all__ = [
    "__version__",
    "DEFAULT_MAXIMUM_UID",
    "IdentitySettings",
    "get_settings",
    "get_logger",
    "LoggingConfig",
    "PosixIdentityError",
    "DeveloperError",
    "UnknownCategoryError",
    "ConfigurationError",
    "AccountCategory",
    "CategorySpec",
    "AccountRecord",
    "GroupRecord",
    "UserRecord",
    "AccountDatabase",
    "PosixAccountDatabase",
    "IdentityResolver",
    "get_resolver",
    "get_field",
    "search_field",
    "gid",
    "uid",
    "groups_of",
]

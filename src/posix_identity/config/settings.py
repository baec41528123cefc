"""
Settings for posix-identity.

Values are read from the environment (prefix ``POSIX_IDENTITY_``) or a
``.env`` file and are immutable once loaded.
"""
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError


# Highest id accepted before a lookup is refused. Some platforms hand back
# wrapped-around sentinel ids such as 4294967295 (-1 as unsigned).
DEFAULT_MAXIMUM_UID = 4294967290


class IdentitySettings(BaseSettings):
    """Account lookup settings."""

    model_config = SettingsConfigDict(
        env_prefix="POSIX_IDENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    maximum_uid: int = Field(
        default=DEFAULT_MAXIMUM_UID,
        ge=0,
        description="Largest uid/gid that will be looked up",
    )
    use_grouplist: bool = Field(
        default=True,
        description="Ask the OS for supplementary groups before scanning the group database",
    )


@lru_cache()
def get_settings() -> IdentitySettings:
    """Load settings once and reuse them.

    Raises:
        ConfigurationError: The environment holds an invalid value
    """
    try:
        return IdentitySettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid posix-identity configuration: {e}",
            details={"errors": e.errors(include_url=False)},
        ) from e

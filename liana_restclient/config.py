"""
Client configuration for the Liana REST client library.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .constants import (
    ENV_API_URL,
    ENV_API_VERSION,
    ENV_PREFIX,
    ENV_REALM,
    ENV_SECRET,
    ENV_USER_ID,
    SUPPORTED_API_VERSIONS,
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable connection settings shared by every call of a client.

    Args:
        user_id: Numeric API user identifier
        secret: Shared HMAC secret (never shown in repr)
        api_url: Base URL of the API, e.g. https://rest.example.com
        api_version: API version, one of SUPPORTED_API_VERSIONS
        realm: Authorization realm label
    """

    user_id: int
    secret: str = field(repr=False)
    api_url: str
    api_version: int
    realm: str

    def __post_init__(self):
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise ConfigurationError("user_id must be an integer")

        if not self.secret:
            raise ConfigurationError("secret cannot be empty")

        if not self.api_url:
            raise ConfigurationError("api_url cannot be empty")

        if self.api_version not in SUPPORTED_API_VERSIONS:
            raise ConfigurationError(f"unexpected api version {self.api_version}")

        # frozen: bypass __setattr__
        object.__setattr__(self, 'api_url', self.api_url.rstrip('/'))

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX,
                 environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Reads {prefix}USER_ID, {prefix}SECRET, {prefix}API_URL,
        {prefix}API_VERSION and {prefix}REALM.

        Raises:
            ConfigurationError: If a variable is missing or malformed
        """
        env = os.environ if environ is None else environ

        def require(name: str) -> str:
            value = env.get(prefix + name, "")
            if not value:
                raise ConfigurationError(f"missing environment variable {prefix + name}")
            return value

        def require_int(name: str) -> int:
            value = require(name)
            try:
                return int(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"{prefix + name} must be an integer, got {value!r}"
                ) from e

        return cls(
            user_id=require_int(ENV_USER_ID),
            secret=require(ENV_SECRET),
            api_url=require(ENV_API_URL),
            api_version=require_int(ENV_API_VERSION),
            realm=require(ENV_REALM),
        )

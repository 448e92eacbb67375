"""Option keys and defaults of an LDAP settings block.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Literal

from .exceptions import ValueOutOfRangeError
from .raw_settings import SettingsSource

NAME = "name"
HOST = "host"
SERVERS = "servers"
PORT = "port"
SSL_ENABLED = "ssl_enabled"
TRUST_ALL_CERTS = "ssl_trust_all_certs"
BIND_DN = "bind_dn"
BIND_PASSWORD = "bind_password"  # noqa: S105
SEARCH_USER_BASE_DN = "search_user_base_DN"
USER_ID_ATTRIBUTE = "user_id_attribute"
CONNECTION_POOL_SIZE = "connection_pool_size"
CONNECTION_TIMEOUT = "connection_timeout_in_sec"
REQUEST_TIMEOUT = "request_timeout_in_sec"
CACHE_TTL = "cache_ttl_in_sec"
HA = "ha"
SEARCH_GROUPS_BASE_DN = "search_groups_base_DN"
UNIQUE_MEMBER_ATTRIBUTE = "unique_member_attribute"

_Accessor = Literal["string_opt", "int_opt", "boolean_opt"]


# Upper bound of the `*_in_sec` options, one year.
MAX_SECONDS = 365 * 24 * 60 * 60


def _seconds(value: int) -> timedelta:
    return timedelta(seconds=value)


@dataclass(frozen=True)
class OptionalField:
    """Optional key read with a typed accessor, with default."""

    key: str
    attr: str
    accessor: _Accessor
    default: Any
    convert: Callable[[Any], Any] | None = None
    minimum: int | None = None
    maximum: int | None = None

    def read(self, settings: SettingsSource) -> Any:
        """Read the key, check its range and convert it."""
        value = getattr(settings, self.accessor)(self.key)
        if value is None:
            return self.default

        if self.minimum is not None and value < self.minimum:
            raise ValueOutOfRangeError(
                f"Option '{self.key}' must be >= {self.minimum}, "
                f"got {value}",
            )
        if self.maximum is not None and value > self.maximum:
            raise ValueOutOfRangeError(
                f"Option '{self.key}' must be <= {self.maximum}, "
                f"got {value}",
            )

        if self.convert is not None:
            return self.convert(value)
        return value


SERVER_FIELDS: tuple[OptionalField, ...] = (
    OptionalField(PORT, "port", "int_opt", 389, minimum=1, maximum=65535),
    OptionalField(SSL_ENABLED, "ssl_enabled", "boolean_opt", True),
    OptionalField(
        TRUST_ALL_CERTS,
        "trust_all_certificates",
        "boolean_opt",
        False,
    ),
    OptionalField(USER_ID_ATTRIBUTE, "user_id_attribute", "string_opt", "uid"),
    OptionalField(
        CONNECTION_POOL_SIZE,
        "connection_pool_size",
        "int_opt",
        30,
        minimum=1,
    ),
    OptionalField(
        CONNECTION_TIMEOUT,
        "connection_timeout",
        "int_opt",
        timedelta(seconds=1),
        convert=_seconds,
        minimum=0,
        maximum=MAX_SECONDS,
    ),
    OptionalField(
        REQUEST_TIMEOUT,
        "request_timeout",
        "int_opt",
        timedelta(seconds=1),
        convert=_seconds,
        minimum=0,
        maximum=MAX_SECONDS,
    ),
    OptionalField(
        CACHE_TTL,
        "cache_ttl",
        "int_opt",
        timedelta(0),
        convert=_seconds,
        minimum=0,
        maximum=MAX_SECONDS,
    ),
)

GROUPS_PROVIDER_FIELDS: tuple[OptionalField, ...] = (
    OptionalField(
        UNIQUE_MEMBER_ATTRIBUTE,
        "unique_member_attribute",
        "string_opt",
        "uniqueMember",
    ),
)

"""Data classes for LDAP server settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from datetime import timedelta

from .enums import HAMode


@dataclass(frozen=True, slots=True)
class SearchingUserCredentials:
    """Identity used to bind before searching users."""

    dn: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class DirectoryServerConfig:
    """Validated connection settings of one named LDAP service.

    Either `host` is set (single server) or `servers` is not empty
    (several servers chosen according to `ha_mode`).
    """

    name: str
    host: str | None
    servers: frozenset[str]
    port: int
    ssl_enabled: bool
    trust_all_certificates: bool
    searching_user: SearchingUserCredentials | None
    search_user_base_dn: str
    user_id_attribute: str
    connection_pool_size: int
    connection_timeout: timedelta
    request_timeout: timedelta
    cache_ttl: timedelta
    ha_mode: HAMode

    @property
    def is_multi_server(self) -> bool:
        return self.host is None

    @property
    def cache_enabled(self) -> bool:
        return self.cache_ttl > timedelta(0)

    @property
    def is_anonymous(self) -> bool:
        return self.searching_user is None


@dataclass(frozen=True, slots=True, kw_only=True)
class GroupsProviderDirectoryConfig(DirectoryServerConfig):
    """LDAP service also used to resolve user groups."""

    search_groups_base_dn: str
    unique_member_attribute: str

"""LDAP server settings.

Validation and normalization of the `ldaps` configuration blocks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dataclasses import (
    DirectoryServerConfig,
    GroupsProviderDirectoryConfig,
    SearchingUserCredentials,
)
from .enums import HAMode
from .exceptions import ConfigurationMalformedError
from .groups import AvailableGroupsRegistry
from .loader import DirectoryConfigs, load_directory_configs
from .parser import (
    parse_directory_server_config,
    parse_groups_provider_config,
    resolve_searching_user,
)
from .raw_settings import RawSettings

__all__ = [
    "AvailableGroupsRegistry",
    "ConfigurationMalformedError",
    "DirectoryConfigs",
    "DirectoryServerConfig",
    "GroupsProviderDirectoryConfig",
    "HAMode",
    "RawSettings",
    "SearchingUserCredentials",
    "load_directory_configs",
    "parse_directory_server_config",
    "parse_groups_provider_config",
    "resolve_searching_user",
]

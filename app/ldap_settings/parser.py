"""LDAP settings block parsing.

Checks run in a fixed order and the first failing one raises, so
the same block always fails with the same error.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any

from loguru import logger as loguru_logger

from . import fields
from .dataclasses import (
    DirectoryServerConfig,
    GroupsProviderDirectoryConfig,
    SearchingUserCredentials,
)
from .enums import HAMode
from .exceptions import (
    HAWithSingleServerError,
    IncompleteBindCredentialsError,
    InvalidHAModeError,
    ServerInfoMissingError,
    ServerModeConflictError,
    SSLFlagMisuseError,
)
from .raw_settings import SettingsSource

log = loguru_logger.bind(name="ldap_settings")


def resolve_searching_user(
    settings: SettingsSource,
) -> SearchingUserCredentials | None:
    """Get bind identity, None means anonymous bind.

    :raises IncompleteBindCredentialsError: only one of the pair given
    """
    bind_dn = settings.string_opt(fields.BIND_DN)
    bind_password = settings.string_opt(fields.BIND_PASSWORD)

    if bind_dn is None and bind_password is None:
        return None

    if bind_dn is None or bind_password is None:
        raise IncompleteBindCredentialsError(
            f"'{fields.BIND_DN}' & '{fields.BIND_PASSWORD}' "
            "should be both present or both absent",
        )

    return SearchingUserCredentials(dn=bind_dn, password=bind_password)


def parse_ha_mode(value: str | None) -> HAMode:
    """Get HA mode from its name, FAILOVER when not given."""
    if value is None:
        return HAMode.FAILOVER

    try:
        return HAMode(value.strip().upper())
    except ValueError:
        allowed = ", ".join(mode.value for mode in HAMode)
        raise InvalidHAModeError(
            f"Unknown '{fields.HA}' value '{value}', "
            f"allowed values (case-insensitive): {allowed}",
        ) from None


def _check_server_layout(settings: SettingsSource) -> None:
    host = settings.string_opt(fields.HOST)
    servers = settings.not_empty_list_opt(fields.SERVERS)
    has_ha = settings.contains(fields.HA)

    if host is None and servers is None:
        raise ServerInfoMissingError(
            "Server information missing: use either 'host' and 'port' "
            "or 'servers' option",
        )

    if host is not None and servers is not None:
        raise ServerModeConflictError(
            "Cannot accept single server settings (host, port) AND "
            "multi server configuration (servers) at the same time",
        )

    if has_ha and host is not None:
        raise HAWithSingleServerError(
            "Please specify more than one LDAP server using 'servers' "
            "to use HA",
        )

    if has_ha and settings.contains(fields.PORT):
        raise ServerModeConflictError(
            "Cannot accept single server settings (host, port) AND "
            "multi server configuration (servers) at the same time",
        )

    if host is None and settings.contains(fields.SSL_ENABLED):
        raise SSLFlagMisuseError(
            f"When using multi-server, the option '{fields.SSL_ENABLED}' "
            "can't be used. Please use ldaps:// schema while listing "
            "the 'servers'",
        )


def _read_server_options(settings: SettingsSource) -> dict[str, Any]:
    _check_server_layout(settings)

    options: dict[str, Any] = {
        "name": settings.string_req(fields.NAME),
        "host": settings.string_opt(fields.HOST),
        "servers": frozenset(
            settings.not_empty_list_opt(fields.SERVERS) or (),
        ),
        "searching_user": resolve_searching_user(settings),
        "search_user_base_dn": settings.string_req(
            fields.SEARCH_USER_BASE_DN,
        ),
    }
    for field in fields.SERVER_FIELDS:
        options[field.attr] = field.read(settings)
    options["ha_mode"] = parse_ha_mode(settings.string_opt(fields.HA))
    return options


def _warn_insecure(config: DirectoryServerConfig) -> None:
    if config.trust_all_certificates:
        log.warning(
            f"LDAP '{config.name}': certificate validation is disabled",
        )
    if (
        not config.is_multi_server
        and not config.ssl_enabled
        and not config.is_anonymous
    ):
        log.warning(
            f"LDAP '{config.name}': bind credentials are sent "
            "over a plaintext connection",
        )


def parse_directory_server_config(
    settings: SettingsSource,
) -> DirectoryServerConfig:
    """Validate an LDAP settings block.

    :param SettingsSource settings: settings block
    :raises ConfigurationMalformedError: block violates a rule
    :return DirectoryServerConfig: validated config
    """
    config = DirectoryServerConfig(**_read_server_options(settings))
    _warn_insecure(config)
    log.debug(f"LDAP '{config.name}' settings parsed")
    return config


def parse_groups_provider_config(
    settings: SettingsSource,
) -> GroupsProviderDirectoryConfig:
    """Validate an LDAP settings block used for authorization.

    Same rules as `parse_directory_server_config`, plus the
    required groups search base.
    """
    options = _read_server_options(settings)
    options["search_groups_base_dn"] = settings.string_req(
        fields.SEARCH_GROUPS_BASE_DN,
    )
    for field in fields.GROUPS_PROVIDER_FIELDS:
        options[field.attr] = field.read(settings)

    config = GroupsProviderDirectoryConfig(**options)
    _warn_insecure(config)
    log.debug(f"LDAP '{config.name}' groups provider settings parsed")
    return config

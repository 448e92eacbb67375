"""ldap3 objects built from validated LDAP settings.

Nothing here opens a connection.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import ssl
from typing import Any

from ldap3 import FIRST, ROUND_ROBIN, Server, ServerPool, Tls

from .dataclasses import DirectoryServerConfig
from .enums import HAMode

_POOL_STRATEGIES = {
    HAMode.FAILOVER: FIRST,
    HAMode.ROUND_ROBIN: ROUND_ROBIN,
}


def build_tls(config: DirectoryServerConfig) -> Tls:
    """Get TLS options, skipping validation for trusted-all certs."""
    if config.trust_all_certificates:
        return Tls(validate=ssl.CERT_NONE)
    return Tls(validate=ssl.CERT_REQUIRED)


def build_servers(config: DirectoryServerConfig) -> list[Server]:
    """Get ldap3 servers.

    In multi server mode port and TLS usage come from each URI,
    e.g. `ldaps://host` means TLS on port 636. A zero connection
    timeout means no timeout, ldap3 expects None for that.
    """
    tls = build_tls(config)
    connect_timeout = int(config.connection_timeout.total_seconds()) or None

    if config.host is not None:
        return [
            Server(
                config.host,
                port=config.port,
                use_ssl=config.ssl_enabled,
                tls=tls,
                connect_timeout=connect_timeout,
            ),
        ]

    return [
        Server(uri, tls=tls, connect_timeout=connect_timeout)
        for uri in sorted(config.servers)
    ]


def build_server_pool(config: DirectoryServerConfig) -> ServerPool:
    """Get ldap3 server pool following the HA mode."""
    return ServerPool(
        build_servers(config),
        pool_strategy=_POOL_STRATEGIES[config.ha_mode],
        active=True,
        exhaust=False,
    )


def connection_options(config: DirectoryServerConfig) -> dict[str, Any]:
    """Get keyword arguments for `ldap3.Connection`."""
    options: dict[str, Any] = {
        "receive_timeout": int(config.request_timeout.total_seconds()) or None,
        "pool_size": config.connection_pool_size,
        "pool_name": config.name,
    }
    if config.searching_user is not None:
        options["user"] = config.searching_user.dn
        options["password"] = config.searching_user.password
    return options

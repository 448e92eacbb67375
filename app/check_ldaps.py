"""Check LDAP settings file.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from config import Settings
from ldap_settings.dataclasses import (
    DirectoryServerConfig,
    GroupsProviderDirectoryConfig,
)
from ldap_settings.exceptions import ConfigurationMalformedError
from ldap_settings.loader import load_directory_configs_file


def setup_logging(settings: Settings) -> None:
    """Configure loguru sinks."""
    logger.remove()
    logger.add(sys.stderr, level=settings.effective_log_level)
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            level=settings.effective_log_level,
            retention="10 days",
            rotation="1d",
            colorize=False,
        )


def describe(config: DirectoryServerConfig) -> str:
    """Get one line summary without secrets."""
    if config.host is not None:
        scheme = "ldaps" if config.ssl_enabled else "ldap"
        target = f"{scheme}://{config.host}:{config.port}"
    else:
        target = f"{config.ha_mode} [{', '.join(sorted(config.servers))}]"

    bind = "anonymous"
    if config.searching_user is not None:
        bind = config.searching_user.dn

    summary = (
        f"{config.name}: {target}, bind={bind}, "
        f"base={config.search_user_base_dn}, "
        f"pool={config.connection_pool_size}, "
        f"cache_ttl={int(config.cache_ttl.total_seconds())}s"
    )
    if isinstance(config, GroupsProviderDirectoryConfig):
        summary += f", groups_base={config.search_groups_base_dn}"
    return summary


def main(argv: list[str] | None = None) -> int:
    """Validate settings file, return exit code."""
    settings = Settings.from_os()

    parser = argparse.ArgumentParser(description="Check LDAP settings")
    parser.add_argument(
        "--config",
        type=Path,
        default=settings.LDAPS_CONFIG_PATH,
        help="YAML settings file",
    )
    parser.add_argument(
        "--root-key",
        default=settings.LDAPS_ROOT_KEY,
        help="key the 'ldaps' section is nested under",
    )
    args = parser.parse_args(argv)

    setup_logging(settings)

    try:
        configs = load_directory_configs_file(args.config, args.root_key)
    except FileNotFoundError as err:
        logger.error(str(err))
        return 1
    except ConfigurationMalformedError as err:
        logger.error(f"Invalid LDAP settings: {err.to_dict()}")
        return 1

    for config in configs.values():
        logger.success(describe(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())

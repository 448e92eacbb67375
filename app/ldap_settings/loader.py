"""Loading of the `ldaps` settings section.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger as loguru_logger

from . import fields
from .dataclasses import DirectoryServerConfig
from .exceptions import (
    ConfigurationMalformedError,
    DuplicateNameError,
    InvalidValueTypeError,
    RequiredFieldMissingError,
    UnknownDirectoryError,
)
from .parser import parse_directory_server_config, parse_groups_provider_config
from .raw_settings import RawSettings

LDAPS_SECTION = "ldaps"
DEFAULT_ROOT_KEY = "readonlyrest"

log = loguru_logger.bind(name="ldap_settings")

_ENV_TOKEN_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-(.*?))?\}")


class DirectoryConfigs(Mapping[str, DirectoryServerConfig]):
    """Validated LDAP settings by name."""

    def __init__(self, configs: list[DirectoryServerConfig]) -> None:
        """Index configs by name.

        :raises DuplicateNameError: two configs share a name
        """
        self._configs: dict[str, DirectoryServerConfig] = {}
        for config in configs:
            if config.name in self._configs:
                raise DuplicateNameError(
                    f"LDAP settings name '{config.name}' is not unique",
                )
            self._configs[config.name] = config

    def __getitem__(self, name: str) -> DirectoryServerConfig:
        return self._configs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def get_by_name(self, name: str) -> DirectoryServerConfig:
        """Get config referenced by an access rule.

        :raises UnknownDirectoryError: no config with such name
        """
        try:
            return self._configs[name]
        except KeyError:
            raise UnknownDirectoryError(
                f"LDAP settings with name '{name}' are not defined",
            ) from None


def parse_block(block: Any) -> DirectoryServerConfig:
    """Parse one `ldaps` entry, choosing its kind by keys present."""
    settings = RawSettings(block)
    if settings.contains(fields.SEARCH_GROUPS_BASE_DN):
        return parse_groups_provider_config(settings)
    return parse_directory_server_config(settings)


def _find_section(raw: Mapping[str, Any], root_key: str | None) -> Any:
    if root_key and isinstance(raw.get(root_key), Mapping):
        raw = raw[root_key]
    if LDAPS_SECTION not in raw:
        raise RequiredFieldMissingError(
            f"Section '{LDAPS_SECTION}' is missing",
        )
    return raw[LDAPS_SECTION]


def load_directory_configs(
    raw: Mapping[str, Any],
    root_key: str | None = DEFAULT_ROOT_KEY,
) -> DirectoryConfigs:
    """Validate every block of the `ldaps` section.

    :param Mapping raw: whole settings document
    :param str | None root_key: key the section may be nested under
    :raises ConfigurationMalformedError: any block is malformed
    :return DirectoryConfigs: configs by name
    """
    if not isinstance(raw, Mapping):
        raise InvalidValueTypeError("Settings document must be a mapping")

    blocks = _find_section(raw, root_key)
    if not isinstance(blocks, list):
        raise InvalidValueTypeError(
            f"Section '{LDAPS_SECTION}' must be a list",
        )

    configs = DirectoryConfigs([parse_block(block) for block in blocks])
    log.info(f"Loaded {len(configs)} LDAP settings: {', '.join(configs)}")
    return configs


def load_directory_configs_file(
    path: Path,
    root_key: str | None = DEFAULT_ROOT_KEY,
) -> DirectoryConfigs:
    """Read YAML settings file and validate its `ldaps` section."""
    if not path.exists():
        raise FileNotFoundError(f"settings file does not exist: {path}")

    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as err:
            raise ConfigurationMalformedError(
                f"Cannot parse settings file {path}: {err}",
            ) from err

    return load_directory_configs(_interpolate_env(raw), root_key)


def _interpolate_env(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _interpolate_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    if isinstance(value, str) and "${" in value:
        return _ENV_TOKEN_RE.sub(_replace_env_token, value)
    return value


def _replace_env_token(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    resolved = os.environ.get(name)
    if resolved is not None:
        return resolved
    if default is not None:
        return default
    raise RequiredFieldMissingError(
        f"Missing environment variable '{name}' "
        f"referenced by '{match.group(0)}'",
    )

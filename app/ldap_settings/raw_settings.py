"""Typed access to a raw settings block.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from typing import Any, Mapping, Protocol

from .exceptions import InvalidValueTypeError, RequiredFieldMissingError

_INTEGER_RE = re.compile(r"-?[0-9]+")


class SettingsSource(Protocol):
    """Key lookups the LDAP settings parser relies on."""

    def contains(self, key: str) -> bool:
        """Check the key is present with a non-null value."""
        ...

    def string_req(self, key: str) -> str:
        """Get required string."""
        ...

    def string_opt(self, key: str) -> str | None:
        """Get optional string."""
        ...

    def int_opt(self, key: str) -> int | None:
        """Get optional integer."""
        ...

    def boolean_opt(self, key: str) -> bool | None:
        """Get optional boolean."""
        ...

    def not_empty_list_opt(self, key: str) -> list[str] | None:
        """Get optional non empty list of strings."""
        ...


class RawSettings:
    """Settings block backed by a mapping, e.g. a parsed YAML section.

    Optional accessors return None for absent or null keys. Values of
    a wrong type raise InvalidValueTypeError naming the key.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        """Set data."""
        if not isinstance(data, Mapping):
            raise InvalidValueTypeError(
                f"Settings block must be a mapping, got {type(data).__name__}",
            )
        self._data = data

    def __repr__(self) -> str:
        return f"RawSettings(keys={sorted(self._data)!r})"

    def contains(self, key: str) -> bool:
        """Check the key is present with a non-null value."""
        return self._data.get(key) is not None

    def string_req(self, key: str) -> str:
        """Get required string.

        :raises RequiredFieldMissingError: key is absent
        """
        value = self.string_opt(key)
        if value is None:
            raise RequiredFieldMissingError(
                f"Required option '{key}' is missing",
            )
        return value

    def string_opt(self, key: str) -> str | None:
        """Get optional string, numbers are rendered as text."""
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            raise self._type_error(key, "string", value)
        if isinstance(value, (str, int, float)):
            return str(value)
        raise self._type_error(key, "string", value)

    def int_opt(self, key: str) -> int | None:
        """Get optional integer, decimal strings are accepted."""
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            raise self._type_error(key, "integer", value)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
            return int(value.strip())
        raise self._type_error(key, "integer", value)

    def boolean_opt(self, key: str) -> bool | None:
        """Get optional boolean, `true`/`false` strings are accepted."""
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
        raise self._type_error(key, "boolean", value)

    def not_empty_list_opt(self, key: str) -> list[str] | None:
        """Get optional list of strings, an empty list counts as absent."""
        value = self._data.get(key)
        if value is None:
            return None
        if not isinstance(value, list) or any(
            not isinstance(item, str) for item in value
        ):
            raise self._type_error(key, "list of strings", value)
        if not value:
            return None
        return list(value)

    @staticmethod
    def _type_error(
        key: str,
        expected: str,
        value: Any,
    ) -> InvalidValueTypeError:
        return InvalidValueTypeError(
            f"Option '{key}' must be a {expected}, "
            f"got {type(value).__name__}",
        )

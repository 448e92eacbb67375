"""Groups discovered on LDAP services.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from threading import Lock
from typing import Iterable

from .protocols import NamedSettings


class AvailableGroupsRegistry:
    """Groups available on each LDAP service, keyed by settings name.

    Settings objects are immutable, the groups found during an
    authorization pass are stored here instead. Readers get copies.
    """

    def __init__(self) -> None:
        """Create empty registry."""
        self._groups: dict[str, frozenset[str]] = {}
        self._lock = Lock()

    @staticmethod
    def _key(settings: NamedSettings | str) -> str:
        return settings if isinstance(settings, str) else settings.name

    def get(self, settings: NamedSettings | str) -> set[str]:
        """Get groups, empty when never set."""
        with self._lock:
            return set(self._groups.get(self._key(settings), ()))

    def set(
        self,
        settings: NamedSettings | str,
        groups: Iterable[str],
    ) -> None:
        """Replace groups of a service."""
        snapshot = frozenset(groups)
        with self._lock:
            self._groups[self._key(settings)] = snapshot

    def clear(self, settings: NamedSettings | str | None = None) -> None:
        """Forget groups of one service or of all of them."""
        with self._lock:
            if settings is None:
                self._groups.clear()
            else:
                self._groups.pop(self._key(settings), None)

"""Protocols shared by named and cached settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from datetime import timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedSettings(Protocol):
    """Settings referenced from access rules by name."""

    @property
    def name(self) -> str:
        """Unique settings name."""
        ...


@runtime_checkable
class CacheSettings(Protocol):
    """Settings whose lookups may be cached."""

    @property
    def cache_ttl(self) -> timedelta:
        """Cached result lifetime, zero disables caching."""
        ...

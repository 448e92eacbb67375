"""Fixtures for LDAP settings tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path
from typing import Any

import pytest

from ldap_settings.groups import AvailableGroupsRegistry

DATA_DIR = Path(__file__).parent / "test_ldap_settings" / "data"


@pytest.fixture
def single_server_block() -> dict[str, Any]:
    """Single server block with every option set."""
    return {
        "name": "ldap1",
        "host": "ldap.example.com",
        "ssl_enabled": False,
        "ssl_trust_all_certs": True,
        "bind_dn": "cn=admin,dc=example,dc=com",
        "bind_password": "password",
        "search_user_base_DN": "ou=People,dc=example,dc=com",
        "connection_pool_size": 10,
        "cache_ttl_in_sec": 60,
    }


@pytest.fixture
def multi_server_block() -> dict[str, Any]:
    """Multi server block with HA."""
    return {
        "name": "ldap2",
        "servers": ["ldaps://h1", "ldaps://h2"],
        "ha": "ROUND_ROBIN",
        "search_user_base_DN": "ou=People,dc=example,dc=com",
    }


@pytest.fixture
def minimal_block() -> dict[str, Any]:
    """Block with required options only."""
    return {
        "name": "minimal",
        "host": "ldap.example.com",
        "search_user_base_DN": "ou=People,dc=example,dc=com",
    }


@pytest.fixture
def settings_file() -> Path:
    """Path to integration-like settings file."""
    return DATA_DIR / "readonlyrest.yml"


@pytest.fixture
def groups_registry() -> AvailableGroupsRegistry:
    """Empty groups registry."""
    return AvailableGroupsRegistry()

"""Enums for LDAP server settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class HAMode(StrEnum):
    """Strategy of choosing among several LDAP servers.

    FAILOVER tries servers in order and moves on when one fails,
    ROUND_ROBIN spreads requests over all of them.
    """

    FAILOVER = "FAILOVER"
    ROUND_ROBIN = "ROUND_ROBIN"

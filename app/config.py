"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Settings of the LDAP settings checker."""

    DEBUG: bool = False

    LDAPS_CONFIG_PATH: Path = Path("/config/readonlyrest.yml")
    LDAPS_ROOT_KEY: str | None = "readonlyrest"

    LOG_LEVEL: Literal[
        "TRACE",
        "DEBUG",
        "INFO",
        "SUCCESS",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ] = "INFO"
    LOG_FILE: str | None = None

    @field_validator("LOG_LEVEL", mode="before")
    def upper_level(cls, level: str) -> str:  # noqa: N805
        """Accept level names in any case."""
        if isinstance(level, str):
            return level.upper()
        return level

    @field_validator("LDAPS_ROOT_KEY", "LOG_FILE", mode="before")
    def empty_to_none(cls, value: str | None) -> str | None:  # noqa: N805
        """Treat empty strings from environment as unset."""
        if value == "":
            return None
        return value

    @property
    def effective_log_level(self) -> str:
        """Get log level, DEBUG flag forces debug output."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)

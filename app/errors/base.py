"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception carrying a stable error code."""

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Ensure every subclass declares a code."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    def __init__(self, message: str = "") -> None:
        """Store message."""
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str | int]:
        """Represent error for operators and logs."""
        return {
            "error": type(self).__name__,
            "code": int(self.code),
            "message": self.message,
        }

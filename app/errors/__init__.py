"""Errors package.

Base of the domain errors raised while reading settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .base import BaseDomainException

__all__ = ["BaseDomainException"]

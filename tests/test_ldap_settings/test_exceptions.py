"""Tests for LDAP settings exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import inspect

import pytest

from errors import BaseDomainException
from ldap_settings import exceptions
from ldap_settings.exceptions import (
    ConfigurationMalformedError,
    ErrorCodes,
    HAWithSingleServerError,
    ServerModeConflictError,
)


def test_base_domain_exception_requires_code() -> None:
    """Test that BaseDomainException requires code."""
    with pytest.raises(AttributeError, match="code must be set"):

        class InvalidError(BaseDomainException):
            """Invalid error without code."""


def test_error_codes_unique() -> None:
    """Test uniqueness of error codes."""
    codes = list(ErrorCodes.__members__.values())
    assert len(set(codes)) == len(codes)
    assert ErrorCodes.BASE_ERROR.value == 0


def test_every_error_has_own_code() -> None:
    """Test each configuration error maps to a distinct code."""
    errors = [
        obj
        for _, obj in inspect.getmembers(exceptions, inspect.isclass)
        if issubclass(obj, ConfigurationMalformedError)
    ]

    codes = [error.code for error in errors]
    assert len(set(codes)) == len(errors) == len(ErrorCodes)


def test_error_to_dict() -> None:
    """Test error representation for operators."""
    error = HAWithSingleServerError("use servers")

    assert isinstance(error, ServerModeConflictError)
    assert str(error) == "use servers"
    assert error.to_dict() == {
        "error": "HAWithSingleServerError",
        "code": ErrorCodes.HA_WITH_SINGLE_SERVER_ERROR.value,
        "message": "use servers",
    }

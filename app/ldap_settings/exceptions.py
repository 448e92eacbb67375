"""Exceptions for LDAP server settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    SERVER_INFO_MISSING_ERROR = 1
    SERVER_MODE_CONFLICT_ERROR = 2
    HA_WITH_SINGLE_SERVER_ERROR = 3
    SSL_FLAG_MISUSE_ERROR = 4
    INCOMPLETE_BIND_CREDENTIALS_ERROR = 5
    REQUIRED_FIELD_MISSING_ERROR = 6
    INVALID_HA_MODE_ERROR = 7
    INVALID_VALUE_TYPE_ERROR = 8
    VALUE_OUT_OF_RANGE_ERROR = 9
    DUPLICATE_NAME_ERROR = 10
    UNKNOWN_DIRECTORY_ERROR = 11


class ConfigurationMalformedError(BaseDomainException):
    """LDAP settings are malformed."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class ServerInfoMissingError(ConfigurationMalformedError):
    """Neither `host` nor `servers` given."""

    code = ErrorCodes.SERVER_INFO_MISSING_ERROR


class ServerModeConflictError(ConfigurationMalformedError):
    """Single server and multi server options mixed."""

    code = ErrorCodes.SERVER_MODE_CONFLICT_ERROR


class HAWithSingleServerError(ServerModeConflictError):
    """`ha` used together with `host`."""

    code = ErrorCodes.HA_WITH_SINGLE_SERVER_ERROR


class SSLFlagMisuseError(ConfigurationMalformedError):
    """`ssl_enabled` used together with `servers`."""

    code = ErrorCodes.SSL_FLAG_MISUSE_ERROR


class IncompleteBindCredentialsError(ConfigurationMalformedError):
    """Only one of `bind_dn` and `bind_password` given."""

    code = ErrorCodes.INCOMPLETE_BIND_CREDENTIALS_ERROR


class RequiredFieldMissingError(ConfigurationMalformedError):
    """Required key is absent."""

    code = ErrorCodes.REQUIRED_FIELD_MISSING_ERROR


class InvalidHAModeError(ConfigurationMalformedError):
    """Unknown `ha` token."""

    code = ErrorCodes.INVALID_HA_MODE_ERROR


class InvalidValueTypeError(ConfigurationMalformedError):
    """Value of a key has a wrong type."""

    code = ErrorCodes.INVALID_VALUE_TYPE_ERROR


class ValueOutOfRangeError(ConfigurationMalformedError):
    """Numeric value is out of the allowed range."""

    code = ErrorCodes.VALUE_OUT_OF_RANGE_ERROR


class DuplicateNameError(ConfigurationMalformedError):
    """Two LDAP blocks share a name."""

    code = ErrorCodes.DUPLICATE_NAME_ERROR


class UnknownDirectoryError(ConfigurationMalformedError):
    """Rule references an LDAP block that is not defined."""

    code = ErrorCodes.UNKNOWN_DIRECTORY_ERROR

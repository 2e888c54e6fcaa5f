"""
Custom exceptions for the repository layer.

Every failure is raised to the immediate caller. A missing record is not
an error: lookups return ``None`` for absent keys.
"""

from typing import Optional


class RepositoryException(Exception):
    """Base exception for all repository errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EncodeException(RepositoryException):
    """Raised when a record cannot be serialized for storage."""

    def __init__(self, record_type: str, reason: Optional[str] = None):
        message = f"Failed to encode {record_type}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"record_type": record_type, "reason": reason}
        )


class DecodeException(RepositoryException):
    """Raised when stored bytes cannot be deserialized into a record."""

    def __init__(
        self,
        record_type: str,
        key: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        message = f"Failed to decode {record_type}"
        if key is not None:
            message += f" stored under '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            details={"record_type": record_type, "key": key, "reason": reason},
        )


class PrefixCollisionException(RepositoryException):
    """Raised when two record types would share part of the key space."""

    def __init__(
        self,
        prefix: str,
        existing: Optional[str] = None,
        owner: Optional[str] = None,
    ):
        if existing is None:
            message = f"Invalid key prefix: '{prefix}'"
        elif owner is not None:
            message = f"{owner} already uses key prefix '{existing}', cannot claim '{prefix}'"
        else:
            message = f"Key prefix '{prefix}' overlaps registered prefix '{existing}'"
        super().__init__(
            message=message,
            details={"prefix": prefix, "existing": existing, "owner": owner},
        )


class ConfigurationException(RepositoryException):
    """Raised when a setting has an unsupported value."""

    def __init__(self, setting: str, reason: str):
        message = f"Invalid configuration for {setting}: {reason}"
        super().__init__(message=message, details={"setting": setting, "reason": reason})

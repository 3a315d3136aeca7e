"""Ports (interfaces) for IAM bounded context."""

from iam.ports.directory import IUserDirectory
from iam.ports.exceptions import (
    DirectoryConfigurationError,
    DirectoryUpdateError,
    DirectoryUserNotFoundError,
    DirectoryValidationError,
    UserDirectoryError,
)

__all__ = [
    "IUserDirectory",
    "DirectoryConfigurationError",
    "DirectoryUpdateError",
    "DirectoryUserNotFoundError",
    "DirectoryValidationError",
    "UserDirectoryError",
]

"""Domain exceptions for IAM bounded context.

Directory adapters translate vendor errors into these so that callers do
not depend on a specific identity provider SDK.
"""

from __future__ import annotations


class DirectoryValidationError(ValueError):
    """Raised when a directory request is missing a required field.

    Raised before any call to the directory is made.
    """

    pass


class DirectoryConfigurationError(Exception):
    """Raised when the directory adapter is used without required settings."""

    pass


class UserDirectoryError(Exception):
    """Raised when the identity directory rejects or fails a call.

    Attributes:
        operation: Name of the directory operation that failed
    """

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class DirectoryUserNotFoundError(UserDirectoryError):
    """Raised when the directory has no user with the given id."""

    pass


class DirectoryUpdateError(UserDirectoryError):
    """Raised when one or more independent parts of a user update failed.

    Parts that succeeded are not rolled back. Each failed part is reported
    under its own key ("name" or "enabled").

    Attributes:
        failures: Mapping of failed part to the error it raised
    """

    def __init__(self, user_id: str, failures: dict[str, Exception]) -> None:
        parts = ", ".join(f"{part}: {error}" for part, error in failures.items())
        super().__init__(
            f"Update of directory user {user_id} failed ({parts})",
            operation="update",
        )
        self.user_id = user_id
        self.failures = failures

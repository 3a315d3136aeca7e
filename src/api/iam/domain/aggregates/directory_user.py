"""Directory user for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from iam.domain.value_objects import UserStatus


@dataclass(frozen=True)
class DirectoryUser:
    """A user account held by the external identity directory.

    This is a read-only snapshot of one directory round trip. Creation,
    attribute changes, enable/disable and deletion all happen in the
    directory itself.
    """

    id: str
    email: str
    name: str | None
    enabled: bool
    status: UserStatus
    created_at: datetime

    def __str__(self) -> str:
        """Return string representation."""
        return f"DirectoryUser({self.id})"

    def __eq__(self, other: object) -> bool:
        """Directory users are equal if they have the same id."""
        if not isinstance(other, DirectoryUser):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id for use in sets and dicts."""
        return hash(self.id)

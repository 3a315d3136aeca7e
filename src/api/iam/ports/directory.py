"""Directory protocol (port) for IAM bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import DirectoryUser
from shared_kernel.pagination import PagedResult


@runtime_checkable
class IUserDirectory(Protocol):
    """Live proxy to an external identity directory.

    Every call is a round trip to the directory. Pagination is the
    directory's own: the cursor handed back is its native token.
    """

    async def list(
        self, keyword: str | None, limit: int, cursor: str | None
    ) -> PagedResult[DirectoryUser]:
        """List one page of users.

        Args:
            keyword: Optional email prefix filter
            limit: Page size, clamped to the directory's supported range
            cursor: The directory's pagination token from a previous page

        Returns:
            PagedResult of users; next_cursor is None on the last page
        """
        ...

    async def create(
        self,
        email: str,
        name: str | None = None,
        temporary_password: str | None = None,
    ) -> str:
        """Create a user and return its directory id.

        Raises:
            DirectoryValidationError: If email is blank
        """
        ...

    async def update(
        self,
        user_id: str,
        name: str | None = None,
        enabled: bool | None = None,
    ) -> None:
        """Change the display name and/or enable or disable the user.

        The two changes are independent; a failure in one does not undo the
        other.

        Raises:
            DirectoryUpdateError: If one or both changes failed
        """
        ...

    async def delete(self, user_id: str) -> None:
        """Delete a user from the directory."""
        ...

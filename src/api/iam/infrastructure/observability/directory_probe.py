"""Domain probe for identity directory operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserDirectoryProbe(Protocol):
    """Domain probe for identity directory operations."""

    def users_listed(self, count: int, has_more: bool) -> None:
        """Record that a page of directory users was listed."""
        ...

    def user_created(self, user_id: str) -> None:
        """Record that a directory user was created."""
        ...

    def user_updated(self, user_id: str, name_changed: bool, enabled: bool | None) -> None:
        """Record that a directory user update completed."""
        ...

    def user_update_failed(self, user_id: str, part: str, error: str) -> None:
        """Record that one part of a user update failed."""
        ...

    def user_deleted(self, user_id: str) -> None:
        """Record that a directory user was deleted."""
        ...

    def directory_call_failed(self, operation: str, error: str) -> None:
        """Record that a directory call failed."""
        ...

    def with_context(self, context: ObservationContext) -> UserDirectoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserDirectoryProbe:
    """Default implementation of UserDirectoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserDirectoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserDirectoryProbe(logger=self._logger, context=context)

    def users_listed(self, count: int, has_more: bool) -> None:
        self._logger.debug(
            "directory_users_listed",
            count=count,
            has_more=has_more,
            **self._get_context_kwargs(),
        )

    def user_created(self, user_id: str) -> None:
        self._logger.info(
            "directory_user_created",
            directory_user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_updated(self, user_id: str, name_changed: bool, enabled: bool | None) -> None:
        self._logger.info(
            "directory_user_updated",
            directory_user_id=user_id,
            name_changed=name_changed,
            enabled=enabled,
            **self._get_context_kwargs(),
        )

    def user_update_failed(self, user_id: str, part: str, error: str) -> None:
        self._logger.error(
            "directory_user_update_failed",
            directory_user_id=user_id,
            part=part,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, user_id: str) -> None:
        self._logger.info(
            "directory_user_deleted",
            directory_user_id=user_id,
            **self._get_context_kwargs(),
        )

    def directory_call_failed(self, operation: str, error: str) -> None:
        self._logger.error(
            "directory_call_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )

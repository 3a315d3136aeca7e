"""Protocol for product application service observability.

Defines the interface for domain probes that capture application-level
domain events for product service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProductServiceProbe(Protocol):
    """Domain probe for product application service operations."""

    def product_created(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was created."""
        ...

    def product_updated(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was updated."""
        ...

    def product_deleted(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was soft-deleted."""
        ...

    def product_delete_skipped(self, product_id: str, tenant_id: str) -> None:
        """Record that deleting an absent product was a no-op."""
        ...

    def product_not_found(self, product_id: str, tenant_id: str) -> None:
        """Record that an update target did not exist."""
        ...

    def validation_failed(self, field: str, tenant_id: str) -> None:
        """Record that a request was rejected for a blank required field."""
        ...

    def operation_failed(self, operation: str, tenant_id: str, error: str) -> None:
        """Record that a store failure aborted an operation."""
        ...

    def with_context(self, context: ObservationContext) -> ProductServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProductServiceProbe:
    """Default implementation of ProductServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultProductServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultProductServiceProbe(logger=self._logger, context=context)

    def product_created(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was created."""
        self._logger.info(
            "product_created",
            product_id=product_id,
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def product_updated(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was updated."""
        self._logger.info(
            "product_updated",
            product_id=product_id,
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def product_deleted(self, product_id: str, tenant_id: str, user_id: str) -> None:
        """Record that a product was soft-deleted."""
        self._logger.info(
            "product_deleted",
            product_id=product_id,
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def product_delete_skipped(self, product_id: str, tenant_id: str) -> None:
        """Record that deleting an absent product was a no-op."""
        self._logger.debug(
            "product_delete_skipped",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def product_not_found(self, product_id: str, tenant_id: str) -> None:
        """Record that an update target did not exist."""
        self._logger.info(
            "product_not_found",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def validation_failed(self, field: str, tenant_id: str) -> None:
        """Record that a request was rejected for a blank required field."""
        self._logger.info(
            "product_validation_failed",
            field=field,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def operation_failed(self, operation: str, tenant_id: str, error: str) -> None:
        """Record that a store failure aborted an operation."""
        self._logger.error(
            "product_operation_failed",
            operation=operation,
            tenant_id=tenant_id,
            error=error,
            **self._get_context_kwargs(),
        )

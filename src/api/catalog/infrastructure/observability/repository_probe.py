"""Domain probe for product repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events emitted by the product store backends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProductRepositoryProbe(Protocol):
    """Domain probe for product repository operations."""

    def product_saved(self, product_id: str, tenant_id: str) -> None:
        """Record that a product was written."""
        ...

    def product_retrieved(self, product_id: str, tenant_id: str) -> None:
        """Record that a product was retrieved."""
        ...

    def product_not_found(self, product_id: str, tenant_id: str) -> None:
        """Record that a product was absent or soft-deleted."""
        ...

    def product_soft_deleted(self, product_id: str, tenant_id: str) -> None:
        """Record that a product was marked as deleted."""
        ...

    def products_listed(self, tenant_id: str, count: int) -> None:
        """Record that an unpaginated list was served."""
        ...

    def product_page_listed(
        self, tenant_id: str, count: int, has_more: bool
    ) -> None:
        """Record that a page of products was served."""
        ...

    def cursor_ignored(self, tenant_id: str) -> None:
        """Record that a cursor could not be used and pagination restarted."""
        ...

    def store_operation_failed(self, operation: str, error: str) -> None:
        """Record that the underlying store rejected an operation."""
        ...

    def with_context(self, context: ObservationContext) -> ProductRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProductRepositoryProbe:
    """Default implementation of ProductRepositoryProbe using structlog."""

    def __init__(
        self,
        backend: str,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._backend = backend
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {"backend": self._backend}
        return {"backend": self._backend, **self._context.as_dict()}

    def with_context(
        self, context: ObservationContext
    ) -> DefaultProductRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultProductRepositoryProbe(
            backend=self._backend, logger=self._logger, context=context
        )

    def product_saved(self, product_id: str, tenant_id: str) -> None:
        self._logger.info(
            "product_saved",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def product_retrieved(self, product_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "product_retrieved",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def product_not_found(self, product_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "product_not_found",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def product_soft_deleted(self, product_id: str, tenant_id: str) -> None:
        self._logger.info(
            "product_soft_deleted",
            product_id=product_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def products_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "products_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def product_page_listed(
        self, tenant_id: str, count: int, has_more: bool
    ) -> None:
        self._logger.debug(
            "product_page_listed",
            tenant_id=tenant_id,
            count=count,
            has_more=has_more,
            **self._get_context_kwargs(),
        )

    def cursor_ignored(self, tenant_id: str) -> None:
        self._logger.warning(
            "product_cursor_ignored",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def store_operation_failed(self, operation: str, error: str) -> None:
        self._logger.error(
            "product_store_operation_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )

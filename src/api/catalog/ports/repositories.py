"""Repository protocols (ports) for catalog bounded context.

Three peer implementations satisfy IProductRepository: a process-local
in-memory store, a DynamoDB single-table store, and test doubles. Each
owns its own native pagination mechanism and hides it behind the opaque
cursor of PagedResult.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId, TenantId
from shared_kernel.pagination import PagedResult


@runtime_checkable
class IProductRepository(Protocol):
    """Repository for Product aggregate persistence.

    Every method is scoped to a single tenant. The Product aggregate carries
    its tenant_id, so writes are self-contained; reads take tenant_id as a
    parameter. No method may read or write outside that tenant's partition.

    Cursors are only valid for the repository that issued them and for the
    same tenant, keyword and limit. Malformed cursors restart pagination.
    """

    async def create(self, product: Product) -> None:
        """Persist a new product.

        Args:
            product: The Product aggregate to persist
        """
        ...

    async def get_by_id(
        self, tenant_id: TenantId, product_id: ProductId
    ) -> Product | None:
        """Retrieve a product by id within a tenant.

        Args:
            tenant_id: The tenant to search within
            product_id: The product identifier

        Returns:
            The Product, or None if absent or soft-deleted
        """
        ...

    async def update(self, product: Product) -> None:
        """Fully replace a product (upsert, last writer wins).

        Args:
            product: The Product aggregate to write
        """
        ...

    async def soft_delete(
        self,
        tenant_id: TenantId,
        product_id: ProductId,
        deleted_by: str,
        deleted_at: datetime,
    ) -> None:
        """Mark a product as deleted without removing it.

        A missing or already deleted product is a no-op.

        Args:
            tenant_id: The tenant owning the product
            product_id: The product identifier
            deleted_by: Actor recorded as the last updater
            deleted_at: Time recorded as the last update
        """
        ...

    async def list(
        self, tenant_id: TenantId, keyword: str | None, limit: int
    ) -> list[Product]:
        """List products without pagination.

        Args:
            tenant_id: The tenant to list products for
            keyword: Optional case-insensitive filter on name and sku
            limit: Maximum number of products, clamped to [1, 200]

        Returns:
            Non-deleted products matching the keyword
        """
        ...

    async def page_list(
        self,
        tenant_id: TenantId,
        keyword: str | None,
        limit: int,
        cursor: str | None,
    ) -> PagedResult[Product]:
        """List one page of products.

        Args:
            tenant_id: The tenant to list products for
            keyword: Optional case-insensitive filter on name and sku
            limit: Page size, clamped to [1, 200]
            cursor: Opaque cursor from a previous page, or None to start

        Returns:
            PagedResult whose next_cursor is None on the last page
        """
        ...

"""In-memory implementation of IProductRepository.

Process-local store used for development and as the reference pagination
implementation: it filters before limiting, so every page except the last
holds exactly `limit` items.
"""

from __future__ import annotations

import threading
from datetime import datetime

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId, TenantId
from catalog.infrastructure.observability import (
    DefaultProductRepositoryProbe,
    ProductRepositoryProbe,
)
from catalog.ports.repositories import IProductRepository
from shared_kernel.pagination import (
    OffsetCursor,
    PagedResult,
    clamp_limit,
    decode_cursor,
    encode_cursor,
    matches_keyword,
)

_Key = tuple[str, str]

DEFAULT_SHARD_COUNT = 16


class InMemoryProductRepository(IProductRepository):
    """Sharded, lock-protected product store.

    Records are keyed by (tenant_id, product_id) and spread over a fixed
    number of shards, each guarded by its own lock. Every write replaces the
    whole record under its shard lock, so readers never observe a partially
    written product. Cursors encode an offset into the sorted, filtered
    result set.
    """

    def __init__(
        self,
        shard_count: int = DEFAULT_SHARD_COUNT,
        probe: ProductRepositoryProbe | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            shard_count: Number of independently locked shards
            probe: Optional domain probe for observability
        """
        if shard_count < 1:
            raise ValueError("shard_count must be >= 1")
        self._shards: list[dict[_Key, Product]] = [{} for _ in range(shard_count)]
        self._locks = [threading.Lock() for _ in range(shard_count)]
        self._probe = probe or DefaultProductRepositoryProbe(backend="memory")

    @staticmethod
    def _key(tenant_id: TenantId, product_id: ProductId) -> _Key:
        return (tenant_id.value, product_id.value)

    def _shard_index(self, key: _Key) -> int:
        return hash(key) % len(self._shards)

    def _put(self, product: Product) -> None:
        key = self._key(product.tenant_id, product.id)
        index = self._shard_index(key)
        with self._locks[index]:
            self._shards[index][key] = product
        self._probe.product_saved(product.id.value, product.tenant_id.value)

    def _snapshot(self, tenant_id: TenantId) -> list[Product]:
        """Copy every record of one tenant, deleted ones included."""
        products: list[Product] = []
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                products.extend(
                    product
                    for (tenant, _), product in shard.items()
                    if tenant == tenant_id.value
                )
        return products

    def _visible(self, tenant_id: TenantId, keyword: str | None) -> list[Product]:
        """Non-deleted keyword matches, newest update first, ties by id."""
        matches = [
            product
            for product in self._snapshot(tenant_id)
            if not product.is_deleted
            and matches_keyword(keyword, product.name, product.sku)
        ]
        matches.sort(key=lambda product: product.id.value)
        matches.sort(key=lambda product: product.updated_at, reverse=True)
        return matches

    async def create(self, product: Product) -> None:
        self._put(product)

    async def update(self, product: Product) -> None:
        self._put(product)

    async def get_by_id(
        self, tenant_id: TenantId, product_id: ProductId
    ) -> Product | None:
        key = self._key(tenant_id, product_id)
        index = self._shard_index(key)
        with self._locks[index]:
            product = self._shards[index].get(key)

        if product is None or product.is_deleted:
            self._probe.product_not_found(product_id.value, tenant_id.value)
            return None

        self._probe.product_retrieved(product_id.value, tenant_id.value)
        return product

    async def soft_delete(
        self,
        tenant_id: TenantId,
        product_id: ProductId,
        deleted_by: str,
        deleted_at: datetime,
    ) -> None:
        key = self._key(tenant_id, product_id)
        index = self._shard_index(key)
        with self._locks[index]:
            existing = self._shards[index].get(key)
            if existing is None or existing.is_deleted:
                deleted = False
            else:
                self._shards[index][key] = existing.mark_deleted(
                    deleted_by=deleted_by, now=deleted_at
                )
                deleted = True

        if deleted:
            self._probe.product_soft_deleted(product_id.value, tenant_id.value)
        else:
            self._probe.product_not_found(product_id.value, tenant_id.value)

    async def list(
        self, tenant_id: TenantId, keyword: str | None, limit: int
    ) -> list[Product]:
        products = self._visible(tenant_id, keyword)[: clamp_limit(limit)]
        self._probe.products_listed(tenant_id.value, len(products))
        return products

    async def page_list(
        self,
        tenant_id: TenantId,
        keyword: str | None,
        limit: int,
        cursor: str | None,
    ) -> PagedResult[Product]:
        limit = clamp_limit(limit)

        position = decode_cursor(cursor, OffsetCursor)
        if position is None and cursor is not None and cursor.strip():
            self._probe.cursor_ignored(tenant_id.value)
        offset = position.offset if position is not None else 0

        matches = self._visible(tenant_id, keyword)
        page = matches[offset : offset + limit]

        next_offset = offset + len(page)
        next_cursor = (
            encode_cursor(OffsetCursor(offset=next_offset))
            if next_offset < len(matches)
            else None
        )

        self._probe.product_page_listed(
            tenant_id.value, len(page), next_cursor is not None
        )
        return PagedResult(items=page, next_cursor=next_cursor)

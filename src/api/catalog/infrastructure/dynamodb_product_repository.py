"""DynamoDB implementation of IProductRepository.

Products live in a single table partitioned by tenant (see
dynamodb_item_mapping). Pagination uses DynamoDB's key continuation: the
cursor is exactly the last evaluated (PK, SK) pair.

Keyword filtering happens in memory on the single native page returned by
the query, after DynamoDB has applied its Limit. With a keyword active a
page can therefore hold fewer than `limit` items, or none at all, while
next_cursor still points at more unfiltered data. Callers keep following
next_cursor until it is None.

Writes are unconditional PutItem calls: the last writer wins.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId, TenantId
from catalog.infrastructure.dynamodb_item_mapping import (
    PARTITION_KEY,
    PRODUCT_PREFIX,
    SORT_KEY,
    item_to_product,
    partition_key,
    product_key,
    product_to_item,
)
from catalog.infrastructure.observability import (
    DefaultProductRepositoryProbe,
    ProductRepositoryProbe,
)
from catalog.ports.exceptions import ProductStoreError
from catalog.ports.repositories import IProductRepository
from shared_kernel.pagination import (
    KeyCursor,
    PagedResult,
    clamp_limit,
    decode_cursor,
    encode_cursor,
    matches_keyword,
)


class DynamoDbProductRepository(IProductRepository):
    """DynamoDB-backed repository for Product aggregates.

    The client is a low-level aioboto3 DynamoDB client owned by the caller
    (see infrastructure.aws); this repository never opens or closes it.
    """

    def __init__(
        self,
        client: Any,
        table_name: str,
        probe: ProductRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a DynamoDB client.

        Args:
            client: aioboto3 DynamoDB client
            table_name: Name of the single products table
            probe: Optional domain probe for observability
        """
        self._client = client
        self._table = table_name
        self._probe = probe or DefaultProductRepositoryProbe(backend="dynamodb")

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise botocore failures as ProductStoreError."""
        try:
            yield
        except (ClientError, BotoCoreError) as e:
            self._probe.store_operation_failed(operation, str(e))
            raise ProductStoreError(
                f"DynamoDB {operation} failed: {e}", operation=operation
            ) from e

    async def _put(self, product: Product) -> None:
        with self._translate_errors("put_item"):
            await self._client.put_item(
                TableName=self._table,
                Item=product_to_item(product),
            )
        self._probe.product_saved(product.id.value, product.tenant_id.value)

    async def _query(
        self,
        tenant_id: TenantId,
        limit: int,
        start_key: KeyCursor | None = None,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "TableName": self._table,
            "KeyConditionExpression": "PK = :pk AND begins_with(SK, :prefix)",
            "ExpressionAttributeValues": {
                ":pk": {"S": partition_key(tenant_id)},
                ":prefix": {"S": PRODUCT_PREFIX},
            },
            "Limit": limit,
            "ScanIndexForward": False,
        }
        if start_key is not None:
            request["ExclusiveStartKey"] = {
                PARTITION_KEY: {"S": start_key.partition},
                SORT_KEY: {"S": start_key.sort},
            }

        with self._translate_errors("query"):
            return await self._client.query(**request)

    @staticmethod
    def _visible(items: list[dict[str, Any]], keyword: str | None) -> list[Product]:
        products = (item_to_product(item) for item in items)
        return [
            product
            for product in products
            if not product.is_deleted
            and matches_keyword(keyword, product.name, product.sku)
        ]

    def _start_key(self, tenant_id: TenantId, cursor: str | None) -> KeyCursor | None:
        """Decode a cursor, refusing keys outside this tenant's products."""
        position = decode_cursor(cursor, KeyCursor)
        if position is not None and (
            position.partition != partition_key(tenant_id)
            or not position.sort.startswith(PRODUCT_PREFIX)
        ):
            position = None
        if position is None and cursor is not None and cursor.strip():
            self._probe.cursor_ignored(tenant_id.value)
        return position

    async def create(self, product: Product) -> None:
        await self._put(product)

    async def update(self, product: Product) -> None:
        await self._put(product)

    async def get_by_id(
        self, tenant_id: TenantId, product_id: ProductId
    ) -> Product | None:
        with self._translate_errors("get_item"):
            response = await self._client.get_item(
                TableName=self._table,
                Key=product_key(tenant_id, product_id),
            )

        item = response.get("Item")
        if not item:
            self._probe.product_not_found(product_id.value, tenant_id.value)
            return None

        product = item_to_product(item)
        if product.is_deleted:
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
        existing = await self.get_by_id(tenant_id, product_id)
        if existing is None:
            return

        await self._put(existing.mark_deleted(deleted_by=deleted_by, now=deleted_at))
        self._probe.product_soft_deleted(product_id.value, tenant_id.value)

    async def list(
        self, tenant_id: TenantId, keyword: str | None, limit: int
    ) -> list[Product]:
        response = await self._query(tenant_id, clamp_limit(limit))
        products = self._visible(response.get("Items", []), keyword)
        self._probe.products_listed(tenant_id.value, len(products))
        return products

    async def page_list(
        self,
        tenant_id: TenantId,
        keyword: str | None,
        limit: int,
        cursor: str | None,
    ) -> PagedResult[Product]:
        response = await self._query(
            tenant_id, clamp_limit(limit), self._start_key(tenant_id, cursor)
        )
        products = self._visible(response.get("Items", []), keyword)

        next_cursor = None
        last_key = response.get("LastEvaluatedKey")
        if last_key:
            next_cursor = encode_cursor(
                KeyCursor(
                    partition=last_key[PARTITION_KEY]["S"],
                    sort=last_key[SORT_KEY]["S"],
                )
            )

        self._probe.product_page_listed(
            tenant_id.value, len(products), next_cursor is not None
        )
        return PagedResult(items=products, next_cursor=next_cursor)

"""Single-table key design and item mapping for products in DynamoDB.

Layout:
    PK = "ORG#<tenant_id>"        partition per tenant
    SK = "PRODUCT#<product_id>"   one item per product

The composite (PK, SK) key is also the resume position for paginated
queries. Attribute values use the low-level DynamoDB wire format and are
converted with boto3's TypeSerializer/TypeDeserializer so that unit prices
round-trip as exact Decimals.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId, TenantId

PARTITION_KEY = "PK"
SORT_KEY = "SK"
TENANT_PREFIX = "ORG#"
PRODUCT_PREFIX = "PRODUCT#"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

Item = dict[str, dict[str, Any]]


def partition_key(tenant_id: TenantId) -> str:
    """Partition key value for a tenant."""
    return f"{TENANT_PREFIX}{tenant_id.value}"


def sort_key(product_id: ProductId) -> str:
    """Sort key value for a product."""
    return f"{PRODUCT_PREFIX}{product_id.value}"


def product_key(tenant_id: TenantId, product_id: ProductId) -> Item:
    """Primary key of a product item in wire format."""
    return {
        PARTITION_KEY: {"S": partition_key(tenant_id)},
        SORT_KEY: {"S": sort_key(product_id)},
    }


def product_to_item(product: Product) -> Item:
    """Convert a Product into a full DynamoDB item."""
    attributes: dict[str, Any] = {
        PARTITION_KEY: partition_key(product.tenant_id),
        SORT_KEY: sort_key(product.id),
        "Id": product.id.value,
        "Name": product.name,
        "Sku": product.sku,
        "Category": product.category,
        "UnitPrice": product.unit_price,
        "StockWarningThreshold": product.stock_warning_threshold,
        "IsDeleted": product.is_deleted,
        "CreatedAt": product.created_at.isoformat(),
        "CreatedBy": product.created_by,
        "UpdatedAt": product.updated_at.isoformat(),
        "UpdatedBy": product.updated_by,
    }
    return {name: _serializer.serialize(value) for name, value in attributes.items()}


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _as_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(0)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def item_to_product(item: Item) -> Product:
    """Convert a DynamoDB item back into a Product.

    Missing or unreadable attributes degrade to empty values instead of
    failing the whole read.
    """
    data = {name: _deserializer.deserialize(value) for name, value in item.items()}

    tenant = _as_str(data.get(PARTITION_KEY)).removeprefix(TENANT_PREFIX)
    product_id = _as_str(data.get("Id")) or _as_str(data.get(SORT_KEY)).removeprefix(
        PRODUCT_PREFIX
    )

    created_at = _parse_timestamp(data.get("CreatedAt"))
    updated_at = _parse_timestamp(data.get("UpdatedAt"))
    if created_at is None and updated_at is None:
        created_at = updated_at = datetime.now(UTC)
    created_at = created_at or updated_at
    updated_at = max(updated_at or created_at, created_at)

    return Product(
        id=ProductId(value=product_id),
        tenant_id=TenantId(value=tenant),
        name=_as_str(data.get("Name")),
        sku=_as_str(data.get("Sku")),
        category=_as_str(data.get("Category")),
        unit_price=_as_decimal(data.get("UnitPrice")),
        stock_warning_threshold=int(_as_decimal(data.get("StockWarningThreshold"))),
        is_deleted=data.get("IsDeleted") is True,
        created_at=created_at,
        created_by=_as_str(data.get("CreatedBy")),
        updated_at=updated_at,
        updated_by=_as_str(data.get("UpdatedBy")),
    )

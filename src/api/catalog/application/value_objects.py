"""Application-layer value objects for catalog bounded context.

These represent the request context handed in by the HTTP layer and the
shapes of create/update requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.value_objects import TenantId


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated actor and the tenant the request is scoped to.

    Resolved by the HTTP layer per request; every catalog operation runs
    inside this tenant only.
    """

    user_id: str
    tenant_id: TenantId


@dataclass(frozen=True)
class CreateProductRequest:
    """Fields supplied when creating a product."""

    name: str
    sku: str
    category: str | None = None
    unit_price: Decimal = Decimal(0)
    stock_warning_threshold: int = 0


@dataclass(frozen=True)
class UpdateProductRequest:
    """Fields replaced when updating a product. The sku is immutable."""

    name: str
    category: str | None = None
    unit_price: Decimal = Decimal(0)
    stock_warning_threshold: int = 0

"""Product aggregate for catalog context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from decimal import Decimal

from catalog.domain.value_objects import ProductId, TenantId


def _require_utc(name: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a timezone-aware UTC datetime")


@dataclass(frozen=True)
class Product:
    """Product record owned by exactly one tenant.

    Business rules:
    - The id is assigned at creation and never changes
    - updated_at is never earlier than created_at
    - A soft-deleted product stays stored but is invisible to every read path

    Products are immutable; mutations return a new instance which the caller
    hands back to a repository for a full replace.
    """

    id: ProductId
    tenant_id: TenantId
    name: str
    sku: str
    category: str
    unit_price: Decimal
    stock_warning_threshold: int
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    is_deleted: bool = False

    def __post_init__(self) -> None:
        _require_utc("created_at", self.created_at)
        _require_utc("updated_at", self.updated_at)
        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at ({self.updated_at.isoformat()}) must not be earlier "
                f"than created_at ({self.created_at.isoformat()})"
            )
        if not isinstance(self.unit_price, Decimal):
            raise TypeError("unit_price must be a Decimal")

    @classmethod
    def create(
        cls,
        *,
        tenant_id: TenantId,
        name: str,
        sku: str,
        category: str,
        unit_price: Decimal,
        stock_warning_threshold: int,
        created_by: str,
        now: datetime,
    ) -> Product:
        """Factory method for creating a new product with a generated id.

        Both audit stamps start out identical.
        """
        return cls(
            id=ProductId.generate(),
            tenant_id=tenant_id,
            name=name,
            sku=sku,
            category=category,
            unit_price=unit_price,
            stock_warning_threshold=stock_warning_threshold,
            created_at=now,
            created_by=created_by,
            updated_at=now,
            updated_by=created_by,
        )

    def _stamp(self, now: datetime) -> datetime:
        # updated_at is monotonic even if the clock goes backwards
        return max(now, self.updated_at)

    def revise(
        self,
        *,
        name: str,
        category: str,
        unit_price: Decimal,
        stock_warning_threshold: int,
        updated_by: str,
        now: datetime,
    ) -> Product:
        """Return a copy with mutable fields replaced and the update stamp moved.

        Id, tenant, sku and the creation stamp are preserved.
        """
        return replace(
            self,
            name=name,
            category=category,
            unit_price=unit_price,
            stock_warning_threshold=stock_warning_threshold,
            updated_at=self._stamp(now),
            updated_by=updated_by,
        )

    def mark_deleted(self, *, deleted_by: str, now: datetime) -> Product:
        """Return a soft-deleted copy of this product."""
        return replace(
            self,
            is_deleted=True,
            updated_at=self._stamp(now),
            updated_by=deleted_by,
        )

    def __str__(self) -> str:
        """Return string representation."""
        return f"Product({self.id}, {self.name})"

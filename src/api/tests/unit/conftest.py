"""Unit test fixtures with mocked dependencies."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import create_autospec

import pytest

from catalog.application.value_objects import CurrentUser
from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId, TenantId
from catalog.infrastructure.observability import ProductRepositoryProbe


class FixedClock:
    """Clock returning a controllable time."""

    def __init__(self, start: datetime):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 1.0) -> datetime:
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def fixed_now():
    """A fixed UTC instant used as the base time in tests."""
    return datetime(2025, 1, 15, 9, 30, tzinfo=UTC)


@pytest.fixture
def clock(fixed_now):
    """Provide a controllable clock starting at fixed_now."""
    return FixedClock(fixed_now)


@pytest.fixture
def tenant_id():
    """Primary tenant for tests."""
    return TenantId(value="t1")


@pytest.fixture
def other_tenant_id():
    """A second tenant used for isolation tests."""
    return TenantId(value="t2")


@pytest.fixture
def current_user(tenant_id):
    """Authenticated actor in the primary tenant."""
    return CurrentUser(user_id="user-alice", tenant_id=tenant_id)


@pytest.fixture
def mock_repository_probe():
    """Create mock product repository probe."""
    return create_autospec(ProductRepositoryProbe, instance=True)


@pytest.fixture
def make_product(tenant_id, fixed_now):
    """Factory for Product aggregates with sensible defaults."""

    def _make(
        name: str = "Widget",
        sku: str = "W-1",
        tenant: TenantId | None = None,
        product_id: str | None = None,
        updated_offset: float = 0,
        is_deleted: bool = False,
        unit_price: Decimal = Decimal("9.99"),
    ) -> Product:
        return Product(
            id=ProductId(value=product_id) if product_id else ProductId.generate(),
            tenant_id=tenant or tenant_id,
            name=name,
            sku=sku,
            category="general",
            unit_price=unit_price,
            stock_warning_threshold=5,
            created_at=fixed_now,
            created_by="user-alice",
            updated_at=fixed_now + timedelta(seconds=updated_offset),
            updated_by="user-alice",
            is_deleted=is_deleted,
        )

    return _make

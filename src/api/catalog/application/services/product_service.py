"""Product application service for catalog bounded context.

Scopes every operation to the caller's tenant, validates input, stamps
audit fields, and delegates storage and pagination to the configured
product repository.
"""

from __future__ import annotations

from catalog.application.observability import (
    DefaultProductServiceProbe,
    ProductServiceProbe,
)
from catalog.application.value_objects import (
    CreateProductRequest,
    CurrentUser,
    UpdateProductRequest,
)
from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductId
from catalog.ports.exceptions import (
    ProductNotFoundError,
    ProductStoreError,
    ProductValidationError,
)
from catalog.ports.repositories import IProductRepository
from shared_kernel.clock import Clock, SystemClock
from shared_kernel.pagination import PagedResult


class ProductService:
    """Application service for product management.

    A service instance is bound to one CurrentUser, so it can only ever
    touch that user's tenant partition. It holds no cache: reads go
    straight to the repository.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        current_user: CurrentUser,
        clock: Clock | None = None,
        probe: ProductServiceProbe | None = None,
    ):
        """Initialize ProductService with dependencies.

        Args:
            product_repository: Store backend for product persistence
            current_user: Actor and tenant the service is scoped to
            clock: Source of the current time (defaults to the system clock)
            probe: Optional domain probe for observability
        """
        self._product_repository = product_repository
        self._current_user = current_user
        self._clock = clock or SystemClock()
        self._probe = probe or DefaultProductServiceProbe()

    @property
    def _tenant(self) -> str:
        return self._current_user.tenant_id.value

    def _require(self, value: str | None, field: str) -> str:
        """Return the trimmed value, rejecting missing or blank input."""
        if value is None or not value.strip():
            self._probe.validation_failed(field=field, tenant_id=self._tenant)
            raise ProductValidationError(f"{field} is required")
        return value.strip()

    async def create(self, request: CreateProductRequest) -> ProductId:
        """Create a product in the caller's tenant.

        Args:
            request: Product fields; name and sku must be non-blank

        Returns:
            The generated ProductId

        Raises:
            ProductValidationError: If name or sku is blank
            ProductStoreError: If the store rejects the write
        """
        name = self._require(request.name, "name")
        sku = self._require(request.sku, "sku")

        product = Product.create(
            tenant_id=self._current_user.tenant_id,
            name=name,
            sku=sku,
            category=(request.category or "").strip(),
            unit_price=request.unit_price,
            stock_warning_threshold=request.stock_warning_threshold,
            created_by=self._current_user.user_id,
            now=self._clock.now(),
        )

        try:
            await self._product_repository.create(product)
        except ProductStoreError as e:
            self._probe.operation_failed("create", self._tenant, str(e))
            raise

        self._probe.product_created(
            product_id=product.id.value,
            tenant_id=self._tenant,
            user_id=self._current_user.user_id,
        )
        return product.id

    async def get(self, product_id: ProductId) -> Product | None:
        """Look up a product by id; soft-deleted products are None."""
        return await self._product_repository.get_by_id(
            self._current_user.tenant_id, product_id
        )

    async def list(self, keyword: str | None, limit: int) -> list[Product]:
        """List products without pagination, capped at limit."""
        return await self._product_repository.list(
            self._current_user.tenant_id, keyword, limit
        )

    async def page_list(
        self, keyword: str | None, limit: int, cursor: str | None
    ) -> PagedResult[Product]:
        """List one page of products.

        Pagination semantics (page sizes, ordering, cursor format) belong to
        the repository; the service only pins the tenant.
        """
        return await self._product_repository.page_list(
            self._current_user.tenant_id, keyword, limit, cursor
        )

    async def update(
        self, product_id: ProductId, request: UpdateProductRequest
    ) -> Product:
        """Replace the mutable fields of an existing product.

        Args:
            product_id: The product to update
            request: New field values; name must be non-blank

        Returns:
            The updated Product as written

        Raises:
            ProductValidationError: If name is blank
            ProductNotFoundError: If the product is absent or soft-deleted
            ProductStoreError: If the store fails
        """
        name = self._require(request.name, "name")

        try:
            existing = await self._product_repository.get_by_id(
                self._current_user.tenant_id, product_id
            )
            if existing is None or existing.is_deleted:
                self._probe.product_not_found(product_id.value, self._tenant)
                raise ProductNotFoundError(f"Product {product_id} not found")

            updated = existing.revise(
                name=name,
                category=(request.category or "").strip(),
                unit_price=request.unit_price,
                stock_warning_threshold=request.stock_warning_threshold,
                updated_by=self._current_user.user_id,
                now=self._clock.now(),
            )
            await self._product_repository.update(updated)
        except ProductStoreError as e:
            self._probe.operation_failed("update", self._tenant, str(e))
            raise

        self._probe.product_updated(
            product_id=product_id.value,
            tenant_id=self._tenant,
            user_id=self._current_user.user_id,
        )
        return updated

    async def soft_delete(self, product_id: ProductId) -> None:
        """Soft-delete a product. Deleting an absent product is a no-op.

        Raises:
            ProductStoreError: If the store fails
        """
        try:
            existing = await self._product_repository.get_by_id(
                self._current_user.tenant_id, product_id
            )
            if existing is None or existing.is_deleted:
                self._probe.product_delete_skipped(product_id.value, self._tenant)
                return

            await self._product_repository.soft_delete(
                self._current_user.tenant_id,
                product_id,
                deleted_by=self._current_user.user_id,
                deleted_at=self._clock.now(),
            )
        except ProductStoreError as e:
            self._probe.operation_failed("soft_delete", self._tenant, str(e))
            raise

        self._probe.product_deleted(
            product_id=product_id.value,
            tenant_id=self._tenant,
            user_id=self._current_user.user_id,
        )

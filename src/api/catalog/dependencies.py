"""Dependency providers for the catalog context.

Selects the product store backend from configuration at startup and builds
tenant-scoped ProductService instances per request.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from catalog.application.observability import DefaultProductServiceProbe
from catalog.application.services import ProductService
from catalog.application.value_objects import CurrentUser
from catalog.infrastructure.dynamodb_product_repository import (
    DynamoDbProductRepository,
)
from catalog.infrastructure.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.ports.repositories import IProductRepository
from infrastructure.settings import StoreSettings, get_settings
from shared_kernel.clock import Clock
from shared_kernel.observability_context import ObservationContext
from shared_kernel.pagination import clamp_limit


@lru_cache
def get_in_memory_product_repository() -> InMemoryProductRepository:
    """Get the process-scoped in-memory product store (singleton).

    Returns:
        InMemoryProductRepository shared by every request in this process
    """
    return InMemoryProductRepository(shard_count=get_settings().store.memory_shards)


def create_product_repository(
    settings: StoreSettings | None = None,
    dynamodb_client: Any | None = None,
) -> IProductRepository:
    """Build the product repository selected by configuration.

    Args:
        settings: Store settings (defaults to cached environment settings)
        dynamodb_client: Open aioboto3 DynamoDB client, required for the
            "dynamodb" backend

    Returns:
        An IProductRepository implementation

    Raises:
        ValueError: If the DynamoDB backend is selected without a client
    """
    settings = settings or get_settings().store

    if settings.backend == "dynamodb":
        if dynamodb_client is None:
            raise ValueError(
                "A DynamoDB client is required when STOCKROOM_STORE_BACKEND=dynamodb"
            )
        return DynamoDbProductRepository(dynamodb_client, table_name=settings.table_name)

    return get_in_memory_product_repository()


def resolve_page_size(limit: int | None, settings: StoreSettings | None = None) -> int:
    """Turn a requested page size into the effective one.

    Missing limits fall back to the configured default; everything is
    clamped to [1, 200].
    """
    settings = settings or get_settings().store
    return clamp_limit(settings.default_page_size if limit is None else limit)


def get_product_service(
    current_user: CurrentUser,
    repository: IProductRepository,
    clock: Clock | None = None,
    request_id: str | None = None,
) -> ProductService:
    """Get a ProductService scoped to the current user's tenant.

    The HTTP layer passes its request id (e.g. the X-Request-ID header) so
    that every service event can be correlated with the request.

    Args:
        current_user: Actor and tenant resolved by the HTTP layer
        repository: Product repository from create_product_repository
        clock: Optional clock override
        request_id: Correlation id bound to the service probe

    Returns:
        ProductService instance
    """
    probe = DefaultProductServiceProbe()
    if request_id is not None:
        probe = probe.with_context(ObservationContext(request_id=request_id))

    return ProductService(
        product_repository=repository,
        current_user=current_user,
        clock=clock,
        probe=probe,
    )

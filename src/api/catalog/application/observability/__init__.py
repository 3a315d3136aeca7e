"""Domain-Oriented Observability for catalog application layer."""

from catalog.application.observability.product_service_probe import (
    DefaultProductServiceProbe,
    ProductServiceProbe,
)

__all__ = [
    "ProductServiceProbe",
    "DefaultProductServiceProbe",
]

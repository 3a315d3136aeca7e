"""Domain-Oriented Observability for catalog infrastructure."""

from catalog.infrastructure.observability.repository_probe import (
    DefaultProductRepositoryProbe,
    ProductRepositoryProbe,
)

__all__ = [
    "ProductRepositoryProbe",
    "DefaultProductRepositoryProbe",
]

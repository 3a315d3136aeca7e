"""Ports (interfaces) for catalog bounded context.

Ports define the contracts for repositories without specifying
implementation details, so the application layer can run against any
store backend selected at startup.
"""

from catalog.ports.exceptions import (
    ProductNotFoundError,
    ProductStoreError,
    ProductValidationError,
)
from catalog.ports.repositories import IProductRepository

__all__ = [
    "IProductRepository",
    "ProductNotFoundError",
    "ProductStoreError",
    "ProductValidationError",
]

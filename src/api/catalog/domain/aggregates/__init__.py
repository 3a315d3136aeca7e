"""Domain aggregates for catalog context."""

from catalog.domain.aggregates.product import Product

__all__ = ["Product"]

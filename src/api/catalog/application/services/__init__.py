"""Application services for catalog bounded context."""

from catalog.application.services.product_service import ProductService

__all__ = ["ProductService"]

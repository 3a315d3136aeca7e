"""Domain exceptions for catalog bounded context.

These exceptions represent domain-level outcomes of product operations.
Store backends translate their native failures into them so that callers
never see driver-specific exception types.
"""


class ProductValidationError(ValueError):
    """Raised when a product request is missing a required field.

    Validation happens before any store access and is never retried.
    """

    pass


class ProductNotFoundError(Exception):
    """Raised when a product to be updated does not exist or was soft-deleted.

    Soft deletion of a missing product is not an error and never raises this.
    """

    pass


class ProductStoreError(Exception):
    """Raised when the underlying store fails to complete an operation.

    Typically wraps a network or remote-service failure. The core applies no
    retry policy of its own; retries belong to the calling layer.
    """

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation

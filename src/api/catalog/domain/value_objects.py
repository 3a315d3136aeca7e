"""Value objects for catalog domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass

from ulid import ULID


@dataclass(frozen=True)
class TenantId:
    """Identifier for the tenant partition a record belongs to.

    Tenant ids are issued by the identity layer and are opaque here; the
    only requirement is that they are non-blank.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("TenantId must be a non-blank string")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class ProductId:
    """Identifier for a Product aggregate.

    Uses ULID for sortability and distribution-friendly generation. Ids are
    unique within a tenant and never change after creation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> ProductId:
        """Generate a new ProductId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> ProductId:
        """Create ProductId from a string received from a caller.

        Lookups accept any non-blank id: records written by other tools may
        not use ULIDs, and an unknown id simply resolves to "not found".

        Args:
            value: Product id string

        Returns:
            ProductId instance

        Raises:
            ValueError: If value is blank
        """
        if not value or not value.strip():
            raise ValueError(f"Invalid ProductId: {value!r}")
        return cls(value=value.strip())

"""Uniform envelope for a page of results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus the cursor for the next page.

    Attributes:
        items: Items on this page, in backend order
        next_cursor: Opaque cursor for the following page, or None when
            there are no further pages
    """

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None

    @property
    def has_more(self) -> bool:
        """Whether a further page can be requested."""
        return self.next_cursor is not None

    def __len__(self) -> int:
        return len(self.items)

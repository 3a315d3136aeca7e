"""Pagination primitives shared by every store backend.

Backends translate their native continuation state (offset, last evaluated
key, vendor token) into an opaque cursor string using the codec in this
package, and return results wrapped in a PagedResult envelope.
"""

from shared_kernel.pagination.cursor import (
    CursorPosition,
    MAX_CURSOR_LENGTH,
    KeyCursor,
    OffsetCursor,
    OpaqueToken,
    decode_cursor,
    encode_cursor,
)
from shared_kernel.pagination.keyword import matches_keyword
from shared_kernel.pagination.limits import MAX_PAGE_SIZE, MIN_PAGE_SIZE, clamp_limit
from shared_kernel.pagination.paged_result import PagedResult

__all__ = [
    "CursorPosition",
    "KeyCursor",
    "MAX_CURSOR_LENGTH",
    "OffsetCursor",
    "OpaqueToken",
    "decode_cursor",
    "encode_cursor",
    "matches_keyword",
    "MAX_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "clamp_limit",
    "PagedResult",
]

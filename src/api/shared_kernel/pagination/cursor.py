"""Opaque cursor codec.

A cursor carries just enough backend-specific state to resume a paginated
read. Three position shapes exist, one per native pagination mechanism:

- OffsetCursor: an integer offset into a fully materialized result set.
- KeyCursor: the partition and sort key of the last item a key-continuation
  query evaluated.
- OpaqueToken: a vendor pagination token that is passed through verbatim.

Offset and key positions are serialized as compact JSON and encoded with
URL-safe base64 without padding, so the resulting string needs no escaping
in a query parameter. Decoding never raises: blank or malformed input
yields None, which callers treat as "start from the beginning". Offset and
key cursors longer than MAX_CURSOR_LENGTH are rejected without decoding.
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, TypeVar, overload


@dataclass(frozen=True)
class OffsetCursor:
    """Resume position for offset-based pagination."""

    offset: int


@dataclass(frozen=True)
class KeyCursor:
    """Resume position for key-continuation pagination.

    Holds exactly the composite key of the last evaluated item.
    """

    partition: str
    sort: str


@dataclass(frozen=True)
class OpaqueToken:
    """Vendor pagination token carried without interpretation."""

    token: str


CursorPosition = OffsetCursor | KeyCursor | OpaqueToken

P = TypeVar("P", OffsetCursor, KeyCursor, OpaqueToken)

# Offset and key payloads encode to a few hundred characters at most
MAX_CURSOR_LENGTH = 1024

_OFFSET_FIELD = "offset"
_PARTITION_FIELD = "PK"
_SORT_FIELD = "SK"


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(token: str) -> bytes:
    padding = "=" * (-len(token) % 4)
    return base64.urlsafe_b64decode(token + padding)


def encode_cursor(position: CursorPosition) -> str:
    """Serialize a resume position into an opaque cursor string.

    Encoding is deterministic: the same position always yields the same
    string.

    Args:
        position: The backend-specific position to encode

    Returns:
        Opaque cursor string

    Raises:
        ValueError: If an offset is negative
        TypeError: If position is not a known cursor shape
    """
    if isinstance(position, OpaqueToken):
        return position.token

    payload: dict[str, Any]
    if isinstance(position, OffsetCursor):
        if position.offset < 0:
            raise ValueError(f"Cursor offset must be >= 0, got {position.offset}")
        payload = {_OFFSET_FIELD: position.offset}
    elif isinstance(position, KeyCursor):
        payload = {_PARTITION_FIELD: position.partition, _SORT_FIELD: position.sort}
    else:
        raise TypeError(f"Unsupported cursor position: {position!r}")

    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return _b64encode(raw.encode("utf-8"))


def _parse_payload(token: str) -> dict[str, Any] | None:
    if len(token) > MAX_CURSOR_LENGTH:
        return None
    try:
        payload = json.loads(_b64decode(token).decode("utf-8"))
    except (binascii.Error, ValueError, RecursionError):
        # deeply nested JSON exhausts the parser stack
        return None
    return payload if isinstance(payload, dict) else None


def _to_offset(payload: dict[str, Any]) -> OffsetCursor | None:
    if set(payload) != {_OFFSET_FIELD}:
        return None
    offset = payload[_OFFSET_FIELD]
    # bool is an int subclass
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        return None
    return OffsetCursor(offset=offset)


def _to_key(payload: dict[str, Any]) -> KeyCursor | None:
    if set(payload) != {_PARTITION_FIELD, _SORT_FIELD}:
        return None
    partition = payload[_PARTITION_FIELD]
    sort = payload[_SORT_FIELD]
    if not isinstance(partition, str) or not isinstance(sort, str):
        return None
    if not partition or not sort:
        return None
    return KeyCursor(partition=partition, sort=sort)


@overload
def decode_cursor(token: str | None, kind: type[P]) -> P | None: ...


@overload
def decode_cursor(token: str | None, kind: None = None) -> CursorPosition | None: ...


def decode_cursor(
    token: str | None, kind: type[CursorPosition] | None = None
) -> CursorPosition | None:
    """Decode an opaque cursor string back into a resume position.

    A cursor is only meaningful to the backend that issued it, so callers
    normally pass the position type they expect. A cursor of any other
    shape decodes to None.

    Args:
        token: Cursor string received from a caller, possibly None or blank
        kind: Expected position type. When omitted, offset and key shapes are
            recognised and anything else is treated as malformed.

    Returns:
        The decoded position, or None for blank or malformed input
    """
    if token is None or not token.strip():
        return None

    if kind is OpaqueToken:
        return OpaqueToken(token=token)

    payload = _parse_payload(token.strip())
    if payload is None:
        return None

    if kind is OffsetCursor:
        return _to_offset(payload)
    if kind is KeyCursor:
        return _to_key(payload)
    if kind is None:
        return _to_offset(payload) or _to_key(payload)
    return None

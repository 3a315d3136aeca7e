"""Keyword filter shared by record backends."""

from __future__ import annotations


def matches_keyword(keyword: str | None, *fields: str | None) -> bool:
    """Case-insensitive substring match of keyword against any field.

    A missing or blank keyword matches everything. Missing fields never match.

    Args:
        keyword: The caller-supplied search keyword
        *fields: Candidate field values (e.g. name, sku)

    Returns:
        True if keyword is blank or occurs in at least one field
    """
    if keyword is None or not keyword.strip():
        return True

    needle = keyword.strip().casefold()
    return any(field is not None and needle in field.casefold() for field in fields)

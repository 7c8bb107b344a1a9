"""Find which schemas reference a catalog entry."""

from __future__ import annotations

from typing import Iterable

from schemareg.models.schema import Schema


def find_dependents(schemas: Iterable[Schema], entry_id: str, exclude: str | None = None) -> list[str]:
    """Return the IDs of schemas whose scheme or vocabulary references contain ``entry_id``.

    ``exclude`` skips one schema (the one being deleted) during the scan.
    Order follows catalog order.
    """
    return [
        schema.schema_id
        for schema in schemas
        if schema.schema_id != exclude and schema.references(entry_id)
    ]

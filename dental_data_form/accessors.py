from __future__ import annotations

from typing import Any

from .locations import FieldPath, LocationError, RootField, SectionDescriptionField
from .models import Document, group_items


def resolve_target(document: Document, path: FieldPath) -> Any:
    """Return the object that owns the field addressed by `path`.

    Raises LocationError when the path's index is outside its group.
    """
    if isinstance(path, RootField):
        return document

    items = group_items(document, path.group)
    if path.index >= len(items):
        raise LocationError(
            f"{path.group.value}[{path.index}] is out of range (group has {len(items)} item(s))"
        )
    item = items[path.index]
    if isinstance(path, SectionDescriptionField):
        return item.description
    return item


def get_value_by_path(document: Document, path: FieldPath) -> str:
    return getattr(resolve_target(document, path), path.name)


def set_value_by_path(document: Document, path: FieldPath, value: str) -> Document:
    """Set a scalar string field in place and return the document."""
    if not isinstance(value, str):
        raise TypeError(f"Field values must be str, got {type(value).__name__}")
    setattr(resolve_target(document, path), path.name, value)
    return document

"""Dataclasses describing a dental data page.

Attribute names are snake_case; the exported JSON uses the camelCase form of
each name, in declaration order (see `to_dict` / `document_from_dict`).
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Type, TypeVar

from .paths import to_camel

T = TypeVar("T")


class SnapshotFormatError(ValueError):
    """Raised when serialized data does not have the shape of a Document."""


@dataclass
class CallToAction:
    name: str = ""
    link: str = ""


@dataclass
class Description:
    paragraph1: str = ""
    paragraph2: str = ""
    # Inert while editing; filled from the raw bullet text on export.
    bullet_points: List[str] = field(default_factory=list)


@dataclass
class Section:
    heading_light: str = ""
    heading_bold: str = ""
    description: Description = field(default_factory=Description)
    image: str = ""


@dataclass
class LinkCard:
    title: str = ""
    link: str = ""


@dataclass
class LinkBlock:
    title: str = ""
    sub_title: str = ""
    link: str = ""


@dataclass
class Document:
    hero_image: str = ""
    heading_light: str = ""
    heading_bold: str = ""
    call_to_actions: List[CallToAction] = field(default_factory=lambda: [CallToAction()])
    sections: List[Section] = field(default_factory=lambda: [Section()])
    is_link_cards: bool = False
    is_link_blocks: bool = False
    link_cards: List[LinkCard] = field(default_factory=lambda: [LinkCard()])
    link_blocks: List[LinkBlock] = field(default_factory=lambda: [LinkBlock()])


class RepeatedGroup(str, Enum):
    """Variable-length groups of a Document. Values are the attribute names."""

    CALL_TO_ACTIONS = "call_to_actions"
    SECTIONS = "sections"
    LINK_CARDS = "link_cards"
    LINK_BLOCKS = "link_blocks"


ITEM_FACTORIES: Dict[RepeatedGroup, Callable[[], Any]] = {
    RepeatedGroup.CALL_TO_ACTIONS: CallToAction,
    RepeatedGroup.SECTIONS: Section,
    RepeatedGroup.LINK_CARDS: LinkCard,
    RepeatedGroup.LINK_BLOCKS: LinkBlock,
}


def group_items(document: Document, group: RepeatedGroup) -> List[Any]:
    return getattr(document, RepeatedGroup(group).value)


def to_dict(obj: Any) -> Any:
    """Convert a dataclass tree into plain JSON-compatible data with camelCase keys."""
    if is_dataclass(obj):
        return {to_camel(f.name): to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, list):
        return [to_dict(v) for v in obj]
    return obj


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise SnapshotFormatError(f"{where}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _from_dict(cls: Type[T], data: Any, where: str) -> T:
    data = _expect(data, dict, where)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        key = to_camel(f.name)
        if key not in data:
            raise SnapshotFormatError(f"{where}: missing key '{key}'")
        kwargs[f.name] = _coerce(f.name, data[key], f"{where}.{key}")
    return cls(**kwargs)


_NESTED: Dict[str, type] = {
    "call_to_actions": CallToAction,
    "sections": Section,
    "link_cards": LinkCard,
    "link_blocks": LinkBlock,
}


def _coerce(name: str, value: Any, where: str) -> Any:
    if name in ("is_link_cards", "is_link_blocks"):
        return _expect(value, bool, where)
    if name == "bullet_points":
        items = _expect(value, list, where)
        return [_expect(v, str, f"{where}[{i}]") for i, v in enumerate(items)]
    if name == "description":
        return _from_dict(Description, value, where)
    if name in _NESTED:
        items = _expect(value, list, where)
        return [_from_dict(_NESTED[name], v, f"{where}[{i}]") for i, v in enumerate(items)]
    return _expect(value, str, where)


def document_from_dict(data: Any) -> Document:
    """Rebuild a Document from the plain data produced by `to_dict`."""
    return _from_dict(Document, data, "document")

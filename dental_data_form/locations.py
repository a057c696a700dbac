"""Typed field paths into a Document.

Every editable scalar field is addressed by one of a closed set of variants.
Each variant only admits the field names of the shape it points at, so
`SectionField(0, "paragraph1")` is rejected while
`SectionDescriptionField(0, "paragraph1")` is accepted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Optional, Tuple, Union, get_args

from .models import RepeatedGroup
from .paths import parse_index, split_path, to_snake


class LocationError(LookupError):
    """A location, index or field name that does not exist in the current document."""


RootFieldName = Literal["hero_image", "heading_light", "heading_bold"]
CallToActionFieldName = Literal["name", "link"]
SectionFieldName = Literal["heading_light", "heading_bold", "image"]
DescriptionFieldName = Literal["paragraph1", "paragraph2"]
LinkCardFieldName = Literal["title", "link"]
LinkBlockFieldName = Literal["title", "sub_title", "link"]
BooleanFieldName = Literal["is_link_cards", "is_link_blocks"]

BOOLEAN_FIELDS: Tuple[str, ...] = get_args(BooleanFieldName)


def _check_name(variant: str, name: str, allowed: Tuple[str, ...]) -> None:
    if name not in allowed:
        raise LocationError(f"{variant} has no field '{name}' (expected one of {', '.join(allowed)})")


def _check_index(variant: str, index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise LocationError(f"{variant} needs a non-negative integer index, got {index!r}")


@dataclass(frozen=True)
class RootField:
    name: RootFieldName

    group: ClassVar[Optional[RepeatedGroup]] = None
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(RootFieldName)

    def __post_init__(self) -> None:
        _check_name(type(self).__name__, self.name, self.FIELDS)


@dataclass(frozen=True)
class _IndexedField:
    index: int
    name: str

    group: ClassVar[Optional[RepeatedGroup]] = None
    FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        _check_index(type(self).__name__, self.index)
        _check_name(type(self).__name__, self.name, self.FIELDS)


@dataclass(frozen=True)
class CallToActionField(_IndexedField):
    name: CallToActionFieldName

    group: ClassVar[Optional[RepeatedGroup]] = RepeatedGroup.CALL_TO_ACTIONS
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(CallToActionFieldName)


@dataclass(frozen=True)
class SectionField(_IndexedField):
    name: SectionFieldName

    group: ClassVar[Optional[RepeatedGroup]] = RepeatedGroup.SECTIONS
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(SectionFieldName)


@dataclass(frozen=True)
class SectionDescriptionField(_IndexedField):
    name: DescriptionFieldName

    group: ClassVar[Optional[RepeatedGroup]] = RepeatedGroup.SECTIONS
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(DescriptionFieldName)


@dataclass(frozen=True)
class LinkCardField(_IndexedField):
    name: LinkCardFieldName

    group: ClassVar[Optional[RepeatedGroup]] = RepeatedGroup.LINK_CARDS
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(LinkCardFieldName)


@dataclass(frozen=True)
class LinkBlockField(_IndexedField):
    name: LinkBlockFieldName

    group: ClassVar[Optional[RepeatedGroup]] = RepeatedGroup.LINK_BLOCKS
    FIELDS: ClassVar[Tuple[str, ...]] = get_args(LinkBlockFieldName)


FieldPath = Union[
    RootField,
    CallToActionField,
    SectionField,
    SectionDescriptionField,
    LinkCardField,
    LinkBlockField,
]

_GROUP_VARIANTS = {
    RepeatedGroup.CALL_TO_ACTIONS: CallToActionField,
    RepeatedGroup.SECTIONS: SectionField,
    RepeatedGroup.LINK_CARDS: LinkCardField,
    RepeatedGroup.LINK_BLOCKS: LinkBlockField,
}


def parse_group(segment: str) -> RepeatedGroup:
    try:
        return RepeatedGroup(to_snake(segment))
    except ValueError:
        raise LocationError(f"Unknown repeated group '{segment}'") from None


def parse_field_path(descriptor: str) -> FieldPath:
    """Turn a textual location descriptor into a typed field path.

    Accepted forms (camelCase or snake_case segments):
      'headingBold', 'root.headingBold'
      'callToActions.0.link', 'callToActions[0].link'
      'sections.1.image', 'sections.1.description.paragraph2'
    """
    parts = split_path(descriptor)
    if parts and parts[0] == "root":
        parts = parts[1:]

    if len(parts) == 1:
        return RootField(to_snake(parts[0]))

    if len(parts) not in (3, 4):
        raise LocationError(f"Malformed location descriptor {descriptor!r}")

    group = parse_group(parts[0])
    try:
        index = parse_index(parts[1])
    except ValueError as e:
        raise LocationError(f"Malformed location descriptor {descriptor!r}: {e}") from None

    if len(parts) == 4:
        if group is not RepeatedGroup.SECTIONS or to_snake(parts[2]) != "description":
            raise LocationError(f"Malformed location descriptor {descriptor!r}")
        return SectionDescriptionField(index, to_snake(parts[3]))

    return _GROUP_VARIANTS[group](index, to_snake(parts[2]))


def parse_boolean_field(name: str) -> BooleanFieldName:
    snake = to_snake(name)
    _check_name("Document", snake, BOOLEAN_FIELDS)
    return snake  # type: ignore[return-value]

"""Session-scoped editing state for one dental data page."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Union

from .accessors import get_value_by_path, set_value_by_path
from .exporter import build_snapshot, derive_file_name, serialize
from .locations import (
    BooleanFieldName,
    FieldPath,
    LocationError,
    parse_boolean_field,
    parse_field_path,
    parse_group,
)
from .logger import get_logger
from .models import ITEM_FACTORIES, Document, RepeatedGroup, group_items

LOGGER = get_logger(__name__)


class ExportArtifact(NamedTuple):
    file_name: str
    payload: str


# Input-boundary events. Locations are textual descriptors, e.g. "sections.0.image".

@dataclass(frozen=True)
class FieldEdit:
    location: str
    value: str


@dataclass(frozen=True)
class CheckboxToggle:
    name: str
    value: bool


@dataclass(frozen=True)
class AddItem:
    group: str


@dataclass(frozen=True)
class RemoveItem:
    group: str
    index: int


@dataclass(frozen=True)
class BulletTextEdit:
    section_index: int
    text: str


@dataclass(frozen=True)
class FileNameEdit:
    name: str


EditEvent = Union[FieldEdit, CheckboxToggle, AddItem, RemoveItem, BulletTextEdit, FileNameEdit]


class DocumentModel:
    """Holds the Document, the per-section raw bullet text and the export file name.

    The raw bullet buffer always has one entry per section; append/remove on
    SECTIONS keeps both lists aligned. Every repeated group keeps at least one
    item: removing the last one is a no-op.
    """

    def __init__(self) -> None:
        self.document = Document()
        self.raw_bullets: List[str] = [""] * len(self.document.sections)
        self.file_name = ""

    def __repr__(self) -> str:
        return (
            f"DocumentModel(sections={len(self.document.sections)}, "
            f"file_name={self.file_name!r})"
        )

    # -- reads --------------------------------------------------------------

    def get_field(self, path: FieldPath) -> str:
        return get_value_by_path(self.document, path)

    def get_boolean_field(self, name: BooleanFieldName) -> bool:
        return getattr(self.document, parse_boolean_field(name))

    def item_count(self, group: RepeatedGroup) -> int:
        return len(group_items(self.document, group))

    def raw_bullet_text(self, section_index: int) -> str:
        if section_index < len(self.raw_bullets):
            return self.raw_bullets[section_index]
        return ""

    # -- mutations ----------------------------------------------------------

    def set_scalar_field(self, path: FieldPath, value: str) -> None:
        set_value_by_path(self.document, path, value)
        LOGGER.debug("Set %s", path)

    def set_boolean_field(self, name: BooleanFieldName, value: bool) -> None:
        setattr(self.document, parse_boolean_field(name), bool(value))
        LOGGER.debug("Set %s=%s", name, bool(value))

    def append_item(self, group: RepeatedGroup) -> int:
        """Append a default-empty item and return its index."""
        group = RepeatedGroup(group)
        items = group_items(self.document, group)
        items.append(ITEM_FACTORIES[group]())
        if group is RepeatedGroup.SECTIONS:
            self.raw_bullets.append("")
        LOGGER.debug("Appended %s[%d]", group.value, len(items) - 1)
        return len(items) - 1

    def remove_item(self, group: RepeatedGroup, index: int) -> bool:
        """Remove the item at `index`. Returns False when the group has a single item."""
        group = RepeatedGroup(group)
        items = group_items(self.document, group)
        if len(items) <= 1:
            LOGGER.debug("Kept last item of %s", group.value)
            return False
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(items):
            raise LocationError(
                f"{group.value}[{index}] is out of range (group has {len(items)} item(s))"
            )
        del items[index]
        if group is RepeatedGroup.SECTIONS and index < len(self.raw_bullets):
            del self.raw_bullets[index]
        LOGGER.debug("Removed %s[%d]", group.value, index)
        return True

    def set_raw_bullet_text(self, section_index: int, text: str) -> None:
        if isinstance(section_index, bool) or not isinstance(section_index, int) or section_index < 0:
            raise LocationError(f"Invalid section index {section_index!r}")
        if not isinstance(text, str):
            raise TypeError(f"Bullet text must be str, got {type(text).__name__}")
        while len(self.raw_bullets) <= section_index:
            self.raw_bullets.append("")
        self.raw_bullets[section_index] = text

    def set_file_name(self, name: str) -> None:
        self.file_name = name

    def apply(self, event: EditEvent) -> None:
        """Dispatch one input-boundary event to the matching mutation."""
        if isinstance(event, FieldEdit):
            self.set_scalar_field(parse_field_path(event.location), event.value)
        elif isinstance(event, CheckboxToggle):
            self.set_boolean_field(parse_boolean_field(event.name), event.value)
        elif isinstance(event, AddItem):
            self.append_item(parse_group(event.group))
        elif isinstance(event, RemoveItem):
            self.remove_item(parse_group(event.group), event.index)
        elif isinstance(event, BulletTextEdit):
            self.set_raw_bullet_text(event.section_index, event.text)
        elif isinstance(event, FileNameEdit):
            self.set_file_name(event.name)
        else:
            raise LocationError(f"Unsupported event {event!r}")

    # -- export -------------------------------------------------------------

    def snapshot(self) -> Document:
        return build_snapshot(self.document, self.raw_bullets)

    def export(self) -> ExportArtifact:
        artifact = ExportArtifact(derive_file_name(self.file_name), serialize(self.snapshot()))
        LOGGER.info("Prepared export %s (%d bytes)", artifact.file_name, len(artifact.payload.encode("utf-8")))
        return artifact

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

from .editor import DocumentModel
from .io_utils import write_export_file
from .locations import BooleanFieldName, FieldPath
from .logger import get_logger
from .models import RepeatedGroup, to_dict

LOGGER = get_logger(__name__)


def create_model() -> DocumentModel:
    return DocumentModel()


def handle_field_edit(path: FieldPath, value: str, model: DocumentModel) -> DocumentModel:
    model.set_scalar_field(path, value or "")
    return model


def handle_bullet_text_edit(section_index: int, text: str, model: DocumentModel) -> DocumentModel:
    model.set_raw_bullet_text(section_index, text or "")
    return model


def handle_file_name_change(name: str, model: DocumentModel) -> DocumentModel:
    model.set_file_name(name or "")
    return model


def handle_checkbox_change(
    name: BooleanFieldName, checked: bool, model: DocumentModel, layout_version: int
) -> Tuple[DocumentModel, int]:
    # Toggling shows or hides a group, so the dynamic rows are re-rendered.
    model.set_boolean_field(name, bool(checked))
    return model, (layout_version or 0) + 1


def handle_add_item(
    group: RepeatedGroup, model: DocumentModel, layout_version: int
) -> Tuple[DocumentModel, int]:
    model.append_item(group)
    return model, (layout_version or 0) + 1


def handle_remove_item(
    group: RepeatedGroup, index: int, model: DocumentModel, layout_version: int
) -> Tuple[DocumentModel, int]:
    if not model.remove_item(group, index):
        return model, layout_version
    return model, (layout_version or 0) + 1


def preview_document_handler(model: Optional[DocumentModel]) -> Optional[Dict[str, Any]]:
    if model is None:
        return None
    return to_dict(model.snapshot())


def export_document_handler(
    model: Optional[DocumentModel], export_dir: Optional[str] = None
) -> Tuple[Optional[str], str, Optional[Dict[str, Any]]]:
    """Export the current page. Returns (file path, status message, preview)."""
    if model is None:
        return None, "No form data.", None

    artifact = model.export()
    try:
        path = write_export_file(artifact, export_dir)
    except OSError as e:
        LOGGER.error("Writing %s failed: %s", artifact.file_name, e)
        return None, f"Error during export: {str(e)}", None

    LOGGER.info("Exported %s", path)
    return path, f"Export successful! Saved to {path}", json.loads(artifact.payload)

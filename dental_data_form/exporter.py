"""Export-time normalization and JSON (de)serialization of a Document."""
from __future__ import annotations

import copy
import json
import re
from typing import List, Sequence

from .logger import get_logger
from .models import Document, SnapshotFormatError, document_from_dict, to_dict

LOGGER = get_logger(__name__)

BULLET_GLYPH = "•"
DEFAULT_FILE_STEM = "dental-data"
FILE_EXTENSION = ".json"

_WHITESPACE_RUN = re.compile(r"\s+")


def parse_bullet_points(raw: str) -> List[str]:
    """Split raw bullet text on ',' and '•' into trimmed, non-empty items."""
    if not raw:
        return []
    pieces = raw.replace(BULLET_GLYPH, ",").split(",")
    return [p.strip() for p in pieces if p.strip()]


def build_snapshot(document: Document, raw_bullets: Sequence[str]) -> Document:
    """Return a copy of `document` with every section's bullet points parsed.

    The live document is left untouched. A section without a raw buffer entry
    gets an empty bullet list.
    """
    snapshot = copy.deepcopy(document)
    if len(raw_bullets) != len(snapshot.sections):
        LOGGER.debug(
            "Raw bullet buffer has %d entries for %d sections",
            len(raw_bullets), len(snapshot.sections),
        )
    for i, section in enumerate(snapshot.sections):
        raw = raw_bullets[i] if i < len(raw_bullets) else ""
        section.description.bullet_points = parse_bullet_points(raw or "")
    return snapshot


def derive_file_name(name: str) -> str:
    stem = (name or "").strip()
    if not stem:
        return DEFAULT_FILE_STEM + FILE_EXTENSION
    return _WHITESPACE_RUN.sub("-", stem).lower() + FILE_EXTENSION


def serialize(snapshot: Document) -> str:
    return json.dumps(to_dict(snapshot), indent=2, ensure_ascii=False)


def parse_snapshot(text: str) -> Document:
    """Inverse of `serialize`."""
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise SnapshotFormatError(f"Error parsing JSON: {e}") from e
    return document_from_dict(data)

from __future__ import annotations

import re
from typing import List

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def split_path(path: str) -> List[str]:
    """Split a location descriptor on '.' into its segments.

    Square-bracket indexes are accepted as well, so 'sections[1].image'
    and 'sections.1.image' give the same segments.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)

    normalized = path.replace('[', '.').replace(']', '')
    return [p.strip() for p in normalized.split('.') if p.strip() != '']


def to_snake(segment: str) -> str:
    """'headingBold' -> 'heading_bold'. snake_case input is returned unchanged."""
    return _CAMEL_BOUNDARY.sub(r'_\1', segment).lower()


def to_camel(name: str) -> str:
    """'sub_title' -> 'subTitle'."""
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def parse_index(segment: str) -> int:
    if not segment.isdigit():
        raise ValueError(f"Expected a non-negative index, got {segment!r}")
    return int(segment)

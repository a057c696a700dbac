from __future__ import annotations

import os
import tempfile
from typing import Optional

from .editor import ExportArtifact


def write_export_file(artifact: ExportArtifact, export_dir: Optional[str] = None) -> str:
    """Write the export payload to `export_dir` and return the file path.

    Only the final component of the artifact's file name is used, so the
    file always lands directly inside `export_dir`.
    """
    target_dir = os.path.realpath(export_dir or tempfile.gettempdir())
    os.makedirs(target_dir, exist_ok=True)

    file_name = os.path.basename(artifact.file_name)
    if file_name in ('', '.', '..'):
        raise PermissionError(f"Refusing to write export named {artifact.file_name!r}")
    path = os.path.join(target_dir, file_name)
    if os.path.dirname(os.path.realpath(path)) != target_dir:
        raise PermissionError(f"Refusing to write outside {target_dir}: {artifact.file_name!r}")

    with open(path, 'w', encoding='utf-8') as f:
        f.write(artifact.payload)
    return path

"""
Output sink: stdout or an atomically replaced file.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

from ..core.exceptions import ExportError


def atomic_write_bytes(file_path: str, payload: bytes) -> Path:
    """
    Atomically write bytes to file.

    The payload goes to a temporary file in the target directory which then
    replaces the destination, so readers never see a partial export.

    Args:
        file_path: Path to write to
        payload: Bytes to write

    Returns:
        The resolved destination path
    """
    path_obj = Path(os.path.expanduser(file_path))

    tmp_path = None
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode='wb',
            dir=str(path_obj.parent),
            prefix='.tmp_',
            suffix='.json',
            delete=False
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(payload)

        os.replace(str(tmp_path), str(path_obj))
        tmp_path = None
        return path_obj

    except OSError as exc:
        raise ExportError(f"Failed to write {file_path}: {exc}") from exc
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass


def write_output(payload: bytes, path: Optional[str] = None,
                 stream: Optional[BinaryIO] = None) -> None:
    """Write a finished export to ``path``, or to stdout when no path is given."""
    if path:
        atomic_write_bytes(path, payload)
        return

    out = stream if stream is not None else sys.stdout.buffer
    try:
        out.write(payload)
        out.flush()
    except OSError as exc:
        raise ExportError(f"Failed to write export to stdout: {exc}") from exc

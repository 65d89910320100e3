from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_bytes_atomic(dst: Path, payload: bytes) -> int:
    """Write ``payload`` next to ``dst`` and move it into place.

    Returns the size of the written file in bytes.
    """
    ensure_directory(dst.parent)
    temp_path = dst.parent / f".{dst.name}.tmp"
    try:
        with temp_path.open("wb") as handle:
            handle.write(payload)
        os.replace(temp_path, dst)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return dst.stat().st_size

from __future__ import annotations

import time
from datetime import datetime


def now_local_display() -> str:
    """Return the local wall-clock time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)

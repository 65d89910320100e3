from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from xlsxreader.core.config import ReaderSettings


@dataclass(slots=True)
class CLIContext:
    settings: ReaderSettings
    console: Console

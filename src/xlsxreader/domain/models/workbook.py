from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Row = tuple[str, ...]
Table = tuple[Row, ...]


class CellType(str, Enum):
    NUMBER = "n"
    SHARED_STRING = "s"
    INLINE_STRING = "inlineStr"
    OTHER = "other"

    @classmethod
    def from_attribute(cls, value: str | None) -> CellType:
        """Map the ``t`` attribute of a ``<c>`` element to a type hint."""
        if value is None or value == "n":
            return cls.NUMBER
        if value == "s":
            return cls.SHARED_STRING
        if value == "inlineStr":
            return cls.INLINE_STRING
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class Cell:
    column_position: int | None
    raw_value: str
    type_hint: CellType


@dataclass(frozen=True, slots=True)
class SharedStringEntry:
    index: int
    text: str


@dataclass(frozen=True, slots=True)
class Stats:
    row_count: int
    max_columns: int
    cell_count: int


@dataclass(frozen=True, slots=True)
class ConsoleTarget:
    max_rows: int = 10
    max_cols: int = 10


@dataclass(frozen=True, slots=True)
class DelimitedTarget:
    delimiter: str
    destination: Path
    quoted: bool = False


ExportTarget = ConsoleTarget | DelimitedTarget


@dataclass(frozen=True, slots=True)
class ExportResult:
    destination: Path
    byte_count: int

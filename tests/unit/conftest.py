from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from xlsx_factory import shared_string_row, shared_strings_xml, worksheet_xml


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    def _make(parts: dict[str, str | bytes], name: str = "book.xlsx") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for part_name, content in parts.items():
                archive.writestr(part_name, content)
        return path

    return _make


@pytest.fixture
def titolo_xlsx(make_xlsx: Callable[..., Path]) -> Path:
    strings = [f"Titolo{i}" for i in range(1, 6)] + [f"A{i}" for i in range(1, 6)]
    return make_xlsx(
        {
            "[Content_Types].xml": "<Types/>",
            "xl/sharedStrings.xml": shared_strings_xml(strings),
            "xl/worksheets/sheet1.xml": worksheet_xml(
                shared_string_row(1, 0, 5) + shared_string_row(2, 5, 5)
            ),
        }
    )

from __future__ import annotations

import csv
import io
from pathlib import Path

import pytest

from xlsxreader.core.errors import OutputWriteFailedError, ValidationError
from xlsxreader.domain.models.workbook import ConsoleTarget, DelimitedTarget
from xlsxreader.infrastructure.exporters.table_exporter import (
    TableExporter,
    default_destination,
    delimited_target,
)


def test_console_preview_truncates_rows_and_columns() -> None:
    wide = tuple(f"c{i}" for i in range(1, 13))
    table = (wide,) + tuple((f"r{i}",) for i in range(2, 14))
    text = TableExporter.render_console(table)
    lines = text.splitlines()
    assert lines[0] == "Row 001: " + " | ".join(f"c{i}" for i in range(1, 11))
    assert lines[1] == "      ... and 2 more columns"
    assert lines[2] == "Row 002: r2"
    assert lines[-2] == "Row 010: r10"
    assert lines[-1] == "... and 3 more rows"


def test_console_preview_respects_custom_target() -> None:
    table = (("a", "b", "c"), ("d", "e", "f"))
    text = TableExporter.render_console(table, ConsoleTarget(max_rows=1, max_cols=2))
    assert text == "Row 001: a | b\n      ... and 1 more columns\n... and 1 more rows"


def test_console_preview_of_empty_table_is_empty() -> None:
    assert TableExporter.render_console(()) == ""


def test_csv_quotes_only_when_needed() -> None:
    table = (("plain", "with,comma", 'say "hi"', "two\nlines", ""),)
    payload = TableExporter().render_csv(table)
    assert payload == b'plain,"with,comma","say ""hi""","two\nlines",\r\n'


def test_csv_round_trips_through_csv_reader() -> None:
    table = (
        ("Titolo1", "a,b", '"quoted"', "multi\nline", "cr\rinside"),
        ("", "", ""),
        ("",),
        ("  spaced  ", "tab\there", "ünïcödé"),
    )
    payload = TableExporter().render_csv(table)
    decoded = tuple(tuple(row) for row in csv.reader(io.StringIO(payload.decode("utf-8"), newline="")))
    assert decoded == table


def test_tab_delimited_output_is_not_escaped() -> None:
    table = (("a", "b"), ("with\ttab", 'quote"'))
    payload = TableExporter().render_delimited(table)
    assert payload == b'a\tb\nwith\ttab\tquote"\n'


def test_write_export_reports_byte_count(tmp_path: Path) -> None:
    destination = tmp_path / "out" / "book.csv"
    exporter = TableExporter()
    result = exporter.write_export((("x", "y"),), DelimitedTarget(",", destination, quoted=True))
    assert result.destination == destination
    assert result.byte_count == destination.stat().st_size == len(b"x,y\r\n")
    assert not (destination.parent / ".book.csv.tmp").exists()


def test_write_export_to_unwritable_destination_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    target = DelimitedTarget("\t", blocker / "out.txt")
    with pytest.raises(OutputWriteFailedError):
        TableExporter().write_export((("x",),), target)


def test_write_export_encoding_failure_is_reported(tmp_path: Path) -> None:
    target = DelimitedTarget("\t", tmp_path / "out.txt")
    with pytest.raises(OutputWriteFailedError, match="ascii"):
        TableExporter(encoding="ascii").write_export((("città",),), target)
    assert not target.destination.exists()


def test_default_destination_swaps_suffix() -> None:
    assert default_destination(Path("/data/report.xlsx"), "csv") == Path("/data/report.csv")
    assert default_destination(Path("/data/report.xlsx"), "txt") == Path("/data/report.txt")


def test_delimited_target_selection(tmp_path: Path) -> None:
    source = tmp_path / "book.xlsx"
    csv_target = delimited_target("csv", source)
    assert csv_target == DelimitedTarget(",", tmp_path / "book.csv", quoted=True)
    txt_target = delimited_target("txt", source, tmp_path / "custom.tsv")
    assert txt_target == DelimitedTarget("\t", tmp_path / "custom.tsv", quoted=False)
    with pytest.raises(ValidationError):
        delimited_target("json", source)


def test_quoted_export_requires_comma_delimiter(tmp_path: Path) -> None:
    target = DelimitedTarget(";", tmp_path / "out.csv", quoted=True)
    with pytest.raises(ValidationError, match="delimiter"):
        TableExporter().write_export((("a", "b"),), target)
    assert not target.destination.exists()

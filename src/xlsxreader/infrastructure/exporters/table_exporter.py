from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from xlsxreader.core.errors import OutputWriteFailedError, ValidationError
from xlsxreader.core.files import write_bytes_atomic
from xlsxreader.domain.models.workbook import ConsoleTarget, DelimitedTarget, ExportResult, Table

logger = logging.getLogger(__name__)

PREVIEW_SEPARATOR = " | "
EXPORT_SUFFIXES = {"csv": ".csv", "txt": ".txt"}
EXPORT_DELIMITERS = {"csv": ",", "txt": "\t"}


class TableExporter:
    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    @staticmethod
    def render_console(table: Table, target: ConsoleTarget | None = None) -> str:
        target = target or ConsoleTarget()
        lines: list[str] = []
        shown = table[: target.max_rows]
        for idx, row in enumerate(shown, start=1):
            lines.append(f"Row {idx:03d}: {PREVIEW_SEPARATOR.join(row[: target.max_cols])}")
            if len(row) > target.max_cols:
                lines.append(f"      ... and {len(row) - target.max_cols} more columns")
        if len(table) > len(shown):
            lines.append(f"... and {len(table) - len(shown)} more rows")
        return "\n".join(lines)

    def render_csv(self, table: Table) -> bytes:
        # QUOTE_MINIMAL quotes on comma, quote, CR or LF and writes a lone empty cell as "".
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer, delimiter=",", quotechar='"', quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
        writer.writerows(table)
        return buffer.getvalue().encode(self.encoding)

    def render_delimited(self, table: Table, delimiter: str = "\t") -> bytes:
        # No escaping: delimiters or newlines inside cells end up in the output as-is.
        text = "".join(delimiter.join(row) + "\n" for row in table)
        return text.encode(self.encoding)

    def render(self, table: Table, target: DelimitedTarget) -> bytes:
        if target.quoted:
            if target.delimiter != ",":
                raise ValidationError(f"Quoted export only supports ',' delimiter, got {target.delimiter!r}")
            return self.render_csv(table)
        return self.render_delimited(table, target.delimiter)

    def write_export(self, table: Table, target: DelimitedTarget) -> ExportResult:
        try:
            payload = self.render(table, target)
        except UnicodeEncodeError as exc:
            raise OutputWriteFailedError(f"Cannot encode export as {self.encoding}: {exc}") from exc
        try:
            byte_count = write_bytes_atomic(target.destination, payload)
        except OSError as exc:
            raise OutputWriteFailedError(f"Cannot write {target.destination}: {exc}") from exc
        logger.info("Wrote %d bytes to %s", byte_count, target.destination)
        return ExportResult(destination=target.destination, byte_count=byte_count)


def default_destination(input_path: Path, export_format: str) -> Path:
    return input_path.with_suffix(EXPORT_SUFFIXES[export_format])


def delimited_target(export_format: str, input_path: Path, output: Path | None = None) -> DelimitedTarget:
    if export_format not in EXPORT_DELIMITERS:
        raise ValidationError(f"Unsupported export format: {export_format}")
    return DelimitedTarget(
        delimiter=EXPORT_DELIMITERS[export_format],
        destination=output or default_destination(input_path, export_format),
        quoted=export_format == "csv",
    )

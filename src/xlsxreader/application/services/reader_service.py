from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from xlsxreader.application.services.statistics_service import summarize
from xlsxreader.core.config import ReaderSettings
from xlsxreader.core.time import elapsed_ms, now_local_display
from xlsxreader.domain.models.workbook import ConsoleTarget, ExportResult, Stats, Table
from xlsxreader.infrastructure.exporters.table_exporter import TableExporter, delimited_target
from xlsxreader.infrastructure.package.reader import PackageReader
from xlsxreader.infrastructure.parsers.shared_strings import SharedStringsTable
from xlsxreader.infrastructure.parsers.worksheet import WorksheetDecoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReadResult:
    file_name: str
    full_path: Path
    file_size: int
    sheet: str
    sheet_part: str
    started_at: str
    elapsed_ms: int
    shared_string_count: int
    table: Table
    stats: Stats


class ReaderService:
    def __init__(self, settings: ReaderSettings | None = None) -> None:
        self.settings = settings or ReaderSettings()
        self.decoder = WorksheetDecoder(fallback_to_first_sheet=self.settings.fallback_to_first_sheet)
        self.exporter = TableExporter(encoding=self.settings.export_encoding)

    def read(self, path: Path, sheet: str | None = None) -> ReadResult:
        sheet_identifier = sheet or self.settings.default_sheet
        if path.suffix.lower() != ".xlsx":
            logger.warning("File doesn't have .xlsx extension, proceeding anyway...")

        started_at = now_local_display()
        started = time.perf_counter()

        logger.info("Opening XLSX file %s", path)
        with PackageReader.open(path) as package:
            logger.info("Loading shared strings...")
            shared_strings = SharedStringsTable.load(package)
            logger.info("Loading worksheet: %s...", sheet_identifier)
            sheet_part = self.decoder.resolve_part(package, sheet_identifier)
            table = self.decoder.decode(package, sheet_identifier, shared_strings, part_name=sheet_part)

        took_ms = elapsed_ms(started)
        return ReadResult(
            file_name=path.name,
            full_path=path.resolve(),
            file_size=path.stat().st_size,
            sheet=sheet_identifier,
            sheet_part=sheet_part,
            started_at=started_at,
            elapsed_ms=took_ms,
            shared_string_count=len(shared_strings),
            table=table,
            stats=summarize(table),
        )

    def preview(self, result: ReadResult) -> str:
        target = ConsoleTarget(max_rows=self.settings.preview_rows, max_cols=self.settings.preview_cols)
        return self.exporter.render_console(result.table, target)

    def export(self, result: ReadResult, export_format: str, output: Path | None = None) -> ExportResult:
        target = delimited_target(export_format, result.full_path, output)
        logger.info("Exporting to %s: %s", export_format.upper(), target.destination)
        return self.exporter.write_export(result.table, target)

    @staticmethod
    def list_sheets(path: Path) -> list[str]:
        with PackageReader.open(path) as package:
            return package.worksheet_parts()

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from xlsxreader.application.services.reader_service import ReaderService
from xlsxreader.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("read", help="Decode one worksheet and preview or export it")
    parser.add_argument("path", type=Path, help="XLSX file to read")
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument("-c", "--csv", dest="export_format", action="store_const", const="csv", help="Export to CSV format")
    fmt.add_argument("-t", "--txt", dest="export_format", action="store_const", const="txt", help="Export to TXT format")
    parser.add_argument("-o", "--output", type=Path, help="Output file name (default: input name with .csv/.txt)")
    parser.add_argument("-s", "--sheet", help="Sheet name/number (default: sheet1)")
    parser.add_argument(
        "--fallback-sheet1",
        action="store_true",
        help="Fall back to xl/worksheets/sheet1.xml when the requested sheet is missing",
    )
    parser.set_defaults(handler=run, export_format="console")


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    settings = ctx.settings
    if args.fallback_sheet1:
        settings = replace(settings, fallback_to_first_sheet=True)
    service = ReaderService(settings)

    result = service.read(args.path, args.sheet)

    report = [
        f"File: {result.file_name}",
        f"Full path: {result.full_path}",
        f"File size: {result.file_size:,} bytes",
        f"Sheet: {result.sheet} ({result.sheet_part})",
        f"Started at: {result.started_at}",
    ]
    ctx.console.print(Panel.fit(Text("\n".join(report)), title="XLSX Reader Report"))

    stats = [
        f"Reading time: {result.elapsed_ms} ms",
        f"Total rows: {result.stats.row_count:,}",
        f"Maximum columns: {result.stats.max_columns}",
        f"Total cells: {result.stats.cell_count:,}",
        f"Shared strings count: {result.shared_string_count:,}",
    ]
    ctx.console.print(Panel.fit("\n".join(stats), title="Statistics"))

    if args.export_format == "console":
        preview = service.preview(result) or "(no rows)"
        ctx.console.print(
            Panel(Text(preview), title=f"Data Preview (First {settings.preview_rows} rows)")
        )
        return 0

    label = args.export_format.upper()
    exported = service.export(result, args.export_format, args.output)
    ctx.console.print(f"[green]{label} export completed[/green] {escape(str(exported.destination))}: {exported.byte_count:,} bytes")
    return 0

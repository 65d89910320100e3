from __future__ import annotations

import argparse
from pathlib import Path

from rich.table import Table

from xlsxreader.application.services.reader_service import ReaderService
from xlsxreader.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("sheets", help="List worksheet parts inside an XLSX file")
    parser.add_argument("path", type=Path, help="XLSX file to inspect")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    parts = ReaderService(ctx.settings).list_sheets(args.path)

    table = Table(title=f"Worksheets ({len(parts)})")
    table.add_column("Part", overflow="fold")
    table.add_column("Sheet identifier")
    for part in parts:
        table.add_row(part, Path(part).stem)
    ctx.console.print(table)
    return 0

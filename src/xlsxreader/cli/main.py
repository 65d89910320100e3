from __future__ import annotations

import argparse
import logging

from rich.console import Console

from xlsxreader import __version__
from xlsxreader.cli.commands import read_cmd, sheets_cmd
from xlsxreader.cli.context import CLIContext
from xlsxreader.core.config import load_settings
from xlsxreader.core.errors import XlsxReaderError
from xlsxreader.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xlsx-reader",
        description="XLSX Reader - read Excel files without spreadsheet libraries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    read_cmd.register(subparsers)
    sheets_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        ctx = CLIContext(settings=load_settings(), console=console)
        return handler(args, ctx)
    except XlsxReaderError as exc:
        logger.error("[%s] %s", exc.stage, exc)
        return 1

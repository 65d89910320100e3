from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from xlsxreader.core.errors import ConfigurationError

DEFAULT_SHEET = "sheet1"
DEFAULT_PREVIEW_ROWS = 10
DEFAULT_PREVIEW_COLS = 10
DEFAULT_EXPORT_ENCODING = "utf-8"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ReaderSettings:
    default_sheet: str = DEFAULT_SHEET
    preview_rows: int = DEFAULT_PREVIEW_ROWS
    preview_cols: int = DEFAULT_PREVIEW_COLS
    fallback_to_first_sheet: bool = False
    export_encoding: str = DEFAULT_EXPORT_ENCODING


def load_settings(environ: Mapping[str, str] | None = None) -> ReaderSettings:
    env = os.environ if environ is None else environ

    sheet = (env.get("XLSX_READER_SHEET") or "").strip() or DEFAULT_SHEET
    encoding = (env.get("XLSX_READER_ENCODING") or "").strip() or DEFAULT_EXPORT_ENCODING
    try:
        "".encode(encoding)
    except LookupError as exc:
        raise ConfigurationError(f"Unknown export encoding: {encoding}") from exc

    return ReaderSettings(
        default_sheet=sheet,
        preview_rows=_positive_int(env, "XLSX_READER_PREVIEW_ROWS", DEFAULT_PREVIEW_ROWS),
        preview_cols=_positive_int(env, "XLSX_READER_PREVIEW_COLS", DEFAULT_PREVIEW_COLS),
        fallback_to_first_sheet=_flag(env, "XLSX_READER_SHEET_FALLBACK"),
        export_encoding=encoding,
    )


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"{key} must be at least 1, got {value}")
    return value


def _flag(env: Mapping[str, str], key: str) -> bool:
    raw = (env.get(key) or "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigurationError(f"{key} must be a boolean flag, got {raw!r}")

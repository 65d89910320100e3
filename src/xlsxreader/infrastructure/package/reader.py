from __future__ import annotations

import logging
import zipfile
import zlib
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from xlsxreader.core.errors import InputNotFoundError, NotAnArchiveError

logger = logging.getLogger(__name__)

WORKSHEETS_PREFIX = "xl/worksheets/"
XML_SUFFIX = ".xml"

# Raised by zipfile while decompressing or locating a damaged member.
MEMBER_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    NotImplementedError,
    RuntimeError,
    EOFError,
    OSError,
)


class Package:
    """An opened OOXML container; use as a context manager."""

    def __init__(self, path: Path, archive: zipfile.ZipFile) -> None:
        self.path = path
        self._archive = archive
        self.entries: frozenset[str] = frozenset(archive.namelist())

    def __enter__(self) -> Package:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._archive.close()

    def has_part(self, name: str) -> bool:
        return name in self.entries

    def find_part(self, candidates: Iterable[str]) -> str | None:
        for name in candidates:
            if name in self.entries:
                return name
        return None

    def list_parts(self, prefix: str = "", suffix: str = "") -> Iterator[str]:
        for info in self._archive.infolist():
            name = info.filename
            if name.startswith(prefix) and name.endswith(suffix):
                yield name

    def worksheet_parts(self) -> list[str]:
        return list(self.list_parts(WORKSHEETS_PREFIX, XML_SUFFIX))

    def open_part(self, name: str) -> IO[bytes]:
        try:
            return self._archive.open(name, "r")
        except MEMBER_READ_ERRORS as exc:
            raise NotAnArchiveError(f"Cannot read part {name} from {self.path}: {exc}") from exc

    def read_part(self, name: str) -> bytes:
        try:
            return self._archive.read(name)
        except MEMBER_READ_ERRORS as exc:
            raise NotAnArchiveError(f"Cannot read part {name} from {self.path}: {exc}") from exc


class PackageReader:
    @staticmethod
    def open(path: Path) -> Package:
        if not path.exists() or not path.is_file():
            raise InputNotFoundError(f"File not found: {path}")
        try:
            archive = zipfile.ZipFile(path, "r")
        except (FileNotFoundError, PermissionError) as exc:
            raise InputNotFoundError(f"Cannot open {path}: {exc}") from exc
        except (zipfile.BadZipFile, NotImplementedError, UnicodeDecodeError, ValueError, OSError) as exc:
            raise NotAnArchiveError(f"Not a valid XLSX (ZIP) container: {path}: {exc}") from exc
        logger.debug("Opened package %s with %d entries", path, len(archive.namelist()))
        return Package(path, archive)

from __future__ import annotations


class XlsxReaderError(Exception):
    """Base error for all user-facing xlsxreader exceptions."""

    stage = "read"


class ConfigurationError(XlsxReaderError):
    """Raised when configuration is invalid or incomplete."""

    stage = "config"


class InputNotFoundError(XlsxReaderError):
    """Raised when the input workbook path does not exist."""

    stage = "open"


class NotAnArchiveError(XlsxReaderError):
    """Raised when the input is not a readable ZIP/OOXML container."""

    stage = "open"


class MalformedMarkupError(XlsxReaderError):
    """Raised when a required XML part cannot be parsed."""

    stage = "worksheet"


class SheetNotFoundError(XlsxReaderError):
    """Raised when no worksheet part matches the requested sheet."""

    stage = "worksheet"

    def __init__(self, identifier: str, available: list[str]) -> None:
        self.identifier = identifier
        self.available = list(available)
        listing = ", ".join(self.available) if self.available else "none"
        super().__init__(f"Sheet '{identifier}' not found. Available sheets: {listing}")


class SharedStringIndexError(XlsxReaderError, IndexError):
    """Raised when a shared-string index has no entry in the table."""

    stage = "shared-strings"


class OutputWriteFailedError(XlsxReaderError):
    """Raised when an export destination cannot be written."""

    stage = "export"


class ValidationError(XlsxReaderError):
    """Raised when arguments or model invariants are invalid."""

    stage = "input"

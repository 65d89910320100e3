from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from xml.etree import ElementTree as ET

from xlsxreader.core.errors import SharedStringIndexError, SheetNotFoundError
from xlsxreader.domain.models.workbook import Cell, CellType, Row, Table
from xlsxreader.infrastructure.package.reader import WORKSHEETS_PREFIX, XML_SUFFIX, Package
from xlsxreader.infrastructure.parsers.shared_strings import SharedStringsTable
from xlsxreader.infrastructure.parsers.xml_parts import child_elements, iter_closed_elements

logger = logging.getLogger(__name__)

FIRST_SHEET_PART = f"{WORKSHEETS_PREFIX}sheet1{XML_SUFFIX}"
# ASCII digits only, with optional sign and surrounding blanks.
SHARED_STRING_INDEX = re.compile(r"[ \t\r\n]*[+-]?[0-9]+[ \t\r\n]*")


class WorksheetDecoder:
    """Turn one worksheet part into a table of strings.

    Cells are positional: the n-th ``<c>`` of a row becomes the n-th value,
    whatever its ``r`` reference says. Sparse rows with skipped columns are
    therefore packed to the left.
    """

    def __init__(self, *, fallback_to_first_sheet: bool = False) -> None:
        self.fallback_to_first_sheet = fallback_to_first_sheet

    def candidate_parts(self, sheet_identifier: str) -> list[str]:
        candidates = [
            f"{WORKSHEETS_PREFIX}{sheet_identifier}{XML_SUFFIX}",
            f"{WORKSHEETS_PREFIX}sheet{sheet_identifier}{XML_SUFFIX}",
        ]
        if self.fallback_to_first_sheet:
            candidates.append(FIRST_SHEET_PART)
        return candidates

    def resolve_part(self, package: Package, sheet_identifier: str) -> str:
        part = package.find_part(self.candidate_parts(sheet_identifier))
        if part is not None:
            return part

        available = package.worksheet_parts()
        logger.warning("Sheet '%s' not found. Available sheets:", sheet_identifier)
        for name in available:
            logger.warning("  - %s", name)
        raise SheetNotFoundError(sheet_identifier, available)

    def decode(
        self,
        package: Package,
        sheet_identifier: str,
        shared_strings: SharedStringsTable,
        *,
        part_name: str | None = None,
    ) -> Table:
        part = part_name or self.resolve_part(package, sheet_identifier)
        logger.info("Decoding worksheet part %s", part)
        rows: list[Row] = []
        for cells in self.iter_cells(package, part):
            if not cells:
                continue
            rows.append(tuple(self.resolve(cell, shared_strings) for cell in cells))
        return tuple(rows)

    def iter_cells(self, package: Package, part_name: str) -> Iterator[list[Cell]]:
        """Yield the raw cells of every ``<row>``, including empty rows."""
        for row in iter_closed_elements(package, part_name, "row"):
            yield [self._read_cell(node) for node in child_elements(row, "c")]

    @staticmethod
    def resolve(cell: Cell, shared_strings: SharedStringsTable) -> str:
        if cell.type_hint is not CellType.SHARED_STRING or not cell.raw_value:
            return cell.raw_value
        if SHARED_STRING_INDEX.fullmatch(cell.raw_value) is not None:
            try:
                return shared_strings.lookup(int(cell.raw_value))
            except SharedStringIndexError:
                pass
        logger.debug("Unresolved shared string reference %r; keeping raw value", cell.raw_value)
        return cell.raw_value

    @classmethod
    def _read_cell(cls, node: ET.Element) -> Cell:
        value_node = next(child_elements(node, "v"), None)
        raw_value = "" if value_node is None else (value_node.text or "")
        return Cell(
            column_position=cls.column_position(node.attrib.get("r")),
            raw_value=raw_value,
            type_hint=CellType.from_attribute(node.attrib.get("t")),
        )

    @staticmethod
    def column_position(cell_ref: str | None) -> int | None:
        """Return the 1-based column of an ``A1`` style reference."""
        if not cell_ref:
            return None
        letters = "".join(ch for ch in cell_ref if ch.isalpha()).upper()
        if not letters or not letters.isascii():
            return None
        total = 0
        for ch in letters:
            total = total * 26 + (ord(ch) - ord("A") + 1)
        return total

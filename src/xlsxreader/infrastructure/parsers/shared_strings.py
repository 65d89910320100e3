from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from xml.etree import ElementTree as ET

from xlsxreader.core.errors import MalformedMarkupError, SharedStringIndexError
from xlsxreader.domain.models.workbook import SharedStringEntry
from xlsxreader.infrastructure.package.reader import Package
from xlsxreader.infrastructure.parsers.xml_parts import (
    child_elements,
    iter_closed_elements,
    local_tag,
)

logger = logging.getLogger(__name__)

SHARED_STRINGS_PART = "xl/sharedStrings.xml"


class SharedStringsMarkupError(MalformedMarkupError):
    stage = "shared-strings"


@dataclass(frozen=True, slots=True)
class SharedStringsTable:
    """Shared strings in document order; position is the lookup index."""

    values: tuple[str, ...] = ()

    @classmethod
    def load(cls, package: Package) -> SharedStringsTable:
        if not package.has_part(SHARED_STRINGS_PART):
            logger.info("No shared strings part; continuing with an empty table")
            return cls()
        values = [
            _record_text(record)
            for record in iter_closed_elements(
                package,
                SHARED_STRINGS_PART,
                "si",
                error_cls=SharedStringsMarkupError,
            )
        ]
        logger.info("Loaded %d shared strings", len(values))
        return cls(tuple(values))

    def lookup(self, index: int) -> str:
        if index < 0 or index >= len(self.values):
            raise SharedStringIndexError(
                f"Shared string index {index} out of range (table has {len(self.values)} entries)"
            )
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[SharedStringEntry]:
        for index, text in enumerate(self.values):
            yield SharedStringEntry(index=index, text=text)


def _record_text(record: ET.Element) -> str:
    # Plain records hold one <t>; rich text holds <r><t> runs. <rPh> is phonetic.
    parts: list[str] = []
    for child in record:
        tag = local_tag(child.tag)
        if tag == "t":
            parts.append(child.text or "")
        elif tag == "r":
            parts.extend(t.text or "" for t in child_elements(child, "t"))
    return "".join(parts)

from __future__ import annotations

from collections.abc import Iterator
from xml.etree import ElementTree as ET

from xlsxreader.core.errors import MalformedMarkupError, NotAnArchiveError
from xlsxreader.infrastructure.package.reader import MEMBER_READ_ERRORS, Package


def local_tag(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def iter_closed_elements(
    package: Package,
    part_name: str,
    tag: str,
    *,
    error_cls: type[MalformedMarkupError] = MalformedMarkupError,
) -> Iterator[ET.Element]:
    """Yield every ``tag`` element of a part once it has been fully parsed.

    The element is cleared after the consumer resumes, so callers must copy
    what they need before asking for the next one.
    """
    with package.open_part(part_name) as stream:
        try:
            for _event, elem in ET.iterparse(stream, events=("end",)):
                if local_tag(elem.tag) != tag:
                    continue
                yield elem
                elem.clear()
        except ET.ParseError as exc:
            raise error_cls(f"Malformed XML in {part_name}: {exc}") from exc
        except MEMBER_READ_ERRORS as exc:
            raise NotAnArchiveError(f"Corrupt archive member {part_name}: {exc}") from exc


def child_elements(node: ET.Element, tag: str) -> Iterator[ET.Element]:
    for child in node:
        if local_tag(child.tag) == tag:
            yield child

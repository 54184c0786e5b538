"""Path grammar for schema references such as ``data.aws_ami.id``."""

from __future__ import annotations

from dataclasses import dataclass

DATA_PREFIX = "data"
ELEMENT_MARKER = "[]"


@dataclass(frozen=True)
class ParsedPath:
    """A reference path split into lookup segments.

    ``segments`` holds names with any ``[]`` marker removed and without the
    leading ``data`` segment. ``wants_element`` records a marker on the final
    segment, asking for the element type of a collection.
    """

    raw: str
    segments: tuple[str, ...]
    is_data_source: bool = False
    wants_element: bool = False


def strip_element_marker(segment: str) -> str:
    if segment.endswith(ELEMENT_MARKER):
        return segment[: -len(ELEMENT_MARKER)]
    return segment


def parse_path(path: str) -> ParsedPath | None:
    """Split ``path`` on ``.``; return ``None`` when it has fewer than 2 segments."""

    parts = path.split(".")
    if len(parts) < 2:
        return None

    is_data_source = parts[0] == DATA_PREFIX
    if is_data_source:
        parts = parts[1:]

    return ParsedPath(
        raw=path,
        segments=tuple(strip_element_marker(part) for part in parts),
        is_data_source=is_data_source,
        wants_element=parts[-1].endswith(ELEMENT_MARKER),
    )


__all__ = [
    "DATA_PREFIX",
    "ELEMENT_MARKER",
    "ParsedPath",
    "parse_path",
    "strip_element_marker",
]

"""Extract a single value from a raw HL7 v2.x message by path.

The message is never parsed into an object graph. Delimiters are read from
the ``MSH`` header on every call and the addressed segment is split level by
level: segment, field, repetition, component, subcomponent. An address that
points past the available data yields an empty string, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hl7path.common.constants import (
    ENCODING_CHARACTERS_FIELD,
    FIELD_SEPARATOR_FIELD,
    HEADER_SEGMENT,
)
from hl7path.common.schemas import HL7Path
from hl7path.extraction.delimiters import DelimiterSet, read_delimiter_block, split_segments
from hl7path.paths.parser import parse_path
from hl7path.paths.validator import validate_path

logger = logging.getLogger(__name__)


def _select(parts: list[str], index: int, level: str, path: HL7Path) -> str | None:
    """Return the 1-based ``index`` of ``parts``, or None when out of range."""
    if index > len(parts):
        logger.debug("%s %d out of range for %s (%d available)", level, index, path, len(parts))
        return None
    return parts[index - 1]


def _find_segment(segments: list[str], path: HL7Path) -> str | None:
    # Prefix match: a request for "ZZZ" also counts segments named "ZZZ1"
    count = 0
    for segment in segments:
        if segment.startswith(path.segment):
            count += 1
            if count == path.segment_index:
                return segment
    logger.debug("Segment %s occurrence %d not found (%d present)", path.segment, path.segment_index, count)
    return None


def _split_fields(segment: str, path: HL7Path, delimiters: DelimiterSet) -> list[str]:
    fields = segment.split(delimiters.field)
    if path.segment == HEADER_SEGMENT:
        # MSH-1 is consumed by the split; put it back so MSH-2 stays at index 2
        fields.insert(FIELD_SEPARATOR_FIELD, delimiters.field)
    return fields


def abstract_hl7(message: str, path: HL7Path) -> str:
    """Return the value addressed by ``path`` inside ``message``.

    Args:
        message: Raw HL7 v2.x message. Segments may be separated by ``\\r``,
            ``\\n`` or ``\\r\\n``.
        path: Address of the value. The zero-value path returns ``message``.

    Returns:
        The raw delimited substring, without escape-sequence decoding, or an
        empty string if the addressed segment, field, repetition, component or
        subcomponent is absent.

    Raises:
        PathValidationError: If ``path`` breaks a hierarchy rule. Checked
            before the message is inspected.
        MessageStructureError: If the header or its delimiter block is malformed.
    """
    validate_path(path)

    if path.is_whole_message:
        return message

    block = read_delimiter_block(message)
    if path.segment == HEADER_SEGMENT and path.field == FIELD_SEPARATOR_FIELD:
        return block[0]
    delimiters = DelimiterSet.from_block(block)

    segment = _find_segment(split_segments(message), path)
    if segment is None:
        return ""
    if path.field == 0:
        return segment

    fields = _split_fields(segment, path, delimiters)
    # index 0 is the segment name, so field numbers index the list directly
    if path.field >= len(fields):
        logger.debug("Field %d out of range for %s (%d available)", path.field, path, len(fields) - 1)
        return ""
    field = fields[path.field]

    # MSH-2 carries the repetition separator as data
    if path.segment == HEADER_SEGMENT and path.field == ENCODING_CHARACTERS_FIELD:
        repetitions = [field]
    else:
        repetitions = field.split(delimiters.repetition)
    repetition = _select(repetitions, path.repetition_index, "Repetition", path)
    if repetition is None:
        return ""
    if path.component == 0:
        return repetition

    component = _select(repetition.split(delimiters.component), path.component, "Component", path)
    if component is None:
        return ""
    if path.subcomponent == 0:
        return component

    subcomponent = _select(
        component.split(delimiters.subcomponent), path.subcomponent, "Subcomponent", path
    )
    return subcomponent if subcomponent is not None else ""


def extract(message: str, path_text: str) -> str:
    """Parse ``path_text`` and extract the addressed value from ``message``."""
    return abstract_hl7(message, parse_path(path_text))


def abstract_many(message: str, paths: Iterable[str]) -> dict[str, str]:
    """Extract several values from one message, keyed by path text.

    Each path is resolved independently; the first error raised propagates.
    """
    return {path_text: extract(message, path_text) for path_text in paths}


__all__ = ["abstract_hl7", "extract", "abstract_many"]

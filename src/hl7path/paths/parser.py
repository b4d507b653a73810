"""Parser for the compact HL7 path notation.

Supported forms, with ``-`` and ``.`` usable interchangeably as separators::

    SEGMENT[SEGMENT_INDEX]-FIELD[REPETITION_INDEX].COMPONENT.SUBCOMPONENT

Everything after the segment name is optional. Examples:

    PID[1]-5[2].3.1   -> PID, 1, 5, 2, 3, 1
    PV1-2             -> PV1, 1, 2, 1
    MSH-10            -> MSH, 1, 10, 1
    OBX[2].5.2        -> OBX, 2, 5, 1, 2
"""

from __future__ import annotations

from hl7path.common.constants import PATH_PATTERN, SEGMENT_NAME_LENGTH
from hl7path.common.errors import PathFormatError, SegmentNameError
from hl7path.common.schemas import HL7Path


def parse_segment_name(name: str) -> str:
    """Check that ``name`` is a 3-character uppercase alphanumeric segment name.

    Raises:
        SegmentNameError: With a message naming the specific violation.
    """
    if len(name) != SEGMENT_NAME_LENGTH:
        raise SegmentNameError(name, "segment name must be 3 characters")
    if not ("A" <= name[0] <= "Z"):
        raise SegmentNameError(name, "segment name must begin with an uppercase letter")
    for char in name[1:]:
        if not ("A" <= char <= "Z" or "0" <= char <= "9"):
            raise SegmentNameError(name, "segment name must be uppercase alphanumeric")
    return name


def _int_or_default(value: str | None, default: int) -> int:
    if not value:
        return default
    return int(value)


def parse_path(text: str) -> HL7Path:
    """Parse path text into an HL7Path.

    An empty string yields the zero-value path, which selects the whole
    message. Omitted segment and repetition indices default to 1; the
    repetition only defaults when a field is present.

    Args:
        text: Path text such as ``"PID-3[2].5"``.

    Returns:
        The parsed HL7Path. It is not validated against the hierarchy rules.

    Raises:
        PathFormatError: If the text does not match the grammar.
        SegmentNameError: If the segment token is malformed.
    """
    if text == "":
        return HL7Path()

    match = PATH_PATTERN.fullmatch(text)
    if match is None:
        raise PathFormatError(text)

    groups = match.groupdict()
    segment = parse_segment_name(groups["segment"])
    field = _int_or_default(groups["field"], 0)

    return HL7Path(
        segment=segment,
        segment_index=_int_or_default(groups["segment_index"], 1),
        field=field,
        repetition_index=_int_or_default(groups["repetition_index"], 1 if field > 0 else 0),
        component=_int_or_default(groups["component"], 0),
        subcomponent=_int_or_default(groups["subcomponent"], 0),
    )


def format_path(path: HL7Path) -> str:
    """Serialize an HL7Path back into path text accepted by :func:`parse_path`."""
    return str(path)


__all__ = ["parse_path", "parse_segment_name", "format_path"]

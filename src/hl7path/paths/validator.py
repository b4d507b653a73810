"""Hierarchy rules every HL7Path must satisfy before it touches a message."""

from __future__ import annotations

from hl7path.common.constants import FIELD_SEPARATOR_FIELD, HEADER_SEGMENT
from hl7path.common.errors import PathValidationError
from hl7path.common.schemas import HL7Path


def validate_path(path: HL7Path) -> None:
    """Validate the structural consistency of a path.

    Rules are checked in a fixed order and the first violated rule is
    reported.

    Raises:
        PathValidationError: If any rule is violated.
    """
    if path.segment == "":
        if (
            path.segment_index != 0
            or path.field != 0
            or path.repetition_index != 0
            or path.component != 0
            or path.subcomponent != 0
        ):
            raise PathValidationError(
                path, "if Segment is empty, the rest of the path must be empty or 0"
            )
        return

    if path.segment == HEADER_SEGMENT and path.segment_index != 1:
        raise PathValidationError(path, "if Segment is MSH, SegmentIndex must be 1")

    # MSH-1 is the field separator character and has no sub-structure
    if path.segment == HEADER_SEGMENT and path.field == FIELD_SEPARATOR_FIELD:
        if path.component != 0 or path.subcomponent != 0:
            raise PathValidationError(
                path, "if Segment is MSH and Field is 1, the rest of the path must be empty or 0"
            )

    if path.field != 0 and path.segment == "":
        raise PathValidationError(path, "if Field is set, Segment must be set")

    if path.repetition_index != 0 and path.field == 0:
        raise PathValidationError(path, "if RepetitionIndex is set, Field must be set")

    if path.field != 0 and path.repetition_index == 0:
        raise PathValidationError(path, "if Field is set, RepetitionIndex must be at least 1")

    if path.component != 0 and path.field == 0:
        raise PathValidationError(path, "if Component is set, Field must be set")

    if path.subcomponent != 0 and path.component == 0:
        raise PathValidationError(path, "if Subcomponent is set, Component must be set")


def is_valid_path(path: HL7Path) -> bool:
    """Return True if ``path`` passes :func:`validate_path`."""
    try:
        validate_path(path)
    except PathValidationError:
        return False
    return True


__all__ = ["validate_path", "is_valid_path"]

"""Exception hierarchy for hl7path."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hl7path.common.schemas import HL7Path


class HL7PathError(ValueError):
    """Base class for every error raised by hl7path."""


class PathFormatError(HL7PathError):
    """Raised when path text does not match the path grammar."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__("invalid path format")


class SegmentNameError(HL7PathError):
    """Raised when a segment token is not a 3-character uppercase name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(reason)


class PathValidationError(HL7PathError):
    """Raised when an HL7Path breaks a hierarchy rule."""

    def __init__(self, path: HL7Path, reason: str) -> None:
        self.path = path
        super().__init__(reason)


class MessageStructureError(HL7PathError):
    """Raised when a message header or its delimiter block is malformed."""


__all__ = [
    "HL7PathError",
    "PathFormatError",
    "SegmentNameError",
    "PathValidationError",
    "MessageStructureError",
]

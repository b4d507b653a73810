"""Shared schema, errors, constants and settings for hl7path."""

from hl7path.common.config import HL7PathConfig
from hl7path.common.errors import (
    HL7PathError,
    MessageStructureError,
    PathFormatError,
    PathValidationError,
    SegmentNameError,
)
from hl7path.common.schemas import HL7Path

__all__ = [
    "HL7Path",
    "HL7PathConfig",
    "HL7PathError",
    "PathFormatError",
    "SegmentNameError",
    "PathValidationError",
    "MessageStructureError",
]

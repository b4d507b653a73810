"""Constants for HL7 v2.x header layout and path grammar."""

import re
from typing import Final

# The header segment and the only segment allowed to carry the delimiter block
HEADER_SEGMENT: Final[str] = "MSH"

# "MSH" + field, component, repetition, escape, subcomponent + closing pair
DELIMITER_BLOCK_LENGTH: Final[int] = 7
MIN_MESSAGE_LENGTH: Final[int] = len(HEADER_SEGMENT) + DELIMITER_BLOCK_LENGTH

# MSH-1 is the field separator, MSH-2 holds the encoding characters
FIELD_SEPARATOR_FIELD: Final[int] = 1
ENCODING_CHARACTERS_FIELD: Final[int] = 2

SEGMENT_SEPARATOR: Final[str] = "\r"

# Compound terminator first, so "\r\n" is never split twice
SEGMENT_TERMINATORS: Final[tuple[str, ...]] = ("\r\n", "\r", "\n")

SEGMENT_NAME_LENGTH: Final[int] = 3

# SEG[i]-F[r].C.S with "-" and "." interchangeable; used with fullmatch
PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<segment>[A-Z][A-Z0-9]{2})"
    r"(?:\[(?P<segment_index>\d+)\])?"
    r"(?:[-.](?P<field>\d+)"
    r"(?:\[(?P<repetition_index>\d+)\])?"
    r"(?:[-.](?P<component>\d+)"
    r"(?:[-.](?P<subcomponent>\d+))?)?)?",
    re.ASCII,
)

__all__ = [
    "HEADER_SEGMENT",
    "DELIMITER_BLOCK_LENGTH",
    "MIN_MESSAGE_LENGTH",
    "FIELD_SEPARATOR_FIELD",
    "ENCODING_CHARACTERS_FIELD",
    "SEGMENT_SEPARATOR",
    "SEGMENT_TERMINATORS",
    "SEGMENT_NAME_LENGTH",
    "PATH_PATTERN",
]

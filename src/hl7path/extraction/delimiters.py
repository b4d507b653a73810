"""Delimiter resolution and segment splitting for HL7 v2.x messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hl7path.common.constants import (
    DELIMITER_BLOCK_LENGTH,
    HEADER_SEGMENT,
    MIN_MESSAGE_LENGTH,
    SEGMENT_SEPARATOR,
    SEGMENT_TERMINATORS,
)
from hl7path.common.errors import MessageStructureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelimiterSet:
    """The five delimiter characters declared by a message header."""

    field: str
    component: str
    repetition: str
    escape: str
    subcomponent: str

    @classmethod
    def from_block(cls, block: str) -> DelimiterSet:
        """Build a DelimiterSet from the 7-character block following ``MSH``.

        Raises:
            MessageStructureError: If a delimiter is missing or reused, or the
                block is not closed by the field separator.
        """
        field, component, repetition, escape, subcomponent = block[:5]

        if component == field:
            msg = "missing component separator"
            raise MessageStructureError(msg)
        if repetition == field:
            msg = "missing repetition separator"
            raise MessageStructureError(msg)
        if escape == field:
            msg = "missing escape character"
            raise MessageStructureError(msg)
        if subcomponent == field:
            msg = "missing subcomponent separator"
            raise MessageStructureError(msg)

        # An optional sixth encoding character may sit before the closing field separator
        if field not in block[5:DELIMITER_BLOCK_LENGTH]:
            msg = "unexpected extra separators"
            raise MessageStructureError(msg)

        if len({field, component, repetition, escape, subcomponent}) != 5:
            msg = "separators must be unique"
            raise MessageStructureError(msg)

        delimiters = cls(
            field=field,
            component=component,
            repetition=repetition,
            escape=escape,
            subcomponent=subcomponent,
        )
        logger.debug("Resolved delimiters: %r", delimiters)
        return delimiters


def read_delimiter_block(message: str) -> str:
    """Return the 7 characters following ``MSH`` at the start of ``message``.

    Raises:
        MessageStructureError: If the message does not start with ``MSH`` or is
            too short to hold a delimiter block.
    """
    if not message.startswith(HEADER_SEGMENT):
        msg = "invalid HL7 message: must begin with MSH"
        raise MessageStructureError(msg)
    if len(message) < MIN_MESSAGE_LENGTH:
        msg = "invalid HL7 message: message too short to contain separators and meaningful data"
        raise MessageStructureError(msg)
    return message[len(HEADER_SEGMENT):MIN_MESSAGE_LENGTH]


def resolve_delimiters(message: str) -> DelimiterSet:
    """Read and check the delimiter set declared in a message header."""
    return DelimiterSet.from_block(read_delimiter_block(message))


def split_segments(message: str) -> list[str]:
    """Split a message into segments on ``\\r\\n``, ``\\r`` or ``\\n``."""
    normalized = message
    for terminator in SEGMENT_TERMINATORS:
        normalized = normalized.replace(terminator, SEGMENT_SEPARATOR)
    return normalized.split(SEGMENT_SEPARATOR)


__all__ = ["DelimiterSet", "read_delimiter_block", "resolve_delimiters", "split_segments"]

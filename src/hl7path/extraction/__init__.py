"""Value extraction from raw HL7 v2.x messages."""

from hl7path.extraction.abstractor import abstract_hl7, abstract_many, extract
from hl7path.extraction.delimiters import DelimiterSet, resolve_delimiters, split_segments

__all__ = [
    "abstract_hl7",
    "abstract_many",
    "extract",
    "DelimiterSet",
    "resolve_delimiters",
    "split_segments",
]

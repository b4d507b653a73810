"""Path notation parsing and validation."""

from hl7path.paths.parser import format_path, parse_path, parse_segment_name
from hl7path.paths.validator import is_valid_path, validate_path

__all__ = [
    "parse_path",
    "parse_segment_name",
    "format_path",
    "validate_path",
    "is_valid_path",
]

"""Tests for delimiter resolution and segment splitting."""

import pytest

from hl7path.common.errors import MessageStructureError
from hl7path.extraction.delimiters import (
    DelimiterSet,
    read_delimiter_block,
    resolve_delimiters,
    split_segments,
)


class TestResolveDelimiters:
    def test_standard_delimiters(self) -> None:
        delimiters = resolve_delimiters("MSH|^~\\&|HIS|RIH")
        assert delimiters == DelimiterSet(
            field="|", component="^", repetition="~", escape="\\", subcomponent="&"
        )

    def test_custom_delimiters(self) -> None:
        delimiters = resolve_delimiters("MSH*:+?%*APP")
        assert (delimiters.field, delimiters.component, delimiters.repetition) == ("*", ":", "+")
        assert (delimiters.escape, delimiters.subcomponent) == ("?", "%")

    def test_truncation_character_allowed(self) -> None:
        delimiters = resolve_delimiters("MSH|^~\\&#|HIS")
        assert delimiters.subcomponent == "&"

    def test_must_begin_with_msh(self) -> None:
        with pytest.raises(MessageStructureError, match="must begin with MSH"):
            resolve_delimiters("PID|^~\\&|HIS")

    def test_empty_message(self) -> None:
        with pytest.raises(MessageStructureError, match="must begin with MSH"):
            resolve_delimiters("")

    def test_too_short(self) -> None:
        with pytest.raises(MessageStructureError, match="message too short"):
            resolve_delimiters("MSH|^~\\&|")

    @pytest.mark.parametrize(
        ("message", "reason"),
        [
            ("MSH||~\\&|HIS", "missing component separator"),
            ("MSH|^|\\&|HIS", "missing repetition separator"),
            ("MSH|^~|&|HIS", "missing escape character"),
            ("MSH|^~\\||HIS", "missing subcomponent separator"),
        ],
    )
    def test_missing_separator(self, message: str, reason: str) -> None:
        with pytest.raises(MessageStructureError, match=reason):
            resolve_delimiters(message)

    def test_unclosed_block(self) -> None:
        with pytest.raises(MessageStructureError, match="unexpected extra separators"):
            resolve_delimiters("MSH|^~\\&#!HIS")

    def test_duplicate_separators(self) -> None:
        with pytest.raises(MessageStructureError, match="separators must be unique"):
            resolve_delimiters("MSH|^^\\&|HIS")

    def test_read_block(self) -> None:
        assert read_delimiter_block("MSH|^~\\&|HIS") == "|^~\\&|H"


class TestSplitSegments:
    def test_carriage_return(self) -> None:
        assert split_segments("MSH|a\rPID|b") == ["MSH|a", "PID|b"]

    def test_line_feed(self) -> None:
        assert split_segments("MSH|a\nPID|b") == ["MSH|a", "PID|b"]

    def test_crlf_not_split_twice(self) -> None:
        assert split_segments("MSH|a\r\nPID|b\r\nOBX|c") == ["MSH|a", "PID|b", "OBX|c"]

    def test_mixed_terminators(self) -> None:
        assert split_segments("A\rB\nC\r\nD") == ["A", "B", "C", "D"]

    def test_single_segment(self) -> None:
        assert split_segments("MSH|a") == ["MSH|a"]

"""Tests for the HL7Path schema."""

import pytest
from pydantic import ValidationError

from hl7path.common.schemas import HL7Path
from hl7path.paths.parser import parse_path


class TestHL7Path:
    def test_defaults_are_zero(self) -> None:
        path = HL7Path()
        assert path.segment == ""
        assert path.segment_index == 0
        assert path.field == 0
        assert path.repetition_index == 0
        assert path.component == 0
        assert path.subcomponent == 0
        assert path.is_whole_message

    def test_not_whole_message(self) -> None:
        assert not HL7Path(segment="PID", segment_index=1).is_whole_message

    def test_value_equality(self) -> None:
        assert HL7Path(segment="PID", segment_index=1) == HL7Path(segment="PID", segment_index=1)
        assert HL7Path(segment="PID", segment_index=1) != HL7Path(segment="PID", segment_index=2)

    def test_hashable(self) -> None:
        paths = {parse_path("PID-3"), parse_path("PID.3"), parse_path("PID-3[1]")}
        assert len(paths) == 1

    def test_frozen(self) -> None:
        path = parse_path("PID-3")
        with pytest.raises(ValidationError):
            path.field = 4  # type: ignore[misc]

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HL7Path(segment="PID", segment_index=-1)

    def test_dict_round_trip(self) -> None:
        path = parse_path("PID[2]-3[4].5.6")
        dumped = path.model_dump()
        assert dumped == {
            "segment": "PID",
            "segment_index": 2,
            "field": 3,
            "repetition_index": 4,
            "component": 5,
            "subcomponent": 6,
        }
        assert HL7Path.model_validate(dumped) == path

    def test_json_round_trip(self) -> None:
        path = parse_path("ZZZ-2[2].2.2")
        assert HL7Path.model_validate_json(path.model_dump_json()) == path

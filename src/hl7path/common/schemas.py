"""Pydantic v2 schema for HL7 path addresses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HL7Path(BaseModel):
    """Address of a value inside an HL7 v2.x message.

    A zero in any numeric level means "the whole parent": ``field=0`` selects
    the full segment, ``component=0`` the full repetition, and so on. The
    zero-value path ``HL7Path()`` selects the entire message.
    """

    segment: str = ""
    segment_index: int = Field(default=0, ge=0)
    field: int = Field(default=0, ge=0)
    repetition_index: int = Field(default=0, ge=0)
    component: int = Field(default=0, ge=0)
    subcomponent: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @property
    def is_whole_message(self) -> bool:
        """True for the zero-value path."""
        return self == HL7Path()

    def __str__(self) -> str:
        if not self.segment:
            return ""
        text = self.segment
        if self.segment_index != 1:
            text += f"[{self.segment_index}]"
        if not (self.field or self.repetition_index or self.component or self.subcomponent):
            return text
        text += f"-{self.field}"
        # the parser only defaults the repetition to 1 when a field is given
        if self.repetition_index != (1 if self.field else 0):
            text += f"[{self.repetition_index}]"
        if self.component or self.subcomponent:
            text += f".{self.component}"
        if self.subcomponent:
            text += f".{self.subcomponent}"
        return text


__all__ = ["HL7Path"]

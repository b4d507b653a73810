"""Command-line configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings


class HL7PathConfig(BaseSettings):
    """Settings loaded from ``HL7PATH_*`` environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    encoding: str = "utf-8"
    strip_trailing_newline: bool = True

    model_config = {"env_prefix": "HL7PATH_", "case_sensitive": False}


__all__ = ["HL7PathConfig"]

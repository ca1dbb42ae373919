"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from aml_models.config.constants import DEFAULT_FORMAT, DEFAULT_JSON_INDENT, OUTPUT_FORMATS


def check_format(value: str) -> str:
    value = value.lower()
    if value not in OUTPUT_FORMATS:
        raise ValueError(f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}")
    return value


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_format: str = Field(default=DEFAULT_FORMAT, description="Output format when --format is not given")
    warn_unknown_enums: bool = Field(
        default=True, description="Warn when a decoded payload carries undocumented enum values",
    )
    json_indent: int = Field(
        default=DEFAULT_JSON_INDENT, ge=1, le=8, description="Indentation of canonical JSON output",
    )

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        return check_format(v)

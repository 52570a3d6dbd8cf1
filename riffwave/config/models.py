"""Pydantic models for riffwave configuration."""

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

from riffwave.config.enums import SampleType


class DecoderSettings(BaseModel):
    """User-editable decoder behaviour."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text_encoding: str = Field("utf-8", description="Encoding used for LIST/INFO text fields")
    strip_text_terminators: bool = Field(
        True, description="Strip trailing NUL bytes from LIST/INFO text fields"
    )
    strict_frame_alignment: bool = Field(
        False, description="Reject sample data that does not end on a frame boundary"
    )
    default_sample_type: SampleType = Field(
        SampleType.F32, description="Sample type used when none is requested explicitly"
    )

    @field_validator("text_encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Normalise the encoding name and make sure Python knows it."""
        try:
            return codecs.lookup(value.strip()).name
        except LookupError:
            raise ValueError(f"Unknown text encoding: {value}")

    @field_validator("default_sample_type", mode="before")
    @classmethod
    def validate_sample_type(cls, value) -> SampleType:
        if isinstance(value, str):
            try:
                return SampleType(value.lower())
            except ValueError:
                raise ValueError(f"Invalid sample type: {value}")
        return value

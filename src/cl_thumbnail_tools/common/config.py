"""Thumbnail configuration."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Aliases accepted for the target format, compared upper-cased
_FORMAT_ALIASES: dict[str, str] = {
    "JPG": "JPEG",
}


class TargetFormat(StrEnum):
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"

    @classmethod
    def normalize(cls, value: str) -> "TargetFormat":
        """Map case-insensitive input and known aliases onto a member."""
        upper = value.strip().upper()
        return cls(_FORMAT_ALIASES.get(upper, upper))


class ThumbnailConfig(BaseModel):
    """Limits and output preferences for one conversion.

    Instances are frozen; use :meth:`updated` to derive a changed copy.

    Attributes:
        jpeg_quality: JPEG compression quality (0-100)
        source_max_bytes: Max. allowed size of the source file in bytes
        source_max_pixels: Max. number of source pixels (width x height)
        target_width: Width of the thumbnail's bounding box
        target_height: Height of the thumbnail's bounding box
        target_format: Output format, one of JPEG, PNG, GIF
        command_timeout: Seconds before the command line tool is abandoned
                         (None = wait indefinitely)
    """

    model_config = ConfigDict(frozen=True)

    jpeg_quality: int = Field(default=100, ge=0, le=100)
    source_max_bytes: int = Field(default=500_000, gt=0)
    source_max_pixels: int = Field(default=20_000_000, gt=0)
    target_width: int = Field(default=32, gt=0)
    target_height: int = Field(default=32, gt=0)
    target_format: TargetFormat = TargetFormat.JPEG
    command_timeout: float | None = Field(default=None, gt=0)

    @field_validator("target_format", mode="before")
    @classmethod
    def normalize_target_format(cls, v: object) -> object:
        if isinstance(v, str):
            return TargetFormat.normalize(v)
        return v

    def updated(self, **changes: object) -> Self:
        """Return a validated copy with ``changes`` applied."""
        return self.model_validate({**self.model_dump(), **changes})

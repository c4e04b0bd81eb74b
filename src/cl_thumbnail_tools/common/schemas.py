"""Pydantic models passed between validator, planner, backends and cascade."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from ..utils.media_types import SourceFormat
from .errors import CreateThumbnailError

# ─────────────────────────────────────────────────────────────
# Source & plan
# ─────────────────────────────────────────────────────────────


class SourceDescriptor(BaseModel):
    """What is known about a source file.

    ``width`` and ``height`` stay None until a backend decodes the image.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    byte_size: int
    source_format: SourceFormat = SourceFormat.UNKNOWN
    width: int | None = None
    height: int | None = None

    @property
    def pixel_count(self) -> int | None:
        if self.width is None or self.height is None:
            return None
        return self.width * self.height

    def with_dimensions(self, width: int, height: int) -> "SourceDescriptor":
        return self.model_copy(update={"width": width, "height": height})


class ThumbnailPlan(BaseModel):
    """Target pixel dimensions of a thumbnail."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int


# ─────────────────────────────────────────────────────────────
# Backend results
# ─────────────────────────────────────────────────────────────


class Success(BaseModel):
    """Backend wrote a non-empty thumbnail to ``output_path``."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["success"] = "success"
    backend: str
    output_path: Path
    width: int | None = None
    height: int | None = None


class Declined(BaseModel):
    """Backend is unavailable or could not process the input; try the next one."""

    model_config = ConfigDict(frozen=True)

    outcome: Literal["declined"] = "declined"
    backend: str
    reason: str


class Rejected(BaseModel):
    """Input violates a hard constraint; abort the cascade with ``error``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    outcome: Literal["rejected"] = "rejected"
    backend: str
    error: CreateThumbnailError


BackendResult = Success | Declined | Rejected

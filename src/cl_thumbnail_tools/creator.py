"""ThumbnailCreator - configurable entry point for thumbnail creation."""

from pathlib import Path
from typing import Self

from .cascade import ThumbnailCascade
from .common.config import TargetFormat, ThumbnailConfig
from .common.schemas import Success


class ThumbnailCreator:
    """Holds a frozen config and hands it to the cascade on every call.

    Setters replace the config with a validated copy, so a running
    ``create`` always sees one consistent set of limits.
    """

    def __init__(
        self,
        config: ThumbnailConfig | None = None,
        cascade: ThumbnailCascade | None = None,
    ) -> None:
        self.config: ThumbnailConfig = config if config is not None else ThumbnailConfig()
        self.cascade: ThumbnailCascade = cascade if cascade is not None else ThumbnailCascade()

    def create(self, source_file: str | Path, target_file: str | Path) -> Success:
        return self.cascade.create(source_file, target_file, self.config)

    def _update(self, **changes: object) -> Self:
        self.config = self.config.updated(**changes)
        return self

    # ─────────────────────────────────────────────
    # Configuration surface
    # ─────────────────────────────────────────────

    @property
    def jpeg_compression_quality(self) -> int:
        return self.config.jpeg_quality

    @jpeg_compression_quality.setter
    def jpeg_compression_quality(self, value: int) -> None:
        _ = self._update(jpeg_quality=value)

    @property
    def source_max_bytes(self) -> int:
        return self.config.source_max_bytes

    @source_max_bytes.setter
    def source_max_bytes(self, value: int) -> None:
        _ = self._update(source_max_bytes=value)

    @property
    def source_max_pixels(self) -> int:
        return self.config.source_max_pixels

    @source_max_pixels.setter
    def source_max_pixels(self, value: int) -> None:
        _ = self._update(source_max_pixels=value)

    @property
    def target_width(self) -> int:
        return self.config.target_width

    @target_width.setter
    def target_width(self, value: int) -> None:
        _ = self._update(target_width=value)

    @property
    def target_height(self) -> int:
        return self.config.target_height

    @target_height.setter
    def target_height(self, value: int) -> None:
        _ = self._update(target_height=value)

    @property
    def target_type(self) -> TargetFormat:
        return self.config.target_format

    @target_type.setter
    def target_type(self, value: str) -> None:
        _ = self._update(target_format=value)

    def set_jpeg_compression_quality(self, value: int) -> Self:
        return self._update(jpeg_quality=value)

    def set_source_max_bytes(self, value: int) -> Self:
        return self._update(source_max_bytes=value)

    def set_source_max_pixels(self, value: int) -> Self:
        return self._update(source_max_pixels=value)

    def set_target_width(self, value: int) -> Self:
        return self._update(target_width=value)

    def set_target_height(self, value: int) -> Self:
        return self._update(target_height=value)

    def set_bounding_box(self, width: int, height: int) -> Self:
        return self._update(target_width=width, target_height=height)

    def set_target_type(self, value: str) -> Self:
        return self._update(target_format=value)


def create_thumbnail(
    source_file: str | Path,
    target_file: str | Path,
    config: ThumbnailConfig | None = None,
) -> Success:
    """Create a thumbnail with the default backend cascade."""
    return ThumbnailCascade().create(
        source_file, target_file, config if config is not None else ThumbnailConfig()
    )

"""OpenCV backend, the last resort.

Codec support in OpenCV depends on how it was built, so source and target
formats are probed at runtime instead of assumed.
"""

from collections.abc import Callable
from pathlib import Path
from typing_extensions import override

import cv2
import numpy as np
from loguru import logger

from ..algo.dimension_planner import plan_dimensions
from ..common.config import TargetFormat, ThumbnailConfig
from ..common.errors import UnsupportedOutputFormatError
from ..common.schemas import BackendResult, Rejected, SourceDescriptor, Success
from ..utils.media_types import SourceFormat
from ..utils.profiling import timed
from ..utils.staged_output import staged_output
from .base import ThumbnailBackend

# Source format -> imdecode flag
DECODE_FLAGS: dict[SourceFormat, int] = {
    SourceFormat.GIF: cv2.IMREAD_UNCHANGED,
    SourceFormat.JPEG: cv2.IMREAD_COLOR,
    SourceFormat.PNG: cv2.IMREAD_UNCHANGED,
    SourceFormat.WBMP: cv2.IMREAD_GRAYSCALE,
}

# Target format -> (extension, imencode params)
ENCODERS: dict[TargetFormat, tuple[str, Callable[[ThumbnailConfig], list[int]]]] = {
    TargetFormat.JPEG: (".jpg", lambda config: [cv2.IMWRITE_JPEG_QUALITY, config.jpeg_quality]),
    TargetFormat.PNG: (".png", lambda config: []),
    TargetFormat.GIF: (".gif", lambda config: []),
}


def has_writer(target_format: TargetFormat) -> bool:
    extension, _ = ENCODERS[target_format]
    return bool(cv2.haveImageWriter(f"thumbnail{extension}"))


def to_bgra(image: np.ndarray) -> np.ndarray:
    if image.dtype != np.uint8:
        image = cv2.convertScaleAbs(image, alpha=255.0 / float(np.iinfo(image.dtype).max))
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGRA)
    if image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2BGRA)
    return image


def flatten_on_white(image: np.ndarray) -> np.ndarray:
    alpha = image[:, :, 3:4].astype(np.float32) / 255.0
    bgr = image[:, :, :3].astype(np.float32)
    flattened = bgr * alpha + 255.0 * (1.0 - alpha)
    return np.clip(np.rint(flattened), 0, 255).astype(np.uint8)


class RasterLibraryBackend(ThumbnailBackend):
    """Thumbnails through OpenCV, preserving source transparency."""

    @property
    @override
    def name(self) -> str:
        return "opencv"

    @override
    def is_available(self) -> bool:
        return any(has_writer(target_format) for target_format in ENCODERS)

    @timed
    @override
    def attempt(
        self,
        source: SourceDescriptor,
        target_file: Path,
        config: ThumbnailConfig,
    ) -> BackendResult:
        flag = DECODE_FLAGS.get(source.source_format)
        if flag is None:
            return self.decline(f"Unsupported source format {source.source_format}")
        if not cv2.haveImageReader(str(source.path)):
            return self.decline(f"OpenCV has no {source.source_format} reader compiled in")

        if not has_writer(config.target_format):
            return Rejected(
                backend=self.name,
                error=UnsupportedOutputFormatError(config.target_format.value),
            )

        try:
            data = np.fromfile(source.path, dtype=np.uint8)
            image = cv2.imdecode(data, flag)
        except (OSError, cv2.error) as exc:
            return self.decline(f"OpenCV cannot read {source.path}: {exc}")
        if image is None:
            return self.decline(f"OpenCV cannot decode {source.path}")

        height, width = image.shape[:2]
        rejected = self.check_decoded(source.with_dimensions(width, height), config)
        if rejected is not None:
            return rejected

        plan = plan_dimensions(width, height, config.target_width, config.target_height)

        try:
            resized = cv2.resize(
                to_bgra(image), (plan.width, plan.height), interpolation=cv2.INTER_AREA
            )
            # Start fully transparent so uncovered areas never turn opaque
            canvas = np.zeros((plan.height, plan.width, 4), dtype=np.uint8)
            canvas[: plan.height, : plan.width] = resized

            output = canvas
            if config.target_format == TargetFormat.JPEG:
                output = flatten_on_white(canvas)

            extension, params = ENCODERS[config.target_format]
            ok, buffer = cv2.imencode(extension, output, params(config))
        except cv2.error as exc:
            return self.decline(f"OpenCV failed: {exc}")
        if not ok:
            return self.decline(f"OpenCV could not encode {config.target_format}")

        with staged_output(target_file) as staged:
            _ = staged.path.write_bytes(buffer.tobytes())
            if not staged.commit():
                return self.decline("OpenCV produced no output")

        logger.debug(f"OpenCV wrote {len(buffer)} bytes to {target_file}")
        return Success(
            backend=self.name,
            output_path=target_file,
            width=plan.width,
            height=plan.height,
        )

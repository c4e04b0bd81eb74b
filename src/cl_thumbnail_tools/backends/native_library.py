"""Pillow backend with colour profile normalisation.

Pillow reads the image header lazily, so the pixel budget is checked before
any pixel data is decoded.
"""

from io import BytesIO
from pathlib import Path
from typing_extensions import override

from loguru import logger
from PIL import Image, ImageCms, UnidentifiedImageError, features

from ..algo.dimension_planner import infer_other_side, plan_dominant_side
from ..common.config import TargetFormat, ThumbnailConfig
from ..common.errors import PixelBudgetExceededError
from ..common.schemas import BackendResult, Rejected, SourceDescriptor, Success
from ..utils.profiling import timed
from ..utils.staged_output import staged_output
from .base import ThumbnailBackend

SRGB_PROFILE = ImageCms.createProfile("sRGB")

WHITE = (255, 255, 255)


def has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info


def normalize_color(img: Image.Image) -> Image.Image:
    """
    Convert to sRGB and drop any embedded ICC profile.

    Returns an RGB or RGBA image, depending on whether the source carries
    transparency.
    """
    mode = "RGBA" if has_alpha(img) else "RGB"
    icc = img.info.get("icc_profile")

    if img.mode not in (mode, "CMYK"):
        img = img.convert(mode)

    if icc:
        try:
            embedded = ImageCms.ImageCmsProfile(BytesIO(icc))
            converted = ImageCms.profileToProfile(img, embedded, SRGB_PROFILE, outputMode=mode)
            if converted is not None:
                img = converted
        except ImageCms.PyCMSError as exc:
            logger.debug(f"Ignoring unusable ICC profile: {exc}")

    if img.mode != mode:
        img = img.convert(mode)

    _ = img.info.pop("icc_profile", None)
    return img


def flatten_on_white(img: Image.Image) -> Image.Image:
    if img.mode != "RGBA":
        return img.convert("RGB")
    background = Image.new("RGB", img.size, WHITE)
    background.paste(img, mask=img.getchannel("A"))
    return background


def exceeds_bomb_limit(config: ThumbnailConfig) -> bool:
    """True if an image Pillow refuses as a decompression bomb is over budget too."""
    if Image.MAX_IMAGE_PIXELS is None:
        return False
    # Pillow only raises above twice its warning threshold
    return 2 * Image.MAX_IMAGE_PIXELS >= config.source_max_pixels


def save_image(img: Image.Image, output_path: Path, config: ThumbnailConfig) -> None:
    if config.target_format == TargetFormat.JPEG:
        flatten_on_white(img).save(output_path, format="JPEG", quality=config.jpeg_quality)
    else:
        img.save(output_path, format=config.target_format.value)


class NativeLibraryBackend(ThumbnailBackend):
    """Thumbnails through Pillow, authoritative for the pixel budget."""

    @property
    @override
    def name(self) -> str:
        return "pillow"

    @override
    def is_available(self) -> bool:
        # Colour management needs Pillow built against LittleCMS
        return bool(features.check_module("littlecms2"))

    def can_encode(self, target_format: TargetFormat) -> bool:
        _ = Image.init()
        return target_format.value in Image.SAVE

    @timed
    @override
    def attempt(
        self,
        source: SourceDescriptor,
        target_file: Path,
        config: ThumbnailConfig,
    ) -> BackendResult:
        if not self.can_encode(config.target_format):
            return self.decline(f"Pillow cannot encode {config.target_format}")

        try:
            img = Image.open(source.path)
        except Image.DecompressionBombError as exc:
            if exceeds_bomb_limit(config):
                return Rejected(
                    backend=self.name,
                    error=PixelBudgetExceededError(None, None, config.source_max_pixels),
                )
            return self.decline(f"Pillow refused {source.path}: {exc}")
        except (UnidentifiedImageError, OSError) as exc:
            return self.decline(f"Pillow cannot read {source.path}: {exc}")

        with img:
            decoded = source.with_dimensions(img.width, img.height)
            rejected = self.check_decoded(decoded, config)
            if rejected is not None:
                return rejected

            width, height = plan_dominant_side(
                img.width, img.height, config.target_width, config.target_height
            )
            plan = infer_other_side(img.width, img.height, width, height)

            try:
                normalized = normalize_color(img)
                thumbnail = normalized.resize(
                    (plan.width, plan.height), Image.Resampling.LANCZOS
                )
                with staged_output(target_file) as staged:
                    save_image(thumbnail, staged.path, config)
                    if not staged.commit():
                        return self.decline("Pillow produced no output")
            except (OSError, ValueError) as exc:
                return self.decline(f"Pillow failed: {exc}")

        return Success(
            backend=self.name,
            output_path=target_file,
            width=plan.width,
            height=plan.height,
        )

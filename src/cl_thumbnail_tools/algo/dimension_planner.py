"""Aspect-preserving thumbnail dimension planning."""

import math

from ..common.errors import InvalidDimensionsError
from ..common.schemas import ThumbnailPlan


def _round_half_away(value: float) -> int:
    # Inputs are positive here; never collapse a side to zero pixels
    return max(1, math.floor(value + 0.5))


def _check_positive(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)


def plan_dimensions(
    source_width: int,
    source_height: int,
    bound_width: int,
    bound_height: int,
) -> ThumbnailPlan:
    """
    Fit a source into a bounding box, scaling by its longer relative side.

    Sources that already fit are returned unchanged; images are never upscaled.

    Args:
        source_width: Decoded width of the source image
        source_height: Decoded height of the source image
        bound_width: Width of the bounding box
        bound_height: Height of the bounding box

    Returns:
        ThumbnailPlan with both sides rounded half away from zero

    Raises:
        InvalidDimensionsError: If any side is zero or negative
    """
    _check_positive(source_width, source_height)
    _check_positive(bound_width, bound_height)

    if source_width <= bound_width and source_height <= bound_height:
        return ThumbnailPlan(width=source_width, height=source_height)

    width: float = source_width
    height: float = source_height
    width_factor = source_width / bound_width
    height_factor = source_height / bound_height

    if width_factor >= height_factor and width_factor > 1:
        width /= width_factor
        height /= width_factor
    elif height_factor > 1:
        width /= height_factor
        height /= height_factor

    return ThumbnailPlan(width=_round_half_away(width), height=_round_half_away(height))


def plan_dominant_side(
    source_width: int,
    source_height: int,
    bound_width: int,
    bound_height: int,
) -> tuple[int | None, int | None]:
    """
    Pick the one bounding side a library should fit to.

    Returns ``(bound_width, None)`` when the width is the constraining side and
    ``(None, bound_height)`` otherwise. The missing side is left for the
    imaging library to infer, aspect-locked.
    """
    _check_positive(source_width, source_height)
    _check_positive(bound_width, bound_height)

    fit_width = (bound_width / source_width) < (bound_height / source_height)
    if fit_width:
        return bound_width, None
    return None, bound_height


def infer_other_side(
    source_width: int,
    source_height: int,
    width: int | None,
    height: int | None,
) -> ThumbnailPlan:
    """Complete a one-sided plan from :func:`plan_dominant_side`."""
    if width is not None:
        return ThumbnailPlan(
            width=width, height=_round_half_away(source_height * width / source_width)
        )
    if height is not None:
        return ThumbnailPlan(
            width=_round_half_away(source_width * height / source_height), height=height
        )
    raise ValueError("Either width or height must be given")

"""cl_thumbnail_tools - Bounding-box thumbnails with backend fallback."""

from .cascade import ThumbnailCascade, default_backends
from .common.config import TargetFormat, ThumbnailConfig
from .common.errors import (
    CreateThumbnailError,
    InvalidDimensionsError,
    InvalidTargetError,
    NoBackendAvailableError,
    NotFoundError,
    PixelBudgetExceededError,
    TooLargeError,
    UnsupportedOutputFormatError,
)
from .common.schemas import (
    BackendResult,
    Declined,
    Rejected,
    SourceDescriptor,
    Success,
    ThumbnailPlan,
)
from .creator import ThumbnailCreator, create_thumbnail

__version__ = "0.1.0"

__all__ = [
    "BackendResult",
    "CreateThumbnailError",
    "Declined",
    "InvalidDimensionsError",
    "InvalidTargetError",
    "NoBackendAvailableError",
    "NotFoundError",
    "PixelBudgetExceededError",
    "Rejected",
    "SourceDescriptor",
    "Success",
    "TargetFormat",
    "ThumbnailCascade",
    "ThumbnailConfig",
    "ThumbnailCreator",
    "ThumbnailPlan",
    "TooLargeError",
    "UnsupportedOutputFormatError",
    "__version__",
    "create_thumbnail",
    "default_backends",
]

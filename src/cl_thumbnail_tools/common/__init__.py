"""Common module - config, errors and schemas."""

from .config import TargetFormat, ThumbnailConfig
from .errors import CreateThumbnailError
from .schemas import BackendResult, SourceDescriptor, ThumbnailPlan

__all__ = [
    "BackendResult",
    "CreateThumbnailError",
    "SourceDescriptor",
    "TargetFormat",
    "ThumbnailConfig",
    "ThumbnailPlan",
]

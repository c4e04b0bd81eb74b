"""Thumbnail backends, in cascade order."""

from .base import ThumbnailBackend
from .command_line import CommandLineBackend
from .native_library import NativeLibraryBackend
from .raster_library import RasterLibraryBackend

__all__ = [
    "CommandLineBackend",
    "NativeLibraryBackend",
    "RasterLibraryBackend",
    "ThumbnailBackend",
]

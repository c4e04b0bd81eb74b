"""Exceptions raised while creating a thumbnail.

Every error that reaches the caller of ``create`` is a ``CreateThumbnailError``.
Backend-internal failures never surface here; they become declines.
"""

from pathlib import Path


class CreateThumbnailError(Exception):
    """Base class for all thumbnail creation failures."""

    def __init__(self, message: str = "Thumbnail could not be created"):
        self.message: str = message
        super().__init__(self.message)


class NotFoundError(CreateThumbnailError):
    """Raised when the source file is missing or not readable."""

    def __init__(self, path: str | Path):
        self.path: Path = Path(path)
        super().__init__(f"File {self.path} not found or not readable")


class TooLargeError(CreateThumbnailError):
    """Raised when the source file exceeds the byte budget."""

    def __init__(self, byte_size: int, max_bytes: int):
        self.byte_size: int = byte_size
        self.max_bytes: int = max_bytes
        super().__init__(f"File too large: {byte_size} bytes, allowed: {max_bytes} bytes")


class PixelBudgetExceededError(CreateThumbnailError):
    """Raised by the first backend that decodes an image over the pixel budget."""

    def __init__(self, width: int | None, height: int | None, max_pixels: int):
        self.width: int | None = width
        self.height: int | None = height
        self.max_pixels: int = max_pixels
        size = f"{width} x {height}" if width is not None and height is not None else "unknown"
        super().__init__(f"File pixel count is too large: {size}, allowed: {max_pixels} pixels")


class InvalidDimensionsError(CreateThumbnailError):
    """Raised when a source or bounding box has a zero or negative side."""

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        super().__init__(f"Invalid image dimensions: {width} x {height}")


class UnsupportedOutputFormatError(CreateThumbnailError):
    """Raised when the requested output format cannot be encoded."""

    def __init__(self, target_format: str):
        self.target_format: str = target_format
        super().__init__(f"Your desired output type {target_format} is not available")


class NoBackendAvailableError(CreateThumbnailError):
    """Raised when every backend declined the conversion."""

    def __init__(self, reasons: dict[str, str] | None = None):
        self.reasons: dict[str, str] = dict(reasons or {})
        details = "; ".join(f"{name}: {reason}" for name, reason in self.reasons.items())
        message = "No thumbnail backend available"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)


class InvalidTargetError(CreateThumbnailError):
    """Raised when the target path cannot hold a thumbnail file."""

    def __init__(self, path: str | Path, reason: str = "not a writable file path"):
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"Target {self.path} is {reason}")

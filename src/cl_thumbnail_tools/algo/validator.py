"""Pre-flight checks run once before any backend is attempted."""

import os
from pathlib import Path

from loguru import logger

from ..common.config import ThumbnailConfig
from ..common.errors import NotFoundError, TooLargeError
from ..common.schemas import SourceDescriptor
from ..utils.media_types import detect_source_format


def validate_source(source_file: str | Path, config: ThumbnailConfig) -> SourceDescriptor:
    """
    Check that the source exists, is readable and within the byte budget.

    Pixel counts are not checked here: dimensions are only known after a
    backend has decoded the image.

    Raises:
        NotFoundError: If the source does not exist or is not readable
        TooLargeError: If the source exceeds ``config.source_max_bytes``
    """
    path = Path(source_file)

    if not path.is_file() or not os.access(path, os.R_OK):
        raise NotFoundError(path)

    byte_size = path.stat().st_size
    if byte_size > config.source_max_bytes:
        raise TooLargeError(byte_size, config.source_max_bytes)

    source_format = detect_source_format(path)
    logger.debug(f"Validated {path}: {byte_size} bytes, format {source_format}")

    return SourceDescriptor(path=path, byte_size=byte_size, source_format=source_format)

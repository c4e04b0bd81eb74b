from enum import StrEnum
from pathlib import Path

import magic

# libmagic reports no dedicated MIME type for some files; fall back to this
DEFAULT_MIME = "application/octet-stream"


class SourceFormat(StrEnum):
    GIF = "GIF"
    JPEG = "JPEG"
    PNG = "PNG"
    WBMP = "WBMP"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_mime(cls, file_type: str) -> "SourceFormat":
        return _MIME_TO_FORMAT.get(file_type.lower(), SourceFormat.UNKNOWN)


_MIME_TO_FORMAT: dict[str, SourceFormat] = {
    "image/gif": SourceFormat.GIF,
    "image/jpeg": SourceFormat.JPEG,
    "image/pjpeg": SourceFormat.JPEG,
    "image/png": SourceFormat.PNG,
    "image/vnd.wap.wbmp": SourceFormat.WBMP,
}


def determine_mime(path: str | Path) -> str:
    # Create a Magic object
    mime = magic.Magic(mime=True)

    # Determine the file type
    file_type = mime.from_file(str(path))
    if not file_type:
        file_type = DEFAULT_MIME
    return file_type


def detect_source_format(path: str | Path) -> SourceFormat:
    return SourceFormat.from_mime(determine_mime(path))

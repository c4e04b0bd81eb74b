"""Tests for pre-flight source validation."""

import os
from pathlib import Path

import pytest

from cl_thumbnail_tools import NotFoundError, ThumbnailConfig, TooLargeError
from cl_thumbnail_tools.algo.validator import validate_source
from cl_thumbnail_tools.utils.media_types import SourceFormat


def test_validate_returns_descriptor(sample_png: Path):
    source = validate_source(sample_png, ThumbnailConfig())

    assert source.path == sample_png
    assert source.byte_size == sample_png.stat().st_size
    assert source.source_format == SourceFormat.PNG
    assert source.width is None
    assert source.pixel_count is None


def test_validate_detects_jpeg(make_image):
    path = make_image(40, 30, name="photo.jpg")

    assert validate_source(path, ThumbnailConfig()).source_format == SourceFormat.JPEG


def test_validate_unknown_format_is_not_an_error(tmp_path: Path):
    path = tmp_path / "notes.txt"
    _ = path.write_text("not an image")

    assert validate_source(path, ThumbnailConfig()).source_format == SourceFormat.UNKNOWN


def test_validate_missing_file(tmp_path: Path):
    with pytest.raises(NotFoundError) as exc_info:
        _ = validate_source(tmp_path / "missing.png", ThumbnailConfig())

    assert exc_info.value.path == tmp_path / "missing.png"


def test_validate_directory_is_not_found(tmp_path: Path):
    with pytest.raises(NotFoundError):
        _ = validate_source(tmp_path, ThumbnailConfig())


@pytest.mark.skipif(os.geteuid() == 0, reason="root can read any file")
def test_validate_unreadable_file(sample_png: Path):
    sample_png.chmod(0)
    try:
        with pytest.raises(NotFoundError):
            _ = validate_source(sample_png, ThumbnailConfig())
    finally:
        sample_png.chmod(0o644)


def test_validate_byte_budget_boundary(tmp_path: Path):
    path = tmp_path / "blob.bin"
    _ = path.write_bytes(b"\0" * 500_001)

    with pytest.raises(TooLargeError) as exc_info:
        _ = validate_source(path, ThumbnailConfig(source_max_bytes=500_000))

    assert exc_info.value.byte_size == 500_001
    assert exc_info.value.max_bytes == 500_000

    # Exactly at the budget is allowed
    source = validate_source(path, ThumbnailConfig(source_max_bytes=500_001))
    assert source.byte_size == 500_001

"""Test configuration and fixtures for cl_thumbnail_tools.

This module provides:
- Pytest configuration (markers, dependency checks)
- Function-scoped fixtures (generated sample images, configs)
"""

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from cl_thumbnail_tools import ThumbnailConfig

ImageFactory = Callable[..., Path]


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_imagemagick: requires ImageMagick to be installed",
    )


def pytest_runtest_setup(item):
    """Check dependencies before running tests - FAIL if missing (not skip)."""
    if item.get_closest_marker("requires_imagemagick") and not (
        shutil.which("magick") or shutil.which("convert")
    ):
        pytest.fail(
            "ImageMagick not installed. "
            "Install: brew install imagemagick (macOS) or apt-get install imagemagick (Linux)\n"
            "Or exclude with: pytest -m 'not requires_imagemagick'",
            pytrace=False,
        )


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a solid test image into tmp_path."""

    def _make(
        width: int,
        height: int,
        name: str = "source.png",
        mode: str = "RGB",
        color: tuple[int, ...] = (200, 40, 40),
        **save_kwargs: object,
    ) -> Path:
        path = tmp_path / name
        img = Image.new(mode, (width, height), color)
        img.save(path, **save_kwargs)
        return path

    return _make


@pytest.fixture
def sample_png(make_image: ImageFactory) -> Path:
    return make_image(100, 100)


@pytest.fixture
def half_transparent_png(tmp_path: Path) -> Path:
    """64x64 PNG, left half fully transparent, right half opaque blue."""
    path = tmp_path / "transparent.png"
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    img.paste((0, 0, 255, 255), (32, 0, 64, 64))
    img.save(path)
    return path


@pytest.fixture
def png_config() -> ThumbnailConfig:
    return ThumbnailConfig(target_format="PNG")

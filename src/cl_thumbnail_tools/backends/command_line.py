"""ImageMagick command line backend.

This backend shells out to ImageMagick (``magick`` or ``convert``), which must
be installed separately: https://imagemagick.org/
"""

import shutil
import subprocess
from pathlib import Path
from typing_extensions import override

from loguru import logger

from ..common.config import ThumbnailConfig
from ..common.schemas import BackendResult, SourceDescriptor, Success
from ..utils.profiling import timed
from ..utils.staged_output import staged_output
from .base import ThumbnailBackend

# ImageMagick 7 ships ``magick``; 6 only has ``convert``
TOOL_CANDIDATES: tuple[str, ...] = ("magick", "convert")


class CommandLineBackend(ThumbnailBackend):
    """Thumbnails through the ImageMagick CLI.

    Any failure is a decline: stderr is logged but never interpreted.
    """

    def __init__(self, executable: str | None = None) -> None:
        self.executable: str | None = executable

    @property
    @override
    def name(self) -> str:
        return "imagemagick-cli"

    def find_executable(self) -> str | None:
        if self.executable is not None:
            return shutil.which(self.executable)
        for candidate in TOOL_CANDIDATES:
            found = shutil.which(candidate)
            if found:
                return found
        return None

    @override
    def is_available(self) -> bool:
        return self.find_executable() is not None

    def build_command(
        self,
        executable: str,
        source_path: Path,
        output_path: Path,
        config: ThumbnailConfig,
    ) -> list[str]:
        return [
            executable,
            # First frame only; multi-frame output would be split into numbered files
            f"{source_path}[0]",
            "-resize",
            f"{config.target_width}x{config.target_height}",
            "-background",
            "white",
            "-alpha",
            "remove",
            "-quality",
            str(config.jpeg_quality),
            f"{config.target_format.value.lower()}:{output_path}",
        ]

    @timed
    @override
    def attempt(
        self,
        source: SourceDescriptor,
        target_file: Path,
        config: ThumbnailConfig,
    ) -> BackendResult:
        executable = self.find_executable()
        if executable is None:
            return self.decline("ImageMagick is not installed or not found in PATH")

        with staged_output(target_file) as staged:
            command = self.build_command(executable, source.path, staged.path, config)
            logger.debug(" ".join(command))

            try:
                process = subprocess.run(
                    command,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    check=False,
                    timeout=config.command_timeout,
                )
            except subprocess.TimeoutExpired:
                return self.decline(f"ImageMagick timed out after {config.command_timeout}s")
            except (OSError, ValueError, subprocess.SubprocessError) as exc:
                return self.decline(f"Failed to start ImageMagick: {exc}")

            if process.returncode != 0:
                logger.debug(f"ImageMagick exited with {process.returncode}: {process.stderr}")

            if not staged.commit():
                return self.decline("ImageMagick produced no output")

        return Success(backend=self.name, output_path=target_file)

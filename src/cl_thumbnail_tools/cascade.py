"""Ordered backend cascade with short-circuit on success."""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from .algo.validator import validate_source
from .backends.base import ThumbnailBackend
from .backends.command_line import CommandLineBackend
from .backends.native_library import NativeLibraryBackend
from .backends.raster_library import RasterLibraryBackend
from .common.config import ThumbnailConfig
from .common.errors import (
    CreateThumbnailError,
    InvalidTargetError,
    NoBackendAvailableError,
)
from .common.schemas import BackendResult, Declined, Rejected, SourceDescriptor, Success
from .utils.staged_output import remove_stale


def default_backends() -> list[ThumbnailBackend]:
    """Cheapest first: external tool, then Pillow, then OpenCV."""
    return [
        CommandLineBackend(),
        NativeLibraryBackend(),
        RasterLibraryBackend(),
    ]


class ThumbnailCascade:
    """
    Validate a source once, then try each backend in order.

    - Declined moves on to the next backend
    - Rejected aborts with the backend's error
    - Success returns immediately, later backends never run
    """

    def __init__(self, backends: Sequence[ThumbnailBackend] | None = None) -> None:
        self.backends: list[ThumbnailBackend] = (
            list(backends) if backends is not None else default_backends()
        )

    def run_backend(
        self,
        backend: ThumbnailBackend,
        source: SourceDescriptor,
        target: Path,
        config: ThumbnailConfig,
    ) -> BackendResult:
        if not backend.is_available():
            return backend.decline("not available")

        try:
            return backend.attempt(source, target, config)
        except CreateThumbnailError:
            raise
        except Exception as exc:
            logger.warning(f"Backend {backend.name} failed: {exc}")
            return backend.decline(f"failed: {exc}")

    def clear_target(self, target: Path) -> None:
        try:
            remove_stale(target)
        except OSError as exc:
            raise InvalidTargetError(target, f"not removable: {exc}") from exc

    def create(
        self,
        source_file: str | Path,
        target_file: str | Path,
        config: ThumbnailConfig,
    ) -> Success:
        """
        Create a thumbnail of ``source_file`` at ``target_file``.

        Returns:
            The Success result of the first backend that wrote the thumbnail

        Raises:
            NotFoundError: If the source is missing or unreadable
            TooLargeError: If the source exceeds the byte budget
            PixelBudgetExceededError: If a backend decoded too many pixels
            UnsupportedOutputFormatError: If the target format cannot be encoded
            InvalidTargetError: If the target is a directory or cannot be cleared
            NoBackendAvailableError: If every backend declined
        """
        source = validate_source(source_file, config)
        target = Path(target_file)
        if target.is_dir():
            raise InvalidTargetError(target, "a directory")

        # Overwriting the source in place relies on the staged replace
        in_place = target.exists() and target.samefile(source.path)
        reasons: dict[str, str] = {}

        for backend in self.backends:
            if not in_place:
                self.clear_target(target)
            result = self.run_backend(backend, source, target, config)

            if isinstance(result, Success):
                logger.info(f"Thumbnail {target} created by {result.backend}")
                return result

            if isinstance(result, Rejected):
                logger.debug(f"Backend {result.backend} rejected {source.path}: {result.error}")
                raise result.error

            if isinstance(result, Declined):
                logger.debug(f"Backend {result.backend} declined: {result.reason}")
                reasons[result.backend] = result.reason

        raise NoBackendAvailableError(reasons)

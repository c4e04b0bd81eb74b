"""ThumbnailBackend - Abstract base class for thumbnail backends."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..common.config import ThumbnailConfig
from ..common.errors import InvalidDimensionsError, PixelBudgetExceededError
from ..common.schemas import BackendResult, Declined, Rejected, SourceDescriptor


class ThumbnailBackend(ABC):
    """
    One self-contained decode/resize/encode strategy.

    - is_available() only probes tooling, it never touches the source
    - attempt() reports Success, Declined or Rejected instead of raising
    - output reaches the target path only on confirmed success
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the tool or library behind this backend is installed."""
        ...

    @abstractmethod
    def attempt(
        self,
        source: SourceDescriptor,
        target_file: Path,
        config: ThumbnailConfig,
    ) -> BackendResult: ...

    def decline(self, reason: str) -> Declined:
        return Declined(backend=self.name, reason=reason)

    def check_decoded(
        self,
        source: SourceDescriptor,
        config: ThumbnailConfig,
    ) -> Rejected | None:
        """Reject a decoded source with an empty side or too many pixels."""
        width = source.width or 0
        height = source.height or 0
        if width <= 0 or height <= 0:
            return Rejected(backend=self.name, error=InvalidDimensionsError(width, height))
        if width * height > config.source_max_pixels:
            return Rejected(
                backend=self.name,
                error=PixelBudgetExceededError(width, height, config.source_max_pixels),
            )
        return None

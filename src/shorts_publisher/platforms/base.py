"""Abstract base classes for platform publishers.

This module defines the interface a video platform implementation follows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Optional

from shorts_publisher.metadata import PublishableRecord

from .retry import ErrorClass, PublishAttempt


@dataclass(frozen=True)
class PublishResult:
    """Successful publication of one file."""

    platform: str
    video_id: str
    title: str
    attempts: tuple[PublishAttempt, ...] = field(default_factory=tuple)

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    def __str__(self) -> str:
        return f"[{self.platform}] Success: {self.video_id} ({self.title})"


class PublishError(Exception):
    """Publication failed after retries or on a fatal error."""

    def __init__(
        self,
        message: str,
        attempts: tuple[PublishAttempt, ...] = (),
        classification: ErrorClass = ErrorClass.FATAL,
        status: int | None = None,
    ):
        super().__init__(message)
        self.attempts = attempts
        self.classification = classification
        self.status = status

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)


# Type for progress callbacks
ProgressCallback = Callable[[str, float, str], Awaitable[None]] | None


class PlatformPublisher(ABC):
    """Abstract base class for platform publishers."""

    def __init__(self, progress_callback: ProgressCallback = None):
        self._progress_callback = progress_callback

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the platform identifier (e.g., 'youtube')."""
        ...

    @abstractmethod
    async def publish(self, video_path: Path, record: PublishableRecord) -> PublishResult:
        """Publish a video file with its resolved metadata.

        Returns:
            PublishResult with the remote id and the exact title used.

        Raises:
            PublishError: When the publish did not succeed.
        """
        ...

    async def _emit_progress(self, stage: str, progress: float, message: str) -> None:
        """Emit a progress update if callback is set."""
        if self._progress_callback:
            await self._progress_callback(stage, progress, message)

    def _make_result(
        self,
        video_id: str,
        title: str,
        attempts: Optional[tuple[PublishAttempt, ...]] = None,
    ) -> PublishResult:
        """Create a PublishResult for this platform."""
        return PublishResult(
            platform=self.platform_name,
            video_id=video_id,
            title=title,
            attempts=attempts or (),
        )

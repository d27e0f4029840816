"""YouTube publisher with bounded retry on transient failures."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

from googleapiclient.errors import HttpError

from shorts_publisher.config import PublishSettings
from shorts_publisher.metadata import PublishableRecord

from ..base import PlatformPublisher, ProgressCallback, PublishError, PublishResult
from ..retry import PublishAttempt, classify_status, retry_delay, should_retry
from .client import YouTubeClient

logger = logging.getLogger(__name__)


def extract_status(error: BaseException) -> Optional[int]:
    """HTTP status carried by an API error, None for anything else."""
    if not isinstance(error, HttpError):
        return None
    resp = getattr(error, "resp", None)
    status = getattr(resp, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class YouTubePublisher(PlatformPublisher):
    """Publish videos through videos.insert."""

    def __init__(
        self,
        client: YouTubeClient,
        settings: Optional[PublishSettings] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        progress_callback: ProgressCallback = None,
    ):
        super().__init__(progress_callback)
        self.client = client
        self.settings = settings or PublishSettings()
        self._sleep = sleep

    @property
    def platform_name(self) -> str:
        return "youtube"

    async def publish(self, video_path: Path, record: PublishableRecord) -> PublishResult:
        """Upload a file, retrying rate limits and server errors.

        Raises:
            PublishError: After a fatal error or when attempts run out.
        """
        max_attempts = self.settings.max_attempts
        attempts: list[PublishAttempt] = []

        for number in range(1, max_attempts + 1):
            await self._emit_progress("upload", (number - 1) / max_attempts, f"attempt {number}")
            try:
                video_id = await asyncio.to_thread(
                    self.client.insert_video, video_path, record, self.settings
                )
            except Exception as e:
                status = extract_status(e)
                classification = classify_status(status)
                attempts.append(PublishAttempt(
                    number=number,
                    succeeded=False,
                    status=status,
                    classification=classification,
                    error=str(e),
                ))
                logger.warning(
                    f"[upload fail] {video_path.name} (attempt {number}) "
                    f"status={status} class={classification.value}: {e}"
                )

                if should_retry(classification, number, max_attempts):
                    await self._sleep(retry_delay(number, self.settings.retry_base_delay))
                    continue

                raise PublishError(
                    f"publish failed after {number} attempt(s): {e}",
                    attempts=tuple(attempts),
                    classification=classification,
                    status=status,
                ) from e

            attempts.append(PublishAttempt(number=number, succeeded=True))
            logger.info(f"[uploaded] {video_path.name} -> {video_id} title={record.title!r}")
            await self._emit_progress("upload", 1.0, video_id)
            return self._make_result(video_id, record.title, tuple(attempts))

        # max_attempts >= 1, so the loop always returns or raises
        raise PublishError("no publish attempt made", attempts=tuple(attempts))

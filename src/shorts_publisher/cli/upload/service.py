"""Upload service - walks queue items through the publication state machine.

Per item: preflight -> metadata resolve -> duplicate check -> publish ->
file into sent/failed/dups. Items are processed one at a time; per-item
errors never abort a batch.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from shorts_publisher.config import PublisherConfig
from shorts_publisher.constants import ALLOWED_TRANSITIONS, ItemState, Outcome
from shorts_publisher.history import DuplicateGuard
from shorts_publisher.metadata import ChannelProfile, load_channel_profile, resolve_record
from shorts_publisher.platforms import PlatformPublisher, PublishError
from shorts_publisher.platforms.youtube import (
    YouTubeClient,
    YouTubeCredentials,
    YouTubePublisher,
    build_youtube_service,
)
from shorts_publisher.preflight import PreflightValidator, ValidationError
from shorts_publisher.queue import (
    FileSystemMoveError,
    NotInQueueError,
    QueueItem,
    move_to_outcome,
    read_sidecar,
    scan_queue,
)

from ..core.paths import resolve_under

logger = logging.getLogger(__name__)


class IllegalTransitionError(RuntimeError):
    """An item tried to move to a state the state machine does not allow."""


class ItemRun:
    """Mutable state tracker for one item during processing."""

    def __init__(self, item: QueueItem):
        self.item = item
        self.trace: List[ItemState] = [ItemState.QUEUED]

    @property
    def state(self) -> ItemState:
        return self.trace[-1]

    def advance(self, new_state: ItemState) -> None:
        if self.state.is_terminal:
            raise IllegalTransitionError(
                f"{self.item.name}: already {self.state.value}, cannot move to {new_state.value}"
            )
        if new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise IllegalTransitionError(
                f"{self.item.name}: {self.state.value} -> {new_state.value} not allowed"
            )
        self.trace.append(new_state)


@dataclass(frozen=True)
class ItemResult:
    """How one item ended."""

    item: QueueItem
    outcome: Outcome
    reason: str
    trace: tuple[ItemState, ...]
    title: Optional[str] = None
    video_id: Optional[str] = None
    attempts: int = 0
    destination: Optional[Path] = None
    move_error: Optional[str] = None

    @property
    def publish_failed(self) -> bool:
        """Failed during publishing (as opposed to preflight)."""
        return self.outcome == Outcome.FAILED and ItemState.PUBLISHING in self.trace


@dataclass
class BatchSummary:
    """Counts for one run."""

    channel: str
    requested: int
    results: List[ItemResult] = field(default_factory=list)

    def _count(self, outcome: Outcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def sent(self) -> int:
        return self._count(Outcome.SENT)

    @property
    def failed(self) -> int:
        return self._count(Outcome.FAILED)

    @property
    def dups(self) -> int:
        return self._count(Outcome.DUPS)

    @property
    def processed(self) -> int:
        return len(self.results)


ResultCallback = Callable[[ItemResult], None]


class UploadService:
    """Sequential upload pipeline for one channel and one run."""

    def __init__(
        self,
        config: PublisherConfig,
        profile: ChannelProfile,
        guard: DuplicateGuard,
        publisher: PlatformPublisher,
        validator: Optional[PreflightValidator] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_result: Optional[ResultCallback] = None,
    ):
        self.config = config
        self.profile = profile
        self.guard = guard
        self.publisher = publisher
        self.validator = validator or PreflightValidator(config.preflight)
        self._sleep = sleep
        self._on_result = on_result
        self.channel_title: Optional[str] = None

    async def process_item(self, item: QueueItem) -> ItemResult:
        """Take one item from queued to a terminal outcome."""
        run = ItemRun(item)

        run.advance(ItemState.VALIDATING)
        try:
            report = await self.validator.validate_async(item.path)
        except (ValidationError, OSError) as e:
            logger.warning(f"[preflight FAIL] {item} - {e}")
            return self._finish(run, Outcome.FAILED, f"preflight {e}")
        logger.info(
            f"[preflight OK] {item.name} {report.width}x{report.height} "
            f"{report.duration:.2f}s {report.size}B"
        )
        run.advance(ItemState.VALIDATED)

        sidecar = read_sidecar(item)
        record = resolve_record(item.stem, self.profile, sidecar)

        run.advance(ItemState.CHECKING_DUP)
        if self.guard.is_duplicate(record.title):
            logger.info(f"[skip dup-title] {item.name}: {record.title}")
            return self._finish(run, Outcome.DUPS, "duplicate title", title=record.title)
        run.advance(ItemState.READY)

        run.advance(ItemState.PUBLISHING)
        try:
            result = await self.publisher.publish(item.path, record)
        except PublishError as e:
            logger.warning(f"[publish FAIL] {item.name}: {e}")
            return self._finish(
                run,
                Outcome.FAILED,
                f"publish {e.classification.value}: {e}",
                title=record.title,
                attempts=e.attempt_count,
            )

        self.guard.record(result.title)
        return self._finish(
            run,
            Outcome.SENT,
            "published",
            title=result.title,
            video_id=result.video_id,
            attempts=result.attempt_count,
        )

    def _finish(self, run: ItemRun, outcome: Outcome, reason: str, **extra) -> ItemResult:
        run.advance(outcome.state)

        destination = None
        move_error = None
        try:
            destination = move_to_outcome(run.item, outcome)
        except FileSystemMoveError as e:
            # Never rolls back a completed publish
            logger.warning(f"[move fail] {e}")
            move_error = str(e)

        result = ItemResult(
            item=run.item,
            outcome=outcome,
            reason=reason,
            trace=tuple(run.trace),
            destination=destination,
            move_error=move_error,
            **extra,
        )
        logger.info(f"[{outcome.value}] {run.item.name}: {reason}")
        if self._on_result:
            self._on_result(result)
        return result

    async def run_batch(self, channel: str, max_count: int) -> BatchSummary:
        """Publish up to max_count items, scanning up to scan_multiplier x max_count."""
        summary = BatchSummary(channel=channel, requested=max_count)
        candidates = max(max_count * self.config.publish.scan_multiplier, max_count)

        videos_root = resolve_under(self.config.videos_root)
        batch = scan_queue(videos_root, channel, candidates, self.config.media_extensions)
        if not batch:
            logger.info(f"[skip] no files in queue for {channel}")
            return summary

        for item in batch:
            if summary.sent >= max_count:
                break

            result = await self.process_item(item)
            summary.results.append(result)

            if result.outcome == Outcome.SENT and summary.sent < max_count:
                await self._sleep(self.config.publish.throttle_seconds)

        logger.info(f"[done] uploaded {summary.sent}/{max_count} file(s) for {channel}")
        return summary

    async def run_single(self, path: Path) -> Optional[ItemResult]:
        """Publish one file from a queue directory.

        Returns None when the file is skipped (outside a queue or missing).
        """
        try:
            item = QueueItem.from_path(path, videos_root=resolve_under(self.config.videos_root))
        except NotInQueueError:
            logger.warning(f"[skip] --file must be inside {self.config.videos_root}/<channel>/queue/: {path}")
            return None

        if not item.path.exists():
            logger.warning(f"[preflight FAIL] not found: {path}")
            return None

        return await self.process_item(item)


async def create_upload_service(
    config: PublisherConfig,
    channel: str,
    credentials: YouTubeCredentials,
    on_result: Optional[ResultCallback] = None,
) -> UploadService:
    """Build a service wired to YouTube: client, history and channel profile."""
    service = await asyncio.to_thread(build_youtube_service, credentials)
    client = YouTubeClient(service)

    try:
        channel_title = await asyncio.to_thread(client.channel_title)
    except Exception as e:
        logger.warning(f"[yt auth] could not read channel title: {e}")
        channel_title = None
    logger.info(
        f"[yt auth] channel={channel} title={channel_title or 'unknown'!r} "
        f"token={credentials.token_env}"
    )

    guard = await DuplicateGuard.from_history(client, config.publish.recent_titles_limit)
    profile = load_channel_profile(resolve_under(config.channel_meta_dir), channel)
    publisher = YouTubePublisher(client, config.publish)

    upload_service = UploadService(
        config=config,
        profile=profile,
        guard=guard,
        publisher=publisher,
        on_result=on_result,
    )
    upload_service.channel_title = channel_title
    return upload_service

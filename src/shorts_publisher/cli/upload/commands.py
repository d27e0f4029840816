"""Upload CLI command - thin wrapper orchestrating display and service."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Optional

import typer

from shorts_publisher.config import PublisherConfig
from shorts_publisher.platforms.youtube import YouTubeCredentials

from ..core.console import console
from ..core.paths import resolve_under
from ..core.types import Failure
from ..core.validators import validate_config, validate_credentials
from .display import (
    show_batch_summary,
    show_channel_auth,
    show_item_result,
    show_single_skipped,
    show_upload_config,
    show_upload_error,
)
from .params import UploadParams
from .service import BatchSummary, ItemResult, create_upload_service
from .validators import validate_upload_params

logger = logging.getLogger(__name__)


async def _run_upload(
    params: UploadParams,
    config: PublisherConfig,
    credentials: YouTubeCredentials,
) -> BatchSummary | ItemResult | None:
    service = await create_upload_service(
        config,
        params.channel,
        credentials,
        on_result=partial(show_item_result, console),
    )
    show_channel_auth(console, params.channel, service.channel_title)

    if params.is_single:
        return await service.run_single(params.file)
    return await service.run_batch(params.channel, params.max_count)


def upload(
    lang: str = typer.Option("en", "--lang", "-l", help="Channel key (e.g. fr); picks token and metadata"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Publish one file from a queue directory"),
    max_count: int = typer.Option(1, "--max", "-n", help="Batch mode: maximum successful uploads"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to publisher.yaml"),
) -> None:
    """Publish queued videos to YouTube.

    Batch mode takes files oldest date first from videos/<lang>/queue/.
    Each file ends in sent/, failed/ or dups/ under videos/<lang>/.
    """
    params = UploadParams.from_cli(lang=lang, file=file, max_count=max_count, config=config)
    loaded = validate_config(params.config_path)
    if isinstance(loaded, Failure):
        show_upload_error(console, loaded.error, loaded.details)
        raise typer.Exit(1)
    publisher_config = loaded.value

    validation = validate_upload_params(params, resolve_under(publisher_config.videos_root))
    if isinstance(validation, Failure):
        show_upload_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    credentials = validate_credentials(params.channel)
    if isinstance(credentials, Failure):
        logger.error(f"[config] {credentials.error}")
        show_upload_error(console, credentials.error, credentials.details)
        raise typer.Exit(1)

    show_upload_config(console, params, publisher_config, credentials.value.token_env)

    outcome = asyncio.run(_run_upload(params, publisher_config, credentials.value))

    if params.is_single:
        if outcome is None:
            show_single_skipped(console, params.file)
            return
        if outcome.publish_failed:
            show_upload_error(console, f"Publish failed for {outcome.item.name}", {"reason": outcome.reason})
            raise typer.Exit(1)
        return

    show_batch_summary(console, outcome)

"""Queue CLI command - read-only listing of pending uploads."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ..core.console import console, print_error
from ..core.paths import resolve_under
from ..core.types import Failure
from ..core.validators import validate_channel, validate_config
from .display import show_queue_table
from .service import find_queued_videos


def queue(
    lang: str = typer.Option("en", "--lang", "-l", help="Channel key (e.g. fr)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to publisher.yaml"),
) -> None:
    """List videos waiting in the intake queue, in upload order."""
    loaded = validate_config(Path(config) if config else None)
    if isinstance(loaded, Failure):
        print_error(loaded.error, loaded.details)
        raise typer.Exit(1)
    publisher_config = loaded.value
    videos_root = resolve_under(publisher_config.videos_root)

    validation = validate_channel(lang, videos_root)
    if isinstance(validation, Failure):
        print_error(validation.error, validation.details)
        raise typer.Exit(1)

    videos = find_queued_videos(
        videos_root,
        lang,
        publisher_config.preflight.mtime_cooldown_s,
        publisher_config.media_extensions,
    )
    show_queue_table(console, lang, videos)

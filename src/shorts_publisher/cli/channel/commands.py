"""Channel CLI command - inspect per-channel publishing defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from shorts_publisher.metadata import load_channel_profile, resolve_record

from ..core.console import console, print_error
from ..core.paths import resolve_under
from ..core.types import Failure
from ..core.validators import validate_channel, validate_config
from .display import show_channel_profile, show_title_preview


def channel(
    lang: str = typer.Option("en", "--lang", "-l", help="Channel key (e.g. fr)"),
    preview: Optional[str] = typer.Option(
        None, "--preview", "-p", help="Show the title a file with this base name would get"
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to publisher.yaml"),
) -> None:
    """Show the title suffix, description and tags used for a channel."""
    loaded = validate_config(Path(config) if config else None)
    if isinstance(loaded, Failure):
        print_error(loaded.error, loaded.details)
        raise typer.Exit(1)

    validation = validate_channel(lang)
    if isinstance(validation, Failure):
        print_error(validation.error, validation.details)
        raise typer.Exit(1)

    profile = load_channel_profile(resolve_under(loaded.value.channel_meta_dir), lang)
    show_channel_profile(console, profile)

    if preview:
        show_title_preview(console, preview, resolve_record(preview, profile))

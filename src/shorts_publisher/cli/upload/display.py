"""Display functions for the upload command - pure functions for Rich output."""

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel

from shorts_publisher.config import PublisherConfig
from shorts_publisher.constants import OUTCOME_STYLES, Outcome

from .params import UploadParams
from .service import BatchSummary, ItemResult


def show_upload_config(
    console: Console,
    params: UploadParams,
    config: PublisherConfig,
    token_env: str,
) -> None:
    """Display run configuration panel."""
    mode = f"single: {params.file}" if params.is_single else f"batch: up to {params.max_count}"
    lines = [
        f"[bold]Channel:[/bold] {params.channel}",
        f"[bold]Mode:[/bold] {mode}",
        f"[bold]Queue root:[/bold] {config.videos_root}",
        f"[bold]Privacy:[/bold] {config.publish.privacy_status}",
        f"[bold]Token:[/bold] {token_env}",
    ]
    if config.preflight.check_black:
        lines.append("[bold]Black-frame check:[/bold] on")
    console.print(Panel("\n".join(lines), title="YouTube Upload", border_style="cyan"))


def show_channel_auth(console: Console, channel: str, channel_title: Optional[str]) -> None:
    console.print(
        f"[dim][yt auth][/dim] channel={channel} "
        f"title=[cyan]{channel_title or 'unknown'}[/cyan]"
    )


def show_item_result(console: Console, result: ItemResult) -> None:
    """Display one finished item."""
    style = OUTCOME_STYLES.get(result.outcome, "white")
    line = f"  [{style}]{result.outcome.value.upper():6}[/{style}] {result.item}"
    if result.title:
        line += f"  [dim]{result.title}[/dim]"
    console.print(line)

    if result.outcome == Outcome.SENT and result.video_id:
        console.print(
            f"         [green]https://youtu.be/{result.video_id}[/green]"
            f" [dim]({result.attempts} attempt(s))[/dim]"
        )
    elif result.outcome != Outcome.SENT:
        console.print(f"         [dim]{result.reason}[/dim]")

    if result.move_error:
        console.print(f"         [yellow]move failed: {result.move_error}[/yellow]")


def show_batch_summary(console: Console, summary: BatchSummary) -> None:
    """Display final batch result."""
    if summary.processed == 0:
        console.print(f"[yellow]No files in queue for {summary.channel}.[/yellow]")
        return

    border = "green" if summary.sent == summary.requested else "yellow"
    console.print(Panel(
        f"[bold]Uploaded {summary.sent}/{summary.requested}[/bold] file(s) for {summary.channel}\n"
        f"  Failed: [red]{summary.failed}[/red]   Dups: [yellow]{summary.dups}[/yellow]",
        border_style=border,
    ))


def show_single_skipped(console: Console, path: Any) -> None:
    console.print(f"[yellow]Skipped {path}: not a queued file (see logs/publisher.log).[/yellow]")


def show_upload_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display error message."""
    console.print(f"[red]Error: {error}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] {value}")

"""Display functions for queue commands - pure functions for Rich output."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.table import Table

from .service import QueuedVideo


def _format_size(size_bytes: int) -> str:
    if size_bytes >= 1_000_000:
        return f"{size_bytes / 1_000_000:.1f} MB"
    return f"{size_bytes / 1000:.0f} KB"


def show_queue_table(console: Console, channel: str, videos: List[QueuedVideo]) -> None:
    """Display table of queued videos."""
    if not videos:
        console.print(f"[yellow]No videos in queue for {channel}.[/yellow]")
        console.print("\n[dim]Expected layout:[/dim]")
        console.print(f"  [cyan]videos/{channel}/queue/YYYY-MM-DD/<name>.mp4[/cyan]")
        return

    table = Table(title=f"Upload Queue ({channel})")
    table.add_column("#", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("File", style="white")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Sidecar", style="dim")
    table.add_column("State", style="yellow")

    for i, video in enumerate(videos, 1):
        state = "[yellow]cooling down[/yellow]" if video.cooling_down else "[green]ready[/green]"
        table.add_row(
            str(i),
            video.item.date_partition,
            video.item.name,
            _format_size(video.size_bytes),
            "yes" if video.has_sidecar else "-",
            state,
        )

    console.print(table)

    cooling = sum(1 for v in videos if v.cooling_down)
    console.print(f"\n[bold]Total:[/] {len(videos)} video(s)")
    if cooling:
        console.print(f"  Cooling down: [yellow]{cooling}[/yellow]")

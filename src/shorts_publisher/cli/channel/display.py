"""Display functions for the channel command."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from shorts_publisher.metadata import ChannelProfile, PublishableRecord


def show_channel_profile(console: Console, profile: ChannelProfile) -> None:
    """Display resolved channel defaults."""
    source = str(profile.source) if profile.source else "[dim]built-in defaults[/dim]"

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="bold cyan")
    table.add_column("Value", style="white")
    table.add_row("Source", source)
    table.add_row("Title suffix", repr(profile.title_suffix))
    table.add_row("Description", profile.description)
    table.add_row("Tags", ", ".join(profile.tags) or "-")
    table.add_row("Tags extra", profile.tags_extra or "-")

    console.print(Panel(table, title=f"Channel: {profile.channel}", border_style="cyan"))


def show_title_preview(console: Console, stem: str, record: PublishableRecord) -> None:
    console.print(f"\n[bold]Preview for[/bold] '{stem}':")
    console.print(f"  Title: [green]{record.title}[/green] [dim]({len(record.title)} chars)[/dim]")
    console.print(f"  Tags:  {', '.join(record.tags) or '-'}")

"""Renderer for CLI output.

Renders a match outcome as a Rich table followed by any advisories. Index
source colours distinguish kept decisions from overrides and corrections.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bangumatch.models.core import EpisodeMetadata, IndexSource, MatchOutcome

SOURCE_STYLES = {
    IndexSource.EXISTING: "green",
    IndexSource.FROM_FILENAME: "green",
    IndexSource.OVERRIDDEN_FROM_FILENAME: "yellow bold",
    IndexSource.CORRECTED_ABOVE_BOUND: "yellow bold",
    IndexSource.CORRECTED_FROM_UNSET: "yellow",
}


def render_outcome(
    file_name: str,
    outcome: MatchOutcome,
    metadata: EpisodeMetadata | None,
    console: Console | None = None,
) -> None:
    """Render the resolution of *file_name*.

    Args:
        file_name: The resolved file's name, used as table title.
        outcome: The match outcome.
        metadata: Output fields for a matched episode, or None.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    table = Table(title=f"Episode: {escape(file_name)}")
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")

    if outcome.index is not None:
        style = SOURCE_STYLES.get(outcome.index.source, "white")
        table.add_row("Index", str(outcome.index.value))
        table.add_row("Index source", f"[{style}]{outcome.index.source.value}[/{style}]")

    if metadata is not None:
        table.add_row("Episode id", metadata.provider_id)
        table.add_row("Name", escape(metadata.name))
        table.add_row("Original title", escape(metadata.original_title or ""))
        table.add_row("Premiere date", str(metadata.premiere_date or ""))
        if metadata.parent_index_number is not None:
            table.add_row("Season", str(metadata.parent_index_number))
        if metadata.overview:
            table.add_row("Overview", escape(metadata.overview))

    console.print(table)

    for item in outcome.advisories:
        console.print(f"[bold yellow]Advisory:[/bold yellow] {escape(item.message)}")

    if metadata is None:
        console.print("[yellow]No matching episode found.[/yellow]")

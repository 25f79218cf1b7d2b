"""CLI commands for bangumatch.

This module implements the user-facing commands:
- resolve: resolve one video file to its Bangumi episode.
- config: persist a supported setting to config.toml.
- version: print the package version.

Design:
- Typer app and Console are instantiated at module level for reuse across
  commands.
- Annotated is used for argument/option definitions.
- Exit codes are defined as an Enum; a missing match is a distinct exit code,
  not an error.
"""

import asyncio
import json
import sys
from enum import Enum
from typing import Annotated, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_traceback

from bangumatch.cli.renderer import render_outcome
from bangumatch.core.pipeline import (
    build_episode_metadata,
    pick_series_id,
    resolve_episode,
)
from bangumatch.metadata.clients.bangumi import BangumiClient
from bangumatch.metadata.settings import Settings
from bangumatch.models.core import FileDescriptor, SeasonInfo
from bangumatch.utils import debug
from bangumatch.utils.config import SUPPORTED_SETTINGS, resolve_setting, set_setting

install_traceback(show_locals=False)

app = typer.Typer(
    name="bangumatch",
    help="Resolve series video files to their Bangumi episodes.",
)
console = Console()


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    NO_MATCH = 2


PATH = Annotated[
    str,
    typer.Argument(help="Path or file name of the video file to resolve"),
]

SERIES_ID = Annotated[
    Optional[str],
    typer.Option("--series-id", "-s", help="Bangumi subject id of the show"),
]

SEASON_ID = Annotated[
    Optional[str],
    typer.Option(
        "--season-id",
        help="Bangumi subject id attached to the season (preferred over --series-id)",
    ),
]

SEASON_INDEX = Annotated[
    Optional[int],
    typer.Option("--season-index", help="Season number of the parent season"),
]

INDEX = Annotated[
    Optional[int],
    typer.Option("--index", "-i", help="Episode index already assigned to the file"),
]

EPISODE_ID = Annotated[
    Optional[str],
    typer.Option("--episode-id", "-e", help="Bangumi episode id already known"),
]

ALWAYS_REPLACE = Annotated[
    Optional[bool],
    typer.Option(
        "--always-replace/--no-always-replace",
        help="Always prefer the episode number found in the file name "
        "(default: episode.always_replace_number setting)",
        show_default=False,
    ),
]

USE_ORIGINAL_NAME = Annotated[
    Optional[bool],
    typer.Option(
        "--use-original-name/--use-localized-name",
        help="Title language (default: episode.use_original_name setting)",
        show_default=False,
    ),
]

JSON_OUTPUT = Annotated[
    bool,
    typer.Option("--json", help="Output results in JSON format"),
]

DEBUG = Annotated[
    bool,
    typer.Option("--debug", help="Enable debug logging"),
]


@app.command()
def resolve(  # noqa: PLR0913
    path: PATH,
    series_id: SERIES_ID = None,
    season_id: SEASON_ID = None,
    season_index: SEASON_INDEX = None,
    index: INDEX = None,
    episode_id: EPISODE_ID = None,
    always_replace: ALWAYS_REPLACE = None,
    use_original_name: USE_ORIGINAL_NAME = None,
    json_output: JSON_OUTPUT = False,
    debug_output: DEBUG = False,
) -> None:
    """Resolve a video file to its Bangumi episode."""
    if debug_output:
        debug.set_debug(True)

    replace = resolve_setting(
        "episode.always_replace_number", default=False, cli_value=always_replace
    )
    original = resolve_setting(
        "episode.use_original_name", default=False, cli_value=use_original_name
    )

    season = None
    if season_id is not None or season_index is not None:
        season = SeasonInfo(series_id=season_id, index_number=season_index)
    file = FileDescriptor(
        path=path,
        existing_index=index,
        known_episode_id=episode_id,
        series_id=pick_series_id(series_id, season),
    )
    if not file.series_id:
        console.print("[yellow]No series id given; nothing to resolve.[/yellow]")
        raise typer.Exit(ExitCode.NO_MATCH)

    client = BangumiClient(Settings())
    try:
        outcome = asyncio.run(resolve_episode(file, client, always_replace=replace))
    except httpx.HTTPError as e:
        console.print(f"[red]Error: Bangumi request failed: {escape(str(e))}[/red]")
        raise typer.Exit(ExitCode.ERROR)

    metadata = (
        build_episode_metadata(outcome.episode, season=season, use_original_name=original)
        if outcome.episode is not None
        else None
    )

    if json_output:
        payload = {
            "path": path,
            "index": outcome.index.model_dump(mode="json") if outcome.index else None,
            "episode": metadata.model_dump(mode="json") if metadata else None,
            "advisories": [item.model_dump(mode="json") for item in outcome.advisories],
        }
        sys.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
    else:
        render_outcome(file.file_name, outcome, metadata, console=console)

    if metadata is None:
        raise typer.Exit(ExitCode.NO_MATCH)


@app.command()
def config(
    key: Annotated[str, typer.Argument(help="Dotted setting key")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Persist a setting to config.toml."""
    try:
        set_setting(key, value)
    except KeyError:
        known = ", ".join(sorted(SUPPORTED_SETTINGS))
        console.print(f"[red]Unknown setting {escape(repr(key))}. Supported: {known}[/red]")
        raise typer.Exit(ExitCode.ERROR)
    console.print(f"[green]Saved[/green] {escape(key)} = {escape(value)}")


@app.command()
def version() -> None:
    """Show the version of bangumatch."""
    from bangumatch.__about__ import __version__

    console.print(f"bangumatch version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()

"""Command-line interface for bangumatch.

- app: The Typer application object, the single CLI entrypoint.
- console: Rich Console instance shared by all commands.
"""

from bangumatch.cli.commands import app, console

__all__ = ["app", "console"]

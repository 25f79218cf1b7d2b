"""Allow ``python -m bangumatch``."""

from bangumatch.cli.commands import app

app()

"""Allow ``python -m rangegen``."""

from rangegen.cli import app

app()

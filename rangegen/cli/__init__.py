"""CLI entry point — Typer app.

Subcommands:
    generate  — write mock rows to stdout or a file
    schema    — print the target table DDL
"""

from __future__ import annotations

import typer

app = typer.Typer(name="rangegen", no_args_is_help=True)

# Register subcommands
from rangegen.cli.generate import generate_app  # noqa: E402
from rangegen.cli.schema import schema_app  # noqa: E402

app.add_typer(generate_app, name="generate")
app.add_typer(schema_app, name="schema")

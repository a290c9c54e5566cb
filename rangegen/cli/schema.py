"""rangegen schema — print the target table DDL and the query it is built for."""

from __future__ import annotations

import typer

from rangegen.models import OVERLAP_QUERY, RangeType, create_table_sql

schema_app = typer.Typer(no_args_is_help=False, invoke_without_command=True)


@schema_app.callback()
def schema_command(
    range_type: RangeType = typer.Option(
        RangeType.INTEGER, "--type", help="Data type for the range endpoints.",
    ),
    query: bool = typer.Option(True, "--query/--no-query", help="Also print the overlap query."),
):
    """Print CREATE TABLE for the mock table (and the overlap query it targets)."""
    typer.echo(create_table_sql(range_type))
    if query:
        typer.echo("")
        for line in OVERLAP_QUERY.splitlines():
            typer.echo(f"-- {line}")

"""rangegen generate — write mock range rows as CSV, INSERT, or COPY."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rangegen.errors import RangeGenError, SinkWriteFailure
from rangegen.models import OVERLAP_QUERY, Configuration, OutputFormat, RangeType, create_table_sql
from rangegen.services.driver import Driver, write_line
from rangegen.settings import get_settings

log = logging.getLogger(__name__)

_EPILOG = (
    "Generates test data for:\n\n"
    f"{create_table_sql()}\n\n"
    "That gets queried with WHERE clauses like:\n\n"
    f"{OVERLAP_QUERY}\n\n"
    "i.e. rows with a specific handle whose range overlaps a target range. "
    "Each row gets a random handle and midpoint; a width drawn from a normal "
    "distribution is centred on the midpoint and clamped to [lowest, highest]."
)

generate_app = typer.Typer(
    no_args_is_help=False, invoke_without_command=True, epilog=_EPILOG,
)
_err = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Log to stderr so stdout carries only generated data."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(name)s %(levelname)s  %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _resolve_format(fmt: OutputFormat | None, sql: bool, create_table: bool) -> OutputFormat:
    """``--create-table`` implies COPY; ``--sql`` implies INSERT; else ``--format``."""
    if create_table:
        return OutputFormat.SQL_COPY
    if sql:
        return OutputFormat.SQL_INSERT
    return fmt or OutputFormat(get_settings().output_format)


def _print_summary(config: Configuration, count: int, output: Path) -> None:
    table = Table(title="rangegen", show_header=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="bold")
    table.add_row("rows", str(count))
    table.add_row("format", config.output_format.value)
    table.add_row("range type", config.range_type.value)
    table.add_row("seed", "random" if config.seed is None else str(config.seed))
    table.add_row("output", str(output))
    _err.print(table)


@generate_app.callback()
def generate_command(
    nrows: Optional[int] = typer.Option(None, "--nrows", "-n", help="Number of rows to generate."),
    handles: Optional[int] = typer.Option(None, "--handles", help="Handles range from 1 to this."),
    lowest: Optional[int] = typer.Option(None, "--lowest", help="Lowest range_low value."),
    highest: Optional[int] = typer.Option(None, "--highest", help="Highest range_high value."),
    mean_width: Optional[float] = typer.Option(None, "--mean-width", help="Width mean value."),
    stddev_width: Optional[float] = typer.Option(
        None, "--stddev-width", help="Width standard deviation.",
    ),
    range_type: Optional[RangeType] = typer.Option(
        None, "--type", help="Data type for the range endpoints.",
    ),
    fmt: Optional[OutputFormat] = typer.Option(None, "--format", "-f", help="Output format."),
    sql: bool = typer.Option(
        False, "--sql", help="Generate a multi-row INSERT statement (same as --format insert).",
    ),
    create_table: bool = typer.Option(
        False, "--create-table",
        help="Generate CREATE TABLE followed by COPY ... FROM stdin (implies --format copy).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Turn on verbose output."),
):
    """Generate mock range data. Defaults come from RANGEGEN_* settings."""
    configure_logging(verbose)
    settings = get_settings()

    try:
        config = Configuration(
            row_count=settings.nrows if nrows is None else nrows,
            handle_count=settings.handles if handles is None else handles,
            lowest=settings.lowest if lowest is None else lowest,
            highest=settings.highest if highest is None else highest,
            mean_width=settings.mean_width if mean_width is None else mean_width,
            width_stddev=settings.stddev_width if stddev_width is None else stddev_width,
            range_type=range_type or RangeType(settings.range_type),
            seed=seed,
            output_format=_resolve_format(fmt, sql, create_table),
            create_table=create_table,
        )
    except RangeGenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    driver = Driver(config, progress_every=settings.progress_every)
    try:
        if output is None:
            count = _run(driver, config, sys.stdout, verbose)
        else:
            try:
                sink = output.open("w", encoding="utf-8")
            except OSError as e:
                raise SinkWriteFailure(f"cannot open {output}: {e}") from e
            with sink:
                count = _run(driver, config, sink, verbose)
            _print_summary(config, count, output)
    except RangeGenError as e:
        log.error("Generation aborted: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _run(driver: Driver, config: Configuration, sink, verbose: bool) -> int:
    if verbose and config.output_format is not OutputFormat.CSV:
        write_line(
            sink,
            f"-- Generating {config.row_count} rows of mock data "
            f"with {config.handle_count} handles",
        )
    return driver.run(sink)

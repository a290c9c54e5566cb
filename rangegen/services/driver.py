"""Generation driver — prologue, N rows, epilogue, written to a text sink.

The sink is any object with a ``write(str)`` method (``sys.stdout``, an open
file, ``io.StringIO``). Write errors abort the run immediately as
``SinkWriteFailure``; there is no retry and no partial-success reporting.

Examples::

    import io, sys
    from rangegen.models import Configuration
    from rangegen.services.driver import Driver, generate

    config = Configuration(row_count=3, handle_count=5, lowest=0, highest=100,
                           mean_width=10, width_stddev=0, seed=42)
    generate(config, sys.stdout)       # 3 CSV lines

    buf = io.StringIO()
    Driver(config).run(buf)            # returns 3
"""

from __future__ import annotations

import logging
from typing import Protocol

from rangegen.errors import SinkWriteFailure
from rangegen.models import Configuration
from rangegen.services.formatting import OutputFormatter, formatter_for
from rangegen.services.generator import RowGenerator
from rangegen.services.random_source import RandomSource

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, text: str, /) -> int | None: ...


class Driver:
    """Runs one generation pass for a configuration."""

    def __init__(
        self,
        config: Configuration,
        formatter: OutputFormatter | None = None,
        source: RandomSource | None = None,
        *,
        progress_every: int = 0,
    ):
        self.config = config
        self.formatter = formatter or formatter_for(
            config.output_format, config.range_type, create_table=config.create_table
        )
        self.generator = RowGenerator(config, source)
        self.progress_every = progress_every

    def run(self, sink: Sink) -> int:
        """Write the full stream to *sink*. Returns the number of rows written."""
        cfg = self.config
        logger.info(
            "Generating %d rows (%s, %s endpoints, seed=%s)",
            cfg.row_count, cfg.output_format.value, cfg.range_type.value, cfg.seed,
        )

        for line in self.formatter.prologue():
            write_line(sink, line)

        count = 0
        for row in self.generator.rows():
            write_line(sink, self.formatter.format_row(row, first=count == 0))
            count += 1
            if self.progress_every and count % self.progress_every == 0:
                logger.debug("%d / %d rows written", count, cfg.row_count)

        for line in self.formatter.epilogue():
            write_line(sink, line)

        logger.info("Wrote %d rows", count)
        return count


def generate(config: Configuration, sink: Sink, *, progress_every: int = 0) -> int:
    """Convenience wrapper: build a ``Driver`` for *config* and run it."""
    return Driver(config, progress_every=progress_every).run(sink)


def write_line(sink: Sink, line: str) -> None:
    """Write one newline-terminated line, raising ``SinkWriteFailure`` on I/O errors."""
    try:
        sink.write(line + "\n")
    except OSError as e:
        raise SinkWriteFailure(f"output write failed: {e}") from e

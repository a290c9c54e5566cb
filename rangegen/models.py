"""Run configuration and row types.

``Configuration`` is built once from validated inputs and is read-only for the
rest of the run. ``Row`` is ephemeral: generated, formatted and discarded in a
single loop step.

Examples::

    from rangegen.models import Configuration, OutputFormat, RangeType

    config = Configuration(row_count=3, handle_count=5, lowest=0, highest=100,
                           mean_width=10, width_stddev=0, seed=42)
    config.output_format   # OutputFormat.CSV
    config.range_type      # RangeType.INTEGER
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from rangegen.errors import InvalidConfiguration

TABLE_NAME = "mock"
COLUMNS = ("handle", "range_low", "range_high", "stuff")

# Sampling spans are drawn as int64; bounds and spans must stay below this
INT64_MAX = 2**63 - 1


class RangeType(str, Enum):
    """How range endpoints are encoded in the output."""

    INTEGER = "int"
    TIMESTAMP = "timestamp"

    @property
    def column_type(self) -> str:
        """SQL column type used for ``range_low`` / ``range_high``."""
        return "TIMESTAMP" if self is RangeType.TIMESTAMP else "INT"


class OutputFormat(str, Enum):
    CSV = "csv"
    SQL_INSERT = "insert"
    SQL_COPY = "copy"


class Configuration(BaseModel):
    """Immutable parameters for one generation run.

    Invalid combinations raise ``InvalidConfiguration`` at construction time,
    so nothing downstream needs to re-check them.
    """

    model_config = ConfigDict(frozen=True)

    row_count: int
    handle_count: int
    lowest: int
    highest: int
    mean_width: float
    width_stddev: float
    range_type: RangeType = RangeType.INTEGER
    seed: int | None = None
    output_format: OutputFormat = OutputFormat.CSV
    create_table: bool = False

    @model_validator(mode="after")
    def _check(self) -> Configuration:
        if self.row_count < 0:
            raise InvalidConfiguration(f"row count must be >= 0, got {self.row_count}")
        if self.handle_count < 1:
            raise InvalidConfiguration(f"handle count must be >= 1, got {self.handle_count}")
        if self.highest <= self.lowest:
            raise InvalidConfiguration(
                f"highest ({self.highest}) must be greater than lowest ({self.lowest})"
            )
        if self.handle_count >= INT64_MAX or self.highest - self.lowest >= INT64_MAX:
            raise InvalidConfiguration(
                f"handle count and highest - lowest must be below {INT64_MAX} (int64)"
            )
        if not (math.isfinite(self.mean_width) and math.isfinite(self.width_stddev)):
            raise InvalidConfiguration(
                f"width mean and standard deviation must be finite, "
                f"got {self.mean_width} and {self.width_stddev}"
            )
        if self.width_stddev < 0:
            raise InvalidConfiguration(
                f"width standard deviation must be >= 0, got {self.width_stddev}"
            )
        if self.create_table and self.output_format is not OutputFormat.SQL_COPY:
            raise InvalidConfiguration("create_table is only valid with the copy output format")
        return self


@dataclass(frozen=True, slots=True)
class Row:
    """One generated row. ``width`` is the floored sampled width, before clamping."""

    handle: int
    low: int
    high: int
    sequence: int
    width: int

    @property
    def payload(self) -> str:
        """Debug correlation string stored in the ``stuff`` column."""
        return f"{self.sequence}:{self.width}"


def create_table_sql(range_type: RangeType = RangeType.INTEGER) -> str:
    """``CREATE TABLE`` statement for the target table, typed for *range_type*."""
    col = range_type.column_type
    return (
        f"CREATE TABLE {TABLE_NAME} (\n"
        f"  handle INT NOT NULL\n"
        f"  ,range_low {col} NOT NULL\n"
        f"  ,range_high {col} NOT NULL\n"
        f"  ,stuff TEXT\n"
        f");"
    )


OVERLAP_QUERY = (
    f"SELECT * FROM {TABLE_NAME}\n"
    "WHERE handle = $1 AND range_high >= $2 AND range_low <= $3"
)

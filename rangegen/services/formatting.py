"""Output formats — CSV, multi-row INSERT, and COPY ... FROM stdin.

Each format is a strategy object chosen once per run by ``formatter_for()``.
Formatters only build strings; writing them to a sink is the driver's job.

Examples::

    from rangegen.models import OutputFormat, RangeType, Row
    from rangegen.services.formatting import formatter_for

    fmt = formatter_for(OutputFormat.SQL_INSERT, RangeType.INTEGER)
    fmt.prologue()                              # ['INSERT INTO mock (...) VALUES']
    fmt.format_row(Row(3, 10, 20, 0, 10), first=True)   # "(3,10,20,'0:10')"
    fmt.format_row(Row(1, 40, 45, 1, 5), first=False)   # ",(1,40,45,'1:5')"
    fmt.epilogue()                              # [';']
"""

from __future__ import annotations

from collections.abc import Callable

from rangegen.models import COLUMNS, TABLE_NAME, OutputFormat, RangeType, Row, create_table_sql

_COLUMN_LIST = ", ".join(COLUMNS)

EndpointEncoder = Callable[[int], str]


def encode_integer(value: int) -> str:
    return str(value)


def encode_timestamp(value: int) -> str:
    return f"to_timestamp({value})"


_ENCODERS: dict[RangeType, EndpointEncoder] = {
    RangeType.INTEGER: encode_integer,
    RangeType.TIMESTAMP: encode_timestamp,
}


class OutputFormatter:
    """Base formatter: separator-joined fields with optional row framing.

    Subclasses set the class attributes and override ``prologue`` /
    ``epilogue`` where the format needs stream framing.
    """

    separator: str = ","
    row_prefix: str = ""
    row_suffix: str = ""
    # Prepended to every row except the first
    continuation: str = ""

    def __init__(self, range_type: RangeType = RangeType.INTEGER):
        self.range_type = range_type
        self._encode = _ENCODERS[range_type]

    def prologue(self) -> list[str]:
        return []

    def epilogue(self) -> list[str]:
        return []

    def fields(self, row: Row) -> list[str]:
        return [
            str(row.handle),
            self._encode(row.low),
            self._encode(row.high),
            f"'{row.payload}'",
        ]

    def format_row(self, row: Row, first: bool = False) -> str:
        lead = "" if first else self.continuation
        body = self.separator.join(self.fields(row))
        return f"{lead}{self.row_prefix}{body}{self.row_suffix}"


class CsvFormatter(OutputFormatter):
    pass


class SqlInsertFormatter(OutputFormatter):
    row_prefix = "("
    row_suffix = ")"
    continuation = ","

    def prologue(self) -> list[str]:
        return [f"INSERT INTO {TABLE_NAME} ({_COLUMN_LIST}) VALUES"]

    def epilogue(self) -> list[str]:
        return [";"]


class SqlCopyFormatter(OutputFormatter):
    separator = "\t"

    def __init__(self, range_type: RangeType = RangeType.INTEGER, create_table: bool = False):
        super().__init__(range_type)
        self.create_table = create_table

    def prologue(self) -> list[str]:
        lines = []
        if self.create_table:
            lines.append(create_table_sql(self.range_type))
        lines.append(f"COPY {TABLE_NAME} ({_COLUMN_LIST}) FROM stdin;")
        return lines

    def epilogue(self) -> list[str]:
        # End-of-data marker, then a blank line
        return ["\\.", ""]


_FORMATTERS: dict[OutputFormat, type[OutputFormatter]] = {
    OutputFormat.CSV: CsvFormatter,
    OutputFormat.SQL_INSERT: SqlInsertFormatter,
    OutputFormat.SQL_COPY: SqlCopyFormatter,
}


def formatter_for(
    output_format: OutputFormat,
    range_type: RangeType = RangeType.INTEGER,
    create_table: bool = False,
) -> OutputFormatter:
    """Return the formatter for *output_format*, encoding endpoints per *range_type*."""
    cls = _FORMATTERS[output_format]
    if cls is SqlCopyFormatter:
        return SqlCopyFormatter(range_type, create_table=create_table)
    return cls(range_type)

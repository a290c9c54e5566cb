"""Shared helpers for unit tests — config builders, output parsers, fake sinks."""

from __future__ import annotations

from unittest.mock import MagicMock

from rangegen.models import Configuration


def make_config(**overrides) -> Configuration:
    """Build a valid Configuration, overriding any field by keyword."""
    fields = dict(
        row_count=200, handle_count=50, lowest=0, highest=10_000,
        mean_width=500, width_stddev=150, seed=7,
    )
    fields.update(overrides)
    return Configuration(**fields)


def scripted_source(uniform: list[int], gaussian: float = 0.0) -> MagicMock:
    """RandomSource stand-in returning fixed uniform draws and a fixed gaussian."""
    source = MagicMock()
    source.uniform_int.side_effect = list(uniform)
    source.gaussian.return_value = gaussian
    return source


def parse_csv(text: str) -> list[tuple[int, int, int, str]]:
    """Parse CSV output into ``(handle, low, high, payload)`` tuples."""
    rows = []
    for line in text.splitlines():
        handle, low, high, payload = line.split(",")
        rows.append((int(handle), int(low), int(high), payload.strip("'")))
    return rows


def parse_insert(text: str) -> list[tuple[int, int, int, str]]:
    """Parse multi-row INSERT output by splitting each parenthesised tuple on commas."""
    lines = text.splitlines()
    assert lines[0].startswith("INSERT INTO mock")
    assert lines[-1] == ";"
    rows = []
    for line in lines[1:-1]:
        body = line.lstrip(",")
        assert body.startswith("(") and body.endswith(")")
        handle, low, high, payload = body[1:-1].split(",")
        rows.append((int(handle), int(low), int(high), payload.strip("'")))
    return rows


class FailingSink:
    """Sink that accepts *ok_writes* writes, then raises BrokenPipeError."""

    def __init__(self, ok_writes: int):
        self.ok_writes = ok_writes
        self.lines: list[str] = []

    def write(self, text: str) -> int:
        if len(self.lines) >= self.ok_writes:
            raise BrokenPipeError(32, "Broken pipe")
        self.lines.append(text)
        return len(text)

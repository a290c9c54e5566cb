"""Domain exceptions.

Every failure is surfaced to the caller. Nothing here is retried: a test-data
generator that silently drops rows would invalidate the benchmark it feeds.
"""

from __future__ import annotations


class RangeGenError(Exception):
    """Base class for all rangegen errors."""


class InvalidConfiguration(RangeGenError):
    """Configuration rejected before generation starts. No output is written."""


class InvalidRange(RangeGenError):
    """RandomSource called with an empty span. Indicates an upstream bug."""


class SinkWriteFailure(RangeGenError):
    """The output stream rejected a write (e.g. broken pipe)."""

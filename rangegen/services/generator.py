"""Row generation — handle and interval sampling with boundary clamping.

Clamping order is deliberately asymmetric: ``low`` is clamped first, ``high``
is derived from it and then clamped, and ``low`` is never revisited. Rows that
touch a boundary can therefore come out narrower than their sampled width.
"""

from __future__ import annotations

from collections.abc import Iterator

from rangegen.models import Configuration, Row
from rangegen.services.random_source import RandomSource


class RowGenerator:
    """Produces rows for a configuration, one at a time."""

    def __init__(self, config: Configuration, source: RandomSource | None = None):
        self.config = config
        self.source = source or RandomSource(config.seed)

    def row(self, sequence: int) -> Row:
        cfg = self.config
        rng = self.source

        handle = rng.uniform_int(1, cfg.handle_count + 1)
        midpoint = cfg.lowest + rng.uniform_int(0, cfg.highest - cfg.lowest + 1)
        width = max(round(rng.gaussian(cfg.mean_width, cfg.width_stddev)), 0)

        low, high = clamp_interval(midpoint, width, cfg.lowest, cfg.highest)
        return Row(handle=handle, low=low, high=high, sequence=sequence, width=width)

    def rows(self) -> Iterator[Row]:
        """Yield exactly ``row_count`` rows with sequences ``0..row_count-1``."""
        for i in range(self.config.row_count):
            yield self.row(i)


def clamp_interval(midpoint: int, width: int, lowest: int, highest: int) -> tuple[int, int]:
    """Centre an interval of *width* on *midpoint* inside ``[lowest, highest]``.

    Args:
        midpoint: Sampled centre, already within ``[lowest, highest]``.
        width: Non-negative sampled width.
        lowest: Inclusive lower bound for ``low``.
        highest: Inclusive upper bound for ``high``.

    Returns:
        ``(low, high)`` with ``lowest <= low <= high <= highest``.

    Examples::

        clamp_interval(50, 10, 0, 100)   # (45, 55)
        clamp_interval(2, 10, 0, 100)    # (0, 10)
        clamp_interval(98, 10, 0, 100)   # (93, 100)
        clamp_interval(50, 0, 0, 100)    # (50, 50)
    """
    if width == 0:
        return midpoint, midpoint
    low = max(midpoint - width // 2, lowest)
    high = min(low + width, highest)
    return low, high

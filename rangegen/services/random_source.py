"""Seedable random source for row generation.

One instance is created per run and passed explicitly to the generator; there
is no module-level generator. Backed by ``numpy.random.Generator`` (PCG64),
so a given seed reproduces the same sequence within one installation.

Examples::

    from rangegen.services.random_source import RandomSource

    rng = RandomSource(seed=42)
    rng.uniform_int(1, 11)      # int in [1, 10]
    rng.gaussian(100.0, 0.0)    # 100.0 exactly
"""

from __future__ import annotations

import numpy as np

from rangegen.errors import InvalidRange


class RandomSource:
    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, low: int, high_exclusive: int) -> int:
        """Uniform integer in ``[low, high_exclusive)``.

        Raises:
            InvalidRange: if ``high_exclusive <= low``.
        """
        if high_exclusive <= low:
            raise InvalidRange(f"empty range [{low}, {high_exclusive})")
        return int(self._rng.integers(low, high_exclusive))

    def gaussian(self, mean: float, stddev: float) -> float:
        """Normal sample. ``stddev == 0`` returns *mean* exactly."""
        if stddev < 0:
            raise InvalidRange(f"negative standard deviation {stddev}")
        if stddev == 0:
            return float(mean)
        return float(self._rng.normal(mean, stddev))

"""rangegen — bulk test data for range-overlap query benchmarks."""

__version__ = "0.1.0"

"""Generation services — random source, row generator, formatters, driver."""

from rangegen.services.driver import Driver, generate
from rangegen.services.formatting import OutputFormatter, formatter_for
from rangegen.services.generator import RowGenerator
from rangegen.services.random_source import RandomSource

__all__ = [
    "Driver",
    "OutputFormatter",
    "RandomSource",
    "RowGenerator",
    "formatter_for",
    "generate",
]

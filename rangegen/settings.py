"""Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Generation defaults (CLI flags override these)
    nrows: int = 1_000_000
    handles: int = 10_000       # handles range from 1 to this
    lowest: int = 0
    highest: int = 1_000_000
    mean_width: float = 10_000
    stddev_width: float = 3_000
    range_type: str = "int"     # int | timestamp
    output_format: str = "csv"  # csv | insert | copy

    # Logging
    log_level: str = "WARNING"  # --verbose forces DEBUG
    progress_every: int = 100_000  # DEBUG progress line every N rows (0 disables)

    model_config = {"env_prefix": "RANGEGEN_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

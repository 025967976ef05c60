"""
Liar's Odds - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with LIARS_ODDS_ (e.g. LIARS_ODDS_MAX_DICE=30).
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Engine limits
    max_dice: int = Field(default=40, ge=1, le=40)

    # Cache capacities
    specific_cache_size: int = Field(default=200, ge=1)
    conditional_cache_size: int = Field(default=100, ge=1)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LIARS_ODDS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> int:
    """Apply the configured log level to the root logger.

    Returns:
        The numeric level that was applied.
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level

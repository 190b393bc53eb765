"""Configuration for the luach command line and API fallbacks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .engines.year import MAX_YEAR, MIN_YEAR

logger = logging.getLogger(__name__)

# Reference "current year" used when a requested year is unusable (2020-2021 CE).
DEFAULT_CURRENT_YEAR = 5781


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    current_year: int = DEFAULT_CURRENT_YEAR
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not (MIN_YEAR <= self.current_year <= MAX_YEAR):
            raise ValueError(
                f"current_year must be in {MIN_YEAR}..{MAX_YEAR}, got {self.current_year}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        raw_year = os.getenv("LUACH_CURRENT_YEAR")
        current_year = DEFAULT_CURRENT_YEAR
        if raw_year:
            try:
                current_year = int(raw_year)
            except ValueError:
                raise ValueError(f"LUACH_CURRENT_YEAR must be an integer, got {raw_year!r}") from None

        config = cls(
            current_year=current_year,
            log_level=os.getenv("LUACH_LOG_LEVEL", "WARNING"),
        )
        logger.debug("Loaded config: %s", config)
        return config

    def setup_logging(self) -> None:
        """Configure application logging."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.WARNING),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

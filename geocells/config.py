"""Environment-driven settings for the geocells CLI and table helpers.

The geohash functions themselves never read the environment.

    GEOCELLS_PRECISION   default geohash length (1-22, default 10)
    GEOCELLS_LOG_LEVEL   logging level name for the CLI (default WARNING)
"""

import logging
import os
from dataclasses import dataclass

from .utils.constants import GEOHASH_PRECISION
from .utils.validation import InvalidPrecision, validate_precision

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    precision: int = GEOHASH_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        InvalidPrecision: GEOCELLS_PRECISION is set but is not an integer in [1, 22]
    """
    raw_precision = os.environ.get("GEOCELLS_PRECISION")
    if raw_precision is None or raw_precision.strip() == "":
        precision = GEOHASH_PRECISION
    else:
        try:
            value = int(raw_precision)
        except ValueError as e:
            raise InvalidPrecision(
                f"Invalid precision {raw_precision!r}: GEOCELLS_PRECISION must be an integer"
            ) from e
        precision = validate_precision(value)

    log_level = os.environ.get("GEOCELLS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
    return Settings(precision=precision, log_level=log_level)

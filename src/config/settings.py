"""
Configuration settings for the utility library.

**Conceptual**: This module provides a strongly-typed configuration object that
loads from environment variables (via an optional .env file). Settings are
validated at construction, so a malformed value fails at startup with a clear
message instead of deep inside a call.

The library needs very little configuration:
  - the log level used by `src.utils.log`,
  - the delay applied by `src.orchestration.deferred.square_async`.

Both have defaults, so no environment variable is ever required.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root if present; existing environment variables win
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_LOG_LEVEL = "INFO"

# Delay applied by square_async before it resolves (one second)
DEFAULT_SQUARE_DELAY_SECONDS = 1.0

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the utility library.

    **Usage pattern**:
      ```python
      from src.config.settings import Settings

      settings = Settings.from_env()
      settings.square_delay_seconds  # 1.0 unless overridden
      ```

    Tests construct `Settings(...)` directly instead of touching the
    environment.

    Attributes:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        square_delay_seconds: Delay before square_async resolves.
                             Must be finite and non-negative.
    """
    log_level: str = DEFAULT_LOG_LEVEL
    square_delay_seconds: float = DEFAULT_SQUARE_DELAY_SECONDS

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {list(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level!r}"
            )
        if not math.isfinite(self.square_delay_seconds) or self.square_delay_seconds < 0:
            raise ValueError(
                f"square_delay_seconds must be a finite, non-negative number, "
                f"got: {self.square_delay_seconds}"
            )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, e.g. logging.INFO."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - UTILS_LOG_LEVEL (optional): Logging level name. Defaults to "INFO".
          - UTILS_SQUARE_DELAY_SECONDS (optional): Delay before square_async
            resolves, in seconds. Defaults to 1.0.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set to an invalid value.

        Usage example:
            >>> # In .env file:
            >>> # UTILS_SQUARE_DELAY_SECONDS=0.25
            >>>
            >>> settings = Settings.from_env()
            >>> print(settings.square_delay_seconds)  # 0.25
        """
        log_level = os.getenv("UTILS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        delay_str = os.getenv("UTILS_SQUARE_DELAY_SECONDS", str(DEFAULT_SQUARE_DELAY_SECONDS))

        try:
            square_delay_seconds = float(delay_str)
        except ValueError:
            raise ValueError(
                f"UTILS_SQUARE_DELAY_SECONDS must be a number, got: {delay_str}"
            )

        return cls(
            log_level=log_level,
            square_delay_seconds=square_delay_seconds,
        )


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.
    Tests can bypass this by passing their own Settings objects, or call
    `reset_settings()` after changing the environment.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings() -> None:
    """Drop the cached singleton so the next get_settings() re-reads the environment."""
    global _default_settings
    _default_settings = None

"""Central configuration, loaded from the .env file.

Every setting has a default matching the built-in sanitizer behavior, so an
empty environment gives the standard 200-character, ``unnamed_file_`` /
``video_`` setup.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from utils.sanitize import (
    BLANK_PREFIX,
    EMPTY_PREFIX,
    MAX_FILENAME_LENGTH,
    is_safe_filename,
    sanitize_filename,
)
from utils.timestamps import Clock

# Project root = directory containing this file
_PROJECT_DIR = Path(__file__).parent.resolve()

# Load .env from project root
_env_path = _PROJECT_DIR / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# Millisecond timestamps stay 13 digits until the year 2286
_TIMESTAMP_DIGITS = 13


class Config:
    """Sanitizer configuration loaded from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file, override=True)

        # Sanitizing
        self.max_length: int = _parse_int("SANITIZE_MAX_LENGTH", MAX_FILENAME_LENGTH)
        self.blank_prefix: str = os.getenv("SANITIZE_BLANK_PREFIX", BLANK_PREFIX)
        self.empty_prefix: str = os.getenv("SANITIZE_EMPTY_PREFIX", EMPTY_PREFIX)

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        self._validate()

    def _validate(self):
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a logging level: {self.log_level!r}")
        if self.max_length <= 0:
            raise ValueError(
                f"SANITIZE_MAX_LENGTH must be positive, got {self.max_length}"
            )
        for var, prefix in (
            ("SANITIZE_BLANK_PREFIX", self.blank_prefix),
            ("SANITIZE_EMPTY_PREFIX", self.empty_prefix),
        ):
            if len(prefix) + _TIMESTAMP_DIGITS > self.max_length:
                raise ValueError(
                    f"SANITIZE_MAX_LENGTH={self.max_length} is too short "
                    f"for fallback names starting with {prefix!r}"
                )
            if not is_safe_filename(prefix, self.max_length):
                raise ValueError(f"{var} is not a safe filename prefix: {prefix!r}")

    def sanitize(self, name: Optional[str], clock: Optional[Clock] = None) -> str:
        """Sanitize `name` with the configured length and prefixes."""
        return sanitize_filename(
            name,
            max_len=self.max_length,
            clock=clock,
            blank_prefix=self.blank_prefix,
            empty_prefix=self.empty_prefix,
        )


def _parse_int(var: str, default: int) -> int:
    raw = os.getenv(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None

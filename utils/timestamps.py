"""Millisecond timestamps for fallback filenames.

Fallback names are a fixed prefix followed by the Unix time in milliseconds,
e.g. ``video_1760781234567``. The clock is passed in as a zero-argument
callable so callers (and tests) can pin it.
"""

import time
from datetime import datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], int]


def current_millis() -> int:
    """Wall-clock time as integer milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def fallback_name(prefix: str, clock: Optional[Clock] = None) -> str:
    """Build ``<prefix><milliseconds>`` using `clock` (wall clock by default)."""
    ts_ms = (clock or current_millis)()
    return f"{prefix}{ts_ms}"


def fallback_to_datetime(name: str, prefix: str) -> Optional[datetime]:
    """Extract local datetime from a fallback name.

    Args:
        name: Name produced by :func:`fallback_name`.
        prefix: The prefix it was built with.

    Returns:
        Local datetime or None if the name isn't a fallback name for `prefix`.
    """
    if not name.startswith(prefix):
        return None
    digits = name[len(prefix):]
    if not digits.isascii() or not digits.isdigit():
        return None

    try:
        ts_ms = int(digits)
        local_tz = datetime.now(timezone.utc).astimezone().tzinfo
        dt_utc = datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc)
        return dt_utc.astimezone(local_tz)
    except (ValueError, OSError, OverflowError):
        pass
    return None

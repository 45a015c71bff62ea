"""Filename sanitization utilities."""

import logging
import re
from typing import Optional

from utils.timestamps import Clock, fallback_name

logger = logging.getLogger(__name__)

# Characters that are illegal in file names on Windows/macOS/Linux
FORBIDDEN_CHARS = '\\/:*?"<>|'
REPLACEMENT = "_"

# Windows caps full paths at 260, keep the base name well under that
MAX_FILENAME_LENGTH = 200

BLANK_PREFIX = "unnamed_file_"
EMPTY_PREFIX = "video_"

_FORBIDDEN_RE = re.compile(r'[\\/:*?"<>|]')
_CONTROL_RE = re.compile(r"[\x00-\x1f]")
_TRAILING_RE = re.compile(r"[\s.]+\Z")

# Stands in for REPLACEMENT until the end so that a name made only of
# replaced characters can be told apart from one containing real underscores.
# Safe because control characters are already gone when it is inserted.
_MARK = "\x00"


def sanitize_filename(
    name: Optional[str],
    max_len: int = MAX_FILENAME_LENGTH,
    clock: Optional[Clock] = None,
    blank_prefix: str = BLANK_PREFIX,
    empty_prefix: str = EMPTY_PREFIX,
) -> str:
    """Turn an arbitrary title into a name that is safe on every filesystem.

    - ``None`` or blank input gives ``<blank_prefix><ms>``
    - ``\\ / : * ? " < > |`` become underscores
    - control characters (0x00-0x1F) are dropped
    - result is cut to `max_len` code points, trimmed, and stripped of
      trailing dots and spaces (Windows rejects those)
    - if nothing meaningful is left, gives ``<empty_prefix><ms>``

    Never raises. `clock` returns milliseconds since the epoch and is only
    consulted on the two fallback paths.
    """
    if name is None:
        logger.debug("No name given, using %r fallback", blank_prefix)
        return fallback_name(blank_prefix, clock)
    if not isinstance(name, str):
        name = str(name)
    if not name.strip():
        logger.debug("Blank name given, using %r fallback", blank_prefix)
        return fallback_name(blank_prefix, clock)

    # Control and forbidden sets are disjoint, so the order doesn't matter
    safe = _CONTROL_RE.sub("", name)
    safe = _FORBIDDEN_RE.sub(_MARK, safe)

    if len(safe) > max_len:
        safe = safe[:max_len]

    safe = _TRAILING_RE.sub("", safe.strip())

    if not safe.strip(_MARK):
        logger.debug("Nothing left of %r after sanitizing, using %r fallback", name, empty_prefix)
        return fallback_name(empty_prefix, clock)

    return safe.replace(_MARK, REPLACEMENT)


def is_safe_filename(name: Optional[str], max_len: int = MAX_FILENAME_LENGTH) -> bool:
    """Check that `name` could have come out of :func:`sanitize_filename`."""
    if not name or not isinstance(name, str):
        return False
    if len(name) > max_len:
        return False
    if _FORBIDDEN_RE.search(name) or _CONTROL_RE.search(name):
        return False
    if name != name.strip() or name.endswith((".", " ")):
        return False
    return True

#!/usr/bin/env python3
"""
Turn titles into filesystem-safe names.

Titles come from the command line, or one per line from stdin when none are
given. Settings (max length, fallback prefixes, log level) come from .env,
see config.py.

Usage:
    python sanitize_names.py "My:Video*Title?"        # -> My_Video_Title_
    cat titles.txt | python sanitize_names.py         # one name per line
    python sanitize_names.py --check "a/b" "ok.txt"   # exit 1 if any is unsafe
"""

import argparse
import sys
import logging
from typing import Iterable, Iterator, List, Optional

from config import Config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def read_titles(stream) -> Iterator[str]:
    """Yield lines from `stream` without their line endings."""
    for line in stream:
        yield line.rstrip("\r\n")


def sanitize_all(config: Config, titles: Iterable[str]) -> List[str]:
    """Sanitize every title with the configured settings."""
    names = []
    for title in titles:
        name = config.sanitize(title)
        if name != title:
            logger.debug("%r -> %r", title, name)
        names.append(name)
    return names


def check_all(config: Config, titles: Iterable[str]) -> int:
    """Print OK/UNSAFE per title. Returns the number of unsafe ones."""
    from utils.sanitize import is_safe_filename

    unsafe = 0
    for title in titles:
        if is_safe_filename(title, config.max_length):
            print(f"OK      {title}")
        else:
            print(f"UNSAFE  {title!r} -> {config.sanitize(title)}")
            unsafe += 1
    return unsafe


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Make titles safe to use as filenames")
    parser.add_argument("titles", nargs="*", help="Titles to sanitize (default: read stdin)")
    parser.add_argument("--check", action="store_true", help="Only report whether titles are already safe")
    parser.add_argument("--env-file", help="Load settings from this .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    try:
        config = Config(env_file=args.env_file)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)

    titles = args.titles if args.titles else list(read_titles(sys.stdin))
    logger.debug("Processing %d title(s)", len(titles))

    if args.check:
        unsafe = check_all(config, titles)
        if unsafe:
            logger.info("%d of %d title(s) need sanitizing", unsafe, len(titles))
            return 1
        return 0

    for name in sanitize_all(config, titles):
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

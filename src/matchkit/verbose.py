"""Debug logging of matcher verdicts and failure messages."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from matchkit.config import get_config


class MatcherFilter(logging.Filter):
    """Drop verdict records for matchers outside *matchers*.

    Records not emitted by a matcher (no ``matcher`` attribute) always pass,
    and an empty selection passes everything.
    """

    def __init__(self, matchers: Iterable[str] = ()):
        super().__init__()
        self.matchers = frozenset(matchers)

    def filter(self, record: logging.LogRecord) -> bool:
        name = getattr(record, "matcher", None)
        return not self.matchers or name is None or name in self.matchers


def setup_logger(
    debug_file: Path,
    verbose: bool = False,
    logger_name: str = "matchkit",
    matchers: Iterable[str] | None = None,
) -> logging.Logger:
    """
    Route matcher verdicts to a debug file and, optionally, to stderr.

    Every ``expect(...)`` check logs one record tagged with the matcher name
    and negation flag; a failing check logs a second record carrying the full
    failure message. Both are written to debug_file. With verbose=True the
    records at or above the configured ``log_level`` also go to stderr.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr. If False, only log to file.
        logger_name: Name of the logger instance; ``expect`` uses "matchkit"
        matchers: Matcher names to keep. Defaults to the configured
            ``log_matchers``; empty keeps every matcher.

    Returns:
        Configured logger instance.
    """
    config = get_config()
    if matchers is None:
        matchers = config.log_matchers

    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.filters.clear()
    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.addFilter(MatcherFilter(matchers))

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(config.log_level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger

"""Logging configuration helpers."""

import logging
import sys
from pathlib import Path

DEFAULT_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    level: str | int = logging.INFO,
    fmt: str = DEFAULT_LOG_FORMAT,
    log_file: Path | None = None,
) -> None:
    """Route ``diet_book`` records to one handler, away from the prompt on stdout.

    Records go to ``log_file`` when one is given, otherwise to stderr. Calling
    again keeps the existing handler and applies the new level and format.
    """
    logger = logging.getLogger("diet_book")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    formatter = logging.Formatter(fmt)
    if logger.handlers:
        for existing in logger.handlers:
            existing.setFormatter(formatter)
        return
    if log_file is None:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

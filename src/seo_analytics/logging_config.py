"""Logging configuration for the site-quality analyzer."""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# httpx logs every request line at INFO, which duplicates the [PSI] messages
NOISY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Configure root logging for an analysis run.

    Console output goes to stdout so the error summary on stderr stays
    readable. A file handler is added when ``log_file`` is given; its
    parent directories are created.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional log file path
        format_string: Optional custom format string
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=_resolve_level(level), handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

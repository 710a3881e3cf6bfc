"""
Logging configuration — one setup call per process.

``devlibguide.main`` calls :func:`setup_logging` before any command runs.
Modules only ever do ``logger = logging.getLogger(__name__)``.

Level precedence:
    --debug / --verbose / --quiet  >  DLG_LOG_LEVEL  >  WARNING

File output is opt-in through DLG_LOG_FILE, with its own threshold in
DLG_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "DLG_LOG_LEVEL"
ENV_FILE = "DLG_LOG_FILE"
ENV_FILE_LEVEL = "DLG_LOG_FILE_LEVEL"

# (max level, format, datefmt) — first row whose level >= the console level wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Flask's dev server logs every request at INFO
_CHATTY_LOGGERS = ("werkzeug",)


def parse_level(level: str | None, default: int = logging.WARNING) -> int:
    """Map a level name to its numeric value, falling back to ``default``."""
    if not level:
        return default
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else default


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def _console_formatter(level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter("%(message)s")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Install console (stderr) and optional file handlers on the root logger.

    Args:
        level: Console level name.
        log_file: Optional log file path.  Defaults to DLG_LOG_FILE.
        log_file_level: File level name.  Defaults to DLG_LOG_FILE_LEVEL,
            then to ``level``.
        quiet_third_party: Hold chatty library loggers at WARNING unless
            the console is at DEBUG.
    """
    console_level = parse_level(level)
    log_file = log_file or os.environ.get(ENV_FILE)
    log_file_level = log_file_level or os.environ.get(ENV_FILE_LEVEL)

    root = logging.getLogger()
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))
    root.addHandler(console)

    root_level = console_level
    if log_file:
        file_level = parse_level(log_file_level, default=console_level)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(file_handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False

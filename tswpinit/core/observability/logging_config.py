"""
Logging configuration — set up once by the CLI.

Diagnostics go through ``logging`` to stderr; the user-facing progress
lines go through ``console.log`` to stdout. The two never mix, so
``--json`` output on stdout stays parseable even at DEBUG level.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  TSWPINIT_LOG_LEVEL  >  WARNING

A log file can be added with TSWPINIT_LOG_FILE (and TSWPINIT_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys

_FMT_CONSOLE = "%(levelname)s: %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s — %(message)s"
_DATEFMT = "%H:%M:%S"

ENV_LEVEL = "TSWPINIT_LOG_LEVEL"
ENV_FILE = "TSWPINIT_LOG_FILE"
ENV_FILE_LEVEL = "TSWPINIT_LOG_FILE_LEVEL"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file.
        log_file_level: Level for the file; defaults to ``level``.
    """
    numeric_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    fmt = _FMT_DEBUG if numeric_level <= logging.DEBUG else _FMT_CONSOLE
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)

    root.setLevel(effective_level)


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric

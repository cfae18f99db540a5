"""
Logging configuration — set up once by the CLI group callback.

Generator output is printed with click; logging carries the diagnostic
trail (which files were written, what was synced, why a write failed).
Level precedence: --debug/--verbose/--quiet  >  TNFGEN_LOG_LEVEL  >  WARNING.
A log file (TNFGEN_LOG_FILE) always records full detail at its own level.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "TNFGEN_LOG_LEVEL"
ENV_FILE = "TNFGEN_LOG_FILE"
ENV_FILE_LEVEL = "TNFGEN_LOG_FILE_LEVEL"

# (max level, format, datefmt) — first row whose level >= the console level wins
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(levelname)s: %(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, falling back to the env var."""
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
    """Install a stderr handler (and optionally a file handler) on the root logger.

    Args:
        level: Console level name.
        log_file: Optional log file path; defaults to ``TNFGEN_LOG_FILE``.
        log_file_level: File level name; defaults to ``TNFGEN_LOG_FILE_LEVEL``,
            then to ``level``.
    """
    console_level = parse_level(level)
    fmt, datefmt = next(
        (f, d) for limit, f, d in _CONSOLE_FORMATS if console_level <= limit
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    log_file = log_file or os.environ.get(ENV_FILE)
    if log_file:
        file_level = parse_level(log_file_level or os.environ.get(ENV_FILE_LEVEL) or level)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING if unknown)."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING

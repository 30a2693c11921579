"""
Logging configuration for the ``targetcaps`` command line.

Only the ``targetcaps`` package logger is configured; the root logger is
left to whoever embeds the library. Modules log through
``logging.getLogger(__name__)`` and inherit this setup.

The level comes from the first of:
    --debug / --verbose / --quiet  >  TARGETCAPS_LOG_LEVEL  >  WARNING

TARGETCAPS_LOG_FILE adds a file handler, TARGETCAPS_LOG_FILE_LEVEL sets
its level independently of the console.
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "targetcaps"

ENV_LEVEL = "TARGETCAPS_LOG_LEVEL"
ENV_FILE = "TARGETCAPS_LOG_FILE"
ENV_FILE_LEVEL = "TARGETCAPS_LOG_FILE_LEVEL"

# Console: bare messages normally, logger name + level once diagnosing
_FMT_CONSOLE = "%(message)s"
_FMT_CONSOLE_DIAG = "%(levelname)-5s %(name)s: %(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
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
) -> logging.Logger:
    """Attach console (stderr) and optional file handlers to the package logger.

    Calling it again replaces the handlers installed by a previous call.

    Returns:
        The configured ``targetcaps`` logger.
    """
    console_level = _parse_level(level)
    fmt = _FMT_CONSOLE_DIAG if console_level <= logging.INFO else _FMT_CONSOLE

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console)
    logger.propagate = False

    effective = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        effective = min(effective, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective)
    return logger


def setup_logging_from_env(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    """``setup_logging`` driven by CLI flags and TARGETCAPS_LOG_* variables."""
    return setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING when unrecognised."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING

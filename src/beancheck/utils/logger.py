"""Logging setup for beancheck.

beancheck reports test failures only through verifier hooks; the loggers
here carry diagnostics about what was discovered, skipped and exercised.
Nothing is emitted until :func:`configure_logging` attaches a handler.

Verbosity names accepted by :func:`configure_logging`:

    ========  ==============  =====
    Name      Python level    Value
    ========  ==============  =====
    QUIET     WARNING          30
    NORMAL    INFO             20
    VERBOSE   VERBOSE (custom) 15
    DEBUG     DEBUG            10
    ========  ==============  =====

The ``BEANCHECK_LOG_LEVEL`` environment variable supplies the name when no
explicit level is passed.

Usage:
    >>> from beancheck.utils.logger import VERBOSE, configure_logging, get_logger
    >>> configure_logging("VERBOSE")
    >>> get_logger("verifier").log(VERBOSE, "Verifying %s", "Person")
"""

from __future__ import annotations

import logging
import os
import sys

VERBOSE: int = 15
"""Per-property tracing, between INFO and DEBUG."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
NORMAL: int = logging.INFO
DEBUG: int = logging.DEBUG

_LEVELS: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

LOG_LEVEL_ENV_VAR: str = "BEANCHECK_LOG_LEVEL"

_ROOT_LOGGER_NAME: str = "beancheck"
_LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Translate a verbosity name into a numeric logging level.

    Args:
        level: Verbosity name (case-insensitive).  ``None`` reads
            ``BEANCHECK_LOG_LEVEL``, falling back to ``"NORMAL"``.

    Raises:
        ValueError: If the name is not one of the known verbosities.
    """
    name = level if level is not None else os.environ.get(LOG_LEVEL_ENV_VAR, "NORMAL")
    try:
        return _LEVELS[name.upper()]
    except KeyError:
        msg = f"Unknown log level {name!r}. Valid levels: {', '.join(sorted(_LEVELS))}"
        raise ValueError(msg) from None


def configure_logging(level: str | None = None) -> None:
    """Send ``beancheck`` log records to stderr at the given verbosity.

    Calling this again replaces the previously installed handler.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the ``beancheck.<name>`` logger."""
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")

# Projective: Products of Projective Spaces for PyTorch (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Projective logging system.

Provides structured logging under the ``projective`` hierarchy.
Modules obtain their logger through :func:`get_logger` instead of ``print()``.

Environment variables:
    PROJECTIVE_LOG_LEVEL: DEBUG / INFO / WARNING (default) / ERROR
    PROJECTIVE_LOG_FILE: optional path; appends plain-text log lines
"""

import logging
import os
import sys

_CONFIGURED = False

# ANSI colour codes (used only when stderr is a TTY)
_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Adds ANSI colour to level names when writing to a TTY."""

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        levelname = record.levelname
        record.levelname = f"{_COLORS.get(record.levelno, '')}{levelname}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _configure_once() -> None:
    """One-time lazy init of the ``projective`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("projective")
    # Library default is quiet; arithmetic never logs above DEBUG.
    level_name = os.environ.get("PROJECTIVE_LOG_LEVEL", "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    fmt = "%(levelname)s %(name)s: %(message)s"
    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter(fmt, use_color=use_color))
    root.addHandler(console)

    log_file = os.environ.get("PROJECTIVE_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``projective`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module. A leading
            ``projective.`` is not repeated.

    Returns:
        A :class:`logging.Logger` instance.
    """
    _configure_once()
    if name == "projective" or name.startswith("projective."):
        return logging.getLogger(name)
    return logging.getLogger(f"projective.{name}")

"""Logging utilities for the crossword editor."""

from __future__ import annotations

import logging
from typing import Optional, Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a sensible formatter.

    Logs go to stderr so they never interleave with the board printed on
    stdout by the console front end.
    """

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    return logging.getLogger(name or "crossword_editor")

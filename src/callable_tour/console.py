"""Console plumbing: logger setup and coloured section headings."""

from __future__ import annotations

import logging
import sys

from colored import attr, fg

LOGGER_NAME = "callable_tour"
HEADING_COLOR = "cyan"


class MaxLevelFilter(logging.Filter):
    """Allow log records up to a specific level."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def setup_logging(
    level: str | int = logging.INFO,
    stdout_max_level: int = logging.INFO,
) -> logging.Logger:
    """Route the package logger to stdout up to *stdout_max_level*, stderr above it.

    Every record that passes *level* reaches exactly one of the two streams.
    Calling this again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(MaxLevelFilter(stdout_max_level))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(stdout_max_level + 1)

    formatter = logging.Formatter("%(levelname)s:%(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger


def heading(title: str, *, color: bool = True) -> str:
    """Return the banner printed before each walkthrough section."""
    text = f"== Running {title} =="
    if not color:
        return text
    return f"{fg(HEADING_COLOR)}{text}{attr('reset')}"

"""Environment-driven settings for the console walkthrough."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from callable_tour.exceptions import ConfigurationError

ENV_PREFIX = "CALLABLE_TOUR_"
DEFAULT_ITERATIONS = 10
DEFAULT_DELAY = 0.5
DEFAULT_LOG_LEVEL = "INFO"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Knobs for the walkthrough.

    Attributes:
        iterations: How many times ``Worker.do_something`` loops.
        delay:      Seconds slept on each loop iteration.
        log_level:  Level name applied to the ``callable_tour`` logger.
        color:      Whether section headings are coloured.
    """

    iterations: int = DEFAULT_ITERATIONS
    delay: float = DEFAULT_DELAY
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True


def _parse_iterations(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_PREFIX}ITERATIONS must be an integer, got {raw!r}"
        ) from e
    if value < 0:
        raise ConfigurationError(f"{ENV_PREFIX}ITERATIONS must be >= 0, got {value}")
    return value


def _parse_delay(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_PREFIX}DELAY must be a number of seconds, got {raw!r}"
        ) from e
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{ENV_PREFIX}DELAY must be a finite number >= 0, got {value}")
    return value


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from environment variables.

    Parameters:
        environ: Mapping to read from. When *None*, :data:`os.environ` is
            used.

    Raises:
        ConfigurationError: If a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ

    iterations = DEFAULT_ITERATIONS
    if f"{ENV_PREFIX}ITERATIONS" in env:
        iterations = _parse_iterations(env[f"{ENV_PREFIX}ITERATIONS"])

    delay = DEFAULT_DELAY
    if f"{ENV_PREFIX}DELAY" in env:
        delay = _parse_delay(env[f"{ENV_PREFIX}DELAY"])

    log_level = DEFAULT_LOG_LEVEL
    if f"{ENV_PREFIX}LOG_LEVEL" in env:
        log_level = _parse_log_level(env[f"{ENV_PREFIX}LOG_LEVEL"])

    # NO_COLOR wins regardless of its value (https://no-color.org).
    color = "NO_COLOR" not in env
    if color and f"{ENV_PREFIX}COLOR" in env:
        color = env[f"{ENV_PREFIX}COLOR"].strip().lower() not in _FALSE_VALUES

    return Settings(iterations=iterations, delay=delay, log_level=log_level, color=color)

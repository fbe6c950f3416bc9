"""A small publisher whose operations announce their own completion."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from callable_tour.config import DEFAULT_DELAY, DEFAULT_ITERATIONS
from callable_tour.events import Event, ProcessEventArgs

logger = logging.getLogger(__name__)


class Worker:
    """Runs toy operations and fires :attr:`operation_complete` after each.

    Parameters:
        iterations: Loop count for :meth:`do_something`.
        delay:      Seconds to sleep per loop iteration.
        sleep:      Sleep function, injectable so tests never block.
    """

    operation_complete = Event()

    def __init__(
        self,
        *,
        iterations: int = DEFAULT_ITERATIONS,
        delay: float = DEFAULT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.iterations = iterations
        self.delay = delay
        self._sleep = sleep

    def do_something(self) -> None:
        for i in range(self.iterations):
            logger.info("DoSomething printing %d", i)
            self._sleep(self.delay)
        self._complete("do_something")

    def add_these(self, first: int, second: int) -> int:
        self._complete("add_these")
        return first + second

    def add_all(self, numbers: Iterable[int]) -> int:
        total = 0
        for number in numbers:
            total += number
        self._complete("add_all")
        return total

    def talking_test(self, say_that: str) -> None:
        print(f"Worker says: {say_that}")

    def _complete(self, operation: str) -> None:
        hook = self.operation_complete
        if hook:
            logger.info("operation_complete firing an event. This is a SYNCHRONOUS operation.")
        hook.fire(self, ProcessEventArgs(f"{operation} is now complete"))
        if hook:
            logger.info("operation_complete continuing AFTER event was fired")

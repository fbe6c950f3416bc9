"""Publisher/subscriber events.

A publisher declares an :class:`Event` at class level; every instance then
owns its own :class:`EventHook` holding the subscribers::

    class Worker:
        operation_complete = Event()

    worker.operation_complete += on_complete
    worker.operation_complete.fire(worker, ProcessEventArgs("done"))
    worker.operation_complete -= on_complete

Handlers are called as ``handler(sender, args)`` on the firing thread,
synchronously and in subscription order.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional

from callable_tour.delegates import describe_target
from callable_tour.exceptions import EventAssignmentError

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any, Any], None]


@dataclass(frozen=True)
class ProcessEventArgs:
    """Payload describing a finished operation.

    Attributes:
        message:         What completed.
        completion_time: When the payload was created.
    """

    message: str = "Process Complete"
    completion_time: datetime = field(default_factory=datetime.now)


class EventHook:
    """Subscriber list for one event on one publisher instance."""

    def __init__(self, name: str = "event") -> None:
        self._name = name
        self._handlers: list[EventHandler] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def handlers(self) -> tuple[EventHandler, ...]:
        with self._lock:
            return tuple(self._handlers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __bool__(self) -> bool:
        return len(self) > 0

    def subscribe(self, handler: EventHandler) -> None:
        if not callable(handler):
            raise TypeError(f"event handler must be callable, got {type(handler).__name__}")
        with self._lock:
            self._handlers.append(handler)
        logger.debug("%s: subscribed %s", self._name, describe_target(handler))

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove the most recent registration of *handler*, if any."""
        with self._lock:
            for index in range(len(self._handlers) - 1, -1, -1):
                if self._handlers[index] == handler:
                    del self._handlers[index]
                    break
            else:
                return
        logger.debug("%s: unsubscribed %s", self._name, describe_target(handler))

    def __iadd__(self, handler: EventHandler) -> "EventHook":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: EventHandler) -> "EventHook":
        self.unsubscribe(handler)
        return self

    def fire(self, sender: Any, args: Any) -> None:
        # Handlers added or removed by a handler take effect on the next fire.
        for handler in self.handlers:
            handler(sender, args)

    def __repr__(self) -> str:
        names = ", ".join(describe_target(h) for h in self.handlers)
        return f"EventHook({self._name}: [{names}])"


class Event:
    """Class-level declaration of an event; see the module docstring."""

    def __init__(self) -> None:
        self._name = "event"

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: Optional[object], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        hooks = instance.__dict__
        hook = hooks.get(self._name)
        if hook is None:
            hook = hooks.setdefault(self._name, EventHook(f"{type(instance).__name__}.{self._name}"))
        return hook

    def __set__(self, instance: object, value: Any) -> None:
        # ``obj.event += handler`` ends with a setattr of the same hook.
        if value is self.__get__(instance):
            return
        raise EventAssignmentError(
            f"{type(instance).__name__}.{self._name} only supports += and -="
        )

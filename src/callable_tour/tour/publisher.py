"""Publisher/subscriber notification through events."""

from __future__ import annotations

import time

from callable_tour.config import Settings
from callable_tour.events import ProcessEventArgs
from callable_tour.tour.speakers import DoMathDelegate
from callable_tour.worker import Worker


def on_operation_complete(sender: object, args: ProcessEventArgs) -> None:
    print(
        "Event handler on_operation_complete received event from: "
        f"{type(sender).__name__}: {args.message} at {args.completion_time:%H:%M:%S}"
    )


def make_worker(settings: Settings) -> Worker:
    sleep = time.sleep if settings.delay > 0 else (lambda _seconds: None)
    return Worker(iterations=settings.iterations, delay=settings.delay, sleep=sleep)


def demo_1_quiet_operations(worker: Worker) -> None:
    """With nobody listening, operations complete silently."""
    do_math = DoMathDelegate(worker.add_these)
    total = do_math(4, 8)
    print(f"1. Total of 4+8 = {total}")
    worker.do_something()


def demo_2_subscribed_operations(worker: Worker) -> None:
    """Subscribers are called before the operation returns."""
    worker.operation_complete += on_operation_complete
    do_math = DoMathDelegate(worker.add_these)
    do_math(4, 8)
    worker.do_something()
    print("2. subscribers:", len(worker.operation_complete))


def demo_3_unsubscribe(worker: Worker) -> None:
    """After unsubscribing, the handler is never called again."""
    worker.operation_complete -= on_operation_complete
    worker.operation_complete -= on_operation_complete
    total = worker.add_all([1, 2, 3])
    print("3. unsubscribed:", len(worker.operation_complete), total)


def run_all(settings: Settings) -> None:
    """Run event demos against a single worker."""
    worker = make_worker(settings)
    demo_1_quiet_operations(worker)
    demo_2_subscribed_operations(worker)
    demo_3_unsubscribe(worker)

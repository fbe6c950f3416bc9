"""One call, many targets: multicast delegates."""

from __future__ import annotations

from callable_tour.config import Settings
from callable_tour.delegates import multicast
from callable_tour.tour.speakers import (
    SpeakDelegate,
    constant_800,
    i_like_delegates,
    im_speaking_now,
    math_speaks,
    name_length,
)
from callable_tour.worker import Worker


def demo_1_chain() -> None:
    """All three targets run synchronously, in the order they were added."""
    worker = Worker()
    me = SpeakDelegate(worker.talking_test)
    me += im_speaking_now
    me += math_speaks
    me("We're speaking the same language")
    i_like_delegates(me, "All my delegates should say this")
    print("1. chain:", len(me), me)


def demo_2_last_result_wins() -> None:
    """Calling a chain returns the last target's result."""
    my_func = multicast(name_length)
    my_func += constant_800
    length = my_func("Paul", 60)
    every = my_func.invoke_all("Paul", 60)
    print("2. results:", length, every)


def demo_3_removal() -> None:
    """Removing targets shrinks the chain; removing a stranger is a no-op."""
    worker = Worker()
    me = SpeakDelegate(worker.talking_test, im_speaking_now, math_speaks)
    me -= im_speaking_now
    me -= math_speaks
    me -= math_speaks
    me("Just me now")
    print("3. removal:", len(me), me)


def run_all(settings: Settings) -> None:
    """Run multicast demos."""
    demo_1_chain()
    demo_2_last_result_wins()
    demo_3_removal()

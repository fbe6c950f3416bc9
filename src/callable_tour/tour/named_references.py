"""Holding a function by name and calling it later."""

from __future__ import annotations

from typing import Callable

from callable_tour.config import Settings
from callable_tour.delegates import multicast
from callable_tour.tour.speakers import (
    SpeakDelegate,
    i_like_delegates,
    im_speaking_now,
    math_speaks,
    name_length,
    speak_with_age,
    speak_with_ages,
)
from callable_tour.worker import Worker


def demo_1_direct_calls() -> None:
    """Calling a function directly runs it immediately."""
    im_speaking_now("How are you?")
    math_speaks("I'm doing fine")
    print("1. direct-calls: done")


def demo_2_delegate_construction() -> None:
    """Wrap functions in a checked delegate and in plain Callable names."""
    me = SpeakDelegate(im_speaking_now)
    math = SpeakDelegate(math_speaks)

    action: Callable[[str, int], None] = speak_with_age
    action("hello", 9)
    action_list: Callable[[str, list[int]], None] = speak_with_ages
    action_list("I am another action", [9, 8, 7])

    me("What a sunny day")
    math("I like to count")
    print("2. delegates:", me, math)


def demo_3_bound_methods() -> None:
    """A bound method carries its instance along with it."""
    worker = Worker()
    abc = SpeakDelegate(worker.talking_test)
    abc("I'm new")
    print("3. bound-method:", abc, abc.targets[0] == worker.talking_test)


def demo_4_passing_delegates() -> None:
    """Delegates and bare functions are both plain arguments."""
    i_like_delegates(SpeakDelegate(im_speaking_now), "All my delegates should say this")
    i_like_delegates(im_speaking_now, "All my delegates should say this")
    untyped = multicast(name_length)
    print("4. passing:", untyped("Paul", 60))


def run_all(settings: Settings) -> None:
    """Run named-reference demos."""
    demo_1_direct_calls()
    demo_2_delegate_construction()
    demo_3_bound_methods()
    demo_4_passing_delegates()

"""Named functions shared by the walkthrough sections."""

from __future__ import annotations

from callable_tour.delegates import delegate_type


@delegate_type
def SpeakDelegate(what_to_say: str) -> None:
    """Something that can be told what to say."""


@delegate_type
def DoMathDelegate(first: int, second: int) -> int:
    """A binary integer operation."""


def im_speaking_now(say_this: str) -> None:
    print(f"Main says: {say_this}")


def math_speaks(say_that: str) -> None:
    print(f"MathMethods says: {say_that}")


def speak_with_age(say_that: str, age: int) -> None:
    print(f"MathMethods says: {say_that}, I am {age} years old")


def speak_with_ages(say_that: str, ages: list[int]) -> None:
    print(f"MathMethods says: {say_that}")


def name_length(name: str, age: int) -> int:
    print(f"My age is {age}")
    return len(name)


def constant_800(name: str, age: int) -> int:
    print(f"My func2 saying {age}")
    return 800


def i_like_delegates(some_delegate, what_to_say: str) -> None:
    """Accept any callable and run it in the middle of some other work."""
    print("I'm doing some work here")
    some_delegate(what_to_say)
    print("Finished my work")

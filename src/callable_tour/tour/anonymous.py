"""Inline callables: nested functions and lambdas."""

from __future__ import annotations

from callable_tour.config import Settings
from callable_tour.tour.speakers import SpeakDelegate
from callable_tour.values import calculate


def demo_1_inline_function() -> None:
    """Nested defs that exist only for the block that uses them."""
    names = ["Fred", "Sam", "Bob"]

    def show(name: str) -> None:
        print(name)

    for name in names:
        show(name)

    def anonymous_says(something: str) -> None:
        print(f"Anonymous says: {something}")

    me = SpeakDelegate(anonymous_says)
    me("I am here!")
    print("1. inline-function:", len(names))


def demo_2_lambdas() -> None:
    """A lambda is an inline function without a name."""
    me = SpeakDelegate(lambda something: print(f"Lambda says: {something}"))
    me("I am here!")
    return_something = lambda x, y: x + y  # noqa: E731
    print(f"2. Value is {return_something(9, 8)}")


def demo_3_lambda_arguments() -> None:
    """Lambdas supplied where a binary operation is expected."""
    print(f"3a. Value is {calculate(lambda a, b: a + b, 1, 2)} using lambda")
    print(f"3b. Value is {calculate(lambda x, z: x * z, 1, 2)}")
    print(f"3c. Value is {calculate(lambda q, r: q - r, 1, 2)}")
    print(f"3d. Value is {calculate(lambda f, h: f // h, 1, 2)}")


def run_all(settings: Settings) -> None:
    """Run anonymous-callable demos."""
    demo_1_inline_function()
    demo_2_lambdas()
    demo_3_lambda_arguments()

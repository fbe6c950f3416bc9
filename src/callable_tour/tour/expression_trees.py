"""Looking inside a lambda with the ast module."""

from __future__ import annotations

from callable_tour.config import Settings
from callable_tour.expressions import Expression


def demo_1_compile_and_call() -> None:
    """Parse, compile, and run a squaring lambda."""
    square = Expression.parse("lambda x: x * x")
    compiled = square.compile()
    parameter = 8
    print(f"1. Result of calling '{square}' using parameter '{parameter}' is '{compiled(parameter)}'")
    square.dump()


def demo_2_dump_shapes() -> None:
    """Different body shapes: comparison, string concatenation, a call."""
    for source in (
        "lambda i: i % 2 == 0",
        "lambda a, b: a.lower() + b.upper()",
        "lambda say_this: print(say_this)",
    ):
        print(f"2. {source}")
        Expression.parse(source).dump()


def run_all(settings: Settings) -> None:
    """Run expression-tree demos."""
    demo_1_compile_and_call()
    demo_2_dump_shapes()

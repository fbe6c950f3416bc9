"""Append-only integer store and the higher-order operations over it."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable, Iterable, Iterator

Combine = Callable[[int, int], int]
Predicate = Callable[[int], bool]


def calculate(do_math: Combine, first: int, second: int) -> int:
    """Apply a caller-supplied binary operation to two operands."""
    return do_math(first, second)


class ValueStore:
    """Integers in insertion order. Values can be appended but never removed."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: list[int] = []
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        # bool is an int subclass, but True/False are not meaningful values here.
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"ValueStore holds integers, got {type(value).__name__}")
        self._values.append(value)

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._values))

    def __repr__(self) -> str:
        return f"ValueStore({self._values!r})"

    def pairwise_total(self, combine: Combine) -> int:
        """Sum ``combine(a, b)`` over each pair of adjacent values.

        ``combine`` runs once per adjacent pair, so ``len(self) - 1`` times;
        fewer than two values give ``0`` without calling it.
        """
        total = 0
        for first, second in pairwise(self._values):
            total += combine(first, second)
        return total

    def run_filter(self, predicate: Predicate) -> list[int]:
        """Values for which *predicate* holds, in insertion order."""
        selected: list[int] = []
        for value in self._values:
            if predicate(value):
                selected.append(value)
        return selected

    def find_all(self, predicate: Predicate) -> list[int]:
        """Same as :meth:`run_filter`, expressed with the builtin ``filter``."""
        return list(filter(predicate, self._values))

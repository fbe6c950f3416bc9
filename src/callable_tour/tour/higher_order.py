"""Passing behaviour into an object that owns the data."""

from __future__ import annotations

from callable_tour.config import Settings
from callable_tour.values import ValueStore


def build_store() -> ValueStore:
    store = ValueStore()
    for value in range(2, 9):
        store.append(value)
    return store


def demo_1_pairwise_total(store: ValueStore) -> None:
    """Combine each adjacent pair and add the results up."""
    print(f"1a. pairwise_total addition is {store.pairwise_total(lambda a, b: a + b)}")
    print(f"1b. pairwise_total multiplication is {store.pairwise_total(lambda a, b: a * b)}")


def demo_2_run_filter(store: ValueStore) -> None:
    """Predicates select even and odd values."""
    for x in store.run_filter(lambda i: i % 2 == 0):
        print(f"Even {x}")
    for x in store.run_filter(lambda i: i % 2 == 1):
        print(f"Odd {x}")
    print("2. run-filter: done")


def demo_3_builtin_filter(store: ValueStore) -> None:
    """Same idea through the builtin ``filter``."""
    print("3. values less than 5:", store.find_all(lambda i: i < 5))


def run_all(settings: Settings) -> None:
    """Run higher-order demos over one store."""
    store = build_store()
    demo_1_pairwise_total(store)
    demo_2_run_filter(store)
    demo_3_builtin_filter(store)

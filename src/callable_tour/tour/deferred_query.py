"""Lazy query composition over the film catalogue."""

from __future__ import annotations

from datetime import date

from callable_tour.config import Settings
from callable_tour.films import FILMS, Query, demonstrate_deferred_execution, movies_by_name


def demo_1_deferred_execution() -> None:
    """Three lazy stages; every Rambo 'First' film predates 2009, so none survive."""
    selected = demonstrate_deferred_execution("Rambo", "First", date(2009, 1, 1))
    print("1. deferred:", [film.name for film in selected])


def demo_2_restartable() -> None:
    """A query can be enumerated again; a materialized list cannot re-run it."""
    query = Query(FILMS).pipe(movies_by_name, "Rambo").where(lambda film: "Blood" in film.name)
    first = query.to_list()
    second = [film.name for film in query]
    print("2. restartable:", len(first), second)


def run_all(settings: Settings) -> None:
    """Run deferred query demos."""
    demo_1_deferred_execution()
    demo_2_restartable()

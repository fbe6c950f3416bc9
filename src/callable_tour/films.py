"""Deferred, composable queries over an in-memory film catalogue.

Nothing in a :class:`Query` runs when it is built. Stages are generator
functions chained at iteration time, so the log line emitted by
:func:`movies_by_name` only appears once somebody actually consumes the
query. Iterating the query again re-runs every stage from the source;
:meth:`Query.to_list` takes a snapshot that never re-runs them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Film:
    name: str
    release_date: date


FILMS: tuple[Film, ...] = (
    Film("Gravity", date(2013, 10, 15)),
    Film("Blade Runner", date(1975, 2, 28)),
    Film("Superman", date(1985, 6, 6)),
    Film("Rambo First Blood", date(1982, 1, 8)),
    Film("Rambo First Blood Part 2", date(1985, 2, 3)),
    Film("Rambo III", date(1988, 2, 3)),
    Film("Rambo", date(2008, 5, 4)),
    Film("Rambo Last Blood", date(2019, 12, 1)),
    Film("Eli", date(2018, 7, 1)),
)


def movies_by_name(source: Iterable[Film], prefix: str) -> Iterator[Film]:
    """Yield films whose name starts with *prefix*, one at a time."""
    for film in source:
        if film.name.startswith(prefix):
            logger.info("Matching film %s found", film.name)
            yield film


Stage = Callable[[Iterable[Any]], Iterable[Any]]


class Query(Generic[T]):
    """An immutable, restartable chain of lazy stages over *source*.

    *source* must be re-iterable (a list or tuple) for the query to be
    restartable; a one-shot iterator yields results only once.
    """

    def __init__(self, source: Iterable[T], stages: tuple[Stage, ...] = ()) -> None:
        self._source = source
        self._stages = stages

    def _then(self, stage: Stage) -> "Query[Any]":
        return Query(self._source, self._stages + (stage,))

    def pipe(self, stage: Callable[..., Iterable[U]], *args: Any) -> "Query[U]":
        """Append ``stage(items, *args)`` as the next step."""
        return self._then(lambda items: stage(items, *args))

    def where(self, predicate: Callable[[T], bool]) -> "Query[T]":
        return self._then(lambda items: (item for item in items if predicate(item)))

    def select(self, selector: Callable[[T], U]) -> "Query[U]":
        return self._then(lambda items: (selector(item) for item in items))

    def __iter__(self) -> Iterator[T]:
        items: Iterable[Any] = self._source
        for stage in self._stages:
            items = stage(items)
        return iter(items)

    def to_list(self) -> list[T]:
        return list(self)

    @property
    def stage_count(self) -> int:
        return len(self._stages)


def demonstrate_deferred_execution(
    name: str,
    also_contains: str,
    released_after: date,
    films: Iterable[Film] = FILMS,
    write: Callable[[str], None] = print,
) -> list[Film]:
    """Build a three-stage query step by step, then run it.

    The narrative printed through *write* interleaves with the
    ``Matching film`` log records, which shows that the name filter only
    runs during the final enumeration.
    """
    write("Starting deferred execution example")
    query: Query[Film] = Query(films).pipe(movies_by_name, name)
    write(f"movies_by_name for {name} was called")

    query = query.where(lambda film: also_contains in film.name)
    write(f"Filtering movie name to contain {also_contains}")

    query = query.where(lambda film: film.release_date > released_after)
    write(f"Filtering movie date to be after {released_after.isoformat()}")

    write("Enumerating results for filter")
    filtered = query.to_list()
    for film in filtered:
        write(f"Movie selected was {film.name} released on {film.release_date.isoformat()}")
    write("END deferred execution example")
    return filtered

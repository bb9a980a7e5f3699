"""Basic sequence operations: appending, concatenating, reversing, searching."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


def append(source: Iterable[Any], item: Any) -> Iterator[Any]:
    """Yield the elements of ``source`` followed by ``item``."""
    yield from source
    yield item


def concat(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Yield every element of ``first`` and then every element of ``second``."""
    yield from first
    yield from second


def prepend(source: Iterable[Any], item: Any) -> Iterator[Any]:
    """Yield ``item`` followed by the elements of ``source``."""
    yield item
    yield from source


def default_if_empty(source: Iterable[Any], default: Any) -> Iterator[Any]:
    """Yield the elements of ``source``, or just ``default`` if it has none."""
    empty = True
    for item in source:
        empty = False
        yield item
    if empty:
        yield default


def reverse(source: Iterable[Any]) -> Iterator[Any]:
    """Yield the elements of ``source`` in the opposite order."""
    items = list(source)
    yield from reversed(items)


def index_of(source: Iterable[Any], predicate: Callable[[Any], bool]) -> int:
    """Return the index of the first element matching ``predicate``, or -1."""
    for index, item in enumerate(source):
        if predicate(item):
            return index
    return -1
"""Set-like operations over sequences: distinct, difference and intersection."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

_NOTHING = object()


def distinct(source: Iterable[Any]) -> Iterator[Any]:
    """Yield each element of ``source`` once, in order of first appearance."""
    seen: set[Any] = set()
    for item in source:
        if item not in seen:
            seen.add(item)
            yield item


def distinct_sorted(source: Iterable[Any]) -> Iterator[Any]:
    """Yield the elements of an already sorted ``source`` without repeats.

    Only neighbouring duplicates are dropped, so the input must be ordered
    for the result to hold no duplicates at all.
    """
    previous = _NOTHING
    for item in source:
        if previous is _NOTHING or item != previous:
            previous = item
            yield item


def distinct_by(source: Iterable[Any], selector: Callable[[Any], Any]) -> Iterator[Any]:
    """Yield the elements of ``source`` whose ``selector`` value has not been seen yet."""
    seen: set[Any] = set()
    for item in source:
        key = selector(item)
        if key not in seen:
            seen.add(key)
            yield item


def difference(source: Iterable[Any], other: Iterable[Any]) -> Iterator[Any]:
    """Yield the elements of ``source`` that do not appear in ``other``.

    Duplicates in ``source`` are kept.
    """
    excluded = set(other)
    for item in source:
        if item not in excluded:
            yield item


def difference_by(
    source: Iterable[Any],
    other: Iterable[Any],
    selector: Callable[[Any], Any],
) -> Iterator[Any]:
    """Yield the elements of ``source`` whose ``selector`` value is not produced by ``other``."""
    excluded = {selector(item) for item in other}
    for item in source:
        if selector(item) not in excluded:
            yield item


def intersect(source: Iterable[Any], other: Iterable[Any]) -> Iterator[Any]:
    """Yield the elements of ``source`` that also appear in ``other``, each at most once."""
    remaining = set(other)
    for item in source:
        if item in remaining:
            remaining.discard(item)
            yield item


def intersect_by(
    source: Iterable[Any],
    other: Iterable[Any],
    selector: Callable[[Any], Any],
) -> Iterator[Any]:
    """Yield elements of ``source`` whose ``selector`` value is produced by ``other``.

    Each selector value yields at most one element.
    """
    remaining = {selector(item) for item in other}
    for item in source:
        key = selector(item)
        if key in remaining:
            remaining.discard(key)
            yield item
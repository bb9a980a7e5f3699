"""Projection of sequence elements."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


def select(source: Iterable[Any], selector: Callable[[Any], Any]) -> Iterator[Any]:
    """Yield ``selector(element)`` for each element of ``source``."""
    for item in source:
        yield selector(item)


def select_indexed(source: Iterable[Any], selector: Callable[[int, Any], Any]) -> Iterator[Any]:
    """Yield ``selector(index, element)`` for each element of ``source``."""
    for index, item in enumerate(source):
        yield selector(index, item)
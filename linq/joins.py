"""Joining and grouping sequences by key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator


@dataclass
class Group:
    """The elements that share one key."""

    key: Any
    group: list = field(default_factory=list)


def _lookup(items: Iterable[Any], key_selector: Callable[[Any], Any]) -> dict[Any, list]:
    table: dict[Any, list] = {}
    for item in items:
        table.setdefault(key_selector(item), []).append(item)
    return table


def join(
    outer: Iterable[Any],
    inner: Iterable[Any],
    outer_key_selector: Callable[[Any], Any],
    inner_key_selector: Callable[[Any], Any],
    result_selector: Callable[[Any, Any], Any],
) -> Iterator[Any]:
    """Yield ``result_selector(o, i)`` for each pair of elements with equal keys.

    The order of ``outer`` is kept, and within each outer element the order
    of its matches in ``inner``.
    """
    table = _lookup(inner, inner_key_selector)
    for outer_item in outer:
        for inner_item in table.get(outer_key_selector(outer_item), ()):
            yield result_selector(outer_item, inner_item)


def group_join(
    outer: Iterable[Any],
    inner: Iterable[Any],
    outer_key_selector: Callable[[Any], Any],
    inner_key_selector: Callable[[Any], Any],
    result_selector: Callable[[Any, list], Any],
) -> Iterator[Any]:
    """Yield ``result_selector(o, matches)`` for each outer element.

    ``matches`` lists the inner elements whose key equals the outer key, in
    their original order; it is empty when there are none.
    """
    table = _lookup(inner, inner_key_selector)
    for outer_item in outer:
        yield result_selector(outer_item, list(table.get(outer_key_selector(outer_item), ())))


def group_by(
    source: Iterable[Any],
    key_selector: Callable[[Any], Any],
    element_selector: Callable[[Any], Any],
) -> Iterator[Group]:
    """Group the projected elements of ``source`` by key.

    Groups come in order of each key's first appearance.
    """
    groups: dict[Any, list] = {}
    for item in source:
        groups.setdefault(key_selector(item), []).append(element_selector(item))
    for key, elements in groups.items():
        yield Group(key, elements)
"""Sorting of sequences by key selectors or by a less-than function."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Sequence

from linq.compare import get_comparer


@dataclass(frozen=True)
class Order:
    """One sort criterion: a key selector and its direction."""

    selector: Callable[[Any], Any]
    desc: bool = False


def sort_by_orders(items: Iterable[Any], orders: Sequence[Order]) -> list:
    """Return the elements of ``items`` sorted by the given criteria.

    Criteria are applied in turn: a later one only decides between elements
    that all earlier ones consider equal. The comparison used for each key is
    chosen from the key of the first element.
    """
    values = list(items)
    if not values or not orders:
        return values

    comparers = [get_comparer(order.selector(values[0])) for order in orders]

    def compare(a: Any, b: Any) -> int:
        for order, comparer in zip(orders, comparers):
            outcome = comparer(order.selector(a), order.selector(b))
            if outcome:
                return -outcome if order.desc else outcome
        return 0

    values.sort(key=cmp_to_key(compare))
    return values


def sort_by_less(items: Iterable[Any], less: Callable[[Any, Any], bool]) -> list:
    """Return the elements of ``items`` sorted ascending by ``less(a, b)``."""

    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(items, key=cmp_to_key(compare))
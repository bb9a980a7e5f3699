"""Three-way comparison of query elements."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

Comparer = Callable[[Any, Any], int]


@runtime_checkable
class Comparable(Protocol):
    """An element that knows how to order itself against another element."""

    def compare_to(self, other: Any) -> int:
        """Return -1, 0 or 1 as this element is less than, equal to or greater than other."""


def _compare_ordered(x: Any, y: Any) -> int:
    if x > y:
        return 1
    if y > x:
        return -1
    return 0


def _compare_bool(x: Any, y: Any) -> int:
    if bool(x) == bool(y):
        return 0
    return 1 if x else -1


def _compare_comparable(x: Any, y: Any) -> int:
    return x.compare_to(y)


def get_comparer(value: Any) -> Comparer:
    """Return a three-way comparison function suited to elements like ``value``.

    Booleans order ``False`` before ``True``; objects with a ``compare_to``
    method are compared through it; everything else uses ``<`` and ``>``.
    """
    if isinstance(value, bool):
        return _compare_bool
    if isinstance(value, Comparable):
        return _compare_comparable
    return _compare_ordered
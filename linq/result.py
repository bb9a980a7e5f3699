"""Operations that consume a sequence and produce a single result."""

from __future__ import annotations

import math
from collections import deque
from typing import Any, Callable, Iterable, MutableMapping

from linq.compare import get_comparer
from linq.convert import get_float_converter, get_int_converter, get_uint_converter
from linq.items import KeyValue

_MISSING = object()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def all_match(source: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Return True if every element of ``source`` satisfies ``predicate``."""
    return all(predicate(item) for item in source)


def any_item(source: Iterable[Any]) -> bool:
    """Return True if ``source`` has at least one element."""
    return next(iter(source), _MISSING) is not _MISSING


def any_with(source: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Return True if some element of ``source`` satisfies ``predicate``."""
    return any(predicate(item) for item in source)


def average(source: Iterable[Any]) -> float:
    """Return the mean of the numeric elements of ``source``, or NaN if it is empty.

    Integer elements are summed exactly before dividing; other elements are
    summed as floats.
    """
    it = iter(source)
    first_item = next(it, _MISSING)
    if first_item is _MISSING:
        return math.nan

    if _is_int(first_item):
        convert: Callable[[Any], Any] = get_int_converter(first_item)
    else:
        convert = get_float_converter(first_item)

    total = convert(first_item)
    n = 1
    for item in it:
        total += convert(item)
        n += 1
    return float(total) / n if not _is_int(total) else total / n


def contains(source: Iterable[Any], value: Any) -> bool:
    """Return True if an element of ``source`` equals ``value``."""
    return any(item == value for item in source)


def count(source: Iterable[Any]) -> int:
    """Return the number of elements in ``source``."""
    return sum(1 for _ in source)


def count_with(source: Iterable[Any], predicate: Callable[[Any], bool]) -> int:
    """Return how many elements of ``source`` satisfy ``predicate``."""
    return sum(1 for item in source if predicate(item))


def first(source: Iterable[Any]) -> Any:
    """Return the first element of ``source``, or None if it is empty."""
    return next(iter(source), None)


def first_with(source: Iterable[Any], predicate: Callable[[Any], bool]) -> Any:
    """Return the first element satisfying ``predicate``, or None."""
    return next((item for item in source if predicate(item)), None)


def for_each(source: Iterable[Any], action: Callable[[Any], Any]) -> None:
    """Call ``action`` on every element of ``source``."""
    for item in source:
        action(item)


def for_each_indexed(source: Iterable[Any], action: Callable[[int, Any], Any]) -> None:
    """Call ``action(index, element)`` on every element of ``source``."""
    for index, item in enumerate(source):
        action(index, item)


def last(source: Iterable[Any]) -> Any:
    """Return the last element of ``source``, or None if it is empty."""
    tail = deque(source, maxlen=1)
    return tail[0] if tail else None


def last_with(source: Iterable[Any], predicate: Callable[[Any], bool]) -> Any:
    """Return the last element satisfying ``predicate``, or None."""
    tail = deque((item for item in source if predicate(item)), maxlen=1)
    return tail[0] if tail else None


def _extreme(source: Iterable[Any], sign: int) -> Any:
    it = iter(source)
    best = next(it, _MISSING)
    if best is _MISSING:
        return None
    compare = get_comparer(best)
    for item in it:
        if compare(item, best) * sign > 0:
            best = item
    return best


def max_value(source: Iterable[Any]) -> Any:
    """Return the largest element of ``source``, or None if it is empty."""
    return _extreme(source, 1)


def min_value(source: Iterable[Any]) -> Any:
    """Return the smallest element of ``source``, or None if it is empty."""
    return _extreme(source, -1)


def results(source: Iterable[Any]) -> list:
    """Return the elements of ``source`` as a list."""
    return list(source)


def sequence_equal(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True if both sequences hold equal elements in the same order."""
    it2 = iter(second)
    for item in first:
        other = next(it2, _MISSING)
        if other is _MISSING or item != other:
            return False
    return next(it2, _MISSING) is _MISSING


def single(source: Iterable[Any]) -> Any:
    """Return the only element of ``source``, or None unless there is exactly one."""
    it = iter(source)
    item = next(it, _MISSING)
    if item is _MISSING or next(it, _MISSING) is not _MISSING:
        return None
    return item


def single_with(source: Iterable[Any], predicate: Callable[[Any], bool]) -> Any:
    """Return the only element satisfying ``predicate``, or None unless there is exactly one."""
    found = False
    result = None
    for item in source:
        if predicate(item):
            if found:
                return None
            found = True
            result = item
    return result


def _sum_with(source: Iterable[Any], get_converter: Callable[[Any], Callable[[Any], Any]], zero: Any) -> Any:
    it = iter(source)
    item = next(it, _MISSING)
    if item is _MISSING:
        return zero
    convert = get_converter(item)
    total = convert(item)
    for item in it:
        total += convert(item)
    return total


def sum_ints(source: Iterable[Any]) -> int:
    """Return the sum of the integer elements of ``source``; 0 if it is empty."""
    return _sum_with(source, get_int_converter, 0)


def sum_uints(source: Iterable[Any]) -> int:
    """Return the sum of the non-negative integer elements of ``source``; 0 if it is empty."""
    return _sum_with(source, get_uint_converter, 0)


def sum_floats(source: Iterable[Any]) -> float:
    """Return the sum of the numeric elements of ``source`` as a float; 0.0 if it is empty."""
    return _sum_with(source, get_float_converter, 0.0)


def to_map(source: Iterable[KeyValue], result: MutableMapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Store the KeyValue elements of ``source`` into ``result`` and return it.

    Existing entries of ``result`` are kept unless overwritten.
    """
    return to_map_by(source, result, lambda kv: kv.key, lambda kv: kv.value)


def to_map_by(
    source: Iterable[Any],
    result: MutableMapping[Any, Any],
    key_selector: Callable[[Any], Any],
    value_selector: Callable[[Any], Any],
) -> MutableMapping[Any, Any]:
    """Store ``key_selector(e) -> value_selector(e)`` for each element into ``result`` and return it.

    Existing entries of ``result`` are kept unless overwritten.
    """
    for item in source:
        result[key_selector(item)] = value_selector(item)
    return result
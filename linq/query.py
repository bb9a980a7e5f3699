"""Composable, lazily evaluated queries over sequences."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping, MutableMapping

import linq.aggregate as _aggregate
import linq.joins as _joins
import linq.result as _result
import linq.select as _select
import linq.sequence as _sequence
import linq.sets as _sets
from linq.items import map_items
from linq.ordering import Order, sort_by_less, sort_by_orders


class Query:
    """A lazily evaluated sequence; each iteration starts over from the source."""

    def __init__(self, iterate: Callable[[], Iterable[Any]]):
        self._iterate = iterate

    def iterate(self) -> Iterator[Any]:
        """Return a fresh iterator over the elements."""
        return iter(self._iterate())

    def __iter__(self) -> Iterator[Any]:
        return self.iterate()

    def _derive(self, fn: Callable[..., Iterable[Any]], *args: Any) -> "Query":
        return Query(lambda: fn(self.iterate(), *args))

    # Aggregation

    def aggregate(self, func):
        """Fold the elements starting from the first; None if empty."""
        return _aggregate.aggregate(self, func)

    def aggregate_with_seed(self, seed, func):
        """Fold the elements starting from ``seed``."""
        return _aggregate.aggregate_with_seed(self, seed, func)

    def aggregate_with_seed_by(self, seed, func, result_selector):
        """Fold from ``seed`` and map the result through ``result_selector``."""
        return _aggregate.aggregate_with_seed_by(self, seed, func, result_selector)

    # Sequence operations

    def append(self, item) -> "Query":
        """Add ``item`` after the last element."""
        return self._derive(_sequence.append, item)

    def concat(self, other) -> "Query":
        """Follow these elements with those of ``other``."""
        return self._derive(_sequence.concat, other)

    def prepend(self, item) -> "Query":
        """Add ``item`` before the first element."""
        return self._derive(_sequence.prepend, item)

    def default_if_empty(self, default) -> "Query":
        """Yield ``default`` alone if there are no elements."""
        return self._derive(_sequence.default_if_empty, default)

    def index_of(self, predicate) -> int:
        """Return the index of the first element matching ``predicate``, or -1."""
        return _sequence.index_of(self, predicate)

    def reverse(self) -> "Query":
        """Yield the elements in reverse order."""
        return self._derive(_sequence.reverse)

    # Set operations

    def distinct(self) -> "Query":
        """Drop repeated elements, keeping first appearances."""
        return self._derive(_sets.distinct)

    def distinct_by(self, selector) -> "Query":
        """Drop elements whose selector value was already seen."""
        return self._derive(_sets.distinct_by, selector)

    def difference(self, other) -> "Query":
        """Keep the elements that do not appear in ``other``."""
        return self._derive(_sets.difference, other)

    def difference_by(self, other, selector) -> "Query":
        """Keep the elements whose selector value ``other`` does not produce."""
        return self._derive(_sets.difference_by, other, selector)

    def intersect(self, other) -> "Query":
        """Keep the elements that also appear in ``other``, each once."""
        return self._derive(_sets.intersect, other)

    def intersect_by(self, other, selector) -> "Query":
        """Keep elements whose selector value ``other`` produces, once per value."""
        return self._derive(_sets.intersect_by, other, selector)

    # Joins and grouping

    def join(self, inner, outer_key_selector, inner_key_selector, result_selector) -> "Query":
        """Pair elements with the ``inner`` elements of equal key."""
        return self._derive(_joins.join, inner, outer_key_selector, inner_key_selector, result_selector)

    def group_join(self, inner, outer_key_selector, inner_key_selector, result_selector) -> "Query":
        """Pair each element with the list of ``inner`` elements of equal key."""
        return self._derive(
            _joins.group_join, inner, outer_key_selector, inner_key_selector, result_selector
        )

    def group_by(self, key_selector, element_selector) -> "Query":
        """Group projected elements by key."""
        return self._derive(_joins.group_by, key_selector, element_selector)

    # Ordering

    def order_by(self, selector) -> "OrderedQuery":
        """Sort ascending by ``selector``."""
        return OrderedQuery(self, (Order(selector),))

    def order_by_descending(self, selector) -> "OrderedQuery":
        """Sort descending by ``selector``."""
        return OrderedQuery(self, (Order(selector, desc=True),))

    def sort(self, less) -> "Query":
        """Sort ascending by the relation ``less(a, b)``."""
        return self._derive(sort_by_less, less)

    # Projection

    def select(self, selector) -> "Query":
        """Map each element through ``selector``."""
        return self._derive(_select.select, selector)

    def select_indexed(self, selector) -> "Query":
        """Map each element through ``selector(index, element)``."""
        return self._derive(_select.select_indexed, selector)

    # Results

    def all(self, predicate) -> bool:
        """Return True if every element satisfies ``predicate``."""
        return _result.all_match(self, predicate)

    def any(self) -> bool:
        """Return True if there is at least one element."""
        return _result.any_item(self)

    def any_with(self, predicate) -> bool:
        """Return True if some element satisfies ``predicate``."""
        return _result.any_with(self, predicate)

    def average(self) -> float:
        """Return the mean of the elements, or NaN if there are none."""
        return _result.average(self)

    def contains(self, value) -> bool:
        """Return True if some element equals ``value``."""
        return _result.contains(self, value)

    def count(self) -> int:
        """Return the number of elements."""
        return _result.count(self)

    def count_with(self, predicate) -> int:
        """Return how many elements satisfy ``predicate``."""
        return _result.count_with(self, predicate)

    def first(self):
        """Return the first element, or None."""
        return _result.first(self)

    def first_with(self, predicate):
        """Return the first element satisfying ``predicate``, or None."""
        return _result.first_with(self, predicate)

    def for_each(self, action) -> None:
        """Call ``action`` on each element."""
        _result.for_each(self, action)

    def for_each_indexed(self, action) -> None:
        """Call ``action(index, element)`` on each element."""
        _result.for_each_indexed(self, action)

    def last(self):
        """Return the last element, or None."""
        return _result.last(self)

    def last_with(self, predicate):
        """Return the last element satisfying ``predicate``, or None."""
        return _result.last_with(self, predicate)

    def max(self):
        """Return the largest element, or None."""
        return _result.max_value(self)

    def min(self):
        """Return the smallest element, or None."""
        return _result.min_value(self)

    def results(self) -> list:
        """Return the elements as a list."""
        return _result.results(self)

    def sequence_equal(self, other) -> bool:
        """Return True if ``other`` holds equal elements in the same order."""
        return _result.sequence_equal(self, other)

    def single(self):
        """Return the only element, or None unless there is exactly one."""
        return _result.single(self)

    def single_with(self, predicate):
        """Return the only element satisfying ``predicate``, or None."""
        return _result.single_with(self, predicate)

    def sum_ints(self) -> int:
        """Return the sum of integer elements."""
        return _result.sum_ints(self)

    def sum_uints(self) -> int:
        """Return the sum of non-negative integer elements."""
        return _result.sum_uints(self)

    def sum_floats(self) -> float:
        """Return the sum of the elements as a float."""
        return _result.sum_floats(self)

    def to_map(self, result: MutableMapping) -> MutableMapping:
        """Store KeyValue elements into ``result`` and return it."""
        return _result.to_map(self, result)

    def to_map_by(self, result: MutableMapping, key_selector, value_selector) -> MutableMapping:
        """Store selected keys and values into ``result`` and return it."""
        return _result.to_map_by(self, result, key_selector, value_selector)


class OrderedQuery(Query):
    """A query sorted by one or more criteria, which can be extended."""

    def __init__(self, original: Query, orders: tuple, iterate: Callable[[], Iterable[Any]] | None = None):
        self._original = original
        self._orders = tuple(orders)
        if iterate is None:
            super().__init__(lambda: sort_by_orders(original.iterate(), self._orders))
        else:
            super().__init__(iterate)

    def then_by(self, selector) -> "OrderedQuery":
        """Break ties by ``selector`` ascending."""
        return OrderedQuery(self._original, self._orders + (Order(selector),))

    def then_by_descending(self, selector) -> "OrderedQuery":
        """Break ties by ``selector`` descending."""
        return OrderedQuery(self._original, self._orders + (Order(selector, desc=True),))

    def distinct(self) -> "OrderedQuery":
        """Drop repeated elements, relying on the sort to bring them together."""
        return OrderedQuery(self._original, self._orders, lambda: _sets.distinct_sorted(self.iterate()))


def from_iterable(source: Iterable[Any]) -> Query:
    """Query the elements of ``source``.

    A one-shot iterator such as a generator can only be consumed once.
    """
    return Query(lambda: source)


def from_map(mapping: Mapping[Any, Any]) -> Query:
    """Query the entries of ``mapping`` as KeyValue pairs."""
    return Query(lambda: map_items(mapping))


def from_string(text: str) -> Query:
    """Query the characters of ``text``."""
    return Query(lambda: text)
# linq

Lazy, chainable query operations over any Python iterable: projection,
set operations, joins, grouping, ordering and aggregation.

A `Query` is re-iterable: each call to `iterate()` (or a plain `for` loop)
walks the source again, so a query built from a list can be consumed as many
times as needed. A query built from a one-shot iterator, such as a
generator, can only be consumed once.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building queries

```python
from linq.query import Query, from_iterable, from_map, from_string

numbers = from_iterable([1, 2, 2, 3, 1])
letters = from_string("sstr")        # iterates over characters
pairs = from_map({"foo": True})      # yields linq.items.KeyValue items

custom = Query(lambda: range(5))     # any zero-argument callable returning an iterable
```

## Transforming

```python
from_iterable([1, 2, 3]).select(lambda x: x * 2).results()
# [2, 4, 6]

from_iterable([1, 2, 3]).select_indexed(lambda i, x: x * i).results()
# [0, 2, 6]

from_iterable([1, 2, 3]).append(4).prepend(0).results()
# [0, 1, 2, 3, 4]

from_iterable([1, 2]).concat([3]).reverse().results()
# [3, 2, 1]

from_iterable([]).default_if_empty(0).results()
# [0]

from_string("sstr").index_of(lambda c: c == "r")
# 3
```

## Sets

```python
from_iterable([1, 2, 2, 3, 1]).distinct().results()             # [1, 2, 3]
from_iterable([1, 2, 3, 4, 5, 1, 2, 5]).difference([1, 2]).results()
# [3, 4, 5, 5]
from_iterable([1, 2, 3]).intersect([1, 4, 7, 9, 12, 3]).results()
# [1, 3]
from_iterable([5, 7, 8]).intersect_by([1, 4, 7], lambda x: x % 2).results()
# [5, 8]
```

`distinct` keeps the first appearance of each element. The `_by` variants
(`distinct_by`, `difference_by`, `intersect_by`) compare the values
returned by a selector instead of the elements themselves. `intersect` and
`intersect_by` yield each matching value at most once. Elements (or selector
values) must be hashable.

## Joining and grouping

```python
from linq.items import KeyValue

from_iterable([0, 1, 2]).group_join(
    range(1, 10),
    lambda o: o,
    lambda i: i % 2,
    lambda o, inners: KeyValue(o, len(inners)),
).results()
# [KeyValue(key=0, value=4), KeyValue(key=1, value=5), KeyValue(key=2, value=0)]

from_iterable([0, 1, 2, 4]).join(
    [1, 2, 1, 4],
    lambda o: o,
    lambda i: i,
    lambda o, i: (o, i),
).results()
# [(1, 1), (1, 1), (2, 2), (4, 4)]

from_iterable(range(1, 10)).group_by(lambda x: x % 2, lambda x: x).results()
# [Group(key=1, group=[1, 3, 5, 7, 9]), Group(key=0, group=[2, 4, 6, 8])]
```

`join` keeps the outer order and, within each outer element, the order of
its inner matches. `group_by` yields `linq.joins.Group` objects in order of
each key's first appearance.

## Ordering

```python
from dataclasses import dataclass

@dataclass
class Person:
    name: str
    age: int

people = from_iterable([Person("Ann", 30), Person("Bob", 25), Person("Cid", 30)])

people.order_by(lambda p: p.age).then_by_descending(lambda p: p.name).results()
# [Person('Bob', 25), Person('Cid', 30), Person('Ann', 30)]

people.order_by_descending(lambda p: p.age)
people.sort(lambda a, b: a.age < b.age)
```

`order_by` and `order_by_descending` return an `OrderedQuery`, which adds
`then_by`, `then_by_descending` and a `distinct` that drops neighbouring
duplicates of the sorted sequence. The comparison for each key is chosen
from the key of the first element (see `linq.compare.get_comparer`): booleans
sort `False` before `True`, objects with a `compare_to(other)` method
(the `linq.compare.Comparable` protocol) are compared through it, and
everything else uses `<` and `>`.

The sorting helpers are also available directly in `linq.ordering`:
`sort_by_orders(items, orders)` with a sequence of `Order(selector, desc)`
criteria, and `sort_by_less(items, less)`.

## Results

```python
q = from_iterable([1, 2, 2, 3, 1])
q.count()                             # 5
q.count_with(lambda x: x <= 2)        # 4
q.first(), q.last()                   # (1, 1)
q.max(), q.min()                      # (3, 1)
q.contains(3)                         # True
q.all(lambda x: x > 0)                # True
q.any_with(lambda x: x == 4)          # False
q.sum_ints()                          # 9
q.average()                           # 1.8
q.single_with(lambda x: x > 2)        # 3
q.aggregate(lambda acc, x: acc + x)   # 9
q.aggregate_with_seed(10, lambda acc, x: acc + x)  # 19
q.sequence_equal([1, 2, 2, 3, 1])     # True

from_map({1: True, 2: False}).to_map({})             # {1: True, 2: False}
q.to_map_by({}, lambda x: x, lambda x: x * x)        # {1: 1, 2: 4, 3: 9}
```

Operations that find nothing (`first` on an empty query, `single` with more
than one element, `max` of an empty query, and so on) return `None`;
`average` of an empty query is NaN. `sum_ints` and `sum_uints` accept only
integers (`sum_uints` rejects negative ones with `ValueError`);
`sum_floats` accepts integers and floats and returns a float. Wrong element
types raise `TypeError`. `to_map` and `to_map_by` fill the mapping they are
given without clearing it first, and return it.

## Plain-iterable functions

Every operation is also a plain function over iterables, in the modules
`linq.aggregate`, `linq.sequence`, `linq.sets`, `linq.joins`,
`linq.select` and `linq.result`, for example:

```python
from linq.sets import distinct
from linq.result import average

list(distinct("sstr"))   # ['s', 't', 'r']
average([1, 2, 5, 7, 10])  # 5.0
```

Numeric converters used by the sums live in `linq.convert`
(`get_int_converter`, `get_uint_converter`, `get_float_converter`).

## Checking function signatures

`linq.signature` validates a caller-supplied function against expected
parameter and return types, read from its annotations:

```python
from linq.signature import GENERIC, SignatureError, new_generic_func, simple_param_validator

def over_ten(item: int) -> bool:
    return item > 10

fn = new_generic_func("Filter", "predicate", over_ten,
                      simple_param_validator([GENERIC], [bool]))
fn.call(11)      # True
fn.call("x")     # TypeError: call using str as type int

def pair(a: int, b: int) -> int:
    return a + b

new_generic_func("Filter", "predicate", pair,
                 simple_param_validator([GENERIC], [bool]))
# SignatureError: Filter: parameter [predicate] has a invalid function signature.
#   Expected: 'func(T)bool', actual: 'func(int,int)int'
```

`GENERIC` matches any type, `None` in place of a list skips that side of the
check, and unannotated parameters or returns match anything.
`format_fn_signature` renders types in the `func(...)...` form used above.
The query methods themselves do not use this module; it is a standalone
helper.
from dataclasses import dataclass

from linq.ordering import Order, sort_by_less, sort_by_orders


@dataclass
class Foo:
    f1: int = 0
    f2: bool = False

    def compare_to(self, other):
        if self.f1 < other.f1:
            return -1
        if self.f1 > other.f1:
            return 1
        return 0


def test_empty_input_gives_empty_list():
    assert sort_by_orders([], [Order(lambda x: 0)]) == []


def test_order_ascending():
    items = [Foo(f1=i) for i in reversed(range(100))]
    result = sort_by_orders(items, [Order(lambda f: f.f1)])
    assert [f.f1 for f in result] == list(range(100))


def test_order_descending():
    items = [Foo(f1=i) for i in range(100)]
    result = sort_by_orders(items, [Order(lambda f: f.f1, desc=True)])
    assert [f.f1 for f in result] == list(reversed(range(100)))


def test_then_by_ascending():
    items = [Foo(f1=i, f2=i % 2 == 0) for i in reversed(range(10))]
    result = sort_by_orders(items, [Order(lambda f: f.f2), Order(lambda f: f.f1)])
    assert [f.f1 for f in result] == [1, 3, 5, 7, 9, 0, 2, 4, 6, 8]
    assert all(f.f2 == (f.f1 % 2 == 0) for f in result)


def test_then_by_descending():
    items = [Foo(f1=i, f2=i % 2 == 0) for i in range(10)]
    result = sort_by_orders(items, [Order(lambda f: f.f2), Order(lambda f: f.f1, desc=True)])
    assert [f.f1 for f in result] == [9, 7, 5, 3, 1, 8, 6, 4, 2, 0]


def test_comparable_keys_use_compare_to():
    items = [Foo(f1=3), Foo(f1=1), Foo(f1=2)]
    result = sort_by_orders(items, [Order(lambda f: f)])
    assert [f.f1 for f in result] == [1, 2, 3]


def test_strings_sort_by_code_point():
    result = sort_by_orders(["foo", "FOO", "bar"], [Order(lambda s: s)])
    assert result == ["FOO", "bar", "foo"]


def test_input_is_not_modified():
    items = [3, 1, 2]
    result = sort_by_orders(items, [Order(lambda x: x)])
    assert result == [1, 2, 3]
    assert items == [3, 1, 2]


def test_no_orders_keeps_order():
    assert sort_by_orders([3, 1, 2], []) == [3, 1, 2]


def test_sort_by_less():
    items = [Foo(f1=i) for i in reversed(range(100))]
    result = sort_by_less(items, lambda a, b: a.f1 < b.f1)
    assert [f.f1 for f in result] == list(range(100))


def test_sort_by_less_descending_relation():
    assert sort_by_less([1, 5, 3], lambda a, b: a > b) == [5, 3, 1]
import pytest

from linq.compare import Comparable, get_comparer


class Foo:
    def __init__(self, f1):
        self.f1 = f1

    def compare_to(self, other):
        a, b = self.f1, other.f1
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


class Backwards:
    """Orders by compare_to, which disagrees with the natural order of n."""

    def __init__(self, n):
        self.n = n

    def compare_to(self, other):
        if self.n < other.n:
            return 1
        if self.n > other.n:
            return -1
        return 0


@pytest.mark.parametrize(
    "x, y, want",
    [
        (100, 500, -1),
        (-100, -500, 1),
        (256, 256, 0),
        (100, -100, 1),
        (-100, 100, -1),
        (100, 100, 0),
        (100, 0, 1),
        (0, 100, -1),
        (5.0, 1.0, 1),
        (1.0, 5.0, -1),
        (0.0, 0.0, 0),
        (True, True, 0),
        (False, False, 0),
        (True, False, 1),
        (False, True, -1),
        ("foo", "foo", 0),
        ("foo", "bar", 1),
        ("bar", "foo", -1),
        ("FOO", "bar", -1),
        (Foo(1), Foo(5), -1),
        (Foo(5), Foo(1), 1),
        (Foo(1), Foo(1), 0),
    ],
)
def test_get_comparer(x, y, want):
    assert get_comparer(x)(x, y) == want


def test_comparable_values_compare_through_comparer():
    sample = Foo(1)
    assert isinstance(sample, Comparable)
    comparer = get_comparer(sample)
    assert comparer(Foo(2), Foo(2)) == 0
    assert comparer(Foo(3), Foo(2)) == 1


def test_compare_to_takes_precedence():
    comparer = get_comparer(Backwards(1))
    assert comparer(Backwards(1), Backwards(2)) == 1
    assert comparer(Backwards(2), Backwards(1)) == -1


def test_unorderable_values_raise():
    comparer = get_comparer(object())
    with pytest.raises(TypeError):
        comparer(object(), object())
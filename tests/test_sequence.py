import pytest

from linq.sequence import append, concat, default_if_empty, index_of, prepend, reverse


def _tracked(values, consumed):
    for n in values:
        consumed.append(n)
        yield n


def test_append():
    assert list(append([1, 2, 3, 4], 5)) == [1, 2, 3, 4, 5]


def test_append_to_empty():
    assert list(append([], 5)) == [5]


def test_concat():
    assert list(concat([1, 2, 3], [4, 5])) == [1, 2, 3, 4, 5]


def test_concat_generators():
    assert list(concat((n for n in [1]), iter([2, 3]))) == [1, 2, 3]


def test_prepend():
    assert list(prepend([1, 2, 3, 4], 0)) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "source, want",
    [
        ([], [0]),
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
    ],
)
def test_default_if_empty(source, want):
    assert list(default_if_empty(source, 0)) == want


def test_reverse():
    assert list(reverse([1, 2, 3])) == [3, 2, 1]


def test_reverse_twice_is_identity():
    data = [5, 1, 4, 1]
    assert list(reverse(reverse(data))) == data


def test_append_is_lazy():
    consumed = []
    gen = append(_tracked([1, 2], consumed), 3)
    assert consumed == []
    assert next(gen) == 1
    assert consumed == [1]


@pytest.mark.parametrize(
    "source, predicate, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 9], lambda i: i == 3, 2),
        ("sstr", lambda c: c == "r", 3),
        ("gadsgsadgsda", lambda c: c == "z", -1),
    ],
)
def test_index_of(source, predicate, expected):
    assert index_of(source, predicate) == expected
import pytest

from linq.convert import get_float_converter, get_int_converter, get_uint_converter


@pytest.mark.parametrize("value, want", [(2, 2), (-1, -1), (0, 0), (10, 10), (5, 5)])
def test_int_converter(value, want):
    assert get_int_converter(value)(value) == want


@pytest.mark.parametrize("value, want", [(2, 2), (1, 1), (0, 0), (10, 10), (5, 5)])
def test_uint_converter(value, want):
    assert get_uint_converter(value)(value) == want


@pytest.mark.parametrize("value, want", [(-1.0, -1.0), (0.0, 0.0)])
def test_float_converter(value, want):
    result = get_float_converter(value)(value)
    assert result == want
    assert isinstance(result, float)


def test_float_converter_widens_integers():
    conv = get_float_converter(1.0)
    assert conv(3) == 3.0
    assert isinstance(conv(3), float)


@pytest.mark.parametrize("sample", [1.5, "1", True])
def test_int_converter_rejects_non_integers(sample):
    with pytest.raises(TypeError):
        get_int_converter(sample)


def test_int_converter_rejects_mismatched_element():
    conv = get_int_converter(1)
    with pytest.raises(TypeError):
        conv(2.5)


def test_uint_converter_rejects_negative():
    with pytest.raises(ValueError):
        get_uint_converter(-1)
    conv = get_uint_converter(1)
    with pytest.raises(ValueError):
        conv(-5)


def test_float_converter_rejects_strings():
    with pytest.raises(TypeError):
        get_float_converter("1.0")
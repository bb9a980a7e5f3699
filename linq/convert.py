"""Converters that widen numeric elements for summing and averaging."""

from __future__ import annotations

from typing import Any, Callable


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_int(value: Any) -> int:
    if not _is_int(value):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return int(value)


def _to_uint(value: Any) -> int:
    if not _is_int(value):
        raise TypeError(f"expected an unsigned integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"expected an unsigned integer, got {value}")
    return int(value)


def _to_float(value: Any) -> float:
    if not _is_real(value):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def get_int_converter(sample: Any) -> Callable[[Any], int]:
    """Return a converter for signed integer elements like ``sample``."""
    _to_int(sample)
    return _to_int


def get_uint_converter(sample: Any) -> Callable[[Any], int]:
    """Return a converter for unsigned integer elements like ``sample``."""
    _to_uint(sample)
    return _to_uint


def get_float_converter(sample: Any) -> Callable[[Any], float]:
    """Return a converter that turns numeric elements like ``sample`` into floats."""
    _to_float(sample)
    return _to_float
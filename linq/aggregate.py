"""Folding a sequence into a single value."""

from __future__ import annotations

from typing import Any, Callable, Iterable

_MISSING = object()


def aggregate(source: Iterable[Any], func: Callable[[Any, Any], Any]) -> Any:
    """Fold ``source`` with ``func``, starting from its first element.

    Returns None for an empty sequence.
    """
    it = iter(source)
    result = next(it, _MISSING)
    if result is _MISSING:
        return None
    for item in it:
        result = func(result, item)
    return result


def aggregate_with_seed(source: Iterable[Any], seed: Any, func: Callable[[Any, Any], Any]) -> Any:
    """Fold ``source`` with ``func``, starting from ``seed``."""
    result = seed
    for item in source:
        result = func(result, item)
    return result


def aggregate_with_seed_by(
    source: Iterable[Any],
    seed: Any,
    func: Callable[[Any, Any], Any],
    result_selector: Callable[[Any], Any],
) -> Any:
    """Fold ``source`` from ``seed`` and pass the final value through ``result_selector``."""
    return result_selector(aggregate_with_seed(source, seed, func))
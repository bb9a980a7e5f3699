"""Key/value pairs produced when querying mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class KeyValue:
    """One entry of a mapping."""

    key: Any
    value: Any


def map_items(mapping: Mapping[Any, Any]) -> Iterator[KeyValue]:
    """Yield the entries of ``mapping`` as KeyValue pairs, in mapping order.

    The entries are snapshotted when iteration starts.
    """
    for key, value in list(mapping.items()):
        yield KeyValue(key, value)
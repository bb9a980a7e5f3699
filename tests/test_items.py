import dataclasses

import pytest

from linq.items import KeyValue, map_items


def test_map_items_single_entry():
    assert list(map_items({"foo": True})) == [KeyValue("foo", True)]


def test_map_items_value_matters():
    assert list(map_items({"foo": True})) != [KeyValue("foo", False)]
    assert list(map_items({"foo": True}))[0].value is True


def test_round_trip_through_dict():
    data = {1: True, 2: False, 3: True}
    assert {kv.key: kv.value for kv in map_items(data)} == data


def test_order_follows_mapping():
    data = {"b": 1, "a": 2, "c": 3}
    assert [kv.key for kv in map_items(data)] == list(data)


def test_snapshot_taken_when_iteration_starts():
    data = {1: "x", 2: "y", 3: "z"}
    gen = map_items(data)
    first = next(gen)
    data[4] = "w"
    rest = list(gen)
    assert [first.key] + [kv.key for kv in rest] == [1, 2, 3]


def test_empty_mapping():
    assert list(map_items({})) == []


def test_key_value_is_frozen_and_hashable():
    kv = KeyValue(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        kv.key = 3
    assert len({KeyValue(1, 2), KeyValue(1, 2)}) == 1
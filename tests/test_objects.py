"""Tests for mapping helpers."""

import enum
from dataclasses import dataclass

from utilkit.objects import clone, entries_to_object, is_shallow_equal, omit, pick


@dataclass
class Box:
    items: list[int]


class Level(enum.Enum):
    LOW = 1


class TestClone:
    def test_overrides_applied(self) -> None:
        base = {"a": 1, "b": 2}
        assert clone(base, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_original_untouched(self) -> None:
        base = {"a": 1}
        copy = clone(base, {"a": 2})
        assert base == {"a": 1}
        assert copy is not base

    def test_shallow(self) -> None:
        nested = {"items": [1]}
        assert clone(nested, {})["items"] is nested["items"]

    def test_no_overrides(self) -> None:
        assert clone({"a": 1}) == {"a": 1}


class TestIsShallowEqual:
    def test_equal_scalars(self) -> None:
        assert is_shallow_equal({"a": 1, "b": "x"}, {"b": "x", "a": 1})

    def test_different_value(self) -> None:
        assert not is_shallow_equal({"a": 1}, {"a": 2})

    def test_different_keys(self) -> None:
        assert not is_shallow_equal({"a": 1}, {"b": 1})
        assert not is_shallow_equal({"a": 1}, {"a": 1, "b": 2})

    def test_containers_compared_by_reference(self) -> None:
        shared = [1, 2]
        assert is_shallow_equal({"a": shared}, {"a": shared})
        assert not is_shallow_equal({"a": [1, 2]}, {"a": [1, 2]})

    def test_empty(self) -> None:
        assert is_shallow_equal({}, {})

    def test_equal_instances_are_not_the_same_value(self) -> None:
        assert Box([1]) == Box([1])
        assert not is_shallow_equal({"x": Box([1])}, {"x": Box([1])})

    def test_same_instance_matches(self) -> None:
        box = Box([1])
        assert is_shallow_equal({"x": box}, {"x": box})

    def test_scalar_kinds_compare_by_value(self) -> None:
        assert is_shallow_equal(
            {"n": 1.0, "s": "x" * 3, "b": b"ab", "e": Level.LOW, "z": None},
            {"n": 1, "s": "xxx", "b": b"ab", "e": Level.LOW, "z": None},
        )
        assert not is_shallow_equal({"z": None}, {"z": 0})


class TestPickOmit:
    def test_pick_present_keys_only(self) -> None:
        assert pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"]) == {"a": 1, "c": 3}

    def test_pick_idempotent(self) -> None:
        obj = {"a": 1, "b": 2}
        keys = ["a", "missing"]
        assert pick(pick(obj, keys), keys) == pick(obj, keys)

    def test_pick_keeps_none_values(self) -> None:
        assert pick({"a": None}, ["a"]) == {"a": None}

    def test_omit(self) -> None:
        assert omit({"a": 1, "b": 2, "c": 3}, ["b", "z"]) == {"a": 1, "c": 3}

    def test_omit_does_not_mutate(self) -> None:
        obj = {"a": 1}
        omit(obj, ["a"])
        assert obj == {"a": 1}


class TestEntriesToObject:
    def test_builds_mapping(self) -> None:
        assert entries_to_object([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}

    def test_later_duplicates_win(self) -> None:
        assert entries_to_object([("a", 1), ("a", 2)]) == {"a": 2}

    def test_round_trips_items(self) -> None:
        obj = {"x": 1, "y": 2}
        assert entries_to_object(obj.items()) == obj

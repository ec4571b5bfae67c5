"""Unit tests for optional-field object helpers."""

from __future__ import annotations

from mp_querydsl.encoding import nested_object, object_


class TestObject:
    def test_drops_absent_fields(self) -> None:
        assert object_([("a", 1), ("b", None), ("c", "x")]) == {"a": 1, "c": "x"}

    def test_keeps_falsy_present_values(self) -> None:
        assert object_([("boost", 0.0), ("name", "")]) == {"boost": 0.0, "name": ""}

    def test_preserves_key_order(self) -> None:
        assert list(object_([("z", 1), ("a", 2), ("m", 3)])) == ["z", "a", "m"]

    def test_empty(self) -> None:
        assert object_([]) == {}


class TestNestedObject:
    def test_wraps_per_path_level(self) -> None:
        assert nested_object(["range", "age"], [("gte", 1)]) == {"range": {"age": {"gte": 1}}}

    def test_empty_inner(self) -> None:
        assert nested_object(["bool"], [("must", None)]) == {"bool": {}}

    def test_empty_path_is_plain_object(self) -> None:
        assert nested_object([], [("a", 1)]) == {"a": 1}

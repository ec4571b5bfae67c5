"""Encoding – JSON object helpers with optional-field omission.

A field whose value is ``None`` is absent: it never appears as ``null``.
Keys keep the order in which they are given.
"""
from __future__ import annotations

from typing import Iterable, Sequence

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
type Field = tuple[str, JsonValue | None]


def object_(fields: Iterable[Field]) -> dict[str, JsonValue]:
    """Build an object from ``(key, value)`` pairs, dropping absent values."""
    return {key: value for key, value in fields if value is not None}


def nested_object(path: Sequence[str], fields: Iterable[Field]) -> dict[str, JsonValue]:
    """Wrap ``object_(fields)`` in one single-key object per *path* entry.

    ``nested_object(["range", "age"], [("gte", 1)])`` gives
    ``{"range": {"age": {"gte": 1}}}``.
    """
    result: dict[str, JsonValue] = object_(fields)
    for key in reversed(path):
        result = {key: result}
    return result


__all__ = ["Field", "JsonValue", "nested_object", "object_"]

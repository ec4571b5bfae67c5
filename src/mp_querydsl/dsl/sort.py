"""Sort keys for a search request."""

from __future__ import annotations

import dataclasses
import enum


class SortOrder(enum.StrEnum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class SortMode(enum.StrEnum):
    """How an array-valued field is reduced to a single sort value."""

    MIN = "min"
    MAX = "max"
    SUM = "sum"
    AVG = "avg"
    MEDIAN = "median"


@dataclasses.dataclass(frozen=True, slots=True)
class SortByField:
    field: str
    order: SortOrder


@dataclasses.dataclass(frozen=True, slots=True)
class SortByArrayField:
    field: str
    order: SortOrder
    mode: SortMode


type Sort = SortByField | SortByArrayField


def sort_by(field: str, order: SortOrder) -> SortByField:
    return SortByField(field, SortOrder(order))


def sort_by_array(field: str, order: SortOrder, mode: SortMode) -> SortByArrayField:
    return SortByArrayField(field, SortOrder(order), SortMode(mode))


__all__ = [
    "Sort",
    "SortByArrayField",
    "SortByField",
    "SortMode",
    "SortOrder",
    "sort_by",
    "sort_by_array",
]

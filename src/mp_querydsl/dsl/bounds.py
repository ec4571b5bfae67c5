"""Range bounds — inclusive, exclusive or unbounded on either side."""

from __future__ import annotations

import dataclasses
import datetime

from mp_querydsl.dsl.values import Value, date_value


@dataclasses.dataclass(frozen=True, slots=True)
class Unbounded:
    """No bound on this side of the range."""


@dataclasses.dataclass(frozen=True, slots=True)
class GreaterOrEqual:
    value: Value


@dataclasses.dataclass(frozen=True, slots=True)
class GreaterThan:
    value: Value


@dataclasses.dataclass(frozen=True, slots=True)
class LessOrEqual:
    value: Value


@dataclasses.dataclass(frozen=True, slots=True)
class LessThan:
    value: Value


type LowerBound = Unbounded | GreaterOrEqual | GreaterThan
type UpperBound = Unbounded | LessOrEqual | LessThan

UNBOUNDED = Unbounded()


def unbounded_lower() -> LowerBound:
    return UNBOUNDED


def greater_or_equal(value: Value) -> LowerBound:
    return GreaterOrEqual(value)


def greater_than(value: Value) -> LowerBound:
    return GreaterThan(value)


def greater_or_equal_date(value: datetime.date) -> LowerBound:
    return GreaterOrEqual(date_value(value))


def greater_than_date(value: datetime.date) -> LowerBound:
    return GreaterThan(date_value(value))


def unbounded_upper() -> UpperBound:
    return UNBOUNDED


def less_or_equal(value: Value) -> UpperBound:
    return LessOrEqual(value)


def less_than(value: Value) -> UpperBound:
    return LessThan(value)


def less_or_equal_date(value: datetime.date) -> UpperBound:
    return LessOrEqual(date_value(value))


def less_than_date(value: datetime.date) -> UpperBound:
    return LessThan(date_value(value))


__all__ = [
    "UNBOUNDED",
    "GreaterOrEqual",
    "GreaterThan",
    "LessOrEqual",
    "LessThan",
    "LowerBound",
    "Unbounded",
    "UpperBound",
    "greater_or_equal",
    "greater_or_equal_date",
    "greater_than",
    "greater_than_date",
    "less_or_equal",
    "less_or_equal_date",
    "less_than",
    "less_than_date",
    "unbounded_lower",
    "unbounded_upper",
]

"""Query literals — the closed set of scalar kinds a query can carry."""

from __future__ import annotations

import dataclasses
import datetime
import math
from typing import Final

from mp_querydsl.kernel.errors.domain import InvalidValueError

_INT64_MIN: Final = -(2**63)
_INT64_MAX: Final = 2**63 - 1


@dataclasses.dataclass(frozen=True, slots=True)
class IntValue:
    value: int


@dataclasses.dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclasses.dataclass(frozen=True, slots=True)
class FloatValue:
    value: float


@dataclasses.dataclass(frozen=True, slots=True)
class DateValue:
    """Calendar date, rendered as an ISO-8601 ``YYYY-MM-DD`` string."""

    value: datetime.date


type Value = IntValue | StringValue | FloatValue | DateValue


def int_value(value: int) -> IntValue:
    """Integer literal; must fit a signed 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError("int", value, "expected an int")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidValueError("int", value, "outside the signed 64-bit range")
    return IntValue(value)


def string_value(value: str) -> StringValue:
    if not isinstance(value, str):
        raise InvalidValueError("string", value, "expected a str")
    return StringValue(value)


def float_value(value: float) -> FloatValue:
    """Float literal; NaN and infinities have no JSON representation."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError("float", value, "expected a float")
    if not math.isfinite(value):
        raise InvalidValueError("float", value, "must be finite")
    return FloatValue(float(value))


def date_value(value: datetime.date) -> DateValue:
    # datetime is a date subclass but would lose its time part on the wire
    if isinstance(value, datetime.datetime) or not isinstance(value, datetime.date):
        raise InvalidValueError("date", value, "expected a calendar date")
    return DateValue(value)


def parse_date_value(text: str) -> DateValue:
    """Build a date literal from an ISO-8601 calendar date string."""
    try:
        parsed = datetime.date.fromisoformat(text)
    except (TypeError, ValueError) as exc:
        raise InvalidValueError("date", text, "not an ISO-8601 calendar date", cause=exc) from exc
    return DateValue(parsed)


__all__ = [
    "DateValue",
    "FloatValue",
    "IntValue",
    "StringValue",
    "Value",
    "date_value",
    "float_value",
    "int_value",
    "parse_date_value",
    "string_value",
]

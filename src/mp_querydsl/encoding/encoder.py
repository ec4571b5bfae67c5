"""Encoding – QueryEncoder.

Renders :mod:`mp_querydsl.dsl` values into the JSON shapes the search
engine's query DSL accepts.  Encoding is total: every well-formed model
value has exactly one rendering and nothing here raises.
"""
from __future__ import annotations

import json
from typing import Sequence

from mp_querydsl.config.settings import EncoderSettings
from mp_querydsl.dsl.bounds import (
    GreaterOrEqual,
    GreaterThan,
    LessOrEqual,
    LessThan,
    LowerBound,
    Unbounded,
    UpperBound,
)
from mp_querydsl.dsl.query import BoolQuery, Query, RangeQuery, TermQuery, TypeQuery
from mp_querydsl.dsl.request import SearchRequest
from mp_querydsl.dsl.sort import Sort, SortByArrayField, SortByField
from mp_querydsl.dsl.values import DateValue, FloatValue, IntValue, StringValue, Value
from mp_querydsl.encoding.objects import Field, JsonValue, nested_object, object_
from mp_querydsl.observability.logging import get_logger

logger = get_logger(__name__)


def encode_value(value: Value) -> JsonValue:
    match value:
        case IntValue(v) | StringValue(v) | FloatValue(v):
            return v
        case DateValue(d):
            return d.isoformat()


def encode_sort(sort: Sort) -> dict[str, JsonValue]:
    match sort:
        case SortByField(field, order):
            return {field: order.value}
        case SortByArrayField(field, order, mode):
            return {field: {"order": order.value, "mode": mode.value}}


def _lower_bound(bound: LowerBound) -> list[Field]:
    match bound:
        case Unbounded():
            return []
        case GreaterOrEqual(v):
            return [("gte", encode_value(v))]
        case GreaterThan(v):
            return [("gt", encode_value(v))]


def _upper_bound(bound: UpperBound) -> list[Field]:
    match bound:
        case Unbounded():
            return []
        case LessOrEqual(v):
            return [("lte", encode_value(v))]
        case LessThan(v):
            return [("lt", encode_value(v))]


class QueryEncoder:
    """Encode queries and search requests into JSON values.

    Instances hold only their :class:`EncoderSettings` and are safe to
    share between threads.
    """

    def __init__(self, settings: EncoderSettings | None = None) -> None:
        self._settings = settings or EncoderSettings()

    @property
    def settings(self) -> EncoderSettings:
        return self._settings

    def encode_query(self, query: Query) -> dict[str, JsonValue]:
        encoded = self._query(query)
        if self._settings.log_encoding:
            logger.debug("query_encoded", kind=type(query).__name__)
        return encoded

    def encode_search_request(self, request: SearchRequest) -> dict[str, JsonValue]:
        encoded = object_(
            [
                ("query", self._query(request.query)),
                ("sort", [encode_sort(s) for s in request.sort] if request.sort else None),
            ]
        )
        if self._settings.log_encoding:
            logger.debug(
                "search_request_encoded",
                kind=type(request.query).__name__,
                sort_keys=len(request.sort),
            )
        return encoded

    def dumps(self, value: JsonValue) -> str:
        """Serialise an encoded value to JSON text.

        Compact separators unless ``indent`` is configured; NaN is refused.
        """
        indent = self._settings.indent
        return json.dumps(
            value,
            ensure_ascii=self._settings.ensure_ascii,
            indent=indent,
            separators=(",", ":") if indent is None else (",", ": "),
            allow_nan=False,
        )

    def dumps_query(self, query: Query) -> str:
        return self.dumps(self.encode_query(query))

    def dumps_search_request(self, request: SearchRequest) -> str:
        return self.dumps(self.encode_search_request(request))

    # ------------------------------------------------------------------

    def _query(self, query: Query) -> dict[str, JsonValue]:
        match query:
            case TermQuery():
                return self._term(query)
            case RangeQuery():
                return self._range(query)
            case TypeQuery(type_name):
                return nested_object(["type"], [("value", type_name)])
            case BoolQuery():
                return self._bool(query)

    def _term(self, query: TermQuery) -> dict[str, JsonValue]:
        value = encode_value(query.value)
        if query.boost is None and query.name is None:
            # shorthand form: the value is inlined under the field
            return {"term": {query.field: value}}
        return nested_object(
            ["term", query.field],
            [("value", value), ("boost", query.boost), ("_name", query.name)],
        )

    def _range(self, query: RangeQuery) -> dict[str, JsonValue]:
        return nested_object(
            ["range", query.field],
            [
                *_lower_bound(query.lower),
                *_upper_bound(query.upper),
                ("boost", query.boost),
                ("_name", query.name),
                ("relation", query.relation.value if query.relation is not None else None),
            ],
        )

    def _bool(self, query: BoolQuery) -> dict[str, JsonValue]:
        msm = query.minimum_should_match if self._settings.emit_minimum_should_match else None
        return nested_object(
            ["bool"],
            [
                ("must", self._clause(query.must)),
                ("must_not", self._clause(query.must_not)),
                ("filter", self._clause(query.filter)),
                ("should", self._clause(query.should)),
                ("minimum_should_match", msm),
                ("boost", query.boost),
                ("_name", query.name),
            ],
        )

    def _clause(self, queries: Sequence[Query]) -> JsonValue:
        """Empty -> absent, one -> the bare query, more -> an array."""
        if not queries:
            return None
        if len(queries) == 1:
            return self._query(queries[0])
        return [self._query(q) for q in queries]


_default_encoder = QueryEncoder()


def encode_query(query: Query) -> dict[str, JsonValue]:
    return _default_encoder.encode_query(query)


def encode_search_request(request: SearchRequest) -> dict[str, JsonValue]:
    return _default_encoder.encode_search_request(request)


def dumps(value: JsonValue) -> str:
    """Canonical compact JSON text for an encoded value."""
    return _default_encoder.dumps(value)


__all__ = [
    "QueryEncoder",
    "dumps",
    "encode_query",
    "encode_search_request",
    "encode_sort",
    "encode_value",
]

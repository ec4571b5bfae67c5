"""Query variants and their constructors.

Every variant is an immutable value.  Modifiers (``boost``, ``_name``,
``relation``) are applied after construction with :func:`boost`,
:func:`named` and :func:`with_relation`, each returning a new query.
"""

from __future__ import annotations

import dataclasses
import enum

from mp_querydsl.dsl.bounds import LowerBound, UpperBound
from mp_querydsl.dsl.values import Value


class Relation(enum.StrEnum):
    """Spatial relation used by range queries over shape fields."""

    WITHIN = "WITHIN"
    CONTAINS = "CONTAINS"
    INTERSECTS = "INTERSECTS"
    DISJOINT = "DISJOINT"


@dataclasses.dataclass(frozen=True, slots=True)
class TermQuery:
    field: str
    value: Value
    boost: float | None = None
    name: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class RangeQuery:
    field: str
    lower: LowerBound
    upper: UpperBound
    boost: float | None = None
    name: str | None = None
    relation: Relation | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class TypeQuery:
    """Match documents of a mapping type.  Carries no modifiers."""

    type_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class BoolQuery:
    """Boolean composition of sub-queries.

    Clause tuples keep insertion order and duplicates; the order is the
    order of the rendered JSON arrays.
    """

    must: tuple[Query, ...] = ()
    must_not: tuple[Query, ...] = ()
    filter: tuple[Query, ...] = ()
    should: tuple[Query, ...] = ()
    boost: float | None = None
    minimum_should_match: int | None = None
    name: str | None = None


type Query = TermQuery | RangeQuery | TypeQuery | BoolQuery


def term(field: str, value: Value) -> TermQuery:
    return TermQuery(field, value)


def range_query(field: str, lower: LowerBound, upper: UpperBound) -> RangeQuery:
    return RangeQuery(field, lower, upper)


def type_query(type_name: str) -> TypeQuery:
    return TypeQuery(type_name)


def boost(factor: float, query: Query) -> Query:
    """Return *query* with its boost set to *factor*.

    Type queries have no boost field; they are returned unchanged.
    """
    match query:
        case TermQuery() | RangeQuery() | BoolQuery():
            return dataclasses.replace(query, boost=float(factor))
        case TypeQuery():
            return query


def named(name: str, query: Query) -> Query:
    """Return *query* tagged with ``_name``; a no-op on type queries."""
    match query:
        case TermQuery() | RangeQuery() | BoolQuery():
            return dataclasses.replace(query, name=name)
        case TypeQuery():
            return query


def with_relation(relation: Relation, query: Query) -> Query:
    """Set the spatial relation of a range query; other variants pass through."""
    if isinstance(query, RangeQuery):
        return dataclasses.replace(query, relation=Relation(relation))
    return query


__all__ = [
    "BoolQuery",
    "Query",
    "RangeQuery",
    "Relation",
    "TermQuery",
    "TypeQuery",
    "boost",
    "named",
    "range_query",
    "term",
    "type_query",
    "with_relation",
]

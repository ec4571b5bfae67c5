"""Declarative bool clauses and their folding into a :class:`BoolQuery`."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from mp_querydsl.dsl.query import BoolQuery, Query


@dataclasses.dataclass(frozen=True, slots=True)
class Must:
    queries: tuple[Query, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class MustNot:
    queries: tuple[Query, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class Filter:
    queries: tuple[Query, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class Should:
    queries: tuple[Query, ...]
    minimum_should_match: int | None = None


type BoolClause = Must | MustNot | Filter | Should


def must(queries: Iterable[Query]) -> Must:
    return Must(tuple(queries))


def must_not(queries: Iterable[Query]) -> MustNot:
    return MustNot(tuple(queries))


def filter_(queries: Iterable[Query]) -> Filter:
    return Filter(tuple(queries))


def should(minimum_should_match: int | None, queries: Iterable[Query]) -> Should:
    return Should(tuple(queries), minimum_should_match)


def _fold(acc: BoolQuery, clause: BoolClause) -> BoolQuery:
    match clause:
        case Must(queries):
            return dataclasses.replace(acc, must=acc.must + queries)
        case MustNot(queries):
            return dataclasses.replace(acc, must_not=acc.must_not + queries)
        case Filter(queries):
            return dataclasses.replace(acc, filter=acc.filter + queries)
        case Should(queries, minimum_should_match):
            # last should clause decides the threshold, even when it is None
            return dataclasses.replace(
                acc,
                should=acc.should + queries,
                minimum_should_match=minimum_should_match,
            )


def bool_query(clauses: Iterable[BoolClause]) -> BoolQuery:
    """Fold *clauses* left to right into a single bool query.

    Same-kind clause lists are concatenated in encounter order.  The
    ``minimum_should_match`` of the last ``should`` clause wins.
    """
    result = BoolQuery()
    for clause in clauses:
        result = _fold(result, clause)
    return result


__all__ = [
    "BoolClause",
    "Filter",
    "Must",
    "MustNot",
    "Should",
    "bool_query",
    "filter_",
    "must",
    "must_not",
    "should",
]

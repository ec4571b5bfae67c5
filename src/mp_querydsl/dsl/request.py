"""SearchRequest — a query plus its ordered sort keys."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from mp_querydsl.dsl.query import Query
from mp_querydsl.dsl.sort import Sort


@dataclasses.dataclass(frozen=True, slots=True)
class SearchRequest:
    query: Query
    sort: tuple[Sort, ...] = ()


def search_request(sort: Iterable[Sort], query: Query) -> SearchRequest:
    return SearchRequest(query=query, sort=tuple(sort))


__all__ = ["SearchRequest", "search_request"]

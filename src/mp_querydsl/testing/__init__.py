"""Testing – Hypothesis strategies for the query model.

Requires the ``hypothesis`` package::

    pip install "mp-querydsl[testing]"
"""
from mp_querydsl.testing.strategies import (
    bool_clauses,
    field_names,
    lower_bounds,
    queries,
    search_requests,
    sorts,
    upper_bounds,
    values,
)

__all__ = [
    "bool_clauses",
    "field_names",
    "lower_bounds",
    "queries",
    "search_requests",
    "sorts",
    "upper_bounds",
    "values",
]

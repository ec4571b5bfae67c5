"""DSL – immutable query model and its constructors.

Modules:
  values.py  — Value literals (int, string, float, date)
  bounds.py  — LowerBound / UpperBound for range queries
  query.py   — Query variants, Relation, boost / named / with_relation
  clauses.py — BoolClause builders and bool_query folding
  sort.py    — Sort keys, SortOrder, SortMode
  request.py — SearchRequest
"""

from mp_querydsl.dsl.bounds import (
    UNBOUNDED,
    GreaterOrEqual,
    GreaterThan,
    LessOrEqual,
    LessThan,
    LowerBound,
    Unbounded,
    UpperBound,
    greater_or_equal,
    greater_or_equal_date,
    greater_than,
    greater_than_date,
    less_or_equal,
    less_or_equal_date,
    less_than,
    less_than_date,
    unbounded_lower,
    unbounded_upper,
)
from mp_querydsl.dsl.clauses import (
    BoolClause,
    Filter,
    Must,
    MustNot,
    Should,
    bool_query,
    filter_,
    must,
    must_not,
    should,
)
from mp_querydsl.dsl.query import (
    BoolQuery,
    Query,
    RangeQuery,
    Relation,
    TermQuery,
    TypeQuery,
    boost,
    named,
    range_query,
    term,
    type_query,
    with_relation,
)
from mp_querydsl.dsl.request import SearchRequest, search_request
from mp_querydsl.dsl.sort import (
    Sort,
    SortByArrayField,
    SortByField,
    SortMode,
    SortOrder,
    sort_by,
    sort_by_array,
)
from mp_querydsl.dsl.values import (
    DateValue,
    FloatValue,
    IntValue,
    StringValue,
    Value,
    date_value,
    float_value,
    int_value,
    parse_date_value,
    string_value,
)

__all__ = [
    "UNBOUNDED",
    "BoolClause",
    "BoolQuery",
    "DateValue",
    "Filter",
    "FloatValue",
    "GreaterOrEqual",
    "GreaterThan",
    "IntValue",
    "LessOrEqual",
    "LessThan",
    "LowerBound",
    "Must",
    "MustNot",
    "Query",
    "RangeQuery",
    "Relation",
    "SearchRequest",
    "Should",
    "Sort",
    "SortByArrayField",
    "SortByField",
    "SortMode",
    "SortOrder",
    "StringValue",
    "TermQuery",
    "TypeQuery",
    "Unbounded",
    "UpperBound",
    "Value",
    "bool_query",
    "boost",
    "date_value",
    "filter_",
    "float_value",
    "greater_or_equal",
    "greater_or_equal_date",
    "greater_than",
    "greater_than_date",
    "int_value",
    "less_or_equal",
    "less_or_equal_date",
    "less_than",
    "less_than_date",
    "must",
    "must_not",
    "named",
    "parse_date_value",
    "range_query",
    "search_request",
    "should",
    "sort_by",
    "sort_by_array",
    "string_value",
    "term",
    "type_query",
    "unbounded_lower",
    "unbounded_upper",
    "with_relation",
]

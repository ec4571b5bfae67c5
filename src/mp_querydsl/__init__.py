"""
mp_querydsl – typesafe builder for search-engine query documents.

Import path convention::

    from mp_querydsl.dsl import term, string_value, bool_query, must
    from mp_querydsl.encoding import encode_query, dumps
    from mp_querydsl.kernel.errors import InvalidValueError
"""

from mp_querydsl.dsl import (
    BoolClause,
    BoolQuery,
    Filter,
    GreaterOrEqual,
    GreaterThan,
    LessOrEqual,
    LessThan,
    LowerBound,
    Must,
    MustNot,
    Query,
    RangeQuery,
    Relation,
    SearchRequest,
    Should,
    Sort,
    SortByArrayField,
    SortByField,
    SortMode,
    SortOrder,
    TermQuery,
    TypeQuery,
    Unbounded,
    UpperBound,
    Value,
    bool_query,
    boost,
    date_value,
    filter_,
    float_value,
    greater_or_equal,
    greater_or_equal_date,
    greater_than,
    greater_than_date,
    int_value,
    less_or_equal,
    less_or_equal_date,
    less_than,
    less_than_date,
    must,
    must_not,
    named,
    parse_date_value,
    range_query,
    search_request,
    should,
    sort_by,
    sort_by_array,
    string_value,
    term,
    type_query,
    unbounded_lower,
    unbounded_upper,
    with_relation,
)
from mp_querydsl.encoding import QueryEncoder, dumps, encode_query, encode_search_request

__version__ = "0.1.0"
__all__ = [
    "BoolClause",
    "BoolQuery",
    "Filter",
    "GreaterOrEqual",
    "GreaterThan",
    "LessOrEqual",
    "LessThan",
    "LowerBound",
    "Must",
    "MustNot",
    "Query",
    "QueryEncoder",
    "RangeQuery",
    "Relation",
    "SearchRequest",
    "Should",
    "Sort",
    "SortByArrayField",
    "SortByField",
    "SortMode",
    "SortOrder",
    "TermQuery",
    "TypeQuery",
    "Unbounded",
    "UpperBound",
    "Value",
    "__version__",
    "bool_query",
    "boost",
    "date_value",
    "dumps",
    "encode_query",
    "encode_search_request",
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

"""Encoding – render the query model as canonical JSON."""
from mp_querydsl.encoding.encoder import (
    QueryEncoder,
    dumps,
    encode_query,
    encode_search_request,
    encode_sort,
    encode_value,
)
from mp_querydsl.encoding.objects import JsonValue, nested_object, object_

__all__ = [
    "JsonValue",
    "QueryEncoder",
    "dumps",
    "encode_query",
    "encode_search_request",
    "encode_sort",
    "encode_value",
    "nested_object",
    "object_",
]

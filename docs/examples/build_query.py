"""Build a filtered, sorted search request and print its JSON body.

Run with::

    python docs/examples/build_query.py

The printed document can be sent as the body of a ``_search`` call by
any HTTP client; this library never talks to the search engine itself.
"""

from __future__ import annotations

import datetime

from mp_querydsl import (
    SortMode,
    SortOrder,
    bool_query,
    boost,
    filter_,
    greater_or_equal_date,
    int_value,
    less_or_equal,
    must,
    must_not,
    named,
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
)
from mp_querydsl.config import EncoderSettings, EnvSettingsLoader
from mp_querydsl.encoding import QueryEncoder
from mp_querydsl.observability.logging import JsonLoggerFactory


def main() -> None:
    JsonLoggerFactory.configure()
    encoder = QueryEncoder(EnvSettingsLoader().load(EncoderSettings))

    query = bool_query(
        [
            must([boost(2.0, term("title", string_value("python")))]),
            filter_(
                [
                    type_query("article"),
                    range_query("published", greater_or_equal_date(datetime.date(2020, 1, 1)), unbounded_upper()),
                ]
            ),
            must_not([term("status", string_value("draft"))]),
            should(1, [named("cheap", range_query("price", unbounded_lower(), less_or_equal(int_value(20))))]),
        ]
    )
    request = search_request(
        [sort_by("published", SortOrder.DESCENDING), sort_by_array("ratings", SortOrder.DESCENDING, SortMode.AVG)],
        query,
    )
    print(encoder.dumps_search_request(request))


if __name__ == "__main__":
    main()

"""Unit tests for structlog configuration and encoder log events."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_querydsl.config import EncoderSettings
from mp_querydsl.dsl import SortOrder, int_value, search_request, sort_by, term
from mp_querydsl.encoding import QueryEncoder
from mp_querydsl.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_installs_single_structlog_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert structlog.is_configured()

    def test_console_renderer(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(json=False)
        assert isinstance(logging.getLogger().handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", index="docs").info("ping")
        assert logs[0]["index"] == "docs"
        assert logs[0]["event"] == "ping"


class TestEncoderLogging:
    def test_silent_by_default(self) -> None:
        with capture_logs() as logs:
            QueryEncoder().encode_query(term("a", int_value(1)))
        assert logs == []

    def test_logs_query_when_enabled(self) -> None:
        encoder = QueryEncoder(EncoderSettings(log_encoding=True))
        with capture_logs() as logs:
            encoder.encode_query(term("a", int_value(1)))
        assert [(e["event"], e["kind"], e["log_level"]) for e in logs] == [
            ("query_encoded", "TermQuery", "debug")
        ]

    def test_logs_search_request_when_enabled(self) -> None:
        encoder = QueryEncoder(EncoderSettings(log_encoding=True))
        req = search_request([sort_by("a", SortOrder.ASCENDING)], term("a", int_value(1)))
        with capture_logs() as logs:
            encoder.encode_search_request(req)
        assert logs[0]["event"] == "search_request_encoded"
        assert logs[0]["sort_keys"] == 1

"""Tests for request-scoped log context."""

import structlog

from herald.logging_config import bind_request_context, clear_request_context


def test_bind_request_context_includes_username_when_known():
    clear_request_context()
    bind_request_context("trc_abc", "admin")
    assert structlog.contextvars.get_contextvars() == {"trace_id": "trc_abc", "username": "admin"}
    clear_request_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_bind_request_context_without_username():
    clear_request_context()
    bind_request_context("trc_abc")
    assert structlog.contextvars.get_contextvars() == {"trace_id": "trc_abc"}
    clear_request_context()

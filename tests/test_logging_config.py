import json
import logging

import pytest

from sentry_api import Issue, configure_logging
from sentry_api.logging_config import _sanitize, log_call, log_http_request, logger


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="sentry_api")
    return caplog


def _events(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == "sentry_api"]


def test_sanitize_strips_secrets():
    data = {"auth_token": "x", "Password": "y", "client_secret": "z", "nested": [{"token": 1, "ok": 2}]}
    assert _sanitize(data) == {"nested": [{"ok": 2}]}


def test_sanitize_models_and_bytes():
    assert _sanitize(Issue(id="1", title="")) == {"id": "1", "title": ""}
    assert _sanitize(b"abc") == "<binary 3 bytes>"
    assert _sanitize(object).startswith("<class")


def test_http_request_log_drops_authorization(debug_logs):
    log_http_request("GET", "https://sentry.example.com/api/0/issues/1",
                     headers={"Authorization": "Bearer abc", "Accept": "application/json"})

    (event,) = _events(debug_logs)
    assert event["event"] == "http_request"
    assert event["headers"] == {"Accept": "application/json"}
    assert "abc" not in debug_logs.text


def test_http_request_log_completion(debug_logs):
    log_http_request("DELETE", "https://x/issues/1", status=202, duration_ms=12.3456)
    (event,) = _events(debug_logs)
    assert event["status"] == 202
    assert event["duration_ms"] == 12.35


def test_http_request_log_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="sentry_api")
    log_http_request("GET", "https://x/")
    assert _events(caplog) == []


def test_log_call_records_entry_and_exit(debug_logs):
    @log_call
    def fetch(client, issue_id, token=None):
        return {"id": issue_id}

    assert fetch(object(), "123", token="hide-me") == {"id": "123"}

    start, end = _events(debug_logs)
    assert start == {"event": "call_start", "function": "fetch", "args": ["123"], "kwargs": {}}
    assert end == {"event": "call_end", "function": "fetch", "result": {"id": "123"}}
    assert fetch.__name__ == "fetch"


def test_log_call_propagates_errors(debug_logs):
    @log_call
    def boom(client):
        raise KeyError("nope")

    with pytest.raises(KeyError):
        boom(None)


def test_operations_log_through_the_client(debug_logs, recorder_client, issue_json):
    from sentry_api import get_issue

    client, _ = recorder_client(json=issue_json)
    get_issue(client, "123")

    names = [e["event"] for e in _events(debug_logs)]
    assert names == ["call_start", "http_request", "http_request", "call_end"]
    assert "secret-token" not in debug_logs.text


def test_api_errors_are_logged_as_warnings(caplog, recorder_client):
    from sentry_api import APIError, get_issue

    caplog.set_level(logging.WARNING, logger="sentry_api")
    client, _ = recorder_client(status=404, json={"detail": "Not found"})

    with pytest.raises(APIError):
        get_issue(client, "404")

    (event,) = _events(caplog)
    assert event["event"] == "api_error"
    assert event["status"] == 404


def test_configure_logging_is_idempotent():
    before = list(logger.handlers)
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.WARNING)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert added[0].level == logging.WARNING
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

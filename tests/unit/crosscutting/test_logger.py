"""
Name: JSON Logger Tests

Responsibilities:
  - Sensitive extras are redacted
  - Request context is attached to log lines
"""

import json
import logging

import pytest

from dashboard_api.context import clear_context, set_request_context
from dashboard_api.crosscutting.logger import REDACTED, JSONFormatter

pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="dashboard-api",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="user created",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_sensitive_keys_are_redacted():
    line = JSONFormatter().format(
        _record(password="hunter22", password_hash="$argon2", email="a@b.co")
    )
    payload = json.loads(line)

    assert payload["password"] == REDACTED
    assert payload["password_hash"] == REDACTED
    assert payload["email"] == "a@b.co"
    assert "hunter22" not in line


def test_nested_sensitive_keys_are_redacted():
    payload = json.loads(
        JSONFormatter().format(_record(form={"email": "a@b.co", "password": "x"}))
    )

    assert payload["form"] == {"email": "a@b.co", "password": REDACTED}


def test_request_context_is_included():
    set_request_context(request_id="req-1", method="POST", path="/login")
    try:
        payload = json.loads(JSONFormatter().format(_record()))
    finally:
        clear_context()

    assert payload["request_id"] == "req-1"
    assert payload["method"] == "POST"
    assert payload["path"] == "/login"
    assert payload["message"] == "user created"

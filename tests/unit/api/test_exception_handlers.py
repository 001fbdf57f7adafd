"""
Name: Exception Handler Tests

Responsibilities:
  - DatabaseError escaping a route -> 503 problem+json with error_id
  - Untyped exceptions -> 500 problem+json
  - request_id is echoed in the problem errors
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dashboard_api.api.exception_handlers import register_exception_handlers
from dashboard_api.crosscutting.exceptions import DatabaseError
from dashboard_api.crosscutting.middleware import RequestContextMiddleware

pytestmark = pytest.mark.unit


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    @app.get("/db")
    def db_down():
        raise DatabaseError("connection refused", error_id="err-1")

    @app.get("/boom")
    def boom():
        raise ValueError("boom")

    return app


def test_database_error_is_503():
    res = TestClient(_build_app()).get("/db", headers={"X-Request-Id": "req-7"})

    body = res.json()
    assert res.status_code == 503
    assert res.headers["content-type"].startswith("application/problem+json")
    assert body["code"] == "DATABASE_ERROR"
    assert "connection refused" not in body["detail"]
    assert {"error_id": "err-1"} in body["errors"]
    assert {"request_id": "req-7"} in body["errors"]


def test_unhandled_exception_is_500():
    client = TestClient(_build_app(), raise_server_exceptions=False)

    res = client.get("/boom")

    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"

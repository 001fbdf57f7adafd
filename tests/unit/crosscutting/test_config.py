"""
Name: Settings Tests

Responsibilities:
  - Defaults and parsing helpers
  - Validation of pool bounds, timezone and production security
"""

import pytest
from pydantic import ValidationError

from dashboard_api.crosscutting.config import Settings

pytestmark = pytest.mark.unit

DB = "postgresql://u:p@localhost:5432/db"


def _settings(**overrides) -> Settings:
    return Settings(database_url=DB, _env_file=None, **overrides)


def test_allowed_origins_list():
    s = _settings(allowed_origins="http://a.test, http://b.test ,")

    assert s.get_allowed_origins_list() == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("env", ["test", "TESTING", "ci"])
def test_is_test(env):
    assert _settings(app_env=env).is_test()


def test_pool_bounds():
    with pytest.raises(ValidationError):
        _settings(db_pool_min_size=5, db_pool_max_size=2)


def test_unknown_timezone_rejected():
    with pytest.raises(ValidationError):
        _settings(local_timezone="Mars/Olympus")


def test_known_timezone_accepted():
    assert _settings(local_timezone="America/Chicago").local_timezone == "America/Chicago"


def test_production_requires_strong_secret():
    with pytest.raises(ValidationError):
        _settings(app_env="production", auth_secret="dev-secret", session_cookie_secure=True)

    with pytest.raises(ValidationError):
        _settings(app_env="production", auth_secret="x" * 40, session_cookie_secure=False)

    ok = _settings(app_env="production", auth_secret="x" * 40, session_cookie_secure=True)
    assert ok.is_production()

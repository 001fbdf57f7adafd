"""
Name: AuthenticateUseCase Tests

Responsibilities:
  - CredentialsSignin -> "Invalid credentials."
  - Other AuthError types -> "Something went wrong."
  - Non-auth failures propagate
  - Success redirects to /dashboard with the session
"""

from unittest.mock import Mock

import pytest

from dashboard_api.application.form_state import Redirect, Rendered
from dashboard_api.application.usecases import AuthenticateUseCase
from dashboard_api.domain.entities import Session
from dashboard_api.identity.errors import (
    CallbackRouteError,
    CredentialsSignin,
    InvalidProvider,
)

pytestmark = pytest.mark.unit

FORM = {"email": "ada@example.com", "password": "hunter22"}


def test_authenticate_success_redirects_with_session():
    session = Session(token="t", expires_in=60, email="ada@example.com")
    provider = Mock()
    provider.sign_in.return_value = session

    outcome = AuthenticateUseCase(provider).execute(None, FORM)

    assert outcome == Redirect("/dashboard", session=session)
    provider.sign_in.assert_called_once_with("credentials", FORM)


def test_authenticate_wrong_credentials():
    provider = Mock()
    provider.sign_in.side_effect = CredentialsSignin()

    outcome = AuthenticateUseCase(provider).execute(None, FORM)

    assert outcome == Rendered("Invalid credentials.")


@pytest.mark.parametrize("error", [InvalidProvider(), CallbackRouteError()])
def test_authenticate_other_auth_errors(error):
    provider = Mock()
    provider.sign_in.side_effect = error

    outcome = AuthenticateUseCase(provider).execute("Invalid credentials.", FORM)

    assert outcome == Rendered("Something went wrong.")


def test_authenticate_reraises_non_auth_errors():
    provider = Mock()
    provider.sign_in.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        AuthenticateUseCase(provider).execute(None, FORM)

"""
===============================================================================
USE CASE: Authenticate
===============================================================================

Business Goal:
    Sign a user in with email + password and land them on the dashboard.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    AuthenticateUseCase

Responsibilities:
    - Delegate to AuthProvider.sign_in("credentials", form_data).
    - Map authentication failures to exactly two user-facing strings:
        * CredentialsSignin -> "Invalid credentials."
        * any other AuthError type -> "Something went wrong."
    - Re-raise everything that is not an AuthError.

Collaborators:
    - AuthProvider (identity.credentials.CredentialsAuthProvider in production)
    - identity.errors.AuthError
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping

from ....crosscutting.logger import logger
from ....domain.services import AuthProvider
from ....identity.errors import AuthError, CredentialsSignin
from ...form_state import MutationOutcome, Redirect, Rendered

CREDENTIALS_PROVIDER = "credentials"
DASHBOARD_PATH = "/dashboard"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
GENERIC_FAILURE_MESSAGE = "Something went wrong."


class AuthenticateUseCase:
    def __init__(self, provider: AuthProvider) -> None:
        self._provider = provider

    def execute(
        self, previous_error: str | None, form_data: Mapping[str, Any]
    ) -> MutationOutcome:
        try:
            session = self._provider.sign_in(CREDENTIALS_PROVIDER, form_data)
        except AuthError as exc:
            logger.info("sign-in rejected", extra={"auth_error_type": exc.type})
            if exc.type == CredentialsSignin.type:
                return Rendered(INVALID_CREDENTIALS_MESSAGE)
            return Rendered(GENERIC_FAILURE_MESSAGE)

        return Redirect(DASHBOARD_PATH, session=session)

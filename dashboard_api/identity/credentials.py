"""
===============================================================================
CRC CARD — identity/credentials.py
===============================================================================

Module:
    Credentials sign-in provider

Responsibilities:
    - Implement AuthProvider.sign_in(provider, form_data) for the
      "credentials" provider.
    - Parse the credentials shape (email-like address, password >= 6 chars).
    - Load the user by email and verify the password hash.
    - Issue a session on success.
    - Report every failure as a typed AuthError:
        * unknown provider                  -> InvalidProvider
        * bad shape / unknown user / wrong password -> CredentialsSignin
        * storage failure while loading     -> CallbackRouteError

Collaborators:
    - domain.repositories.UserRepository.get_user_by_email
    - a password verifier (Argon2PasswordHasher.verify in production)
    - identity.sessions.issue_session
    - pydantic (credentials shape)

Security:
    - "Unknown user" and "wrong password" are indistinguishable to callers.
    - Email is never normalized here; it must match what was stored.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field, ValidationError

from ..crosscutting.exceptions import DatabaseError
from ..crosscutting.logger import logger
from ..domain.entities import (
    EMAIL_PATTERN,
    MIN_PASSWORD_LENGTH,
    Session,
    UserAccount,
)
from ..domain.repositories import UserRepository
from .errors import CallbackRouteError, CredentialsSignin, InvalidProvider
from .sessions import issue_session

CREDENTIALS_PROVIDER_ID = "credentials"

class CredentialsInput(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, repr=False)


class CredentialsAuthProvider:
    def __init__(
        self,
        users: UserRepository,
        *,
        verify: Callable[[str, str], bool],
        issue: Callable[[UserAccount], Session] = issue_session,
    ) -> None:
        self._users = users
        self._verify = verify
        self._issue = issue

    def sign_in(self, provider: str, form_data: Mapping[str, Any]) -> Session:
        if provider != CREDENTIALS_PROVIDER_ID:
            raise InvalidProvider(f"Unsupported sign-in provider: {provider}")

        try:
            credentials = CredentialsInput.model_validate(
                {
                    "email": form_data.get("email"),
                    "password": form_data.get("password"),
                }
            )
        except ValidationError as exc:
            raise CredentialsSignin("Malformed credentials.") from exc

        try:
            account = self._users.get_user_by_email(credentials.email)
        except DatabaseError as exc:
            raise CallbackRouteError("User lookup failed.", cause=exc) from exc

        if account is None or not self._verify(
            credentials.password, account.password_hash
        ):
            raise CredentialsSignin("Invalid credentials.")

        logger.info("user signed in", extra={"email": account.email})
        return self._issue(account)

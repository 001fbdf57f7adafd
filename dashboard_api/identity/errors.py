"""
===============================================================================
CRC CARD — identity/errors.py
===============================================================================

Module:
    Authentication errors

Responsibilities:
    - AuthError: base of every authentication-specific failure, discriminated
      by a stable `type` string.
    - Concrete kinds raised by the credentials provider.

Collaborators:
    - identity/credentials.py: raises these.
    - application/usecases/auth/authenticate.py: maps `type` to a message.

Notes:
    - Anything that is NOT an AuthError is an infrastructure/programming
      failure and must not be mistaken for bad credentials.
===============================================================================
"""

from __future__ import annotations


class AuthError(Exception):
    """Authentication failure; `type` tells which kind."""

    type: str = "AuthError"

    def __init__(self, message: str = "", *, cause: Exception | None = None):
        self.message = message or self.type
        self.cause = cause
        super().__init__(self.message)


class CredentialsSignin(AuthError):
    """Credentials missing, malformed, unknown or wrong."""

    type = "CredentialsSignin"


class InvalidProvider(AuthError):
    """Sign-in requested with a provider that is not configured."""

    type = "InvalidProvider"


class CallbackRouteError(AuthError):
    """The provider failed while resolving the user (e.g. storage down)."""

    type = "CallbackRouteError"

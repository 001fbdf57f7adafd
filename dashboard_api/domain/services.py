"""
===============================================================================
CRC CARD — domain/services.py
===============================================================================

Module:
    Domain service ports (Protocols)

Responsibilities:
    - ViewRevalidator: mark a logical view path stale after a mutation.
    - PasswordHasher: one-way hashing of plaintext credentials.
    - AuthProvider: sign in with a named provider and raw form data.

Collaborators:
    - application.usecases: depend on these ports only.
    - infrastructure.views / identity.*: concrete implementations.

Notes:
    - typing.Protocol for structural subtyping; tests pass plain fakes.
===============================================================================
"""

from typing import Mapping, Protocol

from .entities import Session


class ViewRevalidator(Protocol):
    def revalidate_path(self, path: str) -> None:
        """Mark the cached output of `path` as stale."""
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str:
        """Return a one-way hash of `password`."""
        ...


class AuthProvider(Protocol):
    def sign_in(self, provider: str, form_data: Mapping[str, str]) -> Session:
        """
        Authenticate with the named provider.

        Raises:
            identity.credentials.AuthError: authentication-specific failures,
                discriminated by their `type`.
        """
        ...

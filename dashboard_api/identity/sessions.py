"""
===============================================================================
CRC CARD — identity/sessions.py
===============================================================================

Module:
    Session tokens (JWT)

Responsibilities:
    - Issue signed session tokens with expiry after a successful sign-in.
    - Decode and validate session tokens (signature, exp, minimal claims).
    - Extract the token from the session cookie or `Authorization: Bearer`.
    - Expose the FastAPI dependency `require_session` for protected routes.

Collaborators:
    - crosscutting.config.get_settings: secret, TTL, cookie settings.
    - crosscutting.error_responses.unauthorized: 401 problem+json.
    - domain.entities: Session, UserAccount, UserProfile.

Design decisions:
    - Minimal claims: sub (email), name, profile, iat, exp, typ.
    - Never log tokens.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt
from fastapi import Header, Request

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import unauthorized
from ..domain.entities import Session, UserAccount, UserProfile

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_NAME: str = "name"
CLAIM_PROFILE: str = "profile"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_SESSION: str = "session"


@dataclass(frozen=True, slots=True)
class SessionSettings:
    """Snapshot of the session settings."""

    secret: str
    ttl_minutes: int
    cookie_name: str
    cookie_secure: bool


@dataclass(frozen=True, slots=True)
class SessionClaims:
    """Claims we expect from a valid session token."""

    email: str
    name: str
    profile: UserProfile


def get_session_settings() -> SessionSettings:
    s = get_settings()
    return SessionSettings(
        secret=s.auth_secret,
        ttl_minutes=s.session_ttl_minutes,
        cookie_name=s.session_cookie_name,
        cookie_secure=s.session_cookie_secure,
    )


def issue_session(
    account: UserAccount, settings: SessionSettings | None = None
) -> Session:
    """Create a signed session token for `account`."""
    session_settings = settings or get_session_settings()

    now = datetime.now(timezone.utc)
    expires_in = int(session_settings.ttl_minutes * 60)

    payload: dict[str, object] = {
        CLAIM_SUB: account.email,
        CLAIM_NAME: account.name,
        CLAIM_PROFILE: account.profile.value,
        CLAIM_IAT: int(now.timestamp()),
        CLAIM_EXP: int((now + timedelta(seconds=expires_in)).timestamp()),
        CLAIM_TYP: TOKEN_TYPE_SESSION,
    }

    token = jwt.encode(payload, session_settings.secret, algorithm=JWT_ALGORITHM)
    return Session(token=token, expires_in=expires_in, email=account.email)


def decode_session(
    token: str, settings: SessionSettings | None = None
) -> SessionClaims:
    """
    Decode and validate a session token.

    Errors:
        - 401 when expired, badly signed or missing claims.
    """
    session_settings = settings or get_session_settings()

    try:
        payload = jwt.decode(
            token,
            session_settings.secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": [CLAIM_SUB, CLAIM_PROFILE, CLAIM_EXP]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise unauthorized("Session expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise unauthorized("Invalid session.") from exc

    if payload.get(CLAIM_TYP) != TOKEN_TYPE_SESSION:
        raise unauthorized("Invalid session.")

    try:
        profile = UserProfile(str(payload[CLAIM_PROFILE]))
    except ValueError as exc:
        raise unauthorized("Invalid session.") from exc

    return SessionClaims(
        email=str(payload[CLAIM_SUB]),
        name=str(payload.get(CLAIM_NAME) or ""),
        profile=profile,
    )


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def extract_session_token(request: Request, authorization: str | None) -> str | None:
    """Token from `Authorization: Bearer` first, then the session cookie."""
    token = _extract_bearer_token(authorization)
    if token:
        return token
    return request.cookies.get(get_session_settings().cookie_name)


def require_session() -> Callable:
    """FastAPI dependency: requires a valid session."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> SessionClaims:
        token = extract_session_token(request, authorization)
        if not token:
            raise unauthorized("Sign in required.")

        claims = decode_session(token)
        request.state.session = claims
        return claims

    return dependency

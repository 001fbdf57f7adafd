"""
===============================================================================
CRC CARD — interfaces/api/http/forms.py (Form boundary helpers)
===============================================================================

Responsibilities:
  - Read a urlencoded / multipart body into a flat `{name: str}` mapping:
      * repeated keys -> first value wins
      * non-text parts (uploads) -> treated as missing
  - Translate a MutationOutcome into an HTTP response:
      * Redirect  -> 303 See Other (+ session cookie when one was issued)
      * Rendered  -> 200 JSON form state ({"message": ...} for a bare string)

Collaborators:
  - application.form_state (Redirect / Rendered / FormState)
  - identity.sessions.get_session_settings (cookie name / secure flag)
===============================================================================
"""

from __future__ import annotations

from fastapi import Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard_api.application.form_state import (
    FormState,
    MutationOutcome,
    Redirect,
    Rendered,
)
from dashboard_api.domain.entities import Session
from dashboard_api.identity.sessions import get_session_settings


async def read_form_fields(request: Request) -> dict[str, str]:
    """FastAPI dependency: flat form fields (first value wins)."""
    form = await request.form()

    fields: dict[str, str] = {}
    seen: set[str] = set()
    for key, value in form.multi_items():
        if key in seen:
            continue
        seen.add(key)
        if isinstance(value, str):
            fields[key] = value
    return fields


def _set_session_cookie(response: Response, session: Session) -> None:
    settings = get_session_settings()
    response.set_cookie(
        key=settings.cookie_name,
        value=session.token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=session.expires_in,
        path="/",
    )


def _state_payload(state: FormState | str) -> dict:
    if isinstance(state, FormState):
        return state.to_dict()
    return {"message": state}


def to_response(outcome: MutationOutcome) -> Response:
    if isinstance(outcome, Redirect):
        response = RedirectResponse(url=outcome.path, status_code=303)
        if outcome.session is not None:
            _set_session_cookie(response, outcome.session)
        return response

    if isinstance(outcome, Rendered):
        return JSONResponse(status_code=200, content=_state_payload(outcome.state))

    raise TypeError(f"Unsupported mutation outcome: {type(outcome).__name__}")

"""
Sign-in form.

POST /login with `email` + `password`:
  - success -> 303 to /dashboard with the session cookie set
  - failure -> 200 {"message": "Invalid credentials." | "Something went wrong."}
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dashboard_api.application.usecases import AuthenticateUseCase
from dashboard_api.container import get_authenticate_use_case

from ..forms import read_form_fields, to_response

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(
    fields: dict[str, str] = Depends(read_form_fields),
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
):
    return to_response(use_case.execute(None, fields))

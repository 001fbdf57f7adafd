"""User registration form (public)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dashboard_api.application.usecases import CreateUserUseCase
from dashboard_api.container import get_create_user_use_case

from ..forms import read_form_fields, to_response

router = APIRouter(tags=["users"])


@router.post("/createuser")
def create_user(
    fields: dict[str, str] = Depends(read_form_fields),
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    return to_response(use_case.execute(None, fields))

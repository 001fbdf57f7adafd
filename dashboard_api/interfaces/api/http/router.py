"""
===============================================================================
CRC CARD — router.py (Root router / composition)
===============================================================================

Responsibilities:
  - Build the root APIRouter included by FastAPI.
  - Compose the feature routers (invoices / users / auth).
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from .routers import auth_router, invoices_router, users_router


def build_router() -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(invoices_router)
    api_router.include_router(users_router)
    api_router.include_router(auth_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]

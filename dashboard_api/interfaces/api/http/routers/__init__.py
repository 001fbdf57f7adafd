"""
===============================================================================
CRC CARD — interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-export the feature routers (no endpoints defined here).
===============================================================================
"""

from .auth import router as auth_router
from .invoices import router as invoices_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "invoices_router",
    "users_router",
]

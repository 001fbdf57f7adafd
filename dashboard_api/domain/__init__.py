"""
===============================================================================
CRC CARD — domain/__init__.py
===============================================================================

Module:
    Domain layer exports (public domain API)

Responsibilities:
    - Centralize exports for clean imports from application/interfaces.
    - Keep the domain surface stable.

Collaborators:
    - domain.entities: Invoice, NewUser, UserAccount, Session, enums
    - domain.repositories: persistence ports
    - domain.services: revalidation, hashing and auth ports

Rules:
    - Re-export domain contracts/entities only; never import infrastructure.
===============================================================================
"""

from .entities import (
    Invoice,
    InvoiceStatus,
    NewUser,
    Session,
    UserAccount,
    UserProfile,
)
from .repositories import InvoiceRepository, UserRepository
from .services import AuthProvider, PasswordHasher, ViewRevalidator

__all__ = [
    "Invoice",
    "InvoiceStatus",
    "NewUser",
    "Session",
    "UserAccount",
    "UserProfile",
    "InvoiceRepository",
    "UserRepository",
    "AuthProvider",
    "PasswordHasher",
    "ViewRevalidator",
]

"""
===============================================================================
CRC CARD — domain/entities.py
===============================================================================

Module:
    Domain entities (Invoice, NewUser, UserAccount)

Responsibilities:
    - Define the core business shapes (no infrastructure).
    - Hold the closed value sets (InvoiceStatus, UserProfile).
    - Keep amounts in integer cents, the unit persisted by storage.

Collaborators:
    - domain.repositories: persist/load these entities.
    - application.usecases: build these entities from validated forms.

Principles:
    - No DB/FastAPI dependencies.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from uuid import UUID


# Shape of a sign-in credential; registration enforces the same rules.
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MIN_PASSWORD_LENGTH = 6


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class UserProfile(str, Enum):
    ADMIN = "admin"
    SUBCONTRACTOR = "subcontractor"
    CUSTOMER = "customer"
    BUILDER = "builder"
    VENDOR = "vendor"
    EMPLOYEE = "employee"
    MANAGER = "manager"


@dataclass(frozen=True, slots=True)
class Invoice:
    """Invoice row. amount is always a non-negative number of cents."""

    id: UUID
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: date


@dataclass(frozen=True, slots=True)
class NewUser:
    """
    User ready to be inserted.

    password_hash is the only form of the credential that leaves the
    application layer.
    """

    firstname: str
    lastname: str
    name: str
    profile: UserProfile
    email: str
    password_hash: str
    createddate: date


@dataclass(frozen=True, slots=True)
class UserAccount:
    """Stored user as loaded for sign-in."""

    email: str
    name: str
    profile: UserProfile
    password_hash: str
    firstname: str = ""
    lastname: str = ""
    createddate: date | None = None


@dataclass(frozen=True, slots=True)
class Session:
    """Signed session issued after a successful sign-in."""

    token: str
    expires_in: int
    email: str

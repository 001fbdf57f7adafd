"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the domain layer (ports).
- Keep the application independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing (fakes/mocks).

Collaborators
- domain.entities: Invoice, InvoiceStatus, NewUser, UserAccount
- infrastructure.repositories: postgres/* and in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no SQL.
- Implementations raise crosscutting.exceptions.DatabaseError on any storage
  failure (constraint violation, connectivity loss, timeout).
"""

from datetime import date
from typing import Optional, Protocol

from .entities import Invoice, InvoiceStatus, NewUser, UserAccount


class InvoiceRepository(Protocol):
    """R: Interface for invoice persistence."""

    def create_invoice(
        self,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
        date: date,
    ) -> Invoice:
        """R: Insert a new invoice; the id is generated server side."""
        ...

    def update_invoice(
        self,
        invoice_id: str,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> None:
        """R: Replace customer, amount and status. The date is left untouched."""
        ...

    def delete_invoice(self, invoice_id: str) -> None:
        """R: Remove the invoice with this id."""
        ...


class UserRepository(Protocol):
    """R: Interface for user persistence."""

    def create_user(self, user: NewUser) -> None:
        """R: Insert a user. A duplicate email raises DatabaseError."""
        ...

    def get_user_by_email(self, email: str) -> Optional[UserAccount]:
        """R: Load a user for sign-in (None when missing)."""
        ...

"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/invoice.py
============================================================
Class: InMemoryInvoiceRepository

Responsibilities:
  - Keep invoices in memory (tests / local dev).
  - Mirror the Postgres repository contract: create, full update, delete.
  - Treat update/delete of an unknown id as a no-op (same as SQL).

Collaborators:
  - domain.entities.Invoice, InvoiceStatus
  - domain.repositories.InvoiceRepository (contract)

Constraints / Notes:
  - Thread-safe: every access happens under a Lock.
  - Ids are compared as strings; a malformed id matches nothing.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from threading import Lock
from typing import Dict, List, Optional
from uuid import uuid4

from ....domain.entities import Invoice, InvoiceStatus


class InMemoryInvoiceRepository:
    """Thread-safe in-memory invoice table (id -> Invoice)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._invoices: Dict[str, Invoice] = {}

    def create_invoice(
        self,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
        date: date,
    ) -> Invoice:
        invoice = Invoice(
            id=uuid4(),
            customer_id=customer_id,
            amount=amount,
            status=status,
            date=date,
        )
        with self._lock:
            self._invoices[str(invoice.id)] = invoice
        return invoice

    def update_invoice(
        self,
        invoice_id: str,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> None:
        with self._lock:
            current = self._invoices.get(invoice_id)
            if current is None:
                return
            # R: Full replacement of the mutable fields; id and date are kept.
            self._invoices[invoice_id] = replace(
                current, customer_id=customer_id, amount=amount, status=status
            )

    def delete_invoice(self, invoice_id: str) -> None:
        with self._lock:
            self._invoices.pop(invoice_id, None)

    # =========================================================
    # Read helpers (tests / diagnostics)
    # =========================================================
    def get(self, invoice_id: str) -> Optional[Invoice]:
        with self._lock:
            return self._invoices.get(invoice_id)

    def list_all(self) -> List[Invoice]:
        with self._lock:
            return list(self._invoices.values())

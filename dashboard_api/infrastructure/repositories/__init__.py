"""
============================================================
CRC CARD — infrastructure/repositories/__init__.py
============================================================
Module: infrastructure.repositories (Public Export Surface)

Responsibilities:
  - Expose the concrete repositories (Postgres and InMemory) from one place.
  - Re-export only; no side effects.
============================================================
"""

from .in_memory import InMemoryInvoiceRepository, InMemoryUserRepository
from .postgres import PostgresInvoiceRepository, PostgresUserRepository

__all__ = [
    # Postgres
    "PostgresInvoiceRepository",
    "PostgresUserRepository",
    # In-memory
    "InMemoryInvoiceRepository",
    "InMemoryUserRepository",
]

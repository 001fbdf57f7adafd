"""
============================================================
CRC CARD — infrastructure/repositories/postgres/invoice.py
============================================================
Class: PostgresInvoiceRepository

Responsibilities:
  - Insert, fully update and delete rows of `invoices`.
  - Run parameterized SQL only (never interpolate user input).
  - Map raw rows -> domain `Invoice`.
  - Wrap any driver failure in `DatabaseError` with structured logging.

Collaborators:
  - psycopg_pool.ConnectionPool (injected, or the global pool)
  - domain.entities.Invoice / InvoiceStatus
  - crosscutting.exceptions.DatabaseError
  - crosscutting.logger.logger

Constraints:
  - One statement per call; autocommit through the pool context manager.
  - The invoice id is generated here (uuid4) so the caller never chooses it.
============================================================
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional
from uuid import uuid4

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import Invoice, InvoiceStatus

# R: Explicit column list keeps the contract with migrations in one place.
_INVOICE_COLUMNS = "id, customer_id, amount, status, date"


class PostgresInvoiceRepository:
    """R: PostgreSQL implementation of InvoiceRepository."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        # R: Injectable pool for tests; production uses the global one.
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    @staticmethod
    def _row_to_invoice(row: tuple) -> Invoice:
        try:
            status = InvoiceStatus(row[3])
        except ValueError as exc:
            raise DatabaseError(f"Invalid invoice status in database: {row[3]}") from exc

        return Invoice(
            id=row[0],
            customer_id=str(row[1]),
            amount=int(row[2]),
            status=status,
            date=row[4],
        )

    def _fetchone(
        self,
        *,
        query: str,
        params: Iterable[object],
        log_msg: str,
        log_extra: dict[str, object],
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def _execute(
        self,
        *,
        query: str,
        params: Iterable[object],
        log_msg: str,
        log_extra: dict[str, object],
    ) -> None:
        try:
            with self._get_pool().connection() as conn:
                conn.execute(query, tuple(params))
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def create_invoice(
        self,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
        date: date,
    ) -> Invoice:
        invoice_id = uuid4()

        row = self._fetchone(
            query=f"""
                INSERT INTO invoices (id, customer_id, amount, status, date)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING {_INVOICE_COLUMNS}
            """,
            params=(invoice_id, customer_id, amount, status.value, date),
            log_msg="PostgresInvoiceRepository: create_invoice failed",
            log_extra={"invoice_id": str(invoice_id), "customer_id": customer_id},
        )

        if not row:
            raise DatabaseError(
                "PostgresInvoiceRepository: create_invoice failed (no row returned)"
            )

        return self._row_to_invoice(row)

    def update_invoice(
        self,
        invoice_id: str,
        *,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> None:
        self._execute(
            query="""
                UPDATE invoices
                SET customer_id = %s, amount = %s, status = %s
                WHERE id = %s
            """,
            params=(customer_id, amount, status.value, invoice_id),
            log_msg="PostgresInvoiceRepository: update_invoice failed",
            log_extra={"invoice_id": invoice_id, "customer_id": customer_id},
        )

    def delete_invoice(self, invoice_id: str) -> None:
        self._execute(
            query="DELETE FROM invoices WHERE id = %s",
            params=(invoice_id,),
            log_msg="PostgresInvoiceRepository: delete_invoice failed",
            log_extra={"invoice_id": invoice_id},
        )

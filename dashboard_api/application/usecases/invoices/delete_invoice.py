"""
===============================================================================
USE CASE: Delete Invoice
===============================================================================

Class:
    DeleteInvoiceUseCase

Responsibilities:
    - Delete the invoice with the given id (no further input validation).
    - Revalidate the invoice list on success.
    - Stay on the page: the outcome is always a rendered message.

Collaborators:
    - InvoiceRepository.delete_invoice(invoice_id)
    - ViewRevalidator.revalidate_path(path)
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.repositories import InvoiceRepository
from ....domain.services import ViewRevalidator
from ...form_state import FormState, Rendered
from .invoice_common import INVOICES_PATH

DELETED_MESSAGE = "Deleted Invoice."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to Delete Invoice."


class DeleteInvoiceUseCase:
    def __init__(
        self, repository: InvoiceRepository, revalidator: ViewRevalidator
    ) -> None:
        self._invoices = repository
        self._views = revalidator

    def execute(self, invoice_id: str) -> Rendered:
        try:
            self._invoices.delete_invoice(invoice_id)
        except DatabaseError as exc:
            logger.warning(
                "delete invoice failed",
                extra={"invoice_id": invoice_id, "error_id": exc.error_id},
            )
            return Rendered(FormState(message=DATABASE_ERROR_MESSAGE))

        self._views.revalidate_path(INVOICES_PATH)
        return Rendered(FormState(message=DELETED_MESSAGE))

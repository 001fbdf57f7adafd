"""
===============================================================================
USE CASE: Update Invoice
===============================================================================

Business Goal:
    Replace customer, amount and status of an existing invoice and send the
    user back to the invoice list. The invoice date is never modified.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateInvoiceUseCase

Responsibilities:
    - Validate customerId / amount / status (same schema as creation).
    - Convert the amount to integer cents.
    - Issue one full update keyed by invoice id.
    - Revalidate the invoice list and redirect to it.

Collaborators:
    - InvoiceRepository.update_invoice(...)
    - ViewRevalidator.revalidate_path(path)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.repositories import InvoiceRepository
from ....domain.services import ViewRevalidator
from ...form_state import FormState, MutationOutcome, Redirect, Rendered
from ...validation import InvoiceForm, validate_form
from .invoice_common import INVOICES_PATH, to_cents

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Update Invoice."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to Update Invoice."


class UpdateInvoiceUseCase:
    def __init__(
        self, repository: InvoiceRepository, revalidator: ViewRevalidator
    ) -> None:
        self._invoices = repository
        self._views = revalidator

    def execute(
        self,
        invoice_id: str,
        previous_state: FormState | None,
        form_data: Mapping[str, Any],
    ) -> MutationOutcome:
        validation = validate_form(InvoiceForm, form_data)
        if not validation.ok:
            return Rendered(
                FormState(errors=validation.errors, message=MISSING_FIELDS_MESSAGE)
            )

        form = validation.data

        try:
            self._invoices.update_invoice(
                invoice_id,
                customer_id=form.customer_id,
                amount=to_cents(form.amount),
                status=form.status,
            )
        except DatabaseError as exc:
            logger.warning(
                "update invoice failed",
                extra={"invoice_id": invoice_id, "error_id": exc.error_id},
            )
            return Rendered(FormState(message=DATABASE_ERROR_MESSAGE))

        self._views.revalidate_path(INVOICES_PATH)
        return Redirect(INVOICES_PATH)

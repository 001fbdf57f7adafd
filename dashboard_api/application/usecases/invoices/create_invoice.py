"""
===============================================================================
USE CASE: Create Invoice
===============================================================================

Business Goal:
    Create an invoice from the "new invoice" form and send the user back to
    the invoice list.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateInvoiceUseCase

Responsibilities:
    - Validate customerId / amount / status (InvoiceForm).
    - Convert the amount to integer cents and stamp today's UTC date.
    - Insert one row through the repository.
    - Revalidate the invoice list and redirect to it.

Collaborators:
    - InvoiceRepository.create_invoice(...)
    - ViewRevalidator.revalidate_path(path)
    - validation.validate_form / InvoiceForm

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    previous_state (ignored), form_data {customerId, amount, status}

Outputs:
    - Redirect("/dashboard/invoices") on success
    - Rendered(FormState(errors, message)) on validation failure
    - Rendered(FormState(message)) on storage failure
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.repositories import InvoiceRepository
from ....domain.services import ViewRevalidator
from ...dates import Today, utc_today
from ...form_state import FormState, MutationOutcome, Redirect, Rendered
from ...validation import InvoiceForm, validate_form
from .invoice_common import INVOICES_PATH, to_cents

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to Create Invoice."


class CreateInvoiceUseCase:
    def __init__(
        self,
        repository: InvoiceRepository,
        revalidator: ViewRevalidator,
        today: Today = utc_today,
    ) -> None:
        self._invoices = repository
        self._views = revalidator
        self._today = today

    def execute(
        self, previous_state: FormState | None, form_data: Mapping[str, Any]
    ) -> MutationOutcome:
        validation = validate_form(InvoiceForm, form_data)
        if not validation.ok:
            return Rendered(
                FormState(errors=validation.errors, message=MISSING_FIELDS_MESSAGE)
            )

        form = validation.data
        amount_in_cents = to_cents(form.amount)

        try:
            invoice = self._invoices.create_invoice(
                customer_id=form.customer_id,
                amount=amount_in_cents,
                status=form.status,
                date=self._today(),
            )
        except DatabaseError as exc:
            logger.warning(
                "create invoice failed", extra={"error_id": exc.error_id}
            )
            return Rendered(FormState(message=DATABASE_ERROR_MESSAGE))

        logger.info("invoice created", extra={"invoice_id": str(invoice.id)})
        self._views.revalidate_path(INVOICES_PATH)
        return Redirect(INVOICES_PATH)

"""
===============================================================================
CRC CARD — interfaces/api/http/routers/invoices.py
===============================================================================

Class/Module:
    Invoice Router

Responsibilities:
    - Expose the invoice form submissions (create / edit / delete).
    - Require a signed-in session.
    - Hand raw form fields to the use case and translate its outcome.

Collaborators:
    - dashboard_api.container (use case factories)
    - identity.sessions.require_session
    - interfaces.api.http.forms
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dashboard_api.application.usecases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from dashboard_api.container import (
    get_create_invoice_use_case,
    get_delete_invoice_use_case,
    get_update_invoice_use_case,
)
from dashboard_api.identity.sessions import SessionClaims, require_session

from ..forms import read_form_fields, to_response

router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"])


@router.post("/create")
def create_invoice(
    fields: dict[str, str] = Depends(read_form_fields),
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
    _session: SessionClaims = Depends(require_session()),
):
    return to_response(use_case.execute(None, fields))


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    fields: dict[str, str] = Depends(read_form_fields),
    use_case: UpdateInvoiceUseCase = Depends(get_update_invoice_use_case),
    _session: SessionClaims = Depends(require_session()),
):
    return to_response(use_case.execute(invoice_id, None, fields))


@router.post("/{invoice_id}/delete")
def delete_invoice(
    invoice_id: str,
    use_case: DeleteInvoiceUseCase = Depends(get_delete_invoice_use_case),
    _session: SessionClaims = Depends(require_session()),
):
    return to_response(use_case.execute(invoice_id))

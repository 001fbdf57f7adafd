"""Invoice mutation handlers."""

from .create_invoice import CreateInvoiceUseCase
from .delete_invoice import DeleteInvoiceUseCase
from .invoice_common import INVOICES_PATH, to_cents
from .update_invoice import UpdateInvoiceUseCase

__all__ = [
    "CreateInvoiceUseCase",
    "DeleteInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "INVOICES_PATH",
    "to_cents",
]

"""
Use Cases Layer (mutation handlers)

Structure
---------
usecases/
├── invoices/   # create / update / delete invoice
├── users/      # create user
└── auth/       # credentials sign-in

Every handler takes the previous form state plus the raw form fields and
returns a MutationOutcome (Redirect | Rendered).
"""

from .auth import AuthenticateUseCase
from .invoices import CreateInvoiceUseCase, DeleteInvoiceUseCase, UpdateInvoiceUseCase
from .users import CreateUserUseCase

__all__ = [
    "AuthenticateUseCase",
    "CreateInvoiceUseCase",
    "CreateUserUseCase",
    "DeleteInvoiceUseCase",
    "UpdateInvoiceUseCase",
]

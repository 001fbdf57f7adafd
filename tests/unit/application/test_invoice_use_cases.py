"""
Name: Invoice Mutation Handler Tests

Responsibilities:
  - Create / update / delete outcomes (Redirect vs Rendered)
  - Amount conversion to integer cents
  - Revalidation only after successful writes
  - Storage failures collapse into form messages
"""

import pytest

from dashboard_api.application.form_state import FormState, Redirect, Rendered
from dashboard_api.application.usecases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from dashboard_api.application.usecases.invoices.invoice_common import to_cents
from dashboard_api.domain.entities import InvoiceStatus

pytestmark = pytest.mark.unit


# =============================================================================
# Create
# =============================================================================


def test_create_invoice_success_redirects(
    invoice_repo, revalidator, fixed_today, valid_invoice_form
):
    use_case = CreateInvoiceUseCase(invoice_repo, revalidator, today=fixed_today)

    outcome = use_case.execute(None, valid_invoice_form)

    assert outcome == Redirect("/dashboard/invoices")
    assert invoice_repo.created == [
        {
            "customer_id": "cust-1",
            "amount": 1250,
            "status": InvoiceStatus.PENDING,
            "date": fixed_today(),
        }
    ]
    assert revalidator.paths == ["/dashboard/invoices"]


def test_create_invoice_validation_failure_does_not_write(
    invoice_repo, revalidator, valid_invoice_form
):
    use_case = CreateInvoiceUseCase(invoice_repo, revalidator)

    outcome = use_case.execute(None, {**valid_invoice_form, "amount": "0"})

    assert isinstance(outcome, Rendered)
    assert outcome.state == FormState(
        errors={"amount": ["Please enter an amount greater than $0."]},
        message="Missing Fields. Failed to Create Invoice.",
    )
    assert invoice_repo.created == []
    assert revalidator.paths == []


def test_create_invoice_status_error_message(invoice_repo, revalidator):
    use_case = CreateInvoiceUseCase(invoice_repo, revalidator)

    outcome = use_case.execute(
        None, {"customerId": "c", "amount": "10", "status": "void"}
    )

    assert outcome.state.errors == {"status": ["Please select an invoice status."]}


def test_create_invoice_database_error(
    failing_invoice_repo, revalidator, valid_invoice_form
):
    use_case = CreateInvoiceUseCase(failing_invoice_repo, revalidator)

    outcome = use_case.execute(None, valid_invoice_form)

    assert outcome == Rendered(
        FormState(message="Database Error: Failed to Create Invoice.")
    )
    assert revalidator.paths == []


def test_create_invoice_ignores_previous_state(
    invoice_repo, revalidator, valid_invoice_form
):
    use_case = CreateInvoiceUseCase(invoice_repo, revalidator)
    previous = FormState(message="old")

    assert use_case.execute(previous, valid_invoice_form) == Redirect(
        "/dashboard/invoices"
    )


@pytest.mark.parametrize(
    "raw, cents",
    [("12.50", 1250), ("0.01", 1), ("0.005", 1), ("19.999", 2000), ("100", 10000)],
)
def test_amount_conversion_to_cents(
    invoice_repo, revalidator, valid_invoice_form, raw, cents
):
    use_case = CreateInvoiceUseCase(invoice_repo, revalidator)

    use_case.execute(None, {**valid_invoice_form, "amount": raw})

    assert invoice_repo.created[0]["amount"] == cents


def test_to_cents_rounds_half_up():
    from decimal import Decimal

    assert to_cents(Decimal("1.005")) == 101
    assert to_cents(Decimal("2.675")) == 268


# =============================================================================
# Update
# =============================================================================


def test_update_invoice_success(invoice_repo, revalidator):
    use_case = UpdateInvoiceUseCase(invoice_repo, revalidator)

    outcome = use_case.execute(
        "inv-1", None, {"customerId": "c2", "amount": "3.10", "status": "paid"}
    )

    assert outcome == Redirect("/dashboard/invoices")
    assert invoice_repo.updated == [("inv-1", "c2", 310, InvoiceStatus.PAID)]
    assert revalidator.paths == ["/dashboard/invoices"]


def test_update_invoice_validation_failure(invoice_repo, revalidator):
    use_case = UpdateInvoiceUseCase(invoice_repo, revalidator)

    outcome = use_case.execute("inv-1", None, {"customerId": "c2"})

    assert outcome.state.message == "Missing Fields. Failed to Update Invoice."
    assert set(outcome.state.errors) == {"amount", "status"}
    assert invoice_repo.updated == []


def test_update_invoice_database_error(
    failing_invoice_repo, revalidator, valid_invoice_form
):
    use_case = UpdateInvoiceUseCase(failing_invoice_repo, revalidator)

    outcome = use_case.execute("inv-1", None, valid_invoice_form)

    assert outcome == Rendered(
        FormState(message="Database Error: Failed to Update Invoice.")
    )
    assert revalidator.paths == []


# =============================================================================
# Delete
# =============================================================================


def test_delete_invoice_success(invoice_repo, revalidator):
    outcome = DeleteInvoiceUseCase(invoice_repo, revalidator).execute("inv-9")

    assert outcome == Rendered(FormState(message="Deleted Invoice."))
    assert invoice_repo.deleted == ["inv-9"]
    assert revalidator.paths == ["/dashboard/invoices"]


def test_delete_invoice_database_error(failing_invoice_repo, revalidator):
    outcome = DeleteInvoiceUseCase(failing_invoice_repo, revalidator).execute("inv-9")

    assert outcome == Rendered(
        FormState(message="Database Error: Failed to Delete Invoice.")
    )
    assert revalidator.paths == []

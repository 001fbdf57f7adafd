"""
Name: Form Validation Tests

Responsibilities:
  - Validate InvoiceForm / UserForm coercion and constraint messages
  - Ensure validate_form never raises on malformed input
"""

from decimal import Decimal

import pytest

from dashboard_api.application.validation import (
    InvoiceForm,
    UserForm,
    validate_form,
)
from dashboard_api.domain.entities import InvoiceStatus, UserProfile

pytestmark = pytest.mark.unit


def test_invoice_form_valid_record(valid_invoice_form):
    result = validate_form(InvoiceForm, valid_invoice_form)

    assert result.ok
    assert result.errors == {}
    assert result.data.customer_id == "cust-1"
    assert result.data.amount == Decimal("12.50")
    assert result.data.status is InvoiceStatus.PENDING


@pytest.mark.parametrize("amount", ["0", "-5", "", "   "])
def test_invoice_amount_must_be_positive(valid_invoice_form, amount):
    result = validate_form(InvoiceForm, {**valid_invoice_form, "amount": amount})

    assert not result.ok
    assert result.errors == {"amount": ["Please enter an amount greater than $0."]}


def test_invoice_missing_amount_is_treated_as_zero(valid_invoice_form):
    form = {k: v for k, v in valid_invoice_form.items() if k != "amount"}

    result = validate_form(InvoiceForm, form)

    assert result.errors == {"amount": ["Please enter an amount greater than $0."]}


def test_invoice_non_numeric_amount_reports_nan(valid_invoice_form):
    result = validate_form(InvoiceForm, {**valid_invoice_form, "amount": "abc"})

    assert result.errors == {"amount": ["Expected number, received nan"]}


def test_invoice_bad_status(valid_invoice_form):
    result = validate_form(InvoiceForm, {**valid_invoice_form, "status": "void"})

    assert result.errors == {"status": ["Please select an invoice status."]}


def test_invoice_empty_form_reports_every_field():
    result = validate_form(InvoiceForm, {})

    assert not result.ok
    assert result.data is None
    assert result.errors == {
        "customerId": ["Please select a customer."],
        "amount": ["Please enter an amount greater than $0."],
        "status": ["Please select an invoice status."],
    }


def test_invoice_ignores_unknown_fields(valid_invoice_form):
    result = validate_form(InvoiceForm, {**valid_invoice_form, "extra": "x"})

    assert result.ok


def test_user_form_valid_record(valid_user_form):
    result = validate_form(UserForm, valid_user_form)

    assert result.ok
    assert result.data.profile is UserProfile.ADMIN
    assert result.data.email == "ada@example.com"


def test_user_form_bad_profile(valid_user_form):
    result = validate_form(UserForm, {**valid_user_form, "profile": "pirate"})

    assert result.errors == {"profile": ["Please select a profile."]}


def test_user_form_missing_fields(valid_user_form):
    result = validate_form(UserForm, {"profile": "vendor"})

    assert set(result.errors) == {"firstname", "lastname", "email", "password"}
    assert result.errors["firstname"] == ["Please enter a first name."]


@pytest.mark.parametrize("email", ["ada", "ada@example", "ada lovelace@example.com"])
def test_user_form_rejects_malformed_email(valid_user_form, email):
    result = validate_form(UserForm, {**valid_user_form, "email": email})

    assert result.errors == {"email": ["Please enter a valid email address."]}


def test_user_form_password_length_boundary(valid_user_form):
    short = validate_form(UserForm, {**valid_user_form, "password": "abcde"})
    exact = validate_form(UserForm, {**valid_user_form, "password": "abcdef"})

    assert short.errors == {
        "password": ["Please enter a password of at least 6 characters."]
    }
    assert exact.ok


def test_user_password_not_in_repr(valid_user_form):
    result = validate_form(UserForm, valid_user_form)

    assert "hunter22" not in repr(result.data)

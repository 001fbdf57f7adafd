"""
Name: In-Memory Repository and View Registry Tests

Responsibilities:
  - Invoice CRUD mirrors SQL semantics (unknown id is a no-op)
  - Email uniqueness raises DatabaseError
  - Stale view registry records and clears paths
"""

from datetime import date
from unittest.mock import patch

import pytest

from dashboard_api.crosscutting.exceptions import DatabaseError
from dashboard_api.domain.entities import InvoiceStatus, NewUser, UserProfile
from dashboard_api.infrastructure.repositories import (
    InMemoryInvoiceRepository,
    InMemoryUserRepository,
)
from dashboard_api.infrastructure.views import InMemoryViewRevalidator

pytestmark = pytest.mark.unit


def _create(repo, amount=100):
    return repo.create_invoice(
        customer_id="c1", amount=amount, status=InvoiceStatus.PENDING, date=date(2024, 1, 2)
    )


def test_invoice_create_update_delete():
    repo = InMemoryInvoiceRepository()
    invoice = _create(repo)
    invoice_id = str(invoice.id)

    repo.update_invoice(invoice_id, customer_id="c2", amount=900, status=InvoiceStatus.PAID)
    updated = repo.get(invoice_id)

    assert updated.customer_id == "c2"
    assert updated.amount == 900
    assert updated.status is InvoiceStatus.PAID
    assert updated.date == date(2024, 1, 2)

    repo.delete_invoice(invoice_id)
    assert repo.get(invoice_id) is None
    assert repo.list_all() == []


def test_invoice_ids_are_unique():
    repo = InMemoryInvoiceRepository()

    ids = {_create(repo).id for _ in range(20)}

    assert len(ids) == 20


def test_invoice_unknown_id_is_noop():
    repo = InMemoryInvoiceRepository()
    _create(repo)

    repo.update_invoice("missing", customer_id="x", amount=1, status=InvoiceStatus.PAID)
    repo.delete_invoice("missing")

    assert len(repo.list_all()) == 1


def _user(email="ada@example.com"):
    return NewUser(
        firstname="Ada",
        lastname="Lovelace",
        name="Ada Lovelace",
        profile=UserProfile.VENDOR,
        email=email,
        password_hash="h",
        createddate=date(2024, 1, 2),
    )


def test_user_create_and_lookup():
    repo = InMemoryUserRepository()
    repo.create_user(_user())

    account = repo.get_user_by_email("ada@example.com")

    assert account.name == "Ada Lovelace"
    assert account.profile is UserProfile.VENDOR
    assert repo.get_user_by_email("ADA@example.com") is None


def test_user_duplicate_email():
    repo = InMemoryUserRepository()
    repo.create_user(_user())

    with pytest.raises(DatabaseError):
        repo.create_user(_user())


def test_view_revalidator_tracks_stale_paths():
    views = InMemoryViewRevalidator()

    views.revalidate_path("/dashboard/invoices/")
    views.revalidate_path("/createuser")

    assert views.is_stale("/dashboard/invoices")
    assert views.stale_paths() == ["/createuser", "/dashboard/invoices"]
    assert views.stale_since("/createuser") is not None

    views.mark_fresh("/dashboard/invoices")
    assert not views.is_stale("/dashboard/invoices")
    assert views.stale_since("/dashboard/invoices") is None


def test_view_revalidator_logs_under_view_path():
    views = InMemoryViewRevalidator()

    with patch("dashboard_api.infrastructure.views.logger") as log:
        views.revalidate_path("/createuser")

    log.debug.assert_called_once_with(
        "view revalidated", extra={"view_path": "/createuser"}
    )

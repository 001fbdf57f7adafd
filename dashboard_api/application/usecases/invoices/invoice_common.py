"""
Shared pieces of the invoice mutation handlers.

- INVOICES_PATH: the invoice-list view, revalidated (and navigated to) after
  every successful invoice mutation.
- to_cents: form amounts are decimals in currency units; storage keeps
  integer cents.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

INVOICES_PATH = "/dashboard/invoices"

_CENTS_PER_UNIT = Decimal(100)


def to_cents(amount: Decimal) -> int:
    """round(amount * 100), half away from zero, computed on the exact decimal."""
    return int((amount * _CENTS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP))

"""
============================================================
CRC CARD — 001_dashboard_tables (Alembic migration)
============================================================
Responsibilities:
  - Create `invoices` and `users`, the tables the repositories write to.
  - Enforce at the database what the handlers rely on:
      * unique user email (duplicate -> storage error)
      * status / profile restricted to their enums
      * amount stored as non-negative integer cents

Collaborators:
  - PostgreSQL 13+ (gen_random_uuid() is built in)
  - infrastructure/repositories/postgres/* (column contract)

Policy:
  - Constraint names: pk_<table>, uq_<table>_<col>, ck_<table>_<col>.
  - customer_id is an opaque reference; customers live outside this schema.
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_dashboard_tables"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INVOICE_STATUSES = ("pending", "paid", "overdue")
USER_PROFILES = (
    "admin",
    "subcontractor",
    "customer",
    "builder",
    "vendor",
    "employee",
    "manager",
)


def _in_list(column: str, values: Sequence[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


def upgrade() -> None:
    # =========================================================
    # INVOICES
    # =========================================================
    op.create_table(
        "invoices",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            nullable=False,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("customer_id", sa.String(255), nullable=False),
        sa.Column("amount", sa.BigInteger, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_invoices"),
        sa.CheckConstraint("amount >= 0", name="ck_invoices_amount"),
        sa.CheckConstraint(
            _in_list("status", INVOICE_STATUSES), name="ck_invoices_status"
        ),
    )
    op.create_index("ix_invoices_customer_id", "invoices", ["customer_id"])
    op.create_index("ix_invoices_date", "invoices", ["date"])

    # =========================================================
    # USERS
    # =========================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            nullable=False,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("firstname", sa.String(255), nullable=False),
        sa.Column("lastname", sa.String(255), nullable=False),
        sa.Column("name", sa.String(511), nullable=False),
        sa.Column("profile", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        # One-way hash only (argon2id encoded string).
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("createddate", sa.Date, nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(_in_list("profile", USER_PROFILES), name="ck_users_profile"),
    )


def downgrade() -> None:
    op.drop_table("users")
    op.drop_index("ix_invoices_date", table_name="invoices")
    op.drop_index("ix_invoices_customer_id", table_name="invoices")
    op.drop_table("invoices")

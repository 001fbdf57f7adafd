"""
PostgreSQL Repository Implementations.

Raw parameterized SQL over the psycopg connection pool.
"""

from .invoice import PostgresInvoiceRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresInvoiceRepository",
    "PostgresUserRepository",
]

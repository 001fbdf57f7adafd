"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .invoice import InMemoryInvoiceRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInvoiceRepository",
    "InMemoryUserRepository",
]

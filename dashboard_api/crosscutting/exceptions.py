"""
===============================================================================
MODULE: Typed backend exceptions (internal errors)
===============================================================================

Goal
----
Consistent internal exceptions with:
- a stable error_code
- an error_id for log correlation
- a human message (never carrying secrets)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  DashboardError + subclasses

Responsibilities:
  - Standardize internal errors that are later mapped to HTTP
  - Generate error_id for tracing

Collaborators:
  - infrastructure/repositories (raise DatabaseError)
  - application/usecases (collapse DatabaseError into form messages)
  - api/exception_handlers.py (maps escaped errors to problem+json)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class DashboardError(Exception):
    """Base for internal system errors: error_code + error_id + message."""

    error_code: str = "DASHBOARD_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(DashboardError):
    """Storage errors (connection, query, constraint, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"

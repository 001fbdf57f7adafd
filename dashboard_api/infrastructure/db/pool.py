"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Component:
  PostgreSQL connection pool (process singleton)

Responsibilities:
  - Initialize, expose and close the connection pool.
  - Configure each connection with a statement_timeout.

Collaborators:
  - psycopg_pool.ConnectionPool
  - crosscutting.config.get_settings (statement timeout)

Principles:
  - Fail fast (double init, use before init)
  - One pool per process
===============================================================================
"""

from __future__ import annotations

import threading
from typing import Optional

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError

_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _configure_connection(conn) -> None:
    """Runs for every new pooled connection."""
    from ...crosscutting.config import get_settings

    timeout_ms = int(get_settings().db_statement_timeout_ms)
    if timeout_ms > 0:
        conn.execute(f"SET statement_timeout = {timeout_ms}")
        conn.commit()


def init_pool(database_url: str, min_size: int, max_size: int) -> ConnectionPool:
    """Initialize the pool (once per process)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("The pool is already initialized.")

        logger.info(
            "initializing DB pool",
            extra={"min_size": min_size, "max_size": max_size},
        )

        _pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=_configure_connection,
            open=True,
        )

        logger.info(
            "DB pool initialized",
            extra={"min_size": min_size, "max_size": max_size},
        )

        return _pool


def get_pool() -> ConnectionPool:
    if _pool is None:
        raise PoolNotInitializedError("Pool not initialized. Call init_pool() first.")
    return _pool


def close_pool() -> None:
    """Close the pool (idempotent)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("closing DB pool")
            try:
                _pool.close()
            finally:
                _pool = None
            logger.info("DB pool closed")


def reset_pool() -> None:
    """Reset for tests."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            try:
                _pool.close()
            except Exception:
                logger.warning("error closing DB pool during reset", exc_info=True)
        _pool = None


def ping() -> bool:
    """Round-trip `SELECT 1` on a pooled connection (raises if unavailable)."""
    with get_pool().connection() as conn:
        conn.execute("SELECT 1")
    return True

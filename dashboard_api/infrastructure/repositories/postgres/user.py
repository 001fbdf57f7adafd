"""
============================================================
CRC CARD — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Insert users created through the registration form.
  - Load users by email for sign-in.
  - Run parameterized SQL against `users` (contract with migrations).
  - Map raw rows -> `UserAccount` and validate `UserProfile`.
  - Wrap failures in `DatabaseError` with structured logging.

Collaborators:
  - psycopg_pool.ConnectionPool (injected, or the global pool)
  - domain.entities.NewUser / UserAccount / UserProfile
  - crosscutting.exceptions.DatabaseError
  - crosscutting.logger.logger

Constraints / Notes:
  - Pure repository: no business rules (name derivation, hashing).
  - Returns None when the user does not exist.
  - Duplicate emails violate the unique constraint; that error is wrapped in
    DatabaseError like any other (callers do not distinguish).
  - Never log the password hash.
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import NewUser, UserAccount, UserProfile

_USER_COLUMNS = "email, name, profile, password, firstname, lastname, createddate"


class PostgresUserRepository:
    """R: PostgreSQL implementation of UserRepository."""

    def __init__(self, pool: Optional[ConnectionPool] = None) -> None:
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    @staticmethod
    def _row_to_account(row: tuple) -> UserAccount:
        # R: Strict profile casting protects against schema drift / bad data.
        try:
            profile = UserProfile(row[2])
        except ValueError as exc:
            raise DatabaseError(f"Invalid user profile in database: {row[2]}") from exc

        return UserAccount(
            email=row[0],
            name=row[1],
            profile=profile,
            password_hash=row[3],
            firstname=row[4] or "",
            lastname=row[5] or "",
            createddate=row[6],
        )

    def _run(
        self,
        *,
        query: str,
        params: Iterable[object],
        fetch: bool,
        log_msg: str,
        log_extra: dict[str, object],
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                cursor = conn.execute(query, tuple(params))
                return cursor.fetchone() if fetch else None
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def create_user(self, user: NewUser) -> None:
        self._run(
            query="""
                INSERT INTO users
                    (firstname, lastname, name, profile, email, password, createddate)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
            """,
            params=(
                user.firstname,
                user.lastname,
                user.name,
                user.profile.value,
                user.email,
                user.password_hash,
                user.createddate,
            ),
            fetch=False,
            log_msg="PostgresUserRepository: create_user failed",
            log_extra={"email": user.email, "profile": user.profile.value},
        )

    def get_user_by_email(self, email: str) -> Optional[UserAccount]:
        row = self._run(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE email = %s
            """,
            params=(email,),
            fetch=True,
            log_msg="PostgresUserRepository: get_user_by_email failed",
            log_extra={"email": email},
        )
        return self._row_to_account(row) if row else None

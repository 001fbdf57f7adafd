"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Keep users in memory keyed by email (tests / local dev).
  - Enforce email uniqueness the way the `users` unique index does.

Collaborators:
  - domain.entities.NewUser, UserAccount
  - crosscutting.exceptions.DatabaseError (duplicate email)

Constraints:
  - Thread-safe (Lock).
  - Email lookup is exact (no case folding), as in Postgres.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Optional

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import NewUser, UserAccount


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, UserAccount] = {}

    def create_user(self, user: NewUser) -> None:
        with self._lock:
            if user.email in self._users:
                raise DatabaseError(
                    "InMemoryUserRepository: create_user failed (duplicate email)"
                )
            self._users[user.email] = UserAccount(
                email=user.email,
                name=user.name,
                profile=user.profile,
                password_hash=user.password_hash,
                firstname=user.firstname,
                lastname=user.lastname,
                createddate=user.createddate,
            )

    def get_user_by_email(self, email: str) -> Optional[UserAccount]:
        with self._lock:
            return self._users.get(email)

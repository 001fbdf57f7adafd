"""
===============================================================================
CRC CARD — identity/passwords.py
===============================================================================

Module:
    Password hashing (Argon2id)

Responsibilities:
    - Hash plaintext passwords before storage.
    - Verify a plaintext password against a stored hash.

Collaborators:
    - argon2.PasswordHasher
    - container.py (built once from Settings costs)
    - application/usecases/users/create_user.py (hash)
    - identity/credentials.py (verify)

Notes:
    - Cost is configurable (time/memory). The defaults take roughly as long as
      bcrypt with work factor 10 on commodity hardware.
    - Never log plaintext or hashes.
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class Argon2PasswordHasher:
    """PasswordHasher port implementation on top of argon2-cffi."""

    def __init__(self, *, time_cost: int = 3, memory_cost: int = 65536) -> None:
        self._hasher = PasswordHasher(time_cost=time_cost, memory_cost=memory_cost)

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False


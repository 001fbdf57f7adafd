"""User mutation handlers."""

from .create_user import CREATE_USER_PATH, CreateUserUseCase

__all__ = ["CREATE_USER_PATH", "CreateUserUseCase"]

"""
===============================================================================
CRC CARD — dashboard_api/container.py (Composition Root / manual DI)
===============================================================================

Responsibilities:
  - Compose dependencies (repositories, services, adapters) following DIP.
  - Expose factories for FastAPI (Depends).
  - Keep singletons cached (lru_cache) for shared resources.
  - Centralize runtime decisions based on Settings.

Collaborators:
  - crosscutting.config.get_settings
  - domain.repositories.* / domain.services.* (ports)
  - infrastructure.* and identity.* (implementations)
  - application.usecases.* (mutation handlers)

Notes:
  - No business logic here.
  - No FastAPI imports here (factories only).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.dates import Today, local_today_factory, utc_today
from .application.usecases import (
    AuthenticateUseCase,
    CreateInvoiceUseCase,
    CreateUserUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import InvoiceRepository, UserRepository
from .domain.services import AuthProvider
from .identity.credentials import CredentialsAuthProvider
from .identity.passwords import Argon2PasswordHasher
from .identity.sessions import issue_session
from .infrastructure.repositories import (
    InMemoryInvoiceRepository,
    InMemoryUserRepository,
    PostgresInvoiceRepository,
    PostgresUserRepository,
)
from .infrastructure.views import InMemoryViewRevalidator


def _is_test_env() -> bool:
    """app_env in {"test", "testing", "ci"} selects in-memory adapters."""
    return get_settings().is_test()


# =============================================================================
# Repositories (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_invoice_repository() -> InvoiceRepository:
    """Invoice repository (in-memory in test; Postgres at runtime)."""
    if _is_test_env():
        return InMemoryInvoiceRepository()
    return PostgresInvoiceRepository()


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """User repository (in-memory in test; Postgres at runtime)."""
    if _is_test_env():
        return InMemoryUserRepository()
    return PostgresUserRepository()


# =============================================================================
# Services (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_view_revalidator() -> InMemoryViewRevalidator:
    return InMemoryViewRevalidator()


@lru_cache(maxsize=1)
def get_password_hasher() -> Argon2PasswordHasher:
    settings = get_settings()
    return Argon2PasswordHasher(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
    )


@lru_cache(maxsize=1)
def get_auth_provider() -> AuthProvider:
    return CredentialsAuthProvider(
        get_user_repository(),
        verify=get_password_hasher().verify,
        issue=issue_session,
    )


def get_invoice_clock() -> Today:
    return utc_today


def get_user_clock() -> Today:
    return local_today_factory(get_settings().local_timezone)


# =============================================================================
# Use cases (one instance per request; cheap to build)
# =============================================================================


def get_create_invoice_use_case() -> CreateInvoiceUseCase:
    return CreateInvoiceUseCase(
        repository=get_invoice_repository(),
        revalidator=get_view_revalidator(),
        today=get_invoice_clock(),
    )


def get_update_invoice_use_case() -> UpdateInvoiceUseCase:
    return UpdateInvoiceUseCase(
        repository=get_invoice_repository(),
        revalidator=get_view_revalidator(),
    )


def get_delete_invoice_use_case() -> DeleteInvoiceUseCase:
    return DeleteInvoiceUseCase(
        repository=get_invoice_repository(),
        revalidator=get_view_revalidator(),
    )


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(
        repository=get_user_repository(),
        password_hasher=get_password_hasher(),
        revalidator=get_view_revalidator(),
        today=get_user_clock(),
    )


def get_authenticate_use_case() -> AuthenticateUseCase:
    return AuthenticateUseCase(provider=get_auth_provider())


def reset_container() -> None:
    """Drop cached singletons (tests)."""
    for factory in (
        get_invoice_repository,
        get_user_repository,
        get_view_revalidator,
        get_password_hasher,
        get_auth_provider,
    ):
        factory.cache_clear()

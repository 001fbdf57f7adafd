"""Sign-in handler."""

from .authenticate import (
    CREDENTIALS_PROVIDER,
    DASHBOARD_PATH,
    AuthenticateUseCase,
)

__all__ = ["AuthenticateUseCase", "CREDENTIALS_PROVIDER", "DASHBOARD_PATH"]

"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - api/main.py: reads settings for CORS, pool sizing and startup validation
  - container.py: reads settings to choose repositories and hashing cost
  - identity/sessions.py: reads session secret, TTL and cookie settings
  - crosscutting/logger.py: reads log level and format

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string
        app_env: Application environment (development/test/production)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        log_level: Root level for the application logger (default: INFO)
        log_json: Emit JSON log lines (default: True)
        db_pool_min_size: Minimum pooled connections (default: 2)
        db_pool_max_size: Maximum pooled connections (default: 10)
        db_statement_timeout_ms: Per-statement timeout (default: 30s)
        local_timezone: IANA zone used for user creation dates ("" = host local)
        password_hash_time_cost: Argon2 iterations (default: 3)
        password_hash_memory_cost: Argon2 memory in KiB (default: 64MiB)
        auth_secret: Secret for signing session tokens
        session_ttl_minutes: Session lifetime in minutes
        session_cookie_name: Cookie carrying the session token
        session_cookie_secure: Set Secure on the session cookie
    """

    # Required (no defaults)
    database_url: str

    # Environment
    app_env: str = "development"

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False

    # Observability
    log_level: str = "INFO"
    log_json: bool = True

    # Database - Connection Pool
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Dates
    local_timezone: str = ""

    # Security - Password hashing (argon2id)
    password_hash_time_cost: int = 3
    password_hash_memory_cost: int = 65536

    # Security - Sessions
    auth_secret: str = "dev-secret"
    session_ttl_minutes: int = 30
    session_cookie_name: str = "session_token"
    session_cookie_secure: bool = False

    @field_validator("db_pool_min_size", "db_pool_max_size")
    @classmethod
    def pool_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("pool sizes must be greater than 0")
        return v

    @field_validator("password_hash_time_cost", "password_hash_memory_cost")
    @classmethod
    def hash_cost_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("password hash costs must be greater than 0")
        return v

    @field_validator("local_timezone")
    @classmethod
    def local_timezone_must_exist(cls, v: str) -> str:
        zone = (v or "").strip()
        if not zone:
            return ""
        try:
            ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {zone}") from exc
        return zone

    @model_validator(mode="after")
    def validate_pool_bounds(self):
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError(
                f"db_pool_min_size ({self.db_pool_min_size}) must not exceed "
                f"db_pool_max_size ({self.db_pool_max_size})"
            )
        return self

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        insecure_secrets = {"dev-secret", "changeme", "change-me", "secret"}
        secret = (self.auth_secret or "").strip()
        if not secret or secret in insecure_secrets:
            raise ValueError(
                "AUTH_SECRET must be set to a strong, non-default value in production"
            )
        if len(secret) < 32:
            raise ValueError("AUTH_SECRET must be at least 32 characters in production")
        if not self.session_cookie_secure:
            raise ValueError("SESSION_COOKIE_SECURE must be true in production")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()

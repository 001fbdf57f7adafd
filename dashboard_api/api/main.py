"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize the FastAPI application (title, version, lifespan)
  - Configure middleware (request context, CORS)
  - Mount the form submission routers
  - Expose the health check endpoint

Collaborators:
  - FastAPI / CORSMiddleware
  - RequestContextMiddleware: request id and logging context
  - interfaces.api.http.router: invoices, users and sign-in forms
  - infrastructure.db.pool: pool lifecycle

Notes:
  - Middleware order: RequestContext -> CORS -> routes
  - The pool is not opened in the test environment (in-memory repositories)
  - /healthz follows the Kubernetes health check convention
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool, ping
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle: opens and closes the DB pool."""
    settings = get_settings()

    use_pool = not settings.is_test()
    if use_pool:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        logger.info(
            "Dashboard API starting up",
            extra={
                "app_env": settings.app_env,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
                "in_memory": not use_pool,
            },
        )
        yield
    finally:
        if use_pool:
            close_pool()
        logger.info("Dashboard API shutting down")


def _get_allowed_origins() -> list[str]:
    """CORS origins from settings, with a fallback for import-time errors."""
    try:
        return get_settings().get_allowed_origins_list()
    except Exception:
        return ["http://localhost:3000"]


app = FastAPI(
    title="Dashboard API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "invoices", "description": "Invoice forms (session required)"},
        {"name": "users", "description": "User registration form"},
        {"name": "auth", "description": "Credentials sign-in"},
    ],
)

# R: Middleware order (bottom = first to execute)
app.add_middleware(RequestContextMiddleware)

try:
    _cors_allow_credentials = get_settings().cors_allow_credentials
except Exception:
    _cors_allow_credentials = False
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=_cors_allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(router)

register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    Health check verifying the database.

    Returns:
        ok: True if the database answered
        db: "connected" or "disconnected"
        request_id: Correlation ID for this request
    """
    db_status = "disconnected"
    try:
        if ping():
            db_status = "connected"
    except Exception as e:
        logger.warning("Health check: DB unavailable", extra={"error": str(e)})

    return {
        "ok": db_status == "connected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }

"""ASGI entry point: `uvicorn dashboard_api.main:app`."""

from .api.main import app

__all__ = ["app"]

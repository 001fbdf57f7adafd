"""
===============================================================================
CRC CARD — dashboard_api/context.py (Request-scoped context)
===============================================================================

Responsibilities:
  - Keep request-scoped context in ContextVars (async-safe).
  - Let logs correlate with a request without threading parameters through
    every handler.
  - Provide small helpers: set_request_context(), get_context_dict(),
    clear_context().

Collaborators:
  - crosscutting.middleware: sets request_id/method/path when a request starts.
  - crosscutting.logger: enriches every log line via get_context_dict().

Constraints:
  - Only primitive strings, for safe JSON serialization.
  - Empty defaults ("") instead of None.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_METHOD: Final[str] = "method"
_CTX_PATH: Final[str] = "path"


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """Empty strings mean "not available"."""
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def get_context_dict() -> dict[str, str]:
    """Current context as a dict, skipping empty keys."""
    ctx: dict[str, str] = {}

    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    if val := http_method_var.get():
        ctx[_CTX_METHOD] = val
    if val := http_path_var.get():
        ctx[_CTX_PATH] = val

    return ctx


def clear_context() -> None:
    """Reset at the end of a request so context never leaks between requests."""
    request_id_var.set("")
    http_method_var.set("")
    http_path_var.set("")

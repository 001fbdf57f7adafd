"""
===============================================================================
MUTATION OUTCOMES (Shared Result Models)
===============================================================================

Name:
    Form state and mutation outcomes

Business Goal:
    Give every mutation handler one explicit, typed return contract instead of
    unwinding the stack to trigger navigation:
      - Redirect(path): the caller must navigate to `path`.
      - Rendered(state): the caller stays on the form and renders `state`.

Why (Context):
    - Handlers never raise for expected failures (validation, storage).
    - Presentation adapters (HTTP routers) map outcomes to responses in one
      place; unit tests assert on plain values.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    form_state models (module)

Responsibilities:
    - FormState: field errors + message, or a success message. Transient,
      rebuilt on every submission.
    - Redirect / Rendered: tagged outcome variants.

Collaborators:
    - application.usecases.*: build outcomes.
    - interfaces.api.http.routers.*: translate outcomes into HTTP responses.
    - domain.entities.Session: carried by the sign-in redirect.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from ..domain.entities import Session

FieldErrors = Dict[str, List[str]]


@dataclass(frozen=True)
class FormState:
    """
    UI-facing result of one submission.

    Contract:
      - validation failure => errors + message
      - storage failure / informational => message only
      - success without navigation => success only
    """

    errors: FieldErrors | None = None
    message: str | None = None
    success: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializable view with unset keys omitted."""
        out: dict[str, Any] = {}
        if self.errors is not None:
            out["errors"] = {field: list(msgs) for field, msgs in self.errors.items()}
        if self.message is not None:
            out["message"] = self.message
        if self.success is not None:
            out["success"] = self.success
        return out


@dataclass(frozen=True)
class Redirect:
    """Navigate to `path`. Sign-in attaches the issued session."""

    path: str
    session: Session | None = None


@dataclass(frozen=True)
class Rendered:
    """
    Stay on the page and render `state`.

    Sign-in renders a bare error string; every other handler renders a FormState.
    """

    state: FormState | str


MutationOutcome = Union[Redirect, Rendered]

"""
============================================================
CRC CARD — infrastructure/views.py
============================================================
Class: InMemoryViewRevalidator

Responsibilities:
  - Implement ViewRevalidator.revalidate_path(path): record that the view
    rendered at `path` is stale.
  - Let a renderer consume the signal: is_stale / stale_paths / mark_fresh.

Collaborators:
  - domain.services.ViewRevalidator (contract)
  - crosscutting.logger

Constraints:
  - Thread-safe (Lock); one registry per process.
  - Paths are stored as given, with trailing "/" removed (except root).
============================================================
"""

from __future__ import annotations

import time
from threading import Lock
from typing import Dict, Optional

from ..crosscutting.logger import logger


def _normalize(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path


class InMemoryViewRevalidator:
    """Registry of stale view paths (path -> epoch seconds when invalidated)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._stale: Dict[str, float] = {}

    def revalidate_path(self, path: str) -> None:
        key = _normalize(path)
        with self._lock:
            self._stale[key] = time.time()
        logger.debug("view revalidated", extra={"view_path": key})

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return _normalize(path) in self._stale

    def stale_since(self, path: str) -> Optional[float]:
        with self._lock:
            return self._stale.get(_normalize(path))

    def stale_paths(self) -> list[str]:
        with self._lock:
            return sorted(self._stale)

    def mark_fresh(self, path: str) -> None:
        with self._lock:
            self._stale.pop(_normalize(path), None)

"""Calendar-date helpers used by mutation handlers (injectable as clocks)."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable
from zoneinfo import ZoneInfo

Today = Callable[[], date]


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def local_today_factory(timezone_name: str = "") -> Today:
    """
    Build a clock returning the current date in `timezone_name`.

    An empty name means the host's local timezone.
    """
    zone = ZoneInfo(timezone_name) if timezone_name else None

    def today() -> date:
        if zone is None:
            return datetime.now().astimezone().date()
        return datetime.now(zone).date()

    return today

"""Protocol interfaces for the ShiftPay collaborators.

The classification core only talks to holiday data through these Protocols;
structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any, Protocol, runtime_checkable

from shiftpay.core.types import Year


# ---------------------------------------------------------------------------
# Holiday data source
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayProvider(Protocol):
    """External source of festive dates.

    Entries are ``HolidayDate`` models or ``{"year", "month", "day"}`` dicts.
    Must raise rather than return partial data when it cannot answer.
    """

    def get_holidays(self, year: Year) -> list[Any]: ...


# ---------------------------------------------------------------------------
# Shared holiday cache
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayCache(Protocol):
    """Cross-process cache of resolved holiday sets (Redis-compatible)."""

    def load(self, year: Year) -> frozenset[date] | None: ...

    def store(self, year: Year, dates: Iterable[date], ttl: int) -> None: ...

    def evict(self, year: Year) -> None: ...


# ---------------------------------------------------------------------------
# Holiday calendar (what the classifier consumes)
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayCalendar(Protocol):
    """Resolved, cached view of festive dates keyed by year."""

    def holidays_for(self, year: Year) -> frozenset[date]: ...

    def is_holiday(self, day: date) -> bool: ...

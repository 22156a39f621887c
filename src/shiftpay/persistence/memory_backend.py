"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from datetime import date
from typing import Any

from shiftpay.core.exceptions import CacheError


class MemoryHolidayCache:
    """Dict-backed IHolidayCache for unit tests."""

    def __init__(self) -> None:
        self._store: dict[int, frozenset[date]] = {}
        self.ttls: dict[int, int] = {}
        self.fail = False

    def load(self, year: int) -> frozenset[date] | None:
        if self.fail:
            raise CacheError(f"memory cache down (year={year})")
        return self._store.get(year)

    def store(self, year: int, dates: Iterable[date], ttl: int) -> None:
        if self.fail:
            raise CacheError(f"memory cache down (year={year})")
        self._store[year] = frozenset(dates)
        self.ttls[year] = ttl

    def evict(self, year: int) -> None:
        self._store.pop(year, None)
        self.ttls.pop(year, None)


class MemoryHolidayProvider:
    """Canned-response IHolidayProvider that counts calls per year.

    Years listed in ``failing_years`` raise; unknown years return an empty list.
    ``delay`` slows each call down so concurrent misses overlap in tests;
    ``max_in_flight`` records the most calls that were ever running at once.
    """

    def __init__(
        self,
        holidays: dict[int, list[Any]] | None = None,
        failing_years: Iterable[int] = (),
        delay: float = 0.0,
    ) -> None:
        self._holidays = holidays or {}
        self._failing_years = set(failing_years)
        self._delay = delay
        self._lock = threading.Lock()
        self.calls: dict[int, int] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    def get_holidays(self, year: int) -> list[Any]:
        with self._lock:
            self.calls[year] = self.calls.get(year, 0) + 1
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self._delay:
                time.sleep(self._delay)
            if year in self._failing_years:
                raise ConnectionError(f"holiday source unreachable for {year}")
            return list(self._holidays.get(year, []))
        finally:
            with self._lock:
                self.in_flight -= 1

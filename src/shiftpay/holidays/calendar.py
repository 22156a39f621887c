"""HolidayCalendar — cached, validated view over an IHolidayProvider.

Lookups go through three levels: the in-process per-year entry, then the
optional shared cache (Redis), then the provider. Entries are immutable
frozensets once stored. A miss for a given year is resolved by exactly one
thread at a time; other threads asking for the same year wait on its lock and
then read the stored entry.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError

from shiftpay.core.exceptions import CacheError, HolidayLookupError
from shiftpay.core.protocols import IHolidayCache, IHolidayProvider
from shiftpay.models.holiday import HolidayDate

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """IHolidayCalendar backed by a provider and an optional shared cache."""

    DEFAULT_TTL = 86400  # 1 day

    def __init__(
        self,
        provider: IHolidayProvider,
        shared_cache: IHolidayCache | None = None,
        ttl_seconds: int = DEFAULT_TTL,
    ) -> None:
        self._provider = provider
        self._shared_cache = shared_cache
        self._ttl = ttl_seconds
        self._entries: dict[int, frozenset[date]] = {}
        self._guard = threading.Lock()
        self._year_locks: dict[int, threading.Lock] = {}
        self._generation = 0

    @property
    def cached_years(self) -> list[int]:
        return sorted(self._entries)

    def holidays_for(self, year: int) -> frozenset[date]:
        """Festive dates for ``year``.

        Raises:
            HolidayLookupError: the provider failed or returned unusable data.
        """
        entry = self._entries.get(year)
        if entry is not None:
            return entry

        with self._year_lock(year):
            entry = self._entries.get(year)
            if entry is None:
                generation = self._generation
                entry = self._resolve(year)
                with self._guard:
                    # A clear() during the fetch discards this result.
                    if generation == self._generation:
                        self._entries[year] = entry
            return entry

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays_for(day.year)

    def prefetch(self, years: Iterable[int]) -> None:
        for year in sorted(set(years)):
            self.holidays_for(year)

    def clear(self) -> None:
        """Drop every in-process entry (the shared cache is left alone).

        Per-year locks are kept so a fetch already in flight still excludes
        new fetches for its year.
        """
        with self._guard:
            self._generation += 1
            self._entries.clear()

    # ---- internals ----

    def _year_lock(self, year: int) -> threading.Lock:
        with self._guard:
            lock = self._year_locks.get(year)
            if lock is None:
                lock = self._year_locks[year] = threading.Lock()
            return lock

    def _resolve(self, year: int) -> frozenset[date]:
        cached = self._load_shared(year)
        if cached is not None:
            return cached

        try:
            raw = self._provider.get_holidays(year)
        except HolidayLookupError:
            raise
        except Exception as exc:
            raise HolidayLookupError(year, f"provider error: {exc}") from exc

        if not isinstance(raw, list):
            raise HolidayLookupError(
                year, f"provider returned {type(raw).__name__}, expected a list"
            )

        dates = frozenset(d for d in (self._to_date(year, item) for item in raw) if d is not None)
        self._store_shared(year, dates)
        return dates

    @staticmethod
    def _to_date(year: int, item: Any) -> date | None:
        """Validate one provider entry; invalid entries are dropped with a warning."""
        try:
            entry = (
                HolidayDate.model_validate(item) if isinstance(item, Mapping)
                else HolidayDate.model_validate(item, from_attributes=True)
            )
            # date() rejects anything that would not round-trip (Feb 30, month 13, ...)
            day = date(entry.year, entry.month, entry.day)
        except (ValidationError, ValueError, TypeError) as exc:
            logger.warning("Dropping invalid holiday entry for %s: %r (%s)", year, item, exc)
            return None

        if day.year != year:
            logger.warning("Dropping holiday %s returned for year %s", day.isoformat(), year)
            return None
        return day

    def _load_shared(self, year: int) -> frozenset[date] | None:
        if self._shared_cache is None:
            return None
        try:
            cached = self._shared_cache.load(year)
        except CacheError as exc:
            logger.warning("Shared holiday cache unavailable for %s, asking provider: %s", year, exc)
            return None
        if cached is None:
            return None

        stray = {d for d in cached if d.year != year}
        if stray:
            logger.warning(
                "Dropping %d shared-cache holidays outside %s: %s",
                len(stray), year, sorted(d.isoformat() for d in stray),
            )
        return frozenset(cached) - stray

    def _store_shared(self, year: int, dates: frozenset[date]) -> None:
        if self._shared_cache is None:
            return
        try:
            self._shared_cache.store(year, dates, self._ttl)
        except CacheError as exc:
            logger.warning("Could not write %s holidays to shared cache: %s", year, exc)

"""Tests for HolidayCalendar caching, validation and failure policy."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from shiftpay.core.exceptions import HolidayLookupError
from shiftpay.core.protocols import IHolidayCache, IHolidayCalendar, IHolidayProvider
from shiftpay.holidays.calendar import HolidayCalendar
from shiftpay.holidays.static_provider import StaticHolidayProvider
from shiftpay.models.holiday import HolidayDate
from tests.fakes import MemoryHolidayCache, MemoryHolidayProvider

NEW_YEAR = {"year": 2025, "month": 1, "day": 1}
LABOUR_DAY = {"year": 2025, "month": 5, "day": 1}


def test_implementations_satisfy_protocols():
    assert isinstance(HolidayCalendar(MemoryHolidayProvider()), IHolidayCalendar)
    assert isinstance(StaticHolidayProvider(), IHolidayProvider)
    assert isinstance(MemoryHolidayProvider(), IHolidayProvider)
    assert isinstance(MemoryHolidayCache(), IHolidayCache)


class TestLookup:
    def test_returns_frozenset_of_dates(self):
        calendar = HolidayCalendar(MemoryHolidayProvider({2025: [NEW_YEAR, LABOUR_DAY]}))
        holidays = calendar.holidays_for(2025)
        assert holidays == frozenset({date(2025, 1, 1), date(2025, 5, 1)})
        assert isinstance(holidays, frozenset)

    def test_is_holiday(self):
        calendar = HolidayCalendar(MemoryHolidayProvider({2025: [LABOUR_DAY]}))
        assert calendar.is_holiday(date(2025, 5, 1))
        assert not calendar.is_holiday(date(2025, 5, 2))

    def test_accepts_model_entries(self):
        provider = MemoryHolidayProvider({2025: [HolidayDate(year=2025, month=12, day=25)]})
        assert HolidayCalendar(provider).holidays_for(2025) == frozenset({date(2025, 12, 25)})

    def test_year_without_holidays_is_an_empty_set(self):
        assert HolidayCalendar(MemoryHolidayProvider()).holidays_for(2030) == frozenset()


class TestCaching:
    def test_provider_called_once_per_year(self):
        provider = MemoryHolidayProvider({2025: [NEW_YEAR]})
        calendar = HolidayCalendar(provider)
        calendar.holidays_for(2025)
        calendar.holidays_for(2025)
        calendar.is_holiday(date(2025, 7, 1))
        assert provider.calls == {2025: 1}
        assert calendar.cached_years == [2025]

    def test_prefetch_resolves_each_year_once(self):
        provider = MemoryHolidayProvider()
        calendar = HolidayCalendar(provider)
        calendar.prefetch([2026, 2025, 2026])
        assert provider.calls == {2025: 1, 2026: 1}

    def test_clear_forces_refetch(self):
        provider = MemoryHolidayProvider({2025: [NEW_YEAR]})
        calendar = HolidayCalendar(provider)
        calendar.holidays_for(2025)
        calendar.clear()
        assert calendar.cached_years == []
        calendar.holidays_for(2025)
        assert provider.calls == {2025: 2}

    def test_concurrent_misses_fetch_once(self):
        provider = MemoryHolidayProvider({2025: [NEW_YEAR]}, delay=0.05)
        calendar = HolidayCalendar(provider)
        with ThreadPoolExecutor(max_workers=8) as pool:
            answers = list(pool.map(calendar.holidays_for, [2025] * 16))
        assert provider.calls == {2025: 1}
        assert all(a == frozenset({date(2025, 1, 1)}) for a in answers)

    def test_concurrent_misses_for_different_years_do_not_block_each_other(self):
        provider = MemoryHolidayProvider(delay=0.02)
        calendar = HolidayCalendar(provider)
        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(calendar.holidays_for, [2023, 2024, 2025, 2026] * 3))
        assert provider.calls == {2023: 1, 2024: 1, 2025: 1, 2026: 1}

    def test_clear_during_fetch_does_not_start_a_second_fetch(self):
        provider = MemoryHolidayProvider({2025: [NEW_YEAR]}, delay=0.3)
        calendar = HolidayCalendar(provider)

        first = threading.Thread(target=calendar.holidays_for, args=(2025,))
        first.start()
        time.sleep(0.1)
        calendar.clear()
        later = [threading.Thread(target=calendar.holidays_for, args=(2025,)) for _ in range(2)]
        for t in later:
            t.start()
        for t in [first, *later]:
            t.join()

        assert provider.max_in_flight == 1
        # The fetch that straddled clear() is not stored; one refetch serves both waiters.
        assert provider.calls == {2025: 2}
        assert calendar.cached_years == [2025]


class TestEntryValidation:
    @pytest.mark.parametrize(
        "bad_entry",
        [
            {"year": 2025, "month": 2, "day": 30},
            {"year": 2025, "month": 13, "day": 1},
            {"year": 2024, "month": 12, "day": 25},
            {"year": 2025, "month": 5},
            {"year": "2025", "month": "6", "day": "1"},
            {"year": 2025, "month": 12.0, "day": True},
            {"year": 2025, "month": True, "day": 6},
            "2025-05-01",
            None,
        ],
    )
    def test_invalid_entries_are_dropped_with_warning(self, bad_entry, caplog):
        provider = MemoryHolidayProvider({2025: [LABOUR_DAY, bad_entry]})
        with caplog.at_level(logging.WARNING, logger="shiftpay.holidays.calendar"):
            holidays = HolidayCalendar(provider).holidays_for(2025)
        assert holidays == frozenset({date(2025, 5, 1)})
        assert "Dropping" in caplog.text


class TestFailures:
    def test_provider_exception_becomes_lookup_error(self):
        calendar = HolidayCalendar(MemoryHolidayProvider(failing_years=[2025]))
        with pytest.raises(HolidayLookupError) as excinfo:
            calendar.holidays_for(2025)
        assert excinfo.value.year == 2025
        assert "unreachable" in str(excinfo.value)

    def test_failures_are_not_cached(self):
        provider = MemoryHolidayProvider(failing_years=[2025])
        calendar = HolidayCalendar(provider)
        for _ in range(2):
            with pytest.raises(HolidayLookupError):
                calendar.holidays_for(2025)
        assert provider.calls == {2025: 2}
        assert calendar.cached_years == []

    def test_non_list_response_is_rejected(self):
        class DictProvider:
            def get_holidays(self, year):
                return {"year": year}

        with pytest.raises(HolidayLookupError):
            HolidayCalendar(DictProvider()).holidays_for(2025)

    def test_lookup_error_from_provider_passes_through(self):
        with pytest.raises(HolidayLookupError, match="no holiday data bundled"):
            HolidayCalendar(StaticHolidayProvider()).holidays_for(1999)


class TestSharedCache:
    def test_stores_resolved_year_with_ttl(self):
        cache = MemoryHolidayCache()
        calendar = HolidayCalendar(MemoryHolidayProvider({2025: [NEW_YEAR]}), cache, ttl_seconds=60)
        calendar.holidays_for(2025)
        assert cache.load(2025) == frozenset({date(2025, 1, 1)})
        assert cache.ttls[2025] == 60

    def test_shared_hit_skips_provider(self):
        cache = MemoryHolidayCache()
        cache.store(2025, [date(2025, 5, 1)], ttl=60)
        provider = MemoryHolidayProvider()
        calendar = HolidayCalendar(provider, cache)
        assert calendar.holidays_for(2025) == frozenset({date(2025, 5, 1)})
        assert provider.calls == {}

    def test_shared_entry_dates_from_other_years_are_dropped(self, caplog):
        cache = MemoryHolidayCache()
        cache.store(2025, [date(2025, 5, 1), date(2024, 12, 25)], ttl=60)
        calendar = HolidayCalendar(MemoryHolidayProvider(), cache)
        with caplog.at_level(logging.WARNING, logger="shiftpay.holidays.calendar"):
            holidays = calendar.holidays_for(2025)
        assert holidays == frozenset({date(2025, 5, 1)})
        assert "2024-12-25" in caplog.text

    def test_shared_cache_outage_falls_back_to_provider(self, caplog):
        cache = MemoryHolidayCache()
        cache.fail = True
        provider = MemoryHolidayProvider({2025: [NEW_YEAR]})
        with caplog.at_level(logging.WARNING, logger="shiftpay.holidays.calendar"):
            holidays = HolidayCalendar(provider, cache).holidays_for(2025)
        assert holidays == frozenset({date(2025, 1, 1)})
        assert provider.calls == {2025: 1}
        assert "Shared holiday cache unavailable" in caplog.text

    def test_provider_failure_is_not_written_to_shared_cache(self):
        cache = MemoryHolidayCache()
        calendar = HolidayCalendar(MemoryHolidayProvider(failing_years=[2025]), cache)
        with pytest.raises(HolidayLookupError):
            calendar.holidays_for(2025)
        assert cache.load(2025) is None


class TestStaticProvider:
    def test_bundled_years(self):
        assert StaticHolidayProvider().years == [2023, 2024, 2025, 2026]

    def test_2025_holidays(self):
        holidays = HolidayCalendar(StaticHolidayProvider()).holidays_for(2025)
        assert len(holidays) == 17
        assert date(2025, 12, 25) in holidays
        assert date(2025, 5, 4) not in holidays

    def test_custom_table(self):
        provider = StaticHolidayProvider({2030: [(1, 1, "Año Nuevo")]})
        assert provider.get_holidays(2030)[0].name == "Año Nuevo"
        with pytest.raises(HolidayLookupError):
            provider.get_holidays(2025)

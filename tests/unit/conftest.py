"""Unit test fixtures — default rate table and holiday calendars."""

from __future__ import annotations

import pytest

from shiftpay.core.config import RateConfig
from shiftpay.holidays.calendar import HolidayCalendar
from shiftpay.holidays.static_provider import StaticHolidayProvider
from shiftpay.models.rates import RateTable
from tests.fakes import MemoryHolidayProvider


@pytest.fixture
def rates() -> RateTable:
    """Default Colombian rates: threshold 7.66 h, night 21:00-06:00."""
    return RateConfig().to_rate_table()


@pytest.fixture
def no_holidays() -> HolidayCalendar:
    """Calendar whose provider knows no festive dates (Sundays still count)."""
    return HolidayCalendar(MemoryHolidayProvider())


@pytest.fixture
def colombian_calendar() -> HolidayCalendar:
    return HolidayCalendar(StaticHolidayProvider())

"""Base service with common dependency wiring."""

from __future__ import annotations

from typing import Any

from shiftpay.core.config import AppSettings
from shiftpay.core.protocols import IHolidayCalendar
from shiftpay.models.rates import RateTable


class BaseService:
    """Common base for ShiftPay services.

    Settings, the rate table and the holiday calendar are injected at
    construction time; the rate table defaults to the one in settings.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        calendar: IHolidayCalendar,
        rates: RateTable | None = None,
    ) -> None:
        self._settings = settings
        self._calendar = calendar
        self._rates = rates if rates is not None else settings.rates.to_rate_table()

    @property
    def rates(self) -> RateTable:
        return self._rates

    async def health_check(self) -> dict[str, Any]:
        """Return service health status."""
        return {
            "service": self.__class__.__name__,
            "status": "healthy",
            "environment": self._settings.environment,
        }

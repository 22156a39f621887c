"""Pluggable holiday cache backends and calendar wiring."""

from __future__ import annotations

from shiftpay.core.config import AppSettings
from shiftpay.core.protocols import IHolidayCache, IHolidayProvider
from shiftpay.holidays.calendar import HolidayCalendar
from shiftpay.holidays.static_provider import StaticHolidayProvider
from shiftpay.persistence.redis_backend import RedisHolidayCache


def create_holiday_calendar(
    settings: AppSettings | None = None,
    provider: IHolidayProvider | None = None,
) -> HolidayCalendar:
    """Create a HolidayCalendar wired from application settings.

    The bundled static provider is used unless another one is injected.
    """
    if settings is None:
        settings = AppSettings()

    shared_cache: IHolidayCache | None = None
    if settings.holidays.shared_cache == "redis":
        shared_cache = RedisHolidayCache(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
        )

    return HolidayCalendar(
        provider=provider or StaticHolidayProvider(),
        shared_cache=shared_cache,
        ttl_seconds=settings.holidays.cache_ttl_seconds,
    )

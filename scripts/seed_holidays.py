"""Seed the shared Redis holiday cache from the bundled holiday table.

Usage:
    python scripts/seed_holidays.py --host localhost --years 2025 2026
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from shiftpay.core.logging import configure_logging
from shiftpay.core.protocols import IHolidayCache
from shiftpay.holidays.calendar import HolidayCalendar
from shiftpay.holidays.static_provider import StaticHolidayProvider
from shiftpay.persistence.redis_backend import RedisHolidayCache

DEFAULT_TTL = 30 * 86400  # 30 days


def seed_holidays(
    cache: IHolidayCache,
    years: Iterable[int] | None = None,
    ttl: int = DEFAULT_TTL,
    refresh: bool = False,
) -> dict[int, int]:
    """Resolve each year through a HolidayCalendar so the shared cache is filled.

    Returns the number of holidays stored per year.
    """
    provider = StaticHolidayProvider()
    selected = sorted(set(years)) if years else provider.years
    if refresh:
        for year in selected:
            cache.evict(year)

    calendar = HolidayCalendar(provider, shared_cache=cache, ttl_seconds=ttl)
    seeded: dict[int, int] = {}
    for year in selected:
        seeded[year] = len(calendar.holidays_for(year))
        print(f"  {year}: {seeded[year]} holidays")
    return seeded


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the ShiftPay holiday cache in Redis")
    parser.add_argument("--host", default="localhost", help="Redis host")
    parser.add_argument("--port", type=int, default=6379, help="Redis port")
    parser.add_argument("--db", type=int, default=0, help="Redis database index")
    parser.add_argument("--key-prefix", default="shiftpay:holidays:", help="Cache key prefix")
    parser.add_argument("--years", type=int, nargs="*", help="Years to seed (default: all bundled)")
    parser.add_argument("--ttl", type=int, default=DEFAULT_TTL, help="Entry TTL in seconds")
    parser.add_argument("--refresh", action="store_true", help="Evict existing entries first")
    args = parser.parse_args()
    configure_logging()

    cache = RedisHolidayCache(host=args.host, port=args.port, db=args.db, key_prefix=args.key_prefix)

    print("Seeding holidays...")
    seed_holidays(cache, years=args.years, ttl=args.ttl, refresh=args.refresh)
    print("Done!")


if __name__ == "__main__":
    main()

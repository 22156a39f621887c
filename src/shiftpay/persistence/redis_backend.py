"""Redis-backed shared holiday cache implementing IHolidayCache."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date

import redis

from shiftpay.core.exceptions import CacheError


class RedisHolidayCache:
    """Stores each year's holiday set as a JSON list of ISO dates with a TTL."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        key_prefix: str = "shiftpay:holidays:",
    ) -> None:
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, year: int) -> str:
        return f"{self._key_prefix}{year}"

    def load(self, year: int) -> frozenset[date] | None:
        try:
            raw = self._client.get(self._key(year))
        except Exception as exc:
            raise CacheError(f"Redis GET failed for year={year}: {exc}") from exc
        if raw is None:
            return None
        try:
            return frozenset(date.fromisoformat(value) for value in json.loads(raw))
        except (TypeError, ValueError) as exc:
            raise CacheError(f"Corrupt holiday entry in Redis for year={year}: {exc}") from exc

    def store(self, year: int, dates: Iterable[date], ttl: int) -> None:
        payload = json.dumps(sorted(d.isoformat() for d in dates))
        try:
            self._client.setex(self._key(year), ttl, payload)
        except Exception as exc:
            raise CacheError(f"Redis SETEX failed for year={year}: {exc}") from exc

    def evict(self, year: int) -> None:
        try:
            self._client.delete(self._key(year))
        except Exception as exc:
            raise CacheError(f"Redis DELETE failed for year={year}: {exc}") from exc

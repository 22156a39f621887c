"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from shiftpay.persistence.memory_backend import MemoryHolidayCache, MemoryHolidayProvider

__all__ = ["MemoryHolidayCache", "MemoryHolidayProvider"]

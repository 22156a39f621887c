"""Type aliases used across ShiftPay."""

from __future__ import annotations

ShiftId = str
Hours = float
Money = float
Year = int

"""ShiftPay exception hierarchy."""

from __future__ import annotations

from enum import StrEnum

from shiftpay.core.types import ShiftId, Year


class ShiftPayError(Exception):
    """Base exception for all ShiftPay errors."""


class ValidationKind(StrEnum):
    INVALID_INTERVAL = "InvalidInterval"
    MALFORMED_TIME = "MalformedTime"
    BREAK_OUTSIDE_SHIFT = "BreakOutsideShift"


class ShiftValidationError(ShiftPayError):
    """Shift input is malformed or logically inconsistent."""

    def __init__(self, shift_id: ShiftId, kind: ValidationKind, message: str) -> None:
        self.shift_id = shift_id
        self.kind = kind
        self.detail = message
        super().__init__(f"Shift {shift_id}: {message}")


class HolidayLookupError(ShiftPayError):
    """Holiday data for a year could not be resolved into a trustworthy set."""

    def __init__(self, year: Year, message: str) -> None:
        self.year = year
        super().__init__(f"Holiday lookup failed for {year}: {message}")


class CacheError(ShiftPayError):
    """Shared holiday cache operation failed."""

"""Shift classifier — splits every worked minute of a shift into pay buckets.

The shift is scanned in one-minute quanta from start (inclusive) to end
(exclusive). Each quantum is judged at its midpoint (start + 30 s) so that an
hour change, midnight or the overtime threshold falling on a quantum edge is
never ambiguous. Break quanta are skipped entirely: they consume neither worked
time nor threshold budget.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time, timedelta

from shiftpay.core.exceptions import ShiftValidationError, ValidationKind
from shiftpay.core.protocols import IHolidayCalendar
from shiftpay.models.buckets import HourBucket, select_bucket, zero_buckets
from shiftpay.models.rates import RateTable
from shiftpay.models.results import ClassificationResult
from shiftpay.models.shift import ShiftInput

logger = logging.getLogger(__name__)

QUANTUM = timedelta(minutes=1)
HALF_QUANTUM = timedelta(seconds=30)
QUANTUM_HOURS = 1 / 60
WEEKLY_REST_DAY = 6  # Sunday, per date.weekday()

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")


@dataclass(frozen=True)
class BreakWindow:
    """Unpaid break as a time-of-day window, start inclusive, end exclusive."""

    start_minute: int
    end_minute: int

    @property
    def minutes(self) -> int:
        return self.end_minute - self.start_minute

    def contains(self, instant: datetime) -> bool:
        minute_of_day = instant.hour * 60 + instant.minute
        return self.start_minute <= minute_of_day < self.end_minute


def parse_time_of_day(value: str | None) -> time | None:
    """Parse ``HH:MM`` (24h clock). Returns None when malformed."""
    match = _TIME_RE.match(value or "")
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return time(hours, minutes)


def _require_time(shift: ShiftInput, value: str, label: str) -> time:
    parsed = parse_time_of_day(value)
    if parsed is None:
        raise ShiftValidationError(
            shift.shift_id,
            ValidationKind.MALFORMED_TIME,
            f"invalid {label} {value!r} (expected HH:MM)",
        )
    return parsed


def resolve_interval(shift: ShiftInput) -> tuple[datetime, datetime]:
    """Return the gross ``[start, end)`` instants of the shift."""
    start_t = _require_time(shift, shift.start_time, "start time")
    end_t = _require_time(shift, shift.end_time, "end time")

    start = datetime.combine(shift.start_date, start_t)
    end_date = shift.start_date + timedelta(days=1) if shift.ends_next_day else shift.start_date
    end = datetime.combine(end_date, end_t)

    if end <= start:
        raise ShiftValidationError(
            shift.shift_id,
            ValidationKind.INVALID_INTERVAL,
            f"end {end:%Y-%m-%d %H:%M} must be after start {start:%Y-%m-%d %H:%M}",
        )
    return start, end


def resolve_break(shift: ShiftInput) -> BreakWindow | None:
    """Parse the break window; an inverted or empty window counts as no break."""
    if not shift.include_break:
        return None

    break_start = _require_time(shift, shift.break_start_time, "break start time")
    break_end = _require_time(shift, shift.break_end_time, "break end time")
    window = BreakWindow(
        start_minute=break_start.hour * 60 + break_start.minute,
        end_minute=break_end.hour * 60 + break_end.minute,
    )
    if window.minutes <= 0:
        logger.warning(
            "Shift %s: break %s-%s does not end after it starts; ignoring break",
            shift.shift_id, shift.break_start_time, shift.break_end_time,
        )
        return None
    return window


def classify(
    shift: ShiftInput, rates: RateTable, calendar: IHolidayCalendar
) -> ClassificationResult:
    """Classify one shift.

    Raises:
        ShiftValidationError: malformed times, end not after start, or a break
            that does not fall inside the shift.
        HolidayLookupError: holiday data for a year the shift touches could not
            be resolved. Never downgraded to "no holidays".
    """
    start, end = resolve_interval(shift)
    window = resolve_break(shift)

    # Every year touched by a quantum midpoint, resolved before any scanning.
    last_midpoint = end - HALF_QUANTUM
    holidays = {
        year: calendar.holidays_for(year) for year in range(start.year, last_midpoint.year + 1)
    }

    threshold_minutes = rates.daily_threshold_hours * 60
    gross_minutes = (end - start) // QUANTUM
    hours = zero_buckets()
    worked_minutes = 0
    break_minutes = 0

    for index in range(gross_minutes):
        midpoint = start + index * QUANTUM + HALF_QUANTUM

        if window is not None and window.contains(midpoint):
            break_minutes += 1
            continue

        # Worked time at the midpoint is everything before this quantum plus half of it.
        is_overtime = worked_minutes + 0.5 > threshold_minutes
        worked_minutes += 1

        day = midpoint.date()
        is_rest_or_holiday = day.weekday() == WEEKLY_REST_DAY or day in holidays[day.year]
        is_night = rates.is_night_hour(midpoint.hour)

        hours[select_bucket(is_overtime, is_rest_or_holiday, is_night)] += QUANTUM_HOURS

    if window is not None and break_minutes < window.minutes:
        raise ShiftValidationError(
            shift.shift_id,
            ValidationKind.BREAK_OUTSIDE_SHIFT,
            f"break {shift.break_start_time}-{shift.break_end_time} is not inside the shift",
        )

    payments = {
        bucket: 0.0 if bucket is HourBucket.BASE_DAY else hours[bucket] * rates.rate_for(bucket)
        for bucket in HourBucket
    }
    total_payment = sum(
        amount for bucket, amount in payments.items() if bucket is not HourBucket.BASE_DAY
    )

    return ClassificationResult(
        shift_id=shift.shift_id,
        hours_by_bucket=hours,
        payment_by_bucket=payments,
        total_surcharge_and_overtime_payment=total_payment,
        total_worked_hours=worked_minutes / 60,
    )

"""Pay categories a worked minute can fall into."""

from __future__ import annotations

from enum import StrEnum


class HourBucket(StrEnum):
    BASE_DAY = "BaseDay"
    NIGHT_SURCHARGE_BASE = "NightSurchargeBase"
    REST_OR_HOLIDAY_DAY_SURCHARGE_BASE = "RestOrHolidayDaySurchargeBase"
    REST_OR_HOLIDAY_NIGHT_SURCHARGE_BASE = "RestOrHolidayNightSurchargeBase"
    OVERTIME_DAY = "OvertimeDay"
    OVERTIME_NIGHT = "OvertimeNight"
    OVERTIME_REST_OR_HOLIDAY_DAY = "OvertimeRestOrHolidayDay"
    OVERTIME_REST_OR_HOLIDAY_NIGHT = "OvertimeRestOrHolidayNight"


# (is_overtime, is_rest_or_holiday, is_night) -> bucket
BUCKET_TABLE: dict[tuple[bool, bool, bool], HourBucket] = {
    (False, False, False): HourBucket.BASE_DAY,
    (False, False, True): HourBucket.NIGHT_SURCHARGE_BASE,
    (False, True, False): HourBucket.REST_OR_HOLIDAY_DAY_SURCHARGE_BASE,
    (False, True, True): HourBucket.REST_OR_HOLIDAY_NIGHT_SURCHARGE_BASE,
    (True, False, False): HourBucket.OVERTIME_DAY,
    (True, False, True): HourBucket.OVERTIME_NIGHT,
    (True, True, False): HourBucket.OVERTIME_REST_OR_HOLIDAY_DAY,
    (True, True, True): HourBucket.OVERTIME_REST_OR_HOLIDAY_NIGHT,
}


def select_bucket(is_overtime: bool, is_rest_or_holiday: bool, is_night: bool) -> HourBucket:
    return BUCKET_TABLE[(is_overtime, is_rest_or_holiday, is_night)]


def zero_buckets() -> dict[HourBucket, float]:
    """Fresh map with every bucket present at 0.0."""
    return dict.fromkeys(HourBucket, 0.0)

"""Rate table consumed by the shift classifier."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shiftpay.models.buckets import HourBucket


class RateTable(BaseModel):
    """Hourly rate per bucket plus the daily threshold and night window.

    Accepts either the snake_case field names or the camelCase keys used by
    the settings form (``nightSurchargeBase``, ``dailyThresholdHours``, ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    night_surcharge_base: float = Field(0, ge=0, alias="nightSurchargeBase")
    overtime_day: float = Field(0, ge=0, alias="overtimeDay")
    overtime_night: float = Field(0, ge=0, alias="overtimeNight")
    rest_or_holiday_day_surcharge_base: float = Field(
        0, ge=0, alias="restOrHolidayDaySurchargeBase"
    )
    rest_or_holiday_night_surcharge_base: float = Field(
        0, ge=0, alias="restOrHolidayNightSurchargeBase"
    )
    overtime_rest_or_holiday_day: float = Field(0, ge=0, alias="overtimeRestOrHolidayDay")
    overtime_rest_or_holiday_night: float = Field(0, ge=0, alias="overtimeRestOrHolidayNight")
    base_day_rate: float = Field(0, ge=0, alias="baseDayRate")

    daily_threshold_hours: float = Field(7.66, gt=0, alias="dailyThresholdHours")
    night_start_hour: int = Field(21, ge=0, le=23, alias="nightStartHour")
    night_end_hour: int = Field(6, ge=0, le=23, alias="nightEndHour")

    @model_validator(mode="after")
    def _night_window_not_empty(self) -> RateTable:
        if self.night_start_hour == self.night_end_hour:
            raise ValueError("night window must not be empty (nightStartHour == nightEndHour)")
        return self

    def rate_for(self, bucket: HourBucket) -> float:
        return {
            HourBucket.BASE_DAY: self.base_day_rate,
            HourBucket.NIGHT_SURCHARGE_BASE: self.night_surcharge_base,
            HourBucket.REST_OR_HOLIDAY_DAY_SURCHARGE_BASE: self.rest_or_holiday_day_surcharge_base,
            HourBucket.REST_OR_HOLIDAY_NIGHT_SURCHARGE_BASE: self.rest_or_holiday_night_surcharge_base,
            HourBucket.OVERTIME_DAY: self.overtime_day,
            HourBucket.OVERTIME_NIGHT: self.overtime_night,
            HourBucket.OVERTIME_REST_OR_HOLIDAY_DAY: self.overtime_rest_or_holiday_day,
            HourBucket.OVERTIME_REST_OR_HOLIDAY_NIGHT: self.overtime_rest_or_holiday_night,
        }[bucket]

    def is_night_hour(self, hour: int) -> bool:
        if self.night_start_hour > self.night_end_hour:
            return hour >= self.night_start_hour or hour < self.night_end_hour
        return self.night_start_hour <= hour < self.night_end_hour

"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

from shiftpay.models.rates import RateTable


class RateConfig(BaseSettings):
    """Hourly surcharge/overtime rates (COP) and the daily/night boundaries."""

    model_config = {"env_prefix": "SHIFTPAY_RATE_"}

    night_surcharge_base: float = 2166
    overtime_day: float = 7736.41
    overtime_night: float = 10830.98
    rest_or_holiday_day_surcharge_base: float = 4642
    rest_or_holiday_night_surcharge_base: float = 6808
    overtime_rest_or_holiday_day: float = 12378.26
    overtime_rest_or_holiday_night: float = 15472.83
    base_day_rate: float = 0  # covered by the flat salary
    daily_threshold_hours: float = 7.66
    night_start_hour: int = 21
    night_end_hour: int = 6

    def to_rate_table(self) -> RateTable:
        return RateTable(**self.model_dump())


class PeriodConfig(BaseSettings):
    """Quincena-level figures consumed by whoever builds the period summary."""

    model_config = {"env_prefix": "SHIFTPAY_PERIOD_"}

    base_salary_per_period: float = 711750
    transport_allowance_per_period: float = 100000
    health_contribution_rate: float = 0.04
    pension_contribution_rate: float = 0.04


class HolidayConfig(BaseSettings):
    """Holiday calendar caching configuration."""

    model_config = {"env_prefix": "SHIFTPAY_HOLIDAYS_"}

    shared_cache: Literal["none", "redis"] = "none"
    cache_ttl_seconds: int = 86400


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "SHIFTPAY_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "shiftpay:holidays:"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SHIFTPAY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    rates: RateConfig = RateConfig()
    period: PeriodConfig = PeriodConfig()
    holidays: HolidayConfig = HolidayConfig()
    redis: RedisConfig = RedisConfig()

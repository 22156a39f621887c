"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from shiftpay.api.routes import health, payroll
from shiftpay.core.config import AppSettings
from shiftpay.core.logging import configure_logging
from shiftpay.core.protocols import IHolidayProvider
from shiftpay.persistence import create_holiday_calendar
from shiftpay.services.shift_calc import ShiftCalcService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)
    calendar = create_holiday_calendar(settings, provider=app.state.holiday_provider)
    app.state.calendar = calendar
    app.state.service = ShiftCalcService(settings=settings, calendar=calendar)
    yield
    calendar.clear()


def create_app(
    settings: AppSettings | None = None,
    holiday_provider: IHolidayProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="ShiftPay Surcharge & Overtime Calculator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()
    app.state.holiday_provider = holiday_provider
    app.include_router(health.router)
    app.include_router(payroll.router)
    return app

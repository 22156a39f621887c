"""Shift classification and quincena endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shiftpay.models.rates import RateTable
from shiftpay.models.results import (
    AdjustmentItem,
    CalculationError,
    ClassificationResult,
    PeriodReport,
    PeriodSettlement,
)
from shiftpay.models.shift import ShiftInput
from shiftpay.services.shift_calc import ShiftCalcService

router = APIRouter(tags=["payroll"])

_ERROR_STATUS = {"validation": 422, "dependency": 503, "internal": 500}


class PeriodRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    shifts: list[ShiftInput]
    base_salary: Optional[float] = Field(default=None, ge=0)


class SettlementRequest(PeriodRequest):
    include_transport: bool = True
    other_income: list[AdjustmentItem] = Field(default_factory=list)
    other_deductions: list[AdjustmentItem] = Field(default_factory=list)


class SettlementResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    report: PeriodReport
    settlement: Optional[PeriodSettlement] = None


def get_service(request: Request) -> ShiftCalcService:
    return request.app.state.service


@router.get("/rates", response_model=RateTable)
async def get_rates(service: ShiftCalcService = Depends(get_service)) -> RateTable:
    """Return the rate table applied to every classification."""
    return service.rates


@router.post("/shifts/classify", response_model=ClassificationResult)
def classify_shift(shift: ShiftInput, service: ShiftCalcService = Depends(get_service)):
    outcome = service.calculate(shift)
    if isinstance(outcome, CalculationError):
        return JSONResponse(
            status_code=_ERROR_STATUS[outcome.kind],
            content=outcome.model_dump(mode="json", by_alias=True),
        )
    return outcome


@router.post("/periods/summary", response_model=PeriodReport)
def summarize_period(
    body: PeriodRequest, service: ShiftCalcService = Depends(get_service)
) -> PeriodReport:
    return service.summarize_period(body.shifts, base_salary=body.base_salary)


@router.post("/periods/settlement", response_model=SettlementResponse)
def settle_period(
    body: SettlementRequest, service: ShiftCalcService = Depends(get_service)
) -> SettlementResponse:
    report = service.summarize_period(body.shifts, base_salary=body.base_salary)
    settlement = service.settle(
        report,
        include_transport=body.include_transport,
        other_income=body.other_income,
        other_deductions=body.other_deductions,
    )
    return SettlementResponse(report=report, settlement=settlement)

"""Calculation outputs: per-shift results, period summaries and settlements.

These shapes are what reporting/export callers consume; they serialize with
camelCase keys (``hoursByBucket``, ``totalWorkedHours``, ...).
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shiftpay.core.types import Hours, Money, ShiftId
from shiftpay.models.buckets import HourBucket, zero_buckets

_RESULT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ClassificationResult(BaseModel):
    """Hours and surcharge/overtime pay for a single shift."""

    model_config = _RESULT_CONFIG

    shift_id: ShiftId = ""
    hours_by_bucket: dict[HourBucket, Hours] = Field(default_factory=zero_buckets)
    payment_by_bucket: dict[HourBucket, Money] = Field(default_factory=zero_buckets)
    total_surcharge_and_overtime_payment: Money = 0.0
    total_worked_hours: Hours = 0.0

    @property
    def classified_hours(self) -> float:
        """Sum over all buckets; equals total_worked_hours up to float error."""
        return sum(self.hours_by_bucket.values())


class PeriodSummary(BaseModel):
    """Quincena totals folded from many ClassificationResults."""

    model_config = _RESULT_CONFIG

    hours_by_bucket: dict[HourBucket, float] = Field(default_factory=zero_buckets)
    payment_by_bucket: dict[HourBucket, float] = Field(default_factory=zero_buckets)
    total_surcharge_and_overtime_payment: Money = 0.0
    base_salary: Money = 0.0
    grand_total: Money = 0.0
    total_worked_hours: Hours = 0.0
    shift_count: int = 0


class CalculationError(BaseModel):
    """A shift that could not be classified, tagged with its identifier."""

    model_config = _RESULT_CONFIG

    shift_id: ShiftId
    kind: Literal["validation", "dependency", "internal"]
    code: str = ""  # ValidationKind value for validation errors
    message: str


class PeriodReport(BaseModel):
    """Summary of the shifts that classified plus the ones that did not."""

    model_config = _RESULT_CONFIG

    summary: Optional[PeriodSummary] = None
    results: list[ClassificationResult] = Field(default_factory=list)
    errors: list[CalculationError] = Field(default_factory=list)


class AdjustmentItem(BaseModel):
    """Manual extra income or deduction entered for the period."""

    model_config = _RESULT_CONFIG

    description: str
    amount: float = Field(ge=0)


class PeriodSettlement(BaseModel):
    """Net pay for the quincena after allowance, adjustments and legal deductions."""

    model_config = _RESULT_CONFIG

    grand_total: Money = 0.0  # base salary + surcharges/overtime
    transport_allowance: float = 0.0
    other_income: float = 0.0
    gross_earnings: float = 0.0
    contribution_base: float = 0.0  # IBC: gross earnings without transport allowance
    health_deduction: float = 0.0
    pension_deduction: float = 0.0
    total_legal_deductions: float = 0.0
    other_deductions: float = 0.0
    net_pay: float = 0.0

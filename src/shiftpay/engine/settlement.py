"""Quincena settlement: from grand total to net pay.

Transport allowance and manual income are added on top of the summary's grand
total. Health and pension contributions are withheld on the contribution base
(IBC), which excludes the transport allowance.
"""

from __future__ import annotations

from collections.abc import Sequence

from shiftpay.models.results import AdjustmentItem, PeriodSettlement, PeriodSummary

DEFAULT_HEALTH_RATE = 0.04
DEFAULT_PENSION_RATE = 0.04


def settle_period(
    summary: PeriodSummary,
    *,
    transport_allowance: float = 0.0,
    include_transport: bool = False,
    other_income: Sequence[AdjustmentItem] = (),
    other_deductions: Sequence[AdjustmentItem] = (),
    health_rate: float = DEFAULT_HEALTH_RATE,
    pension_rate: float = DEFAULT_PENSION_RATE,
) -> PeriodSettlement:
    allowance = transport_allowance if include_transport else 0.0
    income = sum(item.amount for item in other_income)
    deductions = sum(item.amount for item in other_deductions)

    contribution_base = summary.grand_total + income
    gross = contribution_base + allowance
    health = contribution_base * health_rate
    pension = contribution_base * pension_rate
    legal = health + pension

    return PeriodSettlement(
        grand_total=summary.grand_total,
        transport_allowance=allowance,
        other_income=income,
        gross_earnings=gross,
        contribution_base=contribution_base,
        health_deduction=health,
        pension_deduction=pension,
        total_legal_deductions=legal,
        other_deductions=deductions,
        net_pay=gross - legal - deductions,
    )

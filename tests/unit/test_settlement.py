"""Tests for quincena settlement (net pay)."""

from __future__ import annotations

import pytest

from shiftpay.engine.settlement import settle_period
from shiftpay.models.results import AdjustmentItem, PeriodSummary


@pytest.fixture
def summary() -> PeriodSummary:
    return PeriodSummary(
        total_surcharge_and_overtime_payment=88250,
        base_salary=711750,
        grand_total=800000,
        total_worked_hours=90,
        shift_count=10,
    )


def test_without_adjustments(summary):
    settlement = settle_period(summary)
    assert settlement.gross_earnings == pytest.approx(800000)
    assert settlement.health_deduction == pytest.approx(32000)
    assert settlement.pension_deduction == pytest.approx(32000)
    assert settlement.net_pay == pytest.approx(736000)


def test_transport_allowance_is_not_part_of_contribution_base(summary):
    settlement = settle_period(summary, transport_allowance=100000, include_transport=True)
    assert settlement.transport_allowance == 100000
    assert settlement.gross_earnings == pytest.approx(900000)
    assert settlement.contribution_base == pytest.approx(800000)
    assert settlement.total_legal_deductions == pytest.approx(64000)
    assert settlement.net_pay == pytest.approx(836000)


def test_transport_allowance_skipped_when_not_included(summary):
    settlement = settle_period(summary, transport_allowance=100000, include_transport=False)
    assert settlement.transport_allowance == 0
    assert settlement.gross_earnings == pytest.approx(800000)


def test_other_income_and_deductions(summary):
    settlement = settle_period(
        summary,
        other_income=[AdjustmentItem(description="Bonificación", amount=50000)],
        other_deductions=[
            AdjustmentItem(description="Préstamo", amount=20000),
            AdjustmentItem(description="Uniforme", amount=5000),
        ],
    )
    assert settlement.other_income == 50000
    assert settlement.contribution_base == pytest.approx(850000)
    assert settlement.other_deductions == 25000
    assert settlement.net_pay == pytest.approx(850000 - 68000 - 25000)


def test_custom_contribution_rates(summary):
    settlement = settle_period(summary, health_rate=0.0, pension_rate=0.1)
    assert settlement.health_deduction == 0
    assert settlement.pension_deduction == pytest.approx(80000)


def test_adjustment_amount_must_not_be_negative():
    with pytest.raises(ValueError):
        AdjustmentItem(description="x", amount=-1)

"""ShiftCalcService — per-shift calculation boundary and period reports.

``classify`` raises; this service is where those failures become
CalculationError records, so one bad shift never aborts a whole quincena.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from shiftpay.core.exceptions import HolidayLookupError, ShiftValidationError
from shiftpay.engine.aggregator import aggregate
from shiftpay.engine.classifier import classify
from shiftpay.engine.settlement import settle_period
from shiftpay.models.results import (
    AdjustmentItem,
    CalculationError,
    ClassificationResult,
    PeriodReport,
    PeriodSettlement,
)
from shiftpay.models.shift import ShiftInput
from shiftpay.services.base import BaseService

logger = logging.getLogger(__name__)


class ShiftCalcService(BaseService):
    """Classifies shifts and assembles quincena summaries."""

    def calculate(self, shift: ShiftInput) -> ClassificationResult | CalculationError:
        try:
            return classify(shift, self._rates, self._calendar)
        except ShiftValidationError as exc:
            logger.info("Shift %s rejected: %s", shift.shift_id, exc.detail)
            return CalculationError(
                shift_id=shift.shift_id, kind="validation", code=exc.kind.value, message=str(exc),
            )
        except HolidayLookupError as exc:
            logger.error("Shift %s: %s", shift.shift_id, exc)
            return CalculationError(
                shift_id=shift.shift_id,
                kind="dependency",
                code="HolidayLookup",
                message=f"Shift {shift.shift_id}: {exc}",
            )
        except Exception as exc:
            logger.exception("Shift %s: unexpected failure during calculation", shift.shift_id)
            return CalculationError(
                shift_id=shift.shift_id,
                kind="internal",
                message=f"Shift {shift.shift_id}: unexpected error during calculation. {exc}",
            )

    def calculate_many(
        self, shifts: Sequence[ShiftInput], max_workers: int = 1
    ) -> tuple[list[ClassificationResult], list[CalculationError]]:
        """Classify a batch; failed shifts are collected, not raised.

        Output lists keep input order regardless of ``max_workers``.
        """
        if max_workers > 1 and len(shifts) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                outcomes = list(pool.map(self.calculate, shifts))
        else:
            outcomes = [self.calculate(shift) for shift in shifts]

        results = [o for o in outcomes if isinstance(o, ClassificationResult)]
        errors = [o for o in outcomes if isinstance(o, CalculationError)]
        return results, errors

    def summarize_period(
        self,
        shifts: Sequence[ShiftInput],
        base_salary: float | None = None,
        max_workers: int = 1,
    ) -> PeriodReport:
        if base_salary is None:
            base_salary = self._settings.period.base_salary_per_period

        results, errors = self.calculate_many(shifts, max_workers=max_workers)
        if errors:
            logger.warning("%d of %d shifts skipped in period summary", len(errors), len(shifts))
        return PeriodReport(
            summary=aggregate(results, base_salary), results=results, errors=errors,
        )

    def settle(
        self,
        report: PeriodReport,
        *,
        include_transport: bool = True,
        other_income: Sequence[AdjustmentItem] = (),
        other_deductions: Sequence[AdjustmentItem] = (),
    ) -> PeriodSettlement | None:
        """Net pay for a report's summary; None when the period had no shifts."""
        if report.summary is None:
            return None
        period = self._settings.period
        return settle_period(
            report.summary,
            transport_allowance=period.transport_allowance_per_period,
            include_transport=include_transport,
            other_income=other_income,
            other_deductions=other_deductions,
            health_rate=period.health_contribution_rate,
            pension_rate=period.pension_contribution_rate,
        )

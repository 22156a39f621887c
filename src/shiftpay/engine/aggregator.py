"""Period aggregator — folds shift results into a quincena summary."""

from __future__ import annotations

from collections.abc import Iterable

from shiftpay.models.buckets import HourBucket, zero_buckets
from shiftpay.models.results import ClassificationResult, PeriodSummary


def aggregate(results: Iterable[ClassificationResult], base_salary: float) -> PeriodSummary | None:
    """Sum shift results into one PeriodSummary.

    Returns None for an empty input so callers can tell "no shifts" apart from
    a period whose shifts carried no surcharges.
    """
    hours = zero_buckets()
    payments = zero_buckets()
    surcharge_total = 0.0
    worked_hours = 0.0
    shift_count = 0

    for result in results:
        for bucket in HourBucket:
            hours[bucket] += result.hours_by_bucket.get(bucket, 0.0)
            payments[bucket] += result.payment_by_bucket.get(bucket, 0.0)
        surcharge_total += result.total_surcharge_and_overtime_payment
        worked_hours += result.total_worked_hours
        shift_count += 1

    if shift_count == 0:
        return None

    return PeriodSummary(
        hours_by_bucket=hours,
        payment_by_bucket=payments,
        total_surcharge_and_overtime_payment=surcharge_total,
        base_salary=base_salary,
        grand_total=base_salary + surcharge_total,
        total_worked_hours=worked_hours,
        shift_count=shift_count,
    )


def merge(left: PeriodSummary | None, right: PeriodSummary | None) -> PeriodSummary | None:
    """Combine two partial summaries of disjoint shift sets.

    Both partials must have been built against the same base salary; it is
    counted once in the merged grand total.
    """
    if left is None:
        return right
    if right is None:
        return left
    if left.base_salary != right.base_salary:
        raise ValueError(
            f"cannot merge summaries with different base salaries "
            f"({left.base_salary} != {right.base_salary})"
        )

    surcharge_total = (
        left.total_surcharge_and_overtime_payment + right.total_surcharge_and_overtime_payment
    )
    return PeriodSummary(
        hours_by_bucket={b: left.hours_by_bucket[b] + right.hours_by_bucket[b] for b in HourBucket},
        payment_by_bucket={
            b: left.payment_by_bucket[b] + right.payment_by_bucket[b] for b in HourBucket
        },
        total_surcharge_and_overtime_payment=surcharge_total,
        base_salary=left.base_salary,
        grand_total=left.base_salary + surcharge_total,
        total_worked_hours=left.total_worked_hours + right.total_worked_hours,
        shift_count=left.shift_count + right.shift_count,
    )

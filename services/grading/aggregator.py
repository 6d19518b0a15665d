"""
services/grading/aggregator.py

Folds subject records into credit / quality-point totals and GPA.

Records only need `credits` and `grade` attributes (plus `year` and
`semester` for the grouped variant), so ORM rows and plain dataclasses
are accepted alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple

from services.grading.scale import points_of


def round2(value: float) -> float:
    """Half-up rounding to 2 places on the shortest decimal form of `value`."""
    return float(Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Aggregate:
    total_credits: int = 0
    total_points: float = 0.0
    subject_count: int = 0

    @property
    def raw_gpa(self) -> float:
        if self.total_credits <= 0:
            return 0.0
        return self.total_points / self.total_credits

    @property
    def gpa(self) -> float:
        if self.total_credits <= 0:
            return 0
        return round2(self.raw_gpa)


@dataclass(frozen=True)
class PeriodAggregate:
    year: int
    semester: int
    aggregate: Aggregate

    @property
    def label(self) -> str:
        return f"Year {self.year} Sem {self.semester}"

    @property
    def short_label(self) -> str:
        return f"Y{self.year}S{self.semester}"


def aggregate(subjects: Iterable, year: Optional[int] = None, semester: Optional[int] = None) -> Aggregate:
    total_credits = 0
    total_points = 0.0
    count = 0
    for s in subjects:
        if year is not None and s.year != year:
            continue
        if semester is not None and s.semester != semester:
            continue
        total_credits += s.credits
        total_points += points_of(s.grade) * s.credits
        count += 1
    return Aggregate(total_credits=total_credits, total_points=total_points, subject_count=count)


def aggregate_by_period(subjects: Iterable) -> List[PeriodAggregate]:
    """Per (year, semester) aggregates, ascending by year then semester."""
    buckets: Dict[Tuple[int, int], List] = {}
    for s in subjects:
        buckets.setdefault((s.year, s.semester), []).append(s)

    return [
        PeriodAggregate(year=year, semester=semester, aggregate=aggregate(rows))
        for (year, semester), rows in sorted(buckets.items())
    ]


def compute_aggregate_gpa(subjects: Iterable) -> dict:
    subjects = list(subjects)
    agg = aggregate(subjects)
    return {
        "gpa": agg.gpa,
        "totalCredits": agg.total_credits,
        "totalSubjects": len(subjects),
    }


def compute_semester_history(subjects: Iterable) -> List[dict]:
    return [
        {
            "label": period.label,
            "year": period.year,
            "semester": period.semester,
            "gpa": period.aggregate.gpa,
            "credits": period.aggregate.total_credits,
            "subjectCount": period.aggregate.subject_count,
        }
        for period in aggregate_by_period(subjects)
    ]

"""
services/grading/target_planner.py

Back-solves the average grade point the remaining credits must earn for the
overall GPA to land on a target:

    required = (target * (completed + future) - current * completed) / future

i.e. total points needed at the end, minus points already banked, spread
over the future credits.

Achievability is decided on the unrounded value with a small tolerance so
a requirement of exactly 4.0 is not pushed over the top by float error.
Rounding to 2 places only happens on the way out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from services.errors import ValidationError
from services.grading.aggregator import round2
from services.grading.progress import remaining_credits
from services.grading.scale import GRADE_SCALE, LOWEST_GRADE, MAX_GRADE_POINTS

EPSILON = 1e-9

# nominal subject size, used for messaging only
AVERAGE_SUBJECT_CREDITS = 3

MSG_DEGREE_COMPLETED = "Degree already completed"
MSG_NOT_ACHIEVABLE = "Target GPA not achievable - required GPA exceeds 4.0"
MSG_ALREADY_MET = "You already exceed this target GPA! Any grade will work."


@dataclass(frozen=True)
class TargetPlan:
    achievable: bool
    required_gpa: Optional[float]
    min_grade_required: Optional[str]
    estimated_subjects: int
    future_credits: int
    remaining_credits: int
    message: str
    degree_completed: bool = False

    def to_dict(self) -> dict:
        return {
            "requiredGPA": self.required_gpa,
            "minGradeRequired": self.min_grade_required,
            "estimatedSubjects": self.estimated_subjects,
            "achievable": self.achievable,
            "message": self.message,
        }


def estimate_subjects(future_credits: int, per_subject: int = AVERAGE_SUBJECT_CREDITS) -> int:
    if future_credits <= 0:
        return 0
    return math.ceil(future_credits / per_subject)


def required_future_gpa(current_gpa: float, completed_credits: int, target_gpa: float, future_credits: int) -> float:
    return (target_gpa * (completed_credits + future_credits) - current_gpa * completed_credits) / future_credits


def min_grade_for(required: float) -> str:
    """Lowest grade whose value still meets `required` (scale is highest first)."""
    answer = LOWEST_GRADE
    for letter, value in GRADE_SCALE:
        if value >= required - EPSILON:
            answer = letter
        else:
            break
    return answer


def priority_message(min_grade: str, subjects: int) -> str:
    plural = "s" if subjects > 1 else ""
    return (
        f"Focus on achieving at least {min_grade} in {subjects} future subject{plural}. "
        "Prioritize high-credit courses for maximum GPA impact."
    )


def _validate_target(target_gpa) -> float:
    if isinstance(target_gpa, bool) or not isinstance(target_gpa, (int, float)) or math.isnan(target_gpa):
        raise ValidationError("Valid target GPA required (0-4.0)")
    if target_gpa < 0 or target_gpa > MAX_GRADE_POINTS:
        raise ValidationError("Valid target GPA required (0-4.0)")
    return float(target_gpa)


def solve_target_gpa(
    current_gpa: float,
    completed_credits: int,
    degree_total_credits: Optional[int],
    target_gpa: float,
    future_credits: Optional[int] = None,
) -> TargetPlan:
    target = _validate_target(target_gpa)
    remaining = remaining_credits(completed_credits, degree_total_credits)

    if future_credits is not None:
        if isinstance(future_credits, bool) or not isinstance(future_credits, int) or future_credits < 1:
            raise ValidationError("Future credits must be a positive integer")
        if future_credits > remaining:
            raise ValidationError(
                f"Future credits ({future_credits}) cannot exceed remaining credits ({remaining})"
            )
        planned = future_credits
    else:
        planned = remaining

    if planned <= 0:
        return TargetPlan(
            achievable=True,
            required_gpa=None,
            min_grade_required=None,
            estimated_subjects=0,
            future_credits=0,
            remaining_credits=remaining,
            message=MSG_DEGREE_COMPLETED,
            degree_completed=True,
        )

    required = required_future_gpa(current_gpa, completed_credits, target, planned)
    subjects = estimate_subjects(planned)

    if required > MAX_GRADE_POINTS + EPSILON:
        return TargetPlan(
            achievable=False,
            required_gpa=round2(required),
            min_grade_required=None,
            estimated_subjects=subjects,
            future_credits=planned,
            remaining_credits=remaining,
            message=MSG_NOT_ACHIEVABLE,
        )

    if required <= EPSILON:
        return TargetPlan(
            achievable=True,
            required_gpa=0,
            min_grade_required=LOWEST_GRADE,
            estimated_subjects=subjects,
            future_credits=planned,
            remaining_credits=remaining,
            message=MSG_ALREADY_MET,
        )

    min_grade = min_grade_for(required)
    return TargetPlan(
        achievable=True,
        required_gpa=round2(required),
        min_grade_required=min_grade,
        estimated_subjects=subjects,
        future_credits=planned,
        remaining_credits=remaining,
        message=priority_message(min_grade, subjects),
    )

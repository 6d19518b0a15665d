"""
services/grading/progress.py

Degree progress against the user's configured credit target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from config.settings import settings
from services.errors import ValidationError
from services.grading.aggregator import round2


def resolve_degree_total(degree_total_credits: Optional[int]) -> int:
    """Unset target falls back to the configured default (120)."""
    if degree_total_credits is None:
        return settings.DEFAULT_DEGREE_TOTAL_CREDITS
    return degree_total_credits


def remaining_credits(completed_credits: int, degree_total_credits: Optional[int]) -> int:
    return max(0, resolve_degree_total(degree_total_credits) - completed_credits)


def compute_degree_progress(total_credits: int, degree_total_credits: Optional[int]) -> dict:
    target = resolve_degree_total(degree_total_credits)
    if target <= 0:
        percentage = 0
    else:
        percentage = round2(100 * total_credits / target)
    return {
        "percentage": percentage,
        "remainingCredits": max(0, target - total_credits),
    }


@dataclass(frozen=True)
class DegreeUpdate:
    degree_total_credits: Optional[int] = None
    degree_name: Optional[str] = None


def validate_degree_update(total_credits=None, degree_name=None) -> DegreeUpdate:
    """
    Check a degree settings change before anything is written.

    Both values are validated first so a bad field never leaves the other
    one half-applied.
    """
    if total_credits is None and degree_name is None:
        raise ValidationError("Provide totalCredits and/or degreeName")

    if total_credits is not None:
        if isinstance(total_credits, bool) or not isinstance(total_credits, int) or total_credits < 1:
            raise ValidationError("Valid total credits required (minimum 1)")

    cleaned_name = None
    if degree_name is not None:
        cleaned_name = degree_name.strip()
        if not cleaned_name:
            raise ValidationError("Degree name cannot be empty")

    return DegreeUpdate(degree_total_credits=total_credits, degree_name=cleaned_name)

"""
services/grading/scale.py

Fixed 12-letter grade scale. Ordered highest to lowest value; the target
planner's minimum-grade scan relies on that ordering.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

GRADE_SCALE: Tuple[Tuple[str, float], ...] = (
    ("A+", 4.0),
    ("A", 4.0),
    ("A-", 3.7),
    ("B+", 3.3),
    ("B", 3.0),
    ("B-", 2.7),
    ("C+", 2.3),
    ("C", 2.0),
    ("C-", 1.7),
    ("D+", 1.3),
    ("D", 1.0),
    ("F", 0.0),
)

GRADE_POINTS: Mapping[str, float] = MappingProxyType(dict(GRADE_SCALE))

VALID_GRADES: Tuple[str, ...] = tuple(letter for letter, _ in GRADE_SCALE)

MAX_GRADE_POINTS = GRADE_SCALE[0][1]
LOWEST_GRADE = GRADE_SCALE[-1][0]


def points_of(grade) -> float:
    """Quality points for a letter grade; unknown grades count as 0.0."""
    return GRADE_POINTS.get(grade, 0.0)


def is_valid_grade(grade) -> bool:
    return grade in GRADE_POINTS

from typing import List, Optional

from pydantic import Field

from schemas.common import CamelModel
from schemas.subjects import RankedSubjectOut


# =========================
# Degree progress
# =========================
class DegreeProgressOut(CamelModel):
    completed_credits: int
    total_credits: int
    percentage: float
    remaining_credits: int
    degree_name: str


class DegreeProgressUpdate(CamelModel):
    total_credits: Optional[int] = None     # must be >= 1 when given
    degree_name: Optional[str] = None       # must be non-empty after trimming when given


class DegreeInfoOut(CamelModel):
    degree_total_credits: int
    degree_name: str


# =========================
# History / performance
# =========================
class SemesterHistoryItem(CamelModel):
    label: str                 # "Year 1 Sem 2"
    year: int
    semester: int
    gpa: float
    credits: int
    subject_count: int


class SubjectPerformanceOut(CamelModel):
    best: List[RankedSubjectOut]
    worst: List[RankedSubjectOut]


# =========================
# Target GPA planner
# =========================
class TargetGPARequest(CamelModel):
    target_gpa: float = Field(..., alias="targetGPA")
    future_credits: Optional[int] = None


class TargetGPAOut(CamelModel):
    current_gpa: float = Field(..., alias="currentGPA")
    completed_credits: int
    target_gpa: float = Field(..., alias="targetGPA")
    future_credits: int
    remaining_credits: int
    required_gpa: Optional[float] = Field(None, alias="requiredGPA")
    min_grade_required: Optional[str] = None
    estimated_subjects: int
    subjects_needed: int          # same as estimatedSubjects; 0 once the degree is complete
    achievable: bool
    degree_completed: bool = False
    message: str


# =========================
# Summary
# =========================
class SemesterGPAItem(CamelModel):
    semester: str              # "Y1S2"
    gpa: float
    credits: int
    subjects: int


class UserBrief(CamelModel):
    name: str
    email: str


class AnalyticsSummaryOut(CamelModel):
    overall_gpa: float = Field(..., alias="overallGPA")
    total_credits: int
    total_subjects: int
    degree_total_credits: int
    semester_gpas: List[SemesterGPAItem] = Field(..., alias="semesterGPAs")
    user: UserBrief

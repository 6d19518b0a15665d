from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from schemas.common import CamelModel
from services.grading.scale import VALID_GRADES, is_valid_grade


def _normalize_grade(v):
    if v is None:
        return v
    v = str(v).strip().upper()
    if not is_valid_grade(v):
        raise ValueError(f"Grade must be one of {', '.join(VALID_GRADES)}")
    return v


def _normalize_code(v):
    if v is None:
        return v
    v = str(v).strip().upper()
    if not v:
        raise ValueError("Subject code is required")
    return v


def _normalize_name(v):
    if v is None:
        return v
    v = str(v).strip()
    if not v:
        raise ValueError("Subject name is required")
    return v


# input: POST /subjects/add
class SubjectCreate(CamelModel):
    subject_code: str                                   # e.g. CS104 -> 4 credits
    subject_name: str
    grade: str                                          # A+ ... F
    year: int = Field(..., ge=1)
    semester: int = Field(..., ge=1, le=2)
    ca_percentage: float = Field(0, ge=0, le=100)
    attempts: int = Field(1, ge=1)

    normalize_code = field_validator("subject_code", mode="before")(_normalize_code)
    normalize_name = field_validator("subject_name", mode="before")(_normalize_name)
    normalize_grade = field_validator("grade", mode="before")(_normalize_grade)


# input: PUT /subjects/{id} (partial)
class SubjectUpdate(CamelModel):
    subject_code: Optional[str] = None
    subject_name: Optional[str] = None
    grade: Optional[str] = None
    year: Optional[int] = Field(None, ge=1)
    semester: Optional[int] = Field(None, ge=1, le=2)
    ca_percentage: Optional[float] = Field(None, ge=0, le=100)
    attempts: Optional[int] = Field(None, ge=1)

    normalize_code = field_validator("subject_code", mode="before")(_normalize_code)
    normalize_name = field_validator("subject_name", mode="before")(_normalize_name)
    normalize_grade = field_validator("grade", mode="before")(_normalize_grade)


# output
class SubjectOut(CamelModel):
    id: int
    subject_code: str
    subject_name: str
    credits: int
    ca_percentage: float
    attempts: int
    grade: str
    year: int
    semester: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RankedSubjectOut(SubjectOut):
    points: float


class OverallGPAOut(CamelModel):
    overall_gpa: float = Field(..., alias="overallGPA")
    total_credits: int
    total_subjects: int


class SemesterResultsOut(CamelModel):
    subjects: list[SubjectOut]
    gpa: float
    total_credits: int

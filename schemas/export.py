from datetime import datetime
from typing import List

from pydantic import Field

from schemas.common import CamelModel


class ShareSemesterItem(CamelModel):
    semester: str              # "Year 1 Semester 2"
    credits: int
    gpa: float
    subjects_count: int


class ShareData(CamelModel):
    student_name: str
    email: str
    degree_name: str
    overall_gpa: float = Field(..., alias="overallGPA")
    total_credits: int
    total_subjects: int
    degree_total_credits: int
    progress_percentage: float
    semester_breakdown: List[ShareSemesterItem]
    generated_at: datetime
    summary: str


# output: GET /export/share
class ShareOut(CamelModel):
    share_link: str
    share_token: str
    share_data: ShareData

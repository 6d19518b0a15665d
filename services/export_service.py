"""
services/export_service.py

Transcript exports:
- build_transcript(): view model shared by every format
- PDF: Jinja2 HTML template -> WeasyPrint
- Excel: openpyxl workbook (summary sheet + subjects sheet)
- Share: JSON snapshot with a random link token
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from config.settings import settings
from services.grading.aggregator import aggregate, aggregate_by_period
from services.grading.progress import resolve_degree_total
from services.grading.scale import points_of

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass
class TranscriptRow:
    code: str
    name: str
    credits: int
    grade: str
    points: float


@dataclass
class TranscriptSemester:
    year: int
    semester: int
    label: str
    gpa: float
    credits: int
    rows: List[TranscriptRow] = field(default_factory=list)


@dataclass
class Transcript:
    name: str
    email: str
    degree_name: str
    overall_gpa: float
    total_credits: int
    degree_total_credits: int
    progress_percentage: float
    subject_count: int
    generated_at: datetime
    semesters: List[TranscriptSemester] = field(default_factory=list)


def build_transcript(user, subjects, generated_at: Optional[datetime] = None) -> Transcript:
    subjects = sorted(subjects, key=lambda s: (s.year, s.semester, s.subject_code))
    agg = aggregate(subjects)
    degree_total = resolve_degree_total(user.degree_total_credits)
    progress = round(agg.total_credits / degree_total * 100, 1) if degree_total > 0 else 0

    semesters = []
    for period in aggregate_by_period(subjects):
        rows = [
            TranscriptRow(s.subject_code, s.subject_name, s.credits, s.grade, points_of(s.grade))
            for s in subjects
            if s.year == period.year and s.semester == period.semester
        ]
        semesters.append(TranscriptSemester(
            year=period.year,
            semester=period.semester,
            label=f"Year {period.year} Semester {period.semester}",
            gpa=period.aggregate.gpa,
            credits=period.aggregate.total_credits,
            rows=rows,
        ))

    return Transcript(
        name=user.name,
        email=user.email,
        degree_name=user.degree_name or settings.DEFAULT_DEGREE_NAME,
        overall_gpa=agg.gpa,
        total_credits=agg.total_credits,
        degree_total_credits=degree_total,
        progress_percentage=progress,
        subject_count=len(subjects),
        generated_at=generated_at or datetime.now(),
        semesters=semesters,
    )


def export_filename(user_name: str, extension: str) -> str:
    return f"GPA_Report_{'_'.join(user_name.split())}.{extension}"


class PDFService:
    def __init__(self, template_dir: Optional[str] = None):
        template_dir = Path(template_dir or settings.TEMPLATE_DIR)
        if not template_dir.is_absolute():
            template_dir = PROJECT_ROOT / template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def _render_template(self, template_name: str, data: Dict[str, Any]) -> str:
        """Render a template to HTML"""
        template = self.env.get_template(template_name)
        return template.render(**data)

    def _html_to_pdf(self, html_content: str) -> bytes:
        """HTML -> PDF"""
        # needs pango/cairo at runtime, only pulled in when a PDF is requested
        import weasyprint

        return weasyprint.HTML(string=html_content).write_pdf()

    def render_transcript_html(self, transcript: Transcript) -> str:
        return self._render_template("transcript.html", {"t": transcript})

    def generate_transcript_pdf(self, transcript: Transcript) -> bytes:
        return self._html_to_pdf(self.render_transcript_html(transcript))


# ==========================================================
# Excel
# ==========================================================
HEADER_FILL = PatternFill(start_color="1E40AF", end_color="1E40AF", fill_type="solid")
HEADER_FONT = Font(bold=True, size=11, color="FFFFFF")
TITLE_FONT = Font(bold=True, size=16)
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)

SUBJECT_HEADERS = ["Year", "Semester", "Subject Code", "Subject Name", "Credits", "Grade", "Points"]


def _style_header_row(ws, row: int, width: int):
    for col in range(1, width + 1):
        cell = ws.cell(row=row, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center")
        cell.border = THIN_BORDER


def generate_transcript_workbook(transcript: Transcript) -> bytes:
    wb = Workbook()

    # Summary sheet
    ws = wb.active
    ws.title = "Academic Summary"
    ws.merge_cells("A1:D1")
    ws["A1"] = "ACADEMIC TRANSCRIPT"
    ws["A1"].font = TITLE_FONT
    ws["A1"].alignment = Alignment(horizontal="center")

    summary_rows = [
        ("Name", transcript.name),
        ("Email", transcript.email),
        ("Degree", transcript.degree_name),
        ("Overall GPA", transcript.overall_gpa),
        ("Credits Completed", transcript.total_credits),
        ("Degree Total Credits", transcript.degree_total_credits),
        ("Progress (%)", transcript.progress_percentage),
        ("Subjects", transcript.subject_count),
        ("Generated", transcript.generated_at.strftime("%B %d, %Y")),
    ]
    ws.append([])
    for label, value in summary_rows:
        ws.append([label, value])
        ws.cell(row=ws.max_row, column=1).font = Font(bold=True)

    ws.append([])
    ws.append(["Semester", "GPA", "Credits", "Subjects"])
    _style_header_row(ws, ws.max_row, 4)
    for semester in transcript.semesters:
        ws.append([semester.label, semester.gpa, semester.credits, len(semester.rows)])

    ws.column_dimensions["A"].width = 24
    ws.column_dimensions["B"].width = 32

    # Subjects sheet
    ws = wb.create_sheet("Subjects")
    ws.append(SUBJECT_HEADERS)
    _style_header_row(ws, 1, len(SUBJECT_HEADERS))
    ws.freeze_panes = "A2"
    for semester in transcript.semesters:
        for row in semester.rows:
            ws.append([semester.year, semester.semester, row.code, row.name, row.credits, row.grade, row.points])

    for idx, width in enumerate([8, 10, 16, 40, 10, 8, 8], start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    output = BytesIO()
    wb.save(output)
    return output.getvalue()


# ==========================================================
# Share summary
# ==========================================================
def share_summary_line(transcript: Transcript) -> str:
    return (
        f"{transcript.name} - {transcript.degree_name} | GPA: {transcript.overall_gpa:.2f} | "
        f"Credits: {transcript.total_credits}/{transcript.degree_total_credits} "
        f"({transcript.progress_percentage:.1f}%)"
    )


def build_share_payload(transcript: Transcript, base_url: str, token: Optional[str] = None) -> dict:
    """Shareable snapshot of the transcript plus an unguessable link token."""
    token = token or secrets.token_urlsafe(settings.SHARE_TOKEN_BYTES)
    return {
        "share_link": f"{base_url.rstrip('/')}/share/{token}",
        "share_token": token,
        "share_data": {
            "student_name": transcript.name,
            "email": transcript.email,
            "degree_name": transcript.degree_name,
            "overall_gpa": transcript.overall_gpa,
            "total_credits": transcript.total_credits,
            "total_subjects": transcript.subject_count,
            "degree_total_credits": transcript.degree_total_credits,
            "progress_percentage": transcript.progress_percentage,
            "semester_breakdown": [
                {
                    "semester": s.label,
                    "credits": s.credits,
                    "gpa": s.gpa,
                    "subjects_count": len(s.rows),
                }
                for s in transcript.semesters
            ],
            "generated_at": transcript.generated_at,
            "summary": share_summary_line(transcript),
        },
    }

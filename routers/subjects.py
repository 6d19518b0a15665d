from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser
from schemas.common import SuccessEnvelope
from schemas.subjects import OverallGPAOut, SemesterResultsOut, SubjectCreate, SubjectOut, SubjectUpdate
from services import records, subject_service

router = APIRouter(prefix="/subjects", tags=["subjects"])


# ==========================================================
# [1] Static routes (before /{subject_id})
# ==========================================================

# ✅ [CREATE] add subject; credits come from the last digit of the code
@router.post("/add", status_code=201, response_model=SuccessEnvelope[SubjectOut])
def add_subject(payload: SubjectCreate, user: CurrentUser, db: Session = Depends(get_db)):
    subject = subject_service.add_subject(db, user, payload)
    return SuccessEnvelope(data=SubjectOut.model_validate(subject), message="Subject added successfully")


# ✅ [READ] all subjects, optionally filtered by year / semester
@router.get("/", response_model=SuccessEnvelope[List[SubjectOut]])
def list_subjects(
    user: CurrentUser,
    year: Optional[int] = None,
    semester: Optional[int] = None,
    db: Session = Depends(get_db),
):
    subjects = subject_service.list_subjects(db, user, year=year, semester=semester)
    return SuccessEnvelope(data=[SubjectOut.model_validate(s) for s in subjects])


# ✅ [READ] one semester's results with its GPA
@router.get("/results", response_model=SuccessEnvelope[SemesterResultsOut])
def semester_results(year: int, semester: int, user: CurrentUser, db: Session = Depends(get_db)):
    result = subject_service.semester_results(db, user, year, semester)
    return SuccessEnvelope(data=SemesterResultsOut(
        subjects=[SubjectOut.model_validate(s) for s in result["subjects"]],
        gpa=result["gpa"],
        total_credits=result["total_credits"],
    ))


# ✅ [READ] overall GPA
@router.get("/gpa", response_model=SuccessEnvelope[OverallGPAOut])
def overall_gpa(user: CurrentUser, db: Session = Depends(get_db)):
    return SuccessEnvelope(data=OverallGPAOut(**subject_service.overall_gpa(db, user)))


# ==========================================================
# [2] Dynamic routes
# ==========================================================

# ✅ [READ] single subject
@router.get("/{subject_id}", response_model=SuccessEnvelope[SubjectOut])
def read_subject(subject_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    subject = records.fetch_subject(db, subject_id, user.id)
    return SuccessEnvelope(data=SubjectOut.model_validate(subject))


# ✅ [UPDATE] partial update; a new code recomputes credits
@router.put("/{subject_id}", response_model=SuccessEnvelope[SubjectOut])
def update_subject(subject_id: int, payload: SubjectUpdate, user: CurrentUser, db: Session = Depends(get_db)):
    subject = subject_service.update_subject(db, user, subject_id, payload)
    return SuccessEnvelope(data=SubjectOut.model_validate(subject), message="Subject updated successfully")


# ✅ [DELETE]
@router.delete("/{subject_id}", response_model=SuccessEnvelope[dict])
def delete_subject(subject_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    subject_service.delete_subject(db, user, subject_id)
    return SuccessEnvelope(data={"subjectId": subject_id}, message="Subject deleted successfully")

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser
from schemas.analytics import (
    AnalyticsSummaryOut,
    DegreeInfoOut,
    DegreeProgressOut,
    DegreeProgressUpdate,
    SemesterHistoryItem,
    SubjectPerformanceOut,
    TargetGPAOut,
    TargetGPARequest,
)
from schemas.common import SuccessEnvelope
from schemas.subjects import RankedSubjectOut, SubjectOut
from schemas.users import CreditCategories
from services import analytics_service, user_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _ranked_out(ranked) -> RankedSubjectOut:
    base = SubjectOut.model_validate(ranked.subject).model_dump()
    return RankedSubjectOut(**base, points=ranked.points)


# ==========================================================
# [Degree progress]
# ==========================================================
@router.get("/degree-progress", response_model=SuccessEnvelope[DegreeProgressOut])
def get_degree_progress(user: CurrentUser, db: Session = Depends(get_db)):
    return SuccessEnvelope(data=DegreeProgressOut(**analytics_service.degree_progress(db, user)))


@router.put("/degree-progress", response_model=SuccessEnvelope[DegreeInfoOut])
def update_degree_progress(payload: DegreeProgressUpdate, user: CurrentUser, db: Session = Depends(get_db)):
    user = user_service.update_degree(
        db, user, total_credits=payload.total_credits, degree_name=payload.degree_name
    )
    return SuccessEnvelope(
        data=DegreeInfoOut(degree_total_credits=user.degree_total_credits, degree_name=user.degree_name),
        message="Degree information updated",
    )


# ==========================================================
# [History / performance]
# ==========================================================
@router.get("/semester-history", response_model=SuccessEnvelope[List[SemesterHistoryItem]])
def get_semester_history(user: CurrentUser, db: Session = Depends(get_db)):
    history = analytics_service.semester_history(db, user)
    return SuccessEnvelope(data=[SemesterHistoryItem.model_validate(item) for item in history])


@router.get("/subject-performance", response_model=SuccessEnvelope[SubjectPerformanceOut])
def get_subject_performance(user: CurrentUser, db: Session = Depends(get_db)):
    ranking = analytics_service.subject_performance(db, user)
    return SuccessEnvelope(data=SubjectPerformanceOut(
        best=[_ranked_out(r) for r in ranking["best"]],
        worst=[_ranked_out(r) for r in ranking["worst"]],
    ))


# ==========================================================
# [Target GPA planner]
# ==========================================================
@router.post("/target-gpa", response_model=SuccessEnvelope[TargetGPAOut])
def plan_target_gpa(payload: TargetGPARequest, user: CurrentUser, db: Session = Depends(get_db)):
    plan = analytics_service.target_gpa(db, user, payload.target_gpa, payload.future_credits)
    return SuccessEnvelope(data=TargetGPAOut(**plan))


# ==========================================================
# [Summary]
# ==========================================================
@router.get("/summary", response_model=SuccessEnvelope[AnalyticsSummaryOut])
def get_summary(user: CurrentUser, db: Session = Depends(get_db)):
    return SuccessEnvelope(data=AnalyticsSummaryOut(**analytics_service.summary(db, user)))


# ==========================================================
# [Credit categories]
# ==========================================================
@router.get("/credit-categories", response_model=SuccessEnvelope[CreditCategories])
def get_credit_categories(user: CurrentUser):
    return SuccessEnvelope(data=user_service.get_credit_categories(user))


@router.put("/credit-categories", response_model=SuccessEnvelope[CreditCategories])
def update_credit_categories(payload: CreditCategories, user: CurrentUser, db: Session = Depends(get_db)):
    categories = user_service.update_credit_categories(db, user, payload)
    return SuccessEnvelope(data=categories, message="Credit categories updated successfully")

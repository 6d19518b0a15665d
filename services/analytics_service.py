"""
services/analytics_service.py

Glue between stored records and the grading core: fetch fresh per call,
compute, hand plain values back to the routers.
"""

import logging

from sqlalchemy.orm import Session

from models.users import User as UserModel
from services import records
from services.grading.aggregator import aggregate, aggregate_by_period, compute_semester_history, round2
from services.grading.performance import rank_subject_performance
from services.grading.progress import compute_degree_progress, resolve_degree_total
from services.grading.target_planner import solve_target_gpa

logger = logging.getLogger(__name__)


def degree_progress(db: Session, user: UserModel) -> dict:
    subjects = records.fetch_subjects(db, user.id)
    completed = aggregate(subjects).total_credits
    progress = compute_degree_progress(completed, user.degree_total_credits)
    return {
        "completed_credits": completed,
        "total_credits": resolve_degree_total(user.degree_total_credits),
        "percentage": progress["percentage"],
        "remaining_credits": progress["remainingCredits"],
        "degree_name": user.degree_name,
    }


def semester_history(db: Session, user: UserModel) -> list:
    return compute_semester_history(records.fetch_subjects(db, user.id))


def subject_performance(db: Session, user: UserModel) -> dict:
    return rank_subject_performance(records.fetch_subjects(db, user.id))


def target_gpa(db: Session, user: UserModel, target, future_credits=None) -> dict:
    agg = aggregate(records.fetch_subjects(db, user.id))
    # planner works from the displayed (2dp) GPA, as shown to the user
    current_gpa = round2(agg.raw_gpa)

    plan = solve_target_gpa(
        current_gpa=current_gpa,
        completed_credits=agg.total_credits,
        degree_total_credits=user.degree_total_credits,
        target_gpa=target,
        future_credits=future_credits,
    )
    logger.info(
        f"target gpa solved: user_id={user.id} target={target} future={plan.future_credits} "
        f"required={plan.required_gpa} achievable={plan.achievable}"
    )
    return {
        "current_gpa": current_gpa,
        "completed_credits": agg.total_credits,
        "target_gpa": target,
        "future_credits": plan.future_credits,
        "remaining_credits": plan.remaining_credits,
        "required_gpa": plan.required_gpa,
        "min_grade_required": plan.min_grade_required,
        "estimated_subjects": plan.estimated_subjects,
        "subjects_needed": plan.estimated_subjects,
        "achievable": plan.achievable,
        "degree_completed": plan.degree_completed,
        "message": plan.message,
    }


def summary(db: Session, user: UserModel) -> dict:
    subjects = records.fetch_subjects(db, user.id)
    agg = aggregate(subjects)
    return {
        "overall_gpa": agg.gpa,
        "total_credits": agg.total_credits,
        "total_subjects": len(subjects),
        "degree_total_credits": resolve_degree_total(user.degree_total_credits),
        "semester_gpas": [
            {
                "semester": period.short_label,
                "gpa": period.aggregate.gpa,
                "credits": period.aggregate.total_credits,
                "subjects": period.aggregate.subject_count,
            }
            for period in aggregate_by_period(subjects)
        ],
        "user": {"name": user.name, "email": user.email},
    }

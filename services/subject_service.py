import logging
from typing import List

from sqlalchemy.orm import Session

from models.subjects import Subject as SubjectModel
from models.users import User as UserModel
from schemas.subjects import SubjectCreate, SubjectUpdate
from services import records
from services.errors import NotFoundError, ValidationError
from services.grading.aggregator import aggregate, compute_aggregate_gpa
from services.grading.credits import credits_from_code

logger = logging.getLogger(__name__)


def derive_credits(subject_code: str) -> int:
    credits = credits_from_code(subject_code)
    # digit 0 is not a usable credit amount either
    if not credits:
        logger.warning(f"credit extraction failed: code={subject_code!r}")
        raise ValidationError("Unable to extract credits from subject code")
    return credits


def add_subject(db: Session, user: UserModel, payload: SubjectCreate) -> SubjectModel:
    subject = SubjectModel(
        user_id=user.id,
        subject_code=payload.subject_code,
        subject_name=payload.subject_name,
        credits=derive_credits(payload.subject_code),
        ca_percentage=payload.ca_percentage,
        grade=payload.grade,
        year=payload.year,
        semester=payload.semester,
        attempts=payload.attempts,
    )
    subject = records.save_subject(db, subject)
    logger.info(f"subject added: user_id={user.id} id={subject.id} code={subject.subject_code}")
    return subject


def update_subject(db: Session, user: UserModel, subject_id: int, payload: SubjectUpdate) -> SubjectModel:
    subject = records.fetch_subject(db, subject_id, user.id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)

    # credits follow the code; resolve before touching the row so a bad code changes nothing
    new_code = changes.get("subject_code")
    if new_code is not None and new_code != subject.subject_code:
        changes["credits"] = derive_credits(new_code)

    for key, value in changes.items():
        setattr(subject, key, value)

    subject = records.save_subject(db, subject)
    logger.info(f"subject updated: user_id={user.id} id={subject.id} fields={sorted(changes)}")
    return subject


def delete_subject(db: Session, user: UserModel, subject_id: int) -> None:
    if not records.delete_subject(db, subject_id, user.id):
        raise NotFoundError("Subject not found")
    logger.info(f"subject deleted: user_id={user.id} id={subject_id}")


def list_subjects(db: Session, user: UserModel, year=None, semester=None) -> List[SubjectModel]:
    return records.fetch_subjects(db, user.id, year=year, semester=semester)


def semester_results(db: Session, user: UserModel, year: int, semester: int) -> dict:
    subjects = records.fetch_subjects(db, user.id, year=year, semester=semester)
    subjects = sorted(subjects, key=lambda s: s.subject_code)
    agg = aggregate(subjects)
    return {
        "subjects": subjects,
        "gpa": agg.gpa,
        "total_credits": agg.total_credits,
    }


def overall_gpa(db: Session, user: UserModel) -> dict:
    result = compute_aggregate_gpa(records.fetch_subjects(db, user.id))
    return {
        "overall_gpa": result["gpa"],
        "total_credits": result["totalCredits"],
        "total_subjects": result["totalSubjects"],
    }

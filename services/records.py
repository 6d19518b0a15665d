"""
services/records.py

Persistence layer for subjects and user profiles. Every read is scoped by
user id; each write is a single-row commit.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from models.subjects import Subject as SubjectModel
from models.users import User as UserModel
from services.errors import NotFoundError


# ==========================================================
# Subjects
# ==========================================================
def fetch_subjects(db: Session, user_id: int, year: Optional[int] = None, semester: Optional[int] = None) -> List[SubjectModel]:
    query = db.query(SubjectModel).filter(SubjectModel.user_id == user_id)
    if year is not None:
        query = query.filter(SubjectModel.year == year)
    if semester is not None:
        query = query.filter(SubjectModel.semester == semester)
    return (
        query.order_by(
            SubjectModel.year.desc(),
            SubjectModel.semester.desc(),
            SubjectModel.created_at.desc(),
            SubjectModel.id.desc(),
        )
        .all()
    )


def fetch_subject(db: Session, subject_id: int, user_id: int) -> SubjectModel:
    subject = (
        db.query(SubjectModel)
        .filter(SubjectModel.id == subject_id, SubjectModel.user_id == user_id)
        .first()
    )
    if subject is None:
        raise NotFoundError("Subject not found")
    return subject


def save_subject(db: Session, subject: SubjectModel) -> SubjectModel:
    db.add(subject)
    db.commit()
    db.refresh(subject)
    return subject


def delete_subject(db: Session, subject_id: int, user_id: int) -> bool:
    deleted = (
        db.query(SubjectModel)
        .filter(SubjectModel.id == subject_id, SubjectModel.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


# ==========================================================
# Users
# ==========================================================
def fetch_user_profile(db: Session, user_id: int) -> UserModel:
    user = db.query(UserModel).filter(UserModel.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def fetch_user_by_email(db: Session, email: str) -> Optional[UserModel]:
    return db.query(UserModel).filter(UserModel.email == email).first()


def fetch_user_by_token(db: Session, token: str) -> Optional[UserModel]:
    if not token:
        return None
    return db.query(UserModel).filter(UserModel.api_token == token).first()


def save_user_profile(db: Session, user: UserModel, **fields) -> UserModel:
    for key, value in fields.items():
        setattr(user, key, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

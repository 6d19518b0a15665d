from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from config.settings import settings
from database.db import Base

_categories = settings.DEFAULT_CREDIT_CATEGORIES


class User(Base):
    __tablename__ = "users"  # account + degree configuration

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)   # stored lower-cased
    password_hash = Column(String(255), nullable=False)                    # werkzeug pbkdf2:sha256$salt$hash
    api_token = Column(String(128), nullable=False, unique=True, index=True)

    degree_name = Column(String(200), nullable=False, default=settings.DEFAULT_DEGREE_NAME)
    degree_total_credits = Column(Integer, nullable=False, default=settings.DEFAULT_DEGREE_TOTAL_CREDITS)

    # informational buckets, never reconciled against subjects
    core_subjects = Column(Integer, nullable=False, default=_categories["core_subjects"])
    major_requirements = Column(Integer, nullable=False, default=_categories["major_requirements"])
    electives = Column(Integer, nullable=False, default=_categories["electives"])
    general_education = Column(Integer, nullable=False, default=_categories["general_education"])

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    subjects = relationship("Subject", back_populates="user", cascade="all, delete-orphan")

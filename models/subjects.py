from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import relationship

from database.db import Base


class Subject(Base):
    __tablename__ = "subjects"  # one completed course attempt

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    subject_code = Column(String(50), nullable=False)          # upper-cased, e.g. CS104
    subject_name = Column(String(200), nullable=False)
    credits = Column(Integer, nullable=False)                  # always the last digit of subject_code
    ca_percentage = Column(Float, nullable=False, default=0)   # informational
    attempts = Column(Integer, nullable=False, default=1)      # informational
    grade = Column(String(2), nullable=False)                  # A+ ... F
    year = Column(Integer, nullable=False)
    semester = Column(Integer, nullable=False)                 # 1 or 2

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="subjects")

    __table_args__ = (
        Index("ix_subjects_user_period", "user_id", "year", "semester"),
    )

"""
Bulk-load subjects for one user from a CSV file.

    python -m scripts.import_subjects data/subjects.csv student@example.com

Columns: subjectCode,subjectName,grade,year,semester[,caPercentage,attempts]
Rows go through the same validation as the API; rejected rows are reported
and skipped.
"""

import argparse
import csv
import logging
import sys

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from database.db import SessionLocal, init_db
from schemas.subjects import SubjectCreate
from services import records, subject_service
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def _clean_row(row: dict) -> dict:
    # blank optional columns fall back to schema defaults
    return {k.strip(): v.strip() for k, v in row.items() if k and v is not None and v.strip() != ""}


def import_subjects(db: Session, csv_path: str, email: str):
    user = records.fetch_user_by_email(db, email.strip().lower())
    if user is None:
        raise ValidationError(f"No user with email {email}")

    imported, rejected = 0, []
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            try:
                payload = SubjectCreate.model_validate(_clean_row(row))
                subject_service.add_subject(db, user, payload)
                imported += 1
            except (SchemaValidationError, ValidationError) as e:
                rejected.append((line_no, str(e)))
                logger.warning(f"line {line_no} rejected: {e}")
    return imported, rejected


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import subjects from CSV")
    parser.add_argument("csv_path")
    parser.add_argument("email")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        imported, rejected = import_subjects(db, args.csv_path, args.email)
    finally:
        db.close()

    print(f"✅ imported {imported} subject(s), rejected {len(rejected)}")
    for line_no, reason in rejected:
        print(f"   line {line_no}: {reason}")
    return 0 if not rejected else 1


if __name__ == "__main__":
    sys.exit(main())

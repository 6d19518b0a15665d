import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser
from schemas.common import SuccessEnvelope
from schemas.export import ShareOut
from services import records
from services.export_service import (
    PDFService,
    build_share_payload,
    build_transcript,
    export_filename,
    generate_transcript_workbook,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])

pdf_service = PDFService()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ✅ [PDF] transcript
@router.get("/pdf")
def export_pdf(user: CurrentUser, db: Session = Depends(get_db)):
    transcript = build_transcript(user, records.fetch_subjects(db, user.id))
    content = pdf_service.generate_transcript_pdf(transcript)
    logger.info(f"pdf transcript exported: user_id={user.id} subjects={transcript.subject_count}")
    return _attachment(content, "application/pdf", export_filename(user.name, "pdf"))


# ✅ [HTML] transcript preview (same template as the PDF)
@router.get("/html")
def export_html(user: CurrentUser, db: Session = Depends(get_db)):
    transcript = build_transcript(user, records.fetch_subjects(db, user.id))
    return Response(content=pdf_service.render_transcript_html(transcript), media_type="text/html")


# ✅ [EXCEL] transcript workbook
@router.get("/excel")
def export_excel(user: CurrentUser, db: Session = Depends(get_db)):
    transcript = build_transcript(user, records.fetch_subjects(db, user.id))
    content = generate_transcript_workbook(transcript)
    logger.info(f"excel transcript exported: user_id={user.id} subjects={transcript.subject_count}")
    return _attachment(content, XLSX_MEDIA_TYPE, export_filename(user.name, "xlsx"))


# ✅ [SHARE] shareable summary + link token
@router.get("/share", response_model=SuccessEnvelope[ShareOut])
def export_share(request: Request, user: CurrentUser, db: Session = Depends(get_db)):
    transcript = build_transcript(user, records.fetch_subjects(db, user.id))
    payload = build_share_payload(transcript, str(request.base_url))
    logger.info(f"share summary generated: user_id={user.id} subjects={transcript.subject_count}")
    return SuccessEnvelope(data=ShareOut(**payload))

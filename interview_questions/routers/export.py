"""
Export Router — /api/export

Endpoints:
  POST /api/export/pdf  — paginated PDF report of the supplied questions
  POST /api/export/text — numbered plain text for the clipboard
"""

from io import BytesIO
from typing import List, Optional

from fastapi import APIRouter, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from ..export.clipboard import serialize_questions
from ..export.report_renderer import render_report
from ..generation.schemas import ALL_CATEGORIES, FilterState, QuestionRecord
from .common import error_response

router = APIRouter(prefix="/api/export", tags=["export"])


class ExportRequest(BaseModel):
    questions: List[QuestionRecord] = Field(default_factory=list, description="Questions to export, already filtered")
    search_text: str = ""
    category: str = ALL_CATEGORIES
    total_count: Optional[int] = Field(None, ge=0, description="Size of the unfiltered set")


class ClipboardRequest(BaseModel):
    questions: List[QuestionRecord] = Field(default_factory=list)


@router.post("/pdf")
def export_pdf(request: ExportRequest):
    """Render the questions as a PDF attachment."""
    if not request.questions:
        return error_response("No questions to export", status.HTTP_400_BAD_REQUEST)

    report = render_report(
        request.questions,
        filter_state=FilterState(search_text=request.search_text, category=request.category),
        total_count=request.total_count,
    )

    return StreamingResponse(
        BytesIO(report.content),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={report.filename}"
        }
    )


@router.post("/text")
def export_text(request: ClipboardRequest):
    return {"text": serialize_questions(request.questions)}

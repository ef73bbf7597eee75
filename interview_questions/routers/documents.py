"""
Document Router
Endpoint for uploading a resume and extracting its plain text (PDF, DOCX, TXT).

Returns the extracted text WITHOUT:
- Question generation
- Storage of the uploaded file
"""

import asyncio
import logging

from fastapi import APIRouter, File, UploadFile

from ..errors import QuestionPipelineError, SizeLimitExceededError
from ..ingestion import Document, extract_text
from ..ingestion.extractor import MAX_UPLOAD_SIZE, describe_size
from .common import pipeline_error_response

router = APIRouter(prefix="/api", tags=["documents"])

log = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


async def read_upload(upload_file: UploadFile, max_size: int = MAX_UPLOAD_SIZE) -> bytes:
    """
    Read an upload into memory, refusing it as soon as it passes `max_size`.

    Raises:
        SizeLimitExceededError: If the file is too large
    """
    data = bytearray()
    while True:
        chunk = await upload_file.read(CHUNK_SIZE)
        if not chunk:
            break
        data.extend(chunk)
        if len(data) > max_size:
            raise SizeLimitExceededError(
                f"File size exceeds {describe_size(max_size)}. Please upload a smaller file.",
                detail=f"more than {max_size} bytes",
            )
    return bytes(data)


@router.post("/extract-text")
async def extract_document_text(file: UploadFile = File(..., description="PDF, DOCX or TXT resume")):
    """
    **Extract plain text from an uploaded resume.**

    Accepts PDF, DOCX or TXT up to 10MB. The text can be reviewed and edited
    before it is sent to `/api/generate-questions`.
    """
    try:
        content = await read_upload(file)
        document = Document(
            content=content,
            media_type=file.content_type,
            filename=file.filename,
        )
        text = await asyncio.to_thread(extract_text, document)
    except QuestionPipelineError as e:
        return pipeline_error_response(e)

    return {
        "text": text,
        "filename": file.filename,
        "characters": len(text),
    }

"""
Error → HTTP response mapping shared by every router.

Every failure is returned as {"error": "<human-readable message>"}.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from ..errors import (
    CorruptDocumentError,
    EmptyContentError,
    EmptyInputError,
    QuestionPipelineError,
    SizeLimitExceededError,
    UnsupportedFormatError,
)

log = logging.getLogger(__name__)


STATUS_CODES = {
    EmptyInputError: 400,
    SizeLimitExceededError: 413,
    UnsupportedFormatError: 415,
    EmptyContentError: 422,
    CorruptDocumentError: 422,
}


def status_for(exc: QuestionPipelineError) -> int:
    """Generation, parse and shape failures all map to 500."""
    for exc_type, code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def pipeline_error_response(exc: QuestionPipelineError) -> JSONResponse:
    code = status_for(exc)
    log.warning("%s (%s): %s", type(exc).__name__, code, exc)
    return error_response(exc.message, code)

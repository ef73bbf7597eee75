"""
Questions Router — /api

Endpoints:
  POST /api/generate-questions — resume text → validated interview questions
"""

import logging

from fastapi import APIRouter, status

from ..errors import QuestionPipelineError
from ..generation.question_generator import generate_questions
from ..generation.schemas import (
    ErrorResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
)
from .common import error_response, pipeline_error_response

router = APIRouter(prefix="/api", tags=["questions"])

log = logging.getLogger(__name__)


@router.post(
    "/generate-questions",
    response_model=GenerateQuestionsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(request: GenerateQuestionsRequest):
    """
    **Generate tailored interview questions from resume text.**

    Returns 10-15 questions, each tagged with one of
    Skills, Projects, Experience, Behavioral, Problem-Solving.
    The whole response is rejected if the model's output fails validation.
    """
    try:
        questions = await generate_questions(request.resume or "")
    except QuestionPipelineError as e:
        return pipeline_error_response(e)
    except Exception as e:
        log.exception("Error generating questions: %s", e)
        return error_response(
            "Failed to generate questions. Please try again.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return GenerateQuestionsResponse(questions=questions)

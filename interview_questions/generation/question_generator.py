"""
Question Generation Engine

Runs one resume through the full generation round:
  1. Prompt Contract    — wrap resume text in the fixed instruction
  2. LLM call           — one request, no retries
  3. Response Validator — de-fence, parse, shape-check (all-or-nothing)
  4. Quota check        — advisory warnings only

Output: the validated QuestionSet, or one QuestionPipelineError subclass.
"""

import logging

from ..errors import EmptyInputError, ResponseValidationError
from .prompts import build_generation_request
from .response_validator import check_category_quotas, validate_response
from .schemas import QuestionSet

log = logging.getLogger(__name__)


async def generate_questions(resume_text: str) -> QuestionSet:
    """
    Generate tailored interview questions for one resume.

    Args:
        resume_text: Extracted or pasted resume text

    Returns:
        Validated question records in generation order

    Raises:
        EmptyInputError: No resume text was supplied
        GenerationFailedError: The service call failed
        MalformedResponseError / InvalidShapeError: The service answered with unusable output
    """
    from .gpt_client import call_llm

    if not resume_text or not resume_text.strip():
        raise EmptyInputError()

    request = build_generation_request(resume_text)
    log.info("[GENERATE] resume characters=%s", len(resume_text))

    raw = await call_llm(request)

    try:
        questions = validate_response(raw)
    except ResponseValidationError as e:
        log.error("[GENERATE] %s: %s", type(e).__name__, e.detail)
        log.error("[GENERATE] Raw response: %s", raw)
        raise

    for warning in check_category_quotas(questions):
        log.warning("[GENERATE] quota: %s", warning)

    log.info("[GENERATE] done questions=%s", len(questions))
    return questions

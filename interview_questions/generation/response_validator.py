"""
Response Validator

Turns the generation service's raw text into a QuestionSet:
- Strip one optional ```/```json fence (the model adds them despite the prompt)
- Parse as JSON
- Require a non-empty array of {question: non-empty str, category: str}

Acceptance is all-or-nothing: one bad element rejects the whole response.
Category quotas from the prompt are advisory and only produce warnings.
"""

import json
import logging
import re
from collections import Counter
from typing import Any, List

from ..errors import InvalidShapeError, MalformedResponseError
from .prompts import CATEGORY_QUOTAS, TOTAL_QUESTIONS_RANGE
from .schemas import KNOWN_CATEGORIES, QuestionRecord, QuestionSet

log = logging.getLogger(__name__)


_LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


# ─── Fence stripping ───────────────────────────────────────────────────────────

def strip_code_fence(text: str) -> str:
    """
    Remove a single leading ``` (optionally tagged, e.g. ```json) and a single
    trailing ``` marker. Unfenced text only loses surrounding whitespace.
    """
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


# ─── Shape checks ──────────────────────────────────────────────────────────────

def _check_element(index: int, item: Any) -> QuestionRecord:
    if not isinstance(item, dict):
        raise InvalidShapeError(detail=f"element {index} is {type(item).__name__}, expected object")

    question = item.get("question")
    if not isinstance(question, str) or not question.strip():
        raise InvalidShapeError(detail=f"element {index} has no non-empty 'question' string")

    category = item.get("category")
    if not isinstance(category, str):
        raise InvalidShapeError(detail=f"element {index} has no 'category' string")

    return QuestionRecord(question=question, category=category)


# ─── Main entry ────────────────────────────────────────────────────────────────

def validate_response(raw_text: str) -> QuestionSet:
    """
    Parse and validate the raw model output.

    Args:
        raw_text: Untouched text returned by the generation service

    Returns:
        Question records in generation order

    Raises:
        MalformedResponseError: The de-fenced text is not valid JSON
        InvalidShapeError: Valid JSON, but not a non-empty array of question objects
    """
    text = strip_code_fence(raw_text or "")

    try:
        data = json.loads(text)
    except ValueError as e:
        raise MalformedResponseError(detail=str(e), raw_response=raw_text)

    if not isinstance(data, list):
        raise InvalidShapeError(
            detail=f"top-level value is {type(data).__name__}, expected array",
            raw_response=raw_text,
        )
    if not data:
        raise InvalidShapeError(detail="empty array", raw_response=raw_text)

    questions = []
    for index, item in enumerate(data):
        try:
            questions.append(_check_element(index, item))
        except InvalidShapeError as e:
            e.raw_response = raw_text
            raise

    unknown = sorted({q.category for q in questions if not q.is_known_category})
    if unknown:
        log.warning("Validator: unknown categories accepted: %s", ", ".join(unknown))

    return questions


# ─── Advisory quotas ───────────────────────────────────────────────────────────

def check_category_quotas(questions: QuestionSet) -> List[str]:
    """
    Compare a validated set against the prompt's quota guidance.

    Returns a list of human-readable warnings (empty when everything is
    within range). Never raises: quotas are guidance for the model only.
    """
    warnings = []
    low, high = TOTAL_QUESTIONS_RANGE
    if not low <= len(questions) <= high:
        warnings.append(f"Expected {low}-{high} questions, got {len(questions)}")

    counts = Counter(q.category for q in questions)
    for labels, (low, high) in CATEGORY_QUOTAS.items():
        n = sum(counts[label] for label in labels)
        if not low <= n <= high:
            warnings.append(f"{' + '.join(labels)}: expected {low}-{high}, got {n}")

    others = sum(n for label, n in counts.items() if label not in KNOWN_CATEGORIES)
    if others:
        warnings.append(f"{others} question(s) with an unknown category")

    return warnings

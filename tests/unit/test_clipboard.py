"""Unit tests for the clipboard serialization."""

import pytest

from interview_questions.export.clipboard import serialize_questions
from interview_questions.generation.schemas import QuestionRecord


@pytest.mark.unit
def test_numbered_and_blank_line_separated():
    records = [
        QuestionRecord(question="Explain X", category="Skills"),
        QuestionRecord(question="Tell me about Y", category="Behavioral"),
    ]

    assert serialize_questions(records) == (
        "1. [Skills] Explain X\n\n2. [Behavioral] Tell me about Y"
    )


@pytest.mark.unit
def test_empty_sequence():
    assert serialize_questions([]) == ""

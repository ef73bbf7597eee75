"""Unit tests for de-fencing, parsing and shape-checking model output."""

import json

import pytest

from interview_questions.errors import InvalidShapeError, MalformedResponseError
from interview_questions.generation.response_validator import (
    check_category_quotas,
    strip_code_fence,
    validate_response,
)
from interview_questions.generation.schemas import QuestionRecord


@pytest.mark.unit
@pytest.mark.parametrize("raw", [
    '```json\n[{"question":"Q1","category":"Skills"}]\n```',
    '```\n[{"question":"Q1","category":"Skills"}]\n```',
    '```JSON [{"question":"Q1","category":"Skills"}]```',
    '  [{"question":"Q1","category":"Skills"}]  ',
])
def test_strip_code_fence(raw):
    assert strip_code_fence(raw) == '[{"question":"Q1","category":"Skills"}]'


@pytest.mark.unit
def test_strip_code_fence_is_idempotent():
    once = strip_code_fence('```json\n[{"question":"Q1","category":"Skills"}]\n```')

    assert strip_code_fence(once) == once


@pytest.mark.unit
def test_strip_code_fence_only_removes_one_marker_each_side():
    assert strip_code_fence("```json\n```inner```\n```") == "```inner```"


@pytest.mark.unit
def test_fenced_response_yields_one_record():
    raw = '```json\n[{"question":"Q1","category":"Skills"}]\n```'

    assert validate_response(raw) == [QuestionRecord(question="Q1", category="Skills")]


@pytest.mark.unit
def test_accepts_minimal_valid_array():
    questions = validate_response('[{"question":"Explain X","category":"Skills"}]')

    assert len(questions) == 1
    assert questions[0].question == "Explain X"
    assert questions[0].category == "Skills"


@pytest.mark.unit
def test_preserves_order_and_drops_extra_keys():
    items = [
        {"question": "B first", "category": "Behavioral", "difficulty": "hard"},
        {"question": "A second", "category": "Skills"},
        {"question": "C third", "category": "Projects"},
    ]

    questions = validate_response(json.dumps(items))

    assert [q.question for q in questions] == ["B first", "A second", "C third"]
    assert all(set(q.model_dump()) == {"question", "category"} for q in questions)


@pytest.mark.unit
def test_unknown_category_is_accepted():
    questions = validate_response('[{"question":"Q","category":"Leadership"}]')

    assert questions[0].category == "Leadership"
    assert not questions[0].is_known_category


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "not json", "[{\"question\": \"Q\",", "Here are your questions: []"])
def test_malformed_json(raw):
    with pytest.raises(MalformedResponseError) as exc_info:
        validate_response(raw)

    assert exc_info.value.raw_response == raw


@pytest.mark.unit
@pytest.mark.parametrize("raw", [
    "[]",
    '[{"question":"x"}]',
    '{"question":"x","category":"Skills"}',
    '"just a string"',
    "42",
    '[{"question":"","category":"Skills"}]',
    '[{"question":"   ","category":"Skills"}]',
    '[{"question":7,"category":"Skills"}]',
    '[{"question":"x","category":null}]',
    '["x"]',
])
def test_invalid_shape(raw):
    with pytest.raises(InvalidShapeError):
        validate_response(raw)


@pytest.mark.unit
def test_one_bad_element_rejects_the_whole_set():
    raw = json.dumps([
        {"question": "Good one", "category": "Skills"},
        {"question": "Missing category"},
        {"question": "Another good one", "category": "Projects"},
    ])

    with pytest.raises(InvalidShapeError) as exc_info:
        validate_response(raw)

    assert "element 1" in exc_info.value.detail
    assert exc_info.value.raw_response == raw


@pytest.mark.unit
def test_validation_is_deterministic():
    raw = '```json\n[{"question":"Q1","category":"Skills"},{"question":"Q2","category":"Projects"}]\n```'

    assert validate_response(raw) == validate_response(raw)


@pytest.mark.unit
def test_quotas_within_range_give_no_warnings():
    plan = ["Skills"] * 3 + ["Projects"] * 2 + ["Experience"] * 2 + ["Behavioral"] * 2 + ["Problem-Solving"]
    questions = [QuestionRecord(question=f"Q{i}", category=c) for i, c in enumerate(plan)]

    assert check_category_quotas(questions) == []


@pytest.mark.unit
def test_quotas_report_each_violation():
    questions = [QuestionRecord(question=f"Q{i}", category="Skills") for i in range(5)]
    questions.append(QuestionRecord(question="Odd", category="Trivia"))

    warnings = check_category_quotas(questions)

    assert "Expected 10-15 questions, got 6" in warnings
    assert "Skills: expected 3-4, got 5" in warnings
    assert "Projects + Experience: expected 4-5, got 0" in warnings
    assert "1 question(s) with an unknown category" in warnings

"""
Query Engine

Pure, in-memory selection over a QuestionSet. Nothing here mutates its input.
"""

from typing import Dict, List, Sequence

from ..generation.schemas import ALL_CATEGORIES, FilterState, QuestionRecord


def matches(record: QuestionRecord, filter_state: FilterState) -> bool:
    needle = filter_state.search_text.lower()
    matches_search = (
        not needle
        or needle in record.question.lower()
        or needle in record.category.lower()
    )
    matches_category = (
        filter_state.category == ALL_CATEGORIES
        or record.category == filter_state.category
    )
    return matches_search and matches_category


def filter_questions(
    questions: Sequence[QuestionRecord],
    filter_state: FilterState,
) -> List[QuestionRecord]:
    """
    Return the ordered subsequence of records matching the filter.

    Search is a case-insensitive substring match on question text or category
    label; the category selection is an exact match. Idempotent.
    """
    return [q for q in questions if matches(q, filter_state)]


def group_by_category(questions: Sequence[QuestionRecord]) -> Dict[str, List[QuestionRecord]]:
    """Group records by category; keys keep first-occurrence order."""
    grouped: Dict[str, List[QuestionRecord]] = {}
    for question in questions:
        grouped.setdefault(question.category, []).append(question)
    return grouped


def available_categories(questions: Sequence[QuestionRecord]) -> List[str]:
    """Category selector options: "all" followed by each label present."""
    return [ALL_CATEGORIES, *group_by_category(questions).keys()]


def summarize(questions: Sequence[QuestionRecord]) -> Dict[str, int]:
    """Counts shown above the results, e.g. "12 questions across 5 categories"."""
    return {
        "questions": len(questions),
        "categories": len(group_by_category(questions)),
    }

"""Plain-text serialization used for "Copy all questions"."""

from typing import Sequence

from ..generation.schemas import QuestionRecord


def serialize_questions(records: Sequence[QuestionRecord]) -> str:
    """
    One "<n>. [<category>] <question>" entry per record, numbered from 1,
    separated by a blank line.
    """
    return "\n\n".join(
        f"{idx}. [{record.category}] {record.question}"
        for idx, record in enumerate(records, start=1)
    )

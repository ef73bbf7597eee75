"""
Pydantic schemas for the question generation pipeline.

Internal types:   GenerationRequest → raw text → QuestionRecord list
API types:        GenerateQuestionsRequest / GenerateQuestionsResponse
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ─── Categories ────────────────────────────────────────────────────────────────

class Category(str, Enum):
    SKILLS = "Skills"
    PROJECTS = "Projects"
    EXPERIENCE = "Experience"
    BEHAVIORAL = "Behavioral"
    PROBLEM_SOLVING = "Problem-Solving"


KNOWN_CATEGORIES = tuple(c.value for c in Category)

ALL_CATEGORIES = "all"


# ─── Records ───────────────────────────────────────────────────────────────────

class QuestionRecord(BaseModel):
    """One validated interview question. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    question: str = Field(..., min_length=1)
    category: str   # expected to be a Category value; unknown labels are tolerated

    @property
    def is_known_category(self) -> bool:
        return self.category in KNOWN_CATEGORIES


# Ordered output of one successful generation round
QuestionSet = List[QuestionRecord]


class FilterState(BaseModel):
    """Search text + category selection applied to a QuestionSet."""
    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    category: str = ALL_CATEGORIES

    @property
    def is_active(self) -> bool:
        return bool(self.search_text) or self.category != ALL_CATEGORIES


# ─── Generation service boundary ───────────────────────────────────────────────

class GenerationRequest(BaseModel):
    """Everything the text-completion service needs for one call."""
    model_config = ConfigDict(frozen=True)

    system_instruction: str
    user_message: str
    max_output_tokens: int = Field(..., ge=1)
    temperature: float = Field(..., ge=0.0, le=2.0)


# ─── API request/response ──────────────────────────────────────────────────────

class GenerateQuestionsRequest(BaseModel):
    resume: Optional[str] = Field(None, description="Plain resume text")


class GenerateQuestionsResponse(BaseModel):
    questions: List[QuestionRecord]


class ErrorResponse(BaseModel):
    error: str

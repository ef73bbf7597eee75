"""
Review Session

Per-user context that owns the current resume text, question set and filter.
Replaces ambient UI state: the query engine and report renderer are always
handed what they need from here.

Each async operation records an explicit idle / pending / succeeded / failed
outcome. Only one extraction and one generation may be in flight at a time;
a second request is refused rather than queued. State is replaced, never
mutated in place.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..errors import QuestionPipelineError
from ..export.clipboard import serialize_questions
from ..export.report_renderer import RenderedReport, render_report
from ..generation.question_generator import generate_questions
from ..generation.schemas import FilterState, QuestionSet
from ..ingestion import Document, extract_text
from . import query_engine

log = logging.getLogger(__name__)

Generator = Callable[[str], Awaitable[QuestionSet]]


class OperationStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OperationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: OperationStatus = OperationStatus.IDLE
    error: Optional[str] = None

    @property
    def pending(self) -> bool:
        return self.status == OperationStatus.PENDING


class ReviewSession:
    """
    Owns one user's resume → questions → review round.
    """

    def __init__(self):
        self.resume_text: str = ""
        self.filename: Optional[str] = None
        self.questions: QuestionSet = []
        self.filter_state = FilterState()
        self.extraction = OperationState()
        self.generation = OperationState()

    # ─── Input ─────────────────────────────────────────────────────────────────

    def set_resume_text(self, text: str):
        """Pasted text replaces whatever was extracted before."""
        self.resume_text = text
        self.filename = None

    async def load_document(self, document: Document) -> OperationState:
        """
        Extract text from an uploaded resume into `resume_text`.

        On failure `resume_text` is left as it was and the message is
        recorded on `self.extraction`.
        """
        if self.extraction.pending:
            raise RuntimeError("A document is already being extracted")

        self.extraction = OperationState(status=OperationStatus.PENDING)
        try:
            text = await asyncio.to_thread(extract_text, document)
        except QuestionPipelineError as e:
            log.warning("Extraction failed file=%s: %s", document.filename, e)
            self.filename = None
            self.extraction = OperationState(status=OperationStatus.FAILED, error=e.message)
            return self.extraction
        except Exception as e:
            self.extraction = OperationState(status=OperationStatus.FAILED, error=str(e))
            raise

        self.resume_text = text
        self.filename = document.filename
        self.extraction = OperationState(status=OperationStatus.SUCCEEDED)
        return self.extraction

    # ─── Generation ────────────────────────────────────────────────────────────

    async def generate(self, generator: Generator = generate_questions) -> OperationState:
        """
        Run one generation round for the current resume text.

        Previously displayed questions are cleared before the request; a
        failed round leaves the set empty. No retries.
        """
        if self.generation.pending:
            raise RuntimeError("A generation request is already in flight")

        self.generation = OperationState(status=OperationStatus.PENDING)
        self.questions = []
        self.filter_state = FilterState()
        try:
            questions = await generator(self.resume_text)
        except QuestionPipelineError as e:
            self.generation = OperationState(status=OperationStatus.FAILED, error=e.message)
            return self.generation
        except Exception as e:
            self.generation = OperationState(status=OperationStatus.FAILED, error=str(e))
            raise

        self.questions = list(questions)
        self.generation = OperationState(status=OperationStatus.SUCCEEDED)
        return self.generation

    # ─── Filtering ─────────────────────────────────────────────────────────────

    def set_filter(self, search_text: Optional[str] = None, category: Optional[str] = None) -> FilterState:
        """Replace the filter; omitted arguments keep their current value."""
        self.filter_state = FilterState(
            search_text=self.filter_state.search_text if search_text is None else search_text,
            category=self.filter_state.category if category is None else category,
        )
        return self.filter_state

    def clear_filters(self) -> FilterState:
        self.filter_state = FilterState()
        return self.filter_state

    @property
    def is_filtered(self) -> bool:
        return self.filter_state.is_active

    def visible_questions(self) -> QuestionSet:
        return query_engine.filter_questions(self.questions, self.filter_state)

    def grouped_questions(self) -> Dict[str, QuestionSet]:
        return query_engine.group_by_category(self.visible_questions())

    def available_categories(self) -> List[str]:
        """Selector options come from the full set, not the filtered view."""
        return query_engine.available_categories(self.questions)

    # ─── Export ────────────────────────────────────────────────────────────────

    def export_report(self) -> Optional[RenderedReport]:
        """PDF of the visible questions, or None when nothing is visible."""
        visible = self.visible_questions()
        if not visible:
            return None
        return render_report(
            visible,
            filter_state=self.filter_state,
            total_count=len(self.questions),
        )

    def clipboard_text(self) -> str:
        return serialize_questions(self.visible_questions())

    def reset(self):
        """Back to the input screen: drop results and filters, keep resume text."""
        self.questions = []
        self.filter_state = FilterState()
        self.generation = OperationState()

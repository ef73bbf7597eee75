"""
Question Report Export - PDF Generation

Builds a printable, multi-page report of interview questions:
- Title block (title, generation date, active filter description)
- One section per category: bold heading + numbered, word-wrapped questions
- Running footer on every page: "Page i of n | Total Questions: N"

Layout and drawing are separate passes. layout_report() walks the records
with a vertical cursor and decides page breaks one heading / question at a
time; only once every page exists can the "of n" footers be written, so
render_report() draws the finished layout onto a reportlab canvas.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from io import BytesIO
from typing import List, Optional, Sequence

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..generation.schemas import FilterState, QuestionRecord
from ..review.query_engine import group_by_category

log = logging.getLogger(__name__)


# ─── Configuration ──────────────────────────────────────────────────────────────

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 20 * mm
LINE_HEIGHT = 7 * mm
WRAP_LEADING = 5 * mm
QUESTION_GAP = 2 * mm
CATEGORY_SPACING = 10 * mm
QUESTION_INDENT = 5 * mm
FOOTER_OFFSET = 10 * mm

# Minimum space left above the bottom margin before a new page is started
HEADING_SAFETY_MARGIN = 30 * mm
LINE_SAFETY_MARGIN = 20 * mm

WRAP_WIDTH = PAGE_WIDTH - 2 * MARGIN - 2 * QUESTION_INDENT

TITLE = "Interview Questions"
FILTERED_TITLE = "Filtered Interview Questions"

# (font, size) per text role
FONT_TITLE = ("Helvetica-Bold", 20)
FONT_DATE = ("Helvetica", 10)
FONT_FILTER = ("Helvetica-Oblique", 9)
FONT_HEADING = ("Helvetica-Bold", 14)
FONT_QUESTION = ("Helvetica", 10)
FONT_FOOTER = ("Helvetica-Oblique", 8)

DEFAULT_COLOR = "#111827"

# Heading colours; unknown categories fall back to DEFAULT_HEADING_COLOR
HEADING_COLORS = {
    "Skills": "#2563eb",
    "Projects": "#9333ea",
    "Experience": "#16a34a",
    "Behavioral": "#ea580c",
    "Problem-Solving": "#db2777",
}
DEFAULT_HEADING_COLOR = "#374151"


def heading_color(category: str) -> str:
    return HEADING_COLORS.get(category, DEFAULT_HEADING_COLOR)


# ─── Layout types ───────────────────────────────────────────────────────────────

@dataclass
class TextOp:
    """One string to draw. `y` is the baseline measured from the top edge."""
    text: str
    x: float
    y: float
    font: str
    size: int
    centered: bool = False
    color: str = DEFAULT_COLOR


@dataclass
class ReportPage:
    number: int
    ops: List[TextOp] = field(default_factory=list)
    footer: str = ""

    @property
    def texts(self) -> List[str]:
        return [op.text for op in self.ops]


@dataclass
class ReportLayout:
    pages: List[ReportPage]
    title: str
    question_count: int
    total_count: int

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass
class RenderedReport:
    filename: str
    content: bytes
    page_count: int


# ─── Helpers ────────────────────────────────────────────────────────────────────

def describe_filter(filter_state: Optional[FilterState]) -> Optional[str]:
    """One-line description of an active filter, None when nothing is filtered."""
    if filter_state is None or not filter_state.is_active:
        return None
    search, category = filter_state.search_text, filter_state.category
    if search and category != "all":
        return f'Filtered by: "{search}" and Category: "{category}"'
    if search:
        return f'Filtered by: "{search}"'
    return f'Filtered by Category: "{category}"'


def format_footer(page: int, page_count: int, question_count: int, total_count: int) -> str:
    footer = f"Page {page} of {page_count} | Total Questions: {question_count}"
    if total_count != question_count:
        footer += f" (Filtered from {total_count})"
    return footer


def build_filename(filtered: bool, generated_at: datetime) -> str:
    suffix = "_Filtered" if filtered else ""
    return f"Interview_Questions{suffix}_{generated_at:%Y-%m-%d}.pdf"


def _long_date(value: datetime) -> str:
    return f"{value:%B} {value.day}, {value.year}"


class _Cursor:
    """Vertical write position across an open-ended list of pages."""

    def __init__(self):
        self.pages = [ReportPage(number=1)]
        self.y = MARGIN

    @property
    def page(self) -> ReportPage:
        return self.pages[-1]

    def remaining(self) -> float:
        return PAGE_HEIGHT - MARGIN - self.y

    def new_page(self):
        self.pages.append(ReportPage(number=len(self.pages) + 1))
        self.y = MARGIN

    def ensure(self, safety_margin: float):
        if self.remaining() < safety_margin:
            self.new_page()

    def write(self, text: str, x: float, font, centered: bool = False, color: str = DEFAULT_COLOR):
        name, size = font
        self.page.ops.append(TextOp(text, x, self.y, name, size, centered, color))


# ─── Layout pass ────────────────────────────────────────────────────────────────

def layout_report(
    records: Sequence[QuestionRecord],
    filter_state: Optional[FilterState] = None,
    total_count: Optional[int] = None,
    generated_at: Optional[datetime] = None,
) -> ReportLayout:
    """
    Place every heading and question line on pages.

    Args:
        records: Questions to print (already filtered by the caller)
        filter_state: The filter that produced `records`, if any
        total_count: Size of the unfiltered set; defaults to len(records)
        generated_at: Timestamp printed under the title; defaults to now

    Raises:
        ValueError: if `records` is empty (callers guard against this)
    """
    if not records:
        raise ValueError("Cannot render a report with no questions")

    generated_at = generated_at or datetime.now()
    total = len(records) if total_count is None else total_count
    filter_line = describe_filter(filter_state)
    title = FILTERED_TITLE if filter_line else TITLE

    cur = _Cursor()
    center = PAGE_WIDTH / 2

    # ─── Title block ────────────────────────────────────────────────────────────
    cur.write(title, center, FONT_TITLE, centered=True)
    cur.y += LINE_HEIGHT * 2
    cur.write(f"Generated on: {_long_date(generated_at)}", center, FONT_DATE, centered=True)
    cur.y += LINE_HEIGHT * 1.5
    if filter_line:
        cur.write(filter_line, center, FONT_FILTER, centered=True)
        cur.y += LINE_HEIGHT * 1.5

    # ─── Category sections ──────────────────────────────────────────────────────
    font_name, font_size = FONT_QUESTION
    for category, questions in group_by_category(records).items():
        cur.ensure(HEADING_SAFETY_MARGIN)
        cur.write(category, MARGIN, FONT_HEADING, color=heading_color(category))
        cur.y += LINE_HEIGHT * 1.5

        for idx, record in enumerate(questions, start=1):
            cur.ensure(LINE_SAFETY_MARGIN)
            lines = simpleSplit(f"{idx}. {record.question}", font_name, font_size, WRAP_WIDTH)
            for line_no, line in enumerate(lines):
                if line_no:
                    cur.y += WRAP_LEADING
                    # a very long question spills onto the next page
                    if cur.remaining() < 0:
                        cur.new_page()
                cur.write(line, MARGIN + QUESTION_INDENT, FONT_QUESTION)
            cur.y += LINE_HEIGHT + QUESTION_GAP

        cur.y += CATEGORY_SPACING

    page_count = len(cur.pages)
    for page in cur.pages:
        page.footer = format_footer(page.number, page_count, len(records), total)

    log.info("Report layout: questions=%s pages=%s", len(records), page_count)
    return ReportLayout(
        pages=cur.pages,
        title=title,
        question_count=len(records),
        total_count=total,
    )


# ─── Drawing pass ───────────────────────────────────────────────────────────────

def _draw(pdf: canvas.Canvas, op: TextOp):
    pdf.setFont(op.font, op.size)
    pdf.setFillColor(HexColor(op.color))
    baseline = PAGE_HEIGHT - op.y
    if op.centered:
        pdf.drawCentredString(op.x, baseline, op.text)
    else:
        pdf.drawString(op.x, baseline, op.text)


def render_report(
    records: Sequence[QuestionRecord],
    filter_state: Optional[FilterState] = None,
    total_count: Optional[int] = None,
    generated_at: Optional[datetime] = None,
) -> RenderedReport:
    """
    Render questions to a PDF.

    Returns a RenderedReport with the suggested filename
    (Interview_Questions[_Filtered]_YYYY-MM-DD.pdf) and the PDF bytes.
    """
    generated_at = generated_at or datetime.now()
    layout = layout_report(records, filter_state, total_count, generated_at)

    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(layout.title)

    footer_font, footer_size = FONT_FOOTER
    for page in layout.pages:
        for op in page.ops:
            _draw(pdf, op)
        _draw(pdf, TextOp(
            page.footer, PAGE_WIDTH / 2, PAGE_HEIGHT - FOOTER_OFFSET,
            footer_font, footer_size, centered=True,
        ))
        pdf.showPage()
    pdf.save()

    filtered = describe_filter(filter_state) is not None
    return RenderedReport(
        filename=build_filename(filtered, generated_at),
        content=buffer.getvalue(),
        page_count=layout.page_count,
    )

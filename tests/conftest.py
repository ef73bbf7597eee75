"""Shared fixtures: in-memory resume documents and a fake generation service."""

import json
from io import BytesIO
from typing import List

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from interview_questions.generation import gpt_client
from interview_questions.generation.schemas import QuestionRecord


def build_pdf(pages: List[str]) -> bytes:
    """One drawString per page, so each page holds exactly one text run."""
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    for text in pages:
        if text:
            pdf.setFont("Helvetica", 12)
            pdf.drawString(72, 720, text)
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def build_docx(paragraphs: List[str], table: List[List[str]] = None, controls: List[str] = None) -> bytes:
    """Paragraphs, then an optional table, then paragraphs wrapped in block content controls."""
    import docx
    from docx.oxml import parse_xml
    from docx.oxml.ns import nsdecls, qn

    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    for text in controls or []:
        sdt = parse_xml(
            f"<w:sdt {nsdecls('w')}><w:sdtPr/><w:sdtContent>"
            f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>"
            f"</w:sdtContent></w:sdt>"
        )
        document.element.body.find(qn("w:sectPr")).addprevious(sdt)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def sample_questions() -> List[QuestionRecord]:
    return [
        QuestionRecord(question="Explain how you used Python generators in the ETL job.", category="Skills"),
        QuestionRecord(question="Walk me through the architecture of the payments project.", category="Projects"),
        QuestionRecord(question="What did you own during your time at Acme?", category="Experience"),
        QuestionRecord(question="Describe a disagreement with a teammate.", category="Behavioral"),
        QuestionRecord(question="How would you debug a slow SQL query?", category="Problem-Solving"),
        QuestionRecord(question="Which Kubernetes primitives have you used in production?", category="Skills"),
    ]


@pytest.fixture
def forty_questions() -> List[QuestionRecord]:
    categories = ["Skills", "Projects", "Experience", "Behavioral", "Problem-Solving"]
    return [
        QuestionRecord(
            question=f"Question {i + 1}: tell me about a time you applied {categories[i % 5].lower()} "
                     "under a tight deadline and what you would do differently today.",
            category=categories[i % 5],
        )
        for i in range(40)
    ]


class FakeLLM:
    """Records requests and returns a canned response (or raises)."""

    def __init__(self, response="", error: Exception = None):
        self.response = response
        self.error = error
        self.requests = []

    async def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace the service boundary; set `.response` / `.error` in the test."""
    fake = FakeLLM(response=json.dumps([
        {"question": "Explain X", "category": "Skills"},
        {"question": "Describe project Y", "category": "Projects"},
    ]))
    monkeypatch.setattr(gpt_client, "call_llm", fake)
    return fake

"""
Resume Text Extractor
Produces one flat plain-text string from a PDF, DOCX or plain-text resume.

CONSTRAINTS:
- Deterministic: Same file → same output
- Isolated: No external API calls, no LLM
- Validation first: size and format are checked before any decode attempt
- Format-blind output: callers never need to know which decoder ran
"""

import io
import logging
import os
from typing import List, Optional

from ..errors import (
    CorruptDocumentError,
    EmptyContentError,
    SizeLimitExceededError,
    UnsupportedFormatError,
)
from .schemas import Document

# pypdf is chatty about slightly malformed xref tables
logging.getLogger("pypdf").setLevel(logging.ERROR)

log = logging.getLogger(__name__)


# Configuration
MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", 10 * 1024 * 1024))  # 10MB default

PDF = "pdf"
DOCX = "docx"
TEXT = "txt"

MIME_TYPE_MAP = {
    PDF: "application/pdf",
    DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    TEXT: "text/plain",
}

PAGE_SEPARATOR = "\n\n"
PARAGRAPH_SEPARATOR = "\n\n"


def describe_size(limit: int) -> str:
    """Human-readable upload limit: whole MB from 1 MiB up, KB or bytes below."""
    if limit >= 1048576:
        return f"{limit // 1048576}MB"
    if limit >= 1024:
        return f"{limit // 1024}KB"
    return f"{limit} bytes"


def detect_format(document: Document) -> Optional[str]:
    """
    Return "pdf", "docx" or "txt" for a supported document, None otherwise.

    The declared MIME type wins; the filename extension is the fallback
    (browsers often send an empty or generic type for .docx files).
    """
    media_type = (document.media_type or "").split(";")[0].strip().lower()
    for fmt, mime in MIME_TYPE_MAP.items():
        if media_type == mime:
            return fmt
    if document.extension in MIME_TYPE_MAP:
        return document.extension
    return None


class TextExtractor:
    """
    Format-dispatching text extractor.
    """

    SUPPORTED_TYPES = MIME_TYPE_MAP

    @staticmethod
    def extract(document: Document, max_size: Optional[int] = None) -> str:
        """
        Extract plain text from a resume document.

        Args:
            document: The uploaded or pasted resume
            max_size: Byte limit; defaults to MAX_UPLOAD_SIZE

        Returns:
            Non-empty extracted text

        Raises:
            SizeLimitExceededError: Document is larger than the limit
            UnsupportedFormatError: Neither MIME type nor extension is PDF, DOCX or TXT
            CorruptDocumentError: The decoder could not read the document
            EmptyContentError: The document holds no readable text
        """
        limit = MAX_UPLOAD_SIZE if max_size is None else max_size
        if document.size > limit:
            raise SizeLimitExceededError(
                f"File size exceeds {describe_size(limit)}. Please upload a smaller file.",
                detail=f"{document.size} bytes > {limit} bytes",
            )

        fmt = detect_format(document)
        if fmt is None:
            raise UnsupportedFormatError(
                detail=f"media_type={document.media_type!r} filename={document.filename!r}"
            )

        log.info("Extract: start file=%s format=%s bytes=%s", document.filename, fmt, document.size)

        if fmt == PDF:
            text = TextExtractor._extract_pdf(TextExtractor._as_bytes(document))
        elif fmt == DOCX:
            text = TextExtractor._extract_docx(TextExtractor._as_bytes(document))
        else:
            text = TextExtractor._extract_plain(document.content)

        if not text.strip():
            raise EmptyContentError(detail=f"format={fmt}")

        log.info("Extract: done file=%s characters=%s", document.filename, len(text))
        return text

    @staticmethod
    def _as_bytes(document: Document) -> bytes:
        if isinstance(document.content, str):
            return document.content.encode("utf-8")
        return document.content

    @staticmethod
    def _extract_plain(content) -> str:
        """Plain text: decode only, no further processing."""
        if isinstance(content, str):
            return content
        return content.decode("utf-8-sig", errors="replace")

    @staticmethod
    def _extract_pdf(data: bytes) -> str:
        """
        PDF: positioned text runs of each page joined by single spaces,
        pages joined by a blank line, in the document's own page order.
        """
        from pypdf import PdfReader

        try:
            reader = PdfReader(io.BytesIO(data))
            pages = []
            for page in reader.pages:
                runs: List[str] = []

                def visit(text, cm, tm, font_dict, font_size, runs=runs):
                    run = text.strip()
                    if run:
                        runs.append(run)

                page.extract_text(visitor_text=visit)
                pages.append(" ".join(runs))
        except Exception as e:
            raise CorruptDocumentError(detail=f"PDF parsing failed: {e}")

        return PAGE_SEPARATOR.join(pages)

    @staticmethod
    def _extract_docx(data: bytes) -> str:
        """
        DOCX: body paragraphs and tables in document order, formatting dropped.
        Block-level content controls (w:sdt) are descended into, so template
        sections wrapped in them are kept. Table rows become one line each
        with cells separated by tabs.
        """
        import docx
        from docx.oxml.ns import qn
        from docx.table import Table
        from docx.text.paragraph import Paragraph

        def table_text(table: Table) -> str:
            rows = []
            for row in table.rows:
                cells, seen = [], set()
                for cell in row.cells:
                    # merged cells are repeated once per grid column
                    if id(cell._tc) in seen:
                        continue
                    seen.add(id(cell._tc))
                    cells.append(cell.text.strip())
                line = "\t".join(c for c in cells if c)
                if line:
                    rows.append(line)
            return "\n".join(rows)

        def walk(element, parent, blocks: List[str]):
            for child in element.iterchildren():
                if child.tag == qn("w:p"):
                    text = Paragraph(child, parent).text
                    if text.strip():
                        blocks.append(text)
                elif child.tag == qn("w:tbl"):
                    text = table_text(Table(child, parent))
                    if text:
                        blocks.append(text)
                elif child.tag == qn("w:sdt"):
                    content = child.find(qn("w:sdtContent"))
                    if content is not None:
                        walk(content, parent, blocks)

        try:
            doc = docx.Document(io.BytesIO(data))
            blocks: List[str] = []
            walk(doc.element.body, doc, blocks)
        except Exception as e:
            raise CorruptDocumentError(detail=f"DOCX parsing failed: {e}")

        return PARAGRAPH_SEPARATOR.join(blocks)


def extract_text(document: Document, max_size: Optional[int] = None) -> str:
    """Module-level shortcut for TextExtractor.extract."""
    return TextExtractor.extract(document, max_size=max_size)

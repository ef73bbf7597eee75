"""
Ingestion Package

Turns an uploaded resume (PDF, DOCX or plain text) into one flat string:
1. Validate size and format → reject before decoding
2. Decode with the format-specific extractor → raw text
3. Reject whitespace-only results
"""

from .schemas import Document
from .extractor import TextExtractor, extract_text, detect_format, MAX_UPLOAD_SIZE

__all__ = [
    "Document",
    "TextExtractor",
    "extract_text",
    "detect_format",
    "MAX_UPLOAD_SIZE",
]

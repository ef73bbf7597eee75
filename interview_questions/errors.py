"""Exceptions raised along the resume → questions pipeline."""

from typing import Optional


class QuestionPipelineError(Exception):
    """
    Base class for every recoverable pipeline failure.

    Attributes:
        message: Human-readable message safe to show to the user
        detail: Optional diagnostic text (never shown to the user)
    """

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail

        parts = [self.message]
        if detail:
            parts.append(f"({detail})")
        super().__init__(" ".join(parts))


# ─── Extraction ───────────────────────────────────────────────────────────────

class ExtractionError(QuestionPipelineError):
    default_message = "Failed to extract text from file"


class UnsupportedFormatError(ExtractionError):
    default_message = "Unsupported file type. Please upload PDF, DOCX, or TXT files."


class EmptyContentError(ExtractionError):
    default_message = (
        "No text could be extracted from the file. "
        "Please ensure the file contains readable text."
    )


class SizeLimitExceededError(ExtractionError):
    default_message = "File size exceeds 10MB. Please upload a smaller file."


class CorruptDocumentError(ExtractionError):
    default_message = "Failed to extract text from file. The document appears to be damaged."


# ─── Generation ───────────────────────────────────────────────────────────────

class EmptyInputError(QuestionPipelineError):
    default_message = "Resume text is required"


class GenerationFailedError(QuestionPipelineError):
    default_message = (
        "Failed to generate questions. "
        "Please check your GROQ_API_KEY and try again."
    )


# ─── Validation ───────────────────────────────────────────────────────────────

class ResponseValidationError(QuestionPipelineError):
    """
    The generation service answered, but not with a usable question set.

    Attributes:
        raw_response: The untouched text returned by the service
    """

    def __init__(
        self,
        message: Optional[str] = None,
        detail: Optional[str] = None,
        raw_response: Optional[str] = None,
    ):
        self.raw_response = raw_response
        super().__init__(message, detail)


class MalformedResponseError(ResponseValidationError):
    default_message = "Failed to parse AI response. Please try again."


class InvalidShapeError(ResponseValidationError):
    default_message = "Invalid response format from AI. Please try again."

"""
Pydantic schemas for document ingestion.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field


class Document(BaseModel):
    """
    An uploaded resume, alive only for the duration of one extraction call.

    `content` is raw bytes for uploaded files, or a str for pasted text.
    """
    content: Union[bytes, str] = Field(..., description="Raw file bytes or pasted text")
    media_type: Optional[str] = Field(None, description="Declared MIME type, e.g. application/pdf")
    filename: Optional[str] = Field(None, description="Original filename, used for extension matching")

    @property
    def size(self) -> int:
        """Length in bytes (UTF-8 encoded for str content)."""
        if isinstance(self.content, str):
            return len(self.content.encode("utf-8"))
        return len(self.content)

    @property
    def extension(self) -> str:
        """Lower-case extension without the dot, or "" when there is no filename."""
        if not self.filename or "." not in self.filename:
            return ""
        return self.filename.rsplit(".", 1)[-1].strip().lower()

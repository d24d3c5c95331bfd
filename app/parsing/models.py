from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class DocumentParseError(ValueError):
    pass


class UnsupportedFormatError(DocumentParseError):
    pass


class EmptyContentError(DocumentParseError):
    pass


class FileTooLargeError(DocumentParseError):
    def __init__(self, size: int, max_bytes: int):
        super().__init__(f"File size exceeds maximum limit of {max_bytes / (1024 * 1024):g}MB")
        self.size = size
        self.max_bytes = max_bytes


class ParsedDoc(BaseModel):
    doc_id: str
    source_type: str
    mime_type: str
    text: str
    page_count: int | None = None
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized

from __future__ import annotations

import hashlib
import logging
import re
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import EmptyContentError, FileTooLargeError, ParsedDoc, UnsupportedFormatError

logger = logging.getLogger(__name__)

PDF_MIME_TYPES = frozenset({"application/pdf", "application/x-pdf", "application/acrobat"})
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME_TYPE = "text/plain"

SUPPORTED_FORMATS: tuple[dict[str, str], ...] = (
    {"extension": ".pdf", "mime_type": "application/pdf", "description": "Portable Document Format"},
    {"extension": ".docx", "mime_type": DOCX_MIME_TYPE, "description": "Microsoft Word Document"},
    {"extension": ".txt", "mime_type": TXT_MIME_TYPE, "description": "Plain Text File"},
)

DEFAULT_MAX_BYTES = 10 * 1024 * 1024

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s.,;:!?\-()\[\]{}]")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")
_SPACE_AFTER_PUNCT_RE = re.compile(r"([.,;:!?])\s*")


def _compute_doc_id(text: str, content: bytes) -> str:
    seed = text.encode("utf-8", errors="ignore") if text.strip() else content
    return hashlib.sha256(seed).hexdigest()[:16]


def clean_extracted_text(text: str) -> str:
    """Collapse whitespace and strip characters that confuse keyword analysis."""
    cleaned = _WHITESPACE_RE.sub(" ", text)
    cleaned = _DISALLOWED_CHARS_RE.sub(" ", cleaned)
    cleaned = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", cleaned)
    cleaned = _SPACE_AFTER_PUNCT_RE.sub(r"\1 ", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def _parse_txt(content: bytes) -> tuple[str, int | None]:
    return content.decode("utf-8", errors="replace"), None


def _parse_pdf(content: bytes) -> tuple[str, int | None]:
    reader = PdfReader(BytesIO(content))
    text_parts = [(page.extract_text() or "").strip() for page in reader.pages]
    return "\n".join(part for part in text_parts if part), len(reader.pages)


def _parse_docx(content: bytes) -> tuple[str, int | None]:
    document = Document(BytesIO(content))
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    return "\n".join(paragraphs), None


def is_supported_mime_type(mime_type: str) -> bool:
    normalized = (mime_type or "").split(";")[0].strip().lower()
    return normalized in PDF_MIME_TYPES or normalized in {DOCX_MIME_TYPE, TXT_MIME_TYPE}


def validate_file_size(content: bytes, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
    if len(content) > max_bytes:
        raise FileTooLargeError(len(content), max_bytes)


def parse_document(content: bytes, mime_type: str) -> ParsedDoc:
    normalized = (mime_type or "").split(";")[0].strip().lower()
    if normalized in PDF_MIME_TYPES:
        source_type = "pdf"
        parser = _parse_pdf
    elif normalized == DOCX_MIME_TYPE:
        source_type = "docx"
        parser = _parse_docx
    elif normalized == TXT_MIME_TYPE:
        source_type = "txt"
        parser = _parse_txt
    else:
        raise UnsupportedFormatError(
            f"Unsupported file type '{mime_type}'. Supported types: PDF, DOCX, TXT"
        )

    try:
        raw_text, page_count = parser(content)
    except Exception as exc:
        logger.warning("document_parse_failed source_type=%s size=%s: %s", source_type, len(content), exc)
        raise EmptyContentError(
            f"Could not extract text from the {source_type.upper()} file."
        ) from exc

    text = clean_extracted_text(raw_text)
    if not text:
        raise EmptyContentError(f"No text content found in {source_type.upper()} file.")

    logger.info("document_parsed source_type=%s text_len=%s pages=%s", source_type, len(text), page_count)
    return ParsedDoc(
        doc_id=_compute_doc_id(text, content),
        source_type=source_type,
        mime_type=normalized,
        text=text,
        page_count=page_count,
    )


def extract_text(content: bytes, mime_type: str) -> str:
    return parse_document(content, mime_type).text

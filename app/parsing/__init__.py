from .models import (
    DocumentParseError,
    EmptyContentError,
    FileTooLargeError,
    ParsedDoc,
    UnsupportedFormatError,
)
from .parse import (
    SUPPORTED_FORMATS,
    clean_extracted_text,
    extract_text,
    is_supported_mime_type,
    parse_document,
    validate_file_size,
)

__all__ = [
    "DocumentParseError",
    "EmptyContentError",
    "FileTooLargeError",
    "ParsedDoc",
    "UnsupportedFormatError",
    "SUPPORTED_FORMATS",
    "clean_extracted_text",
    "extract_text",
    "is_supported_mime_type",
    "parse_document",
    "validate_file_size",
]

import sys
import unittest
from io import BytesIO
from pathlib import Path

from docx import Document

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing import (  # noqa: E402
    EmptyContentError,
    FileTooLargeError,
    UnsupportedFormatError,
    clean_extracted_text,
    extract_text,
    is_supported_mime_type,
    parse_document,
    validate_file_size,
)


class CleanTextTests(unittest.TestCase):
    def test_whitespace_and_punctuation_spacing(self):
        self.assertEqual(
            clean_extracted_text("Jane Doe\n\nSkills:  Python , SQL"),
            "Jane Doe Skills: Python, SQL",
        )

    def test_decorative_symbols_are_removed(self):
        self.assertEqual(clean_extracted_text("Python ★ SQL • Docker"), "Python SQL Docker")


class ParseDocumentTests(unittest.TestCase):
    def test_plain_text(self):
        parsed = parse_document(b"Experience\nBuilt APIs in Python.", "text/plain; charset=utf-8")
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.mime_type, "text/plain")
        self.assertEqual(parsed.text, "Experience Built APIs in Python.")
        self.assertIsNone(parsed.page_count)
        self.assertEqual(len(parsed.doc_id), 16)

    def test_docx(self):
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("Skills: Python, SQL")
        buffer = BytesIO()
        document.save(buffer)
        text = extract_text(
            buffer.getvalue(),
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        )
        self.assertEqual(text, "Jane Doe Skills: Python, SQL")

    def test_unsupported_type(self):
        self.assertFalse(is_supported_mime_type("image/png"))
        with self.assertRaises(UnsupportedFormatError):
            parse_document(b"data", "image/png")

    def test_empty_text(self):
        with self.assertRaises(EmptyContentError):
            parse_document(b"  \n\t ", "text/plain")

    def test_corrupt_pdf(self):
        with self.assertRaises(EmptyContentError):
            parse_document(b"this is not a pdf", "application/pdf")

    def test_size_limit(self):
        validate_file_size(b"x" * 10, max_bytes=10)
        with self.assertRaises(FileTooLargeError) as ctx:
            validate_file_size(b"x" * 11, max_bytes=10)
        self.assertEqual(ctx.exception.size, 11)
        self.assertTrue(str(ctx.exception).startswith("File size exceeds maximum limit"))


if __name__ == "__main__":
    unittest.main()

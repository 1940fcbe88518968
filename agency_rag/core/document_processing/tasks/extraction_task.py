"""
Text extraction task.

Turns raw file bytes into plain text, dispatching on the declared MIME
type. PDF pages via pypdf, Word paragraphs and tables via python-docx,
spreadsheet sheets via openpyxl. Presentations and images are accepted
in degraded mode: a fixed placeholder is returned and the bytes are not
read.

Dependencies: pypdf, python-docx, openpyxl
System role: First transform stage of the document ingestion pipeline
"""

from io import BytesIO
from typing import Callable

import openpyxl
from docx import Document as DocxDocument
from pypdf import PdfReader

from agency_rag.core.exceptions import ExtractionError, UnsupportedFileTypeError

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

PRESENTATION_PLACEHOLDER = "[Presentation content - text extraction not available]"
IMAGE_PLACEHOLDER = "[Image content - text extraction not available]"


def extract_pdf(data: bytes) -> str:
    """Concatenate the text of every page, pages separated by a blank line."""
    reader = PdfReader(BytesIO(data))
    return "\n\n".join(page.extract_text() or "" for page in reader.pages)


def extract_docx(data: bytes) -> str:
    """Raw paragraph text with formatting discarded, then table rows tab-separated."""
    document = DocxDocument(BytesIO(data))
    parts = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            parts.append("\t".join(cell.text for cell in row.cells))
    return "\n\n".join(part for part in parts if part.strip())


def extract_xlsx(data: bytes) -> str:
    """Every sheet as tab-separated rows under a 'Sheet: {name}' header line."""
    workbook = openpyxl.load_workbook(BytesIO(data), read_only=True, data_only=True)
    try:
        sheets = []
        for worksheet in workbook.worksheets:
            rows = []
            for row in worksheet.iter_rows(values_only=True):
                rows.append("\t".join("" if value is None else str(value) for value in row))
            sheets.append(f"Sheet: {worksheet.title}\n" + "\n".join(rows))
    finally:
        workbook.close()
    return "\n\n".join(sheets)


def extract_presentation(data: bytes) -> str:
    return PRESENTATION_PLACEHOLDER


def extract_image(data: bytes) -> str:
    return IMAGE_PLACEHOLDER


# Exact MIME type -> handler. image/* is matched by prefix in handler_for().
EXTRACTORS: dict[str, Callable[[bytes], str]] = {
    PDF_MIME: extract_pdf,
    DOCX_MIME: extract_docx,
    XLSX_MIME: extract_xlsx,
    PPTX_MIME: extract_presentation,
}


class ExtractionTask:
    """Extract plain text from raw document bytes."""

    def __init__(self, extractors: dict[str, Callable[[bytes], str]] | None = None) -> None:
        """
        Initialize extraction task.

        Args:
            extractors: MIME type -> handler table (defaults to EXTRACTORS)
        """
        self._extractors = extractors if extractors is not None else dict(EXTRACTORS)

    def handler_for(self, file_type: str | None) -> Callable[[bytes], str]:
        """
        Resolve the single handler for a declared MIME type.

        Raises:
            UnsupportedFileTypeError: No rule matches the type
        """
        normalized = (file_type or "").split(";")[0].strip().lower()
        if normalized in self._extractors:
            return self._extractors[normalized]
        if normalized.startswith("image/"):
            return extract_image
        raise UnsupportedFileTypeError(file_type)

    def extract(self, data: bytes, file_type: str | None) -> str:
        """
        Extract text from a document.

        Args:
            data: Raw file bytes
            file_type: Declared MIME type of the file

        Returns:
            str: Extracted text (may be empty)

        Raises:
            UnsupportedFileTypeError: No rule matches the type
            ExtractionError: The extraction library failed
        """
        handler = self.handler_for(file_type)
        try:
            return handler(data)
        except Exception as e:
            raise ExtractionError(f"Failed to extract text from {file_type}: {e}", file_type) from e

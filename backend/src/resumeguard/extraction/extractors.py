"""Library-backed text extraction routines for PDF and DOCX."""

import io

from docx import Document as DocxDocument
from docx.table import Table
from docx.text.paragraph import Paragraph
from pypdf import PdfReader


def extract_pdf_text(content: bytes) -> str:
    """Extract text from a PDF using pypdf, one page per line block."""
    reader = PdfReader(io.BytesIO(content))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages).strip()


def _table_text(table: Table) -> str:
    rows_text: list[str] = []
    for row in table.rows:
        cells = [cell.text.strip() for cell in row.cells]
        if any(cells):
            rows_text.append("\t".join(cells))
    return "\n".join(rows_text)


def extract_docx_text(content: bytes) -> str:
    """Extract raw text from .docx using python-docx.

    Paragraphs and tables are emitted in document order. Tables give one
    row per line with cells separated by tabs.
    """
    doc = DocxDocument(io.BytesIO(content))
    parts: list[str] = []
    for item in doc.iter_inner_content():
        if isinstance(item, Paragraph):
            text = item.text if item.text.strip() else ""
        elif isinstance(item, Table):
            text = _table_text(item)
        else:
            continue
        if text:
            parts.append(text)
    return "\n\n".join(parts)

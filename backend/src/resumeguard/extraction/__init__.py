"""Text extraction for validated uploads."""

from resumeguard.extraction.adapter import ExtractionAdapter
from resumeguard.extraction.extractors import extract_docx_text, extract_pdf_text

__all__ = [
    "ExtractionAdapter",
    "extract_docx_text",
    "extract_pdf_text",
]

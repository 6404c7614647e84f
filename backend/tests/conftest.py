"""Shared fixtures: hand-built PDFs and DOCX packages."""

import io
import zipfile

import pytest
from docx import Document as DocxDocument

from resumeguard.middleware.rate_limit import limiter

# Fixed timestamp keeps crafted ZIP bytes identical across runs
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


def build_pdf(text: str = "Jane Doe", with_eof: bool = True) -> bytes:
    """Build a one-page PDF with a valid xref table."""
    stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n" % (
        len(objects) + 1,
        xref_offset,
    )
    if with_eof:
        out += b"%%EOF\n"
    return bytes(out)


def build_docx_zip(
    extra_entries: dict[str, bytes] | None = None,
    content_types: bool = True,
    document: bool = True,
) -> bytes:
    """Build a stored (uncompressed) ZIP laid out like an OOXML package."""
    entries: dict[str, bytes] = {}
    if content_types:
        entries["[Content_Types].xml"] = b"<Types/>"
    if document:
        entries["word/document.xml"] = b"<w:document/>"
    entries.update(extra_entries or {})

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_STORED) as zf:
        for name, data in entries.items():
            zf.writestr(zipfile.ZipInfo(name, date_time=ZIP_DATE_TIME), data)
    return buffer.getvalue()


def build_real_docx(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
    """Build a genuine .docx with python-docx."""
    doc = DocxDocument()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table:
        docx_table = doc.add_table(rows=len(table), cols=len(table[0]))
        for row, values in zip(docx_table.rows, table):
            for cell, value in zip(row.cells, values):
                cell.text = value

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def pdf_bytes() -> bytes:
    return build_pdf()


@pytest.fixture
def docx_zip_bytes() -> bytes:
    return build_docx_zip()


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def make_docx_zip():
    return build_docx_zip


@pytest.fixture
def make_real_docx():
    return build_real_docx


@pytest.fixture
def rate_limit_disabled():
    """Turn the upload rate limit off for the duration of a test."""
    previous = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = previous

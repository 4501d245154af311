"""Tests for resume text extraction."""

import io

import pytest
from docx import Document

from services.document_parser import decode_text, detect_kind, extract_text
from services.errors import DocumentParseError


def _minimal_pdf(text: str) -> bytes:
    """Build a one-page PDF with a single line of Helvetica text."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n".encode() + body + b"\nendobj\n")
    xref = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode())
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode())
    out.write(f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref}\n%%EOF\n".encode())
    return out.getvalue()


def _docx(*paragraphs: str) -> bytes:
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.mark.parametrize(
    "filename, content_type, expected",
    [
        ("resume.pdf", "application/pdf", "pdf"),
        ("resume.bin", "application/pdf", "pdf"),
        ("resume.PDF", None, "pdf"),
        ("resume.docx", "application/octet-stream", "docx"),
        ("resume.doc", "application/msword", "doc"),
        ("resume.txt", "text/plain; charset=utf-8", "txt"),
        ("resume.png", "image/png", None),
        (None, None, None),
    ],
)
def test_detect_kind(filename, content_type, expected):
    assert detect_kind(filename, content_type) == expected


def test_extract_text_pdf():
    text = extract_text(_minimal_pdf("Python developer with Docker"), "resume.pdf", "application/pdf")
    assert "Python developer with Docker" in text


def test_extract_text_docx():
    content = _docx("Jane Smith", "Skills: Python, React")
    text = extract_text(content, "resume.docx", None)
    assert text == "Jane Smith\nSkills: Python, React"


def test_extract_text_plain():
    assert extract_text(b"  Python and SQL\n", "resume.txt", "text/plain") == "Python and SQL"


def test_decode_text_tolerates_bom_and_bad_bytes():
    assert decode_text(b"\xef\xbb\xbfR\xc3\xa9sum\xc3\xa9") == "R\u00e9sum\u00e9"
    assert decode_text(b"Python \xff dev") == "Python \ufffd dev"


def test_extract_text_corrupt_pdf_raises():
    with pytest.raises(DocumentParseError):
        extract_text(b"%PDF-1.4 this is not really a pdf", "resume.pdf", "application/pdf")


def test_extract_text_unsupported_type_raises():
    with pytest.raises(DocumentParseError):
        extract_text(b"\x89PNG", "photo.png", "image/png")

"""Resume text extraction for the supported upload formats."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

from services.errors import DocumentParseError

logger = logging.getLogger(__name__)

PDF_TYPES = frozenset({"application/pdf"})
DOCX_TYPES = frozenset({"application/vnd.openxmlformats-officedocument.wordprocessingml.document"})
DOC_TYPES = frozenset({"application/msword"})
TEXT_TYPES = frozenset({"text/plain"})

EXTENSION_KINDS = {".pdf": "pdf", ".docx": "docx", ".doc": "doc", ".txt": "txt"}


def detect_kind(filename: str | None, content_type: str | None) -> str | None:
    """Classify an upload as pdf/docx/doc/txt from its MIME type or extension."""
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in PDF_TYPES:
        return "pdf"
    if mime in DOCX_TYPES:
        return "docx"
    if mime in DOC_TYPES:
        return "doc"
    if mime in TEXT_TYPES:
        return "txt"
    if filename:
        return EXTENSION_KINDS.get(PurePath(filename).suffix.lower())
    return None


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def decode_text(raw: bytes) -> str:
    """Decode plain text, tolerating a BOM and stray undecodable bytes."""
    return raw.decode("utf-8-sig", errors="replace").strip()


def extract_text(content: bytes, filename: str | None = None, content_type: str | None = None) -> str:
    """Extract text from an uploaded resume.

    Legacy .doc files have no parser here and are decoded best-effort as text.
    """
    kind = detect_kind(filename, content_type)
    try:
        if kind == "pdf":
            return extract_text_pdf(content)
        if kind == "docx":
            return extract_text_docx(content)
        if kind in ("txt", "doc"):
            return decode_text(content)
    except Exception as e:
        logger.warning("Failed to extract text from %s (%s): %s", filename, kind, e)
        raise DocumentParseError(f"Could not read {kind.upper()} file") from e
    raise DocumentParseError("Unsupported file type")

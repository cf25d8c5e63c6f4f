from __future__ import annotations

import hashlib
import logging
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .models import SUPPORTED_SOURCE_TYPES, ParsedDoc

logger = logging.getLogger(__name__)


class UnsupportedDocumentError(ValueError):
    def __init__(self, file_type: str):
        super().__init__(
            f"Unsupported file type '{file_type}'. Only PDF and DOCX (or plain text) are supported."
        )
        self.file_type = file_type


def _compute_doc_id(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()[:16]


def _normalize_file_type(file_type: str) -> str:
    return (file_type or "").strip().lower().lstrip(".")


def _parse_pdf(content: bytes) -> tuple[str, int, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except PyPdfError as exc:
        logger.warning("pdf_parse_failed bytes=%s: %s", len(content), exc)
        return "", 0, [f"PDF parsing failed: {exc}"]
    text_parts = [page for page in pages if page]
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), len(pages), warnings


def _parse_docx(content: bytes) -> tuple[str, list[str]]:
    try:
        document = Document(BytesIO(content))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    except Exception as exc:  # noqa: BLE001 - python-docx raises zipfile, lxml and package errors
        logger.warning("docx_parse_failed bytes=%s: %s", len(content), exc)
        return "", [f"DOCX parsing failed: {exc}"]
    warnings = [] if paragraphs else ["No extractable text found in DOCX."]
    return "\n".join(paragraphs), warnings


def extract_text(content: bytes, file_type: str) -> ParsedDoc:
    """Turn an uploaded document into plain text, dispatching on its type."""
    source_type = _normalize_file_type(file_type)
    if source_type not in SUPPORTED_SOURCE_TYPES:
        raise UnsupportedDocumentError(source_type or "unknown")

    page_count: int | None = None
    if source_type == "pdf":
        text, page_count, warnings = _parse_pdf(content)
    elif source_type == "docx":
        text, warnings = _parse_docx(content)
    else:
        text, warnings = content.decode("utf-8", errors="replace"), []

    return ParsedDoc(
        doc_id=_compute_doc_id(content),
        source_type=source_type,
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str | Path) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return extract_text(path.read_bytes(), path.suffix)

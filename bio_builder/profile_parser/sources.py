"""Readers turning saved profile pages into plain text."""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from bs4 import BeautifulSoup
from docx import Document

logger = logging.getLogger(__name__)

DEFAULT_PDF_BACKENDS = ["pypdf", "pdfminer"]

TEXT_SUFFIXES = {".txt", ".text"}
HTML_SUFFIXES = {".html", ".htm"}

# Elements whose text is never page content.
HTML_DROP_TAGS = ["script", "style", "noscript", "template"]


class UnsupportedSourceError(ValueError):
    """Raised for input files the readers do not understand."""


def resolve_pdf_backends(prefer_backends: Iterable[str] | None = None) -> list[str]:
    if prefer_backends:
        order = [backend.strip() for backend in prefer_backends if backend and backend.strip()]
    else:
        env_value = os.environ.get("BIO_PDF_BACKENDS")
        if env_value:
            order = [backend.strip() for backend in env_value.split(",") if backend.strip()]
        else:
            order = list(DEFAULT_PDF_BACKENDS)
    return list(dict.fromkeys(order)) or list(DEFAULT_PDF_BACKENDS)


def html_to_text(markup: str) -> str:
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup(HTML_DROP_TAGS):
        tag.decompose()
    return soup.get_text("\n", strip=True)


def docx_to_text(path: Path) -> str:
    document = Document(str(path))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def _extract_with_pypdf(path: Path) -> str:
    try:
        from pypdf import PdfReader
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("pypdf is not installed") from exc

    reader = PdfReader(str(path))
    chunks: list[str] = []
    for page_number, page in enumerate(reader.pages, start=1):
        try:
            chunks.append(page.extract_text() or "")
        except Exception as exc:  # pragma: no cover - depends on document
            logger.debug("pypdf failed on page %d of %s: %s", page_number, path, exc)
    return "\n".join(chunks)


def _extract_with_pdfminer(path: Path) -> str:
    try:
        from pdfminer.high_level import extract_text
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("pdfminer.six is not installed") from exc

    return extract_text(str(path)) or ""


PDF_BACKENDS = {
    "pypdf": _extract_with_pypdf,
    "pdfminer": _extract_with_pdfminer,
}


def pdf_to_text(path: Path, prefer_backends: Iterable[str] | None = None) -> str:
    """Text of the first backend that produces any, in preference order."""
    errors: list[str] = []
    ran = False
    for backend in resolve_pdf_backends(prefer_backends):
        extractor = PDF_BACKENDS.get(backend)
        if extractor is None:
            errors.append(f"unknown backend: {backend}")
            continue
        try:
            text = extractor(path)
        except Exception as exc:  # pragma: no cover - backend errors depend on deps
            logger.debug("PDF backend %s failed for %s: %s", backend, path, exc)
            errors.append(f"{backend}: {exc}")
            continue
        ran = True
        if text.strip():
            return text
        logger.debug("PDF backend %s returned no text for %s", backend, path)
    if errors and not ran:
        raise RuntimeError("; ".join(errors))
    return ""


def read_source(path: Path, *, pdf_backends: Iterable[str] | None = None) -> str:
    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8", errors="ignore")
    if suffix in HTML_SUFFIXES:
        return html_to_text(path.read_text(encoding="utf-8", errors="ignore"))
    if suffix == ".docx":
        return docx_to_text(path)
    if suffix == ".pdf":
        return pdf_to_text(path, pdf_backends)
    raise UnsupportedSourceError(f"Unsupported input type: {path.suffix or path.name}")

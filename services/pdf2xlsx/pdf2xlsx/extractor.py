"""PDF text extraction into positioned fragments.

Two engines are supported: ``pdfplumber`` (default) and ``pymupdf``. Both
return one list of fragments per page with ``y`` measured upward from the
bottom of the page, so larger ``y`` means closer to the top.
"""

from __future__ import annotations

import io
from typing import List

import fitz
import pdfplumber

from .layout import DEFAULT_ROW_TOLERANCE, render_text
from .models import PositionedFragment
from .normalizer import normalize_text

ENGINES = ("pdfplumber", "pymupdf")


class ExtractionError(RuntimeError):
    """The document could not be opened or its text could not be read."""


Pages = List[List[PositionedFragment]]


def _extract_pdfplumber(pdf_bytes: bytes) -> Pages:
    pages: Pages = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            height = float(page.height)
            words = page.extract_words(keep_blank_chars=False, extra_attrs=[])
            pages.append([
                PositionedFragment(
                    x=float(w["x0"]),
                    y=height - float(w["bottom"]),
                    text=w["text"],
                )
                for w in words
                if w.get("text")
            ])
    return pages


def _extract_pymupdf(pdf_bytes: bytes) -> Pages:
    pages: Pages = []
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        for pidx in range(doc.page_count):
            page = doc.load_page(pidx)
            height = float(page.rect.height)
            fragments: List[PositionedFragment] = []
            for word in page.get_text("words") or []:
                if len(word) < 5:
                    continue
                x0, _y0, _x1, y1, text, *_ = word
                text = (text or "").strip()
                if not text:
                    continue
                fragments.append(PositionedFragment(x=float(x0), y=height - float(y1), text=text))
            pages.append(fragments)
    return pages


def extract_pages(pdf_bytes: bytes, engine: str = "pdfplumber") -> Pages:
    """Return the positioned fragments of every page, in page order."""
    if engine not in ENGINES:
        raise ValueError(f"Unknown extractor engine '{engine}', expected one of {', '.join(ENGINES)}")
    if not pdf_bytes:
        raise ExtractionError("empty document")
    try:
        if engine == "pymupdf":
            return _extract_pymupdf(pdf_bytes)
        return _extract_pdfplumber(pdf_bytes)
    except Exception as exc:
        raise ExtractionError(f"{engine} extraction failed: {exc.__class__.__name__}: {exc}") from exc


def extract_text(
    pdf_bytes: bytes,
    engine: str = "pdfplumber",
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> str:
    """Extracted text, one visual row per line."""
    rows = normalize_text(render_text(extract_pages(pdf_bytes, engine), tolerance))
    return "".join(f"{row}\n" for row in rows)

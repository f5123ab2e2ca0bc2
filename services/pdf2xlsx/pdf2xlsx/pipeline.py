"""Price-list pipeline: text -> lines -> logical lines -> records.

``parse_text`` runs the primary heuristic only. ``convert_text`` and
``convert_pdf`` add the single-line fallback and turn a total failure into a
``NO_ROWS`` outcome instead of an exception. Only extraction failures
(``ExtractionError``) propagate.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .assembler import assemble_logical_lines
from .diagnostics import DiagnosticsObserver, notify
from .extractor import extract_pages
from .fallback import fallback_records
from .headers import filter_headers
from .layout import DEFAULT_ROW_TOLERANCE, render_text
from .logging import get_logger
from .models import (
    NO_ROWS_HINT,
    ConversionOutcome,
    OutcomeStatus,
    ParseDiagnostics,
    ParsedRecord,
    ParseResult,
    PositionedFragment,
)
from .normalizer import normalize_text
from .row_parser import parse_row

logger = get_logger(__name__)

DEFAULT_FAILED_SAMPLE_SIZE = 200


def parse_lines(lines: List[str], failed_sample_size: int = DEFAULT_FAILED_SAMPLE_SIZE) -> ParseResult:
    """Run header filter, assembler and row parser over normalized lines."""
    raw_lines = filter_headers(lines)
    logical_lines = assemble_logical_lines(raw_lines)

    records: List[ParsedRecord] = []
    failed: List[str] = []
    for line in logical_lines:
        record = parse_row(line)
        if record is not None:
            records.append(record)
        else:
            failed.append(line)

    diagnostics = ParseDiagnostics(
        raw_line_count=len(raw_lines),
        logical_line_count=len(logical_lines),
        parsed_count=len(records),
        failed_sample=failed[: max(0, failed_sample_size)],
    )
    return ParseResult(records=records, failed=failed, diagnostics=diagnostics)


def parse_text(
    text: str,
    observer: Optional[DiagnosticsObserver] = None,
    failed_sample_size: int = DEFAULT_FAILED_SAMPLE_SIZE,
) -> ParseResult:
    """Parse pre-flattened text (one row per line) with the primary heuristic."""
    result = parse_lines(normalize_text(text), failed_sample_size)
    logger.info(
        "parse_summary",
        raw_lines=result.diagnostics.raw_line_count,
        logical_lines=result.diagnostics.logical_line_count,
        parsed=result.diagnostics.parsed_count,
        failed=len(result.failed),
    )
    notify(observer, "on_parse", result.diagnostics)
    return result


def convert_text(
    text: str,
    observer: Optional[DiagnosticsObserver] = None,
    failed_sample_size: int = DEFAULT_FAILED_SAMPLE_SIZE,
    enable_fallback: bool = True,
) -> ConversionOutcome:
    """Primary pipeline, then the fallback matcher if it yields nothing."""
    notify(observer, "on_text", text)
    result = parse_text(text, observer=observer, failed_sample_size=failed_sample_size)

    if result.records:
        notify(observer, "on_records", result.records)
        return ConversionOutcome(
            status=OutcomeStatus.PARSED,
            records=result.records,
            diagnostics=result.diagnostics,
            text=text,
        )

    if enable_fallback:
        records = fallback_records(normalize_text(text))
        logger.info("fallback_attempted", rows=len(records))
        if records:
            notify(observer, "on_records", records)
            return ConversionOutcome(
                status=OutcomeStatus.FALLBACK,
                records=records,
                diagnostics=result.diagnostics,
                text=text,
            )

    logger.warning("no_rows_detected", raw_lines=result.diagnostics.raw_line_count)
    return ConversionOutcome(
        status=OutcomeStatus.NO_ROWS,
        records=[],
        diagnostics=result.diagnostics,
        text=text,
        hint=NO_ROWS_HINT,
    )


def convert_pages(
    pages: Iterable[Sequence[PositionedFragment]],
    observer: Optional[DiagnosticsObserver] = None,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    failed_sample_size: int = DEFAULT_FAILED_SAMPLE_SIZE,
    enable_fallback: bool = True,
) -> ConversionOutcome:
    """Rebuild rows from positioned fragments and convert them."""
    text = "\n".join(normalize_text(render_text(pages, tolerance)))
    return convert_text(
        text,
        observer=observer,
        failed_sample_size=failed_sample_size,
        enable_fallback=enable_fallback,
    )


def convert_pdf(
    pdf_bytes: bytes,
    engine: str = "pdfplumber",
    observer: Optional[DiagnosticsObserver] = None,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    failed_sample_size: int = DEFAULT_FAILED_SAMPLE_SIZE,
    enable_fallback: bool = True,
) -> ConversionOutcome:
    """Extract a PDF and convert it; raises ``ExtractionError`` on bad input."""
    pages = extract_pages(pdf_bytes, engine=engine)
    logger.info("pdf_extracted", engine=engine, pages=len(pages))
    return convert_pages(
        pages,
        observer=observer,
        tolerance=tolerance,
        failed_sample_size=failed_sample_size,
        enable_fallback=enable_fallback,
    )


__all__ = [
    "convert_pages",
    "convert_pdf",
    "convert_text",
    "parse_lines",
    "parse_text",
]

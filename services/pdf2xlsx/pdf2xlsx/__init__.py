"""Price-list PDF to Excel converter."""

__version__ = "1.0.0"

from .models import ConversionOutcome, OutcomeStatus, ParsedRecord, PositionedFragment
from .pipeline import convert_pages, convert_pdf, convert_text, parse_text

__all__ = [
    "ConversionOutcome",
    "OutcomeStatus",
    "ParsedRecord",
    "PositionedFragment",
    "convert_pages",
    "convert_pdf",
    "convert_text",
    "parse_text",
]

"""Domain models for price-list extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

RECORD_COLUMNS = ("codigo", "descripcion", "precio", "stock")


@dataclass(slots=True, frozen=True)
class PositionedFragment:
    """One span of extracted text at an approximate page coordinate.

    ``y`` grows upward, so the top of the page has the largest value.
    """

    x: float
    y: float
    text: str


@dataclass(slots=True)
class ParsedRecord:
    """Single price-list row: code, description, price and stock."""

    codigo: str
    descripcion: str
    precio: Decimal
    stock: Decimal

    def as_dict(self) -> Dict[str, Any]:
        return {
            "codigo": self.codigo,
            "descripcion": self.descripcion,
            "precio": float(self.precio),
            "stock": float(self.stock),
        }


@dataclass(slots=True)
class ParseDiagnostics:
    """Counters and a sample of unparsed lines for heuristic tuning."""

    raw_line_count: int = 0
    logical_line_count: int = 0
    parsed_count: int = 0
    failed_sample: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "rawLines": self.raw_line_count,
            "logicalLines": self.logical_line_count,
            "parsed": self.parsed_count,
            "failedSample": list(self.failed_sample),
        }


@dataclass(slots=True)
class ParseResult:
    """Output of one run of the primary pipeline."""

    records: List[ParsedRecord]
    failed: List[str]
    diagnostics: ParseDiagnostics


class OutcomeStatus(str, Enum):
    PARSED = "parsed"
    FALLBACK = "fallback"
    NO_ROWS = "no_rows"


NO_ROWS_ERROR = "No se detectaron filas. Ajustá la heurística de parser."
NO_ROWS_HINT = "Verifica que el PDF no sea un escaneo. Para escaneos se necesita OCR."


@dataclass(slots=True)
class ConversionOutcome:
    """Final result for one document, including the empty-result case."""

    status: OutcomeStatus
    records: List[ParsedRecord]
    diagnostics: ParseDiagnostics
    text: str = ""
    hint: Optional[str] = None

    @property
    def has_rows(self) -> bool:
        return bool(self.records)

    def summary(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "rows": len(self.records),
            "diagnostics": self.diagnostics.as_dict(),
            "hint": self.hint,
        }

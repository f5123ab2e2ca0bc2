"""Per-invocation diagnostic observers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Protocol

from .logging import get_logger
from .models import ParseDiagnostics, ParsedRecord

logger = get_logger(__name__)


class DiagnosticsObserver(Protocol):
    def on_text(self, text: str) -> None: ...

    def on_parse(self, diagnostics: ParseDiagnostics) -> None: ...

    def on_records(self, records: List[ParsedRecord]) -> None: ...


class LoggingObserver:
    """Send diagnostics to the structured log."""

    def __init__(self, doc_id: str | None = None, preview_chars: int = 500) -> None:
        self.log = logger.bind(doc_id=doc_id) if doc_id else logger
        self.preview_chars = preview_chars

    def on_text(self, text: str) -> None:
        self.log.debug("extracted_text", chars=len(text), preview=text[: self.preview_chars])

    def on_parse(self, diagnostics: ParseDiagnostics) -> None:
        self.log.info("parse_diagnostics", **diagnostics.as_dict())

    def on_records(self, records: List[ParsedRecord]) -> None:
        self.log.info("records_ready", rows=len(records))


class DirectoryObserver:
    """Write the artifacts of a single run under ``out_dir`` using ``stem``."""

    def __init__(self, out_dir: Path, stem: str) -> None:
        self.out_dir = Path(out_dir)
        self.stem = stem

    def _path(self, suffix: str) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        return self.out_dir / f"{self.stem}-{suffix}"

    def on_text(self, text: str) -> None:
        self._path("text.txt").write_text(text, encoding="utf-8")

    def on_parse(self, diagnostics: ParseDiagnostics) -> None:
        self._path("diag.json").write_text(
            json.dumps(diagnostics.as_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def on_records(self, records: List[ParsedRecord]) -> None:
        self._path("rows.json").write_text(
            json.dumps([r.as_dict() for r in records], ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def notify(observer: DiagnosticsObserver | None, event: str, payload) -> None:
    """Deliver ``payload`` to ``observer.<event>``; failures are only logged."""
    if observer is None:
        return
    try:
        getattr(observer, event)(payload)
    except Exception as exc:
        logger.warning("diagnostics_failed", observer_event=event, error=str(exc))

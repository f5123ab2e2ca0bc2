"""Command-line interface for the pdf2xlsx converter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .config import load_config
from .diagnostics import DirectoryObserver
from .extractor import ENGINES, ExtractionError, extract_text
from .logging import configure_logging, get_logger
from .models import NO_ROWS_ERROR
from .pipeline import convert_pdf, convert_text
from .writer import write_workbook

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Price-list PDF to Excel converter")

NO_ROWS_EXIT_CODE = 2


def _check_engine(engine: Optional[str]) -> Optional[str]:
    if engine is not None and engine not in ENGINES:
        raise typer.BadParameter(f"engine must be one of {', '.join(ENGINES)}")
    return engine


def _read_pdf(path: Path) -> bytes:
    if not path.exists():
        raise typer.BadParameter(f"PDF not found: {path}")
    return path.read_bytes()


@app.command("convert")
def convert_command(
    pdf: Path = typer.Argument(..., help="Path to the price-list PDF"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output .xlsx (default: next to the PDF)"),
    engine: Optional[str] = typer.Option(None, "--engine", callback=_check_engine, help="pdfplumber or pymupdf"),
    tolerance: Optional[float] = typer.Option(None, "--tolerance", min=0.01, help="Vertical row-grouping tolerance"),
    diag_dir: Optional[Path] = typer.Option(None, "--diag-dir", help="Write text, diagnostics and rows for this run"),
) -> None:
    cfg = load_config()
    configure_logging(cfg.log_level, json_logs=False)

    pdf_path = pdf.expanduser().resolve()
    out_path = (out or pdf_path.with_suffix(".xlsx")).expanduser().resolve()
    observer = DirectoryObserver(diag_dir.expanduser().resolve(), pdf_path.stem) if diag_dir else None

    try:
        outcome = convert_pdf(
            _read_pdf(pdf_path),
            engine=engine or cfg.extractor_engine,
            observer=observer,
            tolerance=tolerance or cfg.row_tolerance,
            failed_sample_size=cfg.failed_sample_size,
            enable_fallback=cfg.enable_fallback,
        )
    except ExtractionError as exc:
        logger.error("convert_failed", pdf=str(pdf_path), error=str(exc))
        typer.echo(f"Error al procesar el PDF: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not outcome.has_rows:
        typer.echo(json.dumps({"error": NO_ROWS_ERROR, "hint": outcome.hint}, ensure_ascii=False), err=True)
        raise typer.Exit(code=NO_ROWS_EXIT_CODE)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(write_workbook(outcome.records, sheet_name=cfg.sheet_name))
    typer.echo(json.dumps({**outcome.summary(), "out": str(out_path)}, ensure_ascii=False))


@app.command("text")
def text_command(
    pdf: Path = typer.Argument(..., help="Path to the PDF"),
    engine: Optional[str] = typer.Option(None, "--engine", callback=_check_engine, help="pdfplumber or pymupdf"),
) -> None:
    """Print the reconstructed text, one visual row per line."""
    cfg = load_config()
    configure_logging(cfg.log_level, json_logs=False)
    try:
        text = extract_text(
            _read_pdf(pdf.expanduser().resolve()),
            engine=engine or cfg.extractor_engine,
            tolerance=cfg.row_tolerance,
        )
    except ExtractionError as exc:
        typer.echo(f"Error al extraer texto: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(text, nl=False)


@app.command("parse")
def parse_command(
    text_file: Path = typer.Argument(..., help="Text file with one table row per line"),
) -> None:
    """Parse already-extracted text and print the records as JSON."""
    cfg = load_config()
    configure_logging(cfg.log_level, json_logs=False)
    if not text_file.exists():
        raise typer.BadParameter(f"File not found: {text_file}")
    outcome = convert_text(
        text_file.read_text(encoding="utf-8"),
        failed_sample_size=cfg.failed_sample_size,
        enable_fallback=cfg.enable_fallback,
    )
    typer.echo(json.dumps({
        **outcome.summary(),
        "records": [r.as_dict() for r in outcome.records],
    }, ensure_ascii=False, indent=2))
    if not outcome.has_rows:
        raise typer.Exit(code=NO_ROWS_EXIT_CODE)


@app.command("service")
def service_command(
    host: str = typer.Option("0.0.0.0", "--host", help="Service bind host"),
    port: int = typer.Option(8000, "--port", help="Service port"),
) -> None:
    import uvicorn

    uvicorn.run(
        "pdf2xlsx.app:create_app",
        host=host,
        port=port,
        factory=True,
        log_level="info",
    )


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

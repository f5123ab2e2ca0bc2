"""FastAPI application converting price-list PDFs to Excel.

Endpoints:
- POST /convert - PDF upload -> .xlsx attachment
- POST /debug - PDF upload -> extracted text (text/plain)
- POST /parse-text - pre-flattened text -> JSON records
- GET /health - Health check
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from .config import AppConfig, load_config
from .diagnostics import LoggingObserver
from .extractor import ExtractionError, extract_text
from .logging import configure_logging, get_logger
from .models import NO_ROWS_ERROR
from .pipeline import convert_pdf, convert_text
from .writer import write_workbook

logger = get_logger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ParseTextRequest(BaseModel):
    text: str


def _read_upload(upload: Optional[UploadFile], config: AppConfig) -> bytes:
    if upload is None or not upload.filename:
        raise HTTPException(status_code=400, detail="No se subió ningún PDF")
    if not upload.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="File must be a PDF")
    data = upload.file.read(config.max_upload_bytes + 1)
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded PDF is empty")
    if len(data) > config.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"PDF exceeds the {config.max_upload_mb}MB upload limit",
        )
    return data


def create_app(config: AppConfig | None = None) -> FastAPI:
    cfg = config or load_config()
    configure_logging(cfg.log_level)

    api = FastAPI(
        title="PDF to XLSX Price List Converter",
        description="Convert tabular price-list PDFs into Excel rows (codigo, descripcion, precio, stock)",
        version="1.0.0",
    )
    api.state.config = cfg

    @api.get("/health")
    def health() -> dict:
        return {"status": "healthy", "service": "pdf2xlsx", "engine": cfg.extractor_engine}

    @api.post("/convert")
    def convert(pdf: Optional[UploadFile] = File(None)):
        data = _read_upload(pdf, cfg)
        try:
            outcome = convert_pdf(
                data,
                engine=cfg.extractor_engine,
                observer=LoggingObserver(doc_id=pdf.filename),
                tolerance=cfg.row_tolerance,
                failed_sample_size=cfg.failed_sample_size,
                enable_fallback=cfg.enable_fallback,
            )
        except ExtractionError as exc:
            logger.error("convert_failed", filename=pdf.filename, error=str(exc))
            return JSONResponse(
                status_code=500,
                content={"error": "Error al procesar el PDF", "detail": str(exc)},
            )

        if not outcome.has_rows:
            return JSONResponse(
                status_code=422,
                content={"error": NO_ROWS_ERROR, "hint": outcome.hint},
            )

        content = write_workbook(outcome.records, sheet_name=cfg.sheet_name)
        return Response(
            content=content,
            media_type=XLSX_MEDIA_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="{cfg.output_filename}"',
                "X-Rows-Status": outcome.status.value,
                "X-Rows-Count": str(len(outcome.records)),
            },
        )

    @api.post("/debug")
    def debug(pdf: Optional[UploadFile] = File(None)):
        data = _read_upload(pdf, cfg)
        try:
            text = extract_text(data, engine=cfg.extractor_engine, tolerance=cfg.row_tolerance)
        except ExtractionError as exc:
            logger.error("debug_extract_failed", filename=pdf.filename, error=str(exc))
            return JSONResponse(
                status_code=500,
                content={"error": "Error al extraer texto", "detail": str(exc)},
            )
        return PlainTextResponse(text[: cfg.debug_text_limit])

    @api.post("/parse-text")
    def parse_text_endpoint(payload: ParseTextRequest) -> dict:
        outcome = convert_text(
            payload.text,
            failed_sample_size=cfg.failed_sample_size,
            enable_fallback=cfg.enable_fallback,
        )
        return {
            **outcome.summary(),
            "records": [r.as_dict() for r in outcome.records],
        }

    return api


app = create_app()

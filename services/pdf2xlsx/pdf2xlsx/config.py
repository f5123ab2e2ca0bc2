"""Configuration loader for the pdf2xlsx service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .extractor import ENGINES


class ConfigError(ValueError):
    """An environment variable holds an unusable value."""


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Environment variable {key} must be an integer") from exc


def _get_float(key: str, default: float) -> float:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"Environment variable {key} must be a number") from exc


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ConfigError(f"Environment variable {key} must be a boolean")


@dataclass(slots=True)
class AppConfig:
    log_level: str = "INFO"
    extractor_engine: str = "pdfplumber"
    row_tolerance: float = 1.0
    failed_sample_size: int = 200
    max_upload_mb: int = 15
    debug_text_limit: int = 20_000
    sheet_name: str = "Precios"
    output_filename: str = "lista_precios.xlsx"
    enable_fallback: bool = True

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def load_config() -> AppConfig:
    engine = _get_env("EXTRACTOR_ENGINE", "pdfplumber").lower()
    if engine not in ENGINES:
        raise ConfigError(f"EXTRACTOR_ENGINE must be one of {', '.join(ENGINES)}")

    row_tolerance = _get_float("ROW_TOLERANCE", 1.0)
    if row_tolerance <= 0:
        raise ConfigError("ROW_TOLERANCE must be greater than zero")

    return AppConfig(
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
        extractor_engine=engine,
        row_tolerance=row_tolerance,
        failed_sample_size=max(0, _get_int("FAILED_SAMPLE_SIZE", 200)),
        max_upload_mb=max(1, _get_int("MAX_UPLOAD_MB", 15)),
        debug_text_limit=max(0, _get_int("DEBUG_TEXT_LIMIT", 20_000)),
        sheet_name=_get_env("SHEET_NAME", "Precios"),
        output_filename=_get_env("OUTPUT_FILENAME", "lista_precios.xlsx"),
        enable_fallback=_get_bool("ENABLE_FALLBACK", True),
    )

"""Excel output for parsed price-list records."""

from __future__ import annotations

from io import BytesIO
from typing import Iterable

import pandas as pd
from openpyxl.utils import get_column_letter

from .models import RECORD_COLUMNS, ParsedRecord

COLUMN_WIDTHS = {"codigo": 12, "descripcion": 60, "precio": 12, "stock": 10}


def records_to_frame(records: Iterable[ParsedRecord]) -> pd.DataFrame:
    """Tabulate records in column order; ``codigo`` stays text."""
    df = pd.DataFrame([r.as_dict() for r in records], columns=list(RECORD_COLUMNS))
    df["codigo"] = df["codigo"].astype(str)
    df["precio"] = df["precio"].astype(float)
    df["stock"] = df["stock"].astype(float)
    return df


def write_workbook(records: Iterable[ParsedRecord], sheet_name: str = "Precios") -> bytes:
    """Serialize records into an .xlsx workbook and return its bytes."""
    df = records_to_frame(records)
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        worksheet = writer.sheets[sheet_name]
        for idx, col in enumerate(df.columns, start=1):
            worksheet.column_dimensions[get_column_letter(idx)].width = COLUMN_WIDTHS[col]
    return buffer.getvalue()

"""Strict single-line matcher used when the main pipeline finds nothing."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .models import ParsedRecord
from .normalizer import sanitize_line
from .numeral import NUMERIC_TOKEN, try_parse_number_token

# Anchored at the start only; trailing units or currency after the stock are ignored.
LINE_PATTERN = re.compile(
    r"^(\d{1,6})\s+(.+?)\s+(" + NUMERIC_TOKEN + r")\s+(" + NUMERIC_TOKEN + r")",
    re.ASCII,
)


def match_line(line: str) -> Optional[ParsedRecord]:
    """Match code, description, price and stock on one physical line."""
    m = LINE_PATTERN.match(sanitize_line(line))
    if not m:
        return None
    precio = try_parse_number_token(m.group(3))
    stock = try_parse_number_token(m.group(4))
    if precio is None or stock is None:
        return None
    return ParsedRecord(
        codigo=m.group(1),
        descripcion=m.group(2).strip(),
        precio=precio,
        stock=stock,
    )


def fallback_records(lines: Iterable[str]) -> List[ParsedRecord]:
    records: List[ParsedRecord] = []
    for line in lines:
        record = match_line(line)
        if record is not None:
            records.append(record)
    return records

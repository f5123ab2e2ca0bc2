"""Parse one logical line into a price-list record."""

from __future__ import annotations

import re
from typing import Optional

from .models import ParsedRecord
from .normalizer import sanitize_line
from .numeral import find_numeric_tokens, try_parse_number_token

_CODE_PATTERN = re.compile(r"^\s*(\d{1,6})\b", re.ASCII)
_LEADING_CODE = re.compile(r"^\s*\d+\s+", re.ASCII)
_TRAILING_SEPARATOR = re.compile(r"[.,]$")

# How close to the end a leftover stock token must sit to be cut.
_STOCK_TAIL_SLACK = 5
MIN_DESCRIPTION_LENGTH = 2


def _strip_trailing_amounts(text: str, raw_price: str, raw_stock: str) -> str:
    idx_price = text.rfind(raw_price)
    if idx_price != -1:
        text = text[:idx_price].strip()
    idx_stock = text.rfind(raw_stock)
    if idx_stock != -1 and idx_stock > len(text) - len(raw_stock) - _STOCK_TAIL_SLACK:
        text = text[:idx_stock].strip()
    return text


def parse_row(line: str) -> Optional[ParsedRecord]:
    """Return the record for ``line`` or ``None`` when it does not parse.

    The code must open the line; price and stock are the last two numeric
    tokens, whatever numeric noise precedes them, and the description is the
    text in between.
    """
    sanitized = sanitize_line(line)
    if not sanitized:
        return None

    code_match = _CODE_PATTERN.match(sanitized)
    if not code_match:
        return None
    codigo = code_match.group(1)

    numbers = find_numeric_tokens(sanitized)
    if len(numbers) < 2:
        return None
    raw_price, raw_stock = numbers[-2], numbers[-1]

    precio = try_parse_number_token(raw_price)
    stock = try_parse_number_token(raw_stock)
    if precio is None or stock is None:
        return None

    desc = _LEADING_CODE.sub("", sanitized, count=1)
    desc = _strip_trailing_amounts(desc, raw_price, raw_stock)
    desc = _TRAILING_SEPARATOR.sub("", desc).strip()
    if len(desc) < MIN_DESCRIPTION_LENGTH:
        return None

    return ParsedRecord(codigo=codigo, descripcion=desc, precio=precio, stock=stock)

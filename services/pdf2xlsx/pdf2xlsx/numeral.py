"""Helpers for locale-ambiguous numbers found in price lists."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

__all__ = [
    "NUMERIC_TOKEN",
    "find_numeric_tokens",
    "parse_number_token",
    "try_parse_number_token",
]

# Optional minus, 1-3 digits, groups of exactly three digits, optional fraction.
# Compile with re.ASCII: only 0-9 count as digits.
NUMERIC_TOKEN = r"-?\d{1,3}(?:[.,]\d{3})*(?:[.,]\d+)?"

_NUMERIC_TOKEN_PATTERN = re.compile(NUMERIC_TOKEN, re.ASCII)
_DOT_THOUSANDS_PATTERN = re.compile(r"-?\d{1,3}(?:\.\d{3})+", re.ASCII)


def find_numeric_tokens(text: str) -> List[str]:
    """Return every numeric token in ``text``, left to right."""
    if not text:
        return []
    return _NUMERIC_TOKEN_PATTERN.findall(text)


def parse_number_token(raw: str) -> Decimal:
    """Parse a numeric token into a Decimal.

    Separator roles are resolved per token:

    * comma and period together: period is the decimal mark, commas are
      thousands separators (``20,956.00`` -> ``20956.00``);
    * comma only: comma is the decimal mark (``15,5`` -> ``15.5``);
    * periods only, each followed by exactly three digits: thousands
      grouping (``1.234`` -> ``1234``);
    * anything else is parsed as-is after dropping commas (``15.00``).
    """
    if raw is None:
        raise ValueError("value is required")
    value = raw.strip()
    if not value:
        raise ValueError("value is required")

    has_comma = "," in value
    has_period = "." in value
    if has_comma and has_period:
        normalized = value.replace(",", "")
    elif has_comma:
        normalized = value.replace(",", ".")
    elif _DOT_THOUSANDS_PATTERN.fullmatch(value):
        normalized = value.replace(".", "")
    else:
        normalized = value.replace(",", "")

    try:
        number = Decimal(normalized)
    except InvalidOperation as exc:
        raise ValueError(f"unable to parse numeric value from '{raw}'") from exc
    if not number.is_finite():
        raise ValueError(f"unable to parse numeric value from '{raw}'")
    return number


def try_parse_number_token(raw: Optional[str]) -> Optional[Decimal]:
    """Like :func:`parse_number_token` but returns ``None`` on failure."""
    try:
        return parse_number_token(raw)
    except ValueError:
        return None

"""Filter recurring titles, pagination and column captions."""

from __future__ import annotations

import re
from typing import Iterable, List

# Lines shaped like a record: a bounded digit run at the very start.
RECORD_START = re.compile(r"^\s*\d{1,6}\b", re.ASCII)

# Catalogued captions, including mojibake of accented letters
# ("CÃ“DIGO", "PÃ¡gina") and stripped ones ("C*DIGO", "C?DIGO").
HEADER_PATTERNS = [
    r"LISTA\s+DE\s+PRECIOS",
    r"C\s*\S{0,3}DIGO",
    r"DESCRIPCI\S{0,3}N\s+PRECIO",
    r"P\S{0,3}gina\b",
]
HEADER_RE = re.compile(r"^\s*(?:" + "|".join(HEADER_PATTERNS) + ")", re.IGNORECASE)


def looks_like_record(line: str) -> bool:
    """True when the line opens with a 1-6 digit code (ASCII digits only)."""
    return bool(RECORD_START.match(line))


def is_header(line: str) -> bool:
    """True for catalogued caption lines; never for a line opening with a code."""
    if looks_like_record(line):
        return False
    return bool(HEADER_RE.match(line))


def filter_headers(lines: Iterable[str]) -> List[str]:
    return [line for line in lines if not is_header(line)]

"""Rebuild visual rows from positioned text fragments."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence

from .models import PositionedFragment

DEFAULT_ROW_TOLERANCE = 1.0


def row_key(y: float, tolerance: float = DEFAULT_ROW_TOLERANCE) -> int:
    """Bucket a vertical coordinate; half-up rounding of ``y / tolerance``."""
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")
    return math.floor(float(y) / tolerance + 0.5)


def _render(fragments: List[PositionedFragment]) -> str:
    ordered = sorted(fragments, key=lambda f: f.x)
    return " ".join(" ".join(f.text for f in ordered).split())


def group_rows(
    fragments: Iterable[PositionedFragment],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> List[str]:
    """Group one page's fragments into rendered rows, top of page first.

    Fragments whose bucketed ``y`` coincide belong to the same row and are
    ordered left to right. Rows that render empty are dropped.
    """
    groups: Dict[int, List[PositionedFragment]] = {}
    for fragment in fragments:
        groups.setdefault(row_key(fragment.y, tolerance), []).append(fragment)

    rows: List[str] = []
    for key in sorted(groups, reverse=True):
        text = _render(groups[key])
        if text:
            rows.append(text)
    return rows


def reconstruct_pages(
    pages: Iterable[Sequence[PositionedFragment]],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> List[str]:
    """Rows of every page, concatenated in page order."""
    rows: List[str] = []
    for fragments in pages:
        rows.extend(group_rows(fragments, tolerance))
    return rows


def render_text(
    pages: Iterable[Sequence[PositionedFragment]],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> str:
    """Flatten pages into text with one row per line."""
    return "".join(f"{row}\n" for row in reconstruct_pages(pages, tolerance))

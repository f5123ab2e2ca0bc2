"""Line-stream normalization and per-line character cleanup."""

from __future__ import annotations

import re
from typing import List

# Literal "\n", "\\n", ... left behind by upstream serialization layers.
_ESCAPED_NEWLINE = re.compile(r"\\+n")

_CONTROL_CHARS = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
_OUTSIDE_CHARSET = re.compile(r"[^\x20-\x7EÁÉÍÓÚÑÜáéíóúüñ\s]")


def normalize_text(text: str) -> List[str]:
    """Split extracted text into trimmed, non-empty lines.

    Idempotent: feeding the joined output back in yields the same lines.
    """
    if not text:
        return []
    normalized = _ESCAPED_NEWLINE.sub("\n", text).replace("\r\n", "\n")
    lines = (line.strip() for line in normalized.split("\n"))
    return [line for line in lines if line]


def sanitize_line(line: str) -> str:
    """Drop control and out-of-charset characters, collapse whitespace."""
    if not line:
        return ""
    t = line.replace("\u00A0", " ")
    t = _CONTROL_CHARS.sub(" ", t)
    t = _OUTSIDE_CHARSET.sub(" ", t)
    return " ".join(t.split())

"""Merge physical lines into logical record lines.

The extractor sometimes splits one table row over several lines, e.g.
``"2 Nuez"`` / ``"Pecan PARTIDA x 1Kg 20,956.00 15.00"``. Lines are folded
into a buffer until it holds enough numeric tokens (price and stock) to be
taken as a complete row.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Tuple

from .numeral import find_numeric_tokens

MIN_NUMERIC_TOKENS = 2


@dataclass(frozen=True)
class AssemblerState:
    buffer: str = ""
    emitted: Tuple[str, ...] = ()


def step(state: AssemblerState, line: str) -> AssemblerState:
    """Append ``line`` to the buffer and emit it once it looks complete."""
    buffer = f"{state.buffer} {line}".strip() if state.buffer else line
    if len(find_numeric_tokens(buffer)) >= MIN_NUMERIC_TOKENS:
        return AssemblerState(buffer="", emitted=state.emitted + (buffer,))
    return AssemblerState(buffer=buffer, emitted=state.emitted)


def finish(state: AssemblerState) -> List[str]:
    """Terminal transition: a leftover buffer is emitted as-is."""
    if state.buffer:
        return list(state.emitted) + [state.buffer]
    return list(state.emitted)


def assemble_logical_lines(lines: Iterable[str]) -> List[str]:
    return finish(reduce(step, lines, AssemblerState()))

# File: rpd/path/writer.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Serializa operaciones canónicas a path data absoluto (M/L/Q/C/Z).
# Notes: La salida vuelve a parsear a las mismas operaciones (con close_mode=line no hay Z).
from __future__ import annotations

from typing import Iterable

from rpd.core.ops import OP_LETTER, PathOp


def format_number(v: float) -> str:
    """Número compacto y sin pérdida: enteros sin decimales, resto con repr."""
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def to_path_data(ops: Iterable[PathOp]) -> str:
    parts: list[str] = []
    for op in ops:
        letter = OP_LETTER[op.kind]
        if op.args:
            parts.append(letter + " " + " ".join(format_number(a) for a in op.args))
        else:
            parts.append(letter)
    return " ".join(parts)

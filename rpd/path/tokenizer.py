# File: rpd/path/tokenizer.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Tokenizer de path data: segmentos (letra + texto) y números por segmento.
# Notes:
#   - Separadores: espacios y comas. Signos y puntos pegados cortan número ("1-2", ".5.5").
#   - e/E nunca abre segmento (es exponente); una e suelta es argumento inválido.
from __future__ import annotations

import re
from dataclasses import dataclass

from rpd.utils.errors import MalformedArgumentsError, UnsupportedCommandError

SUPPORTED_COMMANDS = frozenset("MLHVCSQTZmlhvcsqtz")

# Una letra (salvo e/E) abre segmento; el resto hasta la próxima letra son argumentos.
_SEGMENT_RE = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]+")
_EXPONENT_BASE = frozenset("0123456789.")


@dataclass(frozen=True)
class RawSegment:
    """Segmento crudo: letra de comando + texto de argumentos.

    `position` es el offset de la letra dentro del string original.
    """

    command: str
    text: str
    position: int = 0

    @property
    def source(self) -> str:
        return f"{self.command}{self.text}"

    @property
    def is_relative(self) -> bool:
        return self.command.islower()


def tokenize_path_data(d: str) -> list[RawSegment]:
    """Divide el path data en segmentos.

    Lanza UnsupportedCommandError ante letras fuera de {M,L,H,V,C,S,Q,T,Z}
    (notablemente A/a) y MalformedArgumentsError si hay texto antes del
    primer comando.
    """
    d = d or ""
    segments: list[RawSegment] = []
    pos = 0
    for m in _SEGMENT_RE.finditer(d):
        if m.start() > pos and d[pos:m.start()].strip():
            raise MalformedArgumentsError(
                "texto antes del primer comando",
                segment=d[pos:m.start()].strip(),
                position=pos,
            )
        letter, text = m.group(1), m.group(2)
        if letter not in SUPPORTED_COMMANDS:
            raise UnsupportedCommandError(
                f"comando {letter!r} no soportado",
                segment=f"{letter}{text}".strip(),
                position=m.start(),
            )
        segments.append(RawSegment(letter, text, m.start()))
        pos = m.end()

    if pos < len(d) and d[pos:].strip():
        raise MalformedArgumentsError(
            "texto antes del primer comando", segment=d[pos:].strip(), position=pos
        )
    return segments


def split_numbers(segment: RawSegment) -> list[float]:
    """Convierte el texto de argumentos del segmento en floats.

    Una E/e suelta es UnsupportedCommandError; cualquier otro caracter que no
    sea número o separador es MalformedArgumentsError.
    """
    text = segment.text
    out: list[float] = []
    i = 0
    n = len(text)
    while i < n:
        sep = _SEPARATOR_RE.match(text, i)
        if sep:
            i = sep.end()
            continue
        num = _NUMBER_RE.match(text, i)
        if not num and text[i] in "eE" and (i == 0 or text[i - 1] not in _EXPONENT_BASE):
            # E/e suelta (no pegada a un número) es una letra de comando, no un exponente.
            raise UnsupportedCommandError(
                f"comando {text[i]!r} no soportado",
                segment=text[i:].strip(),
                position=segment.position + len(segment.command) + i,
            )
        if not num:
            raise MalformedArgumentsError(
                f"argumento no numérico en {text[i:].strip()!r}",
                segment=segment.source.strip(),
                position=segment.position,
            )
        out.append(float(num.group(0)))
        i = num.end()
    return out

# File: rpd/utils/errors.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Errores tipados del proyecto.
# Notes: Los errores de path data llevan kind + segmento + posición para diagnóstico.
from __future__ import annotations


class RpdError(Exception):
    """Error base del proyecto."""


class RpdValidationError(RpdError):
    """Error de validación (input/archivo/estructura)."""


class RpdIOError(RpdError):
    """Error de E/S (lectura/escritura)."""


class PathDataError(RpdValidationError):
    """Error al interpretar un string de path data.

    Atributos:
        kind: nombre estable del tipo de error (para tooling).
        segment: texto del segmento ofensivo (letra + argumentos).
        position: offset 0-based del segmento dentro del string original.
    """

    kind = "PathData"

    def __init__(self, message: str, *, segment: str = "", position: int = -1) -> None:
        self.segment = segment
        self.position = position
        self.detail = message
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        if self.position < 0:
            return f"{self.kind}: {message}"
        return f"{self.kind}: {message} (segmento {self.segment!r} en posición {self.position})"


class UnsupportedCommandError(PathDataError):
    """Letra de comando fuera del set soportado (p.ej. arcos A/a)."""

    kind = "UnsupportedCommand"


class MalformedArgumentsError(PathDataError):
    """Argumentos que no son números o cuya cantidad no calza con la aridad."""

    kind = "MalformedArguments"

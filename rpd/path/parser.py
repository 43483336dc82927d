# File: rpd/path/parser.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Orquestador: path data -> lista canónica de operaciones -> emitter.
# Notes:
#   - Un parse = un PathState propio. Nada compartido entre llamadas (reentrante).
#   - Todo o nada: si un segmento falla, el emitter no recibe ninguna operación.
from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

from rpd.core.ops import OpKind, PathOp
from rpd.core.settings import ParserSettings
from rpd.path.expander import expand_segment
from rpd.path.state import initial_state
from rpd.path.tokenizer import tokenize_path_data

log = logging.getLogger(__name__)


class PathEmitter(Protocol):
    """Destino de las operaciones (canvas, scene graph, recorder...)."""

    def moveTo(self, x: float, y: float) -> Any: ...

    def lineTo(self, x: float, y: float) -> Any: ...

    def quadraticCurveTo(self, cx: float, cy: float, x: float, y: float) -> Any: ...

    def cubicCurveTo(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> Any: ...

    def closePath(self) -> Any: ...


E = TypeVar("E", bound=PathEmitter)


def parse_path_data(d: str, settings: ParserSettings | None = None) -> list[PathOp]:
    """Traduce path data a operaciones canónicas absolutas, en orden de documento.

    Un string sin comandos devuelve []. Errores: UnsupportedCommandError,
    MalformedArgumentsError (ambos PathDataError).
    """
    settings = settings or ParserSettings()
    segments = tokenize_path_data(d)

    state = initial_state()
    ops: list[PathOp] = []
    for segment in segments:
        state, produced = expand_segment(state, segment, settings)
        ops.extend(produced)

    log.debug(
        "parse: %d segmentos -> %d operaciones (%s)",
        len(segments),
        len(ops),
        settings.to_dict(),
    )
    return ops


def emit_ops(ops: list[PathOp], emitter: E) -> E:
    """Llama al emitter una vez por operación (kind.value es el nombre del método)."""
    for op in ops:
        getattr(emitter, op.kind.value)(*op.args)
    return emitter


def draw_path_data(d: str, emitter: E, settings: ParserSettings | None = None) -> E:
    """Parsea `d` y lo dibuja en `emitter`. Devuelve el mismo emitter."""
    ops = parse_path_data(d, settings)
    return emit_ops(ops, emitter)


class RecordingEmitter:
    """Emitter que solo registra las llamadas. Útil para tests y para el CLI."""

    def __init__(self) -> None:
        self.ops: list[PathOp] = []

    def _record(self, kind: OpKind, *args: float) -> None:
        self.ops.append(PathOp.make(kind, args))

    def moveTo(self, x: float, y: float) -> None:
        self._record(OpKind.MOVE_TO, x, y)

    def lineTo(self, x: float, y: float) -> None:
        self._record(OpKind.LINE_TO, x, y)

    def quadraticCurveTo(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record(OpKind.QUADRATIC_CURVE_TO, cx, cy, x, y)

    def cubicCurveTo(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> None:
        self._record(OpKind.CUBIC_CURVE_TO, c1x, c1y, c2x, c2y, x, y)

    def closePath(self) -> None:
        self._record(OpKind.CLOSE_PATH)

# File: rpd/path/expander.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Expande un segmento (letra + números) en operaciones canónicas.
# Notes:
#   - expand_segment(state, segment) -> (state, ops) es puro: no muta nada.
#   - Tabla fija letra -> handler; el case de la letra solo decide relativo/absoluto.
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from rpd.core.ops import PathOp, close_path, cubic_to, line_to, move_to, quad_to
from rpd.core.settings import CloseMode, ParserSettings, RelativeBase
from rpd.path.resolver import smooth_control_point, to_absolute
from rpd.path.state import CurveFamily, PathState, Point
from rpd.path.tokenizer import RawSegment, split_numbers
from rpd.utils.errors import MalformedArgumentsError, UnsupportedCommandError

# Números por repetición de cada comando.
COMMAND_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "T": 2,
    "H": 1,
    "V": 1,
    "Q": 4,
    "S": 4,
    "C": 6,
    "Z": 0,
}

# Construye la operación de un grupo ya absoluto. `index` es la posición del grupo en el segmento.
GroupBuilder = Callable[[PathState, int, Sequence[float], ParserSettings], PathOp]
Expansion = tuple[PathState, list[PathOp]]


def chunk(values: Sequence[float], size: int) -> list[list[float]]:
    return [list(values[i:i + size]) for i in range(0, len(values), size)]


def _check_arity(segment: RawSegment, numbers: Sequence[float], arity: int) -> None:
    if arity == 0:
        if numbers:
            raise MalformedArgumentsError(
                f"{segment.command} no lleva argumentos (recibió {len(numbers)})",
                segment=segment.source.strip(),
                position=segment.position,
            )
        return
    if not numbers or len(numbers) % arity != 0:
        raise MalformedArgumentsError(
            f"{segment.command} espera múltiplos de {arity} números (recibió {len(numbers)})",
            segment=segment.source.strip(),
            position=segment.position,
        )


def _expand_groups(
    state: PathState,
    segment: RawSegment,
    numbers: Sequence[float],
    settings: ParserSettings,
    build: GroupBuilder,
    *,
    synthesize: Callable[[PathState, float, bool], list[float]] | None = None,
) -> Expansion:
    """Parte los números en grupos y emite una operación por grupo, en orden.

    Cada grupo relativo se lleva a absoluto una sola vez; el estado avanza
    después de cada operación, así que T/S reflejan contra el grupo previo.
    """
    arity = COMMAND_ARITY[segment.command.upper()]
    _check_arity(segment, numbers, arity)

    relative = segment.is_relative
    segment_base = state.current
    ops: list[PathOp] = []
    for index, group in enumerate(chunk(numbers, arity)):
        if synthesize is not None:
            group = synthesize(state, group[0], relative)
        if relative:
            base = segment_base if settings.relative_base is RelativeBase.SEGMENT else state.current
            group = to_absolute(group, base)
        op = build(state, index, group, settings)
        ops.append(op)
        state = state.advance(op)
    return state, ops


# ------------------------------
# H / V
# ------------------------------


def synthesize_axis_point(current: Point, value: float, axis: int, relative: bool) -> list[float]:
    """Completa el eje faltante de un H/V.

    Absoluto: el otro eje sale del punto actual. Relativo: desplazamiento
    cero en el otro eje (la resolución absoluta suma el punto base).
    """
    other = 0.0 if relative else current[1 - axis]
    return [value, other] if axis == 0 else [other, value]


def _horizontal(state: PathState, value: float, relative: bool) -> list[float]:
    return synthesize_axis_point(state.current, value, 0, relative)


def _vertical(state: PathState, value: float, relative: bool) -> list[float]:
    return synthesize_axis_point(state.current, value, 1, relative)


# ------------------------------
# Builders por familia
# ------------------------------


def _build_move(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    # M con varios grupos: el primero mueve, el resto son líneas.
    return move_to(*g) if index == 0 else line_to(*g)


def _build_line(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    return line_to(*g)


def _build_quad(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    return quad_to(*g)


def _build_cubic(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    return cubic_to(*g)


def _build_smooth_quad(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    cx, cy = smooth_control_point(state, CurveFamily.QUADRATIC, settings.smooth_reflection)
    return quad_to(cx, cy, *g)


def _build_smooth_cubic(state: PathState, index: int, g: Sequence[float], settings: ParserSettings) -> PathOp:
    c1x, c1y = smooth_control_point(state, CurveFamily.CUBIC, settings.smooth_reflection)
    return cubic_to(c1x, c1y, *g)


# ------------------------------
# Handlers
# ------------------------------


def _group_handler(build: GroupBuilder, synthesize=None):
    def handler(state: PathState, segment: RawSegment, numbers: Sequence[float], settings: ParserSettings) -> Expansion:
        return _expand_groups(state, segment, numbers, settings, build, synthesize=synthesize)

    return handler


def _close(state: PathState, segment: RawSegment, numbers: Sequence[float], settings: ParserSettings) -> Expansion:
    _check_arity(segment, numbers, 0)
    ops: list[PathOp] = []
    # Segmento de largo cero: no se emite.
    if state.current != state.subpath_start:
        ops.append(line_to(*state.subpath_start))
    if settings.close_mode is CloseMode.CLOSE:
        ops.append(close_path())
    for op in ops:
        state = state.advance(op)
    # Z cuenta como comando previo no-curva aunque no emita nada.
    return replace(state, last_family=CurveFamily.NONE), ops


Handler = Callable[[PathState, RawSegment, Sequence[float], ParserSettings], Expansion]

HANDLERS: dict[str, Handler] = {
    "M": _group_handler(_build_move),
    "L": _group_handler(_build_line),
    "H": _group_handler(_build_line, _horizontal),
    "V": _group_handler(_build_line, _vertical),
    "Q": _group_handler(_build_quad),
    "T": _group_handler(_build_smooth_quad),
    "C": _group_handler(_build_cubic),
    "S": _group_handler(_build_smooth_cubic),
    "Z": _close,
}


def expand_segment(
    state: PathState,
    segment: RawSegment,
    settings: ParserSettings | None = None,
) -> Expansion:
    """Expande un segmento crudo en operaciones canónicas y devuelve el estado resultante."""
    settings = settings or ParserSettings()
    handler = HANDLERS.get(segment.command.upper())
    if handler is None:
        raise UnsupportedCommandError(
            f"comando {segment.command!r} no soportado",
            segment=segment.source.strip(),
            position=segment.position,
        )
    numbers = split_numbers(segment)
    return handler(state, segment, numbers, settings)

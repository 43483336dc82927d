# File: rpd/core/ops.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Operación canónica de dibujo (kind + args de aridad fija).
# Notes: El value de OpKind es el nombre del método del emitter.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class OpKind(str, Enum):
    """Tipo de operación canónica.

    - moveTo: x, y
    - lineTo: x, y
    - quadraticCurveTo: cx, cy, x, y
    - cubicCurveTo: c1x, c1y, c2x, c2y, x, y
    - closePath: sin argumentos
    """

    MOVE_TO = "moveTo"
    LINE_TO = "lineTo"
    QUADRATIC_CURVE_TO = "quadraticCurveTo"
    CUBIC_CURVE_TO = "cubicCurveTo"
    CLOSE_PATH = "closePath"


OP_ARITY: dict[OpKind, int] = {
    OpKind.MOVE_TO: 2,
    OpKind.LINE_TO: 2,
    OpKind.QUADRATIC_CURVE_TO: 4,
    OpKind.CUBIC_CURVE_TO: 6,
    OpKind.CLOSE_PATH: 0,
}

# Letra absoluta equivalente (para serializar / mostrar).
OP_LETTER: dict[OpKind, str] = {
    OpKind.MOVE_TO: "M",
    OpKind.LINE_TO: "L",
    OpKind.QUADRATIC_CURVE_TO: "Q",
    OpKind.CUBIC_CURVE_TO: "C",
    OpKind.CLOSE_PATH: "Z",
}


def coerce_op_kind(v: object) -> OpKind:
    """Acepta OpKind, su value ("lineTo") o la letra absoluta ("L")."""
    if isinstance(v, OpKind):
        return v
    s = str(v or "").strip()
    for k in OpKind:
        if k.value == s or OP_LETTER[k] == s.upper():
            return k
    raise ValueError(f"Tipo de operación desconocido: {v!r}")


@dataclass(frozen=True)
class PathOp:
    kind: OpKind
    args: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        expected = OP_ARITY[self.kind]
        if len(self.args) != expected:
            raise ValueError(
                f"{self.kind.value} requiere {expected} argumentos, recibió {len(self.args)}"
            )

    @property
    def end(self) -> tuple[float, float] | None:
        """Punto final de la operación (None para closePath)."""
        if not self.args:
            return None
        return (self.args[-2], self.args[-1])

    @property
    def last_control(self) -> tuple[float, float] | None:
        """Control más cercano al punto final (solo curvas)."""
        if self.kind in (OpKind.QUADRATIC_CURVE_TO, OpKind.CUBIC_CURVE_TO):
            return (self.args[-4], self.args[-3])
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "args": [float(a) for a in self.args]}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PathOp":
        return PathOp(coerce_op_kind(d.get("kind")), tuple(float(a) for a in d.get("args", ())))

    @staticmethod
    def make(kind: OpKind, args: Iterable[float]) -> "PathOp":
        return PathOp(kind, tuple(float(a) for a in args))


def move_to(x: float, y: float) -> PathOp:
    return PathOp(OpKind.MOVE_TO, (float(x), float(y)))


def line_to(x: float, y: float) -> PathOp:
    return PathOp(OpKind.LINE_TO, (float(x), float(y)))


def quad_to(cx: float, cy: float, x: float, y: float) -> PathOp:
    return PathOp(OpKind.QUADRATIC_CURVE_TO, (float(cx), float(cy), float(x), float(y)))


def cubic_to(c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> PathOp:
    return PathOp(
        OpKind.CUBIC_CURVE_TO,
        (float(c1x), float(c1y), float(c2x), float(c2y), float(x), float(y)),
    )


def close_path() -> PathOp:
    return PathOp(OpKind.CLOSE_PATH, ())

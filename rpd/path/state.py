# File: rpd/path/state.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Estado del path durante un parse (punto actual, inicio de subpath, último control).
# Notes: Inmutable; cada paso devuelve un estado nuevo. Vive solo dentro de una llamada a parse.
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from rpd.core.ops import OpKind, PathOp

Point = tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


class CurveFamily(str, Enum):
    NONE = "none"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


@dataclass(frozen=True)
class PathState:
    current: Point = ORIGIN
    subpath_start: Point = ORIGIN
    last_control: Point | None = None
    # Familia de la última operación emitida (para la política "matching").
    last_family: CurveFamily = CurveFamily.NONE

    def advance(self, op: PathOp) -> "PathState":
        """Estado tras emitir `op`.

        - current pasa al punto final de la operación.
        - moveTo fija subpath_start.
        - curvas registran su último control; move/line/close no lo tocan.
        """
        if op.kind is OpKind.CLOSE_PATH:
            return replace(self, current=self.subpath_start, last_family=CurveFamily.NONE)

        end = op.end
        if op.kind is OpKind.MOVE_TO:
            return replace(self, current=end, subpath_start=end, last_family=CurveFamily.NONE)
        if op.kind is OpKind.LINE_TO:
            return replace(self, current=end, last_family=CurveFamily.NONE)

        family = CurveFamily.QUADRATIC if op.kind is OpKind.QUADRATIC_CURVE_TO else CurveFamily.CUBIC
        return replace(self, current=end, last_control=op.last_control, last_family=family)


def initial_state() -> PathState:
    return PathState()

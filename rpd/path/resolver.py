# File: rpd/path/resolver.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Relativo -> absoluto y punto de control reflejado (T/S).
from __future__ import annotations

from typing import Sequence

from rpd.core.settings import SmoothReflection
from rpd.path.state import CurveFamily, PathState, Point


def to_absolute(coords: Sequence[float], base: Point) -> list[float]:
    """Suma base.x a los índices pares y base.y a los impares."""
    return [v + base[i % 2] for i, v in enumerate(coords)]


def reflect_point(control: Point, about: Point) -> Point:
    """2 * about - control, por eje."""
    return (2 * about[0] - control[0], 2 * about[1] - control[1])


def smooth_control_point(
    state: PathState,
    family: CurveFamily,
    policy: SmoothReflection = SmoothReflection.ALWAYS,
) -> Point:
    """Primer control implícito de un T (family=QUADRATIC) o S (family=CUBIC).

    Sin control previo registrado, o con política "matching" y una operación
    previa de otra familia, el control coincide con el punto actual.
    """
    if state.last_control is None:
        return state.current
    if policy is SmoothReflection.MATCHING and state.last_family is not family:
        return state.current
    return reflect_point(state.last_control, state.current)

"""RusticPathData (RPD).

Traductor de path data (mini-lenguaje de `d` en SVG) a una secuencia
canónica de operaciones de dibujo.
"""

from __future__ import annotations

from rpd.core.ops import OpKind, PathOp
from rpd.core.settings import ParserSettings
from rpd.path.parser import RecordingEmitter, draw_path_data, parse_path_data
from rpd.utils.errors import MalformedArgumentsError, PathDataError, UnsupportedCommandError

__all__ = [
    "OpKind",
    "PathOp",
    "ParserSettings",
    "RecordingEmitter",
    "draw_path_data",
    "parse_path_data",
    "PathDataError",
    "MalformedArgumentsError",
    "UnsupportedCommandError",
]

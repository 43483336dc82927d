# File: rpd/svg/qpath_render.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Emitter sobre QPainterPath + carga de SVG (solo <path d>) a QPainterPath en mm.
# Notes:
#   - Cada `d` se parsea con rpd (todo o nada). A nivel archivo, un `d` inválido se saltea con warning.
#   - Ignora fills/colores/stroke-width/transform.
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtGui import QPainterPath

from rpd.core.settings import ParserSettings
from rpd.path.parser import draw_path_data
from rpd.svg.source import iter_path_elements, read_svg_root
from rpd.utils.errors import PathDataError

log = logging.getLogger(__name__)

_NUM_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\d*\.?\d+))(?:\s*([a-zA-Z%]+))?\s*$")


@dataclass(frozen=True)
class SvgMeta:
    width_mm: float | None
    height_mm: float | None
    viewbox: tuple[float, float, float, float] | None  # x,y,w,h


@dataclass(frozen=True)
class MmMapping:
    """user units -> mm: ((x - vb_x) * sx, (y - vb_y) * sy)."""

    vb_x: float = 0.0
    vb_y: float = 0.0
    sx: float = 1.0
    sy: float = 1.0

    def map(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.vb_x) * self.sx, (y - self.vb_y) * self.sy


class QPainterPathEmitter:
    """Adapta el contrato de emitter de rpd a QPainterPath."""

    def __init__(self, path: QPainterPath | None = None, mapping: MmMapping | None = None) -> None:
        self.path = path if path is not None else QPainterPath()
        self.mapping = mapping or MmMapping()

    def moveTo(self, x: float, y: float) -> None:
        self.path.moveTo(*self.mapping.map(x, y))

    def lineTo(self, x: float, y: float) -> None:
        self.path.lineTo(*self.mapping.map(x, y))

    def quadraticCurveTo(self, cx: float, cy: float, x: float, y: float) -> None:
        self.path.quadTo(*self.mapping.map(cx, cy), *self.mapping.map(x, y))

    def cubicCurveTo(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> None:
        self.path.cubicTo(
            *self.mapping.map(c1x, c1y),
            *self.mapping.map(c2x, c2y),
            *self.mapping.map(x, y),
        )

    def closePath(self) -> None:
        self.path.closeSubpath()


def path_data_to_qpath(
    d: str,
    settings: ParserSettings | None = None,
    mapping: MmMapping | None = None,
) -> QPainterPath:
    """Path data -> QPainterPath nuevo. Propaga PathDataError."""
    return draw_path_data(d, QPainterPathEmitter(mapping=mapping), settings).path


def load_svg_as_qpath_mm(svg_path: str | Path, settings: ParserSettings | None = None) -> QPainterPath:
    """Carga un SVG y devuelve un QPainterPath en coordenadas mm.

    Solo paths. Un `d` que no parsea se saltea (warning) y el resto se dibuja.
    Lanza RpdIOError si no se puede leer y RpdValidationError si el XML es inválido.
    """
    p = Path(svg_path)
    root = read_svg_root(p)
    mapping = mapping_for_meta(_meta_from_root(root))

    out = QPainterPath()
    emitter = QPainterPathEmitter(out, mapping)
    drawn = 0
    for ident, d in iter_path_elements(root):
        try:
            draw_path_data(d, emitter, settings)
            drawn += 1
        except PathDataError as e:
            log.warning("Path ignorado en %s (id=%s): %s", p, ident, e)

    log.debug("load_svg_as_qpath_mm: %s -> %d paths", p, drawn)
    return out


def mapping_for_meta(meta: SvgMeta) -> MmMapping:
    # Escala de user units -> mm usando viewBox (si existe) + width/height mm (si existen)
    vb = meta.viewbox
    if not vb:
        return MmMapping()
    vb_x, vb_y, vb_w, vb_h = vb
    sx = (meta.width_mm / vb_w) if (meta.width_mm and vb_w) else 1.0
    sy = (meta.height_mm / vb_h) if (meta.height_mm and vb_h) else 1.0
    return MmMapping(vb_x, vb_y, sx, sy)


def _meta_from_root(root: ET.Element) -> SvgMeta:
    width_mm = _parse_length_mm(root.attrib.get("width"))
    height_mm = _parse_length_mm(root.attrib.get("height"))

    vb_attr = root.attrib.get("viewBox") or root.attrib.get("viewbox")
    viewbox = _parse_viewbox(vb_attr) if vb_attr else None

    # si no hay viewBox pero hay width/height: asumimos viewBox = 0 0 w h (en mismas unidades)
    if viewbox is None and width_mm and height_mm:
        viewbox = (0.0, 0.0, float(width_mm), float(height_mm))

    return SvgMeta(width_mm=width_mm, height_mm=height_mm, viewbox=viewbox)


def _parse_viewbox(vb: str | None) -> tuple[float, float, float, float] | None:
    if not vb:
        return None
    parts = [p for p in re.split(r"[\s,]+", vb.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(parts[0]), float(parts[1]), float(parts[2]), float(parts[3]))
    except ValueError:
        return None
    if w == 0 or h == 0:
        return None
    return (x, y, w, h)


def _parse_length_mm(v: str | None) -> float | None:
    if not v:
        return None
    m = _NUM_RE.match(v)
    if not m:
        return None
    num = float(m.group(1))
    unit = (m.group(2) or "").lower()

    # unidades comunes
    if unit in ("mm", ""):
        return num
    if unit == "cm":
        return num * 10.0
    if unit in ("in", "inch"):
        return num * 25.4
    if unit == "px":
        # SVG/CSS: 96 dpi (convención). Lo mantenemos como aproximación.
        return num * 25.4 / 96.0

    # cualquier otra unidad: mejor no adivinar
    return None

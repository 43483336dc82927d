# File: rpd/svg/source.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Lectura de archivos SVG (texto + XML) y extracción de los `d` de cada <path>.
# Notes: Sin Qt; lo usan el CLI y qpath_render.
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from rpd.utils.errors import RpdIOError, RpdValidationError


def read_svg_text(svg_path: str | Path) -> str:
    p = Path(svg_path)
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        # fallback común en Windows
        return p.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        raise RpdIOError(f"No se pudo leer SVG: {p}") from e


def read_svg_root(svg_path: str | Path) -> ET.Element:
    """Raíz XML del SVG. RpdIOError si no se lee, RpdValidationError si el XML es inválido."""
    raw = read_svg_text(svg_path)
    try:
        return ET.fromstring(raw)
    except ET.ParseError as e:
        raise RpdValidationError(f"SVG inválido (XML malformado): {svg_path}") from e


def _is_path_tag(tag: object) -> bool:
    return isinstance(tag, str) and (tag == "path" or tag.endswith("}path"))


def iter_path_elements(root: ET.Element) -> Iterator[tuple[str, str]]:
    """(id, d) de cada <path> con `d`, en orden de documento."""
    for i, el in enumerate(root.iter()):
        if not _is_path_tag(el.tag):
            continue
        d = el.attrib.get("d")
        if d:
            yield el.attrib.get("id", f"path{i}"), d


def iter_svg_path_data(svg_path: str | Path) -> Iterator[tuple[str, str]]:
    return iter_path_elements(read_svg_root(svg_path))

# File: rpd/core/settings.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Políticas del parser (reflexión smooth, base relativa, cierre) + carga desde JSON/env.
# Notes: No depende de Qt. Valores inválidos se loggean y se ignoran (nunca lanzan).
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

from rpd.core.version import PROJECT_SETTINGS_FILENAME

log = logging.getLogger(__name__)


class SmoothReflection(str, Enum):
    """Qué control refleja T/S.

    - always: refleja el último control registrado, venga de donde venga.
    - matching: solo si la operación previa es de la misma familia (Q/T o C/S);
      si no, el control es el punto actual.
    """

    ALWAYS = "always"
    MATCHING = "matching"


class RelativeBase(str, Enum):
    """Contra qué punto se resuelven los grupos repetidos de un comando relativo.

    - segment: todos contra el punto actual previo al segmento.
    - group: cada grupo contra el punto que dejó el grupo anterior.
    """

    SEGMENT = "segment"
    GROUP = "group"


class CloseMode(str, Enum):
    """Qué emite Z/z.

    - line: lineTo al inicio del subpath (o nada si ya estamos ahí).
    - close: lo mismo, seguido de un closePath.
    """

    LINE = "line"
    CLOSE = "close"


def _coerce_enum(enum_cls, v: object, default):
    if isinstance(v, enum_cls):
        return v
    try:
        s = str(v or "").strip().lower()
        for m in enum_cls:
            if m.value == s:
                return m
    except Exception:
        pass
    return default


def coerce_smooth_reflection(v: object, default: SmoothReflection = SmoothReflection.ALWAYS) -> SmoothReflection:
    return _coerce_enum(SmoothReflection, v, default)


def coerce_relative_base(v: object, default: RelativeBase = RelativeBase.SEGMENT) -> RelativeBase:
    return _coerce_enum(RelativeBase, v, default)


def coerce_close_mode(v: object, default: CloseMode = CloseMode.LINE) -> CloseMode:
    return _coerce_enum(CloseMode, v, default)


@dataclass(frozen=True)
class ParserSettings:
    """Políticas del traductor. Inmutable: una instancia se comparte sin riesgo entre parses."""

    smooth_reflection: SmoothReflection = SmoothReflection.ALWAYS
    relative_base: RelativeBase = RelativeBase.SEGMENT
    close_mode: CloseMode = CloseMode.LINE

    @classmethod
    def standard(cls) -> "ParserSettings":
        """Preset con las reglas habituales del mini-lenguaje de paths SVG."""
        return cls(
            smooth_reflection=SmoothReflection.MATCHING,
            relative_base=RelativeBase.GROUP,
            close_mode=CloseMode.LINE,
        )

    def with_overrides(self, data: Mapping[str, Any], *, source: str = "overrides") -> "ParserSettings":
        """Aplica overrides {campo: valor}. Claves desconocidas o valores inválidos se ignoran."""
        out = self
        for key, coerce in _FIELDS.items():
            if key not in data or data[key] in (None, ""):
                continue
            raw = data[key]
            value = coerce(raw, None)
            if value is None:
                log.warning("Valor inválido para %s en %s: %r (se ignora)", key, source, raw)
                continue
            out = replace(out, **{key: value})
        return out

    def to_dict(self) -> dict[str, str]:
        return {
            "smooth_reflection": self.smooth_reflection.value,
            "relative_base": self.relative_base.value,
            "close_mode": self.close_mode.value,
        }


_FIELDS = {
    "smooth_reflection": coerce_smooth_reflection,
    "relative_base": coerce_relative_base,
    "close_mode": coerce_close_mode,
}

ENV_VARS = {
    "smooth_reflection": "RPD_SMOOTH_REFLECTION",
    "relative_base": "RPD_RELATIVE_BASE",
    "close_mode": "RPD_CLOSE_MODE",
}


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rpd_settings.json en la raíz del proyecto (o en un padre del CWD).
# {"parser": {"smooth_reflection": "matching", "relative_base": "group", "close_mode": "line"}}


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rpd_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def load_parser_settings(
    start: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    logger: logging.Logger | None = None,
) -> ParserSettings:
    """Defaults -> rpd_settings.json -> variables de entorno (gana la última)."""
    _log = logger or log
    env = os.environ if env is None else env

    settings = ParserSettings()

    data = load_project_settings(start, logger=_log)
    from_file = {key: _deep_get(data, f"parser.{key}") for key in _FIELDS}
    settings = settings.with_overrides(from_file, source=PROJECT_SETTINGS_FILENAME)

    from_env = {key: env.get(var) for key, var in ENV_VARS.items()}
    settings = settings.with_overrides(from_env, source="entorno")

    if settings != ParserSettings():
        _log.info("Parser settings aplicados: %s", settings.to_dict())
    return settings

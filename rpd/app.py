# File: rpd/app.py
# Project: RusticPathData (RPD)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: CLI: path data (o los <path> de un SVG) -> operaciones canónicas.
# Notes:
# - Sin Qt: solo parser + rpd.svg.source.
# - Exit codes: 0 ok, 1 archivo ilegible, 2 path data inválido.
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from rpd.core.ops import OP_LETTER, PathOp
from rpd.core.settings import (
    ParserSettings,
    coerce_close_mode,
    coerce_relative_base,
    coerce_smooth_reflection,
    load_parser_settings,
)
from rpd.core.version import APP_SHORT, APP_VERSION
from rpd.geom.svgelements_compare import compare_with_svgelements
from rpd.path.parser import parse_path_data
from rpd.path.writer import format_number, to_path_data
from rpd.svg.source import iter_svg_path_data
from rpd.utils.errors import PathDataError, RpdIOError, RpdValidationError
from rpd.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def format_op(op: PathOp) -> str:
    args = " ".join(format_number(a) for a in op.args)
    return f"{OP_LETTER[op.kind]} {op.kind.value}({args})"


def _render(ops: list[PathOp], args: argparse.Namespace) -> str:
    if args.absolute:
        return to_path_data(ops)
    if args.json:
        return json.dumps([op.to_dict() for op in ops])
    return "\n".join(format_op(op) for op in ops)


def _settings_from_args(args: argparse.Namespace) -> ParserSettings:
    settings = ParserSettings.standard() if args.standard else load_parser_settings(logger=log)
    overrides: dict[str, Any] = {
        "smooth_reflection": args.smooth,
        "relative_base": args.relative_base,
        "close_mode": args.close_mode,
    }
    return settings.with_overrides(overrides, source="CLI")


def _choice(coerce):
    def convert(v: str):
        value = coerce(v, None)
        if value is None:
            raise argparse.ArgumentTypeError(f"valor inválido: {v!r}")
        return value

    return convert


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rpd",
        description=f"{APP_SHORT} — path data SVG -> operaciones canónicas (move/line/quad/cubic).",
    )
    ap.add_argument("d", nargs="?", default=None, help="Path data (p.ej. 'M0 0 l10 10 z')")
    ap.add_argument("--svg", default="", help="Procesa cada <path d> de este archivo SVG")
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Salida JSON [{kind, args}]")
    out.add_argument("--absolute", action="store_true", help="Salida como path data absoluto")
    out.add_argument(
        "--check",
        action="store_true",
        help="Compara contra svgelements (si está instalado) e imprime el reporte",
    )
    ap.add_argument("--standard", action="store_true", help="Preset de reglas habituales SVG")
    ap.add_argument(
        "--smooth",
        type=_choice(coerce_smooth_reflection),
        default=None,
        help="always | matching",
    )
    ap.add_argument(
        "--relative-base",
        type=_choice(coerce_relative_base),
        default=None,
        help="segment | group",
    )
    ap.add_argument(
        "--close-mode",
        type=_choice(coerce_close_mode),
        default=None,
        help="line | close",
    )
    ap.add_argument("--verbose", action="store_true", help="Logging DEBUG en consola")
    ap.add_argument("--version", action="version", version=f"{APP_SHORT} {APP_VERSION}")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    setup_logging(log_dir=None, level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.svg and args.d is None:
        ap.error("falta path data o --svg")

    settings = _settings_from_args(args)

    if args.svg:
        try:
            items = list(iter_svg_path_data(args.svg))
        except (RpdIOError, RpdValidationError) as e:
            print(f"[{APP_SHORT}] {e}", file=sys.stderr)
            return 1
    else:
        items = [("", args.d)]

    status = 0
    for ident, d in items:
        if ident:
            print(f"# {ident}")
        if args.check:
            print(json.dumps(compare_with_svgelements(d, settings), indent=2, ensure_ascii=False))
            continue
        try:
            ops = parse_path_data(d, settings)
        except PathDataError as e:
            print(f"[{APP_SHORT}] {e}", file=sys.stderr)
            status = 2
            continue
        text = _render(ops, args)
        if text:
            print(text)
    return status


if __name__ == "__main__":
    raise SystemExit(main())

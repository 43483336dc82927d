"""svgelements cross-check for the path translator (debug tooling).

Purpose
- Parse the same path data with `svgelements.Path` and with `rpd`, map both
  to canonical operations and compare them point by point.
- Produce a JSON-serializable report with a tolerance and a simple status.

Design constraints
- `svgelements` is optional: if it is not installed, callers keep working
  (status `NO_LIB`).
- Must never raise (debug tooling should be robust).

Notes
- svgelements follows the customary path-language rules, so the comparison
  is meaningful with `ParserSettings.standard()`.
- Close segments are mapped with the same policy as rpd (a line back to the
  subpath start, skipped when already there).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rpd.core.ops import PathOp, cubic_to, line_to, move_to, quad_to
from rpd.core.settings import ParserSettings
from rpd.path.parser import parse_path_data
from rpd.utils.errors import PathDataError


def _xy(pt: Any) -> tuple[float, float]:
    # svgelements Point exposes x/y; complex-like objects expose real/imag.
    try:
        return float(pt.x), float(pt.y)
    except AttributeError:
        return float(getattr(pt, "real", 0.0)), float(getattr(pt, "imag", 0.0))


def ops_from_svgelements(d: str) -> List[PathOp]:
    """Canonical operations as seen by svgelements.

    Raises ImportError if svgelements is missing and ValueError on arcs
    (they have no canonical counterpart).
    """
    from svgelements import Arc, Close, CubicBezier, Line, Move, Path, QuadraticBezier  # type: ignore

    ops: List[PathOp] = []
    for seg in Path(d):
        if isinstance(seg, Move):
            ops.append(move_to(*_xy(seg.end)))
        elif isinstance(seg, Close):
            start, end = _xy(seg.start), _xy(seg.end)
            if start != end:
                ops.append(line_to(*end))
        elif isinstance(seg, Line):
            ops.append(line_to(*_xy(seg.end)))
        elif isinstance(seg, QuadraticBezier):
            ops.append(quad_to(*_xy(seg.control), *_xy(seg.end)))
        elif isinstance(seg, CubicBezier):
            ops.append(cubic_to(*_xy(seg.control1), *_xy(seg.control2), *_xy(seg.end)))
        elif isinstance(seg, Arc):
            raise ValueError("arc segments are not supported")
    return ops


def _max_abs_err(a: List[PathOp], b: List[PathOp]) -> Optional[float]:
    if len(a) != len(b):
        return None
    err = 0.0
    for x, y in zip(a, b):
        if x.kind is not y.kind:
            return None
        for va, vb in zip(x.args, y.args):
            err = max(err, abs(va - vb))
    return err


def compare_with_svgelements(
    d: str,
    settings: Optional[ParserSettings] = None,
    *,
    tol: float = 1e-9,
) -> Dict[str, Any]:
    """Compare rpd vs svgelements and return a JSON-serializable report.

    Status:
    - PASS: same kinds, same count, max_abs_err <= tol
    - FAIL: different kinds/count or max_abs_err > tol
    - NO_LIB: svgelements not installed
    - ERROR: one of the parsers rejected the input
    """
    settings = settings or ParserSettings.standard()
    report: Dict[str, Any] = {
        "status": "ERROR",
        "d": d,
        "tol": float(tol),
        "settings": settings.to_dict(),
        "rpd_ops": None,
        "svgelements_ops": None,
        "max_abs_err": None,
        "notes": [],
    }

    try:
        ours = parse_path_data(d, settings)
        report["rpd_ops"] = [op.to_dict() for op in ours]
    except PathDataError as e:
        report["notes"].append(f"rpd: {e}")
        return report

    try:
        theirs = ops_from_svgelements(d)
        report["svgelements_ops"] = [op.to_dict() for op in theirs]
    except ImportError as e:
        report["status"] = "NO_LIB"
        report["notes"].append(f"{type(e).__name__}: {e}")
        return report
    except Exception as e:
        report["notes"].append(f"svgelements: {type(e).__name__}: {e}")
        return report

    err = _max_abs_err(ours, theirs)
    report["max_abs_err"] = err
    if err is None:
        report["status"] = "FAIL"
        report["notes"].append(f"operation mismatch ({len(ours)} vs {len(theirs)})")
    elif err <= float(tol):
        report["status"] = "PASS"
    else:
        report["status"] = "FAIL"
    return report

import sys

import pytest

from rpd.core.settings import ParserSettings
from rpd.geom.svgelements_compare import compare_with_svgelements


class TestWithoutLibrary:
    def test_no_lib(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "svgelements", None)
        report = compare_with_svgelements("M 0 0 L 1 1")
        assert report["status"] == "NO_LIB"
        assert report["rpd_ops"] == [
            {"kind": "moveTo", "args": [0.0, 0.0]},
            {"kind": "lineTo", "args": [1.0, 1.0]},
        ]

    def test_rpd_error(self) -> None:
        report = compare_with_svgelements("M 0 0 A 5 5 0 0 1 10 0")
        assert report["status"] == "ERROR"
        assert report["rpd_ops"] is None
        assert "UnsupportedCommand" in report["notes"][0]


class TestWithLibrary:
    def setup_method(self) -> None:
        pytest.importorskip("svgelements")

    def test_standard_rules_agree(self) -> None:
        d = "M 10 10 l 5 5 5 5 h 3 v -2 q 1 1 2 0 t 2 0 c 1 1 2 2 3 3 s 1 1 2 2 z"
        report = compare_with_svgelements(d, ParserSettings.standard())
        assert report["status"] == "PASS", report

    def test_empty_close_before_smooth_curve(self) -> None:
        report = compare_with_svgelements("M 0 0 Q 1 1 0 0 Z T 2 2", ParserSettings.standard())
        assert report["status"] == "PASS", report

    def test_segment_base_differs(self) -> None:
        report = compare_with_svgelements("M 10 10 l 1 1 2 2", ParserSettings())
        assert report["status"] == "FAIL"

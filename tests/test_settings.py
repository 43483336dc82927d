import json
import logging
from pathlib import Path

from rpd.core.settings import (
    CloseMode,
    ParserSettings,
    RelativeBase,
    SmoothReflection,
    coerce_smooth_reflection,
    find_project_settings_path,
    load_parser_settings,
)


def write_settings(folder: Path, parser: dict) -> Path:
    p = folder / "rpd_settings.json"
    p.write_text(json.dumps({"parser": parser}), encoding="utf-8")
    return p


class TestParserSettings:
    def test_defaults(self) -> None:
        s = ParserSettings()
        assert s.smooth_reflection is SmoothReflection.ALWAYS
        assert s.relative_base is RelativeBase.SEGMENT
        assert s.close_mode is CloseMode.LINE

    def test_standard_preset(self) -> None:
        s = ParserSettings.standard()
        assert s.smooth_reflection is SmoothReflection.MATCHING
        assert s.relative_base is RelativeBase.GROUP

    def test_coerce(self) -> None:
        assert coerce_smooth_reflection(" Matching ") is SmoothReflection.MATCHING
        assert coerce_smooth_reflection("nope") is SmoothReflection.ALWAYS
        assert coerce_smooth_reflection(SmoothReflection.MATCHING) is SmoothReflection.MATCHING

    def test_invalid_override_is_ignored(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            s = ParserSettings().with_overrides({"close_mode": "sometimes"})
        assert s.close_mode is CloseMode.LINE
        assert "close_mode" in caplog.text


class TestLoading:
    def test_no_file_no_env(self, tmp_path: Path) -> None:
        assert load_parser_settings(tmp_path, env={}) == ParserSettings()

    def test_file_found_from_subfolder(self, tmp_path: Path) -> None:
        write_settings(tmp_path, {"smooth_reflection": "matching", "close_mode": "close"})
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert find_project_settings_path(sub) == (tmp_path / "rpd_settings.json").resolve()
        s = load_parser_settings(sub, env={})
        assert s.smooth_reflection is SmoothReflection.MATCHING
        assert s.close_mode is CloseMode.CLOSE
        assert s.relative_base is RelativeBase.SEGMENT

    def test_env_wins_over_file(self, tmp_path: Path) -> None:
        write_settings(tmp_path, {"relative_base": "group"})
        s = load_parser_settings(tmp_path, env={"RPD_RELATIVE_BASE": "segment", "RPD_CLOSE_MODE": "close"})
        assert s.relative_base is RelativeBase.SEGMENT
        assert s.close_mode is CloseMode.CLOSE

    def test_broken_json_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "rpd_settings.json").write_text("{not json", encoding="utf-8")
        assert load_parser_settings(tmp_path, env={}) == ParserSettings()

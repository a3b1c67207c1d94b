"""Tests for the fluid-forge command line."""

import json

import pytest

from fluid_forge.cli import load_input, main, preset_entries
from fluid_forge.models import ScaleSettings


class TestClamp:
    def test_prints_expression(self, capsys):
        assert main(["clamp", "16", "20"]) == 0
        assert capsys.readouterr().out.strip() == "clamp(16px, calc(14.80px + 0.3213vw), 20px)"

    def test_options(self, capsys):
        assert main(["clamp", "10", "20", "--min-viewport", "500", "--max-viewport", "1000"]) == 0
        assert capsys.readouterr().out.strip() == "clamp(10px, 2.0000vw, 20px)"

    def test_unit_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("FLUID_FORGE_UNIT", "rem")
        assert main(["clamp", "16", "20"]) == 0
        assert capsys.readouterr().out.strip() == "clamp(1.000rem, calc(0.9247rem + 0.3213vw), 1.250rem)"

    def test_invalid_range(self, capsys):
        assert main(["clamp", "16", "20", "--min-viewport", "900", "--max-viewport", "600"]) == 1
        assert "InvalidRange" in capsys.readouterr().out

    def test_viewport_outside_form_range(self, capsys):
        assert main(["clamp", "16", "20", "--min-viewport", "10", "--max-viewport", "20"]) == 1
        out = capsys.readouterr().out
        assert "InvalidRange" in out
        assert "clamp(" not in out


class TestCss:
    def test_font_preset(self, capsys):
        assert main(["css", "--variant", "vars"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("/* Fluid Sizes as CSS Custom Properties */")
        assert "  --fs-md: clamp(16px, calc(14.80px + 0.3213vw), 20px);" in out

    def test_button_preset(self, capsys):
        assert main(["css", "--variant", "classes", "--preset", "buttons"]) == 0
        out = capsys.readouterr().out
        assert "/* Padding Left */" in out
        assert ".btn-lg {" in out

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "sizes.json"
        path.write_text(json.dumps({
            "settings": {
                "min_anchor": {"viewport": 375, "value": 16},
                "max_anchor": {"viewport": 1620, "value": 20},
            },
            "entries": [{"id": 1, "label": "medium", "values": {"font-size": [16, 20]}}],
        }))
        assert main(["css", "--variant", "classes", "--input", str(path)]) == 0
        assert ".medium {\n  font-size: clamp(16px, calc(14.80px + 0.3213vw), 20px);\n}" in capsys.readouterr().out

    def test_skipped_entries_exit_2(self, tmp_path, capsys):
        path = tmp_path / "sizes.json"
        path.write_text(json.dumps({
            "settings": {
                "min_anchor": {"viewport": 375, "value": 16},
                "max_anchor": {"viewport": 1620, "value": 20},
            },
            "entries": [{"id": 1, "label": "broken", "values": {"font-size": [-1, 20]}}],
        }))
        assert main(["css", "--input", str(path)]) == 2
        assert "skipped broken" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "content",
        [
            "{\"entries\": []}",
            "[]",
            "{\"settings\": {\"min_anchor\": {\"viewport\": 375}}}",
            "not json",
        ],
    )
    def test_malformed_input_file(self, tmp_path, capsys, content):
        path = tmp_path / "sizes.json"
        path.write_text(content)
        assert main(["css", "--input", str(path)]) == 1
        assert "ValidationError" in capsys.readouterr().out

    def test_input_line_height_outside_form_range(self, tmp_path, capsys):
        path = tmp_path / "sizes.json"
        path.write_text(json.dumps({
            "settings": {
                "min_anchor": {"viewport": 375, "value": 16},
                "max_anchor": {"viewport": 1620, "value": 20},
            },
            "entries": [{"id": 1, "label": "p", "values": {"font-size": [16, 20]}, "line_height": 5}],
        }))
        assert main(["css", "--input", str(path)]) == 1
        assert "Line height of p" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["css", "--input", str(tmp_path / "nope.json")]) == 1
        assert "FileNotFoundError" in capsys.readouterr().out

    def test_unknown_variant(self):
        with pytest.raises(SystemExit):
            main(["css", "--variant", "stylus"])


class TestContrast:
    def test_report_and_suggestions(self, capsys):
        assert main(["contrast", "#FFFFFF", "#CCCCCC"]) == 0
        out = capsys.readouterr().out
        assert "1.61:1" in out
        assert "AA normal" in out
        assert "#707070" in out
        assert "#525252" in out

    def test_single_target(self, capsys):
        assert main(["contrast", "#FFFFFF", "#CCCCCC", "--target", "4.5"]) == 0
        out = capsys.readouterr().out
        assert "#707070" in out
        assert "#525252" not in out

    def test_invalid_color(self, capsys):
        assert main(["contrast", "#FFFFFF", "#12"]) == 1
        assert "InvalidColor" in capsys.readouterr().out

    @pytest.mark.parametrize("target", ["nan", "0.5", "25"])
    def test_invalid_target(self, capsys, target):
        assert main(["contrast", "#FFFFFF", "#CCCCCC", "--target", target]) == 1
        assert "InvalidRange" in capsys.readouterr().out


def test_variants_lists_flavors(capsys):
    assert main(["variants"]) == 0
    out = capsys.readouterr().out
    for key in ("vars", "classes", "scss", "fallback", "tailwind", "tags"):
        assert key in out


def test_load_input(tmp_path):
    path = tmp_path / "sizes.json"
    path.write_text(json.dumps({
        "settings": {
            "min_anchor": {"viewport": 320, "value": 14},
            "max_anchor": {"viewport": 1440, "value": 18},
            "unit": "rem",
        },
        "entries": [],
    }))
    settings, entries = load_input(path)
    assert settings.unit == "rem"
    assert entries == []


def test_space_preset_uses_margin():
    entries = preset_entries("space", "classes", ScaleSettings.create())
    assert all(list(e.values) == ["margin"] for e in entries)

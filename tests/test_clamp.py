"""Tests for the clamp() formula generator."""

import re

import pytest

from fluid_forge.clamp import (
    clamp_for_settings,
    generate_clamp,
    interpolate,
    slope_and_intercept,
)
from fluid_forge.errors import InvalidRange, InvalidUnit
from fluid_forge.models import ScaleSettings

_CLAMP_RE = re.compile(
    r"clamp\((?P<min>[-\d.]+)(?:px|rem), "
    r"(?:calc\((?P<intercept>[-\d.]+)(?:px|rem) \+ )?(?P<slope>[-\d.]+)vw\)?, "
    r"(?P<max>[-\d.]+)(?:px|rem)\)"
)


def evaluate(clamp: str, viewport_px: float, unit: str) -> float:
    """Value of the preferred expression at a viewport, in `unit`."""
    m = _CLAMP_RE.fullmatch(clamp)
    assert m, clamp
    intercept = float(m.group("intercept") or 0)
    slope_vw = float(m.group("slope"))
    slope_per_px = slope_vw / 100
    if unit == "rem":
        return intercept + slope_per_px * viewport_px / 16
    return intercept + slope_per_px * viewport_px


class TestKnownOutput:
    def test_px_scenario(self):
        assert generate_clamp(16, 20, 375, 1620, "px") == "clamp(16px, calc(14.80px + 0.3213vw), 20px)"

    def test_default_unit_is_px(self):
        assert generate_clamp(16, 20, 375, 1620) == "clamp(16px, calc(14.80px + 0.3213vw), 20px)"

    def test_rem_scenario(self):
        assert (
            generate_clamp(16, 20, 375, 1620, "rem")
            == "clamp(1.000rem, calc(0.9247rem + 0.3213vw), 1.250rem)"
        )

    def test_zero_intercept_drops_calc(self):
        assert generate_clamp(10, 20, 500, 1000) == "clamp(10px, 2.0000vw, 20px)"

    def test_fractional_px_bounds_are_not_rounded_to_integers(self):
        out = generate_clamp(16.5, 20, 375, 1620)
        assert out.startswith("clamp(16.5px, calc(")
        assert out.endswith(", 20px)")
        assert generate_clamp(14.2224, 15.004, 375, 1620).startswith("clamp(14.222px, ")

    def test_fractional_rem_bound_keeps_three_decimals(self):
        assert generate_clamp(16.5, 20, 375, 1620, "rem").startswith("clamp(1.031rem, ")

    def test_negative_slope_is_kept(self):
        assert generate_clamp(20, 16, 375, 1620) == "clamp(20px, calc(21.20px + -0.3213vw), 16px)"


class TestConstantValue:
    @pytest.mark.parametrize("value", [1, 16, 24.5, 100])
    def test_px_constant_has_no_clamp(self, value):
        out = generate_clamp(value, value, 375, 1620, "px")
        assert "clamp(" not in out
        assert "calc(" not in out
        assert out.endswith("px")

    def test_rem_constant(self):
        assert generate_clamp(24, 24, 375, 1620, "rem") == "1.5rem"
        assert generate_clamp(16, 16, 375, 1620, "rem") == "1rem"

    def test_zero_constant(self):
        assert generate_clamp(0, 0, 375, 1620, "px") == "0"
        assert generate_clamp(0, 0, 375, 1620, "rem") == "0"


class TestContinuity:
    @pytest.mark.parametrize("unit", ["px", "rem"])
    @pytest.mark.parametrize(
        "min_value,max_value,min_vp,max_vp",
        [
            (16, 20, 375, 1620),
            (12, 48, 320, 1440),
            (8, 12, 375, 1620),
            (14, 18.5, 200, 2000),
            (40, 24, 480, 1280),
        ],
    )
    def test_line_hits_both_anchors(self, unit, min_value, max_value, min_vp, max_vp):
        clamp = generate_clamp(min_value, max_value, min_vp, max_vp, unit)
        scale = 16 if unit == "rem" else 1
        assert evaluate(clamp, min_vp, unit) == pytest.approx(min_value / scale, abs=0.01)
        assert evaluate(clamp, max_vp, unit) == pytest.approx(max_value / scale, abs=0.01)


class TestInvalidInput:
    def test_equal_viewports(self):
        with pytest.raises(InvalidRange):
            generate_clamp(16, 20, 500, 500)

    def test_reversed_viewports(self):
        with pytest.raises(InvalidRange):
            generate_clamp(16, 20, 1620, 375)

    def test_non_positive_viewport(self):
        with pytest.raises(InvalidRange):
            generate_clamp(16, 20, 0, 1620)

    def test_negative_value(self):
        with pytest.raises(InvalidRange):
            generate_clamp(-4, 20, 375, 1620)

    def test_unknown_unit(self):
        with pytest.raises(InvalidUnit):
            generate_clamp(16, 20, 375, 1620, "em")


class TestLine:
    def test_slope_and_intercept(self):
        slope, intercept = slope_and_intercept(16, 20, 375, 1620)
        assert slope == pytest.approx(0.321285, abs=1e-6)
        assert intercept == pytest.approx(14.795181, abs=1e-6)

    def test_interpolate(self):
        assert interpolate(16, 20, 375, 1620, 375) == pytest.approx(16)
        assert interpolate(16, 20, 375, 1620, 1620) == pytest.approx(20)
        assert interpolate(16, 20, 375, 1620, 997.5) == pytest.approx(18)

    def test_clamp_for_settings(self):
        settings = ScaleSettings.create(min_viewport=375, max_viewport=1620, unit="rem")
        assert clamp_for_settings(16, 20, settings) == generate_clamp(16, 20, 375, 1620, "rem")

"""
clamp.py — Fluid-scaling formula generator.

Two (viewport, value) anchors define a straight line; the line is written as
a CSS clamp() whose preferred value is `intercept + slope·vw`:

    clamp(<min>, calc(<intercept> + <slope>vw), <max>)

Usage:
    from fluid_forge.clamp import generate_clamp

    generate_clamp(16, 20, 375, 1620)
    # → "clamp(16px, calc(14.80px + 0.3213vw), 20px)"
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from .errors import InvalidRange
from .units import BASE_FONT_SIZE, Number, format_length, to_fixed, trim_number, validate_unit

if TYPE_CHECKING:
    from .models import ScaleSettings

logger = logging.getLogger(__name__)


# ── Validation ────────────────────────────────────────────────────────────────

def _check_viewports(min_viewport: Number, max_viewport: Number) -> None:
    for vp in (min_viewport, max_viewport):
        if not math.isfinite(vp) or vp <= 0:
            raise InvalidRange(f"Viewport must be a positive number of pixels, got {vp!r}")
    if min_viewport >= max_viewport:
        raise InvalidRange(
            f"Minimum viewport ({min_viewport}px) must be smaller than maximum viewport ({max_viewport}px)"
        )


def _check_values(min_value: Number, max_value: Number) -> None:
    for v in (min_value, max_value):
        if not math.isfinite(v) or v < 0:
            raise InvalidRange(f"Anchor value must be finite and non-negative, got {v!r}")


# ── Formatting ────────────────────────────────────────────────────────────────

def _bound(px: Number, unit: str) -> str:
    if unit == "rem":
        return f"{to_fixed(px / BASE_FONT_SIZE, 3)}rem"
    return f"{trim_number(px, 3)}px"


def _intercept(px: float, unit: str) -> str:
    if unit == "rem":
        return f"{to_fixed(px / BASE_FONT_SIZE, 4)}rem"
    return f"{to_fixed(px, 2)}px"


# ── Public API ────────────────────────────────────────────────────────────────

def slope_and_intercept(
    min_value_px: Number,
    max_value_px: Number,
    min_viewport_px: Number,
    max_viewport_px: Number,
) -> tuple[float, float]:
    """
    Coefficients of the line through both anchors.

    Returns:
        (slope in vw, intercept in px)
    """
    _check_viewports(min_viewport_px, max_viewport_px)
    slope = (max_value_px - min_value_px) / (max_viewport_px - min_viewport_px) * 100
    intercept = min_value_px - slope * min_viewport_px / 100
    return slope, intercept


def interpolate(
    min_value_px: Number,
    max_value_px: Number,
    min_viewport_px: Number,
    max_viewport_px: Number,
    viewport_px: Number,
) -> float:
    """Unclamped value of the fluid line at `viewport_px`, in px."""
    slope, intercept = slope_and_intercept(min_value_px, max_value_px, min_viewport_px, max_viewport_px)
    return intercept + slope * viewport_px / 100


def generate_clamp(
    min_value_px: Number,
    max_value_px: Number,
    min_viewport_px: Number,
    max_viewport_px: Number,
    unit: str = "px",
) -> str:
    """
    Build the clamp() expression for one fluid property.

    Args:
        min_value_px:    Value at the minimum viewport, in px
        max_value_px:    Value at the maximum viewport, in px
        min_viewport_px: Minimum viewport width, in px
        max_viewport_px: Maximum viewport width, in px
        unit:            "px" or "rem" for the emitted lengths

    Returns:
        The clamp() string, or a plain length when both values are equal.

    Raises:
        InvalidUnit:  unit is not px/rem
        InvalidRange: viewports are not increasing, or values are negative
    """
    validate_unit(unit)
    _check_values(min_value_px, max_value_px)

    if min_value_px == max_value_px:
        return format_length(min_value_px, unit)

    slope, intercept = slope_and_intercept(min_value_px, max_value_px, min_viewport_px, max_viewport_px)
    slope_text = f"{to_fixed(slope, 4)}vw"
    if intercept == 0:
        preferred = slope_text
    else:
        preferred = f"calc({_intercept(intercept, unit)} + {slope_text})"

    result = f"clamp({_bound(min_value_px, unit)}, {preferred}, {_bound(max_value_px, unit)})"
    logger.debug(f"clamp {min_value_px}→{max_value_px} @ {min_viewport_px}→{max_viewport_px}: {result}")
    return result


def clamp_for_settings(min_value_px: Number, max_value_px: Number, settings: "ScaleSettings") -> str:
    """generate_clamp() using the viewports and unit of `settings`."""
    return generate_clamp(
        min_value_px,
        max_value_px,
        settings.min_viewport,
        settings.max_viewport,
        settings.unit,
    )

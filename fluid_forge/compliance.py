"""
compliance.py — WCAG contrast checks and the compliant-color solver.

The solver scales the foreground's RGB channels uniformly, 5% per step,
towards black on light backgrounds and towards white on dark ones. Hue stays
roughly the same while luminance moves until the pair meets the target ratio,
the color saturates to pure black/white, or 100 steps have been tried.

Not reaching the target is a normal outcome (met_target=False), e.g. a
foreground with a zero channel can never be pushed to pure white.

Usage:
    from fluid_forge.compliance import adjust_for_compliance

    result = adjust_for_compliance("#FFFFFF", "#CCCCCC", 4.5)
    result.achieved_color.css   # → "#707070"
    result.met_target           # → True
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Union

from .color import ColorLike, ColorSample, as_sample, contrast_ratio
from .errors import InvalidRange

logger = logging.getLogger(__name__)

MAX_STEPS = 100
STEP_FACTOR = 0.05

# Contrast ratios span 1:1 (identical colors) to 21:1 (black on white)
MIN_RATIO = 1.0
MAX_RATIO = 21.0

# WCAG 2.x minimum ratios
WCAG_LEVELS: Dict[str, float] = {
    "AA normal":  4.5,
    "AA large":   3.0,
    "AAA normal": 7.0,
    "AAA large":  4.5,
}

SUGGESTION_TARGETS: Dict[str, float] = {
    "AA":  4.5,
    "AAA": 7.0,
}


# ── Data models ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ComplianceQuery:
    """Background/foreground pair and the ratio the foreground must reach."""
    background: Union[ColorSample, str]
    foreground: Union[ColorSample, str]
    target_ratio: float = 4.5

    def __post_init__(self):
        object.__setattr__(self, "background", as_sample(self.background))
        object.__setattr__(self, "foreground", as_sample(self.foreground))
        ratio = self.target_ratio
        if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not math.isfinite(ratio):
            raise InvalidRange(f"target_ratio must be a finite number, got {ratio!r}")
        if not MIN_RATIO <= ratio <= MAX_RATIO:
            raise InvalidRange(f"target_ratio must be between {MIN_RATIO:g} and {MAX_RATIO:g}, got {ratio:g}")


@dataclass(frozen=True)
class ComplianceResult:
    achieved_color: ColorSample
    achieved_ratio: float
    met_target: bool
    steps: int = 0        # 0 = foreground returned unchanged

    @property
    def adjusted(self) -> bool:
        return self.steps > 0


@dataclass
class ContrastReport:
    """Ratio of a pair plus pass/fail for each WCAG level."""
    background: ColorSample
    foreground: ColorSample
    ratio: float
    levels: Dict[str, bool] = field(default_factory=dict)

    @property
    def ratio_label(self) -> str:
        return f"{self.ratio:.2f}:1"


# ── Helpers ───────────────────────────────────────────────────────────────────

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _scale_channel(channel: int, factor: float) -> int:
    return max(0, min(255, _round_half_up(channel * factor)))


def check_levels(ratio: float) -> Dict[str, bool]:
    """Pass/fail per WCAG level for a contrast ratio."""
    return {level: ratio >= threshold for level, threshold in WCAG_LEVELS.items()}


def contrast_report(background: ColorLike, foreground: ColorLike) -> ContrastReport:
    bg, fg = as_sample(background), as_sample(foreground)
    ratio = contrast_ratio(bg, fg)
    return ContrastReport(background=bg, foreground=fg, ratio=ratio, levels=check_levels(ratio))


# ── Solver ────────────────────────────────────────────────────────────────────

def solve_compliance(query: ComplianceQuery) -> ComplianceResult:
    """
    Find the nearest foreground that meets `query.target_ratio`.

    Returns the unchanged foreground when it already complies. Otherwise
    walks steps 1..100 and returns the first passing candidate, the
    saturated black/white candidate, or the last candidate tried.
    """
    bg, fg = query.background, query.foreground
    target = query.target_ratio

    current = contrast_ratio(bg, fg)
    if current >= target:
        return ComplianceResult(achieved_color=fg, achieved_ratio=current, met_target=True)

    go_darker = bg.luminance > 0.5
    r, g, b = fg.rgb
    candidate, candidate_ratio = fg, current

    for step in range(1, MAX_STEPS + 1):
        factor = 1 - step * STEP_FACTOR if go_darker else 1 + step * STEP_FACTOR
        rgb = (_scale_channel(r, factor), _scale_channel(g, factor), _scale_channel(b, factor))
        candidate = ColorSample.from_rgb(*rgb)
        candidate_ratio = contrast_ratio(bg, candidate)
        logger.debug(f"step {step}: {candidate.css} ratio {candidate_ratio:.2f}")

        if candidate_ratio >= target:
            return ComplianceResult(candidate, candidate_ratio, True, step)

        saturated = rgb == ((0, 0, 0) if go_darker else (255, 255, 255))
        if saturated:
            logger.debug(f"saturated at {candidate.css} before reaching {target:.2f}")
            return ComplianceResult(candidate, candidate_ratio, candidate_ratio >= target, step)

    logger.debug(f"no compliant color for {fg.css} on {bg.css} after {MAX_STEPS} steps")
    return ComplianceResult(candidate, candidate_ratio, False, MAX_STEPS)


def adjust_for_compliance(
    background: ColorLike,
    foreground: ColorLike,
    target_ratio: float,
) -> ComplianceResult:
    """solve_compliance() for a flat (background, foreground, ratio) call."""
    return solve_compliance(ComplianceQuery(background, foreground, target_ratio))


def suggest_colors(background: ColorLike, foreground: ColorLike) -> Dict[str, ComplianceResult]:
    """AA (4.5:1) and AAA (7:1) suggestions for normal-size text."""
    return {
        level: adjust_for_compliance(background, foreground, target)
        for level, target in SUGGESTION_TARGETS.items()
    }

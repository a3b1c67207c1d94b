"""
defaults.py — Factory defaults of the typography, spacing and button tools.

Entry lists carry labels only; run them through scale.modular_scale() (or
scale.button_entry() for buttons) to get values.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import InvalidRange
from .models import ScaleSettings, SizeEntry

DEFAULT_MIN_VIEWPORT = 375
DEFAULT_MAX_VIEWPORT = 1620
DEFAULT_MIN_BASE_SIZE = 16
DEFAULT_MAX_BASE_SIZE = 20
DEFAULT_MIN_SCALE = 1.125
DEFAULT_MAX_SCALE = 1.333
DEFAULT_HEADING_LINE_HEIGHT = 1.2
DEFAULT_BODY_LINE_HEIGHT = 1.4

# Input ranges the admin forms enforce before calling the core
ROOT_SIZE_RANGE = (1, 100)
VIEWPORT_RANGE = (200, 5000)
LINE_HEIGHT_RANGE = (0.8, 3.0)
SCALE_RANGE = (1.0, 3.0)


def check_range(name: str, value: float, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidRange(f"{name} must be between {low} and {high}, got {value}")
    return value


def check_settings(settings: ScaleSettings) -> ScaleSettings:
    """Apply the admin form ranges to viewports, base sizes and scale ratios."""
    check_range("Minimum viewport", settings.min_viewport, VIEWPORT_RANGE)
    check_range("Maximum viewport", settings.max_viewport, VIEWPORT_RANGE)
    check_range("Minimum base size", settings.min_value, ROOT_SIZE_RANGE)
    check_range("Maximum base size", settings.max_value, ROOT_SIZE_RANGE)
    check_range("Minimum scale", settings.min_scale, SCALE_RANGE)
    check_range("Maximum scale", settings.max_scale, SCALE_RANGE)
    return settings


def check_entry(entry: SizeEntry) -> SizeEntry:
    if entry.line_height is not None:
        check_range(f"Line height of {entry.label}", entry.line_height, LINE_HEIGHT_RANGE)
    return entry


# ── Typography ────────────────────────────────────────────────────────────────

# Labels per variant, largest first
_TYPE_LABELS: Dict[str, List[str]] = {
    "classes":  ["xxxlarge", "xxlarge", "xlarge", "large", "medium", "small", "xsmall", "xxsmall"],
    "vars":     ["--fs-xxxl", "--fs-xxl", "--fs-xl", "--fs-lg", "--fs-md", "--fs-sm", "--fs-xs", "--fs-xxs"],
    "tailwind": ["4xl", "3xl", "2xl", "xl", "base", "lg", "sm", "xs"],
    "tags":     ["h1", "h2", "h3", "h4", "h5", "h6", "p"],
}

# Base entry id per variant ("medium", "--fs-md", "base", "p")
TYPE_BASE_IDS: Dict[str, int] = {"classes": 5, "vars": 5, "tailwind": 5, "tags": 7}

# Entries up to this id use the heading line-height
_HEADING_IDS: Dict[str, int] = {"classes": 3, "vars": 3, "tailwind": 3, "tags": 2}


def type_entries(variant: str = "classes") -> List[SizeEntry]:
    """Default typography list for a variant; scss/fallback reuse the variable names."""
    labels_key = "vars" if variant in ("scss", "fallback") else variant
    if labels_key not in _TYPE_LABELS:
        raise InvalidRange(f"No default typography list for {variant!r}")
    headings = _HEADING_IDS[labels_key]
    return [
        SizeEntry(
            id=i,
            label=label,
            line_height=DEFAULT_HEADING_LINE_HEIGHT if i <= headings else DEFAULT_BODY_LINE_HEIGHT,
        )
        for i, label in enumerate(_TYPE_LABELS[labels_key], start=1)
    ]


def type_base_id(variant: str = "classes") -> int:
    return TYPE_BASE_IDS.get(variant, TYPE_BASE_IDS["vars"])


# ── Spacing ───────────────────────────────────────────────────────────────────

SPACE_BASE_ID = 3

_SPACE_NAMES = ["xs", "sm", "md", "lg", "xl", "xxl"]


def space_entries(variant: str = "classes") -> List[SizeEntry]:
    """Default spacing list, smallest first."""
    prefix = "--space-" if variant in ("vars", "scss", "fallback") else "space-"
    return [SizeEntry(id=i, label=f"{prefix}{name}") for i, name in enumerate(_SPACE_NAMES, start=1)]


# ── Buttons ───────────────────────────────────────────────────────────────────

BUTTON_SIZES: List[Tuple[int, str, Dict[str, float]]] = [
    (1, "btn-sm", {"width": 120, "height": 32, "paddingX": 12, "paddingY": 6,
                   "fontSize": 14, "borderRadius": 4, "borderWidth": 1}),
    (2, "btn-md", {"width": 160, "height": 40, "paddingX": 16, "paddingY": 8,
                   "fontSize": 16, "borderRadius": 6, "borderWidth": 2}),
    (3, "btn-lg", {"width": 200, "height": 48, "paddingX": 20, "paddingY": 10,
                   "fontSize": 18, "borderRadius": 8, "borderWidth": 2}),
]

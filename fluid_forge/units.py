"""
units.py — px ⇄ rem conversion and the number formatting used in emitted CSS.

1rem is fixed at the browser default of 16px. Conversions are exact; rounding
only happens when a number is turned into text.

Usage:
    from fluid_forge.units import px_to_rem, format_length

    px_to_rem(20)              # → 1.25
    format_length(20, "rem")   # → "1.25rem"
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from .errors import InvalidUnit

Number = Union[int, float]

BASE_FONT_SIZE = 16
VALID_UNITS = ("px", "rem")


# ── Validation ────────────────────────────────────────────────────────────────

def validate_unit(unit: str) -> str:
    """Return the unit key unchanged, or raise InvalidUnit."""
    if unit not in VALID_UNITS:
        raise InvalidUnit(f"Unsupported unit {unit!r} (expected one of {', '.join(VALID_UNITS)})")
    return unit


def _check_magnitude(value: Number) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidUnit(f"Size must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidUnit(f"Size must be finite and non-negative, got {value!r}")


# ── Conversion ────────────────────────────────────────────────────────────────

def px_to_rem(px: Number) -> float:
    _check_magnitude(px)
    return px / BASE_FONT_SIZE


def rem_to_px(rem: Number) -> float:
    _check_magnitude(rem)
    return rem * BASE_FONT_SIZE


def convert(value: Number, from_unit: str, to_unit: str) -> float:
    """Convert a size between px and rem."""
    validate_unit(from_unit)
    validate_unit(to_unit)
    if from_unit == to_unit:
        _check_magnitude(value)
        return float(value)
    if from_unit == "px":
        return px_to_rem(value)
    return rem_to_px(value)


# ── Formatting ────────────────────────────────────────────────────────────────

def to_fixed(value: Number, digits: int) -> str:
    """
    Fixed-point text with `digits` decimals.

    Ties round away from zero on the exact binary value, which is what
    browsers do for Number.prototype.toFixed. Python's format() rounds ties
    to even, so 0.125 would otherwise come out as "0.12" instead of "0.13".
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def trim_number(value: Number, digits: int = 3) -> str:
    """to_fixed() without trailing zeros: 16.0 → "16", 1.250 → "1.25"."""
    text = to_fixed(value, digits)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_length(px: Number, unit: str) -> str:
    """A constant length in `unit`. Zero is written without a unit."""
    validate_unit(unit)
    if px == 0:
        return "0"
    if unit == "rem":
        return f"{trim_number(px / BASE_FONT_SIZE, 3)}rem"
    return f"{trim_number(px, 3)}px"

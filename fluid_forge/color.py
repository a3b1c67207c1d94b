"""
color.py — Hex normalization, RGB/HSL conversion and WCAG contrast math.

Canonical hex is six uppercase digits without '#': "AABBCC".
`ColorSample.css` gives the "#AABBCC" form for stylesheets.

Usage:
    from fluid_forge.color import ColorSample, contrast_ratio

    contrast_ratio("#FFF", "000000")       # → 21.0
    ColorSample("#abc").rgb                 # → RGB(r=170, g=187, b=204)
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

from .errors import InvalidColor

_HEX_RE = re.compile(r"[0-9A-F]{6}")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


# ── Hex / RGB ─────────────────────────────────────────────────────────────────

def normalize_hex(value: str) -> str:
    """
    '#abc' → 'AABBCC'.

    Strips a leading '#', expands 3-digit shorthand and uppercases.

    Raises:
        InvalidColor: the result is not exactly six hex digits
    """
    if not isinstance(value, str):
        raise InvalidColor(f"Color must be a hex string, got {value!r}")
    h = value.strip().lstrip("#").upper()
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if not _HEX_RE.fullmatch(h):
        raise InvalidColor(f"Not a hex color: {value!r}")
    return h


def hex_to_rgb(hex_str: str) -> RGB:
    h = normalize_hex(hex_str)
    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    for c in (r, g, b):
        if not 0 <= c <= 255:
            raise InvalidColor(f"RGB channel out of range: {c!r}")
    return f"{int(r):02X}{int(g):02X}{int(b):02X}"


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """RGB (0–255) → HSL as rounded (degrees, percent, percent)."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return round(h * 360), round(s * 100), round(l * 100)


# ── WCAG luminance & contrast ─────────────────────────────────────────────────

def _linear(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    WCAG relative luminance in [0, 1].

    Weights are applied as integers over 10000 so white sums to exactly 1.0.
    """
    return (2126 * _linear(r) + 7152 * _linear(g) + 722 * _linear(b)) / 10000


@dataclass(frozen=True)
class ColorSample:
    """A color given as hex, normalized on construction."""
    hex: str

    def __post_init__(self):
        object.__setattr__(self, "hex", normalize_hex(self.hex))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "ColorSample":
        return cls(rgb_to_hex(r, g, b))

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    @property
    def luminance(self) -> float:
        return relative_luminance(*self.rgb)

    @property
    def css(self) -> str:
        return f"#{self.hex}"

    def __str__(self) -> str:
        return self.css


ColorLike = Union[str, ColorSample]


def as_sample(color: ColorLike) -> ColorSample:
    return color if isinstance(color, ColorSample) else ColorSample(color)


def luminance_of(color: ColorLike) -> float:
    return as_sample(color).luminance


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05), in [1, 21]. Order does not matter."""
    la = luminance_of(color_a)
    lb = luminance_of(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_text(color: ColorLike) -> str:
    """Black or white text for a swatch, by YIQ brightness."""
    r, g, b = as_sample(color).rgb
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if brightness > 128 else "#FFFFFF"

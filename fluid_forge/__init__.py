"""
fluid_forge — fluid clamp() CSS generation and WCAG contrast solving.

Stateless, synchronous helpers shared by the typography, spacing, button and
color admin tools. Hosts pass settings and entry lists in, get text out.
"""

from __future__ import annotations

from .clamp import clamp_for_settings, generate_clamp, interpolate, slope_and_intercept
from .color import (
    RGB,
    ColorSample,
    contrast_ratio,
    contrast_text,
    hex_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from .compliance import (
    WCAG_LEVELS,
    ComplianceQuery,
    ComplianceResult,
    ContrastReport,
    adjust_for_compliance,
    check_levels,
    contrast_report,
    solve_compliance,
    suggest_colors,
)
from .emitter import Emission, SkippedEntry, emit, emit_all, render_css
from .errors import (
    DuplicateEntry,
    FluidForgeError,
    InvalidColor,
    InvalidRange,
    InvalidUnit,
    InvalidVariant,
)
from .models import ScaleAnchor, ScaleSettings, SizeEntry, SizeList
from .scale import button_entry, modular_scale
from .units import BASE_FONT_SIZE, convert, px_to_rem, rem_to_px
from .variants import VARIANTS, VariantDescriptor, get_variant

__version__ = "1.0.0"

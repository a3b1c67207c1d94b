"""
errors.py — Typed failures raised by the fluid-forge core.

Every error is a ValueError subclass so hosts that only know about bad input
can still catch it. Batch callers catch FluidForgeError per item and move on.
"""

from __future__ import annotations


class FluidForgeError(ValueError):
    """Base class for every failure the core reports."""


class InvalidRange(FluidForgeError):
    """Degenerate viewport span or malformed anchor values."""


class InvalidColor(FluidForgeError):
    """A color string that does not normalize to six hex digits."""


class InvalidUnit(FluidForgeError):
    """Unsupported unit key, or a magnitude that cannot be a size."""


class InvalidVariant(FluidForgeError):
    """Unknown output flavor requested from the variant registry."""


class DuplicateEntry(FluidForgeError):
    """Two entries in one list share a label."""

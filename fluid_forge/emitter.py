"""
emitter.py — Render a tool's entry list in one output flavor.

For every entry, in list order, each (min_px, max_px) pair becomes one
clamp() via the formula generator; the variant descriptor then lays the
results out between its header and footer. Output is byte-identical for
identical input, so hosts can paste it straight into a stylesheet.

An entry whose values cannot be turned into a clamp() is skipped and
reported in Emission.skipped; the remaining entries still render.

Usage:
    from fluid_forge.emitter import render_css

    css = render_css("vars", settings, entries)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .clamp import clamp_for_settings
from .errors import DuplicateEntry, FluidForgeError
from .models import ScaleSettings, SizeEntry
from .variants import (
    VARIANTS,
    Declaration,
    RenderedEntry,
    Section,
    VariantDescriptor,
    css_properties,
    get_variant,
)

logger = logging.getLogger(__name__)


# ── Data models ────────────────────────────────────────────────────────────────

@dataclass
class SkippedEntry:
    entry: SizeEntry
    error: FluidForgeError

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass
class Emission:
    """Rendered text plus the entries that could not be rendered."""
    variant: str
    text: str
    skipped: List[SkippedEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


# ── Helpers ───────────────────────────────────────────────────────────────────

def _check_labels(entries: Sequence[SizeEntry]) -> None:
    seen: Dict[str, int] = {}
    for entry in entries:
        if entry.label in seen:
            raise DuplicateEntry(
                f"Label {entry.label!r} is used by entries {seen[entry.label]} and {entry.id}"
            )
        seen[entry.label] = entry.id


def render_entry(entry: SizeEntry, settings: ScaleSettings) -> RenderedEntry:
    """
    Compute the clamp() of every value pair of one entry.

    Raises:
        FluidForgeError: any pair is invalid for these settings
        DuplicateEntry:  two keys map to the same CSS property
    """
    declarations: List[Declaration] = []
    owners: Dict[str, str] = {}
    for key, (min_px, max_px) in entry.values.items():
        value = clamp_for_settings(min_px, max_px, settings)
        for prop in css_properties(key):
            if prop in owners:
                raise DuplicateEntry(
                    f"{entry.label}: keys {owners[prop]!r} and {key!r} both set {prop}"
                )
            owners[prop] = key
            declarations.append(Declaration(prop=prop, key=key, value=value))
    return RenderedEntry(entry=entry, declarations=tuple(declarations))


def _block(opener: str, items: Sequence[str], separator: str, closer: str) -> str:
    body = separator.join(items)
    return opener + (body + "\n" if items else "") + closer


def _render_section(descriptor: VariantDescriptor, section: Section, rendered: Sequence[RenderedEntry]) -> str:
    if not section.grouped:
        items = [section.render(descriptor, r, r.declarations) for r in rendered if r.declarations]
        return _block(section.opener, items, section.separator, section.closer)

    axes: List[str] = []
    for r in rendered:
        for prop in r.axes():
            if prop not in axes:
                axes.append(prop)

    groups = []
    for prop in axes:
        items = []
        for r in rendered:
            decls = [d for d in r.declarations if d.prop == prop]
            if decls:
                items.append(section.render(descriptor, r, decls))
        groups.append(_block(section.group_opener(prop), items, section.separator, section.group_closer))
    return _block(section.opener, groups, section.group_separator, section.closer)


# ── Public API ────────────────────────────────────────────────────────────────

def emit(variant_key: str, settings: ScaleSettings, entries: Sequence[SizeEntry]) -> Emission:
    """
    Render `entries` in the flavor `variant_key`.

    Args:
        variant_key: Registry key: vars, classes, scss, fallback, tailwind, tags
        settings:    Viewports and unit shared by every entry
        entries:     Ordered entries; output follows this order

    Returns:
        Emission with the text and any skipped entries.

    Raises:
        InvalidVariant: unknown variant key
        DuplicateEntry: two entries share a label
    """
    descriptor = get_variant(variant_key)
    _check_labels(entries)

    rendered: List[RenderedEntry] = []
    skipped: List[SkippedEntry] = []
    for entry in entries:
        try:
            rendered.append(render_entry(entry, settings))
        except FluidForgeError as e:
            logger.warning(f"Skipping {entry.label} (id {entry.id}): {e}")
            skipped.append(SkippedEntry(entry=entry, error=e))

    sections = "".join(_render_section(descriptor, s, rendered) for s in descriptor.sections)
    text = descriptor.header + sections + descriptor.footer
    return Emission(variant=descriptor.key, text=text, skipped=skipped)


def render_css(variant_key: str, settings: ScaleSettings, entries: Sequence[SizeEntry]) -> str:
    """emit() returning the text only."""
    return emit(variant_key, settings, entries).text


def emit_all(settings: ScaleSettings, entries: Sequence[SizeEntry]) -> Dict[str, Emission]:
    """Every registered flavor for the same entries, keyed by variant."""
    return {key: emit(key, settings, entries) for key in VARIANTS}

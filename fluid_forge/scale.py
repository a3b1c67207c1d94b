"""
scale.py — Derive entry values from a base size and a modular scale.

Typography and spacing tools pick one entry as the base; every other entry is
some number of steps away from it and its size is the base size multiplied by
the scale ratio once per step (separately at the min and max viewport):

    min = settings.min_value · settings.min_scale ** steps
    max = settings.max_value · settings.max_scale ** steps

Type lists run largest first (headings above the base), spacing lists run
smallest first, hence the `ascending` switch.

The button tool instead shrinks each stored dimension by min_value/max_value
at the small viewport, keeping the stored value at the large one.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

from .errors import InvalidRange
from .models import ScaleSettings, SizeEntry
from .units import to_fixed


def _round(value: float, precision: int) -> float:
    if precision <= 0:
        return float(math.floor(value + 0.5))
    return float(to_fixed(value, precision))


def _base_index(entries: Sequence[SizeEntry], base_id: int) -> int:
    for i, entry in enumerate(entries):
        if entry.id == base_id:
            return i
    raise InvalidRange(f"Base entry {base_id} is not in the list")


def modular_scale(
    entries: Sequence[SizeEntry],
    settings: ScaleSettings,
    base_id: int,
    prop: str = "font-size",
    ascending: bool = False,
    precision: int = 3,
) -> List[SizeEntry]:
    """
    Fill `prop` on every entry from the modular scale.

    Args:
        entries:   Ordered entry list
        settings:  Base sizes (anchor values) and min/max scale ratios
        base_id:   id of the entry that gets the base sizes
        prop:      Property key to set on each entry
        ascending: True when sizes grow down the list (spacing)
        precision: Decimals kept; 0 rounds to whole pixels

    Returns:
        New entries in the same order; the input is not modified.

    Raises:
        InvalidRange: base_id not in the list
    """
    base = _base_index(entries, base_id)
    result = []
    for i, entry in enumerate(entries):
        steps = i - base if ascending else base - i
        min_px = _round(settings.min_value * settings.min_scale ** steps, precision)
        max_px = _round(settings.max_value * settings.max_scale ** steps, precision)
        result.append(entry.with_values({prop: (min_px, max_px)}))
    return result


def button_entry(
    id: int,
    label: str,
    dimensions: Dict[str, float],
    settings: ScaleSettings,
) -> SizeEntry:
    """
    Entry for one button size from its large-viewport dimensions.

    A zero border width is left out so no border-width rule is emitted.
    """
    if settings.max_value <= 0:
        raise InvalidRange("Maximum base size must be positive to scale button dimensions")
    ratio = settings.min_value / settings.max_value

    values = {}
    for key, value in dimensions.items():
        if key in ("borderWidth", "border-width") and value == 0:
            continue
        values[key] = (_round(value * ratio, 0), float(value))
    return SizeEntry(id=id, label=label, values=values)

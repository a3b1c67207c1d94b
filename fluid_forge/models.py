"""
models.py — Host-facing input schemas.

These are the JSON shapes a host hands to the core: the scale settings of a
tool and its ordered list of size entries. They are frozen pydantic models so
a host can load them straight from stored options or a request body:

    settings = ScaleSettings.model_validate(payload["settings"])
    entries  = [SizeEntry.model_validate(e) for e in payload["entries"]]

The core re-checks the invariants it depends on (viewport ordering, unit) and
raises its own typed errors; pydantic only guards the shape of the data.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Unit = Literal["px", "rem"]


class ScaleAnchor(BaseModel):
    """One end of the fluid line."""
    model_config = ConfigDict(frozen=True)

    viewport: float = Field(gt=0, description="Viewport width in px, e.g. 375")
    value: float = Field(ge=0, description="Value at that viewport, in px")


class ScaleSettings(BaseModel):
    """Anchors, output unit and modular-scale ratios for one tool."""
    model_config = ConfigDict(frozen=True)

    min_anchor: ScaleAnchor = Field(description="Anchor at the smallest viewport")
    max_anchor: ScaleAnchor = Field(description="Anchor at the largest viewport")
    unit: Unit = Field(default="px", description="Unit of the emitted lengths")
    min_scale: float = Field(default=1.125, gt=0, description="Scale ratio at the minimum viewport (host range 1.0–3.0)")
    max_scale: float = Field(default=1.333, gt=0, description="Scale ratio at the maximum viewport (host range 1.0–3.0)")

    @classmethod
    def create(
        cls,
        min_viewport: float = 375,
        max_viewport: float = 1620,
        min_value: float = 16,
        max_value: float = 20,
        unit: Unit = "px",
        min_scale: float = 1.125,
        max_scale: float = 1.333,
    ) -> "ScaleSettings":
        """Build settings from flat numbers (the shape the admin forms use)."""
        return cls(
            min_anchor=ScaleAnchor(viewport=min_viewport, value=min_value),
            max_anchor=ScaleAnchor(viewport=max_viewport, value=max_value),
            unit=unit,
            min_scale=min_scale,
            max_scale=max_scale,
        )

    @property
    def min_viewport(self) -> float:
        return self.min_anchor.viewport

    @property
    def max_viewport(self) -> float:
        return self.max_anchor.viewport

    @property
    def min_value(self) -> float:
        return self.min_anchor.value

    @property
    def max_value(self) -> float:
        return self.max_anchor.value


class SizeEntry(BaseModel):
    """
    A named size in a tool's list.

    `values` maps a property key to its (min_px, max_px) pair. Keys are CSS
    properties ("font-size", "margin") or the camelCase keys the button tool
    stores ("fontSize", "paddingX"); insertion order is emission order.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Stable unique id within the list")
    label: str = Field(min_length=1, description="Class, variable or tag name, unique within the list")
    values: Dict[str, Tuple[float, float]] = Field(default_factory=dict)
    line_height: Optional[float] = Field(default=None, gt=0, description="Unitless line-height (host range 0.8–3.0)")

    @classmethod
    def fluid(
        cls,
        id: int,
        label: str,
        min_px: float,
        max_px: float,
        prop: str = "font-size",
        line_height: Optional[float] = None,
    ) -> "SizeEntry":
        """Entry carrying a single fluid property."""
        return cls(id=id, label=label, values={prop: (min_px, max_px)}, line_height=line_height)

    def with_values(self, changes: Dict[str, Tuple[float, float]]) -> "SizeEntry":
        """Copy with some property pairs replaced or added, order kept."""
        values = dict(self.values)
        values.update(changes)
        return self.model_copy(update={"values": values})


class SizeList(BaseModel):
    """A tool's settings with its ordered entries, as stored in an input file."""
    model_config = ConfigDict(frozen=True)

    settings: ScaleSettings = Field(description="Anchors, unit and ratios shared by every entry")
    entries: List[SizeEntry] = Field(default_factory=list, description="Entries in emission order")

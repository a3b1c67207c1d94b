"""
variants.py — Registry of output flavors for the CSS/config emitter.

Each flavor is one VariantDescriptor: a header comment, a footer with a usage
example, a naming rule for labels, and one or more sections. A section either
renders once per entry or is grouped by CSS axis (one group per property,
e.g. all font-size rules, then all margin rules).

    vars      :root { --fs-md: clamp(...); }
    classes   .medium { font-size: clamp(...); }   grouped by axis
    scss      $fs-md: clamp(...);
    fallback  :root block + .fs-md { font-size: clamp(...); font-size: var(--fs-md); }
    tailwind  module.exports = { theme: { extend: { fontSize: { 'base': '...' } } } }
    tags      h1 { font-size: clamp(...); line-height: 1.2; }

Adding a flavor means adding one descriptor to VARIANTS.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import InvalidVariant
from .models import SizeEntry
from .units import trim_number


# ── Rendered values ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Declaration:
    """One CSS property of an entry with its computed clamp()."""
    prop: str      # CSS property, e.g. "padding-left"
    key: str       # key in SizeEntry.values, e.g. "paddingX"
    value: str     # clamp() or constant length


@dataclass(frozen=True)
class RenderedEntry:
    entry: SizeEntry
    declarations: Tuple[Declaration, ...]

    @property
    def multi(self) -> bool:
        return len(self.declarations) > 1

    def axes(self) -> List[str]:
        return [d.prop for d in self.declarations]


# ── Property naming ───────────────────────────────────────────────────────────

# Shorthand keys stored by the button tool; one clamp, two declarations.
PROPERTY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "paddingX": ("padding-left", "padding-right"),
    "paddingY": ("padding-top", "padding-bottom"),
    "marginX":  ("margin-left", "margin-right"),
    "marginY":  ("margin-top", "margin-bottom"),
}


def kebab(key: str) -> str:
    """'borderRadius' → 'border-radius'; kebab-case input is returned as is."""
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", key).lower()


def camel(prop: str) -> str:
    """'font-size' → 'fontSize'"""
    head, *rest = prop.split("-")
    return head + "".join(p.capitalize() for p in rest)


def css_properties(key: str) -> Tuple[str, ...]:
    return PROPERTY_ALIASES.get(key, (kebab(key),))


def axis_title(prop: str) -> str:
    return " ".join(p.capitalize() for p in prop.split("-"))


def slug(label: str) -> str:
    """Label without sigils, safe as a class or variable name."""
    return re.sub(r"[^a-zA-Z0-9_-]", "-", label.strip().lstrip(".-$"))


def _suffixed(base: str, prop: str, multi: bool) -> str:
    return f"{base}-{prop}" if multi else base


def css_var_name(label: str, prop: str = "", multi: bool = False) -> str:
    return _suffixed(f"--{slug(label)}", prop, multi)


def scss_var_name(label: str, prop: str = "", multi: bool = False) -> str:
    return _suffixed(f"${slug(label)}", prop, multi)


def class_selector(label: str, prop: str = "", multi: bool = False) -> str:
    return f".{slug(label)}"


def tag_selector(label: str, prop: str = "", multi: bool = False) -> str:
    return label.strip()


def config_key(label: str, prop: str = "", multi: bool = False) -> str:
    return f"'{slug(label)}'"


# ── Descriptor ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Section:
    """
    One block of a flavor's output.

    `render` turns an entry (and the declarations to include) into one item.
    Items are joined with `separator` between `opener` and `closer`. When
    `group_opener` is set the items are grouped per CSS axis first.
    """
    render: Callable[["VariantDescriptor", RenderedEntry, Sequence[Declaration]], str]
    opener: str = ""
    closer: str = ""
    separator: str = "\n"
    group_opener: Optional[Callable[[str], str]] = None
    group_closer: str = ""
    group_separator: str = "\n"

    @property
    def grouped(self) -> bool:
        return self.group_opener is not None


@dataclass(frozen=True)
class VariantDescriptor:
    key: str
    display_name: str
    header: str
    footer: str
    naming: Callable[[str, str, bool], str]
    sections: Tuple[Section, ...]

    @property
    def grouped(self) -> bool:
        return any(s.grouped for s in self.sections)

    def name_for(self, label: str, prop: str = "", multi: bool = False) -> str:
        return self.naming(label, prop, multi)


# ── Item renderers ────────────────────────────────────────────────────────────

def _rule(selector: str, lines: Sequence[str]) -> str:
    body = "".join(f"  {line};\n" for line in lines)
    return f"{selector} {{\n{body}}}"


def _line_height(rendered: RenderedEntry, decls: Sequence[Declaration]) -> List[str]:
    lh = rendered.entry.line_height
    if lh is None or not any(d.prop == "font-size" for d in decls):
        return []
    return [f"line-height: {trim_number(lh, 3)}"]


def _custom_property_lines(v: VariantDescriptor, r: RenderedEntry, decls: Sequence[Declaration]) -> str:
    return "\n".join(
        f"  {css_var_name(r.entry.label, d.prop, r.multi)}: {d.value};" for d in decls
    )


def _scss_lines(v: VariantDescriptor, r: RenderedEntry, decls: Sequence[Declaration]) -> str:
    return "\n".join(
        f"{v.name_for(r.entry.label, d.prop, r.multi)}: {d.value};" for d in decls
    )


def _plain_rule(v: VariantDescriptor, r: RenderedEntry, decls: Sequence[Declaration]) -> str:
    lines = [f"{d.prop}: {d.value}" for d in decls] + _line_height(r, decls)
    return _rule(v.name_for(r.entry.label), lines)


def _fallback_rule(v: VariantDescriptor, r: RenderedEntry, decls: Sequence[Declaration]) -> str:
    lines: List[str] = []
    for d in decls:
        lines.append(f"{d.prop}: {d.value}")
        lines.append(f"{d.prop}: var({css_var_name(r.entry.label, d.prop, r.multi)})")
    return _rule(v.name_for(r.entry.label), lines + _line_height(r, decls))


def _config_pair(v: VariantDescriptor, r: RenderedEntry, decls: Sequence[Declaration]) -> str:
    return ",\n".join(f"        {v.name_for(r.entry.label)}: '{d.value}'" for d in decls)


# ── Registry ──────────────────────────────────────────────────────────────────

VARIANTS: Dict[str, VariantDescriptor] = {
    "vars": VariantDescriptor(
        key="vars",
        display_name="CSS Custom Properties",
        header=(
            "/* Fluid Sizes as CSS Custom Properties */\n"
            "/* Add to your theme's stylesheet */\n\n"
        ),
        footer=(
            "\n/* Usage Example:\n"
            " * font-size: var(--fs-md);\n"
            " */\n"
        ),
        naming=css_var_name,
        sections=(
            Section(render=_custom_property_lines, opener=":root {\n", closer="}\n"),
        ),
    ),
    "classes": VariantDescriptor(
        key="classes",
        display_name="Utility Classes",
        header=(
            "/* Fluid Size Utility Classes */\n"
            "/* Add to your theme's stylesheet */\n\n"
        ),
        footer=(
            "/* Usage Example:\n"
            " * <p class=\"medium\">Fluid text</p>\n"
            " */\n"
        ),
        naming=class_selector,
        sections=(
            Section(
                render=_plain_rule,
                separator="\n\n",
                group_opener=lambda prop: f"/* {axis_title(prop)} */\n",
                group_separator="\n",
            ),
        ),
    ),
    "scss": VariantDescriptor(
        key="scss",
        display_name="SCSS Variables",
        header=(
            "// Fluid Sizes as SCSS Variables\n"
            "// Add to your SCSS build process\n\n"
        ),
        footer=(
            "\n// Usage Example:\n"
            "// font-size: $fs-md;\n"
        ),
        naming=scss_var_name,
        sections=(
            Section(render=_scss_lines),
        ),
    ),
    "fallback": VariantDescriptor(
        key="fallback",
        display_name="CSS with Fallbacks",
        header=(
            "/* Fluid Sizes with Fallbacks */\n"
            "/* Provides fallback values for better browser compatibility */\n\n"
        ),
        footer=(
            "\n/* Usage Example:\n"
            " * <p class=\"fs-md\">Fluid text</p>\n"
            " */\n"
        ),
        naming=class_selector,
        sections=(
            Section(render=_custom_property_lines, opener=":root {\n", closer="}\n"),
            Section(render=_fallback_rule, opener="\n/* Classes with Fallbacks */\n", separator="\n\n"),
        ),
    ),
    "tailwind": VariantDescriptor(
        key="tailwind",
        display_name="Tailwind Config",
        header=(
            "// Fluid Sizes as Tailwind CSS Config\n"
            "// Merge into tailwind.config.js\n\n"
        ),
        footer=(
            "\n// Usage Example:\n"
            "// <p class=\"text-base\">Fluid text</p>\n"
        ),
        naming=config_key,
        sections=(
            Section(
                render=_config_pair,
                opener="module.exports = {\n  theme: {\n    extend: {\n",
                closer="    }\n  }\n}\n",
                separator=",\n",
                group_opener=lambda prop: f"      {camel(prop)}: {{\n",
                group_closer="      }",
                group_separator=",\n",
            ),
        ),
    ),
    "tags": VariantDescriptor(
        key="tags",
        display_name="Element Selectors",
        header=(
            "/* Fluid Element Styles */\n"
            "/* Add to your theme's stylesheet */\n\n"
        ),
        footer=(
            "\n/* Element selectors apply automatically, no classes needed. */\n"
        ),
        naming=tag_selector,
        sections=(
            Section(render=_plain_rule, separator="\n\n"),
        ),
    ),
}


def get_variant(key: str) -> VariantDescriptor:
    try:
        return VARIANTS[key]
    except KeyError:
        raise InvalidVariant(
            f"Unknown variant {key!r} (expected one of {', '.join(VARIANTS)})"
        ) from None

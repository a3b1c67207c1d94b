"""
fluid-forge — command line host for the fluid CSS and contrast core.

Usage:
  fluid-forge clamp 16 20 --min-viewport 375 --max-viewport 1620 --unit rem
  fluid-forge css --variant vars --preset font
  fluid-forge css --variant classes --input sizes.json
  fluid-forge contrast "#FFFFFF" "#CCCCCC" --target 4.5
  fluid-forge variants

The --input file holds {"settings": {...}, "entries": [...]} in the shape of
ScaleSettings / SizeEntry. Defaults come from FLUID_FORGE_* variables (.env).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .clamp import generate_clamp
from .compliance import WCAG_LEVELS, adjust_for_compliance, contrast_report, suggest_colors
from .config import ForgeConfig
from .defaults import (
    BUTTON_SIZES,
    SPACE_BASE_ID,
    check_entry,
    check_settings,
    space_entries,
    type_base_id,
    type_entries,
)
from .emitter import emit
from .errors import FluidForgeError
from .models import ScaleSettings, SizeEntry, SizeList
from .scale import button_entry, modular_scale
from .variants import VARIANTS

console = Console()

PRESETS = ("font", "space", "buttons")


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fluid-forge",
        description="Fluid clamp() CSS generator and WCAG contrast solver",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_clamp = sub.add_parser("clamp", help="Print one clamp() expression")
    p_clamp.add_argument("min_value", type=float, help="Value at the minimum viewport (px)")
    p_clamp.add_argument("max_value", type=float, help="Value at the maximum viewport (px)")
    _add_scale_options(p_clamp)

    p_css = sub.add_parser("css", help="Render a size list in one output flavor")
    p_css.add_argument("--variant", choices=list(VARIANTS), default="vars")
    source = p_css.add_mutually_exclusive_group()
    source.add_argument("--input", type=Path, help="JSON file with settings and entries")
    source.add_argument("--preset", choices=PRESETS, default="font", help="Built-in size list")
    _add_scale_options(p_css)

    p_contrast = sub.add_parser("contrast", help="Check a color pair and suggest compliant colors")
    p_contrast.add_argument("background", help="Background hex, e.g. '#FFFFFF'")
    p_contrast.add_argument("foreground", help="Foreground hex, e.g. '#CCCCCC'")
    p_contrast.add_argument("--target", type=float, default=None, help="Solve for this ratio only")

    sub.add_parser("variants", help="List output flavors")
    return parser.parse_args(argv)


def _add_scale_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--min-viewport", type=float, default=None)
    parser.add_argument("--max-viewport", type=float, default=None)
    parser.add_argument("--unit", choices=["px", "rem"], default=None)


def _settings(config: ForgeConfig, args: argparse.Namespace) -> ScaleSettings:
    return config.settings(
        min_viewport=args.min_viewport,
        max_viewport=args.max_viewport,
        unit=args.unit,
    )


# ── Size lists ────────────────────────────────────────────────────────────────

def load_input(path: Path) -> Tuple[ScaleSettings, List[SizeEntry]]:
    """
    Read {"settings": ..., "entries": [...]} from a JSON file.

    Raises:
        ValidationError: the file does not have that shape
        InvalidRange:    a setting or line-height is outside the form ranges
    """
    size_list = SizeList.model_validate_json(path.read_text(encoding="utf-8"))
    settings = check_settings(size_list.settings)
    return settings, [check_entry(e) for e in size_list.entries]


def preset_entries(preset: str, variant: str, settings: ScaleSettings) -> List[SizeEntry]:
    if preset == "font":
        return modular_scale(type_entries(variant), settings, type_base_id(variant))
    if preset == "space":
        return modular_scale(
            space_entries(variant), settings, SPACE_BASE_ID,
            prop="margin", ascending=True, precision=0,
        )
    return [button_entry(id_, label, dims, settings) for id_, label, dims in BUTTON_SIZES]


# ── Commands ──────────────────────────────────────────────────────────────────

def cmd_clamp(args: argparse.Namespace, config: ForgeConfig) -> int:
    settings = _settings(config, args)
    console.print(
        generate_clamp(args.min_value, args.max_value, settings.min_viewport, settings.max_viewport, settings.unit),
        markup=False, highlight=False, soft_wrap=True,
    )
    return 0


def cmd_css(args: argparse.Namespace, config: ForgeConfig) -> int:
    if args.input:
        settings, entries = load_input(args.input)
    else:
        settings = _settings(config, args)
        entries = preset_entries(args.preset, args.variant, settings)

    emission = emit(args.variant, settings, entries)
    console.print(emission.text, markup=False, highlight=False, soft_wrap=True, end="")
    for skipped in emission.skipped:
        console.print(f"[yellow]⚠ skipped {skipped.entry.label}: {escape(skipped.reason)}[/yellow]", soft_wrap=True)
    return 0 if emission.ok else 2


def cmd_contrast(args: argparse.Namespace, config: ForgeConfig) -> int:
    report = contrast_report(args.background, args.foreground)
    console.print(
        f"\n[bold]{report.foreground.css}[/bold] on [bold]{report.background.css}[/bold]"
        f" — contrast [bold cyan]{report.ratio_label}[/bold cyan]"
    )

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Level")
    table.add_column("Required")
    table.add_column("Pass")
    for level, passed in report.levels.items():
        mark = "[green]Yes[/green]" if passed else "[red]No[/red]"
        table.add_row(level, f"{WCAG_LEVELS[level]}:1", mark)
    console.print(table)

    if args.target is not None:
        suggestions = {f"{args.target}:1": adjust_for_compliance(report.background, report.foreground, args.target)}
    else:
        suggestions = suggest_colors(report.background, report.foreground)

    for name, result in suggestions.items():
        status = "[green]✓[/green]" if result.met_target else "[yellow]⚠ best achievable[/yellow]"
        note = "unchanged" if not result.adjusted else f"{result.steps} step(s)"
        console.print(
            f"  {name}: [bold]{result.achieved_color.css}[/bold] "
            f"{result.achieved_ratio:.2f}:1 {status} [dim]({note})[/dim]"
        )
    return 0


def cmd_variants(args: argparse.Namespace, config: ForgeConfig) -> int:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Key")
    table.add_column("Output")
    table.add_column("Layout")
    for key, descriptor in VARIANTS.items():
        table.add_row(key, descriptor.display_name, "grouped by axis" if descriptor.grouped else "per entry")
    console.print(table)
    return 0


COMMANDS = {
    "clamp": cmd_clamp,
    "css": cmd_css,
    "contrast": cmd_contrast,
    "variants": cmd_variants,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    try:
        config = ForgeConfig.from_env()
        logging.basicConfig(
            format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
            level=getattr(logging, config.log_level, logging.WARNING),
        )
        return COMMANDS[args.command](args, config)
    except (FluidForgeError, ValidationError, OSError) as e:
        console.print(f"[red]✗ {type(e).__name__}: {escape(str(e))}[/red]", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Theme Engine - CLI

Usage:
  python -m theme_engine generate --vector 0.5,0.9,0.3,0.8,0.3,0.5
  python -m theme_engine generate --vector 0.5,0.5,0.5,0.5,0.5,0.5 \\
      --business-type restaurant --goal luxury --avoid cluttered --format css
  python -m theme_engine variants --vector 0.2,0.6,0.6,0.5,0.9,0.4
  python -m theme_engine derive "#2a4f7c" --vector 0.5,0.5,0.5,0.5,0.5,0.5
  python -m theme_engine preset luxury-dark --format json
  python -m theme_engine presets
  python -m theme_engine fonts --vector 0.9,0.9,0.5,0.5,0.2,0.5 --business-type restaurant
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Mapping, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .color import is_hex_color
from .composer import build_theme, generate_theme_variants
from .config import OUTPUT_FORMATS, Settings
from .derive import derive_theme_from_primary_color
from .emotional import find_unrecognized_tags
from .errors import ThemeEngineError
from .fonts import rank_font_pairings, select_font_pairing
from .personality import PersonalityVector
from .presets import get_preset_by_id, list_presets
from .token_map import tokens_to_css_string
from .tokens import FIELD_TO_ALIAS, TOKEN_CATEGORIES, ThemeTokens, normalize_token_map

console = Console()

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID_INPUT = 2


# ── CLI ───────────────────────────────────────────────────────────────────────

def _token_assignment(raw: str) -> Tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key.strip(), value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theme-engine",
        description="Theme Engine: personality vector → design tokens",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_format(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            default=None,
            help="Output format (default: THEME_ENGINE_OUTPUT or table)",
        )

    def add_vector(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--vector",
            required=True,
            help="Six comma-separated values in [0, 1], e.g. 0.5,0.9,0.3,0.8,0.3,0.5",
        )
        p.add_argument(
            "--business-type",
            default=None,
            help="Business tag (restaurant, spa, ecommerce, ...)",
        )

    gen = sub.add_parser("generate", help="Generate a full token set")
    add_vector(gen)
    gen.add_argument("--seed-hue", type=float, default=None, help="Primary hue in degrees")
    gen.add_argument("--goal", action="append", default=[], help="Emotional goal (repeatable, ordered)")
    gen.add_argument("--avoid", action="append", default=[], help="Anti-reference (repeatable, ordered)")
    gen.add_argument("--primary", default=None, help="Explicit primary color (#rgb or #rrggbb)")
    gen.add_argument(
        "--set",
        dest="overrides",
        action="append",
        type=_token_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Manual token override, applied last (repeatable)",
    )
    add_format(gen)

    var = sub.add_parser("variants", help="Generate A/B palette variants")
    add_vector(var)
    add_format(var)

    der = sub.add_parser("derive", help="Re-derive the palette around a primary color")
    der.add_argument("color", help="Primary color (#rgb or #rrggbb)")
    add_vector(der)
    add_format(der)

    pre = sub.add_parser("preset", help="Show one preset")
    pre.add_argument("preset_id", help="Preset id, e.g. luxury-dark")
    add_format(pre)

    sub.add_parser("presets", help="List the preset library")

    fnt = sub.add_parser("fonts", help="Rank font pairings for a vector")
    add_vector(fnt)

    return parser


# ── Output helpers ────────────────────────────────────────────────────────────

def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _swatch(value: str) -> str:
    if len(value) == 7 and is_hex_color(value):
        return f"[{value}]■[/] {escape(value)}"
    return escape(value)


def _token_table(title: str, columns: Mapping[str, Mapping[str, str]]) -> Table:
    """One row per token, grouped by category; one value column per token set."""
    table = Table(title=title, box=box.SIMPLE, padding=(0, 1))
    table.add_column("Category", style="dim")
    table.add_column("Token", style="bold", no_wrap=True)
    for heading in columns:
        table.add_column(heading)

    for category, names in TOKEN_CATEGORIES.items():
        rows = [n for n in names if any(n in values for values in columns.values())]
        for i, name in enumerate(rows):
            cells = [_swatch(values[name]) if name in values else "[dim]—[/dim]"
                     for values in columns.values()]
            table.add_row(category if i == 0 else "", FIELD_TO_ALIAS[name], *cells)
        if rows:
            table.add_section()
    return table


def render_tokens(
    values: Mapping[str, str],
    output_format: str,
    selector: str,
    title: str = "Theme Tokens",
) -> None:
    """values is keyed by field name and may be partial (derive output)."""
    if output_format == "json":
        payload = {FIELD_TO_ALIAS[k]: v for k, v in values.items()}
        _print_plain(json.dumps(payload, indent=2))
    elif output_format == "css":
        _print_plain(tokens_to_css_string(values, selector))
    else:
        console.print(_token_table(title, {"Value": values}))


def _field_map(tokens: ThemeTokens) -> Dict[str, str]:
    return tokens.to_dict(by_alias=False)


# ── Commands ──────────────────────────────────────────────────────────────────

def cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    pv = PersonalityVector.parse(args.vector)
    overrides = normalize_token_map(dict(args.overrides))

    unknown = find_unrecognized_tags(args.goal, args.avoid)
    if unknown:
        console.print(f"[yellow]⚠ Ignoring unknown tags: {escape(', '.join(unknown))}[/yellow]")

    tokens = build_theme(
        pv,
        seed_hue=args.seed_hue,
        business_type=args.business_type or settings.business_type,
        emotional_goals=args.goal,
        anti_references=args.avoid,
        primary_color=args.primary,
        overrides=overrides,
    )
    render_tokens(_field_map(tokens), args.format or settings.output_format, settings.css_selector)
    return EXIT_OK


def cmd_variants(args: argparse.Namespace, settings: Settings) -> int:
    variants = generate_theme_variants(
        args.vector, business_type=args.business_type or settings.business_type
    )
    a, b = _field_map(variants.variant_a), _field_map(variants.variant_b)
    output_format = args.format or settings.output_format

    if output_format == "json":
        payload = {
            "variantA": variants.variant_a.to_dict(),
            "variantB": variants.variant_b.to_dict(),
        }
        _print_plain(json.dumps(payload, indent=2))
    elif output_format == "css":
        selector = settings.css_selector
        _print_plain(tokens_to_css_string(a, f'{selector}[data-variant="a"]'))
        _print_plain(tokens_to_css_string(b, f'{selector}[data-variant="b"]'))
    else:
        console.print(
            _token_table("Theme Variants", {variants.label_a: a, variants.label_b: b})
        )
    return EXIT_OK


def cmd_derive(args: argparse.Namespace, settings: Settings) -> int:
    derived = derive_theme_from_primary_color(
        args.color, args.vector, business_type=args.business_type or settings.business_type
    )
    render_tokens(
        derived,
        args.format or settings.output_format,
        settings.css_selector,
        title=f"Derived from {args.color}",
    )
    return EXIT_OK


def cmd_preset(args: argparse.Namespace, settings: Settings) -> int:
    preset = get_preset_by_id(args.preset_id)
    if preset is None:
        known = ", ".join(p.id for p in list_presets())
        console.print(
            f"[bold red]Error:[/bold red] unknown preset {escape(repr(args.preset_id))}. "
            f"Known presets: {known}"
        )
        return EXIT_NOT_FOUND

    output_format = args.format or settings.output_format
    if output_format == "table":
        console.print(Panel(
            f"[italic]{escape(preset.description)}[/italic]\n"
            f"[bold]Vector:[/bold] {', '.join(f'{v:g}' for v in preset.personality_vector)}",
            title=f"[bold]{escape(preset.name)}[/bold]",
            border_style="blue",
        ))
    render_tokens(_field_map(preset.tokens), output_format, settings.css_selector, title=preset.id)
    return EXIT_OK


def cmd_presets(args: argparse.Namespace, settings: Settings) -> int:
    table = Table(title="Theme Presets", box=box.SIMPLE, padding=(0, 1))
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Primary")
    table.add_column("Fonts")
    table.add_column("Vector", style="dim")

    for preset in list_presets():
        t = preset.tokens
        table.add_row(
            preset.id,
            escape(preset.name),
            _swatch(t.color_primary),
            escape(f"{t.font_heading} / {t.font_body}"),
            ", ".join(f"{v:g}" for v in preset.personality_vector),
        )
    console.print(table)
    return EXIT_OK


def cmd_fonts(args: argparse.Namespace, settings: Settings) -> int:
    pv = PersonalityVector.parse(args.vector)
    business_type = args.business_type or settings.business_type
    selected = select_font_pairing(pv, business_type)

    table = Table(title="Font Pairings", box=box.SIMPLE, padding=(0, 1))
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Score", justify="right", no_wrap=True)
    table.add_column("Heading")
    table.add_column("Body")

    for rank, (pairing, score) in enumerate(rank_font_pairings(pv, business_type), start=1):
        marker = " [green]✓[/green]" if pairing is selected else ""
        table.add_row(
            str(rank),
            f"{pairing.id}{marker}",
            f"{score:.2f}",
            escape(pairing.heading),
            escape(pairing.body),
        )
    console.print(table)
    return EXIT_OK


COMMANDS = {
    "generate": cmd_generate,
    "variants": cmd_variants,
    "derive": cmd_derive,
    "preset": cmd_preset,
    "presets": cmd_presets,
    "fonts": cmd_fonts,
}


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=getattr(logging, settings.log_level, logging.WARNING),
    )

    args = build_parser().parse_args(argv)
    try:
        return COMMANDS[args.command](args, settings)
    except ThemeEngineError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())

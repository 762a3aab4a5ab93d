"""
palette.py - Personality vector → 18 color tokens + shadow color.

Pipeline:
  1. Base hue: 30° (warm) → 220° (cool) along warm_cool, unless a seed hue is
     given. Without a seed, a known business type blends in its industry hue
     (70% personality / 30% industry).
  2. Saturation from playfulness + richness; primary lightness fixed at 0.5.
  3. Secondary = hue shifted 30° → 180° with richness; accent = triadic (+120°).
  4. Dark/light neutral scale decided by light_bold against a per-business
     threshold (base 0.6, clamped to [0.35, 0.85]).
  5. Text-on-primary picked by a 3:1 contrast check against white.
"""

from __future__ import annotations

import math
import numbers
from typing import Dict, Optional

from . import color
from .errors import InvalidSeedHue
from .personality import VectorLike, ensure_vector
from .units import clamp, lerp

# Industry hue nudges, blended with the personality hue (70/30)
INDUSTRY_HUE_NUDGE: Dict[str, float] = {
    "restaurant": 25,     # warm amber / terracotta
    "spa": 160,           # soft teal / sage
    "photography": 40,    # warm neutral
    "booking": 200,       # professional blue
    "ecommerce": 220,     # trust blue
    "educational": 230,   # knowledge blue
    "nonprofit": 140,     # growth green
    "event": 330,         # vibrant magenta
}

# Dark-mode threshold nudges: negative leans dark, positive leans light
DARK_MODE_NUDGE: Dict[str, float] = {
    "restaurant": -0.12,
    "spa": 0.08,
    "photography": -0.05,
    "ecommerce": 0.05,
    "nonprofit": 0.08,
    "educational": 0.08,
    "event": -0.05,
    "booking": 0.0,
    "business": 0.0,
    "portfolio": -0.05,
}

DARK_MODE_BASE_THRESHOLD = 0.6
PRIMARY_LIGHTNESS = 0.5
PRIMARY_SHIFT = 1.2          # brighten/darken amount for primary-light/-dark
SECONDARY_LIGHT_SHIFT = 1.5
ACCENT_LIGHTNESS = 0.55

STATUS_COLORS = {
    "color_success": "#22c55e",
    "color_warning": "#f59e0b",
    "color_error": "#ef4444",
}


def dark_mode_threshold(business_type: Optional[str] = None) -> float:
    nudge = DARK_MODE_NUDGE.get(business_type or "", 0.0)
    return clamp(DARK_MODE_BASE_THRESHOLD + nudge, 0.35, 0.85)


def is_dark_mode(pv: VectorLike, business_type: Optional[str] = None) -> bool:
    return ensure_vector(pv).light_bold >= dark_mode_threshold(business_type)


def check_seed_hue(seed_hue: Optional[float]) -> Optional[float]:
    """Validate a seed hue and wrap it into [0, 360). None passes through."""
    if seed_hue is None:
        return None
    if isinstance(seed_hue, bool) or not isinstance(seed_hue, numbers.Real):
        raise InvalidSeedHue(f"seed hue must be a number, got {seed_hue!r}")
    if not math.isfinite(seed_hue):
        raise InvalidSeedHue(f"seed hue must be finite, got {seed_hue!r}")
    return float(seed_hue) % 360


def resolve_base_hue(
    pv: VectorLike,
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
) -> float:
    """Primary hue in degrees [0, 360). A seed of 0° counts as a seed."""
    seed = check_seed_hue(seed_hue)
    if seed is not None:
        return seed

    hue = lerp(30, 220, ensure_vector(pv).warm_cool)
    industry_hue = INDUSTRY_HUE_NUDGE.get(business_type or "")
    if industry_hue is not None:
        hue = (hue * 0.7 + industry_hue * 0.3) % 360
    return hue


def base_saturation(pv: VectorLike) -> float:
    """Playful + rich → vivid (0.75); serious + minimal → muted (0.35)."""
    pv = ensure_vector(pv)
    return lerp(0.35, 0.75, (1 - pv.playful_serious + pv.minimal_rich) / 2)


def _neutral_scale(hue: float, warm_cool: float, light_bold: float, dark: bool) -> Dict[str, str]:
    if dark:
        # Dark backgrounds, tinted toward warm or cool
        bg_hue = lerp(hue, (hue + 240) % 360, warm_cool)
        bg = color.hsl_to_hex(bg_hue, 0.08, lerp(0.06, 0.10, 1 - light_bold))
        text = color.hsl_to_hex(bg_hue, 0.05, 0.92)
        return {
            "color_background": bg,
            "color_surface": color.brighten(bg, 0.4),
            "color_surface_elevated": color.brighten(bg, 0.7),
            "color_text": text,
            "color_text_secondary": color.hsl_to_hex(bg_hue, 0.05, 0.60),
            "color_text_on_dark": text,
            "color_border": color.hsl_to_hex(bg_hue, 0.08, 0.20),
            "color_border_light": color.hsl_to_hex(bg_hue, 0.06, 0.14),
        }

    bg_hue = lerp(hue, 40, 1 - warm_cool if warm_cool < 0.5 else 0)
    return {
        "color_background": color.hsl_to_hex(
            bg_hue, lerp(0.02, 0.08, 1 - warm_cool), lerp(0.97, 0.99, light_bold)
        ),
        "color_surface": color.hsl_to_hex(bg_hue, 0.03, 0.995),
        "color_surface_elevated": color.WHITE,
        "color_text": color.hsl_to_hex(bg_hue, 0.10, lerp(0.12, 0.08, light_bold)),
        "color_text_secondary": color.hsl_to_hex(bg_hue, 0.05, 0.45),
        "color_text_on_dark": "#f5f5f5",
        "color_border": color.hsl_to_hex(bg_hue, 0.06, 0.86),
        "color_border_light": color.hsl_to_hex(bg_hue, 0.04, 0.92),
    }


def generate_palette(
    pv: VectorLike,
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
) -> Dict[str, str]:
    """
    Generate the color tokens (plus shadow_color) for a personality vector.

    Args:
        pv:            Personality vector
        seed_hue:      Optional primary hue override in degrees
        business_type: Optional business tag for hue + dark-mode nudges

    Returns:
        Dict keyed by ThemeTokens field name.
    """
    pv = ensure_vector(pv)
    hue = resolve_base_hue(pv, seed_hue, business_type)
    saturation = base_saturation(pv)

    primary = color.hsl_to_hex(hue, saturation, PRIMARY_LIGHTNESS)
    secondary = color.hsl_to_hex(
        (hue + lerp(30, 180, pv.minimal_rich)) % 360, saturation * 0.8, PRIMARY_LIGHTNESS
    )
    accent = color.hsl_to_hex((hue + 120) % 360, clamp(saturation + 0.15, 0, 1), ACCENT_LIGHTNESS)

    dark = is_dark_mode(pv, business_type)
    neutrals = _neutral_scale(hue, pv.warm_cool, pv.light_bold, dark)

    if dark:
        shadow_color = color.rgba(primary, 0.15)
    else:
        shadow_color = color.rgba(neutrals["color_text"], 0.08)

    return {
        "color_primary": primary,
        "color_primary_light": color.brighten(primary, PRIMARY_SHIFT),
        "color_primary_dark": color.darken(primary, PRIMARY_SHIFT),
        "color_secondary": secondary,
        "color_secondary_light": color.brighten(secondary, SECONDARY_LIGHT_SHIFT),
        "color_accent": accent,
        "color_background": neutrals["color_background"],
        "color_surface": neutrals["color_surface"],
        "color_surface_elevated": neutrals["color_surface_elevated"],
        "color_text": neutrals["color_text"],
        "color_text_secondary": neutrals["color_text_secondary"],
        "color_text_on_primary": color.text_on(primary),
        "color_text_on_dark": neutrals["color_text_on_dark"],
        "color_border": neutrals["color_border"],
        "color_border_light": neutrals["color_border_light"],
        **STATUS_COLORS,
        "shadow_color": shadow_color,
    }

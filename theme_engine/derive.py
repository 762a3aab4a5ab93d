"""
derive.py - Re-seed the palette from a user-chosen primary color.

Used by the customization flow: the user picks a primary hex, the palette
is regenerated around that hue so neutrals and the secondary stay in
harmony, and the exact hex is kept as the primary.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from . import color
from .palette import ACCENT_LIGHTNESS, PRIMARY_SHIFT, generate_palette
from .personality import VectorLike, ensure_vector

logger = logging.getLogger(__name__)

# Carried over unchanged from the re-seeded palette
CARRIED_TOKENS = (
    "color_background",
    "color_surface",
    "color_surface_elevated",
    "color_text",
    "color_text_secondary",
    "color_text_on_dark",
    "color_border",
    "color_border_light",
    "color_secondary",
    "color_secondary_light",
)

DARK_BACKGROUND_LUMINANCE = 0.2


def derive_theme_from_primary_color(
    hex_color: str,
    pv: VectorLike,
    business_type: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build the color subset of ThemeTokens around an explicit primary color.

    Args:
        hex_color:     "#rgb" or "#rrggbb"; kept verbatim as color_primary
        pv:            Personality vector
        business_type: Optional business tag, same meaning as generate_theme

    Returns:
        Partial token map keyed by ThemeTokens field name.

    Raises:
        InvalidColorInput, InvalidPersonalityVector
    """
    pv = ensure_vector(pv)
    hue, saturation, _lightness = color.hex_to_hsl(hex_color)
    primary = color.normalize_hex(hex_color)

    base = generate_palette(pv, seed_hue=hue, business_type=business_type)

    is_dark = color.relative_luminance(base["color_background"]) < DARK_BACKGROUND_LUMINANCE
    if is_dark:
        shadow_color = color.rgba(primary, 0.15)
    else:
        shadow_color = color.rgba(base["color_text"], 0.08)

    logger.debug(f"Derived palette from {hex_color}: hue={hue:.1f} dark={is_dark}")

    derived = {
        "color_primary": hex_color.strip(),
        "color_primary_light": color.brighten(primary, PRIMARY_SHIFT),
        "color_primary_dark": color.darken(primary, PRIMARY_SHIFT),
        "color_accent": color.hsl_to_hex((hue + 120) % 360, saturation * 0.9, ACCENT_LIGHTNESS),
        "color_text_on_primary": color.text_on(primary),
        "shadow_color": shadow_color,
    }
    derived.update({name: base[name] for name in CARRIED_TOKENS})
    return derived

"""
typography.py - Type scale, leading, tracking and weight tokens.

Font families come from fonts.py; this module covers everything numeric.
"""

from __future__ import annotations

from typing import Dict

from .fonts import FontPairing, font_tokens
from .personality import VectorLike, ensure_vector
from .units import fmt_int, fmt_number, lerp

BASE_FONT_PX = 16

# Multiples of the 16px base, xs → 7xl
TYPE_SCALE_RATIOS = (0.75, 0.875, 1, 1.125, 1.25, 1.5, 1.875, 2.25, 3, 3.75, 4.5)
TYPE_SCALE_TOKENS = (
    "text_xs", "text_sm", "text_base", "text_lg", "text_xl", "text_2xl",
    "text_3xl", "text_4xl", "text_5xl", "text_6xl", "text_7xl",
)

# (light, bold) endpoints along the light_bold axis
WEIGHT_RANGES = {
    "weight_normal": (300, 400),
    "weight_medium": (400, 500),
    "weight_semibold": (500, 600),
    "weight_bold": (600, 800),
}


def scale_multiplier(pv: VectorLike) -> float:
    """Rich/bold personalities get a more generous scale (0.92 → 1.08)."""
    pv = ensure_vector(pv)
    return lerp(0.92, 1.08, (pv.minimal_rich + pv.light_bold) / 2)


def generate_typography(pv: VectorLike, pairing: FontPairing) -> Dict[str, str]:
    """All 25 typography tokens: families, 11 sizes, leading, tracking, weights."""
    pv = ensure_vector(pv)
    multiplier = scale_multiplier(pv)

    tokens: Dict[str, str] = dict(font_tokens(pairing))

    for name, ratio in zip(TYPE_SCALE_TOKENS, TYPE_SCALE_RATIOS):
        px = ratio * multiplier * BASE_FONT_PX
        tokens[name] = f"{fmt_number(px / BASE_FONT_PX)}rem"

    # Line-height: tighter for serious, airier for light
    tokens["leading_tight"] = fmt_number(lerp(1.15, 1.25, pv.playful_serious))
    tokens["leading_normal"] = fmt_number(lerp(1.5, 1.6, 1 - pv.light_bold))
    tokens["leading_relaxed"] = fmt_number(lerp(1.7, 1.85, 1 - pv.light_bold))

    # Letter-spacing: modern runs tight, classic runs wide
    tokens["tracking_tight"] = f"{fmt_number(lerp(-0.03, -0.01, pv.classic_modern))}em"
    tokens["tracking_normal"] = "0em"
    tokens["tracking_wide"] = f"{fmt_number(lerp(0.02, 0.08, 1 - pv.classic_modern))}em"

    for name, (light, bold) in WEIGHT_RANGES.items():
        tokens[name] = fmt_int(lerp(light, bold, pv.light_bold))

    return tokens

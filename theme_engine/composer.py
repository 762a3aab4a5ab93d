"""
composer.py - Personality vector → complete ThemeTokens.

This is the entry point most callers use. It validates the vector once,
runs every generator against it, merges their outputs (no key may be
produced twice), then lays caller overrides on top.

Usage:
    from theme_engine.composer import generate_theme, build_theme

    tokens = generate_theme([0.5, 0.5, 0.5, 0.5, 0.5, 0.5])
    tokens = generate_theme(pv, seed_hue=40, business_type="restaurant",
                            overrides={"colorPrimary": "#c9a55c"})

    # Full layering: base → emotional goals → primary color → manual overrides
    tokens = build_theme(pv, emotional_goals=["luxury"], primary_color="#2a4f7c")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

from . import color
from .animation import generate_animation
from .derive import derive_theme_from_primary_color
from .emotional import apply_emotional_overrides
from .fonts import select_font_pairing
from .palette import check_seed_hue, generate_palette, is_dark_mode, resolve_base_hue
from .personality import VectorLike, ensure_vector
from .shadows import generate_shadows
from .spacing import generate_shape, generate_spacing
from .tokens import (
    TOKEN_FIELDS,
    ThemeTokens,
    apply_token_overrides,
    normalize_token_map,
)
from .typography import generate_typography
from .units import lerp

logger = logging.getLogger(__name__)

# Variant B hue shift: neutral vectors (weak signal) move further
VARIANT_SHIFT_NEUTRAL = 90.0
VARIANT_SHIFT_POLARIZED = 45.0


def _merge_sections(*sections: Dict[str, str]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for section in sections:
        for key, value in section.items():
            if key in merged:
                raise RuntimeError(f"token {key!r} produced by more than one generator")
            merged[key] = value
    return merged


def generate_theme(
    pv: VectorLike,
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ThemeTokens:
    """
    Generate a complete ThemeTokens record from a 6-axis personality vector.

    Axis influence:
      [0] minimal_rich    - spacing, shadows, borders, palette complexity
      [1] playful_serious - fonts, saturation, radius, easing
      [2] warm_cool       - hue, neutral tint
      [3] light_bold      - weights, type scale, dark/light mode
      [4] classic_modern  - font era, tracking
      [5] calm_dynamic    - transition speed, motion intensity

    Args:
        pv:            Personality vector (validated; never clamped)
        seed_hue:      Optional primary hue in degrees
        business_type: Optional business tag ("restaurant", "spa", ...)
        overrides:     Optional token → value map applied last (override wins)

    Raises:
        InvalidPersonalityVector, InvalidSeedHue, InvalidTokenOverride
    """
    pv = ensure_vector(pv)
    check_seed_hue(seed_hue)
    # Fail on bad overrides before any generator runs
    resolved_overrides = normalize_token_map(overrides) if overrides else {}

    palette = generate_palette(pv, seed_hue, business_type)
    pairing = select_font_pairing(pv, business_type)
    logger.debug(
        f"Theme: pairing={pairing.id} dark={is_dark_mode(pv, business_type)} "
        f"primary={palette['color_primary']}"
    )

    merged = _merge_sections(
        palette,
        generate_typography(pv, pairing),
        generate_spacing(pv),
        generate_shape(pv),
        generate_shadows(pv.minimal_rich, palette["shadow_color"]),
        generate_animation(pv.playful_serious, pv.calm_dynamic),
    )
    tokens = ThemeTokens(**{name: merged[name] for name in TOKEN_FIELDS})

    if resolved_overrides:
        tokens = apply_token_overrides(tokens, resolved_overrides)
    return tokens


def build_theme(
    pv: VectorLike,
    *,
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
    emotional_goals: Sequence[str] = (),
    anti_references: Sequence[str] = (),
    primary_color: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ThemeTokens:
    """
    Run the full, order-sensitive layering pipeline:

      1. base generation (generate_theme, no overrides)
      2. emotional-goal and anti-reference adjustments
      3. optional re-seed from an explicit primary color
      4. manual overrides

    All inputs are validated before step 1.
    """
    pv = ensure_vector(pv)
    check_seed_hue(seed_hue)
    if primary_color is not None:
        color.parse_hex(primary_color)
    resolved_overrides = normalize_token_map(overrides) if overrides else {}

    tokens = generate_theme(pv, seed_hue=seed_hue, business_type=business_type)
    tokens = apply_emotional_overrides(tokens, emotional_goals, anti_references)
    if primary_color is not None:
        tokens = apply_token_overrides(
            tokens, derive_theme_from_primary_color(primary_color, pv, business_type)
        )
    return apply_token_overrides(tokens, resolved_overrides)


@dataclass(frozen=True)
class ThemeVariants:
    """Two palettes over the same personality, for A/B previews."""
    variant_a: ThemeTokens
    variant_b: ThemeTokens
    label_a: str = "Variant A"
    label_b: str = "Variant B"


def variant_hue_shift(pv: VectorLike) -> float:
    return lerp(VARIANT_SHIFT_NEUTRAL, VARIANT_SHIFT_POLARIZED, ensure_vector(pv).signal_strength())


def generate_theme_variants(
    pv: VectorLike,
    business_type: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> ThemeVariants:
    """
    Variant A is the default theme; variant B re-seeds the palette at a shifted hue.

    Fonts, spacing, shape and motion are identical across both variants.
    """
    pv = ensure_vector(pv)
    variant_a = generate_theme(pv, business_type=business_type, overrides=overrides)

    base_hue = resolve_base_hue(pv, None, business_type)
    shifted = (base_hue + variant_hue_shift(pv)) % 360
    variant_b = generate_theme(
        pv, seed_hue=shifted, business_type=business_type, overrides=overrides
    )
    return ThemeVariants(variant_a=variant_a, variant_b=variant_b)

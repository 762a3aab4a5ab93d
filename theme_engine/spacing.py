"""
spacing.py - Spacing, container and shape tokens.

Minimal personalities get more breathing room; richness compacts the
layout. Seriousness sharpens corners.
"""

from __future__ import annotations

from typing import Dict

from .personality import VectorLike, ensure_vector
from .units import fmt_int, fmt_number, lerp

# (minimal, rich) endpoints in rem
SPACING_RANGES_REM = {
    "space_section": (6.0, 4.0),
    "space_component": (3.5, 2.0),
    "space_element": (1.75, 1.0),
    "space_tight": (1.0, 0.5),
}

# (minimal, rich) endpoints in px
CONTAINER_RANGES_PX = {
    "container_max": (1200, 1440),
    "container_narrow": (640, 768),
}

RADIUS_MULTIPLES = {
    "radius_sm": 0.5,
    "radius_md": 1.0,
    "radius_lg": 1.5,
    "radius_xl": 2.5,
}
RADIUS_FULL = "9999px"


def generate_spacing(pv: VectorLike) -> Dict[str, str]:
    pv = ensure_vector(pv)
    tokens: Dict[str, str] = {}
    for name, (minimal, rich) in SPACING_RANGES_REM.items():
        tokens[name] = f"{fmt_number(lerp(minimal, rich, pv.minimal_rich))}rem"
    for name, (minimal, rich) in CONTAINER_RANGES_PX.items():
        tokens[name] = f"{fmt_int(lerp(minimal, rich, pv.minimal_rich))}px"
    return tokens


def radius_base(pv: VectorLike) -> float:
    """12px for playful → 2px for serious."""
    return lerp(12, 2, ensure_vector(pv).playful_serious)


def generate_shape(pv: VectorLike) -> Dict[str, str]:
    pv = ensure_vector(pv)
    base = radius_base(pv)
    tokens = {name: f"{fmt_int(base * mult)}px" for name, mult in RADIUS_MULTIPLES.items()}
    tokens["radius_full"] = RADIUS_FULL
    tokens["border_width"] = f"{fmt_number(lerp(1, 2, pv.minimal_rich))}px"
    return tokens

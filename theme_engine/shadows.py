"""
shadows.py - Elevation tokens driven by the minimal ↔ rich axis.

Minimal designs drop shadows entirely; each tier switches off below its
own intensity threshold. The xl tier is always present.
"""

from __future__ import annotations

from typing import Dict

# tier → (threshold, layers). Layers are (offset-y, blur, spread) in px.
SHADOW_TIERS = {
    "shadow_sm": (0.2, ((1, 2, 0),)),
    "shadow_md": (0.15, ((4, 6, -1), (2, 4, -2))),
    "shadow_lg": (0.1, ((10, 15, -3), (4, 6, -4))),
    "shadow_xl": (0.0, ((20, 25, -5), (8, 10, -6))),
}

NO_SHADOW = "none"


def _layer(offset: int, blur: int, spread: int, shadow_color: str) -> str:
    parts = ["0", f"{offset}px", f"{blur}px"]
    if spread:
        parts.append(f"{spread}px")
    parts.append(shadow_color)
    return " ".join(parts)


def generate_shadows(richness: float, shadow_color: str) -> Dict[str, str]:
    """Four shadow tokens; shadow_color comes from the palette."""
    tokens: Dict[str, str] = {}
    for name, (threshold, layers) in SHADOW_TIERS.items():
        if richness < threshold:
            tokens[name] = NO_SHADOW
        else:
            tokens[name] = ", ".join(_layer(*layer, shadow_color) for layer in layers)
    return tokens

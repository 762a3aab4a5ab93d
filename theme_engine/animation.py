"""
animation.py - Transition timing, easing and motion tokens.
"""

from __future__ import annotations

from typing import Dict

from .units import fmt_int, fmt_number, lerp

# (calm, dynamic) endpoints in ms
DURATION_RANGES_MS = {
    "transition_fast": (200, 100),
    "transition_base": (400, 200),
    "transition_slow": (800, 400),
}

EASE_BOUNCY = "cubic-bezier(0.34, 1.56, 0.64, 1)"
EASE_DECELERATE = "cubic-bezier(0.22, 1, 0.36, 1)"
EASE_STANDARD = "cubic-bezier(0.4, 0, 0.2, 1)"


def select_easing(seriousness: float, dynamism: float) -> str:
    if seriousness < 0.4 and dynamism > 0.5:
        return EASE_BOUNCY
    if dynamism > 0.6:
        return EASE_DECELERATE
    return EASE_STANDARD


def generate_animation(seriousness: float, dynamism: float) -> Dict[str, str]:
    tokens: Dict[str, str] = {
        name: f"{fmt_int(lerp(calm, dynamic, dynamism))}ms"
        for name, (calm, dynamic) in DURATION_RANGES_MS.items()
    }
    tokens["ease_default"] = select_easing(seriousness, dynamism)
    tokens["animation_distance"] = f"{fmt_int(lerp(8, 30, dynamism))}px"
    tokens["animation_scale"] = fmt_number(lerp(0.98, 0.90, dynamism))
    return tokens

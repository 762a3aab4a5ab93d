"""
emotional.py - Emotional goals and anti-references → token adjustments.

Each tag maps to a fixed list of TokenAdjustment rows. Adding a tag means
adding one table entry. Adjustments are applied one row at a time and each
scaled value is rounded immediately, so the final result can depend on
tag order at the rounding boundary even though the multipliers commute.
Reproducing previously generated previews relies on that behavior.

Unrecognized tags are ignored (logged at DEBUG) so the intake UI can ship
new vocabulary before the engine learns it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Literal, Mapping, NamedTuple, Sequence, Tuple, Union

from .tokens import ThemeTokens
from .units import parse_duration, scale_dimension, scale_duration

logger = logging.getLogger(__name__)


class TokenAdjustment(NamedTuple):
    token: str                       # ThemeTokens field name
    op: Literal["scale", "set"]
    value: Union[float, str]         # multiplier for "scale", literal for "set"


def scale(token: str, multiplier: float) -> TokenAdjustment:
    return TokenAdjustment(token, "scale", multiplier)


def set_to(token: str, value: str) -> TokenAdjustment:
    return TokenAdjustment(token, "set", value)


Adjustments = Tuple[TokenAdjustment, ...]

# ── Emotional goals ───────────────────────────────────────────────────────────

EMOTIONAL_GOAL_ADJUSTMENTS: Dict[str, Adjustments] = {
    "luxury": (
        scale("space_section", 1.15),
        scale("space_component", 1.10),
        scale("transition_base", 1.20),
        scale("transition_slow", 1.15),
    ),
    "calm": (
        scale("space_section", 1.12),
        scale("space_component", 1.08),
        scale("transition_base", 1.30),
        scale("transition_fast", 1.20),
        scale("animation_distance", 0.70),
    ),
    "energized": (
        scale("space_section", 0.92),
        scale("transition_base", 0.80),
        scale("transition_fast", 0.75),
        scale("animation_distance", 1.30),
        set_to("animation_scale", "1.05"),
    ),
    "playful": (
        scale("radius_sm", 1.30),
        scale("radius_md", 1.25),
        scale("radius_lg", 1.20),
        scale("radius_xl", 1.15),
    ),
    "authoritative": (
        scale("radius_sm", 0.70),
        scale("radius_md", 0.75),
        scale("radius_lg", 0.80),
        set_to("weight_bold", "800"),
        set_to("weight_semibold", "700"),
    ),
    "trust": (
        scale("space_component", 1.05),
        scale("animation_distance", 0.85),
    ),
    "inspired": (
        scale("text_5xl", 1.08),
        scale("text_6xl", 1.08),
        set_to("animation_scale", "1.04"),
    ),
    "welcomed": (
        scale("space_component", 1.06),
        set_to("leading_relaxed", "1.85"),
    ),
    "safe": (
        scale("animation_distance", 0.80),
        set_to("animation_scale", "1.01"),
    ),
    "curious": (
        scale("space_element", 0.95),
        scale("animation_distance", 1.10),
    ),
}

# ── Anti-references ───────────────────────────────────────────────────────────

ANTI_REFERENCE_ADJUSTMENTS: Dict[str, Adjustments] = {
    "cluttered": (
        scale("space_section", 1.10),
        scale("space_component", 1.08),
        scale("space_element", 1.05),
    ),
    "cheap": (
        scale("space_section", 1.05),
        scale("space_component", 1.05),
    ),
    "aggressive": (
        scale("transition_fast", 1.20),
        scale("animation_distance", 0.80),
        set_to("animation_scale", "1.02"),
    ),
    "boring": (
        scale("animation_distance", 1.15),
        set_to("animation_scale", "1.03"),
    ),
}


def _apply_adjustment(value: str, adjustment: TokenAdjustment) -> str:
    if adjustment.op == "set":
        return str(adjustment.value)
    # Durations round to whole ms/s, lengths to 2 decimals
    if parse_duration(value) is not None:
        return scale_duration(value, float(adjustment.value))
    return scale_dimension(value, float(adjustment.value))


def _apply_table(
    working: Dict[str, str],
    tags: Iterable[str],
    table: Mapping[str, Adjustments],
) -> None:
    for tag in tags:
        for adjustment in table.get(tag, ()):
            working[adjustment.token] = _apply_adjustment(working[adjustment.token], adjustment)


def find_unrecognized_tags(
    emotional_goals: Sequence[str] = (),
    anti_references: Sequence[str] = (),
) -> List[str]:
    """Tags the engine will ignore, in input order (goals first)."""
    unknown = [g for g in emotional_goals if g not in EMOTIONAL_GOAL_ADJUSTMENTS]
    unknown += [a for a in anti_references if a not in ANTI_REFERENCE_ADJUSTMENTS]
    return unknown


def apply_emotional_overrides(
    base: ThemeTokens,
    emotional_goals: Sequence[str] = (),
    anti_references: Sequence[str] = (),
) -> ThemeTokens:
    """
    Adjust composed tokens for emotional goals, then anti-references.

    Args:
        base:            Composed tokens (never mutated)
        emotional_goals: Ordered goal tags, e.g. ["luxury", "calm"]
        anti_references: Ordered anti-reference tags, e.g. ["cluttered"]

    Returns:
        A new ThemeTokens. Unknown tags are no-ops.
    """
    unknown = find_unrecognized_tags(emotional_goals, anti_references)
    if unknown:
        logger.debug(f"Ignoring unrecognized emotional tags: {', '.join(unknown)}")

    working = base.to_dict(by_alias=False)
    _apply_table(working, emotional_goals, EMOTIONAL_GOAL_ADJUSTMENTS)
    _apply_table(working, anti_references, ANTI_REFERENCE_ADJUSTMENTS)

    changed = {k: v for k, v in working.items() if getattr(base, k) != v}
    return base.model_copy(update=changed)

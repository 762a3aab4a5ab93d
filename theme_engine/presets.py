"""
presets.py - Hand-tuned theme presets.

Each preset runs the composer once against its personality vector and a
seed hue, then lays hand-written color and font overrides on top. The
library is built once at import and is read-only afterwards; lookups
return the stored objects and never recompute.

Usage:
    from theme_engine.presets import get_preset_by_id

    preset = get_preset_by_id("luxury-dark")
    preset.tokens.color_primary   # "#c9a55c"
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .composer import generate_theme
from .personality import PersonalityVector
from .tokens import ThemeTokens

logger = logging.getLogger(__name__)

PRESET_LIBRARY_VERSION = "2"


class ThemePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    personality_vector: PersonalityVector
    tokens: ThemeTokens


def make_preset(
    preset_id: str,
    name: str,
    description: str,
    personality_vector: Tuple[float, ...],
    seed_hue: float,
    overrides: Dict[str, str],
) -> ThemePreset:
    pv = PersonalityVector.parse(personality_vector)
    tokens = generate_theme(pv, seed_hue=seed_hue, overrides=overrides)
    return ThemePreset(
        id=preset_id, name=name, description=description, personality_vector=pv, tokens=tokens
    )


# ── Luxury Dark ───────────────────────────────────────────────────────────────
# Deep navy, gold accents, cream text, rich shadows

LUXURY_DARK = make_preset(
    "luxury-dark",
    "Luxury Dark",
    "Opulent dark theme with deep navy backgrounds, warm gold accents, and refined "
    "serif typography. Perfect for high-end brands, boutiques, and premium services.",
    (0.6, 0.9, 0.3, 0.8, 0.3, 0.5),
    40,  # gold-amber
    {
        "colorPrimary": "#c9a55c",
        "colorPrimaryLight": "#e0c88a",
        "colorPrimaryDark": "#a37e34",
        "colorSecondary": "#7b8fa6",
        "colorSecondaryLight": "#a3b4c7",
        "colorAccent": "#c9a55c",
        "colorBackground": "#0c0f17",
        "colorSurface": "#141825",
        "colorSurfaceElevated": "#1c2133",
        "colorText": "#ece6d9",
        "colorTextSecondary": "#9a9484",
        "colorTextOnPrimary": "#111111",
        "colorTextOnDark": "#ece6d9",
        "colorBorder": "#2a2f40",
        "colorBorderLight": "#1e2235",
        "fontHeading": "'Cormorant Garamond', serif",
        "fontBody": "'Outfit', sans-serif",
        "fontAccent": "'Cormorant Garamond', serif",
        "shadowColor": "rgba(201, 165, 92, 0.12)",
    },
)

# ── Modern Clean ──────────────────────────────────────────────────────────────
# White base, single blue accent, near-black text

MODERN_CLEAN = make_preset(
    "modern-clean",
    "Modern Clean",
    "Crisp, minimal design with generous whitespace, clean geometry, and a single "
    "bold accent color.",
    (0.2, 0.6, 0.6, 0.5, 0.9, 0.4),
    220,  # blue
    {
        "colorPrimary": "#2563eb",
        "colorPrimaryLight": "#60a5fa",
        "colorPrimaryDark": "#1d4ed8",
        "colorSecondary": "#6366f1",
        "colorSecondaryLight": "#a5b4fc",
        "colorAccent": "#2563eb",
        "colorBackground": "#fafafa",
        "colorSurface": "#ffffff",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#111111",
        "colorTextSecondary": "#6b7280",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f5f5",
        "colorBorder": "#e5e7eb",
        "colorBorderLight": "#f3f4f6",
        "fontHeading": "'Sora', sans-serif",
        "fontBody": "'DM Sans', sans-serif",
        "fontAccent": "'Sora', sans-serif",
        "shadowColor": "rgba(0, 0, 0, 0.06)",
    },
)

# ── Warm Professional ─────────────────────────────────────────────────────────
# Warm whites, terracotta / sage, brown-black text

WARM_PROFESSIONAL = make_preset(
    "warm-professional",
    "Warm Professional",
    "Approachable yet polished design with warm earth tones, comfortable spacing, and "
    "inviting typography. Ideal for consulting, wellness, and lifestyle brands.",
    (0.4, 0.5, 0.2, 0.5, 0.5, 0.4),
    18,  # terracotta
    {
        "colorPrimary": "#c67a4a",
        "colorPrimaryLight": "#e0a077",
        "colorPrimaryDark": "#a05d31",
        "colorSecondary": "#7a9a7e",
        "colorSecondaryLight": "#a5c3a9",
        "colorAccent": "#c67a4a",
        "colorBackground": "#faf6f0",
        "colorSurface": "#fefcf8",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#2c2420",
        "colorTextSecondary": "#7a6e63",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f0ea",
        "colorBorder": "#e8ddd1",
        "colorBorderLight": "#f0e8de",
        "fontHeading": "'Lora', serif",
        "fontBody": "'Merriweather Sans', sans-serif",
        "fontAccent": "'Lora', serif",
        "shadowColor": "rgba(44, 36, 32, 0.06)",
    },
)

# ── Bold Creative ─────────────────────────────────────────────────────────────
# Near-black base, hot magenta primary, violet + yellow support

BOLD_CREATIVE = make_preset(
    "bold-creative",
    "Bold Creative",
    "High-energy dark theme with a saturated magenta primary, punchy yellow accents, "
    "and expressive grotesk headings. Built for studios, events, and launches.",
    (0.8, 0.2, 0.4, 0.8, 0.8, 0.9),
    330,  # magenta
    {
        "colorPrimary": "#e6399b",
        "colorPrimaryLight": "#f27ab9",
        "colorPrimaryDark": "#b81f76",
        "colorSecondary": "#7c3aed",
        "colorSecondaryLight": "#a78bfa",
        "colorAccent": "#facc15",
        "colorBackground": "#0f0d14",
        "colorSurface": "#1a1722",
        "colorSurfaceElevated": "#242030",
        "colorText": "#f5f3f7",
        "colorTextSecondary": "#a59fb3",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f3f7",
        "colorBorder": "#2f2a3b",
        "colorBorderLight": "#221e2b",
        "fontHeading": "'Space Grotesk', sans-serif",
        "fontBody": "'Outfit', sans-serif",
        "fontAccent": "'Space Grotesk', sans-serif",
        "shadowColor": "rgba(230, 57, 155, 0.18)",
    },
)

# ── Editorial ─────────────────────────────────────────────────────────────────
# Paper white, ink black, oxblood red

EDITORIAL = make_preset(
    "editorial",
    "Editorial",
    "Magazine-inspired layout with paper-white backgrounds, ink-black text, an oxblood "
    "accent, and high-contrast display serifs. Suited to publications and studios.",
    (0.3, 0.8, 0.4, 0.3, 0.2, 0.2),
    0,  # oxblood red
    {
        "colorPrimary": "#9f1d20",
        "colorPrimaryLight": "#c8484a",
        "colorPrimaryDark": "#741315",
        "colorSecondary": "#1f2937",
        "colorSecondaryLight": "#4b5563",
        "colorAccent": "#9f1d20",
        "colorBackground": "#fbf9f5",
        "colorSurface": "#ffffff",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#1a1a1a",
        "colorTextSecondary": "#5f5a52",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f5f5f5",
        "colorBorder": "#e4dfd6",
        "colorBorderLight": "#efebe4",
        "fontHeading": "'Playfair Display', serif",
        "fontBody": "'Source Sans 3', sans-serif",
        "fontAccent": "'Playfair Display', serif",
        "shadowColor": "rgba(26, 26, 26, 0.05)",
    },
)

# ── Tech Forward ──────────────────────────────────────────────────────────────
# Graphite base, cyan primary, violet secondary, mono headings

TECH_FORWARD = make_preset(
    "tech-forward",
    "Tech Forward",
    "Developer-grade dark interface with graphite surfaces, electric cyan highlights, "
    "and monospace headings. Made for SaaS, developer tools, and AI products.",
    (0.5, 0.7, 0.9, 0.7, 1.0, 0.7),
    190,  # cyan
    {
        "colorPrimary": "#06b6d4",
        "colorPrimaryLight": "#67e8f9",
        "colorPrimaryDark": "#0e7490",
        "colorSecondary": "#8b5cf6",
        "colorSecondaryLight": "#c4b5fd",
        "colorAccent": "#22d3ee",
        "colorBackground": "#0a0f14",
        "colorSurface": "#111820",
        "colorSurfaceElevated": "#18212b",
        "colorText": "#e6edf3",
        "colorTextSecondary": "#8b98a5",
        "colorTextOnPrimary": "#111111",
        "colorTextOnDark": "#e6edf3",
        "colorBorder": "#1f2a36",
        "colorBorderLight": "#16202a",
        "fontHeading": "'JetBrains Mono', monospace",
        "fontBody": "'DM Sans', sans-serif",
        "fontAccent": "'JetBrains Mono', monospace",
        "shadowColor": "rgba(6, 182, 212, 0.14)",
    },
)

# ── Organic Natural ───────────────────────────────────────────────────────────
# Linen base, moss green, clay and wheat support

ORGANIC_NATURAL = make_preset(
    "organic-natural",
    "Organic Natural",
    "Earthy, calm theme with linen backgrounds, moss-green primary, clay accents, and "
    "soft serif headings. Fits wellness, food, and sustainability brands.",
    (0.4, 0.4, 0.2, 0.3, 0.4, 0.3),
    110,  # moss green
    {
        "colorPrimary": "#5b7f4a",
        "colorPrimaryLight": "#86a874",
        "colorPrimaryDark": "#3f5a33",
        "colorSecondary": "#b08d57",
        "colorSecondaryLight": "#d4b98c",
        "colorAccent": "#c2703d",
        "colorBackground": "#f7f5ee",
        "colorSurface": "#fcfbf7",
        "colorSurfaceElevated": "#ffffff",
        "colorText": "#26301f",
        "colorTextSecondary": "#6b7262",
        "colorTextOnPrimary": "#ffffff",
        "colorTextOnDark": "#f3f1e8",
        "colorBorder": "#e2dfd2",
        "colorBorderLight": "#eceadf",
        "fontHeading": "'Fraunces', serif",
        "fontBody": "'Atkinson Hyperlegible', sans-serif",
        "fontAccent": "'Fraunces', serif",
        "shadowColor": "rgba(38, 48, 31, 0.07)",
    },
)

# ── Library ───────────────────────────────────────────────────────────────────

THEME_PRESETS: Tuple[ThemePreset, ...] = (
    LUXURY_DARK,
    MODERN_CLEAN,
    WARM_PROFESSIONAL,
    BOLD_CREATIVE,
    EDITORIAL,
    TECH_FORWARD,
    ORGANIC_NATURAL,
)

_PRESETS_BY_ID: Mapping[str, ThemePreset] = MappingProxyType({p.id: p for p in THEME_PRESETS})

logger.info(f"Preset library v{PRESET_LIBRARY_VERSION}: {len(THEME_PRESETS)} presets loaded")


def get_preset_by_id(preset_id: str) -> Optional[ThemePreset]:
    """Stored preset for preset_id, or None when the id is unknown."""
    return _PRESETS_BY_ID.get(preset_id)


def list_presets() -> Tuple[ThemePreset, ...]:
    return THEME_PRESETS

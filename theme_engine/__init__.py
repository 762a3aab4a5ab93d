"""
theme_engine - Deterministic brand personality → design token engine.

A 6-axis personality vector goes in; 66 design tokens (color, typography,
spacing, shape, shadow, animation) come out. Same input, same output.
"""

from .composer import ThemeVariants, build_theme, generate_theme, generate_theme_variants
from .derive import derive_theme_from_primary_color
from .emotional import apply_emotional_overrides
from .errors import (
    InvalidColorInput,
    InvalidPersonalityVector,
    InvalidSeedHue,
    InvalidTokenOverride,
    ThemeEngineError,
)
from .personality import PersonalityVector
from .presets import ThemePreset, get_preset_by_id, list_presets
from .tokens import ThemeTokens

__version__ = "0.3.0"

__all__ = [
    "InvalidColorInput",
    "InvalidPersonalityVector",
    "InvalidSeedHue",
    "InvalidTokenOverride",
    "PersonalityVector",
    "ThemeEngineError",
    "ThemePreset",
    "ThemeTokens",
    "ThemeVariants",
    "apply_emotional_overrides",
    "build_theme",
    "derive_theme_from_primary_color",
    "generate_theme",
    "generate_theme_variants",
    "get_preset_by_id",
    "list_presets",
]

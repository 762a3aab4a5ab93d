"""
tokens.py - The ThemeTokens record every generator path converges on.

66 string-valued tokens in six categories. Python code uses snake_case
field names; the camelCase aliases ("colorPrimary", "text2xl") are the
stable wire contract consumed by the rendering and export layers, so a
rename here is a breaking change for every consumer.

Usage:
    tokens.color_primary
    tokens.to_dict()                    # {"colorPrimary": "#...", ...}
    apply_token_overrides(tokens, {"colorPrimary": "#ff0000"})
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidTokenOverride


def _token(alias: str):
    return Field(alias=alias, min_length=1)


class ThemeTokens(BaseModel):
    """Complete, immutable design-token set for one generated site."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    # ── Color ─────────────────────────────────────────────────────────────────
    color_primary: str = _token("colorPrimary")
    color_primary_light: str = _token("colorPrimaryLight")
    color_primary_dark: str = _token("colorPrimaryDark")
    color_secondary: str = _token("colorSecondary")
    color_secondary_light: str = _token("colorSecondaryLight")
    color_accent: str = _token("colorAccent")
    color_background: str = _token("colorBackground")
    color_surface: str = _token("colorSurface")
    color_surface_elevated: str = _token("colorSurfaceElevated")
    color_text: str = _token("colorText")
    color_text_secondary: str = _token("colorTextSecondary")
    color_text_on_primary: str = _token("colorTextOnPrimary")
    color_text_on_dark: str = _token("colorTextOnDark")
    color_border: str = _token("colorBorder")
    color_border_light: str = _token("colorBorderLight")
    color_success: str = _token("colorSuccess")
    color_warning: str = _token("colorWarning")
    color_error: str = _token("colorError")

    # ── Typography ────────────────────────────────────────────────────────────
    font_heading: str = _token("fontHeading")
    font_body: str = _token("fontBody")
    font_accent: str = _token("fontAccent")
    font_mono: str = _token("fontMono")

    text_xs: str = _token("textXs")
    text_sm: str = _token("textSm")
    text_base: str = _token("textBase")
    text_lg: str = _token("textLg")
    text_xl: str = _token("textXl")
    text_2xl: str = _token("text2xl")
    text_3xl: str = _token("text3xl")
    text_4xl: str = _token("text4xl")
    text_5xl: str = _token("text5xl")
    text_6xl: str = _token("text6xl")
    text_7xl: str = _token("text7xl")

    leading_tight: str = _token("leadingTight")
    leading_normal: str = _token("leadingNormal")
    leading_relaxed: str = _token("leadingRelaxed")

    tracking_tight: str = _token("trackingTight")
    tracking_normal: str = _token("trackingNormal")
    tracking_wide: str = _token("trackingWide")

    weight_normal: str = _token("weightNormal")
    weight_medium: str = _token("weightMedium")
    weight_semibold: str = _token("weightSemibold")
    weight_bold: str = _token("weightBold")

    # ── Spacing ───────────────────────────────────────────────────────────────
    space_section: str = _token("spaceSection")
    space_component: str = _token("spaceComponent")
    space_element: str = _token("spaceElement")
    space_tight: str = _token("spaceTight")
    container_max: str = _token("containerMax")
    container_narrow: str = _token("containerNarrow")

    # ── Shape ─────────────────────────────────────────────────────────────────
    radius_sm: str = _token("radiusSm")
    radius_md: str = _token("radiusMd")
    radius_lg: str = _token("radiusLg")
    radius_xl: str = _token("radiusXl")
    radius_full: str = _token("radiusFull")
    border_width: str = _token("borderWidth")

    # ── Shadow ────────────────────────────────────────────────────────────────
    shadow_sm: str = _token("shadowSm")
    shadow_md: str = _token("shadowMd")
    shadow_lg: str = _token("shadowLg")
    shadow_xl: str = _token("shadowXl")
    shadow_color: str = _token("shadowColor")

    # ── Animation ─────────────────────────────────────────────────────────────
    transition_fast: str = _token("transitionFast")
    transition_base: str = _token("transitionBase")
    transition_slow: str = _token("transitionSlow")
    ease_default: str = _token("easeDefault")
    animation_distance: str = _token("animationDistance")
    animation_scale: str = _token("animationScale")

    def to_dict(self, by_alias: bool = True) -> Dict[str, str]:
        """Flat token map in declaration order; camelCase keys by default."""
        return self.model_dump(by_alias=by_alias)


# ── Field name ⇄ alias lookup ─────────────────────────────────────────────────

TOKEN_FIELDS: Tuple[str, ...] = tuple(ThemeTokens.model_fields)
FIELD_TO_ALIAS: Dict[str, str] = {
    name: info.alias for name, info in ThemeTokens.model_fields.items()
}
ALIAS_TO_FIELD: Dict[str, str] = {alias: name for name, alias in FIELD_TO_ALIAS.items()}


def _fields_with_prefix(*prefixes: str) -> Tuple[str, ...]:
    return tuple(f for f in TOKEN_FIELDS if f.startswith(prefixes))


COLOR_TOKENS = _fields_with_prefix("color_")
TYPOGRAPHY_TOKENS = _fields_with_prefix("font_", "text_", "leading_", "tracking_", "weight_")
SPACING_TOKENS = _fields_with_prefix("space_", "container_")
SHAPE_TOKENS = _fields_with_prefix("radius_", "border_")
SHADOW_TOKENS = _fields_with_prefix("shadow_")
ANIMATION_TOKENS = _fields_with_prefix("transition_", "ease_", "animation_")

TOKEN_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "color": COLOR_TOKENS,
    "typography": TYPOGRAPHY_TOKENS,
    "spacing": SPACING_TOKENS,
    "shape": SHAPE_TOKENS,
    "shadow": SHADOW_TOKENS,
    "animation": ANIMATION_TOKENS,
}


def resolve_token_name(key: str) -> str:
    """Accept either 'colorPrimary' or 'color_primary'; return the field name."""
    if key in FIELD_TO_ALIAS:
        return key
    if key in ALIAS_TO_FIELD:
        return ALIAS_TO_FIELD[key]
    raise InvalidTokenOverride(f"unknown theme token: {key!r}")


def normalize_token_map(values: Mapping[str, str]) -> Dict[str, str]:
    """Re-key a partial token mapping by field name, validating keys and values."""
    resolved: Dict[str, str] = {}
    for key, value in values.items():
        name = resolve_token_name(key)
        if not isinstance(value, str) or not value.strip():
            raise InvalidTokenOverride(f"token {key!r} needs a non-empty string value, got {value!r}")
        resolved[name] = value
    return resolved


def tokens_from_map(values: Mapping[str, str]) -> ThemeTokens:
    """Build ThemeTokens from a complete mapping (snake or camel keys)."""
    resolved = normalize_token_map(values)
    missing = [f for f in TOKEN_FIELDS if f not in resolved]
    if missing:
        raise InvalidTokenOverride(f"token set is missing: {', '.join(missing)}")
    try:
        return ThemeTokens(**resolved)
    except ValidationError as e:
        raise InvalidTokenOverride(str(e)) from e


def apply_token_overrides(tokens: ThemeTokens, overrides: Mapping[str, str]) -> ThemeTokens:
    """Shallow-merge overrides onto tokens (override wins). Returns a new record."""
    if not overrides:
        return tokens
    return tokens.model_copy(update=normalize_token_map(overrides))

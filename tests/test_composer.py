"""Tests for theme composition, the layering pipeline and A/B variants."""

import re

import pytest
from pydantic import ValidationError

from theme_engine import color
from theme_engine.composer import (
    build_theme,
    generate_theme,
    generate_theme_variants,
    variant_hue_shift,
)
from theme_engine.emotional import apply_emotional_overrides
from theme_engine.errors import (
    InvalidColorInput,
    InvalidPersonalityVector,
    InvalidSeedHue,
    InvalidTokenOverride,
)
from theme_engine.tokens import (
    ANIMATION_TOKENS,
    COLOR_TOKENS,
    SHAPE_TOKENS,
    SPACING_TOKENS,
    TOKEN_FIELDS,
    TYPOGRAPHY_TOKENS,
    ThemeTokens,
)

HEX = re.compile(r"^#[0-9a-f]{6}$")
REM = re.compile(r"^-?\d+(\.\d+)?rem$")
PX = re.compile(r"^-?\d+(\.\d+)?px$")
MS = re.compile(r"^\d+ms$")


class TestGenerateTheme:
    def test_all_66_tokens(self, balanced):
        tokens = generate_theme(balanced)
        data = tokens.to_dict()
        assert len(data) == 66
        assert all(isinstance(v, str) and v for v in data.values())

    def test_deterministic(self, any_vector):
        assert generate_theme(any_vector) == generate_theme(any_vector)
        assert generate_theme(any_vector).to_dict() == generate_theme(list(any_vector)).to_dict()

    def test_accepts_plain_list(self):
        tokens = generate_theme([0.5, 0.5, 0.5, 0.5, 0.5, 0.5])
        assert tokens.color_surface_elevated == "#ffffff"

    def test_units(self, any_vector):
        tokens = generate_theme(any_vector)
        for name in ("color_primary", "color_background", "color_text", "color_secondary",
                     "color_accent"):
            assert HEX.match(getattr(tokens, name))
        for name in ("text_xs", "text_base", "text_7xl", "space_section", "space_tight"):
            assert REM.match(getattr(tokens, name)), name
        for name in ("container_max", "container_narrow", "radius_md", "border_width",
                     "animation_distance"):
            assert PX.match(getattr(tokens, name)), name
        for name in ("transition_fast", "transition_base", "transition_slow"):
            assert MS.match(getattr(tokens, name)), name
        assert tokens.radius_full == "9999px"

    def test_font_fallbacks(self, balanced):
        tokens = generate_theme(balanced)
        assert "," in tokens.font_heading
        assert "," in tokens.font_body
        assert tokens.font_mono == "'JetBrains Mono', monospace"

    def test_text_on_primary_contrast(self, any_vector):
        tokens = generate_theme(any_vector)
        assert tokens.color_text_on_primary == color.text_on(tokens.color_primary)
        assert color.contrast_ratio(tokens.color_primary, tokens.color_text_on_primary) >= 3

    def test_seed_hue(self, balanced):
        a = generate_theme(balanced, seed_hue=0)
        b = generate_theme(balanced, seed_hue=180)
        assert a.color_primary != b.color_primary
        assert a.font_heading == b.font_heading

    def test_overrides_win(self, balanced):
        tokens = generate_theme(balanced, overrides={
            "colorPrimary": "#ff0000",
            "font_heading": "'CustomFont', serif",
        })
        assert tokens.color_primary == "#ff0000"
        assert tokens.font_heading == "'CustomFont', serif"
        # nothing else is recomputed from the override
        assert tokens.color_primary_light == generate_theme(balanced).color_primary_light

    def test_dark_mode_business(self):
        tokens = generate_theme([0.5] * 6, business_type="restaurant")
        assert tokens.color_text_on_dark == tokens.color_text

    def test_result_is_frozen(self, balanced):
        tokens = generate_theme(balanced)
        with pytest.raises(ValidationError):
            tokens.color_primary = "#000000"


class TestMonotonicity:
    def test_dynamic_transitions_faster(self):
        calm = generate_theme([0.5, 0.5, 0.5, 0.5, 0.5, 0.0])
        dynamic = generate_theme([0.5, 0.5, 0.5, 0.5, 0.5, 1.0])
        assert int(dynamic.transition_base[:-2]) < int(calm.transition_base[:-2])

    def test_playful_radius_larger(self):
        playful = generate_theme([0.5, 0.1, 0.5, 0.4, 0.5, 0.8])
        serious = generate_theme([0.5, 0.9, 0.5, 0.6, 0.5, 0.3])
        assert int(playful.radius_md[:-2]) > int(serious.radius_md[:-2])

    def test_rich_spacing_tighter(self):
        minimal = generate_theme([0.1, 0.5, 0.5, 0.3, 0.5, 0.3])
        rich = generate_theme([0.9, 0.5, 0.5, 0.7, 0.5, 0.7])
        assert float(rich.space_section[:-3]) < float(minimal.space_section[:-3])

    def test_section_spacing_sweep(self):
        sections = [
            float(generate_theme([i / 200, 0.5, 0.5, 0.5, 0.5, 0.5]).space_section[:-3])
            for i in range(201)
        ]
        assert all(a > b for a, b in zip(sections, sections[1:]))
        assert sections[0] == 6.0 and sections[-1] == 4.0


class TestValidation:
    def test_bad_vector(self):
        with pytest.raises(InvalidPersonalityVector):
            generate_theme([0.5] * 5)

    def test_out_of_range_vector(self):
        with pytest.raises(InvalidPersonalityVector):
            generate_theme([0.5, 0.5, 0.5, 1.5, 0.5, 0.5])

    def test_unknown_override_key(self, balanced):
        with pytest.raises(InvalidTokenOverride, match="colorPrimry"):
            generate_theme(balanced, overrides={"colorPrimry": "#ff0000"})

    def test_empty_override_value(self, balanced):
        with pytest.raises(InvalidTokenOverride):
            generate_theme(balanced, overrides={"colorPrimary": "  "})

    @pytest.mark.parametrize("seed", [float("nan"), float("inf"), float("-inf"), True, "40"])
    def test_bad_seed_hue(self, balanced, seed):
        with pytest.raises(InvalidSeedHue):
            generate_theme(balanced, seed_hue=seed)
        with pytest.raises(InvalidSeedHue):
            build_theme(balanced, seed_hue=seed)

    def test_bad_seed_hue_is_value_error(self, balanced):
        with pytest.raises(ValueError, match="finite"):
            generate_theme(balanced, seed_hue=float("nan"))

    def test_layering_options_are_keyword_only(self, balanced):
        with pytest.raises(TypeError):
            build_theme(balanced, 40)


class TestBuildTheme:
    def test_no_layers_matches_generate(self, balanced):
        assert build_theme(balanced) == generate_theme(balanced)

    def test_emotional_layer(self):
        pv = [1.0, 0.5, 0.5, 0.5, 0.5, 0.5]
        tokens = build_theme(pv, emotional_goals=["luxury"])
        assert generate_theme(pv).space_section == "4rem"
        assert tokens.space_section == "4.6rem"

    def test_primary_color_layer(self, balanced):
        tokens = build_theme(balanced, primary_color="#2a4f7c")
        assert tokens.color_primary == "#2a4f7c"
        assert tokens.color_text_on_primary == "#ffffff"
        # non-color tokens untouched
        base = generate_theme(balanced)
        for name in TYPOGRAPHY_TOKENS + SPACING_TOKENS + SHAPE_TOKENS + ANIMATION_TOKENS:
            assert getattr(tokens, name) == getattr(base, name)

    def test_manual_overrides_last(self, balanced):
        tokens = build_theme(
            balanced,
            emotional_goals=["energized"],
            primary_color="#2a4f7c",
            overrides={"colorPrimary": "#123456", "animationScale": "1"},
        )
        assert tokens.color_primary == "#123456"
        assert tokens.animation_scale == "1"

    def test_order_of_layers(self, balanced):
        expected = apply_emotional_overrides(generate_theme(balanced), ["calm"], ["cluttered"])
        assert build_theme(balanced, emotional_goals=["calm"], anti_references=["cluttered"]) == expected

    def test_validates_primary_first(self, balanced):
        with pytest.raises(InvalidColorInput):
            build_theme(balanced, primary_color="blue")

    def test_validates_vector_first(self):
        with pytest.raises(InvalidPersonalityVector):
            build_theme([2, 0, 0, 0, 0, 0], primary_color="#2a4f7c")


class TestVariants:
    def test_variant_a_is_default(self, balanced):
        variants = generate_theme_variants(balanced)
        assert variants.variant_a == generate_theme(balanced)
        assert variants.label_a == "Variant A"
        assert variants.label_b == "Variant B"

    def test_neutral_shift_is_90(self, balanced):
        assert variant_hue_shift(balanced) == 90
        variants = generate_theme_variants(balanced)
        assert variants.variant_b == generate_theme(balanced, seed_hue=215)

    def test_polarized_shift_is_45(self):
        assert variant_hue_shift([0, 1, 0, 1, 0, 1]) == 45

    def test_only_colors_differ(self, any_vector):
        variants = generate_theme_variants(any_vector)
        a, b = variants.variant_a, variants.variant_b
        assert a.color_primary != b.color_primary
        for name in TYPOGRAPHY_TOKENS + SPACING_TOKENS + SHAPE_TOKENS + ANIMATION_TOKENS:
            assert getattr(a, name) == getattr(b, name)

    def test_overrides_apply_to_both(self, balanced):
        variants = generate_theme_variants(balanced, overrides={"fontHeading": "'X', serif"})
        assert variants.variant_a.font_heading == "'X', serif"
        assert variants.variant_b.font_heading == "'X', serif"


def test_token_fields_cover_categories():
    assert len(TOKEN_FIELDS) == 66
    assert len(COLOR_TOKENS) == 18
    assert isinstance(generate_theme([0.5] * 6), ThemeTokens)

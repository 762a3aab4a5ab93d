"""Tests for the typography, spacing, shape, shadow and animation generators."""

import pytest

from theme_engine.animation import (
    EASE_BOUNCY,
    EASE_DECELERATE,
    EASE_STANDARD,
    generate_animation,
    select_easing,
)
from theme_engine.fonts import get_font_pairing_by_id
from theme_engine.shadows import generate_shadows
from theme_engine.spacing import generate_shape, generate_spacing
from theme_engine.tokens import (
    ANIMATION_TOKENS,
    SPACING_TOKENS,
    TYPOGRAPHY_TOKENS,
)
from theme_engine.typography import generate_typography, scale_multiplier

WELLNESS = get_font_pairing_by_id("wellness-organic")


class TestTypography:
    def test_covers_typography_tokens(self, balanced):
        assert set(generate_typography(balanced, WELLNESS)) == set(TYPOGRAPHY_TOKENS)

    def test_balanced_values(self, balanced):
        t = generate_typography(balanced, WELLNESS)
        assert t["text_xs"] == "0.75rem"
        assert t["text_base"] == "1rem"
        assert t["text_7xl"] == "4.5rem"
        assert t["leading_tight"] == "1.2"
        assert t["tracking_tight"] == "-0.02em"
        assert t["tracking_normal"] == "0em"
        assert t["tracking_wide"] == "0.05em"
        assert (t["weight_normal"], t["weight_medium"], t["weight_semibold"], t["weight_bold"]) == (
            "350", "450", "550", "700",
        )

    def test_scale_multiplier_range(self):
        assert scale_multiplier([0, 0.5, 0.5, 0, 0.5, 0.5]) == pytest.approx(0.92)
        assert scale_multiplier([1, 0.5, 0.5, 1, 0.5, 0.5]) == pytest.approx(1.08)

    def test_bold_is_heavier(self):
        light = generate_typography([0.5, 0.5, 0.5, 0.0, 0.5, 0.5], WELLNESS)
        bold = generate_typography([0.5, 0.5, 0.5, 1.0, 0.5, 0.5], WELLNESS)
        assert int(bold["weight_bold"]) > int(light["weight_bold"])
        assert bold["weight_bold"] == "800"
        assert light["weight_normal"] == "300"

    def test_sizes_are_rem_and_ascending(self, any_vector):
        t = generate_typography(any_vector, WELLNESS)
        sizes = [t[k] for k in ("text_xs", "text_sm", "text_base", "text_lg", "text_xl",
                                "text_2xl", "text_3xl", "text_4xl", "text_5xl", "text_6xl",
                                "text_7xl")]
        assert all(s.endswith("rem") for s in sizes)
        values = [float(s[:-3]) for s in sizes]
        assert values == sorted(values)


class TestSpacing:
    def test_covers_spacing_tokens(self, balanced):
        assert set(generate_spacing(balanced)) == set(SPACING_TOKENS)

    def test_balanced(self, balanced):
        assert generate_spacing(balanced) == {
            "space_section": "5rem",
            "space_component": "2.75rem",
            "space_element": "1.375rem",
            "space_tight": "0.75rem",
            "container_max": "1320px",
            "container_narrow": "704px",
        }

    def test_rich_is_denser(self):
        rich = generate_spacing([1.0, 0.5, 0.5, 0.5, 0.5, 0.5])
        minimal = generate_spacing([0.0, 0.5, 0.5, 0.5, 0.5, 0.5])
        assert rich["space_section"] == "4rem"
        assert minimal["space_section"] == "6rem"

    @pytest.mark.parametrize("start, step, count", [(0.0, 1e-4, 10001), (0.0, 1e-5, 1001), (0.999, 1e-5, 101)])
    def test_section_strictly_decreases_with_richness(self, start, step, count):
        # Other axes held at 0.5
        richness = [round(start + i * step, 5) for i in range(count)]
        sections = [
            float(generate_spacing([r, 0.5, 0.5, 0.5, 0.5, 0.5])["space_section"][:-3])
            for r in richness
        ]
        assert all(a > b for a, b in zip(sections, sections[1:]))


class TestShape:
    def test_balanced(self, balanced):
        assert generate_shape(balanced) == {
            "radius_sm": "4px",
            "radius_md": "7px",
            "radius_lg": "11px",
            "radius_xl": "18px",
            "radius_full": "9999px",
            "border_width": "1.5px",
        }

    def test_playful_rounder_than_serious(self):
        playful = generate_shape([0.5, 0.1, 0.5, 0.4, 0.5, 0.8])
        serious = generate_shape([0.5, 0.9, 0.5, 0.6, 0.5, 0.3])
        assert int(playful["radius_md"][:-2]) > int(serious["radius_md"][:-2])

    def test_extremes(self):
        assert generate_shape([0.0, 0.0, 0.5, 0.5, 0.5, 0.5])["radius_md"] == "12px"
        assert generate_shape([1.0, 1.0, 0.5, 0.5, 0.5, 0.5])["radius_md"] == "2px"
        assert generate_shape([1.0, 1.0, 0.5, 0.5, 0.5, 0.5])["border_width"] == "2px"


class TestShadows:
    COLOR = "rgba(0, 0, 0, 0.08)"

    def test_full_set(self):
        shadows = generate_shadows(0.5, self.COLOR)
        assert shadows["shadow_sm"] == f"0 1px 2px {self.COLOR}"
        assert shadows["shadow_md"] == f"0 4px 6px -1px {self.COLOR}, 0 2px 4px -2px {self.COLOR}"
        assert shadows["shadow_xl"].startswith("0 20px 25px -5px ")

    def test_minimal_drops_small_tiers(self):
        shadows = generate_shadows(0.1, self.COLOR)
        assert shadows["shadow_sm"] == "none"
        assert shadows["shadow_md"] == "none"
        assert shadows["shadow_lg"] != "none"
        assert shadows["shadow_xl"] != "none"

    def test_zero_richness_keeps_xl(self):
        shadows = generate_shadows(0.0, self.COLOR)
        assert [k for k, v in shadows.items() if v != "none"] == ["shadow_xl"]

    def test_thresholds_inclusive(self):
        assert generate_shadows(0.2, self.COLOR)["shadow_sm"] != "none"
        assert generate_shadows(0.19, self.COLOR)["shadow_sm"] == "none"


class TestAnimation:
    def test_covers_animation_tokens(self):
        assert set(generate_animation(0.5, 0.5)) == set(ANIMATION_TOKENS)

    def test_balanced(self):
        a = generate_animation(0.5, 0.5)
        assert a["transition_fast"] == "150ms"
        assert a["transition_base"] == "300ms"
        assert a["transition_slow"] == "600ms"
        assert a["ease_default"] == EASE_STANDARD
        assert a["animation_distance"] == "19px"
        assert a["animation_scale"] == "0.94"

    def test_dynamic_is_faster(self):
        calm = generate_animation(0.5, 0.0)
        dynamic = generate_animation(0.5, 1.0)
        assert int(dynamic["transition_base"][:-2]) < int(calm["transition_base"][:-2])
        assert calm["transition_base"] == "400ms"
        assert dynamic["transition_base"] == "200ms"

    def test_easing_rules(self):
        assert select_easing(0.2, 0.8) == EASE_BOUNCY
        assert select_easing(0.8, 0.8) == EASE_DECELERATE
        assert select_easing(0.2, 0.5) == EASE_STANDARD
        assert select_easing(0.4, 0.9) == EASE_DECELERATE

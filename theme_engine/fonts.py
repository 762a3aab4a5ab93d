"""
fonts.py - Font pairing catalog + personality-based selection.

Each pairing declares the seriousness (playful_serious axis) and era
(classic_modern axis) ranges it suits, plus optional business types it
is a natural fit for. Selection scores every entry and keeps the first
maximum, so catalog order is part of the contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .personality import VectorLike, ensure_vector

MONO_FONT = "'JetBrains Mono', monospace"

IN_RANGE_BONUS = 2.0
BUSINESS_BONUS = 1.5


@dataclass(frozen=True)
class FontPairing:
    id: str
    display_name: str
    heading: str
    body: str
    accent: str
    seriousness: Tuple[float, float]
    era: Tuple[float, float]
    business_types: FrozenSet[str] = field(default_factory=frozenset)

    def score(self, seriousness: float, era: float, business_type: Optional[str] = None) -> float:
        """In-range bonuses minus distance to each range midpoint, plus business fit."""
        s_lo, s_hi = self.seriousness
        e_lo, e_hi = self.era
        score = (
            (IN_RANGE_BONUS if s_lo <= seriousness <= s_hi else 0.0)
            + (IN_RANGE_BONUS if e_lo <= era <= e_hi else 0.0)
            - abs(seriousness - (s_lo + s_hi) / 2)
            - abs(era - (e_lo + e_hi) / 2)
        )
        if business_type and business_type in self.business_types:
            score += BUSINESS_BONUS
        return score


def _pairing(
    pairing_id: str,
    display_name: str,
    heading: str,
    body: str,
    seriousness: Tuple[float, float],
    era: Tuple[float, float],
    business_types: Sequence[str] = (),
) -> FontPairing:
    # Accent always reuses the heading family
    return FontPairing(
        id=pairing_id,
        display_name=display_name,
        heading=heading,
        body=body,
        accent=heading,
        seriousness=seriousness,
        era=era,
        business_types=frozenset(business_types),
    )


# Declaration order breaks ties. Append new entries, don't reorder.
FONT_PAIRINGS: Tuple[FontPairing, ...] = (
    _pairing("luxury-serif", "Luxury Serif",
             "'Cormorant Garamond', serif", "'Outfit', sans-serif",
             (0.7, 1.0), (0.0, 0.4), ["restaurant", "spa"]),
    _pairing("editorial-serif", "Editorial Serif",
             "'Playfair Display', serif", "'Source Sans 3', sans-serif",
             (0.6, 1.0), (0.0, 0.5), ["restaurant", "photography"]),
    _pairing("classic-serif", "Classic Serif",
             "'Libre Baskerville', serif", "'Nunito Sans', sans-serif",
             (0.5, 1.0), (0.0, 0.4)),
    _pairing("corporate-sans", "Corporate Sans",
             "'Sora', sans-serif", "'DM Sans', sans-serif",
             (0.5, 1.0), (0.6, 1.0), ["business", "ecommerce"]),
    _pairing("clean-sans", "Clean Sans",
             "'Manrope', sans-serif", "'Karla', sans-serif",
             (0.4, 0.8), (0.5, 1.0)),
    _pairing("creative-display", "Creative Display",
             "'Space Grotesk', sans-serif", "'Outfit', sans-serif",
             (0.0, 0.5), (0.6, 1.0)),
    _pairing("warm-traditional", "Warm Traditional",
             "'Lora', serif", "'Merriweather Sans', sans-serif",
             (0.3, 0.7), (0.0, 0.5), ["nonprofit", "educational"]),
    _pairing("warm-classic", "Warm Classic",
             "'Crimson Pro', serif", "'Work Sans', sans-serif",
             (0.3, 0.7), (0.0, 0.5), ["spa"]),
    _pairing("bold-impact", "Bold Impact",
             "'Oswald', sans-serif", "'Lato', sans-serif",
             (0.0, 0.5), (0.4, 0.9), ["event"]),
    _pairing("tech-mono", "Tech Mono",
             "'JetBrains Mono', monospace", "'DM Sans', sans-serif",
             (0.5, 1.0), (0.8, 1.0)),
    _pairing("hospitality-serif", "Hospitality Serif",
             "'DM Serif Display', serif", "'Jost', sans-serif",
             (0.5, 0.9), (0.2, 0.6), ["restaurant", "booking", "event"]),
    _pairing("wellness-organic", "Wellness Organic",
             "'Fraunces', serif", "'Atkinson Hyperlegible', sans-serif",
             (0.3, 0.7), (0.2, 0.6), ["spa", "nonprofit"]),
    _pairing("creative-agency", "Creative Agency",
             "'Clash Display', sans-serif", "'Satoshi', sans-serif",
             (0.0, 0.5), (0.7, 1.0), ["portfolio", "photography"]),
    _pairing("boutique-fashion", "Boutique Fashion",
             "'Bodoni Moda', serif", "'Figtree', sans-serif",
             (0.6, 1.0), (0.1, 0.5), ["ecommerce", "portfolio"]),
)


def get_font_pairing_by_id(pairing_id: str) -> Optional[FontPairing]:
    for pairing in FONT_PAIRINGS:
        if pairing.id == pairing_id:
            return pairing
    return None


def rank_font_pairings(
    pv: VectorLike,
    business_type: Optional[str] = None,
    catalog: Sequence[FontPairing] = FONT_PAIRINGS,
) -> List[Tuple[FontPairing, float]]:
    """All pairings with their scores, best first. Equal scores keep catalog order."""
    pv = ensure_vector(pv)
    scored = [
        (p, p.score(pv.playful_serious, pv.classic_modern, business_type)) for p in catalog
    ]
    # sorted() is stable, so ties stay in declaration order
    return sorted(scored, key=lambda item: -item[1])


def select_font_pairing(
    pv: VectorLike,
    business_type: Optional[str] = None,
    catalog: Sequence[FontPairing] = FONT_PAIRINGS,
) -> FontPairing:
    """Best-scoring pairing; the first declared entry wins a tie."""
    pv = ensure_vector(pv)
    if not catalog:
        raise ValueError("font pairing catalog is empty")

    best = catalog[0]
    best_score = float("-inf")
    for pairing in catalog:
        score = pairing.score(pv.playful_serious, pv.classic_modern, business_type)
        if score > best_score:
            best, best_score = pairing, score
    return best


def font_tokens(pairing: FontPairing) -> dict:
    return {
        "font_heading": pairing.heading,
        "font_body": pairing.body,
        "font_accent": pairing.accent,
        "font_mono": MONO_FONT,
    }

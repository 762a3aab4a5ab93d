"""
fingerprint.py - Stable cache keys for generated themes.

Generation is deterministic, so callers can memoize results keyed by a
digest of the inputs. Two keys exist because the pipeline has two
cacheable stages: the base theme, and the emotional adjustment layered
on top of it.

Usage:
    key = theme_fingerprint(pv, seed_hue=40, business_type="restaurant")
    key = override_fingerprint(tokens, ["luxury", "calm"], ["cluttered"])
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping, Optional, Sequence

from .palette import check_seed_hue
from .personality import VectorLike, ensure_vector
from .tokens import ThemeTokens, normalize_token_map


def _digest(payload: Any) -> str:
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def theme_fingerprint(
    pv: VectorLike,
    seed_hue: Optional[float] = None,
    business_type: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> str:
    """
    sha256 hex digest of the generate_theme inputs.

    Override keys are normalized to field names and sorted, so
    {"colorPrimary": x} and {"color_primary": x} share a key.
    """
    pv = ensure_vector(pv)
    return _digest({
        "vector": list(pv),
        "seed_hue": check_seed_hue(seed_hue),
        "business_type": business_type,
        "overrides": normalize_token_map(overrides) if overrides else {},
    })


def override_fingerprint(
    tokens: ThemeTokens,
    emotional_goals: Sequence[str] = (),
    anti_references: Sequence[str] = (),
) -> str:
    """sha256 hex digest of (base tokens, ordered goals, ordered anti-references)."""
    return _digest({
        "tokens": tokens.to_dict(by_alias=True),
        "goals": list(emotional_goals),
        "anti_references": list(anti_references),
    })

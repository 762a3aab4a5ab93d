"""
personality.py - The 6-axis brand personality vector.

Each axis runs 0.0 → 1.0:

  [0] minimal_rich    - Minimal/Spacious (0) ↔ Rich/Dense (1)
  [1] playful_serious - Playful/Casual (0) ↔ Serious/Professional (1)
  [2] warm_cool       - Warm/Inviting (0) ↔ Cool/Sleek (1)
  [3] light_bold      - Light/Airy (0) ↔ Bold/Heavy (1)
  [4] classic_modern  - Classic/Traditional (0) ↔ Modern/Contemporary (1)
  [5] calm_dynamic    - Calm/Serene (0) ↔ Dynamic/Energetic (1)

Usage:
    from theme_engine.personality import PersonalityVector

    pv = PersonalityVector.parse([0.5, 0.9, 0.3, 0.8, 0.3, 0.5])
    pv.playful_serious   # 0.9
"""

from __future__ import annotations

import math
import numbers
from collections import abc
from typing import NamedTuple, Sequence, Union

from .errors import InvalidPersonalityVector

AXIS_NAMES = (
    "minimal_rich",
    "playful_serious",
    "warm_cool",
    "light_bold",
    "classic_modern",
    "calm_dynamic",
)

VectorLike = Union["PersonalityVector", Sequence[float], str]


class PersonalityVector(NamedTuple):
    minimal_rich: float
    playful_serious: float
    warm_cool: float
    light_bold: float
    classic_modern: float
    calm_dynamic: float

    @classmethod
    def parse(cls, values: VectorLike) -> "PersonalityVector":
        """
        Validate and freeze a raw vector.

        Accepts a PersonalityVector (returned as-is), any 6-item sequence of
        real numbers, or a comma-separated string such as "0.5,0.5,0.5,0.5,0.5,0.5".
        Out-of-range values are rejected, never clamped.

        Raises:
            InvalidPersonalityVector
        """
        if isinstance(values, PersonalityVector):
            return values

        if isinstance(values, str):
            parts = [p.strip() for p in values.split(",")]
            try:
                values = [float(p) for p in parts]
            except ValueError:
                raise InvalidPersonalityVector(
                    f"personality vector must be 6 comma-separated numbers, got {values!r}"
                ) from None

        if isinstance(values, (bytes, bytearray)) or not isinstance(values, abc.Sequence):
            raise InvalidPersonalityVector(
                f"personality vector must be a sequence of 6 numbers, got {type(values).__name__}"
            )

        if len(values) != len(AXIS_NAMES):
            raise InvalidPersonalityVector(
                f"personality vector needs exactly {len(AXIS_NAMES)} entries, got {len(values)}"
            )

        cleaned = []
        for name, raw in zip(AXIS_NAMES, values):
            if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
                raise InvalidPersonalityVector(f"{name} must be a number, got {raw!r}")
            value = float(raw)
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise InvalidPersonalityVector(f"{name} must be within [0, 1], got {raw!r}")
            cleaned.append(value)

        return cls(*cleaned)

    def signal_strength(self) -> float:
        """How far the vector sits from dead-neutral: 0.0 (all 0.5) → 1.0 (all extremes)."""
        return sum(abs(v - 0.5) for v in self) * 2 / len(self)


def ensure_vector(values: VectorLike) -> PersonalityVector:
    return PersonalityVector.parse(values)

"""
units.py - Numeric helpers shared by every token generator.

All token values are strings. These helpers keep the number → string step
deterministic: fixed rounding, half-up integers, shortest printed form
("5rem" rather than "5.0rem").
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

# Leading non-negative number + unit, e.g. "5.75rem", "300ms", "12px"
_DIMENSION_RE = re.compile(r"^([\d.]+)(px|rem|em|%)$")
_DURATION_RE = re.compile(r"^([\d.]+)(ms|s)$")


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a (t=0) to b (t=1)."""
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like a spreadsheet: .5 always goes up (Python's round() is banker's)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def fmt_number(value: float, ndigits: int = 10) -> str:
    """
    Shortest fixed-point string for value rounded to ndigits: 5.0 → '5', 1.2000 → '1.2'.

    The default of 10 decimals only strips float noise (0.30000000000000004),
    so distinct interpolated inputs still print distinct values.
    """
    rounded = round(value, ndigits)
    if rounded == 0:
        return "0"
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{ndigits}f}".rstrip("0")


def fmt_int(value: float) -> str:
    return str(int(round_half_up(value)))


def _parse(pattern: re.Pattern, value: str) -> Optional[Tuple[float, str]]:
    m = pattern.match(value)
    if not m:
        return None
    try:
        return float(m.group(1)), m.group(2)
    except ValueError:
        # "1.2.3px" matches the character class but is not a number
        return None


def parse_dimension(value: str) -> Optional[Tuple[float, str]]:
    """'5.75rem' → (5.75, 'rem'); None when value is not a px/rem/em/% length."""
    return _parse(_DIMENSION_RE, value)


def parse_duration(value: str) -> Optional[Tuple[float, str]]:
    """'300ms' → (300.0, 'ms'); None when value is not a ms/s duration."""
    return _parse(_DURATION_RE, value)


def scale_dimension(value: str, multiplier: float) -> str:
    """Scale a length token, rounding to 2 decimals. Unparseable values pass through."""
    parsed = parse_dimension(value)
    if parsed is None:
        return value
    number, unit = parsed
    return f"{fmt_number(round_half_up(number * multiplier, 2), 2)}{unit}"


def scale_duration(value: str, multiplier: float) -> str:
    """Scale a duration token, rounding to a whole number. Unparseable values pass through."""
    parsed = parse_duration(value)
    if parsed is None:
        return value
    number, unit = parsed
    return f"{fmt_int(number * multiplier)}{unit}"

"""
color.py - Color-space utilities for theme generation.

Narrow, deterministic toolkit used by the palette generator and the
primary-color deriver:

  hex ⇄ RGB ⇄ HSL   via colorsys
  brighten / darken  in CIE Lab (D65), L* shifted by 18 per unit
  rgba()             CSS alpha compositing string
  contrast ratio     WCAG 2.x relative-luminance formula

Hex output is always lowercase "#rrggbb".
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import Tuple

from .errors import InvalidColorInput

RGB = Tuple[float, float, float]

WHITE = "#ffffff"
NEAR_BLACK = "#111111"

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# ── Lab constants (D65 reference white) ───────────────────────────────────────

LAB_KN = 18.0
_XN, _YN, _ZN = 0.950470, 1.0, 1.088830
_T0 = 0.137931034   # 4 / 29
_T1 = 0.206896552   # 6 / 29
_T2 = 0.12841855    # 3 * T1^2
_T3 = 0.008856452   # T1^3


# ── Parsing / formatting ──────────────────────────────────────────────────────

def is_hex_color(value: str) -> bool:
    return isinstance(value, str) and bool(_HEX_RE.match(value.strip()))


def parse_hex(value: str) -> RGB:
    """'#2a4f7c' or '#fa0' → (r, g, b) floats in 0–255."""
    if not isinstance(value, str):
        raise InvalidColorInput(f"color must be a string, got {type(value).__name__}")
    m = _HEX_RE.match(value.strip())
    if not m:
        raise InvalidColorInput(f"not a hex color: {value!r}")
    h = m.group(1)
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    return float(int(h[0:2], 16)), float(int(h[2:4], 16)), float(int(h[4:6], 16))


def _to_byte(channel: float) -> int:
    return int(max(0, min(255, math.floor(channel + 0.5))))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02x}{:02x}{:02x}".format(_to_byte(r), _to_byte(g), _to_byte(b))


def normalize_hex(value: str) -> str:
    """'#FA0' → '#ffaa00'."""
    return rgb_to_hex(*parse_hex(value))


# ── HSL ───────────────────────────────────────────────────────────────────────

def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSL (H: degrees, S/L: 0–1) → RGB floats 0–255."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l, s)
    return r * 255, g * 255, b * 255


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_hsl(value: str) -> Tuple[float, float, float]:
    """hex → (H: 0–360, S: 0–1, L: 0–1). Achromatic colors report hue 0."""
    r, g, b = parse_hex(value)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h * 360.0, s, l


# ── Lab (for perceptual brighten / darken) ────────────────────────────────────

def _srgb_to_linear(c: float) -> float:
    c /= 255
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.00304:
        return 255 * (12.92 * c)
    return 255 * (1.055 * (c ** (1 / 2.4)) - 0.055)


def _xyz_lab(t: float) -> float:
    if t > _T3:
        return t ** (1 / 3)
    return t / _T2 + _T0


def _lab_xyz(t: float) -> float:
    if t > _T1:
        return t * t * t
    return _T2 * (t - _T0)


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    lr, lg, lb = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)
    x = _xyz_lab((0.4124564 * lr + 0.3575761 * lg + 0.1804375 * lb) / _XN)
    y = _xyz_lab((0.2126729 * lr + 0.7151522 * lg + 0.0721750 * lb) / _YN)
    z = _xyz_lab((0.0193339 * lr + 0.1191920 * lg + 0.9503041 * lb) / _ZN)
    L = 116 * y - 16
    return max(0.0, L), 500 * (x - y), 200 * (y - z)


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    y = (L + 16) / 116
    x = y + a / 500
    z = y - b / 200

    x = _XN * _lab_xyz(x)
    y = _YN * _lab_xyz(y)
    z = _ZN * _lab_xyz(z)

    r = _linear_to_srgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z)
    g = _linear_to_srgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z)
    b_ = _linear_to_srgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z)
    return r, g, b_


def brighten(value: str, amount: float = 1.0) -> str:
    """Lighten by shifting Lab L* up 18 × amount. Result is gamut-clipped."""
    L, a, b = rgb_to_lab(*parse_hex(value))
    return rgb_to_hex(*lab_to_rgb(L + LAB_KN * amount, a, b))


def darken(value: str, amount: float = 1.0) -> str:
    return brighten(value, -amount)


# ── Alpha / contrast ──────────────────────────────────────────────────────────

def rgba(value: str, alpha: float) -> str:
    """'#c9a55c', 0.12 → 'rgba(201, 165, 92, 0.12)'."""
    r, g, b = parse_hex(value)
    a = round(alpha, 3)
    a_str = repr(a) if a != int(a) else str(int(a))
    return f"rgba({_to_byte(r)}, {_to_byte(g)}, {_to_byte(b)}, {a_str})"


def relative_luminance(value: str) -> float:
    r, g, b = parse_hex(value)
    return (
        0.2126 * _srgb_to_linear(r)
        + 0.7152 * _srgb_to_linear(g)
        + 0.0722 * _srgb_to_linear(b)
    )


def contrast_ratio(a: str, b: str) -> float:
    """WCAG contrast ratio, 1.0 (identical) → 21.0 (black on white)."""
    la, lb = relative_luminance(a), relative_luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


def text_on(background: str) -> str:
    """White when it clears 3:1 against background, otherwise near-black."""
    return WHITE if contrast_ratio(background, WHITE) > 3 else NEAR_BLACK

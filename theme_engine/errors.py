"""
errors.py - Error taxonomy for the theme engine.

Validation errors are raised at the public entry points before any
generator runs, so callers never observe a half-built token set.
Unrecognized emotional tags are deliberately NOT errors (see emotional.py).
"""

from __future__ import annotations


class ThemeEngineError(Exception):
    """Base class for every error the theme engine raises."""


class InvalidPersonalityVector(ThemeEngineError, ValueError):
    """Wrong arity, non-numeric entry, or an entry outside [0, 1]."""


class InvalidColorInput(ThemeEngineError, ValueError):
    """A color string that does not parse as #rgb / #rrggbb."""


class InvalidTokenOverride(ThemeEngineError, ValueError):
    """Manual override naming an unknown token or carrying an empty value."""


class InvalidSeedHue(ThemeEngineError, ValueError):
    """Seed hue that is a bool, non-numeric, NaN or infinite."""

"""
token_map.py - ThemeTokens → CSS custom properties.

The mapping is a versioned contract shared by the rendering layer (inline
style declarations on a wrapper element) and the export path (a
":root { ... }" block). Property names are derived once from the camelCase
token keys: colorPrimary → --color-primary, text2xl → --text-2xl.

Usage:
    from theme_engine.token_map import tokens_to_css_string

    css = tokens_to_css_string(tokens)            # ":root {\n  --color-primary: #...;\n}"
    css = tokens_to_css_string(partial, ".theme-b")
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Union

from .tokens import FIELD_TO_ALIAS, ThemeTokens, resolve_token_name

TokenSource = Union[ThemeTokens, Mapping[str, str]]


def _css_property(alias: str) -> str:
    # colorTextOnPrimary → color-text-on-primary, text2xl → text-2xl
    kebab = re.sub(r"([a-z])([A-Z0-9])", r"\1-\2", alias)
    return "--" + kebab.lower()


# camelCase token key → CSS custom property, in token declaration order
TOKEN_CSS_MAP: Dict[str, str] = {
    alias: _css_property(alias) for alias in FIELD_TO_ALIAS.values()
}


def tokens_to_css_properties(tokens: TokenSource) -> Dict[str, str]:
    """
    Flatten tokens into {css-property: value}.

    Accepts a full ThemeTokens or a partial mapping (snake_case or camelCase
    keys). Missing tokens are simply omitted; order follows TOKEN_CSS_MAP.
    """
    if isinstance(tokens, ThemeTokens):
        values = tokens.to_dict(by_alias=True)
    else:
        values = {FIELD_TO_ALIAS[resolve_token_name(k)]: v for k, v in tokens.items()}

    return {
        css_var: values[alias]
        for alias, css_var in TOKEN_CSS_MAP.items()
        if alias in values
    }


def tokens_to_css_string(tokens: TokenSource, selector: str = ":root") -> str:
    """Render tokens as a CSS rule block for a <style> tag or exported stylesheet."""
    props = tokens_to_css_properties(tokens)
    declarations = "\n".join(f"  {prop}: {value};" for prop, value in props.items())
    return f"{selector} {{\n{declarations}\n}}"

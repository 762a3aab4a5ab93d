"""
config.py - Runtime settings for the theme-engine CLI.

Read from the environment (and a .env file, if present):

    THEME_ENGINE_LOG_LEVEL=WARNING        # DEBUG shows font picks, ignored tags
    THEME_ENGINE_OUTPUT=table             # table | json | css
    THEME_ENGINE_CSS_SELECTOR=:root
    THEME_ENGINE_BUSINESS_TYPE=restaurant # default business tag, optional

Command-line flags take precedence over every value here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json", "css")
DEFAULT_OUTPUT = "table"
DEFAULT_SELECTOR = ":root"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    output_format: str = DEFAULT_OUTPUT
    css_selector: str = DEFAULT_SELECTOR
    business_type: Optional[str] = None

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        log_level = os.environ.get("THEME_ENGINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(f"Unknown THEME_ENGINE_LOG_LEVEL {log_level!r}, using {DEFAULT_LOG_LEVEL}")
            log_level = DEFAULT_LOG_LEVEL

        output_format = os.environ.get("THEME_ENGINE_OUTPUT", DEFAULT_OUTPUT).strip().lower()
        if output_format not in OUTPUT_FORMATS:
            logger.warning(
                f"Unknown THEME_ENGINE_OUTPUT {output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)}), using {DEFAULT_OUTPUT}"
            )
            output_format = DEFAULT_OUTPUT

        css_selector = os.environ.get("THEME_ENGINE_CSS_SELECTOR", "").strip() or DEFAULT_SELECTOR
        business_type = os.environ.get("THEME_ENGINE_BUSINESS_TYPE", "").strip() or None

        return cls(
            log_level=log_level,
            output_format=output_format,
            css_selector=css_selector,
            business_type=business_type,
        )

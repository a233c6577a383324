"""
Palette domain logic.

- generator: version-based hue tables and HSL palette generation
- validation: the seed color blacklist
- rendering: Jinja2 HTML page for the palette
"""

from palette_api.palette.generator import (
    COLOR_SCHEMES,
    DEFAULT_VERSION,
    ThemeInfo,
    format_hsl,
    generate_palette,
    theme_for,
    theme_info,
)
from palette_api.palette.rendering import PaletteRenderer, render_palette_page
from palette_api.palette.validation import BLOCKED_PATTERNS, unsafe_color_validation

__all__ = [
    "COLOR_SCHEMES",
    "DEFAULT_VERSION",
    "ThemeInfo",
    "format_hsl",
    "generate_palette",
    "theme_for",
    "theme_info",
    "PaletteRenderer",
    "render_palette_page",
    "BLOCKED_PATTERNS",
    "unsafe_color_validation",
]

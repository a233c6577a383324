"""
Palette generation.

Each version label maps to a fixed set of five base hues so that a canary
rollout is visible at a glance: v1 renders warm tones, v2 cool tones.
Saturation and lightness are randomized within fixed bands.

Usage:
    from palette_api.palette import generate_palette

    colors = generate_palette("v2")
    # ['hsl(200, 71.3%, 55.0%)', ...]
"""

import random
from dataclasses import dataclass
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

DEFAULT_VERSION = "v1"

COLOR_SCHEMES: dict[str, tuple[int, ...]] = {
    "v1": (0, 15, 30, 45, 350),  # reds, oranges, yellows
    "v2": (200, 180, 220, 240, 280),  # blues, greens, purples
}

SATURATION_RANGE = (65.0, 85.0)
LIGHTNESS_RANGE = (50.0, 70.0)

_rng = random.Random()


@dataclass(frozen=True)
class ThemeInfo:
    """Display metadata for a version's theme."""

    name: str
    title: str
    emoji: str
    description: str


WARM_THEME = ThemeInfo(
    name="warm",
    title="Warm Palette",
    emoji="🔥",
    description="Warm tones (Reds & Oranges)",
)
COOL_THEME = ThemeInfo(
    name="cool",
    title="Cool Palette",
    emoji="❄️",
    description="Cool tones (Blues & Greens)",
)


# =============================================================================
# Helpers
# =============================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _sample(bounds: tuple[float, float], rng: random.Random) -> float:
    low, high = bounds
    return _clamp(low + rng.random() * (high - low), low, high)


def format_hsl(hue: int, saturation: float, lightness: float) -> str:
    """Format an HSL triple as a CSS color string."""
    return f"hsl({hue}, {saturation:.1f}%, {lightness:.1f}%)"


def theme_for(version: str) -> str:
    """Return the theme name ('cool' for v2, otherwise 'warm')."""
    return theme_info(version).name


def theme_info(version: str) -> ThemeInfo:
    """Return display metadata for the version's theme."""
    return COOL_THEME if version == "v2" else WARM_THEME


# =============================================================================
# Generation
# =============================================================================


def generate_palette(
    version: str = DEFAULT_VERSION,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """
    Generate a five-color palette for a version.

    Args:
        version: Version label. Unknown labels fall back to the v1 hues.
        rng: Random source for saturation/lightness (module RNG if None).

    Returns:
        Five `hsl(...)` strings in base-hue order.
    """
    rng = rng or _rng

    base_hues = COLOR_SCHEMES.get(version)
    if base_hues is None:
        logger.warning(
            "unknown_version_fallback",
            version=version,
            fallback=DEFAULT_VERSION,
        )
        base_hues = COLOR_SCHEMES[DEFAULT_VERSION]

    return [
        format_hsl(
            hue,
            _sample(SATURATION_RANGE, rng),
            _sample(LIGHTNESS_RANGE, rng),
        )
        for hue in base_hues
    ]

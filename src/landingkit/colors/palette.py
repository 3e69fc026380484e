"""Palette generation: one base color to an 11-shade lightness ramp."""

import logging

from landingkit.colors.conversion import hex_to_rgb, hsl_to_hex, rgb_to_hsl
from landingkit.exceptions import InvalidColorFormatError
from landingkit.models.enums import SHADE_LIGHTNESS, Shade

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_COLOR = "#0284c7"

# Shade key -> target lightness (percent)
SHADE_CONFIG: dict[str, int] = {shade.value: SHADE_LIGHTNESS[shade] for shade in Shade}


def adjust_saturation(saturation: float, lightness: float) -> float:
    """Saturation to use for a shade at the given target lightness.

    Light tints are desaturated so near-white shades don't look neon; dark
    shades get a boost so near-black shades don't turn muddy.
    """
    if lightness > 70:
        return max(10, saturation * 0.8)
    if lightness < 30:
        return min(100, saturation * 1.1)
    return saturation


def generate_palette(
    base_color: str, fallback: str | None = DEFAULT_FALLBACK_COLOR
) -> dict[str, str]:
    """
    Generate a full palette from a single base color.

    Args:
        base_color: Hex color (e.g. "#0284c7")
        fallback: Color to use when base_color is invalid. Pass None to
            let InvalidColorFormatError propagate instead.

    Returns:
        Mapping of shade keys "50".."950" (ascending) to `#rrggbb` colors

    Raises:
        InvalidColorFormatError: Only when fallback is None (or is itself invalid)
    """
    try:
        rgb = hex_to_rgb(base_color)
    except InvalidColorFormatError:
        if fallback is None:
            raise
        logger.warning(f"Invalid color: {base_color!r}, using default {fallback}")
        return generate_palette(fallback, fallback=None)

    hsl = rgb_to_hsl(*rgb.to_rgb_tuple())

    return {
        shade.value: hsl_to_hex(hsl.h, adjust_saturation(hsl.s, shade.lightness), shade.lightness)
        for shade in Shade
    }

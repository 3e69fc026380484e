"""Conversions between hex, RGB and HSL color representations."""

import math

from landingkit.exceptions import InvalidColorFormatError
from landingkit.models.color import HEX_COLOR_PATTERN, HSL, Color


def hex_to_rgb(hex_color: str) -> Color:
    """Parse a `#RRGGBB` or `RRGGBB` string (case-insensitive).

    Raises:
        InvalidColorFormatError: If the value is not exactly six hex digits
            with an optional leading '#'.

    Example:
        >>> hex_to_rgb("#0284c7")
        Color(r=2, g=132, b=199)
    """
    match = HEX_COLOR_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        raise InvalidColorFormatError(hex_color)

    r, g, b = (int(channel, 16) for channel in match.groups())
    return Color(r=r, g=g, b=b)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB channels to HSL (degrees, percent, percent)."""
    r, g, b = r / 255, g / 255, b / 255

    mx = max(r, g, b)
    mn = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (mx + mn) / 2  # noqa: E741

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)

        if mx == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HSL(h=h * 360, s=s * 100, l=l * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel_to_hex(x: float) -> str:
    # Round half up; round() would use banker's rounding on .5 ties
    return f"{math.floor(x * 255 + 0.5):02x}"


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to a lowercase `#rrggbb` string."""
    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"


def hex_to_hsl(hex_color: str) -> HSL:
    """Shortcut for `rgb_to_hsl(*hex_to_rgb(hex_color).to_rgb_tuple())`."""
    return rgb_to_hsl(*hex_to_rgb(hex_color).to_rgb_tuple())

"""Enumerations for landing page content and theming."""

from enum import Enum


class Shade(str, Enum):
    """Palette shade keys, lightest (50) to darkest (950)."""

    S50 = "50"
    S100 = "100"
    S200 = "200"
    S300 = "300"
    S400 = "400"
    S500 = "500"  # Base color
    S600 = "600"
    S700 = "700"
    S800 = "800"
    S900 = "900"
    S950 = "950"

    @property
    def rank(self) -> int:
        """Position in the ramp (0 = lightest). Use as a sort key."""
        return _SHADE_ORDER.index(self)

    @property
    def lightness(self) -> int:
        """Target HSL lightness (percent) for this shade."""
        return SHADE_LIGHTNESS[self]

    @classmethod
    def from_key(cls, key: "str | int | Shade") -> "Shade":
        """Look up a shade from a key such as "500" or 500."""
        return cls(str(key.value if isinstance(key, Shade) else key))


_SHADE_ORDER: tuple[Shade, ...] = tuple(Shade)

# Target lightness (percent) per shade
SHADE_LIGHTNESS: dict[Shade, int] = {
    Shade.S50: 95,
    Shade.S100: 90,
    Shade.S200: 80,
    Shade.S300: 70,
    Shade.S400: 60,
    Shade.S500: 50,
    Shade.S600: 40,
    Shade.S700: 30,
    Shade.S800: 22,
    Shade.S900: 15,
    Shade.S950: 8,
}


class BorderRadius(str, Enum):
    """Border radius presets for the theme."""

    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    FULL = "full"


class ColorMode(str, Enum):
    """Default color mode of the rendered page."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class OgType(str, Enum):
    """OpenGraph object types."""

    WEBSITE = "website"
    ARTICLE = "article"


class AidaStage(str, Enum):
    """Stages of the AIDA marketing funnel."""

    ATTENTION = "attention"
    INTEREST = "interest"
    DESIRE = "desire"
    ACTION = "action"

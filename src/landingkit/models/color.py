"""Color models used by the palette generator."""

import re

from pydantic import BaseModel, ConfigDict, Field

# Six hex digits, optional leading '#', case-insensitive
HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def is_hex_color(value: object) -> bool:
    """Check whether a value is a `#RRGGBB` / `RRGGBB` color string."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value) is not None


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so colors can be used as dict keys and compared by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string.

        Returns:
            str: Hex color string in format '#rrggbb'

        Example:
            >>> Color(r=2, g=132, b=199).to_hex()
            '#0284c7'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class HSL(BaseModel):
    """Hue/saturation/lightness color.

    Hue is in degrees [0, 360); saturation and lightness are percentages
    [0, 100]. Values are not re-validated, conversions rely on in-range input.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(description="Hue in degrees")
    s: float = Field(description="Saturation (percent)")
    l: float = Field(description="Lightness (percent)")  # noqa: E741

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)


"""Theme configuration models."""

from pydantic import Field

from landingkit.models.base import ContentModel
from landingkit.models.enums import BorderRadius, ColorMode, Shade


class ColorPalette(ContentModel):
    """Explicit palette shades keyed "50".."950".

    Only "500" is required; any other shade left unset is generated from
    the theme's base color.
    """

    shade_50: str | None = Field(default=None, alias="50")
    shade_100: str | None = Field(default=None, alias="100")
    shade_200: str | None = Field(default=None, alias="200")
    shade_300: str | None = Field(default=None, alias="300")
    shade_400: str | None = Field(default=None, alias="400")
    shade_500: str = Field(alias="500", description="Base color")
    shade_600: str | None = Field(default=None, alias="600")
    shade_700: str | None = Field(default=None, alias="700")
    shade_800: str | None = Field(default=None, alias="800")
    shade_900: str | None = Field(default=None, alias="900")
    shade_950: str | None = Field(default=None, alias="950")

    def get(self, shade: Shade) -> str | None:
        return getattr(self, f"shade_{shade.value}")

    def to_dict(self) -> dict[str, str]:
        """Set shades only, in ascending shade order."""
        return {
            shade.value: color
            for shade in Shade
            if (color := self.get(shade)) is not None
        }


class ThemeConfig(ContentModel):
    """Theme configuration for dynamic styling."""

    primary_color: str = Field(description="Primary brand color (hex)")
    primary_palette: ColorPalette | None = Field(
        default=None,
        description="Pinned primary shades (auto-generated when omitted)",
    )
    accent_color: str | None = Field(default=None, description="Accent/secondary brand color (hex)")
    accent_palette: ColorPalette | None = None
    font_family: str | None = Field(
        default=None,
        description="Font family name (Google Fonts or system font)",
    )
    font_url: str | None = Field(default=None, description="Custom Google Fonts import URL")
    border_radius: BorderRadius | None = None
    default_color_mode: ColorMode | None = None

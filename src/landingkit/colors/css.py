"""CSS custom property emission for generated themes."""

from collections.abc import Mapping

from landingkit.colors.palette import DEFAULT_FALLBACK_COLOR, generate_palette
from landingkit.models.enums import BorderRadius, Shade
from landingkit.models.theme import ColorPalette, ThemeConfig

# Declarations are emitted one per line, indented for a :root block
DECLARATION_SEPARATOR = "\n    "

FONT_FALLBACK_STACK = 'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", "Segoe UI Emoji"'

BORDER_RADIUS_VALUES: dict[str, str] = {
    "none": "0",
    "sm": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "full": "9999px",
}


def border_radius_value(radius: BorderRadius | str) -> str:
    """Look up the CSS length for a border radius preset.

    Raises:
        ValueError: If the preset is unknown
    """
    return BORDER_RADIUS_VALUES[BorderRadius(radius).value]


def palette_to_css(palette: Mapping[str, str], prefix: str) -> str:
    """
    Serialize a palette as CSS custom properties.

    Entries are written in ascending shade order regardless of the mapping's
    own order; keys that are not shade keys are ignored.

    Args:
        palette: Mapping of shade key ("50".."950") to color
        prefix: Variable prefix (e.g. "primary")

    Returns:
        Declarations such as ``--color-primary-50: #f0f8fe;``, one per line
    """
    return DECLARATION_SEPARATOR.join(
        f"--color-{prefix}-{shade.value}: {palette[shade.value]};"
        for shade in Shade
        if shade.value in palette
    )


def font_declaration(font_family: str) -> str:
    return f'--font-sans: "{font_family}", {FONT_FALLBACK_STACK};'


def generate_theme_css(
    primary_color: str,
    accent_color: str | None = None,
    font_family: str | None = None,
    fallback: str | None = DEFAULT_FALLBACK_COLOR,
) -> str:
    """
    Generate theme declarations for injection into a :root block.

    Args:
        primary_color: Primary brand color (hex)
        accent_color: Optional accent color (hex)
        font_family: Optional font family
        fallback: Passed through to generate_palette

    Returns:
        CSS declarations joined by newline + indentation
    """
    css = palette_to_css(generate_palette(primary_color, fallback=fallback), "primary")

    if accent_color:
        css += DECLARATION_SEPARATOR + palette_to_css(
            generate_palette(accent_color, fallback=fallback), "accent"
        )

    if font_family:
        css += DECLARATION_SEPARATOR + font_declaration(font_family)

    return css


def resolve_palette(
    color: str,
    overrides: ColorPalette | None = None,
    fallback: str | None = DEFAULT_FALLBACK_COLOR,
) -> dict[str, str]:
    """Generated palette for `color` with any pinned shades layered on top."""
    palette = generate_palette(color, fallback=fallback)
    if overrides is not None:
        palette.update(overrides.to_dict())
    return palette


def theme_to_css(theme: ThemeConfig, fallback: str | None = DEFAULT_FALLBACK_COLOR) -> str:
    """
    Generate declarations for a full theme configuration.

    Pinned palette shades win over generated ones. A ``--radius`` line is
    added when the theme sets a border radius.
    """
    lines = [palette_to_css(resolve_palette(theme.primary_color, theme.primary_palette, fallback), "primary")]

    if theme.accent_color:
        lines.append(
            palette_to_css(resolve_palette(theme.accent_color, theme.accent_palette, fallback), "accent")
        )
    elif theme.accent_palette is not None:
        lines.append(palette_to_css(theme.accent_palette.to_dict(), "accent"))

    if theme.font_family:
        lines.append(font_declaration(theme.font_family))

    if theme.border_radius is not None:
        lines.append(f"--radius: {border_radius_value(theme.border_radius)};")

    return DECLARATION_SEPARATOR.join(lines)


def render_root_block(declarations: str, selector: str = ":root") -> str:
    """Wrap declaration text in a CSS rule block."""
    return f"{selector} {{{DECLARATION_SEPARATOR}{declarations}\n}}"

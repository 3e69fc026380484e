"""Color utilities for dynamic theme generation.

One brand color becomes an 11-shade palette which is emitted as CSS custom
properties.

## Pipeline

```
"#0284c7" ──hex_to_rgb──> Color(r=2, g=132, b=199)
          ──rgb_to_hsl──> HSL(h≈200.4, s≈98.0, l≈39.4)
          ──per shade───> HSL(h, adjusted s, table lightness)
          ──hsl_to_hex──> {"50": "#...", ..., "950": "#..."}
          ──palette_to_css──> "--color-primary-50: #...;\\n    ..."
```

Example:
    ```python
    from landingkit.colors import generate_theme_css, render_root_block

    css = generate_theme_css("#0284c7", accent_color="#f97316", font_family="Inter")
    print(render_root_block(css))
    ```

Invalid colors never break a page: `generate_palette` logs a warning and
falls back to `DEFAULT_FALLBACK_COLOR`. Pass ``fallback=None`` to get an
`InvalidColorFormatError` instead.
"""

from .conversion import hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hsl
from .css import (
    BORDER_RADIUS_VALUES,
    DECLARATION_SEPARATOR,
    FONT_FALLBACK_STACK,
    border_radius_value,
    generate_theme_css,
    palette_to_css,
    render_root_block,
    resolve_palette,
    theme_to_css,
)
from .palette import DEFAULT_FALLBACK_COLOR, SHADE_CONFIG, adjust_saturation, generate_palette

__all__ = [
    "BORDER_RADIUS_VALUES",
    "DECLARATION_SEPARATOR",
    "DEFAULT_FALLBACK_COLOR",
    "FONT_FALLBACK_STACK",
    "SHADE_CONFIG",
    "adjust_saturation",
    "border_radius_value",
    "generate_palette",
    "generate_theme_css",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "palette_to_css",
    "render_root_block",
    "resolve_palette",
    "rgb_to_hsl",
    "theme_to_css",
]

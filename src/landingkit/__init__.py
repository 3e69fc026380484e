"""LandingKit: content schema and theme helpers for AIDA landing pages."""

from .version import VERSION

__version__ = VERSION.number

from .colors import generate_palette, generate_theme_css, palette_to_css
from .models import SiteConfig, ThemeConfig
from .seo import generate_meta_tags

__all__ = [
    "SiteConfig",
    "ThemeConfig",
    "generate_meta_tags",
    "generate_palette",
    "generate_theme_css",
    "palette_to_css",
]

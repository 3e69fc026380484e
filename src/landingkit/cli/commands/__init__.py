"""CLI commands."""

from .config import config
from .meta import meta
from .palette import palette
from .site import site_group
from .theme import theme

__all__ = ["config", "meta", "palette", "site_group", "theme"]

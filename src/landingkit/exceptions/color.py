"""Color-related exceptions.

- ColorError: Base class for color errors
- InvalidColorFormatError: A color string is not a 6-digit hex color
"""

from .base import LandingKitError


class ColorError(LandingKitError):
    """A color value cannot be used."""
    pass


class InvalidColorFormatError(ColorError):
    """Color string does not match the `#RRGGBB` / `RRGGBB` format."""

    def __init__(self, value: object):
        """
        Initialize invalid color format error.

        Args:
            value: The rejected color value
        """
        super().__init__(
            user_message=f"Invalid color: {value!r}",
            technical_message=f"Expected a 6-digit hex color, got {type(value).__name__} {value!r}",
            recoverable=True,
            recovery_hint=(
                'Use six hex digits with an optional leading "#", for example "#0284c7".\n'
                "Shorthand (#abc), alpha channels and rgb()/oklch() notation are not supported"
            ),
        )
        self.value = value

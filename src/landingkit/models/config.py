"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator

from landingkit.models.color import is_hex_color
from landingkit.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".landingkit" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    fallback_color: str = Field(
        default="#0284c7",
        description="Color used when a requested brand color is not a valid hex color",
    )
    css_selector: str = Field(
        default=":root",
        description="Selector wrapping generated theme declarations",
    )
    site_path: Path = Field(
        default=Path("site.json"),
        description="Site file used when a command is given no path",
    )

    @field_validator("fallback_color")
    @classmethod
    def validate_fallback_color(cls, v: str) -> str:
        """Ensure the fallback is itself usable."""
        if not is_hex_color(v):
            raise ValueError("must be a 6-digit hex color such as '#0284c7'")
        return v

    @field_serializer("site_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.landingkit/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)

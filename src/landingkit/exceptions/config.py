"""Errors raised while reading site files and the application config."""

from typing import Any, Optional

from .base import LandingKitError

# Checked in order: the first matching substring of the lowercased field wins
_FIELD_HINTS = (
    (("colormode", "color_mode"), "Valid color modes: light, dark, system"),
    (("color",), 'Colors must be 6-digit hex values such as "#0284c7"'),
    (("radius",), "Valid border radius values: none, sm, md, lg, xl, full"),
    (("ogtype", "og_type"), "Valid OpenGraph types: website, article"),
)


class ConfigurationError(LandingKitError):
    """A site or config file cannot be loaded."""


class ConfigFileInvalidError(ConfigurationError):
    """File is not valid JSON (or is empty)."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()

        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        else:
            if "empty" in lowered:
                user_msg = "Configuration file is empty"
            elif "expecting" in lowered or "eof" in lowered:
                user_msg = "Configuration file has a syntax error"
            else:
                user_msg = "Configuration file has invalid syntax"
            recovery = "\n".join(
                [
                    "Check for common JSON errors:",
                    "  - Trailing commas after the last item",
                    "  - Keys or strings without double quotes",
                    "  - Unclosed braces or brackets",
                    f"  - Edit: {file_path}",
                ]
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A value in the file fails validation.

    `field` is the dotted path of the offending key as written in the file,
    e.g. ``theme.borderRadius``.
    """

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        hint_lines = [f"Update the '{field}' value in your configuration"]
        if file_path:
            hint_lines.append(f"Config file: {file_path}")

        lowered = field.lower()
        for needles, hint in _FIELD_HINTS:
            if any(needle in lowered for needle in needles):
                hint_lines.append(hint)
                break

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path

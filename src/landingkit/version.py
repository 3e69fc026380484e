"""
LandingKit engine version.

Update this file when releasing new versions; the package __version__ is
read from here.
"""

from pydantic import BaseModel, ConfigDict


class EngineVersion(BaseModel):
    """Release metadata for the engine."""

    model_config = ConfigDict(frozen=True)

    number: str
    date: str
    name: str | None = None

    @property
    def full(self) -> str:
        return f"LandingKit Engine v{self.number}"

    @property
    def short(self) -> str:
        return f"v{self.number}"


VERSION = EngineVersion(number="1.0.0", date="2026-01-17", name="Initial Release")


def get_version_info() -> str:
    """Get formatted version info, e.g. "LandingKit Engine v1.0.0 (2026-01-17)"."""
    return f"{VERSION.full} ({VERSION.date})"


def _version_parts(version: str) -> list[int]:
    parts = []
    for part in version.split("."):
        try:
            parts.append(int(part))
        except ValueError:
            parts.append(0)  # "0-beta", "" and the like count as 0
    return parts


def is_newer_than(version: str, current: str = VERSION.number) -> bool:
    """
    Check if the current version is newer than the given version.

    Only major.minor.patch are compared; missing or non-numeric parts
    count as 0. Equal versions are not newer.
    """
    current_parts = _version_parts(current)
    compare_parts = _version_parts(version)

    for i in range(3):
        a = current_parts[i] if i < len(current_parts) else 0
        b = compare_parts[i] if i < len(compare_parts) else 0
        if a > b:
            return True
        if a < b:
            return False
    return False

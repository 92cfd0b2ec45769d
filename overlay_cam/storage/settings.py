"""
Persisted camera/overlay settings.

Remembers the last active overlay and its style between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from loguru import logger

from ._jsonfile import read_json, write_json

SETTINGS_FILENAME = "camera-settings-v1.json"

ASPECT_RATIOS = ("3:4", "9:16")


@dataclass
class PersistedSettings:
    """Last-used preview settings."""
    overlay_id: str = "thirds"
    color: str = "#56ccf2"
    opacity: float = 0.8
    thickness: float = 2.0
    flash_mode: int = 0  # platform flash mode constant, stored opaquely
    aspect_ratio: str = "3:4"
    zoom: float = 0.0  # 0-1

    def __post_init__(self):
        if self.aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"aspect_ratio must be one of {ASPECT_RATIOS}, got {self.aspect_ratio!r}")
        self.zoom = max(0.0, min(1.0, float(self.zoom)))


class SettingsStore:
    """JSON-file backed PersistedSettings."""

    def __init__(self, path: Path):
        path = Path(path).expanduser()
        self.path = path / SETTINGS_FILENAME if path.is_dir() else path

    def load(self) -> Optional[PersistedSettings]:
        """Stored settings, or None when absent or unreadable."""
        raw = read_json(self.path)
        if raw is None:
            return None
        try:
            return PersistedSettings(
                overlay_id=raw["overlayId"],
                color=raw["color"],
                opacity=raw["opacity"],
                thickness=raw["thickness"],
                flash_mode=raw.get("flashMode", 0),
                aspect_ratio=raw.get("aspectRatio", "3:4"),
                zoom=raw.get("zoom", 0.0),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load settings: {e}")
            return None

    def save(self, settings: PersistedSettings) -> None:
        data = asdict(settings)
        write_json(self.path, {
            "overlayId": data["overlay_id"],
            "color": data["color"],
            "opacity": data["opacity"],
            "thickness": data["thickness"],
            "flashMode": data["flash_mode"],
            "aspectRatio": data["aspect_ratio"],
            "zoom": data["zoom"],
        })
        logger.debug(f"Settings saved to {self.path}")

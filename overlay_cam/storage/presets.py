"""
Named overlay presets.

Presets are stored as a JSON array of {id, summary, definition} in
insertion order. The list is unbounded.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from overlay_cam.core.contracts import OverlayDefinition, OverlayPreset
from overlay_cam.core.exceptions import PresetFormatError, PresetNotFoundError
from ._jsonfile import read_json, write_json

PRESETS_FILENAME = "camera-overlay-presets-v1.json"


class PresetStore:
    """
    JSON-file backed list of overlay presets.

    The file is read lazily on first access and rewritten in full on every
    change.
    """

    def __init__(self, path: Path, clock: Optional[Callable[[], float]] = None):
        """
        Initialize preset store.

        Args:
            path: JSON file, or a directory to hold PRESETS_FILENAME
            clock: Seconds-since-epoch source for ids (time.time by default)
        """
        path = Path(path).expanduser()
        self.path = path / PRESETS_FILENAME if path.is_dir() else path
        self._clock = clock or time.time
        self._presets: Optional[List[OverlayPreset]] = None

    def load(self) -> List[OverlayPreset]:
        """(Re)read presets from disk. Corrupt entries are skipped with a warning."""
        raw = read_json(self.path, default=[])
        if not isinstance(raw, list):
            logger.warning(f"Ignoring {self.path.name}: expected a list")
            raw = []

        presets = []
        for item in raw:
            try:
                presets.append(OverlayPreset.from_dict(item))
            except PresetFormatError as e:
                logger.warning(f"Skipping malformed preset: {e}")
        self._presets = presets
        return list(presets)

    def all(self) -> List[OverlayPreset]:
        if self._presets is None:
            self.load()
        return list(self._presets)

    def get(self, preset_id: str) -> OverlayPreset:
        """
        Raises:
            PresetNotFoundError: If no preset has this id
        """
        for preset in self.all():
            if preset.id == preset_id:
                return preset
        raise PresetNotFoundError(preset_id)

    def add(self, definition: OverlayDefinition, summary: str) -> OverlayPreset:
        """Append a new preset and persist the list."""
        presets = self.all()
        preset = OverlayPreset(id=self._new_id(presets), summary=summary, definition=definition)
        presets.append(preset)
        self._persist(presets)
        logger.info(f"Preset saved: {preset.id} ({summary})")
        return preset

    def remove(self, preset_id: str) -> None:
        """
        Raises:
            PresetNotFoundError: If no preset has this id
        """
        presets = self.all()
        remaining = [p for p in presets if p.id != preset_id]
        if len(remaining) == len(presets):
            raise PresetNotFoundError(preset_id)
        self._persist(remaining)
        logger.info(f"Preset removed: {preset_id}")

    def _persist(self, presets: List[OverlayPreset]) -> None:
        write_json(self.path, [p.to_dict() for p in presets])
        self._presets = presets

    def _new_id(self, presets: List[OverlayPreset]) -> str:
        base = f"preset-{int(self._clock() * 1000)}"
        taken = {p.id for p in presets}
        candidate, n = base, 1
        while candidate in taken:
            candidate = f"{base}-{n}"
            n += 1
        return candidate

"""
Overlay Session.

Holds the active overlay for a preview and routes user actions to it:

1. Typed command → parser → active overlay + summary
2. Save the last understood command as a preset
3. Pick a built-in overlay or a saved preset
4. Adjust the session style (color, opacity, thickness)
5. Render the active overlay on preview frames
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from loguru import logger

from overlay_cam.config import AppConfig
from overlay_cam.core.contracts import (
    OverlayDefinition,
    OverlayKind,
    OverlayPreset,
    ParseOutcome,
    ParseSuccess,
)
from overlay_cam.core.exceptions import OverlayCamError, UnknownOverlayError
from overlay_cam.intent.overlay_parser import OverlayCommandParser
from overlay_cam.overlays import OverlayStyle, find_overlay, hex_to_bgr, render_overlay
from overlay_cam.storage.presets import PresetStore, PRESETS_FILENAME
from overlay_cam.storage.settings import PersistedSettings


class OverlaySession:
    """
    Active overlay state for one preview.

    Starts on the rule-of-thirds grid. Not thread-safe; each preview owns
    its own session.
    """

    def __init__(
        self,
        config: AppConfig,
        presets: Optional[PresetStore] = None,
        parser: Optional[OverlayCommandParser] = None,
    ):
        """
        Initialize session.

        Args:
            config: App configuration (theme and default style)
            presets: Preset store; defaults to one under config.state_dir
            parser: Command parser; a new one when not given
        """
        self.config = config
        self.presets = presets or PresetStore(config.state_path / PRESETS_FILENAME)
        self.parser = parser or OverlayCommandParser()

        self.definition = OverlayDefinition(kind=OverlayKind.THIRDS)
        self.summary = "Rule of Thirds"
        self.active_preset_id: Optional[str] = None
        self.last_result: Optional[ParseOutcome] = None
        self._style = OverlayStyle(
            color=config.default_color,
            opacity=config.overlay_opacity,
            thickness=config.overlay_thickness,
        )

    # --------------------------------------------------------
    # user actions
    # --------------------------------------------------------

    def submit(self, text: str) -> ParseOutcome:
        """Interpret a typed command; on success it becomes the active overlay."""
        result = self.parser.parse(text)
        self.last_result = result

        if result.ok:
            self._activate(result.definition, result.summary)
            logger.info(f"Overlay applied: {result.summary}")
        else:
            logger.warning(f"Could not understand command: {text!r}")
        return result

    def save_preset(self) -> OverlayPreset:
        """
        Persist the last understood command.

        Raises:
            OverlayCamError: If the last submitted command was not understood
        """
        if not isinstance(self.last_result, ParseSuccess):
            raise OverlayCamError("No parsed overlay to save")
        return self.presets.add(self.last_result.definition, self.last_result.summary)

    def select_overlay(self, overlay_id: str) -> None:
        """
        Activate a built-in overlay by its kind value.

        Raises:
            UnknownOverlayError: If no overlay has this id
        """
        entry = find_overlay(overlay_id)
        if entry is None:
            raise UnknownOverlayError(f"Unknown overlay '{overlay_id}'")
        self._activate(OverlayDefinition(kind=entry.kind), entry.label)
        logger.info(f"Overlay selected: {entry.label}")

    def select_preset(self, preset_id: str) -> OverlayPreset:
        """
        Activate a saved preset.

        Raises:
            PresetNotFoundError: If no preset has this id
        """
        preset = self.presets.get(preset_id)
        self._activate(preset.definition, preset.summary)
        self.active_preset_id = preset.id
        logger.info(f"Preset selected: {preset.id} ({preset.summary})")
        return preset

    # --------------------------------------------------------
    # style
    # --------------------------------------------------------

    def style(self) -> OverlayStyle:
        """Session style; definition fields still win over it when rendering."""
        return self._style

    def set_style(
        self,
        color: Optional[str] = None,
        opacity: Optional[float] = None,
        thickness: Optional[float] = None,
    ) -> OverlayStyle:
        """
        Change the session style; None leaves a field as it is.

        Opacity is clamped to 0-1 and thickness to at least 0.5.

        Raises:
            OverlayCamError: If color is not a hex color or a size is not a number
        """
        current = self._style
        try:
            if color is not None:
                hex_to_bgr(str(color))
            opacity = max(0.0, min(1.0, float(opacity))) if opacity is not None else current.opacity
            thickness = max(0.5, float(thickness)) if thickness is not None else current.thickness
        except (TypeError, ValueError) as e:
            raise OverlayCamError(f"Invalid overlay style: {e}") from e

        self._style = OverlayStyle(
            color=str(color) if color is not None else current.color,
            opacity=opacity,
            thickness=thickness,
        )
        logger.info(f"Overlay style: {self._style.color} opacity={self._style.opacity} "
                    f"thickness={self._style.thickness}")
        return self._style

    # --------------------------------------------------------
    # persisted settings
    # --------------------------------------------------------

    def snapshot(self) -> PersistedSettings:
        """Current overlay choice and style, for SettingsStore."""
        style = self.style()
        return PersistedSettings(
            overlay_id=self.definition.kind.value,
            color=style.color,
            opacity=style.opacity,
            thickness=style.thickness,
        )

    def restore(self, settings: PersistedSettings) -> None:
        """
        Apply a snapshot: style first, then the overlay.

        An unknown overlay id keeps the current overlay; an invalid stored
        style keeps the current style.
        """
        try:
            self.set_style(settings.color, settings.opacity, settings.thickness)
        except OverlayCamError as e:
            logger.warning(f"Stored style ignored: {e}")

        if find_overlay(settings.overlay_id) is None:
            logger.warning(f"Stored overlay '{settings.overlay_id}' no longer exists")
            return
        self.select_overlay(settings.overlay_id)

    # --------------------------------------------------------
    # rendering
    # --------------------------------------------------------

    def render(self, frame: np.ndarray, tilt_deg: float = 0.0) -> np.ndarray:
        """Draw the active overlay on a BGR frame (the input is not modified)."""
        return render_overlay(frame, self.definition, self.style(), tilt_deg=tilt_deg)

    def _activate(self, definition: OverlayDefinition, summary: str) -> None:
        self.definition = definition
        self.summary = summary
        self.active_preset_id = None

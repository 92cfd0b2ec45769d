"""
Base class for overlay renderers.

To add a new overlay:
1. Add the kind to OverlayKind in core/contracts.py
2. Add a parser rule for it in intent/overlay_parser.py
3. Create a renderer inheriting from BaseOverlay and implement draw()
4. Register it in overlays/__init__.py OVERLAY_REGISTRY

Example implementation:
    class CenterDotOverlay(BaseOverlay):
        def draw(self, frame, style, definition, **context):
            h, w = frame.shape[:2]
            return self.blend(frame, style.opacity, lambda layer: cv2.circle(
                layer, (w // 2, h // 2), 4, hex_to_bgr(style.color), -1))
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Tuple

import cv2
import numpy as np

from overlay_cam.core.contracts import OverlayDefinition


@dataclass(frozen=True)
class OverlayStyle:
    """Resolved drawing parameters for one overlay."""
    color: str = "#56ccf2"
    opacity: float = 0.8
    thickness: float = 2.0

    @property
    def bgr(self) -> Tuple[int, int, int]:
        return hex_to_bgr(self.color)

    @property
    def line_width(self) -> int:
        return max(1, int(round(self.thickness)))


def resolve_style(definition: OverlayDefinition, defaults: OverlayStyle) -> OverlayStyle:
    """Definition values win over defaults; unset fields fall back."""
    return OverlayStyle(
        color=definition.color if definition.color is not None else defaults.color,
        opacity=definition.opacity if definition.opacity is not None else defaults.opacity,
        thickness=definition.thickness if definition.thickness is not None else defaults.thickness,
    )


def hex_to_bgr(value: str) -> Tuple[int, int, int]:
    """Convert "#rgb" or "#rrggbb" to an OpenCV BGR tuple.

    Raises:
        ValueError: If the string is not a hex color
    """
    s = value.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    r, g, b = int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)
    return (b, g, r)


class BaseOverlay(ABC):
    """Abstract base class for overlay renderers.

    Renderers are pure geometry: given a frame size and a style they draw
    lines and shapes. They never modify the input frame; draw() returns a
    new BGR frame of the same shape.
    """

    @abstractmethod
    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        """Draw the overlay.

        Args:
            frame: BGR input frame (H, W, 3), uint8
            style: Resolved color/opacity/thickness
            definition: Overlay definition (kind-specific fields)
            **context: Live values supplied by the caller, e.g. tilt_deg

        Returns:
            BGR output frame with the overlay drawn
        """
        pass

    @staticmethod
    def blend(frame: np.ndarray, opacity: float,
              paint: Callable[[np.ndarray], object]) -> np.ndarray:
        """Paint on a copy of frame and alpha-blend it over the original.

        Pixels paint() does not touch come out unchanged.
        """
        opacity = max(0.0, min(1.0, opacity))
        layer = frame.copy()
        paint(layer)
        if opacity >= 1.0:
            return layer
        return cv2.addWeighted(layer, opacity, frame, 1.0 - opacity, 0)

    @staticmethod
    def frame_size(frame: np.ndarray) -> Tuple[int, int]:
        """(width, height) of a frame."""
        h, w = frame.shape[:2]
        return w, h

"""
Composition guide renderers.

Each renderer maps frame size + style to OpenCV drawing calls. Positions
are computed in float and rounded to pixels at the last step.
"""
import math
from typing import Tuple

import cv2
import numpy as np

from overlay_cam.core.contracts import OverlayDefinition
from .base import BaseOverlay, OverlayStyle

GOLDEN_RATIO = 0.618

DEFAULT_ELLIPSE_WIDTH = 0.6
DEFAULT_ELLIPSE_HEIGHT = 0.4
DEFAULT_INSET = 0.1

CROSSHAIR_RADIUS = 0.05  # of the shorter side
FOREGROUND_BAND = 0.3  # of the height
FOREGROUND_FILL_ALPHA = 0.2
DIAGONAL_UPPER_ALPHA = 0.7


def _pt(x: float, y: float) -> Tuple[int, int]:
    return (int(round(x)), int(round(y)))


class RuleOfThirdsOverlay(BaseOverlay):
    """Two vertical and two horizontal lines at the thirds."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)

        def paint(layer):
            for x in (w / 3, w * 2 / 3):
                cv2.line(layer, _pt(x, 0), _pt(x, h), style.bgr, style.line_width)
            for y in (h / 3, h * 2 / 3):
                cv2.line(layer, _pt(0, y), _pt(w, y), style.bgr, style.line_width)

        return self.blend(frame, style.opacity, paint)


class CrosshairOverlay(BaseOverlay):
    """Full-span center lines with a small center ring."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        cx, cy = w / 2, h / 2
        radius = int(round(min(w, h) * CROSSHAIR_RADIUS))

        def paint(layer):
            cv2.line(layer, _pt(cx, 0), _pt(cx, h), style.bgr, style.line_width)
            cv2.line(layer, _pt(0, cy), _pt(w, cy), style.bgr, style.line_width)
            cv2.circle(layer, _pt(cx, cy), radius, style.bgr, style.line_width)

        return self.blend(frame, style.opacity, paint)


class LeadingLinesOverlay(BaseOverlay):
    """Lines from each corner to the center; the upper pair is fainter."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        center = _pt(w / 2, h / 2)

        def lower(layer):
            cv2.line(layer, _pt(0, h), center, style.bgr, style.line_width)
            cv2.line(layer, _pt(w, h), center, style.bgr, style.line_width)

        def upper(layer):
            cv2.line(layer, _pt(0, 0), center, style.bgr, style.line_width)
            cv2.line(layer, _pt(w, 0), center, style.bgr, style.line_width)

        out = self.blend(frame, style.opacity, lower)
        return self.blend(out, style.opacity * DIAGONAL_UPPER_ALPHA, upper)


class EllipseOverlay(BaseOverlay):
    """Centered ellipse sized by definition.rect."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        rect = definition.rect
        w_pct = rect.width_pct if rect and rect.width_pct is not None else DEFAULT_ELLIPSE_WIDTH
        h_pct = rect.height_pct if rect and rect.height_pct is not None else DEFAULT_ELLIPSE_HEIGHT
        axes = _pt(w * w_pct / 2, h * h_pct / 2)

        def paint(layer):
            cv2.ellipse(layer, _pt(w / 2, h / 2), axes, 0, 0, 360, style.bgr, style.line_width)

        return self.blend(frame, style.opacity, paint)


class FramedBorderOverlay(BaseOverlay):
    """Rectangle inset from every edge by definition.inset_pct."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        inset = definition.inset_pct if definition.inset_pct is not None else DEFAULT_INSET
        inset_x, inset_y = w * inset, h * inset

        def paint(layer):
            cv2.rectangle(layer, _pt(inset_x, inset_y), _pt(w - inset_x, h - inset_y),
                          style.bgr, style.line_width)

        return self.blend(frame, style.opacity, paint)


class ForegroundEmphasisOverlay(BaseOverlay):
    """Tinted lower band with a marker line along its top edge."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        y = h - h * FOREGROUND_BAND

        def band(layer):
            cv2.rectangle(layer, _pt(0, y), _pt(w, h), style.bgr, -1)

        def edge(layer):
            cv2.line(layer, _pt(0, y), _pt(w, y), style.bgr, style.line_width)

        def inner(layer):
            cv2.line(layer, _pt(w * 0.1, y), _pt(w * 0.9, y), style.bgr, style.line_width)

        out = self.blend(frame, style.opacity * FOREGROUND_FILL_ALPHA, band)
        out = self.blend(out, style.opacity, edge)
        return self.blend(out, style.opacity * 0.8, inner)


class HorizonLevelOverlay(BaseOverlay):
    """Line through the center tilted by the live tilt_deg context value."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        tilt_deg = float(context.get("tilt_deg", 0.0))
        center_y = h / 2
        y_offset = math.tan(math.radians(tilt_deg)) * (w / 2)

        def paint(layer):
            cv2.line(layer, _pt(0, center_y - y_offset), _pt(w, center_y + y_offset),
                     style.bgr, style.line_width)
            cv2.putText(layer, f"{tilt_deg:.1f} deg", _pt(w - 60, center_y - 12),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, style.bgr, 1, cv2.LINE_AA)

        return self.blend(frame, style.opacity, paint)


class GoldenRatioOverlay(BaseOverlay):
    """One vertical and one horizontal line at the golden section."""

    def draw(self, frame: np.ndarray, style: OverlayStyle,
             definition: OverlayDefinition, **context) -> np.ndarray:
        w, h = self.frame_size(frame)
        x, y = w * GOLDEN_RATIO, h * GOLDEN_RATIO

        def paint(layer):
            cv2.line(layer, _pt(x, 0), _pt(x, h), style.bgr, style.line_width)
            cv2.line(layer, _pt(0, y), _pt(w, y), style.bgr, style.line_width)

        return self.blend(frame, style.opacity, paint)

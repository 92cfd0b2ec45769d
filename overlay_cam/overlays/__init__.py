"""
Overlay renderers module.

Maps every OverlayKind to exactly one renderer and a display label.

To add a new overlay:
1. Create a renderer inheriting from BaseOverlay (see base.py)
2. Register it in OVERLAY_REGISTRY below, together with a parser rule
"""
from typing import Dict, List, NamedTuple, Optional, Type

import numpy as np
from loguru import logger

from overlay_cam.core.contracts import OverlayDefinition, OverlayKind
from overlay_cam.core.exceptions import UnknownOverlayError
from .base import BaseOverlay, OverlayStyle, resolve_style, hex_to_bgr
from .guides import (
    RuleOfThirdsOverlay,
    CrosshairOverlay,
    LeadingLinesOverlay,
    EllipseOverlay,
    FramedBorderOverlay,
    ForegroundEmphasisOverlay,
    HorizonLevelOverlay,
    GoldenRatioOverlay,
)


class OverlayEntry(NamedTuple):
    kind: OverlayKind
    label: str
    renderer: Type[BaseOverlay]


# Registry of available overlays, in picker order
OVERLAY_REGISTRY: Dict[OverlayKind, OverlayEntry] = {
    entry.kind: entry for entry in [
        OverlayEntry(OverlayKind.THIRDS, "Rule of Thirds", RuleOfThirdsOverlay),
        OverlayEntry(OverlayKind.CROSSHAIR, "Crosshair", CrosshairOverlay),
        OverlayEntry(OverlayKind.DIAGONALS, "Leading Lines", LeadingLinesOverlay),
        OverlayEntry(OverlayKind.ELLIPSE, "Centered Ellipse", EllipseOverlay),
        OverlayEntry(OverlayKind.FRAME, "Framed Border", FramedBorderOverlay),
        OverlayEntry(OverlayKind.FOREGROUND_EMPHASIS, "Foreground Emphasis", ForegroundEmphasisOverlay),
        OverlayEntry(OverlayKind.HORIZON, "Horizon Level", HorizonLevelOverlay),
        OverlayEntry(OverlayKind.GOLDEN_RATIO, "Golden Ratio", GoldenRatioOverlay),
    ]
}


def find_overlay(overlay_id: str) -> Optional[OverlayEntry]:
    """Look up an entry by its kind value (e.g. "goldenRatio"); None if absent."""
    for kind, entry in OVERLAY_REGISTRY.items():
        if kind.value == overlay_id:
            return entry
    return None


def get_overlay(kind) -> BaseOverlay:
    """Get a renderer instance for an overlay kind.

    Args:
        kind: OverlayKind or its string value

    Returns:
        Renderer instance

    Raises:
        UnknownOverlayError: If the kind is not registered
    """
    entry = OVERLAY_REGISTRY.get(kind) if isinstance(kind, OverlayKind) else find_overlay(kind)
    if entry is None:
        available = ", ".join(k.value for k in OVERLAY_REGISTRY)
        raise UnknownOverlayError(f"Unknown overlay '{kind}'. Available: {available}")
    logger.debug(f"Renderer for {entry.kind.value}: {entry.renderer.__name__}")
    return entry.renderer()


def list_overlays() -> List[OverlayEntry]:
    """List registered overlays in picker order."""
    return list(OVERLAY_REGISTRY.values())


def render_overlay(frame: np.ndarray, definition: OverlayDefinition,
                   defaults: OverlayStyle, **context) -> np.ndarray:
    """Draw a definition on a frame, falling back to default style values."""
    style = resolve_style(definition, defaults)
    return get_overlay(definition.kind).draw(frame, style, definition, **context)


__all__ = [
    'BaseOverlay', 'OverlayStyle', 'OverlayEntry', 'OVERLAY_REGISTRY',
    'resolve_style', 'hex_to_bgr', 'find_overlay', 'get_overlay',
    'list_overlays', 'render_overlay',
]

"""
Core data contracts for the overlay camera.

All components exchange these value objects:
- OverlayDefinition: what overlay to draw and with which parameters
- ParseSuccess / ParseFailure: outcome of interpreting a text command
- OverlayPreset: a named definition a user can reselect later
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Optional, Dict, Any, Tuple, Union, Mapping

from overlay_cam.core.exceptions import PresetFormatError

HEX_COLOR_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}){1,2}")


# ============================================================
# ENUMERATIONS
# ============================================================

class OverlayKind(Enum):
    """Composition guides that can be drawn over the preview."""
    THIRDS = "thirds"
    CROSSHAIR = "crosshair"
    DIAGONALS = "diagonals"
    ELLIPSE = "ellipse"
    FRAME = "frame"
    FOREGROUND_EMPHASIS = "foregroundEmphasis"
    HORIZON = "horizon"
    GOLDEN_RATIO = "goldenRatio"


def _optional_number(data: Mapping[str, Any], key: str) -> Optional[float]:
    """A real number (bools excluded) or None."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise PresetFormatError(f"{key} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise PresetFormatError(f"{key} must be finite, got {value!r}")
    return value


def _optional_color(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = _optional_of(data, key, str)
    if value is not None and not HEX_COLOR_RE.fullmatch(value.strip()):
        raise PresetFormatError(f"{key} must be a hex color, got {value!r}")
    return value


def _optional_of(data: Mapping[str, Any], key: str, expected: type) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, expected):
        raise PresetFormatError(f"{key} must be {expected.__name__}, got {type(value).__name__}")
    return value


# ============================================================
# OVERLAY DEFINITION
# ============================================================

@dataclass(frozen=True)
class RectSpec:
    """Partial rectangle, as fractions of the frame size."""
    width_pct: Optional[float] = None
    height_pct: Optional[float] = None

    def to_dict(self) -> Dict[str, float]:
        data = {}
        if self.width_pct is not None:
            data["widthPct"] = self.width_pct
        if self.height_pct is not None:
            data["heightPct"] = self.height_pct
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RectSpec:
        if not isinstance(data, Mapping):
            raise PresetFormatError(f"rect must be an object, got {type(data).__name__}")
        return cls(
            width_pct=_optional_number(data, "widthPct"),
            height_pct=_optional_number(data, "heightPct"),
        )


@dataclass(frozen=True)
class OverlayDefinition:
    """
    A requested overlay and its visual parameters.

    Only `kind` is required. Which geometry fields matter depends on the kind:
    - rect: ellipse
    - inset_pct: frame
    Consumers ignore fields their kind does not use.
    """
    kind: OverlayKind
    color: Optional[str] = None  # hex, e.g. "#eb5757"
    opacity: Optional[float] = None  # 0-1
    thickness: Optional[float] = None  # device-independent pixels
    rect: Optional[RectSpec] = None
    inset_pct: Optional[float] = None  # 0-1
    animate: Optional[bool] = None
    extras: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape used by preset storage (unset fields omitted)."""
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.color is not None:
            data["color"] = self.color
        if self.opacity is not None:
            data["opacity"] = self.opacity
        if self.thickness is not None:
            data["thickness"] = self.thickness
        if self.rect is not None:
            data["rect"] = self.rect.to_dict()
        if self.inset_pct is not None:
            data["insetPct"] = self.inset_pct
        if self.animate is not None:
            data["animate"] = self.animate
        if self.extras is not None:
            data["extras"] = dict(self.extras)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OverlayDefinition:
        """
        Build a definition from its serialized form.

        Raises:
            PresetFormatError: payload is not a mapping, names an unknown kind,
                or holds a field of the wrong type
        """
        if not isinstance(data, Mapping):
            raise PresetFormatError(f"definition must be an object, got {type(data).__name__}")
        try:
            kind = OverlayKind(data.get("kind"))
        except ValueError:
            raise PresetFormatError(f"unknown overlay kind: {data.get('kind')!r}") from None

        rect = data.get("rect")
        extras = _optional_of(data, "extras", Mapping)
        return cls(
            kind=kind,
            color=_optional_color(data, "color"),
            opacity=_optional_number(data, "opacity"),
            thickness=_optional_number(data, "thickness"),
            rect=RectSpec.from_dict(rect) if rect is not None else None,
            inset_pct=_optional_number(data, "insetPct"),
            animate=_optional_of(data, "animate", bool),
            extras=dict(extras) if extras is not None else None,
        )


# ============================================================
# PARSE OUTCOME
# ============================================================

@dataclass(frozen=True)
class ParseSuccess:
    """Command understood."""
    definition: OverlayDefinition
    summary: str
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ParseFailure:
    """Command not understood; suggestions are example commands to try."""
    message: str
    suggestions: Tuple[str, ...]
    ok: bool = field(default=False, init=False)


ParseOutcome = Union[ParseSuccess, ParseFailure]


# ============================================================
# PRESETS
# ============================================================

@dataclass(frozen=True)
class OverlayPreset:
    """A user-named overlay definition persisted for reuse."""
    id: str
    summary: str
    definition: OverlayDefinition

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "summary": self.summary, "definition": self.definition.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OverlayPreset:
        if not isinstance(data, Mapping):
            raise PresetFormatError(f"preset must be an object, got {type(data).__name__}")
        if "id" not in data or "definition" not in data:
            raise PresetFormatError("preset requires 'id' and 'definition'")
        return cls(
            id=str(data["id"]),
            summary=str(data.get("summary", "")),
            definition=OverlayDefinition.from_dict(data["definition"]),
        )

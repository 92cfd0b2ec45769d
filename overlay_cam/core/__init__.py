"""
Core Module.

Shared data contracts and exceptions.
"""

from .contracts import (
    OverlayKind,
    RectSpec,
    OverlayDefinition,
    ParseSuccess,
    ParseFailure,
    ParseOutcome,
    OverlayPreset,
)
from .exceptions import (
    OverlayCamError,
    UnknownOverlayError,
    PresetFormatError,
    PresetNotFoundError,
    ConfigError,
)

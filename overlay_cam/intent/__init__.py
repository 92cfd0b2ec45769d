"""
Intent Parsing Module.

Responsibilities:
- Typed command → overlay definition
- Ordered rule cascade (first match wins)
- Suggestions when a command is not understood
"""

from .overlay_parser import (
    OverlayCommandParser,
    interpret,
    clamp_pct,
    extract_color,
    COLOR_KEYWORDS,
    SUGGESTIONS,
)

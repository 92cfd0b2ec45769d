"""
Natural Language Overlay Parser.

Converts typed commands into overlay definitions.

Command format understanding:
- guide: thirds, crosshair, diagonals, ellipse, frame, golden ratio, ...
- color: a keyword from COLOR_KEYWORDS
- size: "70% wide 40% tall" (ellipse), "10% inset" (frame)

Rules are tried in order and the first match wins, so "grid crosshair"
is a thirds grid.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from overlay_cam.core.contracts import (
    OverlayDefinition,
    OverlayKind,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    RectSpec,
)


# ============================================================
# KEYWORD TABLES
# ============================================================

# Declaration order breaks ties: "red and blue" is red.
COLOR_KEYWORDS: List[Tuple[str, str]] = [
    ('red', '#eb5757'),
    ('blue', '#2f80ed'),
    ('green', '#27ae60'),
    ('yellow', '#f2c94c'),
    ('white', '#ffffff'),
    ('black', '#000000'),
]

SUGGESTIONS: Tuple[str, ...] = (
    'add thirds grid',
    'draw ellipse 70% wide 40% tall',
    'frame with 10% inset',
    'show horizon level',
    'diagonal cross',
    'foreground lower third guide',
)

EMPTY_MESSAGE = 'Type a command to generate an overlay.'
NO_MATCH_MESSAGE = 'Could not understand that request.'

# Guide patterns, in evaluation order
GUIDE_PATTERNS: List[Tuple[OverlayKind, str]] = [
    (OverlayKind.THIRDS, r'third|grid'),
    (OverlayKind.CROSSHAIR, r'crosshair|reticle|center cross|diagonal cross'),
    (OverlayKind.DIAGONALS, r'diagonal|leading line'),
    (OverlayKind.ELLIPSE, r'ellipse|oval'),
    (OverlayKind.GOLDEN_RATIO, r'golden ratio'),
    (OverlayKind.FRAME, r'frame|border'),
    (OverlayKind.FOREGROUND_EMPHASIS, r'foreground|lower third'),
    (OverlayKind.HORIZON, r'horizon|level|tilt'),
]

# Kinds whose commands never pick up a color keyword
UNCOLORED_KINDS = {OverlayKind.GOLDEN_RATIO}

# Digits are ASCII only (\d would also match e.g. Arabic-Indic digits)
WIDTH_PATTERN = r'([0-9]{1,3})%\s*(?:wide|width)'
HEIGHT_PATTERN = r'([0-9]{1,3})%\s*(?:tall|height)'
INSET_PATTERN = r'([0-9]{1,2})%\s*(?:inset|margin)'

MIN_PCT = 0.05
MAX_PCT = 0.95

DEFAULT_ELLIPSE_WIDTH = 0.6
DEFAULT_ELLIPSE_HEIGHT = 0.4
DEFAULT_INSET = 0.1


def clamp_pct(pct: float) -> float:
    """Keep a size fraction away from zero and from the full frame."""
    return max(MIN_PCT, min(MAX_PCT, pct))


def extract_color(normalized: str) -> Optional[str]:
    """First declared color keyword found anywhere in the text, as hex."""
    for keyword, value in COLOR_KEYWORDS:
        if keyword in normalized:
            return value
    return None


def _format_pct(pct: float) -> str:
    return f"{pct * 100:.0f}"


# Builder: normalized text -> (extra definition fields, summary)
Builder = Callable[[str], Tuple[Dict[str, Any], str]]


class OverlayCommandParser:
    """
    Parser for typed overlay commands.

    Converts commands like:
        "add thirds grid"
        "draw an ellipse 70% wide 40% tall"
        "red frame with 15% margin"

    Into OverlayDefinition objects plus a one-line summary. Holds only
    compiled patterns, so one instance can serve any number of callers.
    """

    def __init__(self):
        self._width_re = re.compile(WIDTH_PATTERN)
        self._height_re = re.compile(HEIGHT_PATTERN)
        self._inset_re = re.compile(INSET_PATTERN)

        builders: Dict[OverlayKind, Builder] = {
            OverlayKind.THIRDS: self._fixed('Rule of thirds grid'),
            OverlayKind.CROSSHAIR: self._fixed('Centered crosshair'),
            OverlayKind.DIAGONALS: self._fixed('Leading line diagonals'),
            OverlayKind.ELLIPSE: self._build_ellipse,
            OverlayKind.GOLDEN_RATIO: self._fixed('Golden ratio grid'),
            OverlayKind.FRAME: self._build_frame,
            OverlayKind.FOREGROUND_EMPHASIS: self._fixed('Foreground lower-third emphasis'),
            OverlayKind.HORIZON: self._fixed('Horizon level guide'),
        }
        self._rules: List[Tuple[OverlayKind, re.Pattern, Builder]] = [
            (kind, re.compile(pattern), builders[kind]) for kind, pattern in GUIDE_PATTERNS
        ]

    def parse(self, text: str) -> ParseOutcome:
        """
        Interpret a command.

        Args:
            text: Free text typed by the user

        Returns:
            ParseSuccess with definition and summary, or ParseFailure with
            a message and example commands. Never raises for string input.
        """
        normalized = text.strip().lower()

        if not normalized:
            return ParseFailure(message=EMPTY_MESSAGE, suggestions=SUGGESTIONS)

        for kind, pattern, build in self._rules:
            if not pattern.search(normalized):
                continue
            fields, summary = build(normalized)
            if kind not in UNCOLORED_KINDS:
                fields['color'] = extract_color(normalized)
            return ParseSuccess(
                definition=OverlayDefinition(kind=kind, **fields),
                summary=summary,
            )

        return ParseFailure(message=NO_MATCH_MESSAGE, suggestions=SUGGESTIONS)

    # --------------------------------------------------------
    # builders
    # --------------------------------------------------------

    @staticmethod
    def _fixed(summary: str) -> Builder:
        """Builder for guides without size parameters."""
        def build(normalized: str) -> Tuple[Dict[str, Any], str]:
            return {}, summary
        return build

    def _build_ellipse(self, normalized: str) -> Tuple[Dict[str, Any], str]:
        width = self._extract_pct(self._width_re, normalized, DEFAULT_ELLIPSE_WIDTH)
        height = self._extract_pct(self._height_re, normalized, DEFAULT_ELLIPSE_HEIGHT)
        summary = f"Centered ellipse {_format_pct(width)}% × {_format_pct(height)}%"
        return {'rect': RectSpec(width_pct=width, height_pct=height)}, summary

    def _build_frame(self, normalized: str) -> Tuple[Dict[str, Any], str]:
        inset = self._extract_pct(self._inset_re, normalized, DEFAULT_INSET)
        return {'inset_pct': inset}, f"Inset frame {_format_pct(inset)}%"

    @staticmethod
    def _extract_pct(pattern: re.Pattern, normalized: str, default: float) -> float:
        match = pattern.search(normalized)
        if not match:
            return default
        return clamp_pct(int(match.group(1)) / 100)


_DEFAULT_PARSER = OverlayCommandParser()


def interpret(text: str) -> ParseOutcome:
    """Interpret a command with the shared stateless parser."""
    return _DEFAULT_PARSER.parse(text)

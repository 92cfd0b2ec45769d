"""Tests for the typed overlay command parser."""

from __future__ import annotations

import pytest

from overlay_cam.core.contracts import OverlayKind, ParseFailure, ParseSuccess
from overlay_cam.intent import (
    COLOR_KEYWORDS,
    SUGGESTIONS,
    OverlayCommandParser,
    clamp_pct,
    extract_color,
    interpret,
)

CANONICAL_SUGGESTIONS = (
    "add thirds grid",
    "draw ellipse 70% wide 40% tall",
    "frame with 10% inset",
    "show horizon level",
    "diagonal cross",
    "foreground lower third guide",
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_empty_input_asks_for_a_command(text: str) -> None:
    result = interpret(text)

    assert isinstance(result, ParseFailure)
    assert result.ok is False
    assert result.message == "Type a command to generate an overlay."
    assert result.suggestions == CANONICAL_SUGGESTIONS


def test_unknown_command_fails_with_same_suggestions() -> None:
    result = interpret("unknown overlay please")

    assert isinstance(result, ParseFailure)
    assert result.message == "Could not understand that request."
    assert result.suggestions == CANONICAL_SUGGESTIONS
    assert SUGGESTIONS == CANONICAL_SUGGESTIONS


def test_thirds_grid() -> None:
    result = interpret("add thirds grid")

    assert isinstance(result, ParseSuccess)
    assert result.ok is True
    assert result.definition.kind is OverlayKind.THIRDS
    assert result.summary == "Rule of thirds grid"
    assert result.definition.color is None


def test_ellipse_dimensions() -> None:
    result = interpret("draw an ellipse 70% wide 40% tall")

    assert result.ok
    assert result.definition.kind is OverlayKind.ELLIPSE
    assert result.definition.rect.width_pct == pytest.approx(0.70)
    assert result.definition.rect.height_pct == pytest.approx(0.40)
    assert result.summary == "Centered ellipse 70% × 40%"


def test_ellipse_dimensions_are_clamped() -> None:
    result = interpret("ellipse 99% wide 1% tall")

    assert result.definition.rect.width_pct == pytest.approx(0.95)
    assert result.definition.rect.height_pct == pytest.approx(0.05)
    assert result.summary == "Centered ellipse 95% × 5%"


def test_ellipse_defaults_and_keyword_variants() -> None:
    oval = interpret("oval")
    assert oval.definition.rect.width_pct == pytest.approx(0.6)
    assert oval.definition.rect.height_pct == pytest.approx(0.4)
    assert oval.summary == "Centered ellipse 60% × 40%"

    partial = interpret("ELLIPSE 50%width")
    assert partial.definition.rect.width_pct == pytest.approx(0.5)
    assert partial.definition.rect.height_pct == pytest.approx(0.4)

    sized = interpret("oval 30% height")
    assert sized.definition.rect.width_pct == pytest.approx(0.6)
    assert sized.definition.rect.height_pct == pytest.approx(0.3)


def test_red_crosshair() -> None:
    result = interpret("red crosshair please")

    assert result.definition.kind is OverlayKind.CROSSHAIR
    assert result.definition.color == "#eb5757"
    assert result.summary == "Centered crosshair"


def test_grid_takes_precedence_over_crosshair() -> None:
    assert interpret("grid crosshair").definition.kind is OverlayKind.THIRDS


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("diagonal cross", OverlayKind.CROSSHAIR),
        ("reticle", OverlayKind.CROSSHAIR),
        ("leading lines", OverlayKind.DIAGONALS),
        ("diagonals please", OverlayKind.DIAGONALS),
        ("golden ratio grid", OverlayKind.THIRDS),
        ("golden ratio", OverlayKind.GOLDEN_RATIO),
        ("oval frame", OverlayKind.ELLIPSE),
        ("foreground emphasis", OverlayKind.FOREGROUND_EMPHASIS),
        ("foreground lower third guide", OverlayKind.THIRDS),
        ("show horizon level", OverlayKind.HORIZON),
        ("tilt", OverlayKind.HORIZON),
    ],
)
def test_rules_are_an_ordered_cascade(text: str, kind: OverlayKind) -> None:
    assert interpret(text).definition.kind is kind


def test_frame_inset() -> None:
    result = interpret("frame with 10% inset")

    assert result.definition.kind is OverlayKind.FRAME
    assert result.definition.inset_pct == pytest.approx(0.10)
    assert result.summary == "Inset frame 10%"


def test_frame_inset_default_margin_and_clamp() -> None:
    assert interpret("border").definition.inset_pct == pytest.approx(0.1)
    assert interpret("border 25% margin").summary == "Inset frame 25%"
    small = interpret("frame 2% inset")
    assert small.definition.inset_pct == pytest.approx(0.05)
    assert small.summary == "Inset frame 5%"


def test_golden_ratio_ignores_color_keywords() -> None:
    result = interpret("golden ratio in red")

    assert result.definition.kind is OverlayKind.GOLDEN_RATIO
    assert result.definition.color is None
    assert result.summary == "Golden ratio grid"


def test_color_tie_break_follows_declaration_order() -> None:
    result = interpret("blue and red thirds")
    assert result.definition.color == "#eb5757"

    assert interpret("tilt guide in yellow").definition.color == "#f2c94c"
    assert interpret("black horizon").definition.color == "#000000"


def test_color_keywords_match_inside_words() -> None:
    # "centered" contains "red"
    assert interpret("centered ellipse").definition.color == "#eb5757"


def test_extract_color_and_clamp() -> None:
    assert [k for k, _ in COLOR_KEYWORDS] == ["red", "blue", "green", "yellow", "white", "black"]
    assert extract_color("green and white") == "#27ae60"
    assert extract_color("purple") is None
    assert clamp_pct(0.0) == 0.05
    assert clamp_pct(1.5) == 0.95
    assert clamp_pct(0.42) == 0.42


@pytest.mark.parametrize(
    "text",
    [
        "add thirds grid",
        "draw an ellipse 70% wide 40% tall",
        "frame with 10% inset",
        "nothing to see",
        "",
    ],
)
def test_parsing_is_idempotent(text: str) -> None:
    parser = OverlayCommandParser()
    assert parser.parse(text) == parser.parse(text) == interpret(text)


@pytest.mark.parametrize(
    "text",
    ["%%%", "999999% wide ellipse", "ellipse -5% wide", "😀 grid", "x" * 100_000, "\x00"],
)
def test_every_input_maps_to_one_outcome(text: str) -> None:
    result = interpret(text)
    assert isinstance(result, (ParseSuccess, ParseFailure))


def test_only_ascii_digits_are_read() -> None:
    ellipse = interpret("ellipse ٧٠% wide")
    assert ellipse.definition.rect.width_pct == pytest.approx(0.6)
    assert ellipse.summary == "Centered ellipse 60% × 40%"

    frame = interpret("frame ٢٠% inset")
    assert frame.definition.inset_pct == pytest.approx(0.1)

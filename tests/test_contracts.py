"""Tests for overlay definitions, parse outcomes and presets."""

from __future__ import annotations

import dataclasses

import pytest

from overlay_cam.core.contracts import (
    OverlayDefinition,
    OverlayKind,
    OverlayPreset,
    ParseFailure,
    ParseSuccess,
    RectSpec,
)
from overlay_cam.core.exceptions import PresetFormatError


def test_overlay_kind_values_are_stable() -> None:
    assert [k.value for k in OverlayKind] == [
        "thirds",
        "crosshair",
        "diagonals",
        "ellipse",
        "frame",
        "foregroundEmphasis",
        "horizon",
        "goldenRatio",
    ]


def test_definition_serializes_only_set_fields() -> None:
    definition = OverlayDefinition(
        kind=OverlayKind.ELLIPSE,
        color="#2f80ed",
        rect=RectSpec(width_pct=0.7, height_pct=0.4),
    )

    assert definition.to_dict() == {
        "kind": "ellipse",
        "color": "#2f80ed",
        "rect": {"widthPct": 0.7, "heightPct": 0.4},
    }
    assert OverlayDefinition(kind=OverlayKind.THIRDS).to_dict() == {"kind": "thirds"}


def test_definition_from_dict_reads_every_field() -> None:
    definition = OverlayDefinition.from_dict(
        {
            "kind": "frame",
            "color": "#ffffff",
            "opacity": 0.5,
            "thickness": 3,
            "insetPct": 0.2,
            "animate": True,
            "extras": {"cornerRadius": 4},
        }
    )

    assert definition.kind is OverlayKind.FRAME
    assert definition.opacity == 0.5
    assert definition.thickness == 3
    assert definition.inset_pct == 0.2
    assert definition.animate is True
    assert definition.extras == {"cornerRadius": 4}
    assert definition.rect is None


@pytest.mark.parametrize(
    "payload",
    [
        {"kind": "spiral"},
        {},
        ["thirds"],
        {"kind": "ellipse", "rect": 3},
        {"kind": "ellipse", "rect": {"widthPct": "0.5"}},
        {"kind": "ellipse", "rect": {"heightPct": False}},
        {"kind": "frame", "insetPct": float("nan")},
        {"kind": "thirds", "opacity": "0.5"},
        {"kind": "thirds", "thickness": True},
        {"kind": "thirds", "color": 16711680},
        {"kind": "thirds", "color": "crimson"},
        {"kind": "thirds", "animate": "yes"},
        {"kind": "thirds", "extras": ["a"]},
    ],
)
def test_definition_from_dict_rejects_bad_payloads(payload) -> None:
    with pytest.raises(PresetFormatError):
        OverlayDefinition.from_dict(payload)


def test_outcomes_are_immutable_and_tagged() -> None:
    success = ParseSuccess(definition=OverlayDefinition(kind=OverlayKind.HORIZON), summary="Horizon level guide")
    failure = ParseFailure(message="nope", suggestions=("add thirds grid",))

    assert success.ok is True
    assert failure.ok is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        success.summary = "changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        success.definition.color = "#000000"


def test_preset_from_dict_requires_id_and_definition() -> None:
    preset = OverlayPreset.from_dict(
        {"id": "preset-1", "summary": "Inset frame 10%", "definition": {"kind": "frame", "insetPct": 0.1}}
    )
    assert preset.definition.inset_pct == 0.1
    assert preset.to_dict()["definition"] == {"kind": "frame", "insetPct": 0.1}

    with pytest.raises(PresetFormatError):
        OverlayPreset.from_dict({"summary": "missing id"})


def test_definition_from_dict_accepts_ints_and_short_hex() -> None:
    definition = OverlayDefinition.from_dict(
        {"kind": "ellipse", "color": "#fff", "opacity": 1, "rect": {"widthPct": 1, "heightPct": 0.25}}
    )

    assert definition.color == "#fff"
    assert definition.opacity == 1
    assert definition.rect == RectSpec(width_pct=1, height_pct=0.25)

"""Tests for accelerometer tilt estimation."""

from __future__ import annotations

import math

import pytest

from overlay_cam.sensors import TiltLevel, tilt_from_acceleration


def sample(deg: float):
    rad = math.radians(deg)
    return math.cos(rad), math.sin(rad)


def test_tilt_from_acceleration() -> None:
    assert tilt_from_acceleration(1.0, 0.0) == pytest.approx(0.0)
    assert tilt_from_acceleration(0.0, 1.0) == pytest.approx(90.0)
    assert tilt_from_acceleration(1.0, 1.0) == pytest.approx(45.0)
    assert tilt_from_acceleration(1.0, -1.0) == pytest.approx(-45.0)


def test_small_changes_are_ignored() -> None:
    level = TiltLevel()

    assert level.update(*sample(0.1)) == 0.0
    assert level.update(*sample(0.19)) == 0.0
    assert level.update(*sample(5.0)) == pytest.approx(5.0)
    assert level.update(*sample(5.15)) == pytest.approx(5.0)
    assert level.update(*sample(4.5)) == pytest.approx(4.5)


def test_reset_returns_to_level() -> None:
    level = TiltLevel()
    level.update(*sample(12.0))
    level.reset()
    assert level.tilt_deg == 0.0

"""
Horizon tilt from accelerometer samples.

The sample source (device sensor, replayed log, ...) lives outside this
module; it calls TiltLevel.update() with each (x, y) reading, nominally
every SAMPLE_INTERVAL_MS.
"""
import math

from loguru import logger

SAMPLE_INTERVAL_MS = 100

# Readings closer than this to the published tilt are ignored (jitter)
TILT_DEADBAND_DEG = 0.2


def tilt_from_acceleration(x: float, y: float) -> float:
    """Tilt in degrees of the gravity vector in the device x/y plane."""
    return math.degrees(math.atan2(y, x))


class TiltLevel:
    """Publishes a tilt angle that only moves on changes above the deadband.

    Usage:
        level = TiltLevel()
        for x, y, _z in samples:
            tilt = level.update(x, y)
        overlay.draw(frame, style, definition, tilt_deg=level.tilt_deg)

    Attributes:
        tilt_deg: Last published tilt in degrees
    """

    def __init__(self, deadband_deg: float = TILT_DEADBAND_DEG):
        self.deadband_deg = deadband_deg
        self.tilt_deg = 0.0

    def update(self, x: float, y: float) -> float:
        """Feed one sample; returns the (possibly unchanged) published tilt."""
        pitch = tilt_from_acceleration(x, y)
        if abs(self.tilt_deg - pitch) > self.deadband_deg:
            logger.debug(f"Tilt {self.tilt_deg:.1f} -> {pitch:.1f}")
            self.tilt_deg = pitch
        return self.tilt_deg

    def reset(self) -> None:
        self.tilt_deg = 0.0

"""
Sensor Module.

Turns raw sensor samples into values the overlays consume.
"""

from .level import TiltLevel, tilt_from_acceleration, SAMPLE_INTERVAL_MS

"""Exceptions raised by the overlay camera package."""


class OverlayCamError(Exception):
    """Base class for package errors."""


class UnknownOverlayError(OverlayCamError, ValueError):
    """Requested overlay kind has no registered renderer."""


class PresetFormatError(OverlayCamError):
    """Persisted preset payload is malformed."""


class PresetNotFoundError(OverlayCamError, KeyError):
    """No preset with the requested id."""


class ConfigError(OverlayCamError):
    """Configuration file unreadable or holds an invalid value."""

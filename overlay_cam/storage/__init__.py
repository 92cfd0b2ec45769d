"""
Storage Module.

JSON persistence for presets and last-used settings.
"""

from .presets import PresetStore, PRESETS_FILENAME
from .settings import PersistedSettings, SettingsStore, SETTINGS_FILENAME

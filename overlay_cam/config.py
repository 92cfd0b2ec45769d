"""
Configuration module for the overlay camera.

Settings come from (lowest to highest priority):
1. AppConfig defaults below
2. A YAML settings file (config/settings.yaml unless a path is given)
3. Explicit overrides, e.g. from command-line args

YAML layout:
    overlay:
      theme: dark
      color: null        # null = theme's overlay_default
      opacity: 0.8
      thickness: 2
    preview:
      width: 1080
      height: 1440
    storage:
      state_dir: ~/.overlay_cam
    logging:
      level: INFO
      file: null
"""
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from overlay_cam.core.exceptions import ConfigError
from overlay_cam.theme import Theme, get_theme


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"

MIN_THICKNESS = 0.5

# YAML section/key -> AppConfig field
_YAML_KEYS = {
    ("overlay", "theme"): "theme",
    ("overlay", "color"): "overlay_color",
    ("overlay", "opacity"): "overlay_opacity",
    ("overlay", "thickness"): "overlay_thickness",
    ("preview", "width"): "frame_width",
    ("preview", "height"): "frame_height",
    ("storage", "state_dir"): "state_dir",
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file",
}


@dataclass
class AppConfig:
    """Main configuration.

    Attributes:
        theme: Theme name ("light" or "dark")
        overlay_color: Default overlay color (None = theme default)
        overlay_opacity: Default overlay opacity, 0-1
        overlay_thickness: Default line thickness in pixels
        frame_width: Preview width used when no image is supplied
        frame_height: Preview height used when no image is supplied
        state_dir: Directory holding presets and persisted settings
        log_level: Console log level
        log_file: Optional log file path
    """
    theme: str = "dark"
    overlay_color: Optional[str] = None
    overlay_opacity: float = 0.8
    overlay_thickness: float = 2.0

    # 3:4 preview
    frame_width: int = 1080
    frame_height: int = 1440

    state_dir: str = "~/.overlay_cam"

    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate theme and clamp overlay defaults."""
        get_theme(self.theme)
        self.overlay_opacity = max(0.0, min(1.0, float(self.overlay_opacity)))
        self.overlay_thickness = max(MIN_THICKNESS, float(self.overlay_thickness))

    @property
    def palette(self) -> Theme:
        return get_theme(self.theme)

    @property
    def default_color(self) -> str:
        return self.overlay_color or self.palette.overlay_default

    @property
    def state_path(self) -> Path:
        return Path(self.state_dir).expanduser()


def _flatten_yaml(data: Mapping[str, Any]) -> Dict[str, Any]:
    values = {}
    for (section, key), field_name in _YAML_KEYS.items():
        block = data.get(section) or {}
        if not isinstance(block, Mapping):
            raise ConfigError(f"Section '{section}' must be a mapping")
        if key in block:
            values[field_name] = block[key]
    return values


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config {path} must hold a mapping")
    return _flatten_yaml(data)


def load_config(
    path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppConfig:
    """Load configuration from a YAML file and overrides.

    Args:
        path: YAML file; None uses config/settings.yaml when it exists
        overrides: AppConfig field -> value; None values are ignored

    Returns:
        AppConfig with all settings

    Raises:
        ConfigError: If an explicit path is missing, unreadable, or
            holds an invalid value
    """
    values: Dict[str, Any] = {}

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        values.update(_read_yaml(config_path))
        logger.debug(f"Loaded config from {config_path}")
    elif DEFAULT_CONFIG_PATH.exists():
        values.update(_read_yaml(DEFAULT_CONFIG_PATH))
        logger.debug(f"Loaded default config from {DEFAULT_CONFIG_PATH}")

    known = {f.name for f in fields(AppConfig)}
    for key, value in (overrides or {}).items():
        if key not in known:
            raise ConfigError(f"Unknown config option '{key}'")
        if value is not None:
            values[key] = value

    try:
        return AppConfig(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

"""
Color themes.

A Theme is passed explicitly to whatever needs it (config, session, CLI);
there is no process-wide current theme.
"""
from dataclasses import dataclass
from typing import Dict

from overlay_cam.core.exceptions import ConfigError


@dataclass(frozen=True)
class Theme:
    """Palette for the preview chrome and the default overlay color."""
    name: str
    background: str
    surface: str
    text_primary: str
    text_secondary: str
    accent: str
    danger: str
    overlay_default: str


LIGHT_THEME = Theme(
    name="light",
    background="#101418",
    surface="#ffffff",
    text_primary="#0d0d0d",
    text_secondary="#4a4a4a",
    accent="#2f80ed",
    danger="#eb5757",
    overlay_default="#2f80ed",
)

DARK_THEME = Theme(
    name="dark",
    background="#020307",
    surface="#1a1f24",
    text_primary="#f5f7fa",
    text_secondary="#c1c7cd",
    accent="#56ccf2",
    danger="#f2994a",
    overlay_default="#56ccf2",
)

THEMES: Dict[str, Theme] = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Get a theme by name.

    Raises:
        ConfigError: If the theme name is not known
    """
    if name not in THEMES:
        available = ", ".join(THEMES.keys())
        raise ConfigError(f"Unknown theme '{name}'. Available: {available}")
    return THEMES[name]

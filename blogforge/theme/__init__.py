"""Theme tokens and utility CSS generation."""

from .palette import REQUIRED_SCALES, SHADES, ThemeConfig, load_theme_config
from .utilities import build_stylesheet, generate_utilities, utility_rule

__all__ = [
    "REQUIRED_SCALES",
    "SHADES",
    "ThemeConfig",
    "load_theme_config",
    "build_stylesheet",
    "generate_utilities",
    "utility_rule",
]

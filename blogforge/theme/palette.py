"""Colour palette and font roles for the site theme."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import read_config_file
from ..errors import ConfigError

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")

# Framework default scales, used unchanged by the theme
DEFAULT_GREEN = {
    "50": "#f0fdf4",
    "100": "#dcfce7",
    "200": "#bbf7d0",
    "300": "#86efac",
    "400": "#4ade80",
    "500": "#22c55e",
    "600": "#16a34a",
    "700": "#15803d",
    "800": "#166534",
    "900": "#14532d",
    "950": "#052e16",
}

DEFAULT_RED = {
    "50": "#fef2f2",
    "100": "#fee2e2",
    "200": "#fecaca",
    "300": "#fca5a5",
    "400": "#f87171",
    "500": "#ef4444",
    "600": "#dc2626",
    "700": "#b91c1c",
    "800": "#991b1b",
    "900": "#7f1d1d",
    "950": "#450a0a",
}

DEFAULT_AMBER = {
    "50": "#fffbeb",
    "100": "#fef3c7",
    "200": "#fde68a",
    "300": "#fcd34d",
    "400": "#fbbf24",
    "500": "#f59e0b",
    "600": "#d97706",
    "700": "#b45309",
    "800": "#92400e",
    "900": "#78350f",
    "950": "#451a03",
}

GRAY = {
    "50": "#f7f7f8",
    "100": "#ecedee",
    "200": "#dcdee0",
    "300": "#bfc3c5",
    "400": "#9fa4a8",
    "500": "#747c81",
    "600": "#52585b",
    "700": "#3d4143",
    "800": "#27292b",
    "900": "#131515",
    "950": "#0a0a0b",
}

BLUE = {
    "50": "#f6fbfe",
    "100": "#e8f5fd",
    "200": "#c8e7f9",
    "300": "#87c5e8",
    "400": "#51b3ec",
    "500": "#218cca",
    "600": "#166ea2",
    "700": "#0d4d73",
    "800": "#05324d",
    "900": "#032030",
    "950": "#00101a",
}

DEFAULT_SANS = [
    "ui-sans-serif",
    "system-ui",
    "sans-serif",
    '"Apple Color Emoji"',
    '"Segoe UI Emoji"',
    '"Segoe UI Symbol"',
    '"Noto Color Emoji"',
]
DEFAULT_SERIF = ["ui-serif", "Georgia", "Cambria", '"Times New Roman"', "Times", "serif"]
DEFAULT_MONO = [
    "ui-monospace",
    "SFMono-Regular",
    "Menlo",
    "Monaco",
    "Consolas",
    '"Liberation Mono"',
    '"Courier New"',
    "monospace",
]

# Scales every theme must define at every shade
REQUIRED_SCALES = ("gray", "blue", "green", "red", "amber")


def _default_colors() -> dict[str, str | dict[str, str]]:
    return {
        "black": "#000000",
        "white": "#ffffff",
        "gray": dict(GRAY),
        "blue": dict(BLUE),
        "green": dict(DEFAULT_GREEN),
        "red": dict(DEFAULT_RED),
        "amber": dict(DEFAULT_AMBER),
    }


def _default_fonts() -> dict[str, list[str]]:
    return {
        "sans": ['"Rubik"', *DEFAULT_SANS],
        "serif": ['"Libre Baskerville"', *DEFAULT_SERIF],
        "mono": ['"Roboto Mono"', *DEFAULT_MONO],
        "title": ['"Trirong"', *DEFAULT_SERIF],
    }


class ThemeConfig(BaseModel):
    """Restricted design tokens.

    `colors` maps a semantic name to either a single hex value or a scale
    of shade -> hex. `content` lists the globs scanned for utility classes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    colors: dict[str, str | dict[str, str]] = Field(default_factory=_default_colors)
    font_family: dict[str, list[str]] = Field(default_factory=_default_fonts)
    content: list[str] = Field(default_factory=lambda: ["./src/**/*.{html,md}"])

    @field_validator("colors", mode="before")
    @classmethod
    def _stringify_shades(cls, value: Any) -> Any:
        # YAML reads `50: "#fff"` with integer keys
        if not isinstance(value, dict):
            return value
        out: dict[str, Any] = {}
        for name, entry in value.items():
            if isinstance(entry, dict):
                out[str(name)] = {str(k): v for k, v in entry.items()}
            else:
                out[str(name)] = entry
        return out

    def flat_colors(self) -> dict[str, str]:
        """Colour utility names to hex, e.g. {"gray-50": "#f7f7f8", "black": "#000000"}."""
        flat: dict[str, str] = {}
        for name, entry in self.colors.items():
            if isinstance(entry, dict):
                for shade, value in entry.items():
                    flat[f"{name}-{shade}"] = value
            else:
                flat[name] = entry
        return flat

    def resolve_color(self, name: str) -> str | None:
        return self.flat_colors().get(name)

    def font_stack(self, role: str) -> str | None:
        fonts = self.font_family.get(role)
        if not fonts:
            return None
        return ", ".join(fonts)


def load_theme_config(root: Path, path: Path | None = None) -> ThemeConfig:
    """Load the theme, applying a `theme:` mapping from the project config.

    Colours and font roles given in the file are merged over the defaults
    so a project can change one scale without restating the rest.
    """
    data = read_config_file(root, path).get("theme") or {}
    if not isinstance(data, dict):
        raise ConfigError("theme must be a mapping")

    merged: dict[str, Any] = {}
    if "colors" in data:
        merged["colors"] = {**_default_colors(), **(data.get("colors") or {})}
    if "font_family" in data:
        merged["font_family"] = {**_default_fonts(), **(data.get("font_family") or {})}
    for key, value in data.items():
        if key not in ("colors", "font_family"):
            merged[key] = value

    try:
        return ThemeConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid theme configuration: {e}") from e

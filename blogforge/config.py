"""Configuration constants and the build configuration model."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

# Project config file, looked up in the project root unless overridden
CONFIG_FILENAME = os.getenv("BLOGFORGE_CONFIG", "blogforge.yaml")

LOG_LEVEL = os.getenv("BLOGFORGE_LOG_LEVEL", "WARNING")

# Name of the collection the built-in layouts list on the home page
POSTS_COLLECTION = "posts"

# Generated stylesheet locations, relative to the output directory
SITE_CSS_PATH = "css/site.css"
HIGHLIGHT_CSS_PATH = "css/highlight.css"

# Files never copied by passthrough
IGNORED_NAMES = {".DS_Store", "__pycache__", ".pytest_cache", "Thumbs.db"}


class BuildConfig(BaseModel):
    """Declarative build settings.

    Paths are relative to the project root. Defaults reproduce the blog's
    original configuration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: str = "src"
    includes_dir: str = "_includes"
    layouts_dir: str = "_layouts"
    output_dir: str = "_site"
    passthrough: list[str] = Field(default_factory=lambda: ["src/CNAME", "src/assets"])
    collections: dict[str, str] = Field(
        default_factory=lambda: {POSTS_COLLECTION: "src/_posts/*.md"}
    )
    plugins: list[str] = Field(default_factory=lambda: ["syntaxhighlight"])
    template_formats: list[str] = Field(default_factory=lambda: ["md", "html"])
    site_title: str = "Blog"

    def input_path(self, root: Path) -> Path:
        return (root / self.input_dir).resolve()

    def output_path(self, root: Path) -> Path:
        return (root / self.output_dir).resolve()

    def excluded_dirs(self, root: Path) -> list[Path]:
        """Directories under the input dir that never hold pages."""
        src = self.input_path(root)
        return [
            src / self.includes_dir,
            src / self.layouts_dir,
            self.output_path(root),
        ]


def read_config_file(root: Path, path: Path | None = None) -> dict[str, Any]:
    """Read the project YAML config, or return {} when there is none."""
    config_path = path if path is not None else root / CONFIG_FILENAME
    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        return {}

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")
    return data


def load_build_config(root: Path, path: Path | None = None) -> BuildConfig:
    """Load the build configuration for a project.

    Args:
        root: Project root directory
        path: Explicit config file (optional)

    Returns:
        BuildConfig with file values applied over the defaults
    """
    data = dict(read_config_file(root, path))
    data.pop("theme", None)
    try:
        return BuildConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid build configuration: {e}") from e

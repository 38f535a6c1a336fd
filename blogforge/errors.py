"""Exceptions raised by blogforge."""

from __future__ import annotations

from pathlib import Path


class BlogforgeError(Exception):
    """Base class for errors that abort a build or command."""


class ConfigError(BlogforgeError):
    """Raised when the build or theme configuration cannot be loaded."""


class PluginError(BlogforgeError):
    """Raised when a configured plugin name is not registered."""


class FrontMatterError(BlogforgeError):
    """Raised when a content file has a malformed front-matter block."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")

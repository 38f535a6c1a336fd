"""Build plugins and the plugin registry.

A plugin contributes Markdown extensions and, optionally, generated files
written next to the site output.
"""

from __future__ import annotations

import logging
from typing import Any

from pygments.formatters import HtmlFormatter

from ..config import HIGHLIGHT_CSS_PATH
from ..errors import PluginError

logger = logging.getLogger(__name__)


class Plugin:
    """Base plugin: contributes nothing."""

    name = "base"

    def markdown_extensions(self) -> list[str]:
        return []

    def markdown_extension_configs(self) -> dict[str, dict[str, Any]]:
        return {}

    def assets(self) -> dict[str, str]:
        """Generated files as {output-relative path: text}."""
        return {}

    def stylesheets(self) -> list[str]:
        """Output-relative stylesheets every page should link."""
        return []


class SyntaxHighlightPlugin(Plugin):
    """Highlight fenced code blocks with Pygments."""

    name = "syntaxhighlight"
    css_class = "highlight"

    def __init__(self, style: str = "default"):
        self.style = style

    def markdown_extensions(self) -> list[str]:
        return ["codehilite"]

    def markdown_extension_configs(self) -> dict[str, dict[str, Any]]:
        return {
            "codehilite": {
                "css_class": self.css_class,
                "use_pygments": True,
                "noclasses": False,
                "guess_lang": False,
                "linenums": False,
            }
        }

    def assets(self) -> dict[str, str]:
        css = HtmlFormatter(style=self.style).get_style_defs(f".{self.css_class}")
        return {HIGHLIGHT_CSS_PATH: css + "\n"}

    def stylesheets(self) -> list[str]:
        return [HIGHLIGHT_CSS_PATH]


PLUGINS: dict[str, type[Plugin]] = {
    SyntaxHighlightPlugin.name: SyntaxHighlightPlugin,
}


def load_plugins(names: list[str]) -> list[Plugin]:
    """Instantiate plugins by registered name, preserving order."""
    plugins: list[Plugin] = []
    for name in names:
        cls = PLUGINS.get(name.strip().lower())
        if cls is None:
            known = ", ".join(sorted(PLUGINS))
            raise PluginError(f"Unknown plugin {name!r} (known: {known})")
        plugins.append(cls())
        logger.debug("Registered plugin %s", name)
    return plugins

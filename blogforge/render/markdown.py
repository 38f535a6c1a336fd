"""Markdown to HTML rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import markdown as md_lib

from .plugins import Plugin

BASE_EXTENSIONS = ["extra", "sane_lists", "toc"]


class MarkdownRenderer:
    """Python-Markdown configured with the base extensions plus plugins."""

    def __init__(self, plugins: Iterable[Plugin] = ()):
        self.extensions: list[str] = list(BASE_EXTENSIONS)
        self.extension_configs: dict[str, dict[str, Any]] = {}
        for plugin in plugins:
            for ext in plugin.markdown_extensions():
                if ext not in self.extensions:
                    self.extensions.append(ext)
            self.extension_configs.update(plugin.markdown_extension_configs())

    def render(self, text: str) -> str:
        # A fresh instance per document keeps toc ids from leaking between pages
        converter = md_lib.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
            output_format="html",
        )
        return converter.convert(text)


def render_markdown(text: str, plugins: Iterable[Plugin] = ()) -> str:
    """Render a Markdown string to HTML."""
    return MarkdownRenderer(plugins).render(text)

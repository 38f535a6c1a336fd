"""Markdown rendering and build plugins."""

from .markdown import MarkdownRenderer, render_markdown
from .plugins import PLUGINS, Plugin, SyntaxHighlightPlugin, load_plugins

__all__ = [
    "MarkdownRenderer",
    "render_markdown",
    "PLUGINS",
    "Plugin",
    "SyntaxHighlightPlugin",
    "load_plugins",
]

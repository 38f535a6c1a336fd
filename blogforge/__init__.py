"""blogforge: build a personal Markdown blog into static HTML."""

__version__ = "0.1.0"

"""Content loading: front-matter, collections and passthrough copy."""

from .collections import Collection, build_collection, collect_all
from .frontmatter import Document, load_document
from .globbing import expand_braces, glob_files, match_path
from .passthrough import PassthroughResult, copy_passthrough, resolve_passthrough

__all__ = [
    "Collection",
    "build_collection",
    "collect_all",
    "Document",
    "load_document",
    "expand_braces",
    "glob_files",
    "match_path",
    "PassthroughResult",
    "copy_passthrough",
    "resolve_passthrough",
]

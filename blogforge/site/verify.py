"""Consistency checks for a blog project.

Each check returns a list of issues; an empty list means the check passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import POSTS_COLLECTION, BuildConfig
from ..content.collections import build_collection
from ..content.frontmatter import Document, load_document
from ..content.globbing import glob_files, literal_dir
from ..content.passthrough import resolve_passthrough
from ..errors import FrontMatterError
from ..theme.palette import REQUIRED_SCALES, SHADES, ThemeConfig


@dataclass(frozen=True)
class Issue:
    check: str
    message: str

    def __str__(self) -> str:
        return f"[{self.check}] {self.message}"


def check_passthrough(config: BuildConfig, root: Path) -> list[Issue]:
    _, missing = resolve_passthrough(config, root)
    return [Issue("passthrough", f"path does not exist: {p}") for p in missing]


def check_collection_glob(config: BuildConfig, root: Path) -> list[Issue]:
    """The posts glob must match exactly the Markdown files in the posts directory."""
    pattern = config.collections.get(POSTS_COLLECTION)
    if pattern is None:
        return [Issue("collection", f"no {POSTS_COLLECTION!r} collection configured")]

    root = root.resolve()
    matched = {p.relative_to(root).as_posix() for p in glob_files(root, pattern)}
    posts_dir = root / literal_dir(pattern)
    if not posts_dir.is_dir():
        return [Issue("collection", f"posts directory does not exist: {literal_dir(pattern)}")]

    intended = {
        p.relative_to(root).as_posix()
        for p in posts_dir.iterdir()
        if p.is_file() and p.suffix == ".md"
    }

    issues: list[Issue] = []
    for rel in sorted(intended - matched):
        issues.append(Issue("collection", f"post not matched by {pattern}: {rel}"))
    for rel in sorted(matched - intended):
        issues.append(Issue("collection", f"{pattern} matches a non-post file: {rel}"))
    return issues


def check_front_matter(config: BuildConfig, root: Path) -> list[Issue]:
    """Every post needs a non-empty title and summary."""
    pattern = config.collections.get(POSTS_COLLECTION)
    if pattern is None:
        return []

    input_dir = config.input_path(root)
    root = root.resolve()
    documents: list[Document] = []
    issues: list[Issue] = []
    for path in glob_files(root, pattern):
        try:
            documents.append(load_document(path.resolve(), root, input_dir))
        except FrontMatterError as e:
            issues.append(Issue("front-matter", str(e)))

    for doc in build_collection(POSTS_COLLECTION, pattern, documents):
        for field in ("title", "summary"):
            if not getattr(doc, field):
                issues.append(Issue("front-matter", f"{doc.rel_path}: missing or empty {field}"))
    return issues


def check_palette(theme: ThemeConfig) -> list[Issue]:
    """No duplicate colour names and every required scale fully defined."""
    issues: list[Issue] = []

    seen: dict[str, str] = {}
    for name, entry in theme.colors.items():
        names = [f"{name}-{s}" for s in entry] if isinstance(entry, dict) else [name]
        for flat in names:
            if flat in seen:
                issues.append(Issue("palette", f"duplicate colour name {flat!r} ({seen[flat]} and {name})"))
            else:
                seen[flat] = name

    for scale in REQUIRED_SCALES:
        entry = theme.colors.get(scale)
        if not isinstance(entry, dict):
            issues.append(Issue("palette", f"scale {scale!r} is not defined"))
            continue
        for shade in SHADES:
            value = entry.get(shade)
            if not value:
                issues.append(Issue("palette", f"{scale}-{shade} is not defined"))
            elif not _is_hex(value):
                issues.append(Issue("palette", f"{scale}-{shade} is not a hex colour: {value}"))

    for role, fonts in theme.font_family.items():
        if not fonts:
            issues.append(Issue("palette", f"font role {role!r} has an empty stack"))
    return issues


def _is_hex(value: str) -> bool:
    v = value.lstrip("#")
    return value.startswith("#") and len(v) in (3, 6, 8) and all(c in "0123456789abcdefABCDEF" for c in v)


def run_checks(config: BuildConfig, theme: ThemeConfig, root: Path) -> list[Issue]:
    root = root.resolve()
    return [
        *check_passthrough(config, root),
        *check_collection_glob(config, root),
        *check_front_matter(config, root),
        *check_palette(theme),
    ]

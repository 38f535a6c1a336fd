"""Utility-class CSS generated from the theme.

Files matching the theme's content globs are scanned for class-like
tokens; only utilities that are both used and backed by a theme token
are emitted, so the stylesheet stays small and the palette stays closed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from ..content.globbing import glob_files
from .palette import ThemeConfig

logger = logging.getLogger(__name__)

CANDIDATE_RE = re.compile(r"[A-Za-z0-9_:\-]+")

COLOR_PROPERTIES = {
    "text": "color",
    "bg": "background-color",
    "border": "border-color",
    "decoration": "text-decoration-color",
}

VARIANTS = {"hover": ":hover", "focus": ":focus"}


def css_escape(class_name: str) -> str:
    return re.sub(r"([:./\[\]])", r"\\\1", class_name)


def extract_candidates(text: str) -> set[str]:
    return set(CANDIDATE_RE.findall(text))


def scan_content(root: Path, theme: ThemeConfig) -> set[str]:
    """Collect candidate class names from files matching the content globs."""
    found: set[str] = set()
    for pattern in theme.content:
        for path in glob_files(root, pattern):
            try:
                found |= extract_candidates(path.read_text(encoding="utf-8"))
            except UnicodeDecodeError:
                logger.debug("Skipping non-text file %s", path)
    return found


def _declaration(utility: str, theme: ThemeConfig, colors: dict[str, str]) -> str | None:
    prefix, sep, rest = utility.partition("-")
    if not sep:
        return None
    if prefix == "font" and rest in theme.font_family:
        return f"font-family: var(--font-{rest});"
    prop = COLOR_PROPERTIES.get(prefix)
    if prop and rest in colors:
        return f"{prop}: var(--color-{rest});"
    return None


def utility_rule(class_name: str, theme: ThemeConfig, colors: dict[str, str] | None = None) -> str | None:
    """CSS rule for one class name, or None when it is not a theme utility."""
    if colors is None:
        colors = theme.flat_colors()

    variant, sep, utility = class_name.rpartition(":")
    pseudo = ""
    if sep:
        if variant not in VARIANTS:
            return None
        pseudo = VARIANTS[variant]

    decl = _declaration(utility, theme, colors)
    if decl is None:
        return None
    return f".{css_escape(class_name)}{pseudo} {{ {decl} }}"


def theme_variables(theme: ThemeConfig) -> str:
    lines = [":root {"]
    for name, value in theme.flat_colors().items():
        lines.append(f"  --color-{name}: {value};")
    for role in theme.font_family:
        lines.append(f"  --font-{role}: {theme.font_stack(role)};")
    lines.append("}")
    return "\n".join(lines)


def generate_utilities(candidates: Iterable[str], theme: ThemeConfig) -> str:
    """Emit rules for every candidate that names a theme utility.

    Plain utilities come first, variants after, each group sorted by name so
    that variant rules win on equal specificity and output is reproducible.
    """
    colors = theme.flat_colors()
    plain: list[str] = []
    variants: list[str] = []
    for name in sorted(set(candidates)):
        rule = utility_rule(name, theme, colors)
        if rule is None:
            continue
        (variants if ":" in name else plain).append(rule)
    return "\n".join(plain + variants)


def build_stylesheet(
    root: Path,
    theme: ThemeConfig,
    base_css: str,
    extra_sources: Iterable[str] = (),
) -> str:
    """Theme variables, base styles and the used utilities as one stylesheet."""
    candidates = scan_content(root, theme)
    for text in extra_sources:
        candidates |= extract_candidates(text)
    utilities = generate_utilities(candidates, theme)
    parts = [theme_variables(theme), base_css.strip(), utilities]
    return "\n\n".join(p for p in parts if p) + "\n"

"""Glob matching for content and collection patterns.

Patterns use forward slashes relative to the project root and support
`*`, `?`, `**`, character classes and `{a,b}` alternatives.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

_WILDCARD_CHARS = set("*?[{")


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives into plain glob patterns.

    >>> expand_braces("src/**/*.{html,md}")
    ['src/**/*.html', 'src/**/*.md']
    """
    start = pattern.find("{")
    if start == -1:
        return [pattern]

    depth = 0
    for end in range(start, len(pattern)):
        ch = pattern[end]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                break
    else:
        # Unbalanced brace: treat literally
        return [pattern]

    head, body, tail = pattern[:start], pattern[start + 1 : end], pattern[end + 1 :]
    options: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            options.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    options.append(current)

    out: list[str] = []
    for opt in options:
        for expanded in expand_braces(head + opt + tail):
            if expanded not in out:
                out.append(expanded)
    return out


def normalize_pattern(pattern: str) -> str:
    p = pattern.replace("\\", "/").strip()
    while p.startswith("./"):
        p = p[2:]
    return p


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    i = 0
    out = ""
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            if pattern[i : i + 3] == "**/":
                out += "(?:.*/)?"
                i += 3
                continue
            if pattern[i : i + 2] == "**":
                out += ".*"
                i += 2
                continue
            out += "[^/]*"
        elif ch == "?":
            out += "[^/]"
        elif ch == "[":
            # Same class rules as fnmatch: a leading "]" is literal, "!" negates
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                out += re.escape(ch)
            else:
                out += f"[{_class_body(pattern[i + 1 : close])}]"
                i = close
        else:
            out += re.escape(ch)
        i += 1
    return re.compile(f"^{out}$")


def _class_body(body: str) -> str:
    body = body.replace("\\", r"\\")
    body = re.sub(r"([&~|\[])", r"\\\1", body)
    if body.startswith("!"):
        return "^" + body[1:]
    if body.startswith("^"):
        return "\\" + body
    return body


def match_path(pattern: str, rel_path: str) -> bool:
    """Return True when a root-relative POSIX path matches the pattern."""
    rel = normalize_pattern(rel_path)
    return any(_compile(p).match(rel) for p in expand_braces(normalize_pattern(pattern)))


def literal_dir(pattern: str) -> str:
    """The leading directories of a pattern that contain no wildcards.

    >>> literal_dir("src/_posts/**/*.md")
    'src/_posts'
    """
    parts = normalize_pattern(pattern).split("/")
    literal: list[str] = []
    for part in parts[:-1]:
        if _WILDCARD_CHARS & set(part):
            break
        literal.append(part)
    return "/".join(literal)


def glob_files(root: Path, pattern: str) -> list[Path]:
    """Return files under root matching pattern, sorted by relative path."""
    matches: set[Path] = set()
    for expanded in expand_braces(normalize_pattern(pattern)):
        if not _WILDCARD_CHARS & set(expanded):
            candidate = root / expanded
            if candidate.is_file():
                matches.add(candidate)
            continue

        prefix = literal_dir(expanded)
        base = root / prefix if prefix else root
        if not base.is_dir():
            continue
        regex = _compile(expanded)
        for path in base.rglob("*"):
            if not path.is_file():
                continue
            rel = path.relative_to(root).as_posix()
            if regex.match(rel):
                matches.add(path)

    return sorted(matches, key=lambda p: p.relative_to(root).as_posix())


def has_wildcards(pattern: str) -> bool:
    return bool(_WILDCARD_CHARS & set(pattern))

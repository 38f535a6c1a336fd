"""Passthrough copy of files that bypass rendering."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ..config import IGNORED_NAMES, BuildConfig
from .globbing import glob_files, has_wildcards, normalize_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassthroughEntry:
    source: Path
    target: str  # relative to the output directory


@dataclass
class PassthroughResult:
    copied: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def output_target(source: Path, root: Path, input_dir: Path) -> str:
    """Output-relative target for a source path.

    Paths inside the input directory drop the input prefix; anything else
    keeps its project-relative location.
    """
    source = source.resolve()
    if source.is_relative_to(input_dir):
        return source.relative_to(input_dir).as_posix()
    return source.relative_to(root.resolve()).as_posix()


def resolve_passthrough(config: BuildConfig, root: Path) -> tuple[list[PassthroughEntry], list[str]]:
    """Resolve configured passthrough paths.

    Returns:
        (entries, missing) where missing lists configured paths with no match
    """
    input_dir = config.input_path(root)
    entries: list[PassthroughEntry] = []
    missing: list[str] = []

    for raw in config.passthrough:
        pattern = normalize_pattern(raw)
        if has_wildcards(pattern):
            matched = glob_files(root, pattern)
            if not matched:
                missing.append(raw)
            for path in matched:
                entries.append(PassthroughEntry(path, output_target(path, root, input_dir)))
            continue

        path = root / pattern
        if not path.exists():
            missing.append(raw)
            continue
        entries.append(PassthroughEntry(path, output_target(path, root, input_dir)))

    return entries, missing


def passthrough_sources(config: BuildConfig, root: Path) -> list[Path]:
    entries, _ = resolve_passthrough(config, root)
    return [e.source.resolve() for e in entries]


def is_passthrough(path: Path, sources: list[Path]) -> bool:
    resolved = path.resolve()
    return any(resolved == s or resolved.is_relative_to(s) for s in sources)


def copy_passthrough(config: BuildConfig, root: Path, out_dir: Path) -> PassthroughResult:
    """Copy every passthrough path into out_dir unchanged."""
    result = PassthroughResult()
    entries, missing = resolve_passthrough(config, root)

    for raw in missing:
        msg = f"Passthrough path not found: {raw}"
        logger.warning(msg)
        result.warnings.append(msg)

    for entry in entries:
        dst = out_dir / entry.target
        if entry.source.is_dir():
            _copy_dir(entry.source, dst)
        else:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry.source, dst)
        logger.debug("Copied %s -> %s", entry.source, entry.target)
        result.copied.append(entry.target)

    return result


def _copy_dir(src: Path, dst: Path) -> None:
    def _ignore(path: str, names: list[str]) -> set[str]:
        return {n for n in names if n in IGNORED_NAMES}

    if dst.exists():
        shutil.rmtree(dst)
    shutil.copytree(src, dst, ignore=_ignore, copy_function=shutil.copyfile)

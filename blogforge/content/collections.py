"""Named collections of documents selected by glob."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..config import BuildConfig
from .frontmatter import Document
from .globbing import match_path


@dataclass(frozen=True)
class Collection:
    """An ordered group of documents.

    Items are held in ascending (date, path) order; listings use
    `reversed_items()` for newest first.
    """

    name: str
    pattern: str
    items: tuple[Document, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def reversed_items(self) -> list[Document]:
        return list(reversed(self.items))

    def titles(self) -> list[str]:
        return [d.title for d in self.items]


def build_collection(name: str, pattern: str, documents: Iterable[Document]) -> Collection:
    """Select the documents whose project-relative path matches pattern."""
    selected = [d for d in documents if match_path(pattern, d.rel_path)]
    selected.sort(key=lambda d: d.sort_key())
    return Collection(name=name, pattern=pattern, items=tuple(selected))


def collect_all(config: BuildConfig, documents: Iterable[Document]) -> dict[str, Collection]:
    docs = list(documents)
    return {
        name: build_collection(name, pattern, docs)
        for name, pattern in sorted(config.collections.items())
    }

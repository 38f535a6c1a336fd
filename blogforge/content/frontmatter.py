"""Load content files and their front-matter into documents."""

from __future__ import annotations

import datetime as dt
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any

import frontmatter
import yaml
from pydantic import BaseModel

from ..errors import FrontMatterError

logger = logging.getLogger(__name__)

# "2024-01-01-example" -> ("2024-01-01", "example")
FILENAME_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})-(.+)$")


class Document(BaseModel):
    """A content file with parsed front-matter."""

    path: Path
    rel_path: str  # relative to the project root
    input_rel: str  # relative to the input directory
    format: str  # template format: "md" or "html"
    data: dict[str, Any]
    body: str
    date: dt.date | None = None
    file_slug: str
    url: str | None
    output_path: str | None  # relative to the output directory

    @property
    def title(self) -> str:
        value = self.data.get("title")
        return str(value).strip() if value is not None else ""

    @property
    def summary(self) -> str:
        value = self.data.get("summary")
        return str(value).strip() if value is not None else ""

    @property
    def layout(self) -> str | None:
        value = self.data.get("layout")
        return str(value) if value else None

    def sort_key(self) -> tuple[int, str, str]:
        # Undated documents sort after dated ones
        if self.date is None:
            return (1, "", self.rel_path)
        return (0, self.date.isoformat(), self.rel_path)


def split_filename_date(stem: str) -> tuple[dt.date | None, str]:
    """Split a `YYYY-MM-DD-slug` stem into its date and slug."""
    m = FILENAME_DATE_RE.match(stem)
    if not m:
        return None, stem
    try:
        return dt.date.fromisoformat(m.group(1)), m.group(2)
    except ValueError:
        return None, stem


def coerce_date(value: Any, path: Path) -> dt.date | None:
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    try:
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return dt.date.fromisoformat(text[:10])
    except ValueError:
        raise FrontMatterError(path, f"unrecognized date {text!r}") from None


def default_url(input_rel: str) -> tuple[str, str]:
    """Map an input-relative path to (url, output_path).

    `index` files map to their directory; everything else gets its own
    directory with an index.html.
    """
    p = PurePosixPath(input_rel)
    stem_path = p.parent / p.stem
    if p.stem == "index":
        parent = p.parent.as_posix()
        if parent in ("", "."):
            return "/", "index.html"
        return f"/{parent}/", f"{parent}/index.html"
    return f"/{stem_path.as_posix()}/", f"{stem_path.as_posix()}/index.html"


def permalink_url(permalink: str) -> tuple[str, str]:
    link = permalink.strip()
    if not link.startswith("/"):
        link = "/" + link
    if link.endswith("/"):
        return link, f"{link.lstrip('/')}index.html"
    return link, link.lstrip("/")


def load_document(path: Path, root: Path, input_dir: Path) -> Document:
    """Read a content file and parse its front-matter.

    Args:
        path: File to read
        root: Project root
        input_dir: Input directory the URL is derived from

    Returns:
        Document with metadata, body, date and output location

    Raises:
        FrontMatterError: If the front-matter block is not valid YAML mapping
    """
    text = path.read_text(encoding="utf-8")
    try:
        parsed = frontmatter.loads(text)
    except yaml.YAMLError as e:
        raise FrontMatterError(path, f"invalid front-matter: {e}") from e
    except (TypeError, ValueError) as e:
        raise FrontMatterError(path, f"invalid front-matter: {e}") from e

    data = dict(parsed.metadata or {})
    rel_path = path.relative_to(root).as_posix()
    input_rel = path.relative_to(input_dir).as_posix()

    file_date, slug = split_filename_date(path.stem)
    if slug == "index" and path.parent != input_dir:
        slug = path.parent.name

    doc_date = coerce_date(data.get("date"), path) or file_date

    url: str | None
    output_path: str | None
    permalink = data.get("permalink")
    if permalink is False:
        url, output_path = None, None
    elif isinstance(permalink, str) and permalink.strip():
        url, output_path = permalink_url(permalink)
    elif permalink is None:
        url, output_path = default_url(input_rel)
    else:
        raise FrontMatterError(path, f"permalink must be a string or false, got {permalink!r}")

    doc = Document(
        path=path,
        rel_path=rel_path,
        input_rel=input_rel,
        format=path.suffix.lstrip(".").lower(),
        data=data,
        body=parsed.content,
        date=doc_date,
        file_slug=slug,
        url=url,
        output_path=output_path,
    )
    logger.debug("Loaded %s -> %s", rel_path, url)
    return doc

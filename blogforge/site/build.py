"""Static site builder: content in, HTML out."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel

from ..config import POSTS_COLLECTION, SITE_CSS_PATH, BuildConfig, load_build_config
from ..content.collections import Collection, collect_all
from ..content.frontmatter import Document, load_document
from ..content.globbing import glob_files
from ..content.passthrough import copy_passthrough, is_passthrough, passthrough_sources
from ..errors import BlogforgeError
from ..render.markdown import MarkdownRenderer
from ..render.plugins import load_plugins
from ..theme.palette import ThemeConfig, load_theme_config
from ..theme.utilities import build_stylesheet
from .styles import CSS
from .templates import LAYOUTS, PostRow, SiteInfo, render_layout

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    """Result of building a site."""

    out_dir: str
    pages: list[str]
    posts: int
    passthrough: list[str]
    assets: list[str]
    warnings: list[str]
    total_bytes: int


def discover_templates(config: BuildConfig, root: Path, out_dir: Path | None = None) -> list[Path]:
    """Template files under the input dir, minus layouts, includes, output and passthrough."""
    input_dir = config.input_path(root)
    if not input_dir.is_dir():
        raise BlogforgeError(f"Input directory not found: {input_dir}")

    formats = ",".join(config.template_formats)
    rel_input = input_dir.relative_to(root).as_posix()
    pattern = f"{rel_input}/**/*.{{{formats}}}"

    excluded = config.excluded_dirs(root)
    if out_dir is not None:
        excluded.append(out_dir.resolve())
    passthrough = passthrough_sources(config, root)
    found: list[Path] = []
    for path in glob_files(root, pattern):
        resolved = path.resolve()
        if any(resolved.is_relative_to(d) for d in excluded):
            continue
        if is_passthrough(resolved, passthrough):
            continue
        found.append(path)
    return found


def load_documents(config: BuildConfig, root: Path, out_dir: Path | None = None) -> list[Document]:
    root = root.resolve()
    input_dir = config.input_path(root)
    return [
        load_document(p.resolve(), root, input_dir)
        for p in discover_templates(config, root, out_dir)
    ]


def load_posts(config: BuildConfig, root: Path) -> Collection:
    """The posts collection for a project, ordered oldest first."""
    collections = collect_all(config, load_documents(config, root))
    return collections.get(POSTS_COLLECTION) or Collection(name=POSTS_COLLECTION, pattern="")


def build_site(
    root: Path,
    config: BuildConfig | None = None,
    theme: ThemeConfig | None = None,
    out_dir: Path | None = None,
) -> BuildReport:
    """Build the site for a project.

    Args:
        root: Project root directory
        config: Build configuration (loaded from the project when omitted)
        theme: Theme configuration (loaded from the project when omitted)
        out_dir: Output directory override

    Returns:
        BuildReport with written pages, copied paths and warnings
    """
    root = root.resolve()
    config = config or load_build_config(root)
    theme = theme or load_theme_config(root)
    out_dir = (out_dir or config.output_path(root)).resolve()
    _check_out_dir(out_dir, root, config)

    plugins = load_plugins(config.plugins)
    warnings: list[str] = []

    documents = load_documents(config, root, out_dir)
    collections = collect_all(config, documents)
    posts = collections.get(POSTS_COLLECTION) or Collection(name=POSTS_COLLECTION, pattern="")
    post_paths = {d.rel_path for d in posts}

    for doc in posts:
        if not doc.title:
            warnings.append(f"{doc.rel_path}: missing title")
        if not doc.summary:
            warnings.append(f"{doc.rel_path}: missing summary")

    rows = [
        PostRow(
            title=d.title or d.file_slug,
            href=d.url,
            date=d.date.isoformat() if d.date else "",
            summary=d.summary,
        )
        for d in posts.reversed_items()
        if d.url
    ]

    stylesheets = [f"/{SITE_CSS_PATH}"]
    for plugin in plugins:
        stylesheets.extend(f"/{s}" for s in plugin.stylesheets())
    site = SiteInfo(title=config.site_title, stylesheets=tuple(stylesheets))
    renderer = MarkdownRenderer(plugins)

    rendered: dict[str, str] = {}
    sources: dict[str, str] = {}
    for doc in sorted(documents, key=lambda d: d.rel_path):
        if doc.output_path is None:
            logger.debug("Skipping %s (permalink: false)", doc.rel_path)
            continue
        _output_file(out_dir, doc.output_path, doc.rel_path)
        if doc.output_path in rendered:
            raise BlogforgeError(
                f"Output conflict: {doc.rel_path} and {sources[doc.output_path]} "
                f"both write {doc.output_path}"
            )
        rendered[doc.output_path] = _render_document(doc, renderer, site, rows, doc.rel_path in post_paths)
        sources[doc.output_path] = doc.rel_path

    if "index.html" not in rendered:
        rendered["index.html"] = render_layout("home", site, config.site_title, "", rows=rows)

    if out_dir.exists():
        shutil.rmtree(out_dir)
    out_dir.mkdir(parents=True)

    copied = copy_passthrough(config, root, out_dir)
    warnings.extend(copied.warnings)

    for rel, html in sorted(rendered.items()):
        target = _output_file(out_dir, rel, sources.get(rel, rel))
        if target.exists():
            warnings.append(f"{sources.get(rel, rel)} overwrites passthrough file {rel}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")

    assets: dict[str, str] = {}
    for plugin in plugins:
        assets.update(plugin.assets())
    assets[SITE_CSS_PATH] = build_stylesheet(root, theme, CSS, extra_sources=rendered.values())
    for rel, text in sorted(assets.items()):
        target = out_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")

    report = BuildReport(
        out_dir=str(out_dir),
        pages=sorted(rendered),
        posts=len(posts),
        passthrough=copied.copied,
        assets=sorted(assets),
        warnings=warnings,
        total_bytes=_dir_size_bytes(out_dir),
    )
    logger.info(
        "Built %d pages (%d posts) into %s with %d warnings",
        len(report.pages),
        report.posts,
        out_dir,
        len(warnings),
    )
    return report


def _render_document(
    doc: Document,
    renderer: MarkdownRenderer,
    site: SiteInfo,
    rows: list[PostRow],
    is_post: bool,
) -> str:
    if doc.format == "md":
        content_html = renderer.render(doc.body)
    else:
        content_html = doc.body
        if doc.layout is None and _is_full_document(content_html):
            return content_html if content_html.endswith("\n") else content_html + "\n"

    layout = doc.layout or ("post" if is_post else "home" if doc.url == "/" else "page")
    if layout not in LAYOUTS:
        raise BlogforgeError(
            f"{doc.rel_path}: unknown layout {layout!r} (available: {', '.join(LAYOUTS)})"
        )

    return render_layout(
        layout,
        site,
        title=doc.title or ("" if doc.url == "/" else doc.file_slug),
        content_html=content_html,
        date=doc.date.isoformat() if doc.date else "",
        summary=doc.summary,
        rows=rows,
    )


def _output_file(out_dir: Path, rel: str, source: str) -> Path:
    """Resolve an output-relative path, which must stay inside out_dir."""
    target = (out_dir / rel).resolve()
    if target == out_dir or not target.is_relative_to(out_dir):
        raise BlogforgeError(f"{source}: output path {rel!r} escapes the output directory")
    return target


def _is_full_document(html: str) -> bool:
    head = html.lstrip()[:20].lower()
    return head.startswith(("<!doctype", "<html"))


def _check_out_dir(out_dir: Path, root: Path, config: BuildConfig) -> None:
    input_dir = config.input_path(root)
    # The output dir is wiped before every build
    if out_dir == root or root.is_relative_to(out_dir):
        raise BlogforgeError(f"Refusing to build into {out_dir}: it contains the project")
    if out_dir == input_dir or input_dir.is_relative_to(out_dir):
        raise BlogforgeError(f"Refusing to build into {out_dir}: it contains the input directory")


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total

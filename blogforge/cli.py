"""CLI entry point for blogforge."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import re
import sys
from pathlib import Path
from typing import Any

import frontmatter

from . import __version__
from .config import LOG_LEVEL, POSTS_COLLECTION, load_build_config
from .content.globbing import literal_dir
from .errors import BlogforgeError

logger = logging.getLogger(__name__)


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blogforge",
        description="Build a personal Markdown blog into a static site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"blogforge {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More log output (-vv for debug)")
    parser.add_argument("--root", type=Path, default=Path("."), help="Project root directory")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: blogforge.yaml)")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the site")
    p_build.add_argument("--out", "-o", type=Path, default=None, help="Output directory override")

    sub.add_parser("check", help="Verify passthrough paths, posts and theme")

    p_list = sub.add_parser("list", help="List posts, newest first")
    p_list.add_argument("--limit", "-n", type=int, default=None, help="Number of posts to show")

    p_new = sub.add_parser("new", help="Create a new post file")
    p_new.add_argument("title", help="Post title")
    p_new.add_argument("--summary", "-s", required=True, help="One-line summary")
    p_new.add_argument("--date", "-d", default=None, help="Post date YYYY-MM-DD (default: today)")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.cmd == "build":
            return _cmd_build(args)
        if args.cmd == "check":
            return _cmd_check(args)
        if args.cmd == "list":
            return _cmd_list(args)
        if args.cmd == "new":
            return _cmd_new(args)
    except BlogforgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cmd_build(args: Any) -> int:
    from .site.build import build_site
    from .theme.palette import load_theme_config

    root = args.root.resolve()
    config = load_build_config(root, args.config)
    theme = load_theme_config(root, args.config)
    report = build_site(root, config=config, theme=theme, out_dir=args.out)

    print("✓ Site built")
    print(f"  Output: {report.out_dir}")
    print(f"  Pages: {len(report.pages)}")
    print(f"  Posts: {report.posts}")
    print(f"  Passthrough: {len(report.passthrough)}")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings[:10]:
            print(f"  - {w}")
        if len(report.warnings) > 10:
            print(f"  ... and {len(report.warnings) - 10} more")
    return 0


def _cmd_check(args: Any) -> int:
    from .site.verify import run_checks
    from .theme.palette import load_theme_config

    root = args.root.resolve()
    config = load_build_config(root, args.config)
    theme = load_theme_config(root, args.config)
    issues = run_checks(config, theme, root)

    if not issues:
        print("✓ All checks passed")
        return 0

    print(f"{len(issues)} issue(s) found:")
    for issue in issues:
        print(f"  - {issue}")
    return 1


def _cmd_list(args: Any) -> int:
    from .site.build import load_posts

    root = args.root.resolve()
    config = load_build_config(root, args.config)
    posts = load_posts(config, root).reversed_items()
    if args.limit is not None:
        posts = posts[: max(args.limit, 0)]

    if not posts:
        print("No posts found")
        return 0

    for doc in posts:
        when = doc.date.isoformat() if doc.date else "undated"
        print(f"  {when:10}  {doc.title or doc.file_slug}")
    return 0


def slugify(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", "-", text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", "-")
    return text or "post"


def _cmd_new(args: Any) -> int:
    root = args.root.resolve()
    config = load_build_config(root, args.config)

    try:
        when = dt.date.fromisoformat(args.date) if args.date else dt.date.today()
    except ValueError:
        print(f"Error: invalid date {args.date!r}, expected YYYY-MM-DD", file=sys.stderr)
        return 2

    pattern = config.collections.get(POSTS_COLLECTION)
    if pattern is None:
        print(f"Error: no {POSTS_COLLECTION!r} collection configured", file=sys.stderr)
        return 1
    posts_dir = root / literal_dir(pattern)

    path = posts_dir / f"{when.isoformat()}-{slugify(args.title)}.md"
    if path.exists():
        print(f"Error: {path} already exists", file=sys.stderr)
        return 1

    post = frontmatter.Post("\n", title=args.title, summary=args.summary)
    posts_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(frontmatter.dumps(post, sort_keys=False) + "\n", encoding="utf-8")
    logger.info("Created %s", path)
    print(f"✓ Post created: {path.relative_to(root)}")
    return 0


if __name__ == "__main__":
    app()

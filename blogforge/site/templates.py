"""Built-in HTML layouts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

LAYOUTS = ("base", "page", "post", "home")


@dataclass(frozen=True)
class SiteInfo:
    title: str
    stylesheets: tuple[str, ...]


@dataclass(frozen=True)
class PostRow:
    title: str
    href: str
    date: str
    summary: str


def html_doc(
    title: str,
    header_left: str,
    header_right: str,
    body: str,
    stylesheets: Iterable[str] = (),
    description: str = "",
) -> str:
    links = "".join(
        f'<link rel="stylesheet" href="{escape(href, quote=True)}">\n' for href in stylesheets
    )
    meta_desc = (
        f'<meta name="description" content="{escape(description, quote=True)}">\n'
        if description
        else ""
    )
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"{meta_desc}"
        f"{links}"
        "</head>\n"
        "<body>\n"
        "<header>\n"
        f"<div>{header_left}</div>\n"
        f"<nav>{header_right}</nav>\n"
        "</header>\n"
        "<main>\n"
        f"{body}\n"
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str, cls: str = "") -> str:
    attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f'<a href="{escape(href, quote=True)}"{attr}>{escape(text)}</a>'


def h1(text: str) -> str:
    return f'<h1 class="font-title text-gray-950">{escape(text)}</h1>'


def muted(text: str) -> str:
    return f'<div class="muted">{escape(text)}</div>'


def posts_list(rows: Iterable[PostRow]) -> str:
    lines = ['<ul class="posts">']
    for r in rows:
        lines.append(
            "<li>"
            f"{link(r.href, r.title, 'hover:text-blue-800')}"
            + (f" {muted(r.date)}" if r.date else "")
            + (f'<p class="summary">{escape(r.summary)}</p>' if r.summary else "")
            + "</li>"
        )
    lines.append("</ul>")
    return "\n".join(lines)


def page_body(title: str, content_html: str) -> str:
    lines = [h1(title)] if title else []
    lines.append(content_html)
    return "\n".join(lines)


def post_body(title: str, date: str, summary: str, content_html: str) -> str:
    lines = ["<article>", h1(title)]
    if date:
        lines.append(f'<time class="muted" datetime="{escape(date, quote=True)}">{escape(date)}</time>')
    if summary:
        lines.append(f'<p class="summary">{escape(summary)}</p>')
    lines.append(content_html)
    lines.append("</article>")
    return "\n".join(lines)


def home_body(title: str, content_html: str, rows: Iterable[PostRow]) -> str:
    lines = [h1(title)] if title else []
    if content_html.strip():
        lines.append(content_html)
    lines.append(posts_list(rows))
    return "\n".join(lines)


def render_layout(
    layout: str,
    site: SiteInfo,
    title: str,
    content_html: str,
    date: str = "",
    summary: str = "",
    rows: Iterable[PostRow] = (),
) -> str:
    """Wrap rendered content in one of the built-in layouts.

    Raises:
        KeyError: If layout is not one of LAYOUTS
    """
    if layout == "base":
        body = content_html
    elif layout == "page":
        body = page_body(title, content_html)
    elif layout == "post":
        body = post_body(title, date, summary, content_html)
    elif layout == "home":
        body = home_body(title, content_html, rows)
    else:
        raise KeyError(layout)

    doc_title = f"{title} · {site.title}" if title and title != site.title else site.title
    return html_doc(
        title=doc_title,
        header_left=link("/", site.title, "font-title text-gray-950"),
        header_right=link("/", "Posts"),
        body=body,
        stylesheets=site.stylesheets,
        description=summary,
    )

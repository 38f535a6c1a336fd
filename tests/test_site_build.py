"""Tests for the static site builder."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from blogforge.config import BuildConfig
from blogforge.errors import BlogforgeError
from blogforge.site.build import build_site, discover_templates


def _make_project(root: Path) -> None:
    src = root / "src"
    (src / "_posts").mkdir(parents=True)
    (src / "_layouts").mkdir()
    (src / "assets" / "css").mkdir(parents=True)
    (src / "CNAME").write_text("blog.example.com\n", encoding="utf-8")
    (src / "assets" / "css" / "extra.css").write_text("p { color: red; }\n", encoding="utf-8")
    (src / "_layouts" / "post.html").write_text("<article></article>\n", encoding="utf-8")
    (src / "about.md").write_text(
        '---\ntitle: About\n---\n\n<p class="text-blue-700">Hi</p>\n', encoding="utf-8"
    )
    (src / "_posts" / "2024-01-01-example.md").write_text(
        '---\ntitle: "Example"\nsummary: "An example post."\n---\n\n'
        "Intro.\n\n```python\nprint('x')\n```\n",
        encoding="utf-8",
    )
    (src / "_posts" / "2024-02-01-second.md").write_text(
        '---\ntitle: "Second"\nsummary: "Another one."\n---\n\nMore.\n',
        encoding="utf-8",
    )


def _snapshot(out: Path) -> dict[str, bytes]:
    return {
        p.relative_to(out).as_posix(): p.read_bytes()
        for p in sorted(out.rglob("*"))
        if p.is_file()
    }


class TestBuildSite(unittest.TestCase):
    def test_build_writes_pages_assets_and_passthrough(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)

            report = build_site(root)
            out = root / "_site"

            self.assertEqual(report.posts, 2)
            self.assertEqual(report.warnings, [])
            self.assertEqual(
                report.pages,
                [
                    "_posts/2024-01-01-example/index.html",
                    "_posts/2024-02-01-second/index.html",
                    "about/index.html",
                    "index.html",
                ],
            )
            self.assertEqual(report.passthrough, ["CNAME", "assets"])
            self.assertEqual(report.assets, ["css/highlight.css", "css/site.css"])

            self.assertTrue((out / "CNAME").exists())
            self.assertTrue((out / "assets" / "css" / "extra.css").exists())
            self.assertFalse((out / "_layouts").exists())

            home = (out / "index.html").read_text(encoding="utf-8")
            self.assertLess(home.index("Second"), home.index("Example"))
            self.assertIn('href="/_posts/2024-01-01-example/"', home)
            self.assertIn("An example post.", home)

            post = (out / "_posts" / "2024-01-01-example" / "index.html").read_text(encoding="utf-8")
            self.assertIn("<title>Example · Blog</title>", post)
            self.assertIn('class="highlight"', post)
            self.assertIn('href="/css/highlight.css"', post)

            css = (out / "css" / "site.css").read_text(encoding="utf-8")
            self.assertIn(".text-blue-700 {", css)
            self.assertIn(".font-title {", css)

    def test_rebuild_is_byte_identical(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            out = root / "_site"

            build_site(root)
            first = _snapshot(out)
            (out / "stale.html").write_text("old", encoding="utf-8")
            build_site(root)

            self.assertEqual(_snapshot(out), first)

    def test_rebuild_into_output_dir_under_input(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td).resolve()
            _make_project(root)
            out = root / "src" / "preview"

            first_report = build_site(root, out_dir=out)
            first = _snapshot(out)
            second_report = build_site(root, out_dir=out)

            self.assertEqual(_snapshot(out), first)
            self.assertEqual(second_report.pages, first_report.pages)
            self.assertFalse((out / "preview").exists())

    def test_missing_summary_and_passthrough_are_warnings(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src" / "_posts").mkdir(parents=True)
            (root / "src" / "_posts" / "2024-01-01-x.md").write_text(
                "---\ntitle: X\n---\nbody\n", encoding="utf-8"
            )

            report = build_site(root)
            self.assertIn("src/_posts/2024-01-01-x.md: missing summary", report.warnings)
            self.assertIn("Passthrough path not found: src/CNAME", report.warnings)

    def test_index_page_uses_home_layout(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            (root / "src" / "index.md").write_text("Welcome to the blog.\n", encoding="utf-8")

            build_site(root)
            home = (root / "_site" / "index.html").read_text(encoding="utf-8")
            self.assertIn("Welcome to the blog.", home)
            self.assertIn('<ul class="posts">', home)

    def test_full_html_document_is_written_as_is(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            doc = "<!doctype html>\n<html><body>raw</body></html>\n"
            (root / "src" / "raw.html").write_text(doc, encoding="utf-8")

            build_site(root)
            self.assertEqual((root / "_site" / "raw" / "index.html").read_text(encoding="utf-8"), doc)

    def test_unknown_layout_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            (root / "src" / "x.md").write_text("---\nlayout: gallery\n---\nx\n", encoding="utf-8")

            with self.assertRaises(BlogforgeError):
                build_site(root)

    def test_output_conflict_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            (root / "src" / "a.md").write_text("---\npermalink: /same/\n---\na\n", encoding="utf-8")
            (root / "src" / "b.md").write_text("---\npermalink: /same/\n---\nb\n", encoding="utf-8")

            with self.assertRaises(BlogforgeError):
                build_site(root)

    def test_permalink_outside_output_dir_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td) / "blog"
            (root / "src").mkdir(parents=True)
            (root / "src" / "a.md").write_text(
                "---\npermalink: /../../escaped.html\n---\na\n", encoding="utf-8"
            )

            with self.assertRaises(BlogforgeError):
                build_site(root)
            self.assertFalse((Path(td) / "escaped.html").exists())
            self.assertFalse((root / "escaped.html").exists())

    def test_refuses_to_wipe_input(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            with self.assertRaises(BlogforgeError):
                build_site(root, config=BuildConfig(output_dir="src"))
            self.assertTrue((root / "src").exists())


class TestExampleProject(unittest.TestCase):
    def test_example_builds_cleanly(self) -> None:
        from blogforge.config import load_build_config
        from blogforge.theme.palette import load_theme_config

        root = Path(__file__).resolve().parent.parent / "example"
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "site"
            report = build_site(
                root,
                config=load_build_config(root),
                theme=load_theme_config(root),
                out_dir=out,
            )

            self.assertEqual(report.warnings, [])
            self.assertEqual(report.posts, 2)
            self.assertEqual((out / "CNAME").read_text(encoding="utf-8"), "notes.example.com\n")
            self.assertTrue((out / "assets" / "img" / "mark.svg").exists())

            home = (out / "index.html").read_text(encoding="utf-8")
            self.assertIn("<title>Field Notes</title>", home)
            self.assertLess(home.index("Why I keep this blog static"), home.index("An example post."))

            css = (out / "css" / "site.css").read_text(encoding="utf-8")
            self.assertIn(".text-amber-700 {", css)
            self.assertIn(".font-sans {", css)


class TestDiscoverTemplates(unittest.TestCase):
    def test_skips_layouts_includes_and_passthrough(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td).resolve()
            _make_project(root)
            (root / "src" / "_includes").mkdir()
            (root / "src" / "_includes" / "nav.html").write_text("<nav></nav>", encoding="utf-8")
            (root / "src" / "assets" / "readme.md").write_text("x", encoding="utf-8")

            found = [p.relative_to(root).as_posix() for p in discover_templates(BuildConfig(), root)]
            self.assertEqual(
                found,
                [
                    "src/_posts/2024-01-01-example.md",
                    "src/_posts/2024-02-01-second.md",
                    "src/about.md",
                ],
            )


if __name__ == "__main__":
    unittest.main()

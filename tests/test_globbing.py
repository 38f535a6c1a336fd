"""Tests for glob matching and brace expansion."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from blogforge.content.globbing import expand_braces, glob_files, literal_dir, match_path


class TestExpandBraces(unittest.TestCase):
    def test_expands_alternatives(self) -> None:
        self.assertEqual(
            expand_braces("./src/**/*.{html,md}"),
            ["./src/**/*.html", "./src/**/*.md"],
        )

    def test_no_braces_is_identity(self) -> None:
        self.assertEqual(expand_braces("src/_posts/*.md"), ["src/_posts/*.md"])

    def test_unbalanced_brace_is_literal(self) -> None:
        self.assertEqual(expand_braces("src/{a,b"), ["src/{a,b"])


class TestMatchPath(unittest.TestCase):
    def test_single_star_stays_in_directory(self) -> None:
        self.assertTrue(match_path("src/_posts/*.md", "src/_posts/2024-01-01-a.md"))
        self.assertFalse(match_path("src/_posts/*.md", "src/_posts/drafts/b.md"))
        self.assertFalse(match_path("src/_posts/*.md", "src/_posts/notes.txt"))

    def test_double_star_spans_directories(self) -> None:
        self.assertTrue(match_path("./src/**/*.{html,md}", "src/index.md"))
        self.assertTrue(match_path("./src/**/*.{html,md}", "src/_layouts/post.html"))
        self.assertFalse(match_path("./src/**/*.{html,md}", "src/assets/site.css"))

    def test_character_classes(self) -> None:
        self.assertTrue(match_path("src/[!_]*.md", "src/about.md"))
        self.assertFalse(match_path("src/[!_]*.md", "src/_draft.md"))
        self.assertTrue(match_path("src/[ab].md", "src/b.md"))

    def test_metacharacters_inside_class_are_literal(self) -> None:
        self.assertTrue(match_path("a[]]b", "a]b"))
        self.assertTrue(match_path("x[[]y", "x[y"))
        self.assertTrue(match_path("v[^]w", "v^w"))
        self.assertFalse(match_path("v[^]w", "vxw"))
        self.assertTrue(match_path("m[a&~|]n", "m&n"))

    def test_unclosed_class_is_literal(self) -> None:
        self.assertTrue(match_path("a[b", "a[b"))
        self.assertFalse(match_path("a[b", "ab"))


class TestLiteralDir(unittest.TestCase):
    def test_stops_at_first_wildcard_directory(self) -> None:
        self.assertEqual(literal_dir("src/_posts/*.md"), "src/_posts")
        self.assertEqual(literal_dir("./src/_posts/**/*.md"), "src/_posts")
        self.assertEqual(literal_dir("src/*/posts/*.md"), "src")
        self.assertEqual(literal_dir("*.md"), "")


class TestGlobFiles(unittest.TestCase):
    def test_returns_sorted_matches(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            posts = root / "src" / "_posts"
            posts.mkdir(parents=True)
            for name in ["b.md", "a.md", "c.txt"]:
                (posts / name).write_text("x", encoding="utf-8")

            found = [p.name for p in glob_files(root, "src/_posts/*.md")]
            self.assertEqual(found, ["a.md", "b.md"])

    def test_literal_pattern_and_missing_base(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            (root / "src" / "CNAME").write_text("blog.example.com\n", encoding="utf-8")

            self.assertEqual(len(glob_files(root, "src/CNAME")), 1)
            self.assertEqual(glob_files(root, "nowhere/*.md"), [])


if __name__ == "__main__":
    unittest.main()

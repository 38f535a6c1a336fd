"""Tests for project consistency checks."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from blogforge.config import BuildConfig
from blogforge.site.verify import (
    check_collection_glob,
    check_front_matter,
    check_palette,
    check_passthrough,
    run_checks,
)
from blogforge.theme.palette import ThemeConfig


def _make_project(root: Path) -> None:
    (root / "src" / "_posts").mkdir(parents=True)
    (root / "src" / "assets").mkdir()
    (root / "src" / "CNAME").write_text("blog.example.com\n", encoding="utf-8")
    (root / "src" / "_posts" / "2024-01-01-example.md").write_text(
        '---\ntitle: "Example"\nsummary: "An example post."\n---\nBody\n', encoding="utf-8"
    )


class TestChecks(unittest.TestCase):
    def test_clean_project_passes(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            self.assertEqual(run_checks(BuildConfig(), ThemeConfig(), root), [])

    def test_missing_passthrough(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            (root / "src" / "CNAME").unlink()

            issues = check_passthrough(BuildConfig(), root)
            self.assertEqual([i.message for i in issues], ["path does not exist: src/CNAME"])

    def test_collection_glob_mismatch(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            (root / "src" / "_posts" / "draft.markdown").write_text("x", encoding="utf-8")

            narrow = BuildConfig(collections={"posts": "src/_posts/2025-*.md"})
            issues = check_collection_glob(narrow, root)
            self.assertEqual(len(issues), 1)
            self.assertIn("2024-01-01-example.md", issues[0].message)

            wide = BuildConfig(collections={"posts": "src/_posts/*"})
            issues = check_collection_glob(wide, root)
            self.assertEqual(len(issues), 1)
            self.assertIn("draft.markdown", issues[0].message)

    def test_front_matter_fields(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _make_project(root)
            (root / "src" / "_posts" / "2024-02-01-bare.md").write_text(
                '---\ntitle: ""\n---\nBody\n', encoding="utf-8"
            )
            (root / "src" / "_posts" / "2024-03-01-broken.md").write_text(
                "---\ntitle: [oops\n---\n", encoding="utf-8"
            )

            messages = [i.message for i in check_front_matter(BuildConfig(), root)]
            self.assertEqual(len(messages), 3)
            self.assertIn("2024-03-01-broken.md", messages[0])
            self.assertIn("src/_posts/2024-02-01-bare.md: missing or empty title", messages)
            self.assertIn("src/_posts/2024-02-01-bare.md: missing or empty summary", messages)


class TestPaletteCheck(unittest.TestCase):
    def test_default_palette_is_complete(self) -> None:
        self.assertEqual(check_palette(ThemeConfig()), [])

    def test_missing_shade_and_duplicate_name(self) -> None:
        colors = dict(ThemeConfig().colors)
        colors["green"] = {k: v for k, v in colors["green"].items() if k != "950"}
        colors["gray-50"] = "#ffffff"
        colors.pop("amber")

        messages = [i.message for i in check_palette(ThemeConfig(colors=colors))]
        self.assertIn("green-950 is not defined", messages)
        self.assertIn("scale 'amber' is not defined", messages)
        self.assertTrue(any(m.startswith("duplicate colour name 'gray-50'") for m in messages))

    def test_rejects_non_hex_values(self) -> None:
        colors = dict(ThemeConfig().colors)
        colors["red"] = {**colors["red"], "500": "crimson"}
        messages = [i.message for i in check_palette(ThemeConfig(colors=colors))]
        self.assertEqual(messages, ["red-500 is not a hex colour: crimson"])


if __name__ == "__main__":
    unittest.main()

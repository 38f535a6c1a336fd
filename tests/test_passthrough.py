"""Tests for passthrough copy."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from blogforge.config import BuildConfig
from blogforge.content.passthrough import copy_passthrough, resolve_passthrough


def _project(root: Path) -> None:
    (root / "src" / "assets" / "img").mkdir(parents=True)
    (root / "src" / "CNAME").write_text("blog.example.com\n", encoding="utf-8")
    (root / "src" / "assets" / "img" / "logo.png").write_bytes(b"\x89PNG\r\n")
    (root / "src" / "assets" / ".DS_Store").write_bytes(b"junk")


class TestPassthrough(unittest.TestCase):
    def test_copies_files_and_directories_relative_to_input(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _project(root)
            out = root / "_site"

            result = copy_passthrough(BuildConfig(), root, out)

            self.assertEqual(result.copied, ["CNAME", "assets"])
            self.assertEqual(result.warnings, [])
            self.assertEqual((out / "CNAME").read_text(encoding="utf-8"), "blog.example.com\n")
            self.assertEqual((out / "assets" / "img" / "logo.png").read_bytes(), b"\x89PNG\r\n")
            self.assertFalse((out / "assets" / ".DS_Store").exists())

    def test_missing_path_is_a_warning(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            result = copy_passthrough(BuildConfig(), root, root / "_site")

            self.assertEqual(result.copied, [])
            self.assertEqual(len(result.warnings), 2)
            self.assertIn("src/CNAME", result.warnings[0])

    def test_glob_and_outside_input(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "src").mkdir()
            (root / "static").mkdir()
            (root / "static" / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
            (root / "src" / "a.webmanifest").write_text("{}", encoding="utf-8")

            config = BuildConfig(passthrough=["static/robots.txt", "src/*.webmanifest"])
            entries, missing = resolve_passthrough(config, root)

            self.assertEqual(missing, [])
            self.assertEqual([e.target for e in entries], ["static/robots.txt", "a.webmanifest"])


if __name__ == "__main__":
    unittest.main()

"""Tests for the command line interface."""

from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from techblog.cli import main

POST = """---
title: Getting Started
description: Intro.
published_time: 2025-09-30
---

## Install

### Requirements

## Usage
"""


def _run(argv: list[str]) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_toc_prints_indented_headings(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "getting-started.md"
            path.write_text(POST, encoding="utf-8")
            code, out, _ = _run(["toc", str(path)])
        self.assertEqual(code, 0)
        self.assertEqual(
            out.splitlines(),
            ["- Install  #install", "  - Requirements  #requirements", "- Usage  #usage"],
        )

    def test_toc_reads_html(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "page.html"
            path.write_text('<h2 id="a">A</h2><h2>Loose</h2>', encoding="utf-8")
            code, out, _ = _run(["toc", str(path), "--include-unanchored"])
        self.assertEqual(code, 0)
        self.assertIn("- Loose  (no anchor)", out)

    def test_toc_bad_levels(self) -> None:
        code, _, err = _run(["toc", "missing.md", "--levels", "two"])
        self.assertEqual(code, 2)
        self.assertIn("Error:", err)

    def test_build_and_check(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            content.mkdir()
            (content / "getting-started.md").write_text(POST, encoding="utf-8")
            (content / "draft.md").write_text("---\ntitle: Draft\n---\nBody\n", encoding="utf-8")

            code, out, _ = _run(["build", "--content", str(content), "--out", str(Path(td) / "site")])
            self.assertEqual(code, 0)
            self.assertIn("Posts: 2", out)
            self.assertIn("draft: missing description", out)

            code, out, _ = _run(["check", "--content", str(content)])
            self.assertEqual(code, 0)
            self.assertIn("Checked 2 posts", out)

            code, _, _ = _run(["check", "--content", str(content), "--strict"])
            self.assertEqual(code, 1)

    def test_build_reports_content_errors(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            content.mkdir()
            (content / "broken.md").write_text("---\ndescription: no title\n---\n", encoding="utf-8")
            code, _, err = _run(["build", "--content", str(content), "--out", str(Path(td) / "site")])
        self.assertEqual(code, 1)
        self.assertIn("broken.md", err)


if __name__ == "__main__":
    unittest.main()

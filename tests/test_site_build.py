"""Tests for the static site generator."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from techblog.content.posts import ContentError, load_post
from techblog.site.build import build_site, lint_post, render_post_page

ARTICLE = """---
title: From Zero to Deployed
description: Docker in an hour with AI.
published_time: 2025-10-01
tags: [docker, ai]
---

# From Zero to Deployed

## The problem

Text.

### Costs

More text.

## The solution

Done.
"""

NO_TOC = """---
title: Short note
description: Nothing to navigate.
published_time: 2025-09-01
---

Just a paragraph.
"""


class TestSiteBuild(unittest.TestCase):
    def test_build_site_writes_pages(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            out = Path(td) / "site"
            (content / "public").mkdir(parents=True)
            (content / "public" / "og-image.png").write_bytes(b"png")
            (content / "deploy-docker-with-ai.md").write_text(ARTICLE, encoding="utf-8")
            (content / "short-note.md").write_text(NO_TOC, encoding="utf-8")

            report = build_site(content, out, base_url="https://blog.example.com")

            self.assertEqual(report.posts, 2)
            self.assertEqual(report.warnings, [])
            self.assertTrue((out / "index.html").exists())
            self.assertTrue((out / "robots.txt").exists())
            self.assertTrue((out / "sitemap.xml").exists())
            self.assertTrue((out / "og-image.png").exists())
            self.assertIn("blog/deploy-docker-with-ai/index.html", report.pages)

            page = (out / "blog" / "deploy-docker-with-ai" / "index.html").read_text(encoding="utf-8")
            self.assertIn('<aside>\n<nav class="toc"', page)
            self.assertIn('href="#the-problem"', page)
            self.assertIn('href="#costs"', page)
            self.assertNotIn('href="#from-zero-to-deployed"', page)
            self.assertIn("IntersectionObserver", page)
            self.assertIn('"@type": "BlogPosting"', page)

            note = (out / "blog" / "short-note" / "index.html").read_text(encoding="utf-8")
            self.assertNotIn("<aside>", note)
            self.assertNotIn("IntersectionObserver", note)

            home = (out / "index.html").read_text(encoding="utf-8")
            self.assertLess(home.index("From Zero to Deployed"), home.index("Short note"))
            self.assertIn('<span class="chip">docker</span>', home)

    def test_toc_can_be_disabled_per_post(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "no-toc.md"
            path.write_text(ARTICLE.replace("tags: [docker, ai]", "toc: false"), encoding="utf-8")
            page = render_post_page(load_post(path), base_url="https://blog.example.com")
        self.assertNotIn('<nav class="toc"', page)

    def test_duplicate_slugs_fail_the_build(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            content.mkdir()
            (content / "a.md").write_text("---\ntitle: A\nslug: same\n---\nx\n", encoding="utf-8")
            (content / "b.md").write_text("---\ntitle: B\nslug: same\n---\nx\n", encoding="utf-8")
            with self.assertRaises(ContentError):
                build_site(content, Path(td) / "site")


class TestLintPost(unittest.TestCase):
    def test_reports_missing_fields_and_unanchored_headings(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "rough.md"
            path.write_text("---\ntitle: Rough\n---\n\n## ???\n\n## Fine\n", encoding="utf-8")
            problems = lint_post(load_post(path))
        self.assertIn("rough: missing description", problems)
        self.assertIn("rough: missing published_time", problems)
        self.assertTrue(any("has no anchor" in p for p in problems))


if __name__ == "__main__":
    unittest.main()

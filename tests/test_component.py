"""End-to-end tests for the table of contents component."""

from __future__ import annotations

import unittest

from techblog.toc.component import TableOfContents
from techblog.toc.headings import HTMLHeadingSource
from techblog.toc.viewport import SimulatedViewport, VisibilityEntry

DOC = (
    '<h1 id="title">Deploying</h1>'
    '<h2 id="section-1">Why</h2><p>...</p>'
    '<h2 id="section-2">How</h2><p>...</p>'
    '<h3 id="section-2-a">Docker</h3><p>...</p>'
    '<h2 id="section-3">Wrap-up</h2>'
)


class TestTableOfContents(unittest.TestCase):
    def setUp(self) -> None:
        self.viewport = SimulatedViewport(height=800.0, scroll_margin_top=80.0)
        self.viewport.layout_stack(
            ["title", "section-1", "section-2", "section-2-a", "section-3"],
            spacing=700.0,
            start=0.0,
        )
        self.toc = TableOfContents(HTMLHeadingSource(DOC), self.viewport, self.viewport)

    def test_mount_extracts_then_observes(self) -> None:
        self.toc.mount()
        self.assertEqual([h.id for h in self.toc.headings], ["section-1", "section-2", "section-2-a", "section-3"])
        self.assertEqual(self.viewport.active_subscriptions, 1)

    def test_render_reflects_active_heading(self) -> None:
        with self.toc:
            self.viewport.emit([VisibilityEntry("section-2", True)])
            html = self.toc.render()
        self.assertIn('<li class="toc-level-2 active"><a href="#section-2"', html)
        self.assertIn('class="toc-level-3" style="padding-left:', html)

    def test_activation_scrolls_and_tracker_follows(self) -> None:
        self.toc.mount()
        event = self.toc.activate("section-3")
        self.assertTrue(event.default_prevented)
        self.assertEqual([c.element_id for c in self.viewport.scroll_calls], ["section-3"])
        self.assertEqual(self.toc.active_id, "section-3")

    def test_activation_of_stale_target(self) -> None:
        self.toc.mount()
        self.viewport.remove("section-3")
        event = self.toc.activate("section-3")
        self.assertTrue(event.default_prevented)
        self.assertEqual(self.viewport.scroll_calls, [])

    def test_unmount_releases_observation(self) -> None:
        dispose = self.toc.mount()
        dispose()
        self.assertEqual(self.viewport.active_subscriptions, 0)
        self.viewport.emit([VisibilityEntry("section-1", True)])
        self.assertIsNone(self.toc.active_id)

    def test_document_without_headings_renders_nothing(self) -> None:
        toc = TableOfContents(HTMLHeadingSource("<p>No sections</p>"), self.viewport, self.viewport)
        with toc:
            self.assertEqual(toc.render(), "")
            self.assertEqual(self.viewport.active_subscriptions, 0)

    def test_failed_mount_keeps_component_unmounted(self) -> None:
        toc = TableOfContents(HTMLHeadingSource(DOC), self.viewport, self.viewport, root_margin="10em")
        with self.assertRaises(ValueError):
            toc.mount()
        self.assertIsNone(toc.tracker)
        self.assertEqual(toc.headings, [])
        self.assertEqual(self.viewport.active_subscriptions, 0)


if __name__ == "__main__":
    unittest.main()

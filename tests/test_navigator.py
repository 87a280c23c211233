"""Tests for smooth-scroll navigation."""

from __future__ import annotations

import unittest

from techblog.toc.navigator import NavigationEvent, Navigator
from techblog.toc.viewport import ScrollCall, SimulatedViewport


class _VanishingScroller:
    """Target disappears between the existence check and the scroll."""

    def has_element(self, element_id: str) -> bool:
        return True

    def scroll_into_view(self, element_id: str, behavior: str = "smooth", block: str = "start") -> None:
        raise KeyError(element_id)


class TestNavigator(unittest.TestCase):
    def setUp(self) -> None:
        self.viewport = SimulatedViewport()
        self.viewport.layout_stack(["section-1", "section-2"], start=100.0)
        self.navigator = Navigator(self.viewport)

    def test_scrolls_smoothly_once_and_prevents_default(self) -> None:
        event = NavigationEvent("section-2")
        self.navigator.activate(event)
        self.assertTrue(event.default_prevented)
        self.assertEqual(self.viewport.scroll_calls, [ScrollCall("section-2", "smooth", "start")])
        self.assertEqual(self.viewport.scroll_y, 700.0)

    def test_missing_target_is_silent_noop(self) -> None:
        event = NavigationEvent("gone")
        self.assertIsNone(self.navigator.activate(event))
        self.assertTrue(event.default_prevented)
        self.assertEqual(self.viewport.scroll_calls, [])
        self.assertEqual(self.viewport.scroll_y, 0.0)

    def test_target_removed_after_render(self) -> None:
        self.viewport.remove("section-2")
        self.navigator.activate(NavigationEvent("section-2"))
        self.assertEqual(self.viewport.scroll_calls, [])

    def test_empty_target_is_noop(self) -> None:
        self.navigator.activate(NavigationEvent(""))
        self.assertEqual(self.viewport.scroll_calls, [])

    def test_vanishing_target_does_not_raise(self) -> None:
        event = NavigationEvent("section-1")
        Navigator(_VanishingScroller()).activate(event)
        self.assertTrue(event.default_prevented)


if __name__ == "__main__":
    unittest.main()

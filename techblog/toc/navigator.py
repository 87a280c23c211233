"""Smooth-scroll navigation for table of contents entries."""

from __future__ import annotations

from dataclasses import dataclass

from .viewport import ScrollPrimitive


@dataclass
class NavigationEvent:
    """Activation of a table of contents entry."""

    target_id: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class Navigator:
    """Replace the anchor jump with a smooth scroll to the target heading."""

    def __init__(self, scroller: ScrollPrimitive, block: str = "start") -> None:
        self._scroller = scroller
        self._block = block

    def activate(self, event: NavigationEvent) -> None:
        # The default jump is always suppressed, even when the target is gone.
        event.prevent_default()
        target = event.target_id.strip()
        if not target or not self._scroller.has_element(target):
            return
        try:
            self._scroller.scroll_into_view(target, behavior="smooth", block=self._block)
        except LookupError:
            # Target vanished between the lookup and the scroll.
            return

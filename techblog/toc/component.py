"""Table of contents component: extraction, tracking, rendering, navigation."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import TOC_INCLUDE_UNANCHORED, TOC_LEVELS, TOC_ROOT_MARGIN
from .headings import HeadingEntry, HeadingSource, extract_headings
from .navigator import NavigationEvent, Navigator
from .render import render_toc
from .tracker import ScrollTracker
from .viewport import Disposer, ScrollPrimitive, VisibilityProvider


class TableOfContents:
    """Active-section table of contents for one mounted document.

    ``mount`` scans the headings and then subscribes the tracker, so extraction
    always happens before any visibility callback. The returned disposer (or
    leaving the ``with`` block) releases every observation.
    """

    def __init__(
        self,
        heading_source: HeadingSource,
        visibility: VisibilityProvider,
        scroller: ScrollPrimitive,
        levels: Sequence[int] = TOC_LEVELS,
        include_unanchored: bool = TOC_INCLUDE_UNANCHORED,
        root_margin: str = TOC_ROOT_MARGIN,
    ) -> None:
        self._source = heading_source
        self._visibility = visibility
        self._levels = tuple(levels)
        self._include_unanchored = include_unanchored
        self._root_margin = root_margin
        self._navigator = Navigator(scroller)
        self._tracker: ScrollTracker | None = None

    @property
    def headings(self) -> list[HeadingEntry]:
        return self._tracker.headings if self._tracker else []

    @property
    def active_id(self) -> str | None:
        return self._tracker.active_id if self._tracker else None

    @property
    def tracker(self) -> ScrollTracker | None:
        return self._tracker

    def mount(self) -> Disposer:
        self.unmount()
        headings = extract_headings(
            self._source,
            levels=self._levels,
            include_unanchored=self._include_unanchored,
        )
        tracker = ScrollTracker(headings, self._visibility, root_margin=self._root_margin)
        tracker.mount()
        self._tracker = tracker
        return self.unmount

    def unmount(self) -> None:
        tracker, self._tracker = self._tracker, None
        if tracker is not None:
            tracker.unmount()

    def render(self) -> str:
        return render_toc(self.headings, self.active_id)

    def activate(self, target_id: str) -> NavigationEvent:
        event = NavigationEvent(target_id=target_id)
        self._navigator.activate(event)
        return event

    def __enter__(self) -> TableOfContents:
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()

"""Active-section table of contents."""

from .component import TableOfContents
from .headings import HeadingElement, HeadingEntry, HTMLHeadingSource, StaticHeadingSource, extract_headings
from .navigator import NavigationEvent, Navigator
from .render import TocItem, layout_toc, render_toc
from .tracker import ScrollTracker, TrackerState
from .viewport import RootMargin, SimulatedViewport, VisibilityEntry

__all__ = [
    "TableOfContents",
    "HeadingElement",
    "HeadingEntry",
    "HTMLHeadingSource",
    "StaticHeadingSource",
    "extract_headings",
    "NavigationEvent",
    "Navigator",
    "TocItem",
    "layout_toc",
    "render_toc",
    "ScrollTracker",
    "TrackerState",
    "RootMargin",
    "SimulatedViewport",
    "VisibilityEntry",
]

"""Track which heading the reader is currently viewing."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pydantic import BaseModel, Field

from ..config import TOC_ROOT_MARGIN
from .headings import HeadingEntry
from .viewport import Disposer, VisibilityEntry, VisibilityProvider

ChangeListener = Callable[[str | None], None]


class TrackerState(BaseModel):
    """Per-mount state: the scanned headings and the active heading id."""

    headings: list[HeadingEntry] = Field(default_factory=list)
    active_id: str | None = None


class ScrollTracker:
    """Keep ``active_id`` in step with visibility reports for each heading.

    Every report of a heading becoming visible under the root margin makes it
    active. When several headings intersect in one batch the last one reported
    wins; that ordering comes from the provider and is not a designed policy.
    """

    def __init__(
        self,
        headings: Sequence[HeadingEntry],
        provider: VisibilityProvider,
        root_margin: str = TOC_ROOT_MARGIN,
    ) -> None:
        self.state = TrackerState(headings=list(headings))
        self._provider = provider
        self._root_margin = root_margin
        self._dispose: Disposer | None = None
        self._listeners: list[ChangeListener] = []

    @property
    def active_id(self) -> str | None:
        return self.state.active_id

    @property
    def headings(self) -> list[HeadingEntry]:
        return self.state.headings

    @property
    def mounted(self) -> bool:
        return self._dispose is not None

    def mount(self) -> Disposer:
        """Start observing every anchored heading; returns the release function."""
        if self._dispose is not None:
            self.unmount()
        self.state.active_id = None

        targets = [h.id for h in self.state.headings if h.id]
        if not targets:
            self._dispose = _noop
            return self.unmount

        # Assign before subscribing: providers may report initial state synchronously.
        self._dispose = _noop
        try:
            self._dispose = self._provider.subscribe(targets, self._on_visibility, self._root_margin)
        except Exception:
            self._dispose = None
            self.state.active_id = None
            raise
        return self.unmount

    def unmount(self) -> None:
        dispose, self._dispose = self._dispose, None
        self.state.active_id = None
        if dispose is not None:
            dispose()

    def on_change(self, listener: ChangeListener) -> Disposer:
        """Register a listener called once per ``active_id`` update."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def __enter__(self) -> ScrollTracker:
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()

    def _on_visibility(self, entries: list[VisibilityEntry]) -> None:
        if self._dispose is None:
            return
        for entry in entries:
            if entry.is_intersecting and entry.target_id:
                self._set_active(entry.target_id)

    def _set_active(self, heading_id: str) -> None:
        self.state.active_id = heading_id
        for listener in list(self._listeners):
            listener(heading_id)


def _noop() -> None:
    return None

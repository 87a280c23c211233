"""Visibility notifications and scrolling for the table of contents.

The tracker and navigator never touch a browser directly. They talk to a
``VisibilityProvider`` and a ``ScrollPrimitive``; ``SimulatedViewport`` is the
in-process implementation of both, driven by explicit element offsets and
scroll positions.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

Disposer = Callable[[], None]


@dataclass(frozen=True)
class VisibilityEntry:
    """One visibility report for an observed target."""

    target_id: str
    is_intersecting: bool


VisibilityCallback = Callable[[list[VisibilityEntry]], None]


class VisibilityProvider(Protocol):
    """Provider of visibility-change notifications."""

    def subscribe(
        self,
        target_ids: Sequence[str],
        callback: VisibilityCallback,
        root_margin: str,
    ) -> Disposer: ...


class ScrollPrimitive(Protocol):
    """Smooth-scroll capability of the display surface."""

    def has_element(self, element_id: str) -> bool: ...

    def scroll_into_view(self, element_id: str, behavior: str = "smooth", block: str = "start") -> None: ...


_MARGIN_TOKEN = re.compile(r"^(-?\d+(?:\.\d+)?)(px|%)$")


@dataclass(frozen=True)
class MarginValue:
    value: float
    unit: str  # "px" or "%"

    def resolve(self, extent: float) -> float:
        if self.unit == "%":
            return extent * self.value / 100.0
        return self.value


@dataclass(frozen=True)
class RootMargin:
    """CSS-style margin applied to the viewport before testing intersection.

    Negative values shrink the observed region, positive values grow it.
    """

    top: MarginValue
    right: MarginValue
    bottom: MarginValue
    left: MarginValue

    @classmethod
    def parse(cls, spec: str) -> RootMargin:
        """Parse one to four ``px``/``%`` tokens using CSS shorthand rules."""
        tokens = spec.split()
        if not 1 <= len(tokens) <= 4:
            raise ValueError(f"root margin must have 1-4 values: {spec!r}")

        values: list[MarginValue] = []
        for token in tokens:
            if token in {"0", "-0"}:
                values.append(MarginValue(0.0, "px"))
                continue
            m = _MARGIN_TOKEN.match(token)
            if not m:
                raise ValueError(f"invalid root margin value: {token!r}")
            values.append(MarginValue(float(m.group(1)), m.group(2)))

        if len(values) == 1:
            values = values * 4
        elif len(values) == 2:
            values = [values[0], values[1], values[0], values[1]]
        elif len(values) == 3:
            values = [values[0], values[1], values[2], values[1]]
        return cls(*values)

    def band(self, scroll_y: float, viewport_height: float) -> tuple[float, float]:
        """Return the observed vertical band in document coordinates."""
        start = scroll_y - self.top.resolve(viewport_height)
        end = scroll_y + viewport_height + self.bottom.resolve(viewport_height)
        return start, end


@dataclass(frozen=True)
class ScrollCall:
    element_id: str
    behavior: str
    block: str


@dataclass
class _Subscription:
    target_ids: tuple[str, ...]
    callback: VisibilityCallback
    margin: RootMargin
    state: dict[str, bool] = field(default_factory=dict)
    active: bool = True


class SimulatedViewport:
    """Viewport over a laid-out document, without a browser.

    Elements are placed at vertical offsets; ``scroll_to`` moves the viewport
    and reports visibility transitions to every live subscription, in
    document order. Reports are delivered synchronously.
    """

    def __init__(self, height: float = 800.0, scroll_margin_top: float = 0.0) -> None:
        self.height = height
        self.scroll_margin_top = scroll_margin_top
        self.scroll_y = 0.0
        self.scroll_calls: list[ScrollCall] = []
        self._layout: dict[str, tuple[float, float]] = {}
        self._subscriptions: list[_Subscription] = []

    # -- layout -----------------------------------------------------------------

    def place(self, element_id: str, top: float, height: float = 32.0) -> None:
        self._layout[element_id] = (top, height)

    def remove(self, element_id: str) -> None:
        self._layout.pop(element_id, None)

    def layout_stack(self, element_ids: Iterable[str], spacing: float = 600.0, start: float = 0.0) -> None:
        """Place elements one after another, ``spacing`` apart."""
        for i, element_id in enumerate(element_ids):
            self.place(element_id, start + i * spacing)

    @property
    def active_subscriptions(self) -> int:
        return sum(1 for s in self._subscriptions if s.active)

    # -- VisibilityProvider -----------------------------------------------------

    def subscribe(
        self,
        target_ids: Sequence[str],
        callback: VisibilityCallback,
        root_margin: str,
    ) -> Disposer:
        sub = _Subscription(
            target_ids=tuple(target_ids),
            callback=callback,
            margin=RootMargin.parse(root_margin),
        )
        self._subscriptions.append(sub)

        def dispose() -> None:
            sub.active = False
            if sub in self._subscriptions:
                self._subscriptions.remove(sub)

        # Observers report the initial state of every target once.
        self._report(sub, initial=True)
        return dispose

    def emit(self, entries: Iterable[VisibilityEntry]) -> None:
        """Deliver synthetic reports to subscriptions observing the targets."""
        batch = list(entries)
        for sub in list(self._subscriptions):
            if not sub.active:
                continue
            own = [e for e in batch if e.target_id in sub.target_ids]
            if own:
                for e in own:
                    sub.state[e.target_id] = e.is_intersecting
                sub.callback(own)

    def scroll_to(self, y: float) -> None:
        self.scroll_y = max(0.0, y)
        for sub in list(self._subscriptions):
            if sub.active:
                self._report(sub, initial=False)

    # -- ScrollPrimitive --------------------------------------------------------

    def has_element(self, element_id: str) -> bool:
        return element_id in self._layout

    def scroll_into_view(self, element_id: str, behavior: str = "smooth", block: str = "start") -> None:
        if element_id not in self._layout:
            return
        self.scroll_calls.append(ScrollCall(element_id=element_id, behavior=behavior, block=block))
        top, height = self._layout[element_id]
        if block == "center":
            self.scroll_to(top + height / 2 - self.height / 2)
        elif block == "end":
            self.scroll_to(top + height - self.height)
        else:
            self.scroll_to(top - self.scroll_margin_top)

    # -- internals --------------------------------------------------------------

    def _intersects(self, element_id: str, margin: RootMargin) -> bool:
        if element_id not in self._layout:
            return False
        top, height = self._layout[element_id]
        start, end = margin.band(self.scroll_y, self.height)
        return top < end and top + height > start

    def _report(self, sub: _Subscription, initial: bool) -> None:
        ordered = sorted(
            (t for t in sub.target_ids if t in self._layout),
            key=lambda t: self._layout[t][0],
        )
        entries: list[VisibilityEntry] = []
        for target in ordered:
            now = self._intersects(target, sub.margin)
            if initial or sub.state.get(target) != now:
                entries.append(VisibilityEntry(target_id=target, is_intersecting=now))
            sub.state[target] = now
        if entries:
            sub.callback(entries)

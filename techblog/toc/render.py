"""Render the table of contents list with the active entry highlighted."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from html import escape

from ..config import TOC_INDENT_REM
from .headings import HeadingEntry


@dataclass(frozen=True)
class TocItem:
    id: str
    text: str
    level: int
    indent: int
    active: bool
    navigable: bool


def layout_toc(headings: Sequence[HeadingEntry], active_id: str | None) -> list[TocItem]:
    """Compute indentation and highlight state for each heading.

    Indent is ``level - min_level`` across the given headings. Entries without
    an id are kept but are neither navigable nor ever active.
    """
    if not headings:
        return []
    min_level = min(h.level for h in headings)
    return [
        TocItem(
            id=h.id,
            text=h.text,
            level=h.level,
            indent=h.level - min_level,
            active=bool(h.id) and h.id == active_id,
            navigable=bool(h.id),
        )
        for h in headings
    ]


def render_toc(
    headings: Sequence[HeadingEntry],
    active_id: str | None = None,
    indent_rem: float = TOC_INDENT_REM,
) -> str:
    """Render the ``<nav>`` block, or an empty string when there are no headings."""
    items = layout_toc(headings, active_id)
    if not items:
        return ""

    lines = [
        '<nav class="toc" aria-label="Table of contents">',
        '<p class="toc-title">On this page</p>',
        "<ol>",
    ]
    for item in items:
        classes = [f"toc-level-{item.level}"]
        if item.active:
            classes.append("active")
        attrs = f' class="{" ".join(classes)}"'
        if item.indent:
            attrs += f' style="padding-left: {item.indent * indent_rem:g}rem"'
        if item.navigable:
            current = ' aria-current="true"' if item.active else ""
            label = (
                f'<a href="#{escape(item.id, quote=True)}" data-toc-target="{escape(item.id, quote=True)}"{current}>'
                f"{escape(item.text)}</a>"
            )
        else:
            label = f"<span>{escape(item.text)}</span>"
        lines.append(f"<li{attrs}>{label}</li>")
    lines.extend(["</ol>", "</nav>"])
    return "\n".join(lines)

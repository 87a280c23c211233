"""Collect navigable section headings from a rendered document."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Protocol

from pydantic import BaseModel

from ..config import TOC_LEVELS


class HeadingEntry(BaseModel):
    """One navigable section of a document."""

    id: str
    text: str
    level: int


@dataclass(frozen=True)
class HeadingElement:
    """A heading element as seen by a heading provider."""

    tag: str
    id: str | None
    text: str

    @property
    def level(self) -> int:
        return int(self.tag[1:])


class HeadingSource(Protocol):
    """Provider of the current set of heading elements, in document order."""

    def query_headings(self, levels: Sequence[int]) -> list[HeadingElement]: ...


# Content of these tags never contributes to heading text
_SKIP_TAGS = {"script", "style", "template"}

_HEADING_TAG = re.compile(r"^h[1-6]$")


class _HeadingHTMLParser(HTMLParser):
    """Streaming parser that records every h1-h6 element with its id and text."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.headings: list[HeadingElement] = []
        self._current: tuple[str, str | None] | None = None
        self._buf: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        tag_l = tag.lower()
        if tag_l in _SKIP_TAGS:
            self._skip_depth += 1
            return
        if self._current is None and _HEADING_TAG.match(tag_l):
            attr_dict = {k.lower(): v for k, v in attrs}
            self._current = (tag_l, attr_dict.get("id"))
            self._buf = []

    def handle_endtag(self, tag: str) -> None:
        tag_l = tag.lower()
        if tag_l in _SKIP_TAGS:
            self._skip_depth = max(self._skip_depth - 1, 0)
            return
        if self._current is not None and tag_l == self._current[0]:
            heading_tag, heading_id = self._current
            text = re.sub(r"\s+", " ", "".join(self._buf)).strip()
            self.headings.append(HeadingElement(tag=heading_tag, id=heading_id, text=text))
            self._current = None
            self._buf = []

    def handle_data(self, data: str) -> None:
        if self._current is None or self._skip_depth > 0:
            return
        self._buf.append(data)


class HTMLHeadingSource:
    """Heading provider over an already rendered HTML document."""

    def __init__(self, html: str) -> None:
        parser = _HeadingHTMLParser()
        parser.feed(html)
        parser.close()
        self._elements = parser.headings

    def query_headings(self, levels: Sequence[int]) -> list[HeadingElement]:
        wanted = set(levels)
        return [el for el in self._elements if el.level in wanted]


class StaticHeadingSource:
    """Heading provider over a fixed list of elements (synthetic documents)."""

    def __init__(self, elements: Iterable[HeadingElement]) -> None:
        self._elements = list(elements)

    def query_headings(self, levels: Sequence[int]) -> list[HeadingElement]:
        wanted = set(levels)
        return [el for el in self._elements if el.level in wanted]


def extract_headings(
    source: HeadingSource,
    levels: Sequence[int] = TOC_LEVELS,
    include_unanchored: bool = False,
) -> list[HeadingEntry]:
    """Scan the document once for headings of the permitted levels.

    Args:
        source: Heading provider for the current document
        levels: Permitted heading levels
        include_unanchored: Keep headings without an id (listed, never navigable)

    Returns:
        Heading entries in document order, empty when nothing matches
    """
    entries: list[HeadingEntry] = []
    for element in source.query_headings(levels):
        anchor = element.id if element.id and element.id.strip() else ""
        if not anchor and not include_unanchored:
            continue
        entries.append(HeadingEntry(id=anchor, text=element.text, level=element.level))
    return entries

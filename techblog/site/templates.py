"""HTML templates for the static site generator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from ..config import SITE_NAME
from .scripts import THEME_INIT, THEME_TOGGLE
from .styles import CSS


def html_doc(title: str, body: str, head_extra: str = "", scripts: Iterable[str] = ()) -> str:
    full_title = title if title == SITE_NAME else f"{title} | {SITE_NAME}"
    script_tags = "".join(f"<script>{s}</script>\n" for s in scripts)
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(full_title)}</title>\n"
        '<link rel="icon" href="/favicon.ico" sizes="any">\n'
        f"{head_extra}\n"
        f"<script>{THEME_INIT}</script>\n"
        f"<style>{CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{theme_toggle()}\n"
        f"{body}\n"
        f"<script>{THEME_TOGGLE}</script>\n"
        f"{script_tags}"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str, cls: str = "") -> str:
    cls_attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f'<a href="{escape(href, quote=True)}"{cls_attr}>{escape(text)}</a>'


def theme_toggle() -> str:
    return '<button type="button" class="theme-toggle" data-theme-toggle aria-label="Toggle dark mode">◐</button>'


def h1(text: str) -> str:
    return f"<h1>{escape(text)}</h1>"


def h2(text: str) -> str:
    return f"<h2>{escape(text)}</h2>"


def para(text: str, cls: str = "") -> str:
    cls_attr = f' class="{cls}"' if cls else ""
    return f"<p{cls_attr}>{escape(text)}</p>"


def chips(tags: Iterable[str]) -> str:
    items = "".join(f'<span class="chip">{escape(t)}</span>' for t in tags)
    return f'<div class="chips">{items}</div>' if items else ""


@dataclass(frozen=True)
class PostCard:
    title: str
    description: str
    href: str
    published: str
    tags: tuple[str, ...]


def home_page(site_description: str, cards: Iterable[PostCard]) -> str:
    lines = [
        '<main class="container narrow">',
        h1(SITE_NAME),
        para(site_description, cls="muted"),
        '<div class="prose">',
        h2("Recent Posts"),
        "</div>",
    ]
    rendered = 0
    for c in cards:
        date = f'<div class="muted">{escape(c.published)}</div>' if c.published else ""
        lines.append(
            f'<a class="post-card" href="{escape(c.href, quote=True)}">'
            f"<h3>{escape(c.title)}</h3>"
            f"{date}"
            f"<p>{escape(c.description)}</p>"
            f"{chips(c.tags)}"
            "</a>"
        )
        rendered += 1
    if not rendered:
        lines.append(para("No posts yet.", cls="muted"))
    lines.append("</main>")
    return "\n".join(lines)


def article_page(article_html: str, toc_html: str, back_href: str = "/") -> str:
    """Article column plus the TOC aside; no aside at all when the TOC is empty."""
    layout_cls = "layout with-toc" if toc_html else "layout"
    lines = [
        '<div class="container">',
        f'<nav>{link(back_href, "← Back to Home", cls="back")}</nav>',
        f'<div class="{layout_cls}">',
        f'<article class="prose">\n{article_html}\n</article>',
    ]
    if toc_html:
        lines.append(f"<aside>\n{toc_html}\n</aside>")
    lines.extend(["</div>", "</div>"])
    return "\n".join(lines)

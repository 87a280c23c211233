"""robots.txt and sitemap.xml generation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from ..config import BASE_URL
from ..content.posts import PostMeta
from .metadata import post_url


@dataclass(frozen=True)
class RobotsRule:
    user_agent: str
    allow: Sequence[str] = ("/",)
    disallow: Sequence[str] = field(default_factory=tuple)


# AI crawlers are allowed explicitly so blanket AI blocks elsewhere don't apply.
DEFAULT_ROBOTS_RULES: tuple[RobotsRule, ...] = (
    RobotsRule("*", allow=("/",), disallow=("/api/", "/admin/")),
    RobotsRule("GPTBot"),
    RobotsRule("ChatGPT-User"),
    RobotsRule("Google-Extended"),
    RobotsRule("Claude-Web"),
    RobotsRule("anthropic-ai"),
)


def robots_txt(base_url: str = BASE_URL, rules: Iterable[RobotsRule] = DEFAULT_ROBOTS_RULES) -> str:
    lines: list[str] = []
    for rule in rules:
        lines.append(f"User-Agent: {rule.user_agent}")
        for path in rule.allow:
            lines.append(f"Allow: {path}")
        for path in rule.disallow:
            lines.append(f"Disallow: {path}")
        lines.append("")
    lines.append(f"Sitemap: {base_url.rstrip('/')}/sitemap.xml")
    return "\n".join(lines) + "\n"


def sitemap_xml(posts: Iterable[PostMeta], base_url: str = BASE_URL) -> str:
    """Sitemap with the home page followed by one entry per post."""
    base_url = base_url.rstrip("/")
    metas = list(posts)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]

    home_lastmod = max((m.last_modified_date for m in metas if m.last_modified_date), default="")
    lines.append(_url_entry(f"{base_url}/", home_lastmod, "weekly", "1.0"))
    for m in metas:
        lines.append(_url_entry(post_url(m.slug, base_url), m.last_modified_date, "monthly", "0.8"))

    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def _url_entry(loc: str, lastmod: str, changefreq: str, priority: str) -> str:
    parts = ["  <url>", f"    <loc>{escape(loc)}</loc>"]
    if lastmod:
        parts.append(f"    <lastmod>{escape(lastmod)}</lastmod>")
    parts.append(f"    <changefreq>{changefreq}</changefreq>")
    parts.append(f"    <priority>{priority}</priority>")
    parts.append("  </url>")
    return "\n".join(parts)

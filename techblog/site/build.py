"""Static site generator for blog posts."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel

from ..config import (
    BASE_URL,
    PUBLIC_DIR_NAME,
    SITE_DESCRIPTION,
    SITE_NAME,
    TOC_INCLUDE_UNANCHORED,
    TOC_LEVELS,
    TOC_ROOT_MARGIN,
)
from ..content.posts import Post, load_posts
from ..toc.headings import HTMLHeadingSource, extract_headings
from ..toc.render import render_toc
from .metadata import generate_blog_metadata, generate_structured_data, json_ld, render_meta_tags, site_metadata
from .scripts import toc_script
from .seo import robots_txt, sitemap_xml
from .templates import PostCard, article_page, home_page, html_doc

logger = logging.getLogger(__name__)


class SiteReport(BaseModel):
    """Result of building the site."""

    model_config = {"arbitrary_types_allowed": True}

    out_dir: Path
    posts: int
    pages: list[str]
    total_bytes: int
    warnings: list[str]


def build_site(content_dir: Path, out_dir: Path, base_url: str | None = None) -> SiteReport:
    """Build the static blog from a directory of Markdown posts.

    Args:
        content_dir: Directory holding ``*.md``/``*.mdx`` posts (and optional ``public/``)
        out_dir: Output directory
        base_url: Absolute site origin for canonical URLs and the sitemap

    Returns:
        SiteReport with the pages written and any non-fatal warnings
    """
    base_url = (base_url or BASE_URL).rstrip("/")
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    posts = load_posts(content_dir)
    logger.info("Building %d posts from %s", len(posts), content_dir)

    warnings: list[str] = []
    pages: list[str] = []

    public_dir = content_dir / PUBLIC_DIR_NAME
    if public_dir.is_dir():
        _copy_public(public_dir, out_dir)

    for post in posts:
        warnings.extend(lint_post(post))
        rel = f"blog/{post.meta.slug}/index.html"
        target = out_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_post_page(post, base_url), encoding="utf-8")
        pages.append(rel)
        logger.debug("Wrote %s", rel)

    cards = [
        PostCard(
            title=p.meta.title,
            description=p.meta.description,
            href=f"/blog/{p.meta.slug}/",
            published=p.meta.published_date,
            tags=tuple(p.meta.tags),
        )
        for p in posts
    ]
    home = html_doc(
        title=SITE_NAME,
        body=home_page(SITE_DESCRIPTION, cards),
        head_extra=render_meta_tags(site_metadata(base_url, SITE_DESCRIPTION)),
    )
    (out_dir / "index.html").write_text(home, encoding="utf-8")
    pages.append("index.html")

    (out_dir / "robots.txt").write_text(robots_txt(base_url), encoding="utf-8")
    (out_dir / "sitemap.xml").write_text(sitemap_xml((p.meta for p in posts), base_url), encoding="utf-8")
    pages.extend(["robots.txt", "sitemap.xml"])

    return SiteReport(
        out_dir=out_dir,
        posts=len(posts),
        pages=pages,
        total_bytes=_dir_size_bytes(out_dir),
        warnings=warnings,
    )


def render_post_page(post: Post, base_url: str = BASE_URL) -> str:
    """Full HTML page for one post, with its table of contents pre-rendered."""
    toc_html = ""
    scripts: list[str] = []
    if post.meta.toc:
        headings = extract_headings(
            HTMLHeadingSource(post.html),
            levels=TOC_LEVELS,
            include_unanchored=TOC_INCLUDE_UNANCHORED,
        )
        toc_html = render_toc(headings)
        if toc_html:
            scripts.append(toc_script(TOC_ROOT_MARGIN, TOC_LEVELS))

    head = "\n".join(
        [
            render_meta_tags(generate_blog_metadata(post.meta, base_url)),
            '<script type="application/ld+json">'
            f"{json_ld(generate_structured_data(post.meta, base_url))}"
            "</script>",
        ]
    )
    return html_doc(
        title=post.meta.title,
        body=article_page(post.html, toc_html),
        head_extra=head,
        scripts=scripts,
    )


def lint_post(post: Post) -> list[str]:
    """Non-fatal problems with a post (reported, never raised)."""
    problems: list[str] = []
    slug = post.meta.slug
    if not post.meta.description.strip():
        problems.append(f"{slug}: missing description")
    if not post.meta.published_time:
        problems.append(f"{slug}: missing published_time")

    seen: set[str] = set()
    for element in HTMLHeadingSource(post.html).query_headings(TOC_LEVELS):
        if not element.id:
            problems.append(f"{slug}: heading {element.text!r} has no anchor")
        elif element.id in seen:
            problems.append(f"{slug}: duplicate heading id {element.id!r}")
        else:
            seen.add(element.id)
    return problems


def _copy_public(src: Path, dst: Path) -> None:
    def _ignore(path: str, names: list[str]) -> set[str]:
        ignored = {".DS_Store", "__pycache__"}
        return {n for n in names if n in ignored}

    shutil.copytree(src, dst, ignore=_ignore, dirs_exist_ok=True)


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total

"""Page metadata: Open Graph, Twitter card, canonical URL and JSON-LD."""

from __future__ import annotations

import json
from html import escape
from typing import Any

from pydantic import BaseModel, Field

from ..config import (
    BASE_URL,
    DEFAULT_AUTHOR,
    LOCALE,
    OG_IMAGE_HEIGHT,
    OG_IMAGE_PATH,
    OG_IMAGE_WIDTH,
    SITE_NAME,
    TWITTER_CREATOR,
)
from ..content.posts import PostMeta


class OgImage(BaseModel):
    url: str
    width: int = OG_IMAGE_WIDTH
    height: int = OG_IMAGE_HEIGHT
    alt: str = ""


class OpenGraph(BaseModel):
    title: str
    description: str
    url: str
    site_name: str = SITE_NAME
    locale: str = LOCALE
    type: str = "article"
    published_time: str | None = None
    modified_time: str | None = None
    authors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    images: list[OgImage] = Field(default_factory=list)


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: list[str] = Field(default_factory=list)
    creator: str = TWITTER_CREATOR


class PageMetadata(BaseModel):
    """Everything that goes into a page's <head> besides the title."""

    title: str
    description: str
    authors: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    canonical: str
    open_graph: OpenGraph
    twitter: TwitterCard


def post_url(slug: str, base_url: str = BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/blog/{slug}"


def generate_blog_metadata(meta: PostMeta, base_url: str = BASE_URL) -> PageMetadata:
    """Build the metadata for a blog post page."""
    base_url = base_url.rstrip("/")
    url = post_url(meta.slug, base_url)
    og_image = f"{base_url}{OG_IMAGE_PATH}"
    author = meta.author or DEFAULT_AUTHOR

    return PageMetadata(
        title=meta.title,
        description=meta.description,
        authors=[author],
        keywords=list(meta.tags),
        canonical=url,
        open_graph=OpenGraph(
            title=meta.title,
            description=meta.description,
            url=url,
            published_time=meta.published_time,
            modified_time=meta.modified_time,
            authors=[author],
            tags=list(meta.tags),
            images=[OgImage(url=og_image, alt=meta.title)],
        ),
        twitter=TwitterCard(
            title=meta.title,
            description=meta.description,
            images=[og_image],
        ),
    )


def site_metadata(base_url: str = BASE_URL, description: str = "") -> PageMetadata:
    """Metadata for the home page."""
    base_url = base_url.rstrip("/")
    og_image = f"{base_url}{OG_IMAGE_PATH}"
    return PageMetadata(
        title=SITE_NAME,
        description=description,
        authors=[DEFAULT_AUTHOR],
        canonical=f"{base_url}/",
        open_graph=OpenGraph(
            title=SITE_NAME,
            description=description,
            url=base_url,
            type="website",
            images=[OgImage(url=og_image, alt=SITE_NAME)],
        ),
        twitter=TwitterCard(title=SITE_NAME, description=description, images=[og_image]),
    )


def generate_structured_data(meta: PostMeta, base_url: str = BASE_URL) -> dict[str, Any]:
    """schema.org BlogPosting for the post, as a JSON-LD ready dict."""
    base_url = base_url.rstrip("/")
    data: dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "headline": meta.title,
        "description": meta.description,
        "author": {"@type": "Person", "name": meta.author or DEFAULT_AUTHOR},
        "datePublished": meta.published_time,
        "dateModified": meta.modified_time or meta.published_time,
        "keywords": ", ".join(meta.tags) if meta.tags else None,
        "url": post_url(meta.slug, base_url),
        "image": f"{base_url}{OG_IMAGE_PATH}",
        "publisher": {
            "@type": "Organization",
            "name": SITE_NAME,
            "logo": {"@type": "ImageObject", "url": f"{base_url}/logo.png"},
        },
    }
    # Absent fields are omitted rather than emitted as null.
    return {k: v for k, v in data.items() if v is not None}


def render_meta_tags(page: PageMetadata) -> str:
    """Render <meta>/<link> tags for a page's <head>."""

    def meta(attr: str, key: str, value: str | int | None) -> str | None:
        if value is None or value == "":
            return None
        return f'<meta {attr}="{escape(key, quote=True)}" content="{escape(str(value), quote=True)}">'

    og = page.open_graph
    tw = page.twitter
    tags: list[str | None] = [
        meta("name", "description", page.description),
        meta("name", "keywords", ", ".join(page.keywords) if page.keywords else None),
    ]
    tags.extend(meta("name", "author", a) for a in page.authors)
    tags.append(f'<link rel="canonical" href="{escape(page.canonical, quote=True)}">')
    tags.extend(
        [
            meta("property", "og:title", og.title),
            meta("property", "og:description", og.description),
            meta("property", "og:url", og.url),
            meta("property", "og:site_name", og.site_name),
            meta("property", "og:locale", og.locale),
            meta("property", "og:type", og.type),
            meta("property", "article:published_time", og.published_time),
            meta("property", "article:modified_time", og.modified_time),
        ]
    )
    tags.extend(meta("property", "article:author", a) for a in og.authors if og.type == "article")
    tags.extend(meta("property", "article:tag", t) for t in og.tags)
    for img in og.images:
        tags.extend(
            [
                meta("property", "og:image", img.url),
                meta("property", "og:image:width", img.width),
                meta("property", "og:image:height", img.height),
                meta("property", "og:image:alt", img.alt),
            ]
        )
    tags.extend(
        [
            meta("name", "twitter:card", tw.card),
            meta("name", "twitter:title", tw.title),
            meta("name", "twitter:description", tw.description),
            meta("name", "twitter:creator", tw.creator),
        ]
    )
    tags.extend(meta("name", "twitter:image", i) for i in tw.images)
    return "\n".join(t for t in tags if t)


def json_ld(data: dict[str, Any]) -> str:
    """Serialize structured data for a <script type="application/ld+json"> tag."""
    payload = json.dumps(data, ensure_ascii=False, sort_keys=True)
    # Keep the payload from closing the script element.
    return payload.replace("</", "<\\/")

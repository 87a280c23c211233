"""Load blog posts: YAML frontmatter + Markdown body."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..config import DEFAULT_AUTHOR
from .markdown import markdown_to_html

logger = logging.getLogger(__name__)

POST_SUFFIXES = (".md", ".mdx")

_FRONTMATTER = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


class ContentError(ValueError):
    """A content file could not be loaded or is inconsistent."""


class PostMeta(BaseModel):
    """Frontmatter of a post."""

    title: str
    description: str = ""
    slug: str
    published_time: str | None = None
    modified_time: str | None = None
    tags: list[str] = Field(default_factory=list)
    author: str = DEFAULT_AUTHOR
    toc: bool = True

    @field_validator("published_time", "modified_time", mode="before")
    @classmethod
    def _iso_time(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat()
        if isinstance(value, date):
            return value.isoformat()
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [t.strip() for t in value.split(",") if t.strip()]
        return value

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not re.fullmatch(r"[a-z0-9]+(?:-[a-z0-9]+)*", value):
            raise ValueError(f"slug must be lowercase words joined by '-': {value!r}")
        return value

    @property
    def published_date(self) -> str:
        """``YYYY-MM-DD`` part of the publication time, or empty."""
        return (self.published_time or "")[:10]

    @property
    def last_modified_date(self) -> str:
        return (self.modified_time or self.published_time or "")[:10]


class Post(BaseModel):
    """A loaded post with its rendered HTML."""

    meta: PostMeta
    body: str
    html: str
    source_path: Path


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split ``---`` delimited YAML frontmatter from the body.

    Returns:
        (metadata dict, body). Metadata is empty when there is no frontmatter.
    """
    text = text.lstrip("\ufeff")
    m = _FRONTMATTER.match(text)
    if not m:
        return {}, text
    data = yaml.safe_load(m.group(1)) or {}
    if not isinstance(data, dict):
        raise ContentError("frontmatter must be a mapping")
    return data, text[m.end():]


def load_post(path: Path) -> Post:
    """Load and render one post file.

    Args:
        path: Markdown/MDX file with frontmatter

    Returns:
        Post with metadata and rendered HTML

    Raises:
        ContentError: On unreadable frontmatter or missing required fields
    """
    text = path.read_text(encoding="utf-8")
    try:
        data, body = split_frontmatter(text)
    except yaml.YAMLError as e:
        raise ContentError(f"{path}: invalid frontmatter: {e}") from e
    except ContentError as e:
        raise ContentError(f"{path}: {e}") from e

    data.setdefault("slug", path.stem)
    try:
        meta = PostMeta.model_validate(data)
    except ValidationError as e:
        raise ContentError(f"{path}: {e}") from e

    logger.debug("Loaded post %s from %s", meta.slug, path)
    return Post(meta=meta, body=body, html=markdown_to_html(body), source_path=path)


def load_posts(content_dir: Path) -> list[Post]:
    """Load every post under ``content_dir``, newest first.

    Raises:
        ContentError: On a bad file or when two posts share a slug
    """
    if not content_dir.exists():
        return []

    posts: list[Post] = []
    seen: dict[str, Path] = {}
    for path in sorted(content_dir.iterdir()):
        if not path.is_file() or path.suffix.lower() not in POST_SUFFIXES:
            continue
        post = load_post(path)
        if post.meta.slug in seen:
            raise ContentError(
                f"duplicate slug {post.meta.slug!r}: {seen[post.meta.slug]} and {path}"
            )
        seen[post.meta.slug] = path
        posts.append(post)

    posts.sort(key=lambda p: (p.meta.published_time or "", p.meta.slug), reverse=True)
    return posts

"""Post loading and Markdown rendering."""

from .markdown import markdown_to_html, slugify
from .posts import ContentError, Post, PostMeta, load_post, load_posts, split_frontmatter

__all__ = [
    "markdown_to_html",
    "slugify",
    "ContentError",
    "Post",
    "PostMeta",
    "load_post",
    "load_posts",
    "split_frontmatter",
]

"""Static site generation."""

from .build import SiteReport, build_site, lint_post, render_post_page

__all__ = ["SiteReport", "build_site", "lint_post", "render_post_page"]

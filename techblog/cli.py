"""CLI entry point for Techblog."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import CONTENT_DIR, OUTPUT_DIR, TOC_INCLUDE_UNANCHORED, TOC_LEVELS


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="techblog",
        description="Static technical blog with an active-section table of contents.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"Techblog {__version__}",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the static site")
    p_build.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Directory of Markdown posts")
    p_build.add_argument("--out", "-o", type=Path, default=OUTPUT_DIR, help="Site output directory")
    p_build.add_argument("--base-url", default=None, help="Absolute site origin (e.g. https://example.com)")

    p_toc = sub.add_parser("toc", help="Print the table of contents of a Markdown or HTML file")
    p_toc.add_argument("file", type=Path, help="Post (.md/.mdx) or rendered page (.html)")
    p_toc.add_argument("--levels", default=",".join(str(lv) for lv in TOC_LEVELS), help="Heading levels, e.g. 2,3")
    p_toc.add_argument(
        "--include-unanchored",
        action="store_true",
        default=TOC_INCLUDE_UNANCHORED,
        help="List headings without an id (not navigable)",
    )

    p_check = sub.add_parser("check", help="Validate posts before deploying")
    p_check.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Directory of Markdown posts")
    p_check.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "toc":
        return _cmd_toc(args)
    if args.cmd == "check":
        return _cmd_check(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .site.build import build_site

    try:
        report = build_site(args.content, args.out, base_url=args.base_url)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.out_dir}")
    print(f"  Posts: {report.posts}")
    print(f"  Pages: {len(report.pages)}")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")
    _print_warnings(report.warnings)
    return 0


def _cmd_toc(args: Any) -> int:
    from .content.markdown import markdown_to_html
    from .content.posts import split_frontmatter
    from .toc.headings import HTMLHeadingSource, extract_headings

    try:
        levels = tuple(int(x) for x in str(args.levels).split(",") if x.strip())
    except ValueError:
        print(f"Error: invalid --levels {args.levels!r}", file=sys.stderr)
        return 2

    try:
        text = args.file.read_text(encoding="utf-8")
        if args.file.suffix.lower() in (".html", ".htm"):
            html = text
        else:
            _, body = split_frontmatter(text)
            html = markdown_to_html(body)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    headings = extract_headings(
        HTMLHeadingSource(html),
        levels=levels,
        include_unanchored=bool(args.include_unanchored),
    )
    if not headings:
        return 0

    min_level = min(h.level for h in headings)
    for h in headings:
        indent = "  " * (h.level - min_level)
        anchor = f"#{h.id}" if h.id else "(no anchor)"
        print(f"{indent}- {h.text}  {anchor}")
    return 0


def _cmd_check(args: Any) -> int:
    from .content.posts import load_posts
    from .site.build import lint_post

    try:
        posts = load_posts(args.content)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    warnings: list[str] = []
    for post in posts:
        warnings.extend(lint_post(post))

    print(f"Checked {len(posts)} posts in {args.content}")
    _print_warnings(warnings)
    if warnings and args.strict:
        return 1
    return 0


def _print_warnings(warnings: list[str]) -> None:
    if not warnings:
        return
    print(f"\nWarnings ({len(warnings)}):")
    for w in warnings[:10]:
        print(f"  - {w}")
    if len(warnings) > 10:
        print(f"  ... and {len(warnings) - 10} more")


if __name__ == "__main__":
    app()

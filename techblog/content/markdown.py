"""Markdown → HTML rendering for blog posts."""

from __future__ import annotations

import re
from collections.abc import Callable

# Headings at these levels get an id so they can be linked and tracked
ANCHORED_LEVELS = (1, 2, 3)


def slugify(text: str) -> str:
    """Convert heading text to an anchor id.

    Args:
        text: Heading text

    Returns:
        Lowercase slug with runs of other characters collapsed to ``-``
    """
    # Lowercase
    text = text.lower()

    # Anything outside [a-z0-9] becomes a single dash
    text = re.sub(r"[^a-z0-9]+", "-", text)

    # No leading/trailing dashes
    return text.strip("-")


class _AnchorRegistry:
    """Hands out unique ids within one document (``id``, ``id-1``, ``id-2``...)."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def claim(self, slug: str) -> str:
        if not slug:
            return ""
        if slug not in self._seen:
            self._seen[slug] = 0
            return slug
        while True:
            self._seen[slug] += 1
            candidate = f"{slug}-{self._seen[slug]}"
            if candidate not in self._seen:
                self._seen[candidate] = 0
                return candidate


def markdown_to_html(md: str) -> str:
    """Minimal Markdown → HTML converter (CommonMark-ish subset).

    The goal is readable, deterministic output, not perfect rendering.
    """
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    lines = md.split("\n")

    out: list[str] = []
    anchors = _AnchorRegistry()

    def flush_paragraph(buf: list[str]) -> None:
        if not buf:
            return
        text = " ".join(s.strip() for s in buf if s.strip())
        if text:
            out.append(f"<p>{_inline(text)}</p>")
        buf.clear()

    i = 0
    in_code = False
    code_lang = ""
    code_buf: list[str] = []
    para_buf: list[str] = []

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        # Code fences
        if stripped.startswith("```"):
            flush_paragraph(para_buf)
            if not in_code:
                in_code = True
                code_lang = stripped[3:].strip().split(" ")[0]
                code_buf = []
            else:
                out.append(_code_block("\n".join(code_buf), code_lang))
                in_code = False
            i += 1
            continue

        if in_code:
            code_buf.append(line)
            i += 1
            continue

        # Horizontal rule
        if stripped in ("---", "***"):
            flush_paragraph(para_buf)
            out.append("<hr>")
            i += 1
            continue

        # Table (GFM)
        if _looks_like_table_start(lines, i):
            flush_paragraph(para_buf)
            table_lines: list[str] = []
            while i < len(lines) and lines[i].strip().startswith("|"):
                table_lines.append(lines[i])
                i += 1
            out.append(_table_to_html(table_lines))
            continue

        # Headings
        if re.match(r"^#{1,6}\s", stripped):
            flush_paragraph(para_buf)
            level = len(stripped) - len(stripped.lstrip("#"))
            text = stripped[level:].strip().rstrip("#").strip()
            if level in ANCHORED_LEVELS:
                anchor = anchors.claim(slugify(_plain(text)))
                id_attr = f' id="{anchor}"' if anchor else ""
                out.append(f'<h{level}{id_attr} class="scroll-mt">{_inline(text)}</h{level}>')
            else:
                out.append(f"<h{level}>{_inline(text)}</h{level}>")
            i += 1
            continue

        # Unordered list
        if stripped.startswith(("- ", "* ")):
            flush_paragraph(para_buf)
            out.append("<ul>")
            while i < len(lines):
                s = lines[i].strip()
                if not s.startswith(("- ", "* ")):
                    break
                out.append(f"<li>{_inline(s[2:].strip())}</li>")
                i += 1
            out.append("</ul>")
            continue

        # Ordered list
        if _looks_like_ordered_list_item(stripped):
            flush_paragraph(para_buf)
            out.append("<ol>")
            while i < len(lines):
                s = lines[i].strip()
                if not _looks_like_ordered_list_item(s):
                    break
                dot = s.find(".")
                out.append(f"<li>{_inline(s[dot + 1 :].lstrip())}</li>")
                i += 1
            out.append("</ol>")
            continue

        # Blockquote
        if stripped.startswith(">"):
            flush_paragraph(para_buf)
            out.append("<blockquote>")
            while i < len(lines):
                s = lines[i].rstrip()
                if not s.lstrip().startswith(">"):
                    break
                q = s.lstrip()[1:].lstrip()
                if q:
                    out.append(f"<p>{_inline(q)}</p>")
                i += 1
            out.append("</blockquote>")
            continue

        # Blank line ends paragraph
        if not stripped:
            flush_paragraph(para_buf)
            i += 1
            continue

        para_buf.append(line)
        i += 1

    flush_paragraph(para_buf)
    if in_code:
        out.append(_code_block("\n".join(code_buf), code_lang))

    return "\n".join(out)


def _code_block(code: str, lang: str) -> str:
    # Highlighting happens client-side, keyed on the language class.
    lang = re.sub(r"[^A-Za-z0-9_+-]", "", lang)
    cls = f' class="language-{lang}"' if lang else ""
    return f"<pre><code{cls}>{_escape_block(code)}</code></pre>"


def _escape_block(text: str) -> str:
    # Block escaping (pre/code) – keep newlines.
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _plain(text: str) -> str:
    """Strip inline markup so anchors are derived from the visible label."""
    text = re.sub(r"!\[([^\]]*)\]\([^)]*\)", r"\1", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]*\)", r"\1", text)
    return re.sub(r"[`*_]", "", text)


def _inline(text: str) -> str:
    # Placeholder-based inline renderer (escape-by-default).
    replacements: list[str] = []

    def stash(html: str) -> str:
        token = f"@@{len(replacements)}@@"
        replacements.append(html)
        return token

    text = _re_sub(r"`([^`]+)`", text, lambda m: stash(f"<code>{_escape_block(m.group(1))}</code>"))

    # Images
    def _image_repl(match: re.Match[str]) -> str:
        src = _safe_href(match.group(2))
        alt = match.group(1)
        if not src:
            return alt
        return stash(
            f'<img src="{_escape_attr(src)}" alt="{_escape_attr(alt)}" loading="lazy">'
        )

    text = _re_sub(r"!\[([^\]]*)\]\(([^)]+)\)", text, _image_repl)

    # Links
    def _link_repl(match: re.Match[str]) -> str:
        href = _safe_href(match.group(2))
        label = match.group(1)
        if not href:
            return label
        if href.startswith(("/", "#")):
            return stash(f'<a href="{_escape_attr(href)}">{_escape_block(label)}</a>')
        return stash(
            f'<a href="{_escape_attr(href)}" target="_blank" rel="noopener noreferrer">'
            f"{_escape_block(label)}</a>"
        )

    text = _re_sub(r"\[([^\]]+)\]\(([^)]+)\)", text, _link_repl)
    # Bold
    text = _re_sub(
        r"\*\*([^*]+)\*\*",
        text,
        lambda m: stash(f"<strong>{_escape_block(m.group(1))}</strong>"),
    )
    # Italic
    text = _re_sub(
        r"(?<![\w*])[*_]([^*_]+)[*_](?![\w*])",
        text,
        lambda m: stash(f"<em>{_escape_block(m.group(1))}</em>"),
    )

    escaped = _escape_block(text)
    for idx, html in enumerate(replacements):
        escaped = escaped.replace(f"@@{idx}@@", html)
    return escaped


def _escape_attr(text: str) -> str:
    return (
        text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    )


def _safe_href(href: str | None) -> str | None:
    if href is None:
        return None
    cleaned = href.strip()
    if not cleaned:
        return None
    lowered = cleaned.lower()
    if lowered.startswith(("javascript:", "data:", "vbscript:")):
        return None
    return cleaned


def _re_sub(pattern: str, text: str, fn: Callable[[re.Match[str]], str]) -> str:
    return re.sub(pattern, fn, text, flags=re.DOTALL)


def _looks_like_ordered_list_item(line: str) -> bool:
    return bool(re.match(r"^\d+\.\s+", line))


def _looks_like_table_start(lines: list[str], i: int) -> bool:
    if i + 1 >= len(lines):
        return False
    header = lines[i].strip()
    sep = lines[i + 1].strip()
    if not header.startswith("|") or not sep.startswith("|"):
        return False
    # Separator row contains --- columns
    return "---" in sep


def _table_to_html(table_lines: list[str]) -> str:
    rows = []
    for line in table_lines:
        if not line.strip().startswith("|"):
            continue
        parts = [p.strip() for p in line.strip().strip("|").split("|")]
        rows.append(parts)

    if len(rows) < 2:
        return "<pre>" + _escape_block("\n".join(table_lines)) + "</pre>"

    header = rows[0]
    body_rows = rows[2:]

    out = ["<table>", "<thead>", "<tr>"]
    for h in header:
        out.append(f"<th>{_inline(h)}</th>")
    out.extend(["</tr>", "</thead>", "<tbody>"])
    for r in body_rows:
        out.append("<tr>")
        for c in r:
            out.append(f"<td>{_inline(c)}</td>")
        out.append("</tr>")
    out.extend(["</tbody>", "</table>"])
    return "\n".join(out)

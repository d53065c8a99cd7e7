"""Markdown/MDX body rendering for documentation pages."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

_FENCE = "```"
_MDX_ESM = re.compile(r"^(?:import|export)\s")
_JSX_SELF_CLOSING = re.compile(r"^<[A-Z][\w.]*(?:\s[^<>]*)?/>$")
_JSX_OPEN = re.compile(r"^<[A-Z][\w.]*(?:\s[^<>]*)?>$")
_JSX_CLOSE = re.compile(r"^</[A-Z][\w.]*>$")
_JSX_INLINE = re.compile(r"^<(?P<tag>[A-Z][\w.]*)(?:\s[^<>]*)?>(?P<inner>.*)</(?P=tag)>$")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    id: str


def slugify(text: str) -> str:
    """Anchor id for a heading: lowercase, punctuation dropped, spaces to hyphens."""
    text = _plain(text).strip().lower()
    text = re.sub(r"[^\w\- ]", "", text)
    text = re.sub(r"\s+", "-", text)
    return text.strip("-") or "section"


class _HeadingIds:
    """Hands out unique ids within one document (`intro`, `intro-1`, ...)."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def next(self, text: str) -> str:
        base = slugify(text)
        n = self._seen.get(base, 0)
        self._seen[base] = n + 1
        return base if n == 0 else f"{base}-{n}"


def strip_mdx(md: str) -> str:
    """Drop MDX module lines and block-level component tags, keeping their inner text."""
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    out: list[str] = []
    in_code = False
    block_start = True
    for line in md.split("\n"):
        stripped = line.strip()
        if stripped.startswith(_FENCE):
            in_code = not in_code
            out.append(line)
            block_start = False
            continue
        if in_code:
            out.append(line)
            continue
        # import/export only counts at the start of a block (or directly after another one).
        if block_start and _MDX_ESM.match(line):
            continue
        block_start = not stripped
        if _JSX_SELF_CLOSING.match(stripped) or _JSX_OPEN.match(stripped) or _JSX_CLOSE.match(stripped):
            continue
        m = _JSX_INLINE.match(stripped)
        if m:
            out.append(m.group("inner").strip())
            continue
        out.append(line)
    return "\n".join(out)


def extract_headings(md: str, min_level: int = 2, max_level: int = 3) -> list[Heading]:
    """Headings for the page table of contents, with the same ids the renderer assigns."""
    ids = _HeadingIds()
    headings: list[Heading] = []
    in_code = False
    for line in strip_mdx(md).split("\n"):
        stripped = line.strip()
        if stripped.startswith(_FENCE):
            in_code = not in_code
            continue
        if in_code or not _is_heading(stripped):
            continue
        level, text = _split_heading(stripped)
        hid = ids.next(text)
        if min_level <= level <= max_level:
            headings.append(Heading(level=level, text=_plain(text), id=hid))
    return headings


def markdown_to_html(md: str, base_path: str = "") -> str:
    """Minimal Markdown → HTML converter (CommonMark-ish subset).

    The goal is readable, deterministic output, not perfect rendering.
    `base_path` is prefixed to root-relative link and image targets.
    """
    lines = strip_mdx(md).split("\n")

    out: list[str] = []
    ids = _HeadingIds()

    def inline(text: str) -> str:
        return _inline(text, base_path)

    def flush_paragraph(buf: list[str]) -> None:
        if not buf:
            return
        text = " ".join(s.strip() for s in buf if s.strip())
        if text:
            out.append(f"<p>{inline(text)}</p>")
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
        if stripped.startswith(_FENCE):
            flush_paragraph(para_buf)
            if not in_code:
                in_code = True
                code_buf = []
                info = stripped[len(_FENCE) :].strip()
                code_lang = info.split()[0] if info else ""
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
        if stripped in ("---", "***", "___"):
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
            out.append(_table_to_html(table_lines, inline))
            continue

        # Headings
        if _is_heading(stripped):
            flush_paragraph(para_buf)
            level, text = _split_heading(stripped)
            out.append(f'<h{level} id="{ids.next(text)}">{inline(text)}</h{level}>')
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
                out.append(f"<li>{inline(s[2:].strip())}</li>")
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
                out.append(f"<li>{inline(s[dot + 1 :].lstrip())}</li>")
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
                    out.append(f"<p>{inline(q)}</p>")
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
    cls = f' class="language-{_escape_block(lang)}"' if lang else ""
    return f"<pre><code{cls}>{_escape_block(code)}</code></pre>"


def _is_heading(stripped: str) -> bool:
    return bool(re.match(r"^#{1,6}\s", stripped))


def _split_heading(stripped: str) -> tuple[int, str]:
    level = len(stripped) - len(stripped.lstrip("#"))
    return min(max(level, 1), 6), stripped[level:].strip().rstrip("#").strip()


def _plain(text: str) -> str:
    text = re.sub(r"!?\[([^\]]*)\]\([^)]*\)", r"\1", text)
    return text.replace("`", "").replace("**", "").replace("*", "")


def _escape_block(text: str) -> str:
    # Keeps newlines. Quotes are escaped too, so no text can read as an attribute.
    return (
        text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    )


def _inline(text: str, base_path: str = "") -> str:
    # Placeholder-based inline renderer (escape-by-default).
    replacements: list[str] = []

    def stash(html: str) -> str:
        token = f"@@{len(replacements)}@@"
        replacements.append(html)
        return token

    text = re.sub(r"`([^`]+)`", lambda m: stash(f"<code>{_escape_block(m.group(1))}</code>"), text)

    def _image_repl(match: re.Match[str]) -> str:
        src = _safe_href(match.group(2), base_path)
        if not src:
            return match.group(1)
        return stash(f'<img src="{_escape_block(src)}" alt="{_escape_block(match.group(1))}">')

    text = re.sub(r"!\[([^\]]*)\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)", _image_repl, text)

    def _link_repl(match: re.Match[str]) -> str:
        href = _safe_href(match.group(2), base_path)
        label = match.group(1)
        if not href:
            return label
        return stash(f'<a href="{_escape_block(href)}">{_escape_block(label)}</a>')

    text = re.sub(r"\[([^\]]+)\]\(([^)]+)\)", _link_repl, text)
    text = re.sub(
        r"\*\*([^*]+)\*\*",
        lambda m: stash(f"<strong>{_escape_block(m.group(1))}</strong>"),
        text,
    )
    text = re.sub(
        r"(?<![\w*])\*([^*\s](?:[^*]*[^*\s])?)\*(?![\w*])",
        lambda m: stash(f"<em>{_escape_block(m.group(1))}</em>"),
        text,
    )

    escaped = _escape_block(text)
    # Later stashes may wrap earlier tokens, so expand newest first.
    for idx in range(len(replacements) - 1, -1, -1):
        escaped = escaped.replace(f"@@{idx}@@", replacements[idx])
    return escaped


def _safe_href(href: str | None, base_path: str = "") -> str | None:
    if href is None:
        return None
    cleaned = href.strip()
    if not cleaned:
        return None
    lowered = cleaned.lower()
    if lowered.startswith(("javascript:", "data:", "vbscript:")):
        return None
    if base_path and cleaned.startswith("/") and not cleaned.startswith("//"):
        return base_path.rstrip("/") + cleaned
    return cleaned


def _looks_like_ordered_list_item(line: str) -> bool:
    return bool(re.match(r"^\d+\.\s+", line))


def _looks_like_table_start(lines: list[str], i: int) -> bool:
    if i + 1 >= len(lines):
        return False
    header = lines[i].strip()
    sep = lines[i + 1].strip()
    if not header.startswith("|") or not sep.startswith("|"):
        return False
    return "---" in sep


def _table_to_html(table_lines: list[str], inline: Callable[[str], str]) -> str:
    rows = [
        [p.strip() for p in line.strip().strip("|").split("|")]
        for line in table_lines
        if line.strip().startswith("|")
    ]
    if len(rows) < 2:
        return "<pre>" + _escape_block("\n".join(table_lines)) + "</pre>"

    out = ["<table>", "<thead>", "<tr>"]
    out.extend(f"<th>{inline(h)}</th>" for h in rows[0])
    out.extend(["</tr>", "</thead>", "<tbody>"])
    for r in rows[2:]:
        out.append("<tr>")
        out.extend(f"<td>{inline(c)}</td>" for c in r)
        out.append("</tr>")
    out.extend(["</tbody>", "</table>"])
    return "\n".join(out)

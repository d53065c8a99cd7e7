"""HTML templates for the static site generator."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from .cards import FeatureCard
from .markdown import Heading


def link(href: str, text: str, cls: str | None = None) -> str:
    attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f'<a href="{escape(href, quote=True)}"{attr}>{escape(text)}</a>'


def h1(text: str) -> str:
    return f"<h1>{escape(text)}</h1>"


def para(text: str, cls: str | None = None) -> str:
    attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f"<p{attr}>{escape(text)}</p>"


def rule() -> str:
    return '<div class="rule"></div>'


def hero(title: str, tagline: str, cta_href: str, cta_label: str) -> str:
    return "\n".join(
        [
            '<section class="hero">',
            h1(title),
            para(tagline),
            link(cta_href, cta_label, cls="cta"),
            "</section>",
        ]
    )


def card(c: FeatureCard) -> str:
    inner = (
        f'<span class="card-icon" aria-hidden="true">{escape(c.icon)}</span>'
        f"<h3>{escape(c.title)}</h3>"
        f"<p>{escape(c.description)}</p>"
    )
    if c.href:
        inner = f'<a href="{escape(c.href, quote=True)}">{inner}</a>'
    return f'<div class="card" draggable="true">{inner}</div>'


def cards_grid(cards: Iterable[FeatureCard]) -> str:
    lines = ['<div class="cards">']
    lines.extend(card(c) for c in cards)
    lines.append("</div>")
    return "\n".join(lines)


def toc(headings: Iterable[Heading]) -> str:
    items = [
        f'<li class="depth-{h.level}">{link("#" + h.id, h.text)}</li>' for h in headings
    ]
    if not items:
        return ""
    return "\n".join(
        ['<aside class="toc">', '<div class="muted">On this page</div>', "<ul>", *items, "</ul>", "</aside>"]
    )


def pager(prev: tuple[str, str] | None, next_: tuple[str, str] | None) -> str:
    """Previous/next links; each item is (href, title)."""
    if prev is None and next_ is None:
        return ""
    left = link(prev[0], f"← {prev[1]}") if prev else "<span></span>"
    right = link(next_[0], f"{next_[1]} →") if next_ else "<span></span>"
    return f'<nav class="pager">{left}{right}</nav>'


def doc_page(
    title: str,
    description: str,
    body_html: str,
    headings: Iterable[Heading] = (),
    prev: tuple[str, str] | None = None,
    next_: tuple[str, str] | None = None,
) -> str:
    lines = [
        "<article>",
        h1(title),
        para(description, cls="muted"),
        rule(),
        body_html,
        pager(prev, next_),
        "</article>",
        toc(headings),
    ]
    return "\n".join(line for line in lines if line)


def docs_index_body(items: Iterable[tuple[str, str, str]]) -> str:
    """Fallback docs index; items are (href, title, description)."""
    lines = ["<article>", h1("Documentation"), "<ul>"]
    for href, title, description in items:
        lines.append(f'<li>{link(href, title)}<div class="muted">{escape(description)}</div></li>')
    lines.extend(["</ul>", "</article>"])
    return "\n".join(lines)

"""Root shell: the document frame every page is rendered in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape
from urllib.parse import urlencode

from ..config import DOCS_ROUTE, FONTS, FONTS_CSS_URL, GENERATOR_VERSION, LANG, SITE_TITLE
from .styles import CSS
from .templates import link

# Restores the stored theme before first paint and wires the toggle button.
THEME_SCRIPT = r"""
(function () {
  var root = document.documentElement;
  var stored = null;
  try { stored = localStorage.getItem("theme"); } catch (e) {}
  if (stored === "light" || stored === "dark") root.setAttribute("data-theme", stored);
  document.addEventListener("click", function (ev) {
    var btn = ev.target.closest && ev.target.closest("[data-theme-toggle]");
    if (!btn) return;
    var current = root.getAttribute("data-theme")
      || (window.matchMedia("(prefers-color-scheme: dark)").matches ? "dark" : "light");
    var next = current === "dark" ? "light" : "dark";
    root.setAttribute("data-theme", next);
    try { localStorage.setItem("theme", next); } catch (e) {}
  });
})();
"""


@dataclass(frozen=True)
class FontToken:
    """A font family applied either as a class or through a CSS variable."""

    family: str
    subsets: tuple[str, ...] = ("latin",)
    variable: str | None = None

    @property
    def slug(self) -> str:
        return re.sub(r"[^a-z0-9]+", "-", self.family.lower()).strip("-")

    @property
    def class_name(self) -> str:
        if self.variable:
            return f"font-var-{self.slug}"
        return f"font-{self.slug}"

    def css_rule(self) -> str:
        value = f'"{self.family}", monospace'
        if self.variable:
            return f".{self.class_name} {{ {self.variable}: {value}; }}"
        return f".{self.class_name} {{ font-family: {value}; }}"


FONT_TOKENS: tuple[FontToken, ...] = tuple(
    FontToken(family=family, subsets=tuple(subsets), variable=variable)
    for family, subsets, variable in FONTS
)


def fonts_stylesheet_url(tokens: tuple[FontToken, ...] = FONT_TOKENS) -> str:
    params = [("family", t.family) for t in tokens]
    subsets = sorted({s for t in tokens for s in t.subsets})
    params.append(("subset", ",".join(subsets)))
    params.append(("display", "swap"))
    return f"{FONTS_CSS_URL}?{urlencode(params)}"


def html_class(tokens: tuple[FontToken, ...] = FONT_TOKENS) -> str:
    return " ".join(t.class_name for t in tokens)


class RootProvider:
    """Page chrome around the content: top bar, theme switch, optional sidebar."""

    def __init__(self, base_path: str = "", sidebar_html: str | None = None):
        self.base_path = base_path.rstrip("/")
        self.sidebar_html = sidebar_html

    def top_bar(self) -> str:
        home = link(self.base_path + "/", SITE_TITLE)
        docs = link(self.base_path + DOCS_ROUTE, "Docs")
        toggle = '<button type="button" class="theme-toggle" data-theme-toggle aria-label="Toggle theme">◐</button>'
        return f'<header class="topbar"><div>{home}</div><nav>{docs} {toggle}</nav></header>'

    def render(self, children: str) -> str:
        if self.sidebar_html is None:
            return f"{self.top_bar()}\n{children}"
        return f'{self.top_bar()}\n<div class="docs">\n{self.sidebar_html}\n{children}\n</div>'


def root_shell(
    children: str,
    title: str,
    description: str | None = None,
    provider: RootProvider | None = None,
) -> str:
    """Wrap page content in the full HTML document.

    The `lang` attribute and font classes are fixed; nothing in `children`
    can change them.
    """
    provider = provider or RootProvider()
    font_css = "\n".join(t.css_rule() for t in FONT_TOKENS)
    desc = (
        f'<meta name="description" content="{escape(description, quote=True)}">\n'
        if description
        else ""
    )
    return (
        "<!doctype html>\n"
        f'<html lang="{LANG}" class="{html_class()}">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f'<meta name="generator" content="{escape(GENERATOR_VERSION, quote=True)}">\n'
        f"<title>{escape(title)}</title>\n"
        f"{desc}"
        f'<link rel="stylesheet" href="{escape(fonts_stylesheet_url(), quote=True)}">\n'
        f"<style>{font_css}\n{CSS}</style>\n"
        f"<script>{THEME_SCRIPT}</script>\n"
        "</head>\n"
        '<body class="layout">\n'
        f"{provider.render(children)}\n"
        "</body>\n"
        "</html>\n"
    )

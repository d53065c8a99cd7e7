"""Configuration constants and paths for Android Notes."""

import os
from pathlib import Path

from . import __version__

SITE_TITLE = "Android Notes by Me"
SITE_TAGLINE = "Who am I? You don't need to know that."
CTA_LABEL = "Go to docs"

# Documentation index route; every docs page lives below it.
DOCS_ROUTE = "/docs"

LANG = "en"

# (family, subsets, css variable). The first entry is applied as a class on <html>,
# the second is only exposed through its CSS variable.
FONTS = (
    ("JetBrains Mono", ("latin",), None),
    ("Fira Code", ("latin",), "--fira-code"),
)
FONTS_CSS_URL = "https://fonts.googleapis.com/css2"

# Source and output locations, relative to the working directory by default.
CONTENT_DIR = Path(os.getenv("DROIDNOTES_CONTENT_DIR", "content/docs"))
PUBLIC_DIR = Path(os.getenv("DROIDNOTES_PUBLIC_DIR", "public"))
OUT_DIR = Path(os.getenv("DROIDNOTES_OUT_DIR", "site"))

# Prefix for absolute hrefs when the site is not served from the domain root.
BASE_PATH = os.getenv("DROIDNOTES_BASE_PATH", "")

CONTENT_EXTENSIONS = (".md", ".mdx")
META_FILE = "meta.json"

GENERATOR_VERSION = f"droidnotes {__version__}"

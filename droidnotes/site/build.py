"""Static site generator for the documentation content."""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path, PurePosixPath
from typing import Any

from ..config import DOCS_ROUTE, SITE_TITLE
from ..content.documents import Document, scan_documents
from ..errors import DroidNotesError
from .home import build_home_page
from .markdown import extract_headings, markdown_to_html
from .nav import NavTree, build_nav, render_sidebar
from .shell import RootProvider, root_shell
from .templates import doc_page, docs_index_body

logger = logging.getLogger(__name__)

_REF_PATTERN = re.compile(r'(href|src)="(/[^"#?]*)')
_IGNORED = {".DS_Store", "__pycache__", ".pytest_cache"}


def build_site(
    content_dir: Path,
    out_dir: Path,
    public_dir: Path | None = None,
    base_path: str = "",
    clean: bool = True,
) -> dict[str, Any]:
    """Build the static HTML site from a content directory.

    With `clean`, a previous build in `out_dir` is removed first so pages of
    deleted documents do not linger. Raises DroidNotesError if `out_dir` would
    contain or equal the content or public directory.

    Returns:
        Report dict with pages, documents, assets, warnings, out_dir, total_bytes
    """
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    base = base_path.rstrip("/")
    _check_out_dir(out_dir, [content_dir, public_dir.resolve() if public_dir else None])
    documents, warnings = scan_documents(content_dir)
    if clean and out_dir.exists():
        shutil.rmtree(out_dir)
        logger.debug("Removed previous build at %s", out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    documents = _dedupe_routes(documents, warnings)
    tree = build_nav(documents, content_dir, warnings=warnings)

    pages: dict[str, str] = {"/": build_home_page(base_path=base)}
    for doc in documents:
        pages[doc.route] = _render_document(doc, tree, base)

    if DOCS_ROUTE not in pages:
        pages[DOCS_ROUTE] = _render_docs_index(documents, tree, base)

    assets = _copy_public(public_dir, out_dir) if public_dir else []

    for route, html in sorted(pages.items()):
        target = _page_path(out_dir, route)
        if _page_asset(route) in assets:
            warnings.append(f"{route}: generated page overwrites public asset {_page_asset(route)}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug("Wrote %s", target)

    warnings.extend(_check_references(pages, set(assets), base))

    return {
        "pages": len(pages),
        "documents": len(documents),
        "assets": len(assets),
        "warnings": warnings,
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }


def _render_document(doc: Document, tree: NavTree, base: str) -> str:
    prev, nxt = tree.neighbours(doc.route)
    body = doc_page(
        title=doc.title,
        description=doc.description,
        body_html=markdown_to_html(doc.body, base_path=base),
        headings=extract_headings(doc.body),
        prev=(base + prev.route, prev.title) if prev else None,
        next_=(base + nxt.route, nxt.title) if nxt else None,
    )
    return root_shell(
        body,
        title=f"{doc.title} | {SITE_TITLE}",
        description=doc.description,
        provider=RootProvider(base_path=base, sidebar_html=render_sidebar(tree, doc.route, base)),
    )


def _render_docs_index(documents: list[Document], tree: NavTree, base: str) -> str:
    by_route = {d.route: d for d in documents}
    items = [
        (base + item.route, item.title, by_route[item.route].description)
        for item in tree.flatten()
    ]
    return root_shell(
        docs_index_body(items),
        title=f"Documentation | {SITE_TITLE}",
        provider=RootProvider(base_path=base, sidebar_html=render_sidebar(tree, DOCS_ROUTE, base)),
    )


def _dedupe_routes(documents: list[Document], warnings: list[str]) -> list[Document]:
    seen: dict[str, Document] = {}
    for doc in documents:
        if doc.route in seen:
            warnings.append(f"{doc.path}: route {doc.route} already provided by {seen[doc.route].path}")
            continue
        seen[doc.route] = doc
    return list(seen.values())


def _check_out_dir(out_dir: Path, sources: list[Path | None]) -> None:
    for src in sources:
        if src is not None and (src == out_dir or out_dir in src.parents):
            raise DroidNotesError(f"output directory {out_dir} would overwrite sources in {src}")


def _page_asset(route: str) -> str:
    rel = route.strip("/")
    return f"/{rel}/index.html" if rel else "/index.html"


def _page_path(out_dir: Path, route: str) -> Path:
    rel = route.strip("/")
    return out_dir / rel / "index.html" if rel else out_dir / "index.html"


def _copy_public(public_dir: Path, out_dir: Path) -> list[str]:
    """Copy static assets into the output root; returns their URL paths."""
    public_dir = public_dir.resolve()
    if not public_dir.exists():
        logger.warning("Public directory %s does not exist", public_dir)
        return []

    copied: list[str] = []
    for src in sorted(public_dir.rglob("*")):
        rel = src.relative_to(public_dir)
        if not src.is_file() or any(part in _IGNORED for part in rel.parts):
            continue
        dst = out_dir / rel
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
        copied.append("/" + rel.as_posix())
    return copied


def _check_references(pages: dict[str, str], assets: set[str], base: str) -> list[str]:
    """Warn about root-relative links to unknown routes and missing assets."""
    known = set(pages) | assets
    warnings: list[str] = []
    for route, html in sorted(pages.items()):
        missing: dict[str, str] = {}
        for attr, ref in _REF_PATTERN.findall(html):
            target = ref[len(base) :] if base and ref.startswith(base) else ref
            if target.startswith("//"):
                continue
            target = target.rstrip("/") or "/"
            if target not in known:
                is_asset = attr == "src" or bool(PurePosixPath(target).suffix)
                missing[target] = "missing asset" if is_asset else "broken link"
        for target, kind in sorted(missing.items()):
            warnings.append(f"{route}: {kind} {target}")
    return warnings


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
